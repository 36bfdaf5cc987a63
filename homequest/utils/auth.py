"""
Authentication utilities for password hashing and session cookie signing.
Session cookies carry a signed JWT whose subject is the server-side session id.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from homequest.config import settings


# Password hashing context, bcrypt with cost factor 10
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def hash_password(password: str) -> str:
    """
    Hash password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Hashed password string

    Raises:
        ValueError: If password is empty
    """
    if not password:
        raise ValueError("Password is required")

    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify password against hash.

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password from database

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def create_session_token(session_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a session id for use as the session cookie value.

    Args:
        session_id: Server-side session identifier
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT string
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(seconds=settings.session_max_age))

    to_encode = {
        "sub": session_id,
        "exp": expire,
        "iat": now,
        "type": "session"
    }

    return jwt.encode(
        to_encode,
        settings.session_secret,
        algorithm=settings.session_algorithm
    )


def read_session_token(token: str) -> Optional[str]:
    """
    Verify a session cookie and return the session id it carries.

    Returns:
        Session id, or None when the token is tampered with, expired or malformed
    """
    try:
        payload = jwt.decode(
            token,
            settings.session_secret,
            algorithms=[settings.session_algorithm]
        )
    except JWTError:
        return None

    if payload.get("type") != "session":
        return None

    return payload.get("sub") or None
