"""
Authentication service for registration, login and session binding.
Sessions live in the database; the cookie only carries a signed session id.
"""

from typing import Optional, Tuple
from datetime import timedelta
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from homequest.config import settings
from homequest.repositories.user import UserRepository
from homequest.repositories.session import SessionStore
from homequest.models.user import User
from homequest.schemas.user import UserCreate
from homequest.utils.auth import create_session_token, read_session_token
from homequest.utils.exceptions import (
    InvalidCredentialsError,
    DuplicateResourceError,
    ValidationError
)
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """
    Authentication service for credential checks and session management.
    The session payload only ever holds the user id; the user is re-read on every request.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.user_repo = UserRepository(db_session)
        self.session_store = SessionStore(db_session)

    async def register(self, user_data: UserCreate) -> User:
        """
        Register a new user.

        Args:
            user_data: Validated registration data

        Returns:
            Created User object

        Raises:
            DuplicateResourceError: If the username or email is already taken,
                including when a concurrent registration wins the insert
        """
        existing = await self.user_repo.get_user_by_username(user_data.username)
        if existing:
            logger.warning(f"Registration rejected, username taken: {user_data.username}")
            raise DuplicateResourceError("Username")

        if user_data.email and await self.user_repo.get_by_field("email", user_data.email):
            logger.warning(f"Registration rejected, email taken: {user_data.email}")
            raise DuplicateResourceError("Email")

        try:
            user = await self.user_repo.create_user(user_data.model_dump())
        except ValueError as e:
            raise ValidationError(str(e))
        except IntegrityError:
            # A concurrent registration claimed the username or email after the checks above
            if await self.user_repo.get_by_field("username", user_data.username):
                raise DuplicateResourceError("Username")
            if user_data.email and await self.user_repo.get_by_field("email", user_data.email):
                raise DuplicateResourceError("Email")
            raise

        logger.info(f"Registered user: {user.username} (ID: {user.id})")
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """
        Check a username and password.

        Args:
            username: Account username
            password: Plain text password

        Returns:
            Authenticated User object

        Raises:
            InvalidCredentialsError: "Incorrect username." or "Incorrect password."
        """
        user = await self.user_repo.get_user_by_username(username)
        if not user:
            logger.warning(f"Failed login, unknown username: {username}")
            raise InvalidCredentialsError("Incorrect username.")

        if not user.verify_password(password):
            logger.warning(f"Failed login, wrong password for: {username}")
            raise InvalidCredentialsError("Incorrect password.")

        logger.info(f"User authenticated successfully: {username}")
        return user

    async def login(
        self,
        username: str,
        password: str,
        current_token: Optional[str] = None
    ) -> Tuple[User, str]:
        """
        Authenticate and bind a fresh session to the user.

        Args:
            username: Account username
            password: Plain text password
            current_token: Session cookie already on the request, if any

        Returns:
            Tuple of (user, session token for the cookie)
        """
        user = await self.authenticate(username, password)

        # Never reuse a session id across a login
        if current_token:
            await self.logout(current_token)

        max_age = settings.session_max_age
        record = await self.session_store.create_session({"user_id": user.id}, max_age)
        token = create_session_token(record.sid, timedelta(seconds=max_age))

        logger.info(f"Session started for user {user.username} (ID: {user.id})")
        return user, token

    async def resolve_session(self, token: Optional[str]) -> Optional[User]:
        """
        Map a session cookie to its user.

        Args:
            token: Session cookie value

        Returns:
            The session's user, or None if the cookie is missing, invalid,
            expired, or points at a user that no longer exists
        """
        if not token:
            return None

        sid = read_session_token(token)
        if sid is None:
            logger.debug("Ignoring session cookie with invalid signature")
            return None

        record = await self.session_store.get_session(sid)
        if record is None:
            return None

        user_id = record.sess.get("user_id")
        user = await self.user_repo.get_user(user_id) if user_id is not None else None
        if user is None:
            logger.warning(f"Session {sid[:8]}... refers to missing user {user_id}, destroying")
            await self.session_store.destroy(sid)
            return None

        return user

    async def logout(self, token: Optional[str]) -> bool:
        """
        Destroy the session behind a cookie.

        Returns:
            True if a session row was removed
        """
        if not token:
            return False

        sid = read_session_token(token)
        if sid is None:
            return False

        destroyed = await self.session_store.destroy(sid)
        if destroyed:
            logger.info(f"Session {sid[:8]}... destroyed")
        return destroyed
