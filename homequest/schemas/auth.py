"""
Pydantic schemas for authentication requests and responses.
Handles login credentials and session status payloads.
"""

from pydantic import Field
from typing import Optional
from homequest.schemas.base import APIModel
from homequest.schemas.user import UserResponse


class LoginRequest(APIModel):
    """Login request schema."""

    username: str = Field(..., min_length=1, description="Username is required", examples=["alice"])
    password: str = Field(..., min_length=1, description="Password is required", examples=["secret1"])


class LoginResponse(APIModel):
    """Successful login: the session cookie is set alongside this body."""

    message: str = "Login successful"
    user: UserResponse


class AuthStatusResponse(APIModel):
    """Authentication status; never an error."""

    is_authenticated: bool
    user: Optional[UserResponse] = None
