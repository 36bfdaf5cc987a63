"""
Pydantic schemas for user requests and responses.
Handles registration, profile updates and password-free user representations.
"""

from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from homequest.models.user import UserRole
from homequest.schemas.base import APIModel


class UserCreate(APIModel):
    """Schema for registering a new user."""

    username: str = Field(..., min_length=1, max_length=255, examples=["alice"])
    password: str = Field(..., min_length=1, max_length=72, examples=["secret1"])
    email: Optional[EmailStr] = Field(None, examples=["alice@example.com"])
    name: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        """Reject blank usernames."""
        if not v.strip():
            raise ValueError("Username cannot be empty")
        return v.strip()

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        """Normalize email to lowercase."""
        return v.lower().strip() if v else v


class UserProfileUpdate(APIModel):
    """Partial profile update; only these three fields can change."""

    name: Optional[str] = Field(None, min_length=2, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=32)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip() if v else v


class UserResponse(APIModel):
    """User representation without the password hash."""

    id: int
    username: str
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None


class ProfileUpdateResponse(APIModel):
    """Result of a profile update."""

    message: str
    user: UserResponse
