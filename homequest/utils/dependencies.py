"""
FastAPI dependency injection utilities for sessions, repositories and route protection.
Provides the per-request authentication context and the guards built on it.
"""

from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, Path
from fastapi.security import APIKeyCookie
from sqlalchemy.ext.asyncio import AsyncSession
from homequest.config import settings
from homequest.database import get_db
from homequest.models.user import User
from homequest.repositories import (
    PropertyRepository,
    AgentRepository,
    EnquiryRepository,
    UserRepository,
    SavedPropertyRepository
)
from homequest.services.auth import AuthService
from homequest.services.ai_chat import AIChatService
from homequest.utils.exceptions import UnauthorizedError, ProfileOwnershipError


# Session cookie security scheme
session_cookie = APIKeyCookie(name=settings.session_cookie_name, auto_error=False)


async def get_property_repository(db: AsyncSession = Depends(get_db)) -> PropertyRepository:
    return PropertyRepository(db)


async def get_agent_repository(db: AsyncSession = Depends(get_db)) -> AgentRepository:
    return AgentRepository(db)


async def get_enquiry_repository(db: AsyncSession = Depends(get_db)) -> EnquiryRepository:
    return EnquiryRepository(db)


async def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


async def get_saved_property_repository(db: AsyncSession = Depends(get_db)) -> SavedPropertyRepository:
    return SavedPropertyRepository(db)


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """
    Get authentication service instance.

    Args:
        db: Database session

    Returns:
        AuthService instance
    """
    return AuthService(db)


def get_ai_chat_service() -> AIChatService:
    """Build the AI chat client from settings."""
    return AIChatService(
        api_key=settings.gemini_api_key,
        endpoint=settings.gemini_api_url,
        timeout=settings.ai_request_timeout
    )


@dataclass
class AuthContext:
    """Authentication state of the current request."""

    session_token: Optional[str] = None
    user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


async def get_auth_context(
    session_token: Optional[str] = Depends(session_cookie),
    auth_service: AuthService = Depends(get_auth_service)
) -> AuthContext:
    """
    Resolve the session cookie into an AuthContext.

    Missing, forged or expired cookies yield an unauthenticated context rather than an error.
    """
    user = await auth_service.resolve_session(session_token)
    return AuthContext(session_token=session_token, user=user)


async def require_user(context: AuthContext = Depends(get_auth_context)) -> User:
    """
    Get the logged-in user.

    Raises:
        UnauthorizedError: If the request carries no valid session
    """
    if not context.is_authenticated:
        raise UnauthorizedError()
    return context.user


async def require_profile_owner(
    user_id: int = Path(..., description="ID of the profile being modified"),
    current_user: User = Depends(require_user)
) -> User:
    """
    Ensure the session user is the owner of the profile in the path.

    Raises:
        UnauthorizedError: If the request carries no valid session
        ProfileOwnershipError: If the path id is not the session user's id
    """
    if current_user.id != user_id:
        raise ProfileOwnershipError()
    return current_user
