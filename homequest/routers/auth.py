"""
Authentication API endpoints for login, logout and session status.
The session id travels in an HttpOnly cookie; bodies never carry credentials back.
"""

from fastapi import APIRouter, Depends, Response, status
import logging

from homequest.config import settings
from homequest.models.user import User
from homequest.services.auth import AuthService
from homequest.schemas.auth import LoginRequest, LoginResponse, AuthStatusResponse
from homequest.schemas.base import MessageResponse
from homequest.schemas.user import UserResponse
from homequest.schemas.error import get_error_responses
from homequest.utils.dependencies import (
    AuthContext,
    get_auth_context,
    get_auth_service,
    require_user
)
from homequest.utils.exceptions import APIException, InternalServerError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
        path="/"
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="User login",
    description="Authenticate with username and password. Sets the session cookie.",
    responses=get_error_responses(400, 401, 500)
)
async def login(
    login_data: LoginRequest,
    response: Response,
    context: AuthContext = Depends(get_auth_context),
    auth_service: AuthService = Depends(get_auth_service)
) -> LoginResponse:
    """
    Authenticate user and start a session.

    Args:
        login_data: Login credentials (username and password)
        response: Outgoing response, receives the session cookie
        context: Current authentication context
        auth_service: Authentication service

    Returns:
        Login response with the password-free user

    Raises:
        InvalidCredentialsError: "Incorrect username." or "Incorrect password."
    """
    try:
        user, token = await auth_service.login(
            username=login_data.username,
            password=login_data.password,
            current_token=context.session_token
        )

        _set_session_cookie(response, token)
        return LoginResponse(user=UserResponse.model_validate(user))

    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error logging in {login_data.username}: {e}")
        raise InternalServerError("Login failed")


@router.post(
    "/logout",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="User logout",
    description="Destroy the current session and clear the cookie. Succeeds without a session too.",
    responses=get_error_responses(500)
)
async def logout(
    response: Response,
    context: AuthContext = Depends(get_auth_context),
    auth_service: AuthService = Depends(get_auth_service)
) -> MessageResponse:
    try:
        await auth_service.logout(context.session_token)
    except Exception as e:
        logger.error(f"Error logging out: {e}")
        raise InternalServerError("Logout failed")

    response.delete_cookie(key=settings.session_cookie_name, path="/")
    return MessageResponse(message="Logout successful")


@router.get(
    "/me",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Current user",
    responses=get_error_responses(401)
)
async def get_me(current_user: User = Depends(require_user)) -> UserResponse:
    return current_user


@router.get(
    "/status",
    response_model=AuthStatusResponse,
    status_code=status.HTTP_200_OK,
    summary="Authentication status",
    description="Report whether the request carries a valid session. Never fails."
)
async def get_auth_status(context: AuthContext = Depends(get_auth_context)) -> AuthStatusResponse:
    if context.is_authenticated:
        return AuthStatusResponse(
            is_authenticated=True,
            user=UserResponse.model_validate(context.user)
        )
    return AuthStatusResponse(is_authenticated=False)
