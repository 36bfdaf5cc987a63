"""
User API endpoints for registration and profile updates.
"""

from fastapi import APIRouter, Depends, status, Path
import logging

from homequest.models.user import User
from homequest.repositories.user import UserRepository
from homequest.services.auth import AuthService
from homequest.schemas.user import UserCreate, UserProfileUpdate, UserResponse, ProfileUpdateResponse
from homequest.schemas.error import get_error_responses
from homequest.utils.dependencies import get_auth_service, get_user_repository, require_profile_owner
from homequest.utils.exceptions import (
    APIException,
    NotFoundError,
    DuplicateResourceError,
    InternalServerError
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an account. The password is stored as a bcrypt hash and never returned.",
    responses=get_error_responses(400, 409, 500)
)
async def register_user(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service)
) -> UserResponse:
    """
    Register a new user.

    Raises:
        DuplicateResourceError: If the username or email is already taken
    """
    try:
        return await auth_service.register(user_data)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error registering user {user_data.username}: {e}")
        raise InternalServerError("Failed to register user")


@router.patch(
    "/{user_id}",
    response_model=ProfileUpdateResponse,
    status_code=status.HTTP_200_OK,
    summary="Update own profile",
    description="Update name, email or phone. Only the logged-in owner of the profile may do this.",
    responses=get_error_responses(400, 401, 403, 404, 409, 500)
)
async def update_profile(
    profile_data: UserProfileUpdate,
    user_id: int = Path(..., description="User ID"),
    current_user: User = Depends(require_profile_owner),
    user_repo: UserRepository = Depends(get_user_repository)
) -> ProfileUpdateResponse:
    """
    Apply a partial profile update to the session user.

    Args:
        profile_data: Fields to change; omitted fields are left as they are
        user_id: ID of the profile, must match the session user
        current_user: Session user, already checked to own the profile
        user_repo: User repository

    Returns:
        Confirmation message with the updated, password-free user

    Raises:
        UnauthorizedError: If not logged in
        ProfileOwnershipError: If the path id is someone else's
        NotFoundError: If the user no longer exists
    """
    try:
        updates = profile_data.model_dump(exclude_unset=True)

        email = updates.get("email")
        if email:
            owner = await user_repo.get_by_field("email", email)
            if owner and owner.id != user_id:
                raise DuplicateResourceError("Email")

        user = await user_repo.update_user(user_id, updates)
        if not user:
            raise NotFoundError("User")

        return ProfileUpdateResponse(
            message="Profile updated successfully",
            user=UserResponse.model_validate(user)
        )

    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error updating profile of user {user_id}: {e}")
        raise InternalServerError("Failed to update profile")
