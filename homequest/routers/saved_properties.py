"""
Saved-property API endpoints.
All routes act on the logged-in user's own bookmarks.
"""

from fastapi import APIRouter, Depends, status, Path
from typing import List
import logging

from homequest.models.user import User
from homequest.repositories.property import PropertyRepository
from homequest.repositories.saved_property import SavedPropertyRepository
from homequest.schemas.base import MessageResponse
from homequest.schemas.property import PropertyResponse
from homequest.schemas.saved_property import SavedPropertyCreate, SavedPropertyResponse, SavedStatusResponse
from homequest.schemas.error import get_error_responses
from homequest.utils.dependencies import (
    get_property_repository,
    get_saved_property_repository,
    require_user
)
from homequest.utils.exceptions import APIException, PropertyNotFoundError, InternalServerError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/saved-properties", tags=["Saved Properties"])


@router.get(
    "",
    response_model=List[PropertyResponse],
    status_code=status.HTTP_200_OK,
    summary="List saved properties",
    description="Properties saved by the current user, most recently saved first.",
    responses=get_error_responses(401, 500)
)
async def get_saved_properties(
    current_user: User = Depends(require_user),
    saved_repo: SavedPropertyRepository = Depends(get_saved_property_repository)
) -> List[PropertyResponse]:
    try:
        return await saved_repo.get_saved_properties(current_user.id)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error fetching saved properties for user {current_user.id}: {e}")
        raise InternalServerError("Failed to get saved properties")


@router.post(
    "",
    response_model=SavedPropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save a property",
    description="Bookmark a property. Saving an already saved property returns the existing bookmark.",
    responses=get_error_responses(400, 401, 404, 500)
)
async def save_property(
    saved_data: SavedPropertyCreate,
    current_user: User = Depends(require_user),
    property_repo: PropertyRepository = Depends(get_property_repository),
    saved_repo: SavedPropertyRepository = Depends(get_saved_property_repository)
) -> SavedPropertyResponse:
    """
    Save a property for the current user.

    Raises:
        PropertyNotFoundError: If the property does not exist
    """
    try:
        if not await property_repo.exists(saved_data.property_id):
            raise PropertyNotFoundError()

        return await saved_repo.save_property(current_user.id, saved_data.property_id)

    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error saving property {saved_data.property_id} for user {current_user.id}: {e}")
        raise InternalServerError("Failed to save property")


@router.delete(
    "/{property_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Remove a saved property",
    responses=get_error_responses(400, 401, 500)
)
async def unsave_property(
    property_id: int = Path(..., description="Property ID"),
    current_user: User = Depends(require_user),
    saved_repo: SavedPropertyRepository = Depends(get_saved_property_repository)
) -> MessageResponse:
    try:
        await saved_repo.unsave_property(current_user.id, property_id)
        return MessageResponse(message="Property removed from saved list successfully")
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error removing saved property {property_id} for user {current_user.id}: {e}")
        raise InternalServerError("Failed to remove saved property")


@router.get(
    "/{property_id}/check",
    response_model=SavedStatusResponse,
    status_code=status.HTTP_200_OK,
    summary="Check if a property is saved",
    responses=get_error_responses(400, 401, 500)
)
async def check_saved_property(
    property_id: int = Path(..., description="Property ID"),
    current_user: User = Depends(require_user),
    saved_repo: SavedPropertyRepository = Depends(get_saved_property_repository)
) -> SavedStatusResponse:
    try:
        is_saved = await saved_repo.is_property_saved(current_user.id, property_id)
        return SavedStatusResponse(is_saved=is_saved)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error checking saved property {property_id} for user {current_user.id}: {e}")
        raise InternalServerError("Failed to check saved property status")
