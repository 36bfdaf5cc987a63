"""
Enquiry API endpoints.
"""

from fastapi import APIRouter, Depends, status
import logging

from homequest.repositories.enquiry import EnquiryRepository
from homequest.schemas.enquiry import EnquiryCreate, EnquiryResponse
from homequest.schemas.error import get_error_responses
from homequest.utils.dependencies import get_enquiry_repository
from homequest.utils.exceptions import APIException, InternalServerError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/enquiries", tags=["Enquiries"])


@router.post(
    "",
    response_model=EnquiryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit an enquiry",
    description="Send a contact request about a listing or to an agent. No login required.",
    responses=get_error_responses(400, 500)
)
async def create_enquiry(
    enquiry_data: EnquiryCreate,
    enquiry_repo: EnquiryRepository = Depends(get_enquiry_repository)
) -> EnquiryResponse:
    """
    Store a new enquiry.

    Args:
        enquiry_data: Validated enquiry form
        enquiry_repo: Enquiry repository

    Returns:
        Created enquiry
    """
    try:
        return await enquiry_repo.create_enquiry(enquiry_data.model_dump())
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error creating enquiry: {e}")
        raise InternalServerError("Failed to create enquiry")
