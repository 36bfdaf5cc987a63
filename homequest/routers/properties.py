"""
Property listing API endpoints for filtering, featured listings and city search.
"""

from fastapi import APIRouter, Depends, status, Query, Path
from typing import Optional, List
import logging

from homequest.models.property import PropertyType, PropertyCategory, PropertyStatus
from homequest.repositories.property import PropertyRepository
from homequest.schemas.property import PropertyResponse, PropertyFilter
from homequest.schemas.error import get_error_responses
from homequest.utils.dependencies import get_property_repository
from homequest.utils.exceptions import APIException, PropertyNotFoundError, InternalServerError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/properties", tags=["Properties"])


@router.get(
    "",
    response_model=List[PropertyResponse],
    status_code=status.HTTP_200_OK,
    summary="List properties",
    description="List properties matching every supplied filter. No filters returns all listings.",
    responses=get_error_responses(400, 500)
)
async def get_properties(
    category: Optional[PropertyCategory] = Query(None, description="buy, rent or pg"),
    type: Optional[PropertyType] = Query(None, description="apartment, villa, commercial or plot"),
    city: Optional[str] = Query(None, description="Exact city name"),
    location: Optional[str] = Query(None, description="Exact locality name"),

    # Price filters
    min_price: Optional[int] = Query(None, alias="minPrice", ge=0, description="Minimum price (inclusive)"),
    max_price: Optional[int] = Query(None, alias="maxPrice", ge=0, description="Maximum price (inclusive)"),

    # Room and size filters
    bedrooms: Optional[int] = Query(None, ge=0, description="Minimum number of bedrooms"),
    bathrooms: Optional[int] = Query(None, ge=0, description="Minimum number of bathrooms"),
    min_area: Optional[int] = Query(None, alias="minArea", ge=0, description="Minimum area in sq. ft."),
    max_area: Optional[int] = Query(None, alias="maxArea", ge=0, description="Maximum area in sq. ft."),

    status_filter: Optional[PropertyStatus] = Query(None, alias="status", description="available, sold or rented"),
    featured: Optional[bool] = Query(None, description="Only featured (true) or non-featured (false) listings"),

    property_repo: PropertyRepository = Depends(get_property_repository)
) -> List[PropertyResponse]:
    """
    List properties with optional filters.

    Args:
        Various query parameters for filtering
        property_repo: Property repository

    Returns:
        Matching properties in natural storage order
    """
    try:
        filters = PropertyFilter(
            category=category,
            type=type,
            city=city or None,
            location=location or None,
            min_price=min_price,
            max_price=max_price,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            min_area=min_area,
            max_area=max_area,
            status=status_filter,
            featured=featured
        )

        return await property_repo.get_properties(None if filters.is_empty() else filters)

    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error fetching properties: {e}")
        raise InternalServerError("Failed to fetch properties")


@router.get(
    "/featured",
    response_model=List[PropertyResponse],
    status_code=status.HTTP_200_OK,
    summary="Featured properties",
    responses=get_error_responses(400, 500)
)
async def get_featured_properties(
    limit: int = Query(10, ge=1, description="Maximum number of listings"),
    property_repo: PropertyRepository = Depends(get_property_repository)
) -> List[PropertyResponse]:
    try:
        return await property_repo.get_featured_properties(limit)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error fetching featured properties: {e}")
        raise InternalServerError("Failed to fetch featured properties")


@router.get(
    "/city/{city}",
    response_model=List[PropertyResponse],
    status_code=status.HTTP_200_OK,
    summary="Properties in a city",
    responses=get_error_responses(400, 500)
)
async def get_properties_by_city(
    city: str = Path(..., min_length=1, description="City name"),
    limit: int = Query(10, ge=1, description="Maximum number of listings"),
    property_repo: PropertyRepository = Depends(get_property_repository)
) -> List[PropertyResponse]:
    try:
        return await property_repo.get_properties_by_city(city, limit)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error fetching properties for city {city}: {e}")
        raise InternalServerError("Failed to fetch properties by city")


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    status_code=status.HTTP_200_OK,
    summary="Get property details",
    responses=get_error_responses(400, 404, 500)
)
async def get_property(
    property_id: int = Path(..., description="Property ID"),
    property_repo: PropertyRepository = Depends(get_property_repository)
) -> PropertyResponse:
    """
    Get a single listing.

    Raises:
        PropertyNotFoundError: If no listing has this id
    """
    try:
        property_obj = await property_repo.get_property(property_id)
        if not property_obj:
            raise PropertyNotFoundError()
        return property_obj

    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error fetching property {property_id}: {e}")
        raise InternalServerError("Failed to fetch property")
