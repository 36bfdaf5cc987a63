"""
Property repository with filter composition and listing queries.
Results come back in natural storage order (ascending id).
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from homequest.repositories.base import BaseRepository
from homequest.models.property import Property
from homequest.schemas.property import PropertyFilter
from typing import Optional, List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for property listings.
    Every present filter field adds one condition and all conditions are ANDed.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def create_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Create a new property with validation.

        Args:
            property_data: Dictionary containing property information

        Returns:
            Created property instance

        Raises:
            ValueError: If validation fails
            Exception: If database operation fails
        """
        try:
            # Create property instance for validation
            property_obj = Property(**property_data)
            property_obj.validate_all()

            created_property = await self.create(property_data)
            logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
            return created_property
        except ValueError as e:
            logger.error(f"Property validation failed: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to create property: {e}")
            raise

    async def get_property(self, property_id: int) -> Optional[Property]:
        """Get a single listing, or None."""
        return await self.get_by_id(property_id)

    async def get_properties(self, filters: Optional[PropertyFilter] = None) -> List[Property]:
        """
        List properties matching every supplied filter.

        Args:
            filters: Optional PropertyFilter; None or an empty filter returns every listing

        Returns:
            List of matching properties in ascending id order
        """
        try:
            query = select(Property)

            if filters is not None:
                conditions = self._build_filter_conditions(filters)
                if conditions:
                    query = query.where(and_(*conditions))

            query = query.order_by(Property.id)

            result = await self.db.execute(query)
            properties = list(result.scalars().all())

            logger.debug(f"Property query returned {len(properties)} results")
            return properties
        except Exception as e:
            logger.error(f"Failed to query properties: {e}")
            raise

    def _build_filter_conditions(self, filters: PropertyFilter) -> List:
        """
        Build SQLAlchemy filter conditions from search filters.

        Args:
            filters: PropertyFilter instance

        Returns:
            List of SQLAlchemy conditions
        """
        conditions = []

        # Classification filters
        if filters.category is not None:
            conditions.append(Property.category == filters.category)
        if filters.type is not None:
            conditions.append(Property.type == filters.type)
        if filters.status is not None:
            conditions.append(Property.status == filters.status)

        # Location filters (exact match)
        if filters.city:
            conditions.append(Property.city == filters.city)
        if filters.location:
            conditions.append(Property.location == filters.location)

        # Price range filters
        if filters.min_price is not None:
            conditions.append(Property.price >= filters.min_price)
        if filters.max_price is not None:
            conditions.append(Property.price <= filters.max_price)

        # Bedroom and bathroom minimums
        if filters.bedrooms is not None:
            conditions.append(Property.bedrooms >= filters.bedrooms)
        if filters.bathrooms is not None:
            conditions.append(Property.bathrooms >= filters.bathrooms)

        # Area filters
        if filters.min_area is not None:
            conditions.append(Property.area >= filters.min_area)
        if filters.max_area is not None:
            conditions.append(Property.area <= filters.max_area)

        if filters.featured is not None:
            conditions.append(Property.featured == filters.featured)

        return conditions

    async def get_featured_properties(self, limit: int = 10) -> List[Property]:
        """
        Get featured listings.

        Args:
            limit: Maximum number of properties to return

        Returns:
            List of featured properties
        """
        try:
            query = (
                select(Property)
                .where(Property.featured == True)  # noqa: E712
                .order_by(Property.id)
                .limit(limit)
            )
            result = await self.db.execute(query)
            properties = list(result.scalars().all())

            logger.debug(f"Retrieved {len(properties)} featured properties")
            return properties
        except Exception as e:
            logger.error(f"Failed to get featured properties: {e}")
            raise

    async def get_properties_by_city(self, city: str, limit: int = 10) -> List[Property]:
        """Get up to `limit` listings in the given city."""
        try:
            query = (
                select(Property)
                .where(Property.city == city)
                .order_by(Property.id)
                .limit(limit)
            )
            result = await self.db.execute(query)
            properties = list(result.scalars().all())

            logger.debug(f"Retrieved {len(properties)} properties in {city}")
            return properties
        except Exception as e:
            logger.error(f"Failed to get properties for city {city}: {e}")
            raise
