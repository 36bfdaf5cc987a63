"""
Saved-property repository.
A (user, property) pair is stored at most once.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_
from sqlalchemy.exc import IntegrityError
from homequest.repositories.base import BaseRepository
from homequest.models.saved_property import SavedProperty
from homequest.models.property import Property
from typing import Optional, List
import logging

logger = logging.getLogger(__name__)


class SavedPropertyRepository(BaseRepository[SavedProperty]):
    """
    Repository for user bookmarks.
    Duplicates are checked before insert and rejected by a unique constraint
    on (user_id, property_id) when two inserts race.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(SavedProperty, db)

    async def _get_pair(self, user_id: int, property_id: int) -> Optional[SavedProperty]:
        query = select(SavedProperty).where(
            and_(
                SavedProperty.user_id == user_id,
                SavedProperty.property_id == property_id
            )
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_saved_properties(self, user_id: int) -> List[Property]:
        """
        Get the properties a user has saved.

        Args:
            user_id: Owner of the bookmarks

        Returns:
            Saved Property rows, most recently saved first
        """
        try:
            query = (
                select(Property)
                .join(SavedProperty, SavedProperty.property_id == Property.id)
                .where(SavedProperty.user_id == user_id)
                .order_by(SavedProperty.created_at.desc(), SavedProperty.id.desc())
            )
            result = await self.db.execute(query)
            properties = list(result.scalars().all())

            logger.debug(f"User {user_id} has {len(properties)} saved properties")
            return properties
        except Exception as e:
            logger.error(f"Failed to get saved properties for user {user_id}: {e}")
            raise

    async def save_property(self, user_id: int, property_id: int) -> SavedProperty:
        """
        Save a property for a user.

        Args:
            user_id: ID of the user
            property_id: ID of the property to bookmark

        Returns:
            The new bookmark, or the existing one if the pair was already saved
        """
        existing = await self._get_pair(user_id, property_id)
        if existing:
            logger.debug(f"Property {property_id} already saved by user {user_id}")
            return existing

        try:
            saved = await self.create({"user_id": user_id, "property_id": property_id})
            logger.info(f"User {user_id} saved property {property_id}")
            return saved
        except IntegrityError:
            # Lost a race with a concurrent insert of the same pair
            existing = await self._get_pair(user_id, property_id)
            if existing is None:
                raise
            logger.warning(f"Concurrent save of property {property_id} by user {user_id} resolved to existing row")
            return existing

    async def unsave_property(self, user_id: int, property_id: int) -> bool:
        """
        Remove a bookmark.

        Returns:
            True if a row was removed, False if the pair was not saved
        """
        try:
            result = await self.db.execute(
                delete(SavedProperty).where(
                    and_(
                        SavedProperty.user_id == user_id,
                        SavedProperty.property_id == property_id
                    )
                )
            )
            await self.db.commit()

            removed = result.rowcount > 0
            logger.info(f"User {user_id} unsaved property {property_id} (removed: {removed})")
            return removed
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Failed to unsave property {property_id} for user {user_id}: {e}")
            raise

    async def is_property_saved(self, user_id: int, property_id: int) -> bool:
        try:
            return await self._get_pair(user_id, property_id) is not None
        except Exception as e:
            logger.error(f"Failed to check saved state of property {property_id} for user {user_id}: {e}")
            raise
