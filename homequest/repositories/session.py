"""
Database-backed session store.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homequest.repositories.base import BaseRepository
from homequest.models.session import SessionRecord
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import secrets
import logging

logger = logging.getLogger(__name__)


class SessionStore(BaseRepository[SessionRecord]):
    """
    Stores session payloads keyed by a random session id.
    Expired rows are treated as absent and removed when read.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(SessionRecord, db)

    async def create_session(self, data: Dict[str, Any], max_age: int) -> SessionRecord:
        """
        Create a session holding `data` that expires after `max_age` seconds.

        Returns:
            The stored session record
        """
        record = await self.create({
            "sid": secrets.token_urlsafe(32),
            "sess": dict(data),
            "expire": datetime.now(timezone.utc) + timedelta(seconds=max_age),
        })
        logger.debug(f"Created session {record.sid[:8]}... expiring {record.expire}")
        return record

    async def get_session(self, sid: str) -> Optional[SessionRecord]:
        record = await self.get_by_field("sid", sid)
        if record is None:
            return None

        if record.is_expired:
            logger.debug(f"Session {sid[:8]}... expired, removing")
            await self.delete(record.id)
            return None

        return record

    async def destroy(self, sid: str) -> bool:
        """
        Delete a session by id.

        Returns:
            True if a session was removed
        """
        record = await self.get_by_field("sid", sid)
        if record is None:
            return False

        deleted = await self.delete(record.id)
        logger.debug(f"Destroyed session {sid[:8]}...")
        return deleted
