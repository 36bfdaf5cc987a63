"""
Enquiry repository.
Enquiries are listed newest first.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homequest.repositories.base import BaseRepository
from homequest.models.enquiry import Enquiry
from typing import Optional, List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class EnquiryRepository(BaseRepository[Enquiry]):
    """Repository for buyer and renter enquiries."""

    def __init__(self, db: AsyncSession):
        super().__init__(Enquiry, db)

    async def get_enquiry(self, enquiry_id: int) -> Optional[Enquiry]:
        return await self.get_by_id(enquiry_id)

    async def get_enquiries(self) -> List[Enquiry]:
        """All enquiries, newest first with ties broken by descending id."""
        return await self.get_multi(order_by="-created_at")

    async def create_enquiry(self, enquiry_data: Dict[str, Any]) -> Enquiry:
        enquiry = await self.create(enquiry_data)
        logger.info(
            f"Created enquiry {enquiry.id} from {enquiry.email} "
            f"(property: {enquiry.property_id}, agent: {enquiry.agent_id})"
        )
        return enquiry
