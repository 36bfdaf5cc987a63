"""
Repository layer for data access operations.
One repository per entity plus the database-backed session store.
"""

from homequest.repositories.base import BaseRepository
from homequest.repositories.property import PropertyRepository
from homequest.repositories.agent import AgentRepository
from homequest.repositories.enquiry import EnquiryRepository
from homequest.repositories.user import UserRepository
from homequest.repositories.saved_property import SavedPropertyRepository
from homequest.repositories.session import SessionStore

__all__ = [
    "BaseRepository",
    "PropertyRepository",
    "AgentRepository",
    "EnquiryRepository",
    "UserRepository",
    "SavedPropertyRepository",
    "SessionStore"
]
