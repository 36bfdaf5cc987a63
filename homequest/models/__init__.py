"""
Database models for the HomeQuest Listing API.
Includes Property, Agent, Enquiry, User, SavedProperty and the session table.
"""

from homequest.models.property import Property, PropertyType, PropertyCategory, PropertyStatus
from homequest.models.agent import Agent
from homequest.models.enquiry import Enquiry
from homequest.models.user import User, UserRole
from homequest.models.saved_property import SavedProperty
from homequest.models.session import SessionRecord

# Export all models for easy importing
__all__ = [
    "Property",
    "PropertyType",
    "PropertyCategory",
    "PropertyStatus",
    "Agent",
    "Enquiry",
    "User",
    "UserRole",
    "SavedProperty",
    "SessionRecord",
]
