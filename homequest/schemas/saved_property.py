"""
Pydantic schemas for saved-property requests and responses.
"""

from pydantic import Field
from typing import Optional
from datetime import datetime
from homequest.schemas.base import APIModel


class SavedPropertyCreate(APIModel):
    """Body of a save request; the user comes from the session."""

    property_id: int = Field(..., gt=0)


class SavedPropertyResponse(APIModel):
    """Stored bookmark."""

    id: int
    user_id: int
    property_id: int
    created_at: Optional[datetime] = None


class SavedStatusResponse(APIModel):
    """Whether the current user has saved a property."""

    is_saved: bool
