"""
Pydantic schemas for enquiry requests and responses.
"""

from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from homequest.schemas.base import APIModel


class EnquiryCreate(APIModel):
    """Contact form submitted by a prospective buyer or renter."""

    name: str = Field(..., min_length=2, max_length=255, examples=["Priya Nair"])
    email: EmailStr = Field(..., examples=["priya@example.com"])
    phone: str = Field(..., min_length=10, max_length=32, examples=["9876543210"])
    message: str = Field(..., min_length=10, examples=["I would like to schedule a visit this weekend."])
    interest: Optional[str] = Field(None, max_length=32, description="buy, rent, sell or invest")
    property_id: Optional[int] = Field(None, gt=0)
    agent_id: Optional[int] = Field(None, gt=0)

    @field_validator('name', 'message')
    @classmethod
    def strip_text(cls, v):
        return v.strip()


class EnquiryResponse(APIModel):
    """Stored enquiry."""

    id: int
    name: str
    email: str
    phone: str
    message: str
    interest: Optional[str] = None
    property_id: Optional[int] = None
    agent_id: Optional[int] = None
    created_at: Optional[datetime] = None
