"""
Pydantic schemas for agent requests and responses.
"""

from pydantic import EmailStr, Field
from typing import Optional, List
from homequest.schemas.base import APIModel


class AgentBase(APIModel):
    """Base agent schema with common fields."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Aditya Kumar"])
    email: EmailStr = Field(..., examples=["aditya@homequest.com"])
    phone: str = Field(..., min_length=1, max_length=32)
    specialization: Optional[str] = None
    areas: Optional[List[str]] = None
    experience: Optional[int] = Field(None, ge=0, description="Years of experience")
    rating: Optional[int] = Field(None, ge=0, le=5)
    review_count: Optional[int] = Field(0, ge=0)
    image: Optional[str] = None
    bio: Optional[str] = None


class AgentCreate(AgentBase):
    """Schema for creating a new agent."""


class AgentResponse(AgentBase):
    """Schema for agent response."""

    id: int
    # Stored addresses are returned as-is
    email: str
