"""
Pydantic schemas for property requests and responses.
Handles listing creation, responses and search filters.
"""

from pydantic import Field, field_validator
from typing import Optional, List
from homequest.models.property import PropertyType, PropertyCategory, PropertyStatus
from homequest.schemas.base import APIModel


class PropertyBase(APIModel):
    """Base property schema with common fields."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Skyline Residency"])
    description: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1, examples=["Skyline Residency, Bandra West"])
    city: str = Field(..., min_length=1, examples=["Mumbai"])
    location: str = Field(..., min_length=1, examples=["Bandra West"])

    type: PropertyType = Field(..., description="apartment, villa, commercial or plot")
    category: PropertyCategory = Field(..., description="buy, rent or pg")

    price: int = Field(..., ge=0, description="Price in whole currency units", examples=[12500000])
    price_unit: str = Field("₹", max_length=8)
    display_price: Optional[str] = Field(None, max_length=64, examples=["₹ 1.25 Cr"])

    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area: Optional[int] = Field(None, ge=0, description="Area in sq. ft.")

    amenities: Optional[List[str]] = None
    features: Optional[List[str]] = None
    images: List[str] = Field(..., min_length=1, description="At least one image URL")

    latitude: Optional[str] = Field(None, max_length=32)
    longitude: Optional[str] = Field(None, max_length=32)

    builder_id: Optional[int] = None
    agent_id: Optional[int] = None

    status: PropertyStatus = PropertyStatus.AVAILABLE
    featured: bool = False
    is_new_launch: bool = False
    is_exclusive: bool = False
    is_ready_to_move: bool = False

    @field_validator('title', 'description', 'address', 'city', 'location')
    @classmethod
    def strip_text(cls, v):
        """Reject blank text fields."""
        if not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()


class PropertyCreate(PropertyBase):
    """Schema for creating a new property."""


class PropertyResponse(PropertyBase):
    """Schema for property response."""

    id: int

    # Rows written before the flags existed may hold NULL
    featured: Optional[bool] = False
    is_new_launch: Optional[bool] = False
    is_exclusive: Optional[bool] = False
    is_ready_to_move: Optional[bool] = False


class PropertyFilter(APIModel):
    """
    Optional predicates narrowing a property listing query.
    Every present field adds one condition; all conditions are combined with AND.
    """

    category: Optional[PropertyCategory] = None
    type: Optional[PropertyType] = None
    city: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)

    min_price: Optional[int] = Field(None, ge=0, description="Inclusive lower price bound")
    max_price: Optional[int] = Field(None, ge=0, description="Inclusive upper price bound")

    bedrooms: Optional[int] = Field(None, ge=0, description="Minimum number of bedrooms")
    bathrooms: Optional[int] = Field(None, ge=0, description="Minimum number of bathrooms")

    min_area: Optional[int] = Field(None, ge=0, description="Inclusive lower area bound")
    max_area: Optional[int] = Field(None, ge=0, description="Inclusive upper area bound")

    status: Optional[PropertyStatus] = None
    featured: Optional[bool] = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)
