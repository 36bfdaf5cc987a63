"""
Property model for buy, rent and PG listings.
Handles listing data with location, pricing, amenities and agent reference.
"""

from sqlalchemy import String, Text, Integer, Boolean, JSON, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column
from homequest.database import Base
import enum
from typing import List, Optional


def enum_values(enum_cls) -> List[str]:
    """Persist enum values rather than member names."""
    return [member.value for member in enum_cls]


# JSONB on PostgreSQL, generic JSON elsewhere
JSONList = JSON().with_variant(JSONB(), "postgresql")


class PropertyType(str, enum.Enum):
    """Kind of building or land being listed."""
    APARTMENT = "apartment"
    VILLA = "villa"
    COMMERCIAL = "commercial"
    PLOT = "plot"


class PropertyCategory(str, enum.Enum):
    """Transaction the listing is offered for."""
    BUY = "buy"
    RENT = "rent"
    PG = "pg"


class PropertyStatus(str, enum.Enum):
    """Availability of the listing."""
    AVAILABLE = "available"
    SOLD = "sold"
    RENTED = "rented"


class Property(Base):
    """
    Property listing.
    Images are required and never empty; price is a non-negative integer amount.
    """

    __tablename__ = "properties"

    # Basic listing information
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Location information
    address: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    latitude: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    longitude: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    # Classification
    type: Mapped[PropertyType] = mapped_column(
        SQLEnum(PropertyType, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        index=True,
        comment="apartment, villa, commercial or plot"
    )

    category: Mapped[PropertyCategory] = mapped_column(
        SQLEnum(PropertyCategory, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        index=True,
        comment="buy, rent or pg"
    )

    # Pricing information
    price: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    price_unit: Mapped[str] = mapped_column(String(8), nullable=False, default="₹")
    display_price: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    # Rooms and size
    bedrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bathrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    area: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, comment="Area in sq. ft.")

    amenities: Mapped[Optional[List[str]]] = mapped_column(JSONList, nullable=True)
    features: Mapped[Optional[List[str]]] = mapped_column(JSONList, nullable=True)
    images: Mapped[List[str]] = mapped_column(JSONList, nullable=False)

    # Ownership
    builder_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    agent_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    # Status and flags
    status: Mapped[PropertyStatus] = mapped_column(
        SQLEnum(PropertyStatus, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        default=PropertyStatus.AVAILABLE,
        index=True
    )
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    is_new_launch: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_exclusive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_ready_to_move: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        """String representation of the property."""
        return f"<Property(id={self.id}, title={self.title[:30]}, price={self.price})>"

    def validate_all(self) -> None:
        """
        Check listing invariants before persisting.

        Raises:
            ValueError: If the image list is empty or the price is negative
        """
        if not self.images:
            raise ValueError("Property must have at least one image")
        if self.price is None or self.price < 0:
            raise ValueError("Price cannot be negative")
