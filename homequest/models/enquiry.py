"""
Enquiry model for contact messages from prospective buyers and renters.
"""

from sqlalchemy import String, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column
from homequest.database import Base, TimestampMixin
from typing import Optional


class Enquiry(TimestampMixin, Base):
    """
    Contact message optionally tied to a property and/or an agent.
    The creation timestamp is assigned by the database and never updated.
    """

    __tablename__ = "enquiries"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    property_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    agent_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    interest: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
        comment="buy, rent, sell or invest"
    )
