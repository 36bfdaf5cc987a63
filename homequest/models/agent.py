"""
Agent model for the brokers who represent listings.
"""

from sqlalchemy import String, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column
from homequest.database import Base
from homequest.models.property import JSONList
from typing import List, Optional


class Agent(Base):
    """Real-estate agent with contact details and track record."""

    __tablename__ = "agents"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)

    specialization: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    areas: Mapped[Optional[List[str]]] = mapped_column(JSONList, nullable=True)
    experience: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, comment="Years in practice")
    rating: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    review_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=0)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Agent(id={self.id}, email={self.email})>"
