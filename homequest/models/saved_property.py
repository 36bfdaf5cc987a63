"""
Saved property model: a user's bookmark of a listing.
"""

from sqlalchemy import Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from homequest.database import Base, TimestampMixin


class SavedProperty(TimestampMixin, Base):
    """
    (user, property) bookmark.
    The unique constraint backs up the repository's check-before-insert.
    """

    __tablename__ = "saved_properties"
    __table_args__ = (
        UniqueConstraint("user_id", "property_id", name="uq_saved_properties_user_property"),
    )

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    def __repr__(self) -> str:
        return f"<SavedProperty(user_id={self.user_id}, property_id={self.property_id})>"
