"""
User model with password hashing and role management.
Handles accounts for buyers, agents and administrators.
"""

from sqlalchemy import String, Text, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column
from homequest.database import Base, TimestampMixin
from homequest.models.property import enum_values
from homequest.utils.auth import hash_password as _hash_password, verify_password as _verify_password
import enum
from typing import Optional


class UserRole(str, enum.Enum):
    """User role enumeration."""
    USER = "user"
    AGENT = "agent"
    ADMIN = "admin"


class User(TimestampMixin, Base):
    """
    User account.
    The password column only ever holds a bcrypt hash and is never serialized outward.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True
    )

    hashed_password: Mapped[str] = mapped_column(
        "password",
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    # Profile information
    email: Mapped[Optional[str]] = mapped_column(String(255), unique=True, nullable=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    profile_image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    role: Mapped[UserRole] = mapped_column(
        SQLEnum(UserRole, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        default=UserRole.USER,
        index=True
    )

    def __repr__(self) -> str:
        """String representation of the user."""
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"

    @classmethod
    def hash_password(cls, password: str) -> str:
        """Hash a plaintext password with bcrypt."""
        return _hash_password(password)

    def verify_password(self, password: str) -> bool:
        """
        Verify a password against the stored hash.

        Args:
            password: Plain text password to verify

        Returns:
            True if password matches, False otherwise
        """
        return _verify_password(password, self.hashed_password)
