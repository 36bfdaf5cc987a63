"""
Server-side session storage.
Binds a browser cookie to the identifier of an authenticated user.
"""

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from homequest.database import Base
from datetime import datetime, timezone
from typing import Any, Dict


class SessionRecord(Base):
    """One row per live browser session; `sess` only ever holds the user id."""

    __tablename__ = "session"

    sid: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    sess: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    expire: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)

    @property
    def is_expired(self) -> bool:
        expire = self.expire
        # SQLite hands back naive datetimes
        if expire.tzinfo is None:
            expire = expire.replace(tzinfo=timezone.utc)
        return expire <= datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"<SessionRecord(sid={self.sid[:8]}..., expire={self.expire})>"
