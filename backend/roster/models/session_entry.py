"""Session Entry ORM — key/value row holding a persisted session blob.

Invariants:
    - key is the primary key (one blob per key, e.g. "currentUser")
    - value is an opaque JSON object, replaced wholesale on every write
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from roster.db.base import Base


class SessionEntry(Base):
    __tablename__ = "session_entries"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[dict] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
