"""SQL Session Store — persists the current-user blob across process restarts.

Invariants:
    - get() returns None for a missing key (never raises for absence)
    - set() upserts: a second write for the same key replaces the blob
    - clear() on a missing key is a no-op
    - DB failures surface as DatabaseError via DatabaseSessionManager
"""

import logging

from sqlalchemy import delete, select

from roster.infrastructure.database import DatabaseSessionManager
from roster.models.session_entry import SessionEntry

logger = logging.getLogger(__name__)


class SqlSessionStore:
    """SessionStore implementation over the session_entries table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def get(self, key: str) -> dict | None:
        async with self._manager.session() as db:
            result = await db.execute(
                select(SessionEntry).where(SessionEntry.key == key),
            )
            entry = result.scalar_one_or_none()
            return dict(entry.value) if entry else None

    async def set(self, key: str, value: dict) -> None:
        async with self._manager.session() as db:
            entry = await db.get(SessionEntry, key)
            if entry is None:
                db.add(SessionEntry(key=key, value=value))
            else:
                entry.value = value
            await db.commit()
        logger.debug(f"Session entry '{key}' stored")

    async def clear(self, key: str) -> None:
        async with self._manager.session() as db:
            await db.execute(delete(SessionEntry).where(SessionEntry.key == key))
            await db.commit()
        logger.debug(f"Session entry '{key}' cleared")
