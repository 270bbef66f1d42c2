"""Service test fixtures — in-memory SQLite session DB.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables created
    - StaticPool: every session shares the single in-memory connection
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from roster.db.base import Base
from roster.infrastructure.database import DatabaseSessionManager
from roster.models.session_entry import SessionEntry  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    return DatabaseSessionManager(engine=test_engine)
