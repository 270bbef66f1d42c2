"""Database Infrastructure — SQLAlchemy declarative base for the session store.

Invariants:
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite driver by default: the session blob is tiny and local
"""
