"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, but the core functions that
      work on their results are never async themselves
"""

from typing import Protocol

from roster.core.domain_types import UserId, UserRecord


class UserStore(Protocol):
    """Contract for the external `/users` REST resource."""
    async def get_all_users(self) -> list[UserRecord]: ...
    async def get_user(self, user_id: UserId) -> UserRecord: ...
    async def create_user(self, record: UserRecord) -> UserRecord: ...
    async def update_user(self, user_id: UserId, record: UserRecord) -> UserRecord: ...
    async def delete_user(self, user_id: UserId) -> None: ...


class SessionStore(Protocol):
    """Contract for the persisted session blob (survives restarts)."""
    async def get(self, key: str) -> dict | None: ...
    async def set(self, key: str, value: dict) -> None: ...
    async def clear(self, key: str) -> None: ...


class Confirmation(Protocol):
    """Yes/no prompt shown before destructive actions."""
    async def confirm(self, title: str, text: str) -> bool: ...
