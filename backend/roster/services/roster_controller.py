"""Roster Controller — orchestrates store/session IO around the pure roster core.

Invariants:
    - Validation runs BEFORE any store call; invalid records never reach the store
    - The id sequence advances only after the store accepted a new record,
      and never re-issues a caller-supplied numeric id
    - Declined confirmations return False with no store/session side effect
    - Store failures propagate unchanged; controller state is left untouched
    - Only admins create, update, or delete; any logged-in user may read/export

Design Decisions:
    - Controller owns SessionContext + UserIdSequence: replaces page-level globals
    - Id sequence seeded once at startup; a failing store seeds it at 0 (logged)
    - Persisted blob is the CurrentUser projection, never the password
"""

import logging

from roster.core.accounts import CurrentUser, authenticate
from roster.core.domain_types import (
    RecordField, SortDirection, SortField, UserId, UserRecord, View,
)
from roster.core.errors import (
    AuthenticationError, ErrorContext, RecordValidationError, RosterError,
)
from roster.core.export_csv import export_users_csv
from roster.core.navigation import resolve_route
from roster.core.repository_protocols import Confirmation, SessionStore, UserStore
from roster.core.search_users import search_users
from roster.core.session_context import SessionContext
from roster.core.sort_users import sort_users
from roster.core.user_ids import UserIdSequence
from roster.core.validate_user import validate_user

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "currentUser"


class RosterController:
    """Top-level application controller: one per process, single active session."""

    def __init__(self, store: UserStore, session_store: SessionStore):
        self.store = store
        self.session_store = session_store
        self.session = SessionContext()
        self.user_ids = UserIdSequence()

    # ─── Lifecycle ──────────────────────────────────────────────

    async def startup(self) -> None:
        """Seed the id sequence and restore any persisted login."""
        await self._seed_user_ids()
        await self._restore_session()

    async def _seed_user_ids(self) -> None:
        try:
            users = await self.store.get_all_users()
        except RosterError as e:
            logger.error(
                f"Error initializing user ids: {e.message}",
                extra={"error_code": e.code},
            )
            self.user_ids = UserIdSequence()
            return
        self.user_ids = UserIdSequence.seeded_from(users)
        logger.info(
            f"User id sequence starts at {self.user_ids.next_id}",
            extra={"record_count": len(users)},
        )

    async def _restore_session(self) -> None:
        blob = await self.session_store.get(CURRENT_USER_KEY)
        if blob is None:
            return
        try:
            user = CurrentUser.from_blob(blob)
        except (KeyError, ValueError) as e:
            logger.warning(f"Discarding malformed session blob: {e}")
            await self.session_store.clear(CURRENT_USER_KEY)
            return
        self.session.login(user)
        logger.info("Session restored", extra={"username": user.username})

    # ─── Authentication ─────────────────────────────────────────

    async def login(self, username: str, password: str) -> CurrentUser:
        account = authenticate(username, password)
        if account is None:
            logger.warning("Login failed", extra={"username": username})
            raise AuthenticationError(ErrorContext(username=username))
        user = CurrentUser.from_account(account)
        self.session.login(user)
        await self.session_store.set(CURRENT_USER_KEY, user.to_blob())
        logger.info(f"Welcome {user.name}", extra={"username": user.username})
        return user

    async def logout(self, confirmation: Confirmation) -> bool:
        user = self.session.require_authenticated()
        if not await confirmation.confirm("Are you sure?", "Do you want to logout?"):
            return False
        await self.session_store.clear(CURRENT_USER_KEY)
        self.session.logout()
        logger.info("Logged out successfully", extra={"username": user.username})
        return True

    def current_user(self) -> CurrentUser:
        return self.session.require_authenticated()

    def current_view(self, path: str) -> View:
        user = self.session.require_authenticated()
        return resolve_route(path, user.role)

    # ─── Read ───────────────────────────────────────────────────

    async def list_users(
        self,
        search: str | None = None,
        sort_field: SortField | None = None,
        direction: SortDirection = SortDirection.ASC,
    ) -> list[UserRecord]:
        self.session.require_authenticated()
        users = search_users(await self.store.get_all_users(), search)
        if sort_field is not None:
            users = sort_users(users, sort_field, direction)
        return users

    async def get_user(self, user_id: UserId) -> UserRecord:
        self.session.require_authenticated()
        return await self.store.get_user(user_id)

    async def export_csv(
        self,
        search: str | None = None,
        sort_field: SortField | None = None,
        direction: SortDirection = SortDirection.ASC,
    ) -> str:
        users = await self.list_users(search, sort_field, direction)
        return export_users_csv(users)

    # ─── Write ──────────────────────────────────────────────────

    async def save_user(
        self, data: UserRecord, user_id: UserId | None = None,
    ) -> UserRecord:
        """Validate, then create (no user_id) or fully replace (user_id)."""
        admin = self.session.require_admin()
        record = {k: v for k, v in data.items() if k != RecordField.ID.value}

        validation = validate_user(record)
        if not validation.is_valid:
            logger.info(
                f"Validation failed: {len(validation.errors)} rule(s)",
                extra={"username": admin.username, "user_id": user_id},
            )
            raise RecordValidationError(
                list(validation.errors),
                ErrorContext(username=admin.username, user_id=user_id),
            )

        if user_id:
            updated = await self.store.update_user(user_id, record)
            logger.info("User updated successfully", extra={"user_id": user_id})
            return updated

        supplied_id = data.get(RecordField.ID.value)
        sequence_id = supplied_id in (None, "")
        record[RecordField.ID.value] = (
            self.user_ids.peek() if sequence_id else str(supplied_id)
        )
        created = await self.store.create_user(record)
        if sequence_id:
            self.user_ids.advance()
        else:
            self.user_ids.observe(supplied_id)
        logger.info(
            "User created successfully",
            extra={"user_id": record[RecordField.ID.value]},
        )
        return created

    async def delete_user(self, user_id: UserId, confirmation: Confirmation) -> bool:
        self.session.require_admin()
        if not await confirmation.confirm("Are you sure?", "This action cannot be undone!"):
            return False
        await self.store.delete_user(user_id)
        logger.info("User has been deleted successfully", extra={"user_id": user_id})
        return True
