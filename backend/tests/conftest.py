"""Root conftest — shared test configuration and in-memory collaborators.

Invariants:
    - No test talks to a real user store or a file-backed database
    - FakeUserStore records every call so tests can assert "no store call"

Design Decisions:
    - Fakes satisfy the core Protocols structurally (no inheritance)
    - Exposed through fixtures: tests/ is not an importable package
"""

import os

# Ensure tests never reach a real store or write a session file
os.environ.setdefault("USER_STORE_URL", "http://store.test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest

from roster.core.errors import ResourceNotFoundError
from roster.services.roster_controller import RosterController


SAMPLE_USERS = [
    {
        "id": "1", "name": "Ana Li", "email": "ana@x.co",
        "phone": "1234567890", "enrollNumber": "E001",
        "dateOfAdmission": "2024-01-15",
    },
    {
        "id": "2", "name": "bruno Costa", "email": "bruno@school.edu",
        "phone": "555-123-4567", "enrollNumber": "E002",
        "dateOfAdmission": "2023-09-01",
    },
    {
        "id": "7", "name": "Carla Diaz", "email": "carla@school.edu",
        "phone": "5559876543", "enrollNumber": "X100",
        "dateOfAdmission": "2025-02-10",
    },
]


class FakeUserStore:
    """In-memory `/users` resource with call log and failure injection."""

    def __init__(self, users=None):
        self.users = {str(u["id"]): dict(u) for u in users or []}
        self.calls = []
        self.fail_with = None

    def _record(self, operation, *args):
        self.calls.append((operation, *args))
        if self.fail_with is not None:
            raise self.fail_with

    def _require(self, user_id):
        if user_id not in self.users:
            raise ResourceNotFoundError("User", user_id)

    async def get_all_users(self):
        self._record("list")
        return [dict(u) for u in self.users.values()]

    async def get_user(self, user_id):
        self._record("get", user_id)
        self._require(user_id)
        return dict(self.users[user_id])

    async def create_user(self, record):
        self._record("create", dict(record))
        self.users[str(record["id"])] = dict(record)
        return dict(record)

    async def update_user(self, user_id, record):
        self._record("update", user_id, dict(record))
        self._require(user_id)
        self.users[user_id] = {**record, "id": user_id}
        return dict(self.users[user_id])

    async def delete_user(self, user_id):
        self._record("delete", user_id)
        self._require(user_id)
        del self.users[user_id]


class MemorySessionStore:
    """Dict-backed persisted session."""

    def __init__(self):
        self.entries = {}

    async def get(self, key):
        value = self.entries.get(key)
        return dict(value) if value is not None else None

    async def set(self, key, value):
        self.entries[key] = dict(value)

    async def clear(self, key):
        self.entries.pop(key, None)


class StubConfirmation:
    """Answers every prompt with a fixed outcome and remembers the prompts."""

    def __init__(self, answer):
        self.answer = answer
        self.prompts = []

    async def confirm(self, title, text):
        self.prompts.append((title, text))
        return self.answer


@pytest.fixture
def sample_users():
    return [dict(u) for u in SAMPLE_USERS]


@pytest.fixture
def user_store(sample_users):
    return FakeUserStore(sample_users)


@pytest.fixture
def session_store():
    return MemorySessionStore()


@pytest.fixture
def confirm_yes():
    return StubConfirmation(True)


@pytest.fixture
def confirm_no():
    return StubConfirmation(False)


@pytest.fixture
async def controller(user_store, session_store):
    """Started controller, nobody logged in."""
    ctl = RosterController(user_store, session_store)
    await ctl.startup()
    user_store.calls.clear()
    return ctl


@pytest.fixture
async def admin_controller(controller):
    await controller.login("admin", "admin123")
    return controller


@pytest.fixture
async def user_controller(controller):
    await controller.login("user", "user123")
    return controller
