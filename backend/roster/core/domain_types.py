"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the store's opaque text id: never compare raw ints in domain logic
    - Every sortable field is a SortField member; no raw string matching elsewhere
    - Record keys are the store's camelCase wire names (RecordField values)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and query params without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)

UserRecord = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Account roles: only admins manage the roster."""
    ADMIN = "admin"
    USER = "user"


class RecordField(str, Enum):
    """Wire names of the record fields, in CSV/table column order."""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    ENROLL_NUMBER = "enrollNumber"
    DATE_OF_ADMISSION = "dateOfAdmission"


class SortField(str, Enum):
    """Fields the roster table can be ordered by."""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    ENROLL_NUMBER = "enrollNumber"
    DATE_OF_ADMISSION = "dateOfAdmission"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class View(str, Enum):
    """Screens the navigation table can switch to."""
    USERS = "users"
    USER_FORM = "user_form"
    ABOUT = "about"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_user: errors listed in rule order."""
    is_valid: bool
    errors: tuple[str, ...] = ()
