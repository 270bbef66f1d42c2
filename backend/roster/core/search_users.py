"""Roster Search — case-insensitive substring filter over the text fields.

Invariants:
    - Pure function: no IO, input list never mutated
    - Blank term returns the input list object itself (no copy)
    - Relative order of kept records preserved
    - Phone matched against the raw value (digits have no case)
"""

from roster.core.domain_types import RecordField, UserRecord

_LOWERCASED_FIELDS = (
    RecordField.NAME, RecordField.EMAIL, RecordField.ENROLL_NUMBER,
)


def _field_text(record: UserRecord, key: RecordField) -> str:
    value = record.get(key.value)
    return "" if value is None else str(value)


def _matches(record: UserRecord, term: str) -> bool:
    if any(term in _field_text(record, f).lower() for f in _LOWERCASED_FIELDS):
        return True
    return term in _field_text(record, RecordField.PHONE)


def search_users(records: list[UserRecord], term: str | None) -> list[UserRecord]:
    """Keep records whose name, email, phone or enroll number contain term."""
    if not term or not term.strip():
        return records
    needle = term.lower().strip()
    return [r for r in records if _matches(r, needle)]
