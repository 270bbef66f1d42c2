"""User Record Validation — field rules checked before anything reaches the store.

Invariants:
    - validate_user is PURE: returns ValidationResult, never raises, never mutates
    - All five rules always run (non-short-circuiting), messages in rule order
    - Message wording is user-facing and must not change
    - "required" and "in the future" are mutually exclusive for the admission date

Design Decisions:
    - `today` injectable so the future-date rule is deterministic in tests
    - Unparsable admission dates produce no date message: an invalid date never
      compares later than today (kept as-is, see DESIGN.md)
    - fullmatch over ^...$: Python's $ would accept a trailing newline
    - Admission datetimes with an offset are compared on the local clock
"""

import re
from datetime import date

from roster.core.dates import admission_day
from roster.core.domain_types import RecordField, UserRecord, ValidationResult


NAME_MIN_LENGTH: int = 2
ENROLL_NUMBER_MIN_LENGTH: int = 3

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_DIGITS_PATTERN = re.compile(r"[0-9]{10,15}")
_NON_DIGIT = re.compile(r"[^0-9]")

NAME_MESSAGE = "Name must be at least 2 characters long"
EMAIL_MESSAGE = "Please enter a valid email address"
PHONE_MESSAGE = "Phone number must contain 10-15 digits"
ENROLL_NUMBER_MESSAGE = "Enroll number must be at least 3 characters long"
DATE_REQUIRED_MESSAGE = "Date of admission is required"
DATE_FUTURE_MESSAGE = "Date of admission cannot be in the future"


def _text(candidate: UserRecord, key: RecordField) -> str:
    value = candidate.get(key.value)
    return "" if value is None else str(value)


def _check_name(candidate: UserRecord) -> str | None:
    if len(_text(candidate, RecordField.NAME).strip()) < NAME_MIN_LENGTH:
        return NAME_MESSAGE
    return None


def _check_email(candidate: UserRecord) -> str | None:
    if not _EMAIL_PATTERN.fullmatch(_text(candidate, RecordField.EMAIL)):
        return EMAIL_MESSAGE
    return None


def _check_phone(candidate: UserRecord) -> str | None:
    phone = _text(candidate, RecordField.PHONE)
    if not phone or not _PHONE_DIGITS_PATTERN.fullmatch(_NON_DIGIT.sub("", phone)):
        return PHONE_MESSAGE
    return None


def _check_enroll_number(candidate: UserRecord) -> str | None:
    enroll = _text(candidate, RecordField.ENROLL_NUMBER)
    if len(enroll.strip()) < ENROLL_NUMBER_MIN_LENGTH:
        return ENROLL_NUMBER_MESSAGE
    return None


def _check_date_of_admission(candidate: UserRecord, today: date) -> str | None:
    raw = candidate.get(RecordField.DATE_OF_ADMISSION.value)
    if not raw:
        return DATE_REQUIRED_MESSAGE
    day = admission_day(raw)
    if day is not None and day > today:
        return DATE_FUTURE_MESSAGE
    return None


def validate_user(candidate: UserRecord, today: date | None = None) -> ValidationResult:
    """Run every field rule against candidate. Pure, collects all violations."""
    today = today or date.today()
    checks = (
        _check_name(candidate),
        _check_email(candidate),
        _check_phone(candidate),
        _check_enroll_number(candidate),
        _check_date_of_admission(candidate, today),
    )
    errors = tuple(message for message in checks if message is not None)
    return ValidationResult(is_valid=not errors, errors=errors)
