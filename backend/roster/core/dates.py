"""Admission Date Parsing — shared by the validator and the sorter.

Invariants:
    - parse_admission_date returns an aware datetime (naive input treated as UTC)
      or None when unparsable
    - admission_day returns the local calendar date: offset-carrying values are
      converted to local time, plain dates are taken as written
    - Never raises
"""

from datetime import date, datetime, timezone


def _parse(value: object) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def parse_admission_date(value: object) -> datetime | None:
    """Parse an ISO date/datetime (str, date or datetime). None if unparsable."""
    parsed = _parse(value)
    if parsed is not None and parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def admission_day(value: object) -> date | None:
    """Calendar date of the admission as seen on the local clock."""
    parsed = _parse(value)
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()
