"""Roster Sorting — type-aware ordering over a closed set of fields.

Invariants:
    - Returns a new list; the input is never reordered
    - Stable: ties keep their original relative order (sorted() is stable)
    - Descending mirrors the comparator; it does not reverse ties
    - NaN and missing keys compare equal to everything

Design Decisions:
    - SortField -> coercion table instead of dynamic record[field] access
    - id parsed like a leading-integer parse ("12abc" -> 12, "abc" -> NaN)
    - Dates coerced to epoch seconds so unparsable values can be NaN too
    - cmp_to_key keeps the three-way comparator so NaN keeps its
      "never less, never greater" behaviour; the resulting order with NaN ids
      is deterministic in CPython but not a total order
"""

import math
import re
from collections.abc import Callable
from functools import cmp_to_key

from roster.core.dates import parse_admission_date
from roster.core.domain_types import SortDirection, SortField, UserRecord

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

SortKey = int | float | str | None


def parse_leading_int(value: object) -> int | float:
    """Leading-integer parse of value; NaN when there is no leading integer."""
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match("" if value is None else str(value))
    return int(match.group(1)) if match else math.nan


def _coerce_date(value: object) -> float:
    parsed = parse_admission_date(value)
    return parsed.timestamp() if parsed is not None else math.nan


def _coerce_text(value: object) -> str | None:
    return None if value is None else str(value).lower()


_COERCIONS: dict[SortField, Callable[[object], SortKey]] = {
    SortField.ID: parse_leading_int,
    SortField.NAME: _coerce_text,
    SortField.EMAIL: _coerce_text,
    SortField.PHONE: _coerce_text,
    SortField.ENROLL_NUMBER: _coerce_text,
    SortField.DATE_OF_ADMISSION: _coerce_date,
}


def _incomparable(value: SortKey) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _compare(a: SortKey, b: SortKey) -> int:
    if _incomparable(a) or _incomparable(b):
        return 0
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def sort_users(
    records: list[UserRecord],
    field: SortField | str,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[UserRecord]:
    """Return records ordered by field. Raises ValueError on unknown field/direction."""
    sort_field = SortField(field)
    descending = SortDirection(direction) == SortDirection.DESC
    coerce = _COERCIONS[sort_field]
    keyed = [(coerce(r.get(sort_field.value)), r) for r in records]

    def _ordering(left: tuple, right: tuple) -> int:
        result = _compare(left[0], right[0])
        return -result if descending else result

    return [r for _, r in sorted(keyed, key=cmp_to_key(_ordering))]
