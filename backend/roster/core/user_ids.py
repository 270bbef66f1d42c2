"""User Id Sequence — client-side id allocation for new roster records.

Invariants:
    - Seed is max(leading-int id, 0 for non-numeric) + 1, or 0 for an empty roster
    - peek() never advances; advance() is called only after the store accepted the record
    - observe() moves the counter past a caller-supplied numeric id, never backwards
    - Ids are handed out as text (the store's id type)

Design Decisions:
    - Dataclass owned by the controller instead of a module-level counter
"""

from dataclasses import dataclass

from roster.core.domain_types import RecordField, UserId, UserRecord
from roster.core.sort_users import parse_leading_int


def compute_next_user_id(records: list[UserRecord]) -> int:
    """Next free numeric id given the current roster snapshot."""
    if not records:
        return 0
    numeric = []
    for record in records:
        parsed = parse_leading_int(record.get(RecordField.ID.value))
        numeric.append(0 if isinstance(parsed, float) else parsed)  # NaN -> 0
    return max(numeric) + 1


@dataclass
class UserIdSequence:
    """Monotonic id counter seeded once at startup."""

    next_id: int = 0

    @classmethod
    def seeded_from(cls, records: list[UserRecord]) -> "UserIdSequence":
        return cls(next_id=compute_next_user_id(records))

    def peek(self) -> UserId:
        return UserId(str(self.next_id))

    def advance(self) -> None:
        self.next_id += 1

    def observe(self, user_id: object) -> None:
        """Skip past an id allocated elsewhere so peek() never repeats it."""
        parsed = parse_leading_int(user_id)
        if not isinstance(parsed, float):
            self.next_id = max(self.next_id, parsed + 1)
