"""Tests for the user id sequence — seeding from the roster and advancing."""

from roster.core.user_ids import UserIdSequence, compute_next_user_id


def test_empty_roster_starts_at_zero():
    assert compute_next_user_id([]) == 0


def test_next_id_is_max_plus_one(sample_users):
    assert compute_next_user_id(sample_users) == 8


def test_non_numeric_ids_count_as_zero():
    assert compute_next_user_id([{"id": "abc"}, {"id": "xyz"}]) == 1


def test_mixed_ids_use_numeric_max():
    assert compute_next_user_id([{"id": "abc"}, {"id": "41"}, {"id": 3}]) == 42


def test_leading_integer_prefix_is_used():
    assert compute_next_user_id([{"id": "12-b"}]) == 13


def test_sequence_peek_does_not_advance():
    seq = UserIdSequence(next_id=5)
    assert seq.peek() == "5"
    assert seq.peek() == "5"


def test_sequence_advance_increments():
    seq = UserIdSequence(next_id=5)
    seq.advance()
    assert seq.peek() == "6"


def test_seeded_from_roster(sample_users):
    assert UserIdSequence.seeded_from(sample_users).next_id == 8


def test_observe_skips_past_higher_numeric_id():
    seq = UserIdSequence(next_id=8)
    seq.observe("8")
    assert seq.peek() == "9"
    seq.observe("20")
    assert seq.peek() == "21"


def test_observe_never_moves_backwards():
    seq = UserIdSequence(next_id=8)
    seq.observe("3")
    assert seq.peek() == "8"


def test_observe_ignores_non_numeric_id():
    seq = UserIdSequence(next_id=8)
    seq.observe("abc")
    assert seq.peek() == "8"
