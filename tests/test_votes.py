import pytest

from doodleboard.errors import InvalidArgument
from doodleboard.votes import Reconciliation, VoteType, parse_vote_type, reconcile

UP, DOWN = VoteType.UP, VoteType.DOWN


@pytest.mark.parametrize(
    "previous, requested, expected",
    [
        (None, UP, Reconciliation(UP, 1, 0)),
        (None, DOWN, Reconciliation(DOWN, 0, 1)),
        (UP, UP, Reconciliation(None, -1, 0)),
        (UP, DOWN, Reconciliation(DOWN, 1, -1)),
        (DOWN, UP, Reconciliation(UP, -1, 1)),
        (DOWN, DOWN, Reconciliation(None, 0, -1)),
    ],
)
def test_reconcile_table(previous, requested, expected):
    assert reconcile(previous, requested) == expected


def test_delta_sum_never_exceeds_one_unit():
    for previous in (None, UP, DOWN):
        for requested in (UP, DOWN):
            result = reconcile(previous, requested)
            assert result.up_delta + result.down_delta in (-1, 0, 1)


def test_same_request_twice_toggles_back_to_none():
    first = reconcile(None, UP)
    assert first.next_state is UP
    assert reconcile(first.next_state, UP).next_state is None

    first = reconcile(None, "down")
    assert reconcile(first.next_state, "down").next_state is None


def test_accepts_plain_strings():
    assert reconcile("up", "down") == Reconciliation(DOWN, 1, -1)
    assert parse_vote_type("up") is UP


@pytest.mark.parametrize("bad", ["upvote", "", "UP", None, 1, "none"])
def test_invalid_requested_type(bad):
    with pytest.raises(InvalidArgument):
        reconcile(None, bad)


def test_invalid_previous_type():
    with pytest.raises(InvalidArgument):
        reconcile("sideways", UP)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        parse_vote_type("downvote")
