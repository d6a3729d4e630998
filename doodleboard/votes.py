"""
Toggle-vote reconciliation.

A user holds at most one vote per drawing. Requesting the type already held
retracts it; requesting the other type switches it. ``reconcile`` turns
(previous, requested) into the next stored state and the counter deltas the
caller applies. It performs no I/O.
"""
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple, Union

from .errors import InvalidArgument


class VoteType(str, Enum):
    UP = "up"
    DOWN = "down"


class Reconciliation(NamedTuple):
    next_state: Optional[VoteType]
    up_delta: int
    down_delta: int


# (previous, requested) -> outcome; previous None means no vote row yet
_TABLE: Dict[Tuple[Optional[VoteType], VoteType], Reconciliation] = {
    (None, VoteType.UP): Reconciliation(VoteType.UP, 1, 0),
    (None, VoteType.DOWN): Reconciliation(VoteType.DOWN, 0, 1),
    (VoteType.UP, VoteType.UP): Reconciliation(None, -1, 0),
    (VoteType.UP, VoteType.DOWN): Reconciliation(VoteType.DOWN, 1, -1),
    (VoteType.DOWN, VoteType.UP): Reconciliation(VoteType.UP, -1, 1),
    (VoteType.DOWN, VoteType.DOWN): Reconciliation(None, 0, -1),
}


def parse_vote_type(value: Union[VoteType, str, None]) -> VoteType:
    """
    Coerce ``value`` to a VoteType. Anything but "up"/"down" is rejected.
    """
    if isinstance(value, VoteType):
        return value
    if isinstance(value, str):
        try:
            return VoteType(value)
        except ValueError:
            pass
    raise InvalidArgument(f"vote type must be 'up' or 'down', got {value!r}")


def reconcile(
    previous: Union[VoteType, str, None],
    requested: Union[VoteType, str],
) -> Reconciliation:
    """
    Compute the next vote state and the up/down counter deltas.

    Both arguments are validated before the lookup, so a bad value never
    yields a partial result.
    """
    prev = None if previous is None else parse_vote_type(previous)
    req = parse_vote_type(requested)
    return _TABLE[(prev, req)]
