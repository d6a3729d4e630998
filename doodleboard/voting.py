from fastapi import APIRouter

from .models import Tally, VoteIn, VoteOut
from .state import cast_vote, get_vote, query_tally

router = APIRouter(prefix="/votes", tags=["votes"])


@router.post("")
def vote(v: VoteIn) -> VoteOut:
    """
    Toggle vote: the same type twice retracts, the other type switches.
    """
    result, tally = cast_vote(v.user_id, v.drawing_id, v.vote_type)
    return VoteOut(
        drawing_id=v.drawing_id,
        vote=result.next_state.value if result.next_state else None,
        up_delta=result.up_delta,
        down_delta=result.down_delta,
        tally=Tally(drawing_id=v.drawing_id, **tally),
    )


@router.get("/{drawing_id}")
def get_tally(drawing_id: int) -> Tally:
    return Tally(drawing_id=drawing_id, **query_tally(drawing_id))


@router.get("/{drawing_id}/users/{user_id}")
def get_user_vote(drawing_id: int, user_id: int):
    current = get_vote(user_id, drawing_id)
    return {
        "drawing_id": drawing_id,
        "user_id": user_id,
        "vote": current.value if current else None,
    }
