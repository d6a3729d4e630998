# in-memory state + helpers
import logging
import threading
import uuid
from typing import Dict, Optional, Sequence, Tuple

from .canvas import PixelBuffer, UndoStack, flood_fill, stroke
from .colors import ColorLike, coerce_color
from .config import MAX_CANVASES, UNDO_DEPTH
from .errors import CapacityExceeded
from .votes import Reconciliation, VoteType, reconcile

logger = logging.getLogger(__name__)

# votes[(user_id, drawing_id)] = VoteType; at most one row per pair
votes: Dict[Tuple[int, int], VoteType] = {}

# canvases[canvas_id] = (buffer, undo history, background color)
canvases: Dict[str, Tuple[PixelBuffer, UndoStack, ColorLike]] = {}

# guards both dicts; every public helper below takes it
_lock = threading.Lock()


def reset() -> None:
    with _lock:
        votes.clear()
        canvases.clear()


# ----------- votes -----------

def get_vote(user_id: int, drawing_id: int) -> Optional[VoteType]:
    with _lock:
        return votes.get((user_id, drawing_id))


def _tally_locked(drawing_id: int) -> Dict[str, int]:
    up = down = 0
    for (_, did), vote_type in votes.items():
        if did != drawing_id:
            continue
        if vote_type is VoteType.UP:
            up += 1
        else:
            down += 1
    return {"up": up, "down": down, "score": up - down}


def query_tally(drawing_id: int) -> Dict[str, int]:
    """
    Up/down counts for a drawing, aggregated live from the vote rows.
    """
    with _lock:
        return _tally_locked(drawing_id)


def cast_vote(user_id: int, drawing_id: int, requested) -> Tuple[Reconciliation, Dict[str, int]]:
    """
    Read the user's current vote, reconcile it against the request, then
    delete the row (retraction) or upsert the new type.
    The whole read-reconcile-write runs under one lock.
    """
    key = (user_id, drawing_id)
    with _lock:
        previous = votes.get(key)
        result = reconcile(previous, requested)
        if result.next_state is None:
            votes.pop(key, None)
        else:
            votes[key] = result.next_state
        tally = _tally_locked(drawing_id)

    logger.info(
        "user %s vote on drawing %s: %s -> %s",
        user_id,
        drawing_id,
        previous.value if previous else None,
        result.next_state.value if result.next_state else None,
    )
    return result, tally


# ----------- canvases -----------
# all canvas helpers raise KeyError for an unknown id

def create_canvas(width: int, height: int, background: ColorLike) -> str:
    """
    Raises CapacityExceeded once MAX_CANVASES are stored.
    """
    with _lock:
        if len(canvases) >= MAX_CANVASES:
            raise CapacityExceeded(f"canvas limit of {MAX_CANVASES} reached")
        buffer = PixelBuffer(width, height, background=background)
        canvas_id = uuid.uuid4().hex
        canvases[canvas_id] = (buffer, UndoStack(UNDO_DEPTH), background)
    logger.info("created %dx%d canvas %s", width, height, canvas_id)
    return canvas_id


def delete_canvas(canvas_id: str) -> None:
    with _lock:
        del canvases[canvas_id]
    logger.info("deleted canvas %s", canvas_id)


def get_canvas(canvas_id: str) -> Tuple[PixelBuffer, int]:
    """
    A copy of the canvas taken under the lock, and its undo depth.
    """
    with _lock:
        buffer, history, _ = canvases[canvas_id]
        return buffer.copy(), len(history)


def fill_canvas(canvas_id: str, x: int, y: int, color: ColorLike) -> Tuple[int, int]:
    """
    Paint-bucket fill on a stored canvas; returns (pixels filled, undo depth).
    An undo snapshot is recorded only when the fill changes something.
    """
    fill = coerce_color(color)
    with _lock:
        buffer, history, _ = canvases[canvas_id]
        if buffer.get_pixel(x, y) == fill:
            return 0, len(history)
        history.push(buffer)
        filled = flood_fill(buffer, x, y, fill)
        depth = len(history)
    logger.debug("canvas %s: fill at (%d, %d) recolored %d", canvas_id, x, y, filled)
    return filled, depth


def stroke_canvas(
    canvas_id: str,
    points: Sequence[Tuple[int, int]],
    color: Optional[ColorLike],
    width: int,
) -> Tuple[int, int]:
    """
    Brush stroke; color None is the eraser, which paints the background.
    Returns (pixels painted, undo depth).
    """
    with _lock:
        buffer, history, background = canvases[canvas_id]
        paint = coerce_color(background if color is None else color)
        scratch = buffer.copy()
        painted = stroke(scratch, points, paint, width)
        if scratch != buffer:
            history.push(buffer)
            buffer.data[:] = scratch.data
        depth = len(history)
    logger.debug("canvas %s: stroke of %d points painted %d", canvas_id, len(points), painted)
    return painted, depth


def undo_canvas(canvas_id: str) -> Tuple[bool, int]:
    with _lock:
        buffer, history, _ = canvases[canvas_id]
        previous = history.pop()
        if previous is not None:
            buffer.data[:] = previous.data
        return previous is not None, len(history)


def clear_canvas(canvas_id: str) -> int:
    """
    Repaint the background; a canvas that is already blank records no undo step.
    """
    with _lock:
        buffer, history, background = canvases[canvas_id]
        if not buffer.is_solid(background):
            history.push(buffer)
            buffer.fill(background)
        return len(history)
