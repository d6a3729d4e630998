# canvas endpoints: create, read, brush strokes, paint-bucket fill, undo, clear
import base64
import binascii
import logging
from contextlib import contextmanager
from fastapi import APIRouter, HTTPException

from .canvas import PixelBuffer, flood_fill
from .config import MAX_CANVAS_PIXELS
from .errors import InvalidArgument
from .models import (
    CanvasIn,
    CanvasOut,
    FillIn,
    FillOut,
    RasterFillIn,
    StrokeIn,
    StrokeOut,
    UndoOut,
)
from .state import (
    clear_canvas,
    create_canvas,
    delete_canvas,
    fill_canvas,
    get_canvas,
    stroke_canvas,
    undo_canvas,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["canvases"])


def _check_size(width: int, height: int) -> None:
    if width * height > MAX_CANVAS_PIXELS:
        logger.warning("rejected %dx%d canvas (limit %d pixels)", width, height, MAX_CANVAS_PIXELS)
        raise HTTPException(
            status_code=413,
            detail=f"Canvas larger than {MAX_CANVAS_PIXELS} pixels",
        )


@contextmanager
def _known_canvas():
    try:
        yield
    except KeyError:
        raise HTTPException(status_code=404, detail="Canvas not found")


def _encode(buffer: PixelBuffer) -> str:
    return base64.b64encode(buffer.to_bytes()).decode("ascii")


def _decode(pixels: str) -> bytes:
    try:
        return base64.b64decode(pixels, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidArgument("pixels must be base64-encoded RGBA bytes") from None


@router.post("/canvases", status_code=201)
def new_canvas(c: CanvasIn):
    _check_size(c.width, c.height)
    canvas_id = create_canvas(c.width, c.height, c.background)
    return {"canvas_id": canvas_id, "width": c.width, "height": c.height}


@router.get("/canvases/{canvas_id}")
def read_canvas(canvas_id: str) -> CanvasOut:
    with _known_canvas():
        buffer, depth = get_canvas(canvas_id)
    return CanvasOut(
        canvas_id=canvas_id,
        width=buffer.width,
        height=buffer.height,
        pixels=_encode(buffer),
        undo_depth=depth,
    )


@router.delete("/canvases/{canvas_id}")
def remove_canvas(canvas_id: str):
    with _known_canvas():
        delete_canvas(canvas_id)
    return {"ok": True, "canvas_id": canvas_id}


@router.post("/canvases/{canvas_id}/stroke")
def draw(canvas_id: str, s: StrokeIn) -> StrokeOut:
    color = None if s.tool == "eraser" else s.color
    with _known_canvas():
        painted, depth = stroke_canvas(canvas_id, s.points, color, s.width)
    return StrokeOut(painted=painted, undo_depth=depth)


@router.post("/canvases/{canvas_id}/fill")
def fill(canvas_id: str, f: FillIn) -> FillOut:
    with _known_canvas():
        filled, depth = fill_canvas(canvas_id, f.x, f.y, f.color)
    return FillOut(filled=filled, undo_depth=depth)


@router.post("/canvases/{canvas_id}/undo")
def undo(canvas_id: str) -> UndoOut:
    with _known_canvas():
        undone, depth = undo_canvas(canvas_id)
    return UndoOut(undone=undone, undo_depth=depth)


@router.post("/canvases/{canvas_id}/clear")
def clear(canvas_id: str):
    with _known_canvas():
        depth = clear_canvas(canvas_id)
    return {"ok": True, "undo_depth": depth}


@router.post("/fill")
def fill_raster(f: RasterFillIn) -> FillOut:
    """
    Stateless paint bucket: decode the buffer, fill, send it back.
    """
    _check_size(f.width, f.height)
    buffer = PixelBuffer.from_bytes(f.width, f.height, _decode(f.pixels))
    filled = flood_fill(buffer, f.x, f.y, f.color)
    return FillOut(filled=filled, pixels=_encode(buffer))
