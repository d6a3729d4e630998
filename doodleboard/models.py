from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, Field

from .config import DEFAULT_BACKGROUND


class VoteIn(BaseModel):
    """
    vote_type is left as a plain string so that unknown values reach
    reconcile() and are rejected as InvalidArgument (400).
    """
    user_id: int = Field(..., examples=[1])
    drawing_id: int = Field(..., examples=[42])
    vote_type: str = Field(..., examples=["up"])


class Tally(BaseModel):
    drawing_id: int
    up: int
    down: int
    score: int


class VoteOut(BaseModel):
    ok: bool = True
    drawing_id: int
    vote: Optional[str]
    up_delta: int
    down_delta: int
    tally: Tally


class CanvasIn(BaseModel):
    width: int = Field(..., gt=0, examples=[400])
    height: int = Field(..., gt=0, examples=[250])
    background: str = Field(DEFAULT_BACKGROUND, examples=["#ffffff"])


class CanvasOut(BaseModel):
    """
    pixels: base64 of the row-major RGBA bytes.
    """
    canvas_id: str
    width: int
    height: int
    pixels: str
    undo_depth: int


class FillIn(BaseModel):
    x: int = Field(..., examples=[10])
    y: int = Field(..., examples=[20])
    color: str = Field(..., examples=["#ff0000"])


class RasterFillIn(FillIn):
    """
    Stateless fill: the caller ships the whole buffer and gets it back.
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    pixels: str


class FillOut(BaseModel):
    filled: int
    undo_depth: Optional[int] = None
    pixels: Optional[str] = None


class UndoOut(BaseModel):
    undone: bool
    undo_depth: int


class StrokeIn(BaseModel):
    """
    The eraser ignores color and paints the canvas background.
    """
    points: List[Tuple[int, int]] = Field(..., min_length=1, examples=[[[0, 0], [40, 25]]])
    color: str = Field("#000000", examples=["#000000"])
    width: int = Field(5, ge=1, le=50)
    tool: Literal["brush", "eraser"] = "brush"


class StrokeOut(BaseModel):
    painted: int
    undo_depth: int
