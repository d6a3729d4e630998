"""
Raster canvas: an RGBA pixel buffer, the paint-bucket fill and a bounded
undo history.

``PixelBuffer.data`` is a flat, row-major bytearray of ``width * height * 4``
bytes; pixel (x, y) starts at ``(y * width + x) * 4``.
"""
import logging
import math
from collections import deque
from typing import Deque, List, Optional, Sequence, Tuple

from .colors import WHITE, ColorLike, RGBA, coerce_color
from .errors import InvalidArgument, OutOfRange

logger = logging.getLogger(__name__)


class PixelBuffer:
    def __init__(
        self,
        width: int,
        height: int,
        data: Optional[bytes] = None,
        background: ColorLike = WHITE,
    ) -> None:
        if width <= 0 or height <= 0:
            raise InvalidArgument(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        size = width * height * 4
        if data is None:
            self.data = bytearray(bytes(coerce_color(background)) * (width * height))
        else:
            if len(data) != size:
                raise InvalidArgument(
                    f"expected {size} bytes for a {width}x{height} RGBA buffer, got {len(data)}"
                )
            self.data = bytearray(data)

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "PixelBuffer":
        return cls(width, height, data=data)

    def to_bytes(self) -> bytes:
        return bytes(self.data)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, data=self.data)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfRange(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return (y * self.width + x) * 4

    def get_pixel(self, x: int, y: int) -> RGBA:
        pos = self._offset(x, y)
        return RGBA(*self.data[pos:pos + 4])

    def set_pixel(self, x: int, y: int, color: ColorLike) -> None:
        pos = self._offset(x, y)
        self.data[pos:pos + 4] = bytes(coerce_color(color))

    def fill(self, color: ColorLike) -> None:
        self.data[:] = bytes(coerce_color(color)) * (self.width * self.height)

    def is_solid(self, color: ColorLike) -> bool:
        return self.data == bytes(coerce_color(color)) * (self.width * self.height)

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (self.width, self.height, self.data) == (other.width, other.height, other.data)

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height})"


def flood_fill(buffer: PixelBuffer, seed_x: int, seed_y: int, fill_color: ColorLike) -> int:
    """
    Paint-bucket fill, mutating ``buffer`` in place.

    Recolors every pixel 4-connected to the seed (up/down/left/right, never
    diagonals) whose color exactly equals the seed's color. Returns the
    number of pixels recolored; 0 when the seed already has ``fill_color``.
    Raises OutOfRange, with the buffer untouched, for a seed outside it.
    """
    fill = bytes(coerce_color(fill_color))
    target = bytes(buffer.get_pixel(seed_x, seed_y))
    if target == fill:
        return 0

    width, height, data = buffer.width, buffer.height, buffer.data
    filled = 0
    stack: List[Tuple[int, int]] = [(seed_x, seed_y)]
    while stack:
        x, y = stack.pop()
        pos = (y * width + x) * 4
        # a recolored pixel no longer matches target, so it is never refilled
        if data[pos:pos + 4] != target:
            continue
        data[pos:pos + 4] = fill
        filled += 1

        if x > 0:
            stack.append((x - 1, y))
        if x < width - 1:
            stack.append((x + 1, y))
        if y > 0:
            stack.append((x, y - 1))
        if y < height - 1:
            stack.append((x, y + 1))

    logger.debug("flood fill from (%d, %d) recolored %d pixels", seed_x, seed_y, filled)
    return filled


MAX_STROKE_WIDTH = 50


def _disc(cx: int, cy: int, width: int) -> List[Tuple[int, int]]:
    radius = width / 2
    reach = int(math.ceil(radius))
    limit = radius * radius
    return [
        (cx + dx, cy + dy)
        for dy in range(-reach, reach + 1)
        for dx in range(-reach, reach + 1)
        if dx * dx + dy * dy <= limit
    ]


def stroke(
    buffer: PixelBuffer,
    points: Sequence[Tuple[int, int]],
    color: ColorLike,
    width: int = 5,
) -> int:
    """
    Draw a polyline through ``points`` with round caps, ``width`` pixels
    across, without antialiasing. Points may lie outside the buffer; the
    line is clipped to it. Returns the number of pixels painted.
    """
    if not 1 <= width <= MAX_STROKE_WIDTH:
        raise InvalidArgument(f"stroke width must be 1..{MAX_STROKE_WIDTH}, got {width}")
    if not points:
        raise InvalidArgument("a stroke needs at least one point")
    paint = bytes(coerce_color(color))

    centers = [tuple(points[0])]
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        steps = max(abs(x1 - x0), abs(y1 - y0))
        for i in range(1, steps + 1):
            centers.append((x0 + round((x1 - x0) * i / steps), y0 + round((y1 - y0) * i / steps)))

    touched = set()
    for cx, cy in centers:
        touched.update(p for p in _disc(cx, cy, width) if buffer.in_bounds(*p))

    data, row = buffer.data, buffer.width
    for x, y in touched:
        pos = (y * row + x) * 4
        data[pos:pos + 4] = paint
    return len(touched)


class UndoStack:
    """
    Bounded history of buffer snapshots. Once full, pushing drops the
    oldest snapshot.
    """

    def __init__(self, max_size: int = 20) -> None:
        if max_size <= 0:
            raise InvalidArgument(f"undo depth must be positive, got {max_size}")
        self.max_size = max_size
        self._snapshots: Deque[PixelBuffer] = deque(maxlen=max_size)

    def push(self, buffer: PixelBuffer) -> None:
        self._snapshots.append(buffer.copy())

    def pop(self) -> Optional[PixelBuffer]:
        if not self._snapshots:
            return None
        return self._snapshots.pop()

    def clear(self) -> None:
        self._snapshots.clear()

    def __len__(self) -> int:
        return len(self._snapshots)
