import re
from typing import NamedTuple, Sequence, Union

from .errors import InvalidArgument


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


WHITE = RGBA(255, 255, 255, 255)
BLACK = RGBA(0, 0, 0, 255)

ColorLike = Union[RGBA, Sequence[int], str]

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8}")


def parse_hex_color(text: str) -> RGBA:
    """
    Parse "#rgb", "#rrggbb" or "#rrggbbaa". Alpha defaults to opaque.
    """
    if not isinstance(text, str):
        raise InvalidArgument(f"color must be a string, got {text!r}")
    digits = text.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidArgument(f"not a hex color: {text!r}")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits += "ff"
    value = int(digits, 16)
    return RGBA((value >> 24) & 255, (value >> 16) & 255, (value >> 8) & 255, value & 255)


def to_hex(color: RGBA) -> str:
    return "#{:02x}{:02x}{:02x}{:02x}".format(*color)


def coerce_color(value: ColorLike) -> RGBA:
    if isinstance(value, str):
        return parse_hex_color(value)
    try:
        channels = tuple(value)
    except TypeError:
        raise InvalidArgument(f"not a color: {value!r}") from None
    if len(channels) != 4 or not all(
        isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in channels
    ):
        raise InvalidArgument(f"color needs four channels in 0..255, got {value!r}")
    return RGBA(*channels)
