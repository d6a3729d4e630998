import pytest

from doodleboard.colors import RGBA, coerce_color, parse_hex_color, to_hex
from doodleboard.errors import InvalidArgument


def test_parse_six_digit_hex_is_opaque():
    assert parse_hex_color("#FF8000") == RGBA(255, 128, 0, 255)


def test_parse_with_alpha_and_short_forms():
    assert parse_hex_color("#11223344") == RGBA(0x11, 0x22, 0x33, 0x44)
    assert parse_hex_color("#fff") == RGBA(255, 255, 255, 255)
    assert parse_hex_color("000000") == RGBA(0, 0, 0, 255)


@pytest.mark.parametrize(
    "bad",
    [
        "#12",
        "#gggggg",
        "#1234567",
        "",
        "red",
        "#0x1234",
        "#-0000001",
        "#ff_ff_ff",
        "#+fffffff",
        "##ffffff",
        "# ffffff",
    ],
)
def test_parse_rejects_garbage(bad):
    with pytest.raises(InvalidArgument):
        parse_hex_color(bad)


def test_to_hex():
    assert to_hex(RGBA(1, 2, 255, 16)) == "#0102ff10"


def test_coerce_color():
    assert coerce_color((1, 2, 3, 4)) == RGBA(1, 2, 3, 4)
    assert coerce_color("#010203") == RGBA(1, 2, 3, 255)
    with pytest.raises(InvalidArgument):
        coerce_color((1, 2, 3))
    with pytest.raises(InvalidArgument):
        coerce_color((0, 0, 0, 256))
    with pytest.raises(InvalidArgument):
        coerce_color(7)
