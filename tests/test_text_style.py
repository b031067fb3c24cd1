import pytest

from config import UI_FONT
from ui.text_style import TextStyle, block_origin, wrap_lines


def measure(s):
    return len(s) * 10


def test_defaults():
    style = TextStyle()
    assert style.font_family == UI_FONT
    assert style.align == "topleft"
    assert style.wrap_width is None


def test_from_options_accepts_known_options():
    style = TextStyle.from_options(size=48, color=0xF5E6B3, align="center")
    assert style.size == 48
    assert style.rgba == (0xF5, 0xE6, 0xB3, 255)


def test_unknown_option_is_rejected():
    with pytest.raises(ValueError, match="fontWeight"):
        TextStyle.from_options(size=12, fontWeight="bold")


def test_unknown_alignment_is_rejected():
    with pytest.raises(ValueError):
        TextStyle.from_options(align="middle")


def test_with_options_keeps_other_fields():
    base = TextStyle.from_options(size=28, wrap_width=380)
    smaller = base.with_options(size=22)
    assert smaller.size == 22
    assert smaller.wrap_width == 380
    assert base.size == 28


def test_wrap_lines_is_greedy():
    lines = wrap_lines("aaa bbb ccc dddd", 80, measure)
    assert lines == ["aaa bbb", "ccc dddd"]


def test_wrap_lines_keeps_newlines_and_long_words():
    assert wrap_lines("one\n\ntwo", None, measure) == ["one", "", "two"]
    assert wrap_lines("supercalifragilistic x", 50, measure) == [
        "supercalifragilistic",
        "x",
    ]


@pytest.mark.parametrize(
    "align, expected",
    [
        ("topleft", (100, 50)),
        ("topright", (60, 50)),
        ("bottomleft", (100, 30)),
        ("bottomright", (60, 30)),
        ("center", (80, 40)),
    ],
)
def test_block_origin(align, expected):
    assert block_origin(100, 50, 40, 20, align) == expected
