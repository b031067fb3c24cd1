"""Text style options and word wrapping.

A style is built from a small set of recognised options (font family, size,
color, alignment, line spacing, wrap width); anything else is rejected so a
typo doesn't silently fall back to defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Callable, List, Optional, Tuple

from config import UI_FONT
from textures.pixels import hex_to_rgba

ALIGNMENTS = ("topleft", "topright", "bottomleft", "bottomright", "center")


@dataclass(frozen=True)
class TextStyle:
    font_family: str = UI_FONT
    size: int = 24
    color: int = 0xFFFFFF
    align: str = "topleft"
    line_spacing: float = 1.2
    wrap_width: Optional[int] = None

    @classmethod
    def from_options(cls, **options) -> "TextStyle":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown text style option(s): {', '.join(unknown)}")
        align = options.get("align", cls.align)
        if align not in ALIGNMENTS:
            raise ValueError(f"Unknown text alignment: {align!r}")
        return cls(**options)

    def with_options(self, **options) -> "TextStyle":
        merged = {f.name: getattr(self, f.name) for f in fields(self)}
        merged.update(options)
        return TextStyle.from_options(**merged)

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return hex_to_rgba(self.color)


def wrap_lines(
    text: str, width: Optional[int], measure: Callable[[str], int]
) -> List[str]:
    """Greedy word wrap; explicit newlines are kept and long words overflow."""
    paragraphs = text.split("\n")
    if width is None or width <= 0:
        return paragraphs
    lines: List[str] = []
    for para in paragraphs:
        words = para.split()
        if not words:
            lines.append("")
            continue
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if measure(candidate) <= width:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
    return lines


def block_origin(
    x: float, y: float, w: float, h: float, align: str
) -> Tuple[float, float]:
    """Top-left corner of a w x h block anchored at (x, y) with `align`."""
    if align == "center":
        return x - w / 2, y - h / 2
    start_x = x - w if align.endswith("right") else x
    start_y = y - h if align.startswith("bottom") else y
    return start_x, start_y


__all__ = ["ALIGNMENTS", "TextStyle", "wrap_lines", "block_origin"]
