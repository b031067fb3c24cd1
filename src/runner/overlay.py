"""Centred message panels: the start screen and the game-over screen.

Only one overlay exists at a time. Showing a new one destroys the previous
overlay first, releasing its text textures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from config import HEIGHT, UI_ACCENT, WIDTH
from ui.text_style import TextStyle

TITLE_STYLE = TextStyle(size=48, color=UI_ACCENT, align="center")
BODY_STYLE = TextStyle(size=28, color=0xFFFFFF, align="center", wrap_width=380)
HINT_STYLE = TextStyle(size=20, color=0xCCCCCC, align="center", wrap_width=380)

PARTS = ("title", "body", "hint")


@dataclass
class Overlay:
    title: str
    body: str
    hint: str
    key: str
    body_style: TextStyle = BODY_STYLE
    panel_size: tuple = (420, 240)
    destroyed: bool = False

    def part_key(self, part: str) -> str:
        return f"{self.key}.{part}"

    def draw(self, canvas, text) -> None:  # pragma: no cover - visual
        cx, cy = WIDTH / 2, HEIGHT / 2
        w, h = self.panel_size
        canvas.panel(cx, cy, w, h, 0x000000, 0.65, stroke=UI_ACCENT, line_width=2)
        text.draw_text(self.title, cx, cy - 40, TITLE_STYLE, key=self.part_key("title"))
        text.draw_text_block(self.body, cx, cy + 15, self.body_style, key=self.part_key("body"))
        text.draw_text_block(self.hint, cx, cy + 70, HINT_STYLE, key=self.part_key("hint"))


class OverlayPresenter:
    def __init__(self, release: Optional[Callable[[str], None]] = None) -> None:
        self.current: Optional[Overlay] = None
        self._release = release
        self._serial = 0

    def show(
        self, title: str, body: str, hint: str, *, body_style: TextStyle = BODY_STYLE
    ) -> Overlay:
        self.hide()
        self._serial += 1
        self.current = Overlay(
            title, body, hint, key=f"overlay{self._serial}", body_style=body_style
        )
        return self.current

    def hide(self) -> None:
        old = self.current
        if old is None:
            return
        old.destroyed = True
        if self._release is not None:
            for part in PARTS:
                self._release(old.part_key(part))
        self.current = None

    def draw(self, canvas, text) -> None:  # pragma: no cover - visual
        if self.current is not None:
            self.current.draw(canvas, text)


__all__ = ["Overlay", "OverlayPresenter"]
