"""Runner HUD: the score label in the top-left corner."""

from __future__ import annotations

import math

from config import UI_ACCENT
from ui.text_style import TextStyle

SCORE_STYLE = TextStyle(size=28, color=UI_ACCENT)


class RunnerHUD:
    def __init__(self, controller) -> None:
        self.controller = controller
        self.label = "Score: 0"

    def update(self, now: float, dt: float) -> None:
        self.label = f"Score: {math.floor(self.controller.run.score)}"

    def draw(self, text) -> None:  # pragma: no cover - visual
        text.draw_text(self.label, 18, 18, SCORE_STYLE, key="hud.score")
