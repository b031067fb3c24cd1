"""FIT scaling: keep the playfield's aspect ratio inside any window size.

The playfield is scaled uniformly to the largest size that fits the window
and centred, leaving letterbox bars on the other axis. Pointer positions are
mapped back from window pixels to playfield coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Viewport:
    x: int
    y: int
    width: int
    height: int
    scale: float

    def to_game(self, wx: float, wy: float) -> Tuple[float, float]:
        if self.scale <= 0:
            return (0.0, 0.0)
        return ((wx - self.x) / self.scale, (wy - self.y) / self.scale)

    def as_gl(self, window_height: int) -> Tuple[int, int, int, int]:
        """Viewport rect for glViewport (origin bottom-left)."""
        return (self.x, window_height - self.y - self.height, self.width, self.height)


def fit_viewport(
    window_w: int, window_h: int, game_w: int, game_h: int
) -> Viewport:
    if window_w <= 0 or window_h <= 0:
        return Viewport(0, 0, 0, 0, 0.0)
    scale = min(window_w / game_w, window_h / game_h)
    w = int(round(game_w * scale))
    h = int(round(game_h * scale))
    return Viewport((window_w - w) // 2, (window_h - h) // 2, w, h, scale)


__all__ = ["Viewport", "fit_viewport"]
