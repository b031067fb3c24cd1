"""2D drawing in playfield coordinates on top of the fixed-function pipeline.

Canvas sets up an orthographic projection with the origin at the top-left of
the playfield (y grows downwards) and offers the handful of primitives the
runner needs: filled and outlined rectangles, centred panels, and named
textures drawn at an origin with an optional tint.
Ensure an active OpenGL context exists before drawing.
"""

from __future__ import annotations

from typing import Optional, Tuple

from OpenGL.GL import (
    glPushMatrix,
    glPopMatrix,
    glBegin,
    glEnd,
    glOrtho,
    glLoadIdentity,
    glMatrixMode,
    glDisable,
    glEnable,
    glBlendFunc,
    glBindTexture,
    glColor4f,
    glTexCoord2f,
    glVertex2f,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_DEPTH_TEST,
    GL_QUADS,
    GL_TEXTURE_2D,
)

from textures.texture_utils import get_texture, get_texture_size


def rgb01(color: int) -> Tuple[float, float, float]:
    return (
        ((color >> 16) & 0xFF) / 255.0,
        ((color >> 8) & 0xFF) / 255.0,
        (color & 0xFF) / 255.0,
    )


class Canvas:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._active = False

    # --------------------------- state ---------------------------------
    def begin(self) -> None:  # pragma: no cover - visual
        if self._active:
            return
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        self._active = True

    def end(self) -> None:  # pragma: no cover - visual
        if not self._active:
            return
        glDisable(GL_BLEND)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
        self._active = False

    # --------------------------- primitives ----------------------------
    def fill_rect(
        self, x: float, y: float, w: float, h: float, color: int, alpha: float = 1.0
    ) -> None:  # pragma: no cover - visual
        r, g, b = rgb01(color)
        glColor4f(r, g, b, alpha)
        glBegin(GL_QUADS)
        glVertex2f(x, y)
        glVertex2f(x + w, y)
        glVertex2f(x + w, y + h)
        glVertex2f(x, y + h)
        glEnd()

    def stroke_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        color: int,
        line_width: float = 1.0,
        alpha: float = 1.0,
    ) -> None:  # pragma: no cover - visual
        # Centred on the edge, drawn as four bands
        half = line_width / 2.0
        self.fill_rect(x - half, y - half, w + line_width, line_width, color, alpha)
        self.fill_rect(x - half, y + h - half, w + line_width, line_width, color, alpha)
        self.fill_rect(x - half, y + half, line_width, h - line_width, color, alpha)
        self.fill_rect(x + w - half, y + half, line_width, h - line_width, color, alpha)

    def panel(
        self,
        cx: float,
        cy: float,
        w: float,
        h: float,
        fill: int,
        alpha: float = 1.0,
        *,
        stroke: Optional[int] = None,
        line_width: float = 0.0,
    ) -> None:  # pragma: no cover - visual
        """Rectangle centred on (cx, cy), optionally outlined."""
        x, y = cx - w / 2.0, cy - h / 2.0
        self.fill_rect(x, y, w, h, fill, alpha)
        if stroke is not None and line_width > 0:
            self.stroke_rect(x, y, w, h, stroke, line_width)

    def draw_texture(
        self,
        name: str,
        x: float,
        y: float,
        *,
        origin: Tuple[float, float] = (0.5, 1.0),
        tint: Optional[int] = None,
    ) -> None:  # pragma: no cover - visual
        tex_id = get_texture(name)
        w, h = get_texture_size(tex_id) or (0, 0)
        left = x - w * origin[0]
        top = y - h * origin[1]
        r, g, b = rgb01(tint) if tint is not None else (1.0, 1.0, 1.0)

        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, tex_id)
        glColor4f(r, g, b, 1.0)
        glBegin(GL_QUADS)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(left, top)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(left + w, top)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(left + w, top + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(left, top + h)
        glEnd()
        glDisable(GL_TEXTURE_2D)


__all__ = ["Canvas", "rgb01"]
