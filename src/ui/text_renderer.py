"""Text rendering for OpenGL with pygame fonts.

Draws 2D text in playfield coordinates; call it between `Canvas.begin()` and
`Canvas.end()`. Uses a lightweight texture cache and supports dynamic labels
(e.g., the score).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame
from OpenGL.GL import (
    glGenTextures,
    glDeleteTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    glEnable,
    glDisable,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_QUADS,
)

from ui.text_style import TextStyle, block_origin, wrap_lines


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]
    last_text: str | None = None


class TextRenderer:
    """2D text renderer for OpenGL using pygame.font.

    - draw_text() can take a `key` to reuse a texture slot for dynamic text.
    - Without a key, content is cached by (text, style) and reused.
    - release(key) frees every slot created under that key.
    """

    def __init__(self) -> None:
        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}
        self._cache: Dict[Tuple[str, TextStyle], _TexSlot] = {}
        self._slots: Dict[str, _TexSlot] = {}

    def font(self, style: TextStyle) -> pygame.font.Font:
        fkey = (style.font_family, style.size)
        font = self._fonts.get(fkey)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(style.font_family, style.size)
            self._fonts[fkey] = font
        return font

    # --------------------------- rendering ------------------------------
    def _upload_surface(self, slot: _TexSlot, surf: pygame.Surface) -> None:
        data = pygame.image.tobytes(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glTexImage2D(
            GL_TEXTURE_2D,
            0,
            GL_RGBA,
            w,
            h,
            0,
            GL_RGBA,
            GL_UNSIGNED_BYTE,
            data,
        )
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        slot.size = (w, h)

    def _get_slot_for_key(self, key: str) -> _TexSlot:
        slot = self._slots.get(key)
        if slot is None:
            tex_id = glGenTextures(1)
            slot = _TexSlot(id=tex_id, size=(0, 0), last_text=None)
            self._slots[key] = slot
        return slot

    def _get_slot_for_static(self, text: str, style: TextStyle) -> _TexSlot:
        cache_key = (text, style)
        slot = self._cache.get(cache_key)
        if slot is None:
            tex_id = glGenTextures(1)
            slot = _TexSlot(id=tex_id, size=(0, 0), last_text=text)
            surf = self.font(style).render(text, True, style.rgba)
            self._upload_surface(slot, surf)
            self._cache[cache_key] = slot
        return slot

    def release(self, key: str) -> None:
        """Delete the textures of `key` and of its per-line sub-keys."""
        doomed = [k for k in self._slots if k == key or k.startswith(key + "#")]
        for k in doomed:
            slot = self._slots.pop(k)
            glDeleteTextures([slot.id])

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        style: TextStyle = TextStyle(),
        *,
        key: Optional[str] = None,
    ) -> Tuple[int, int]:  # returns (w, h)
        """Draw a single-line text anchored at (x, y) using `style.align`.

        key: supply for dynamic text; same key will reuse texture and only re-upload
             when the text changes.
        """
        if key is not None:
            slot = self._get_slot_for_key(key)
            if slot.last_text != text:
                surf = self.font(style).render(text, True, style.rgba)
                self._upload_surface(slot, surf)
                slot.last_text = text
        else:
            slot = self._get_slot_for_static(text, style)

        w, h = slot.size
        draw_x, draw_y = block_origin(x, y, w, h, style.align)

        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # Note: pygame.image.tobytes with flipped=True puts the top row last, so v coords flipped
        glTexCoord2f(0.0, 1.0)
        glVertex2f(draw_x, draw_y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(draw_x + w, draw_y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(draw_x + w, draw_y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(draw_x, draw_y + h)
        glEnd()
        glDisable(GL_TEXTURE_2D)
        return w, h

    def draw_text_block(
        self,
        text: str,
        x: float,
        y: float,
        style: TextStyle = TextStyle(),
        *,
        key: Optional[str] = None,
    ) -> Tuple[int, int]:
        """Draw multi-line text, wrapping at `style.wrap_width`; returns (w, h).

        Alignment applies to the block; each line is centred inside it when
        the block is centred, otherwise left or right aligned.
        """
        font = self.font(style)
        lines = wrap_lines(text, style.wrap_width, lambda s: font.size(s)[0])
        if not lines:
            return 0, 0

        line_h = font.get_height()
        line_widths = [font.size(line)[0] for line in lines]
        max_w = max(line_widths)
        n = len(lines)
        total_h = int(line_h if n == 1 else line_h + (n - 1) * line_h * style.line_spacing)

        start_x, start_y = block_origin(x, y, max_w, total_h, style.align)
        for i, (line, lw) in enumerate(zip(lines, line_widths)):
            if style.align == "center":
                line_x = start_x + (max_w - lw) / 2
            elif style.align.endswith("right"):
                line_x = start_x + max_w - lw
            else:
                line_x = start_x
            line_y = start_y + int(i * line_h * style.line_spacing)
            line_key = f"{key}#{i}" if key is not None else None
            self.draw_text(
                line, line_x, line_y, style.with_options(align="topleft"), key=line_key
            )

        return int(max_w), int(total_h)
