"""Procedural texture generation for OpenGL.

Textures are plain or rounded rectangles with an optional outline, rasterised
with numpy (see `textures.pixels`) and uploaded once. A small registry maps
texture names to GL ids and sizes so drawing code can refer to "player" or
"bar" instead of ids.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np
import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glDeleteTextures,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_CLAMP_TO_EDGE,
)

from textures.pixels import build_rect_pixels

_TEXTURES: Dict[str, int] = {}
_TEXTURE_SIZES: Dict[int, Tuple[int, int]] = {}


def upload_pixels(pixels: np.ndarray) -> int:
    """Upload an RGBA array as a linear-filtered, edge-clamped GL texture."""
    height, width = pixels.shape[:2]
    surface = pygame.image.frombuffer(pixels.tobytes(), (width, height), "RGBA")
    texture_data = pygame.image.tobytes(surface, "RGBA", True)

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        texture_data,
    )
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)

    _TEXTURE_SIZES[int(texture_id)] = (int(width), int(height))
    return int(texture_id)


def generate_texture(
    name: str,
    width: int,
    height: int,
    fill: int,
    *,
    stroke: Optional[int] = None,
    line_width: float = 0.0,
    radius: float = 0.0,
) -> int:
    """Create a rectangle texture and register it under `name`.

    Generating a name twice replaces the old texture.
    """
    pixels = build_rect_pixels(
        width, height, fill, stroke=stroke, line_width=line_width, radius=radius
    )
    old = _TEXTURES.pop(name, None)
    if old is not None:
        glDeleteTextures([old])
        _TEXTURE_SIZES.pop(old, None)
    texture_id = upload_pixels(pixels)
    _TEXTURES[name] = texture_id
    return texture_id


def get_texture(name: str) -> int:
    try:
        return _TEXTURES[name]
    except KeyError:
        raise ValueError(f"Unknown texture: {name!r}") from None


def get_texture_size(tex: int | str) -> Optional[Tuple[int, int]]:
    """Return (width, height) for a texture id or registered name, if known."""
    if isinstance(tex, str):
        tex = _TEXTURES.get(tex, -1)
    return _TEXTURE_SIZES.get(int(tex))
