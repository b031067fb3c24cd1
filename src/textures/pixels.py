"""numpy rasterisation of rectangle sprites (no GL required)."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

RGBA = Tuple[int, int, int, int]


def hex_to_rgba(color: int, alpha: float = 1.0) -> RGBA:
    """0xRRGGBB + alpha (0..1) -> (r, g, b, a) bytes."""
    a = int(round(255 * max(0.0, min(1.0, alpha))))
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, a)


def rounded_rect_mask(
    width: int, height: int, radius: float = 0.0, inset: float = 0.0
) -> np.ndarray:
    """Boolean (height, width) mask of pixel centres inside a rounded rect.

    The rect spans [inset, size - inset] on both axes; the corner radius is
    reduced by the inset so nested masks stay concentric.
    """
    r = max(0.0, radius - inset)
    r = min(r, (width - 2 * inset) / 2.0, (height - 2 * inset) / 2.0)
    r = max(0.0, r)
    px = np.arange(width, dtype=np.float64) + 0.5
    py = np.arange(height, dtype=np.float64) + 0.5
    dx = px - np.clip(px, inset + r, width - inset - r)
    dy = py - np.clip(py, inset + r, height - inset - r)
    dist_sq = dy[:, None] ** 2 + dx[None, :] ** 2
    return dist_sq <= r * r + 1e-9


def build_rect_pixels(
    width: int,
    height: int,
    fill: int,
    *,
    stroke: Optional[int] = None,
    line_width: float = 0.0,
    radius: float = 0.0,
    alpha: float = 1.0,
) -> np.ndarray:
    """Rasterise a filled (optionally rounded, optionally outlined) rectangle.

    Returns a (height, width, 4) uint8 RGBA array, row 0 at the top. The
    outline is centred on the edge, so only half of `line_width` is visible.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Texture size must be positive, got {width}x{height}")
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    outer = rounded_rect_mask(width, height, radius)
    pixels[outer] = hex_to_rgba(fill, alpha)
    if stroke is not None and line_width > 0:
        inner = rounded_rect_mask(width, height, radius, inset=line_width / 2.0)
        pixels[outer & ~inner] = hex_to_rgba(stroke, 1.0)
    return pixels


__all__ = ["hex_to_rgba", "rounded_rect_mask", "build_rect_pixels"]
