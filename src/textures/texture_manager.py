"""Centralized texture setup for the runner scene.

`generate_runner_textures()` creates the three named sprites the game draws
(player, hurdle, bar) and returns their GL ids keyed by name. Call it once
after the GL context exists.
"""

from __future__ import annotations

from typing import Dict

from config import PLAYER_TEXTURE_SIZE, UI_ACCENT
from textures.texture_utils import generate_texture

# name -> (width, height, fill, stroke, line width, corner radius)
RUNNER_TEXTURES = {
    "player": (*PLAYER_TEXTURE_SIZE, UI_ACCENT, 0x8A6B3A, 4, 14),
    "hurdle": (40, 35, 0xFFAA33, 0x6B3D00, 3, 0),
    "bar": (70, 34, 0x66CCFF, 0x003F55, 4, 0),
}


def generate_runner_textures() -> Dict[str, int]:
    ids = {}
    for name, (w, h, fill, stroke, line_width, radius) in RUNNER_TEXTURES.items():
        ids[name] = generate_texture(
            name, w, h, fill, stroke=stroke, line_width=line_width, radius=radius
        )
    print(f"[Textures] Generated {len(ids)} runner textures.")
    return ids
