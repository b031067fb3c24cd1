"""Minimal arcade physics for a side-on runner.

One dynamic body (the player) falls under its own gravity and rests on a flat
ground line; everything else is a static, gravity-free box that only takes
part in overlap tests. Bodies use a bottom-centre origin and their hitbox is
described as a size plus an offset from the texture's top-left corner, so the
collision box can differ from the drawn sprite.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Tuple

import pygame

Size = Tuple[float, float]
OverlapFn = Callable[[object, object], None]


def hitbox_rect(
    x: float, y: float, texture_size: Size, size: Size, offset: Size
) -> pygame.Rect:
    """Return the collision rectangle of a bottom-centre anchored sprite.

    `pygame.Rect` holds whole pixels, so the box is rounded to the nearest
    pixel here rather than left to Rect's float truncation.
    """
    tw, th = texture_size
    left = x - tw / 2.0 + offset[0]
    top = y - th + offset[1]
    return pygame.Rect(round(left), round(top), round(size[0]), round(size[1]))


class ArcadeBody:
    def __init__(
        self,
        x: float,
        y: float,
        *,
        texture_size: Size,
        size: Size | None = None,
        offset: Size = (0.0, 0.0),
        gravity_y: float = 0.0,
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.texture_size = texture_size
        self.size = size or texture_size
        self.offset = offset
        self.velocity_y = 0.0
        self.gravity_y = float(gravity_y)
        # Set by the world after each step: resting on the ground this frame
        self.blocked_down = False

    @property
    def grounded(self) -> bool:
        return self.blocked_down

    @property
    def top(self) -> float:
        return self.y - self.texture_size[1] + self.offset[1]

    @property
    def bottom(self) -> float:
        return self.top + self.size[1]

    def rect(self) -> pygame.Rect:
        return hitbox_rect(self.x, self.y, self.texture_size, self.size, self.offset)

    def set_hitbox(self, size: Size, offset: Size) -> None:
        self.size = size
        self.offset = offset


class ArcadeWorld:
    """Steps the player body and reports player/obstacle overlaps.

    Overlap groups are live collections (usually the run's obstacle list):
    they are re-read every step, so callers mutate them in place.
    """

    def __init__(
        self,
        *,
        width: float,
        height: float,
        ground_y: float,
        player: ArcadeBody,
    ) -> None:
        self.width = width
        self.height = height
        self.ground_y = float(ground_y)
        self.player = player
        self.paused = False
        self._overlaps: List[Tuple[Iterable, OverlapFn]] = []

    # ------------------------------------------------------------------
    def add_overlap(self, group: Iterable, callback: OverlapFn) -> None:
        self._overlaps.append((group, callback))

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def reset_player(self, x: float) -> None:
        """Put the player back on the ground at `x`, at rest."""
        body = self.player
        body.x = float(x)
        body.y = self.ground_y - (body.bottom - body.y)
        body.velocity_y = 0.0
        body.blocked_down = True

    # ------------------------------------------------------------------
    def step(self, dt_ms: float) -> None:
        if self.paused:
            return
        dt = dt_ms / 1000.0
        body = self.player
        body.velocity_y += body.gravity_y * dt
        body.y += body.velocity_y * dt

        overshoot = body.bottom - self.ground_y
        if overshoot >= 0.0 and body.velocity_y >= 0.0:
            body.y -= overshoot
            body.velocity_y = 0.0
            body.blocked_down = True
        else:
            body.blocked_down = False

        # Collide with the top of the world
        if body.top < 0.0:
            body.y -= body.top
            if body.velocity_y < 0.0:
                body.velocity_y = 0.0

        self._check_overlaps()

    def _check_overlaps(self) -> None:
        player_rect = self.player.rect()
        for group, callback in self._overlaps:
            for other in list(group):
                if not getattr(other, "alive", True):
                    continue
                if player_rect.colliderect(other.rect()):
                    callback(self.player, other)
                    if self.paused:
                        return


__all__ = ["ArcadeBody", "ArcadeWorld", "hitbox_rect"]
