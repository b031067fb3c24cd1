"""Run data: run/player state, obstacles and the two player hitbox profiles."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Tuple

import pygame

from config import BASE_SPEED
from core.physics import hitbox_rect
from core.runtime import PlayerBody


class RunPhase(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class RunState:
    speed: float = BASE_SPEED
    score: float = 0.0
    started: bool = False
    over: bool = False

    @property
    def phase(self) -> RunPhase:
        if not self.started:
            return RunPhase.NOT_STARTED
        if self.over:
            return RunPhase.GAME_OVER
        return RunPhase.RUNNING

    @property
    def running(self) -> bool:
        return self.started and not self.over


@dataclass(frozen=True)
class HitboxProfile:
    name: str
    size: Tuple[float, float]
    offset: Tuple[float, float]


# Player texture is 45x120; both boxes keep their bottom on the feet
STANDING = HitboxProfile("standing", (35, 110), ((45 - 35) / 2, 120 - 110))
SLIDING = HitboxProfile("sliding", (42, 55), ((45 - 42) / 2, 120 - 55))

_PROFILES = {p.name: p for p in (STANDING, SLIDING)}


def profile(name: str) -> HitboxProfile:
    try:
        return _PROFILES[name]
    except KeyError:
        raise ValueError(f"Unknown hitbox profile: {name!r}") from None


@dataclass
class PlayerState:
    """Discrete action state; contact and velocity live on the physics body."""

    body: PlayerBody
    sliding: bool = False
    slide_end_time: float = 0.0
    hitbox: HitboxProfile = STANDING

    @property
    def grounded(self) -> bool:
        return bool(self.body.grounded)

    @property
    def vertical_velocity(self) -> float:
        return float(self.body.velocity_y)


class ObstacleKind(enum.Enum):
    LOW = "low"  # hurdle, must be jumped
    HIGH = "high"  # bar, must be slid under


@dataclass
class Obstacle:
    kind: ObstacleKind
    x: float
    y: float
    texture: str
    texture_size: Tuple[float, float]
    hitbox_size: Tuple[float, float]
    hitbox_offset: Tuple[float, float] = (0.0, 0.0)
    alive: bool = field(default=True, compare=False)

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def rect(self) -> pygame.Rect:
        return hitbox_rect(
            self.x, self.y, self.texture_size, self.hitbox_size, self.hitbox_offset
        )

    def destroy(self) -> None:
        self.alive = False
