"""Obstacle cadence, placement and scrolling.

The gap between spawns shrinks linearly with speed and is clamped to
[SPAWN_MIN_GAP_MS, SPAWN_MAX_GAP_MS]; obstacles scroll left at the run speed
and are destroyed once they pass OBSTACLE_CUTOFF_X.
"""

from __future__ import annotations

import random
from typing import List, Optional

from config import (
    BAR_CLEARANCE,
    BASE_SPEED,
    FIRST_SPAWN_DELAY_MS,
    GAP_SHRINK_FACTOR,
    GROUND_Y,
    OBSTACLE_CUTOFF_X,
    OBSTACLE_SPAWN_X,
    SPAWN_MAX_GAP_MS,
    SPAWN_MIN_GAP_MS,
)
from runner.state import Obstacle, ObstacleKind


def spawn_gap(
    speed: float,
    *,
    min_gap: float = SPAWN_MIN_GAP_MS,
    max_gap: float = SPAWN_MAX_GAP_MS,
) -> float:
    raw = max_gap - (speed - BASE_SPEED) * GAP_SHRINK_FACTOR
    return max(min_gap, min(max_gap, raw))


def make_obstacle(kind: ObstacleKind, x: float = OBSTACLE_SPAWN_X) -> Obstacle:
    if kind is ObstacleKind.LOW:
        # Hurdle sits on the ground; hitbox roughly matches the 40x35 texture
        return Obstacle(
            kind=kind,
            x=x,
            y=GROUND_Y,
            texture="hurdle",
            texture_size=(40, 35),
            hitbox_size=(36, 31),
            hitbox_offset=(2, 2),
        )
    # Bar floats above the ground; hitbox roughly matches the 70x34 texture
    return Obstacle(
        kind=kind,
        x=x,
        y=GROUND_Y - BAR_CLEARANCE,
        texture="bar",
        texture_size=(70, 34),
        hitbox_size=(65, 26),
        hitbox_offset=(2, 4),
    )


class SpawnScheduler:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.next_spawn_at = 0.0

    def reset(self, now: float) -> None:
        self.next_spawn_at = now + FIRST_SPAWN_DELAY_MS

    def due(self, now: float) -> bool:
        return now >= self.next_spawn_at

    def pick_kind(self) -> ObstacleKind:
        return self.rng.choice((ObstacleKind.LOW, ObstacleKind.HIGH))

    def spawn(self, now: float, speed: float) -> Obstacle:
        """Create one obstacle and schedule the next spawn from `now`."""
        obstacle = make_obstacle(self.pick_kind())
        self.next_spawn_at = now + spawn_gap(speed)
        return obstacle


def move_obstacles(obstacles: List[Obstacle], speed: float, dt: float) -> int:
    """Scroll obstacles left in place; returns how many were disposed."""
    shift = speed * dt / 1000.0
    survivors = []
    for o in obstacles:
        o.x -= shift
        if o.x < OBSTACLE_CUTOFF_X:
            o.destroy()
        else:
            survivors.append(o)
    disposed = len(obstacles) - len(survivors)
    obstacles[:] = survivors
    return disposed


__all__ = ["SpawnScheduler", "spawn_gap", "make_obstacle", "move_obstacles"]
