"""Capabilities the run controller needs from the physics runtime.

`core.physics.ArcadeWorld` is the implementation used by the game; tests can
substitute anything with the same shape.
"""

from typing import Iterable, Protocol, Tuple, runtime_checkable

import pygame


class Collidable(Protocol):
    def rect(self) -> pygame.Rect: ...  # noqa: D401


@runtime_checkable
class PlayerBody(Collidable, Protocol):
    velocity_y: float
    gravity_y: float

    @property
    def grounded(self) -> bool: ...

    def set_hitbox(
        self, size: Tuple[float, float], offset: Tuple[float, float]
    ) -> None: ...


class PhysicsRuntime(Protocol):
    player: PlayerBody
    paused: bool

    def add_overlap(self, group: Iterable, callback) -> None: ...

    def reset_player(self, x: float) -> None: ...

    def step(self, dt_ms: float) -> None: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...
