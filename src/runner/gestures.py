"""Input translation: pointer drags and keys -> run commands.

Nothing here touches run state. Event handlers turn raw input into `Command`
values which the scene queues and drains once per frame, so all state changes
still happen on the single update path.
"""

from __future__ import annotations

import enum
from collections import deque
from typing import Deque, Iterator, Mapping, Optional

import pygame

from config import SWIPE_X_TOLERANCE, SWIPE_Y_THRESHOLD


class Command(enum.Enum):
    START = "start"  # start, or restart after game over
    JUMP = "jump"
    SWIPE_SLIDE = "swipe_slide"


JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
SLIDE_KEYS = (pygame.K_DOWN, pygame.K_s)


def classify_drag(
    dx: float,
    dy: float,
    threshold: float = SWIPE_Y_THRESHOLD,
    tolerance: float = SWIPE_X_TOLERANCE,
) -> Optional[Command]:
    """Map a drag offset to a command; screen y grows downwards."""
    # Mostly-horizontal motion is not a gesture
    if abs(dx) > tolerance and abs(dx) > abs(dy):
        return None
    if dy > threshold:
        return Command.SWIPE_SLIDE
    if dy < -threshold:
        return Command.JUMP
    return None


class GestureInterpreter:
    """Tracks one drag at a time; each drag fires at most one command."""

    def __init__(
        self,
        *,
        threshold: float = SWIPE_Y_THRESHOLD,
        tolerance: float = SWIPE_X_TOLERANCE,
    ) -> None:
        self.threshold = threshold
        self.tolerance = tolerance
        self.start_x = 0.0
        self.start_y = 0.0
        self.fired = False

    def pointer_down(self, x: float, y: float, active: bool) -> Optional[Command]:
        self.start_x = x
        self.start_y = y
        self.fired = False
        if not active:
            return Command.START
        return None

    def pointer_move(
        self, x: float, y: float, pressed: bool, active: bool
    ) -> Optional[Command]:
        if not active or not pressed or self.fired:
            return None
        cmd = classify_drag(
            x - self.start_x, y - self.start_y, self.threshold, self.tolerance
        )
        if cmd is not None:
            self.fired = True
        return cmd

    def pointer_up(self) -> None:
        self.fired = False


class KeyboardInput:
    """Jump is edge-triggered (key-down events); slide is level-triggered."""

    def key_down(self, key: int, active: bool) -> Optional[Command]:
        if not active:
            return Command.START
        if key in JUMP_KEYS:
            return Command.JUMP
        return None

    def slide_held(self, pressed: Mapping[int, bool]) -> bool:
        return any(pressed[k] for k in SLIDE_KEYS)


class CommandQueue:
    def __init__(self) -> None:
        self._items: Deque[Command] = deque()

    def push(self, cmd: Optional[Command]) -> None:
        if cmd is not None:
            self._items.append(cmd)

    def drain(self) -> Iterator[Command]:
        while self._items:
            yield self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


__all__ = [
    "Command",
    "CommandQueue",
    "GestureInterpreter",
    "KeyboardInput",
    "classify_drag",
]
