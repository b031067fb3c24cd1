"""Runner package: re-export common symbols for simpler imports.

Callers can import public types from `runner` directly, e.g.:

    from runner import RunController, Command, ObstacleKind

The scene itself (`runner.runnerscene`) is not re-exported because it needs
a GL context to construct.
"""

from .state import (
    RunPhase,
    RunState,
    PlayerState,
    HitboxProfile,
    STANDING,
    SLIDING,
    Obstacle,
    ObstacleKind,
)
from .spawner import SpawnScheduler, spawn_gap, make_obstacle, move_obstacles
from .gestures import Command, CommandQueue, GestureInterpreter, KeyboardInput, classify_drag
from .controller import RunController

__all__ = [
    "RunPhase",
    "RunState",
    "PlayerState",
    "HitboxProfile",
    "STANDING",
    "SLIDING",
    "Obstacle",
    "ObstacleKind",
    "SpawnScheduler",
    "spawn_gap",
    "make_obstacle",
    "move_obstacles",
    "Command",
    "CommandQueue",
    "GestureInterpreter",
    "KeyboardInput",
    "classify_drag",
    "RunController",
]
