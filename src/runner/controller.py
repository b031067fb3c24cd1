"""Run state controller: the per-frame gameplay state machine.

NOT_STARTED -> RUNNING on the first start input, RUNNING -> GAME_OVER on an
obstacle overlap, GAME_OVER -> RUNNING (a fresh run) on restart input. The
controller owns the run, the player's action state, the obstacle set and the
spawn schedule; the physics runtime only supplies ground contact, velocity,
hitboxes and overlap events. Every transition is driven by input or collision,
except the slide auto-end.

Speed scaling: gravity grows linearly with the speed factor and the jump
impulse with its square root, so apex height stays about the same while
airtime shrinks as the run gets faster.
"""

from __future__ import annotations

import math
import random
from typing import Callable, List, Optional

from config import (
    BASE_SPEED,
    GRAVITY_Y_BASE,
    JUMP_VEL_BASE,
    MAX_SPEED,
    PLAYER_X,
    SLIDE_MIN_MS,
    SPEED_RAMP_RATE,
    TOUCH_SLIDE_EXPONENT,
    TOUCH_SLIDE_MS_BASE,
    TOUCH_SLIDE_MS_MIN,
)
from core.runtime import PhysicsRuntime
from runner.gestures import Command
from runner.spawner import SpawnScheduler, move_obstacles
from runner.state import (
    SLIDING,
    STANDING,
    HitboxProfile,
    Obstacle,
    PlayerState,
    RunPhase,
    RunState,
)

Hook = Optional[Callable[[], None]]


class RunController:
    def __init__(
        self,
        physics: PhysicsRuntime,
        *,
        rng: Optional[random.Random] = None,
        on_start: Hook = None,
        on_jump: Hook = None,
        on_slide: Hook = None,
        on_game_over: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.physics = physics
        self.run = RunState()
        self.player = PlayerState(body=physics.player)
        self.obstacles: List[Obstacle] = []
        self.spawner = SpawnScheduler(rng)
        self.on_start = on_start
        self.on_jump = on_jump
        self.on_slide = on_slide
        self.on_game_over = on_game_over

        physics.add_overlap(self.obstacles, self._on_overlap)
        self._reset_player()
        # Nothing moves until the first start input
        physics.pause()

    # ------------------------------------------------------------------
    @property
    def phase(self) -> RunPhase:
        return self.run.phase

    def speed_factor(self) -> float:
        # 1.0 at base speed, up to MAX_SPEED/BASE_SPEED
        return max(1.0, min(MAX_SPEED / BASE_SPEED, self.run.speed / BASE_SPEED))

    def gravity(self) -> float:
        return GRAVITY_Y_BASE * self.speed_factor()

    def jump_velocity(self) -> float:
        return -JUMP_VEL_BASE * math.sqrt(self.speed_factor())

    def touch_slide_duration_ms(self) -> int:
        """Swipe slides start at the base duration and shorten gently with speed."""
        raw = TOUCH_SLIDE_MS_BASE * math.pow(1.0 / self.speed_factor(), TOUCH_SLIDE_EXPONENT)
        return int(round(max(TOUCH_SLIDE_MS_MIN, min(TOUCH_SLIDE_MS_BASE, raw))))

    # ------------------------------------------------------------------
    def advance(self, now: float, dt: float) -> None:
        """Ramp speed, rescale gravity and accumulate score for one frame."""
        if not self.run.running:
            return
        self.run.speed = min(MAX_SPEED, self.run.speed + dt * SPEED_RAMP_RATE)
        self.physics.player.gravity_y = self.gravity()
        self.run.score += dt * self.run.speed / 1000.0

    def update(self, now: float, dt: float, *, slide_held: bool = False) -> None:
        """Run one full frame: advance, slide handling, spawning, motion, physics."""
        if not self.run.running:
            return
        self.advance(now, dt)

        if slide_held:
            self.start_slide_for(now, SLIDE_MIN_MS)
        self.maybe_end_slide(now, held=slide_held)

        if self.spawner.due(now):
            self.obstacles.append(self.spawner.spawn(now, self.run.speed))
        move_obstacles(self.obstacles, self.run.speed, dt)

        self.physics.step(dt)

    def apply(self, command: Command, now: float) -> bool:
        if command is Command.START:
            return self.begin(now)
        if command is Command.JUMP:
            return self.try_jump(now)
        if command is Command.SWIPE_SLIDE:
            return self.start_slide_for(now, self.touch_slide_duration_ms())
        return False

    # ------------------------------------------------------------------
    def try_jump(self, now: float) -> bool:
        if not self.run.running or not self.player.grounded:
            return False
        if self.player.sliding:
            self.end_slide()
        self.physics.player.velocity_y = self.jump_velocity()
        if self.on_jump:
            self.on_jump()
        return True

    def start_slide_for(self, now: float, duration_ms: float) -> bool:
        if not self.run.running or not self.player.grounded:
            return False
        if not self.player.sliding:
            self.player.sliding = True
            self._set_hitbox(SLIDING)
            if self.on_slide:
                self.on_slide()
        # Only ever extends: safe for held keys and repeated swipes
        self.player.slide_end_time = max(self.player.slide_end_time, now + duration_ms)
        return True

    def maybe_end_slide(self, now: float, *, held: bool = False) -> None:
        if self.player.sliding and not held and now >= self.player.slide_end_time:
            self.end_slide()

    def end_slide(self) -> None:
        self.player.sliding = False
        self._set_hitbox(STANDING)

    def trigger_game_over(self) -> bool:
        if not self.run.running:
            return False
        self.run.over = True
        self.physics.pause()
        print(f"[Runner] Game over, score {math.floor(self.run.score)}")
        if self.on_game_over:
            self.on_game_over(self.run.score)
        return True

    # ------------------------------------------------------------------
    def begin(self, now: float) -> bool:
        """Start from the title screen or restart after a game over."""
        phase = self.run.phase
        if phase is RunPhase.NOT_STARTED:
            self.start_game(now)
            return True
        if phase is RunPhase.GAME_OVER:
            self.restart(now)
            return True
        return False

    def start_game(self, now: float) -> None:
        self._reset_run(now)

    def restart(self, now: float) -> None:
        self._reset_run(now)

    def _reset_run(self, now: float) -> None:
        self.run.speed = BASE_SPEED
        self.run.score = 0.0
        self.run.started = True
        self.run.over = False
        for o in self.obstacles:
            o.destroy()
        self.obstacles.clear()
        self._reset_player()
        self.spawner.reset(now)
        self.physics.resume()
        print("[Runner] Run started")
        if self.on_start:
            self.on_start()

    def _reset_player(self) -> None:
        self.player.sliding = False
        self.player.slide_end_time = 0.0
        self._set_hitbox(STANDING)
        self.physics.player.gravity_y = GRAVITY_Y_BASE
        self.physics.reset_player(PLAYER_X)

    def _set_hitbox(self, hitbox: HitboxProfile) -> None:
        self.player.hitbox = hitbox
        self.physics.player.set_hitbox(hitbox.size, hitbox.offset)

    def _on_overlap(self, player, obstacle) -> None:
        self.trigger_game_over()


__all__ = ["RunController"]
