"""Runner scene: wires the run controller to physics, input, HUD and overlays.

Input handlers only translate events into commands; the queue is drained at
the top of `update`, so every state change happens inside the frame update.
Asset loaders (texture generation needs a GL context) are passed in by the
engine and run once from the constructor.
"""

from __future__ import annotations

import math
import random
from typing import Callable, Optional, Sequence

import pygame

from config import *

from core.physics import ArcadeBody, ArcadeWorld
from core.scene import Scene
from runner.controller import RunController
from runner.gestures import CommandQueue, GestureInterpreter, KeyboardInput
from runner.hud import RunnerHUD
from runner.overlay import BODY_STYLE, OverlayPresenter
from sound.sound_utils import Sounds

START_BODY_STYLE = BODY_STYLE.with_options(size=22)


def synthesize_runner_sounds() -> None:
    Sounds.ensure_init()
    Sounds.synthesize("jump", 620, 70, volume=0.25)
    Sounds.synthesize("slide", 300, 60, volume=0.18)
    Sounds.synthesize("game_over", 120, 150, volume=0.35)


class RunnerScene(Scene):
    def __init__(
        self,
        text=None,
        *,
        rng: Optional[random.Random] = None,
        loaders: Sequence[Callable[[], object]] = (),
        key_state: Callable[[], object] = pygame.key.get_pressed,
    ) -> None:
        super().__init__()
        print("[Runner] Scene initialized")

        player = ArcadeBody(
            PLAYER_X,
            GROUND_Y,
            texture_size=PLAYER_TEXTURE_SIZE,
            gravity_y=GRAVITY_Y_BASE,
        )
        self.world = ArcadeWorld(
            width=WIDTH, height=HEIGHT, ground_y=GROUND_Y, player=player
        )
        self.controller = RunController(
            self.world,
            rng=rng,
            on_start=self._on_start,
            on_jump=lambda: Sounds.play("jump"),
            on_slide=lambda: Sounds.play("slide"),
            on_game_over=self._on_game_over,
        )

        self.commands = CommandQueue()
        self._gestures = GestureInterpreter()
        self._keyboard = KeyboardInput()
        self._hud = RunnerHUD(self.controller)
        self.overlay = OverlayPresenter(release=text.release if text else None)

        self._key_state = key_state

        for load in loaders:
            load()
        self.updaters.append(self._hud.update)
        self._show_start_overlay()

    # ------------------------------------------------------------------
    def _show_start_overlay(self) -> None:
        self.overlay.show(
            "SWIPE RUNNER",
            "Swipe up or Space to jump.\nSwipe down or hold S to slide.",
            "Tap or press any key to start",
            body_style=START_BODY_STYLE,
        )

    def _on_start(self) -> None:
        self.overlay.hide()

    def _on_game_over(self, score: float) -> None:
        Sounds.play("game_over")
        self.overlay.show("GAME OVER", f"Score: {math.floor(score)}", "Swipe/Tap to Restart")

    # ------------------------------------------------------------------
    def on_pointer_down(self, x: float, y: float) -> None:
        self.commands.push(
            self._gestures.pointer_down(x, y, self.controller.run.running)
        )

    def on_pointer_move(self, x: float, y: float, pressed: bool) -> None:
        self.commands.push(
            self._gestures.pointer_move(x, y, pressed, self.controller.run.running)
        )

    def on_pointer_up(self, x: float, y: float) -> None:
        self._gestures.pointer_up()

    def on_key_down(self, key: int) -> None:
        self.commands.push(self._keyboard.key_down(key, self.controller.run.running))

    # ------------------------------------------------------------------
    def update(self, now: float, dt: float) -> None:
        for cmd in self.commands.drain():
            self.controller.apply(cmd, now)
        slide_held = self._keyboard.slide_held(self._key_state())
        self.controller.update(now, dt, slide_held=slide_held)
        super().update(now, dt)

    def render(self, canvas, text) -> None:  # pragma: no cover - visual
        canvas.begin()
        canvas.fill_rect(0, 0, WIDTH, HEIGHT, 0x1A1A1A)
        canvas.fill_rect(0, GROUND_Y, WIDTH, GROUND_HEIGHT, GROUND_COLOR)

        for o in self.controller.obstacles:
            canvas.draw_texture(o.texture, o.x, o.y)

        body = self.world.player
        tint = SLIDE_TINT if self.controller.player.sliding else None
        canvas.draw_texture("player", body.x, body.y, tint=tint)

        self._hud.draw(text)
        self.overlay.draw(canvas, text)
        canvas.end()
