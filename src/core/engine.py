"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window and GL state, translates input, runs the loop.
- Scene: holds gameplay state & update/draw logic (RunnerScene for now).
- Viewport: FIT scaling of the fixed-size playfield into the window.

Uses the legacy fixed-function pipeline in a 2D orthographic projection.
"""

from __future__ import annotations

from runner.runnerscene import RunnerScene, synthesize_runner_sounds

import pygame
from OpenGL.GL import (
    glClear,
    glClearColor,
    glDisable,
    glViewport,
    GL_COLOR_BUFFER_BIT,
    GL_CULL_FACE,
    GL_DEPTH_TEST,
)

from config import *
from core.clock import SimulationClock
from core.viewport import fit_viewport
from render.canvas import Canvas
from textures.texture_manager import generate_runner_textures
from ui.text_renderer import TextRenderer


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self):
        pygame.init()
        pygame.display.set_caption("Swipe Runner")
        # Build flags once and pass an explicit vsync value. Some older pygame
        # builds don't accept the vsync kwarg, so fall back to the older call
        # signature.
        flags = pygame.DOUBLEBUF | pygame.OPENGL | pygame.RESIZABLE
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        try:
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # vsync was requested but unavailable on this system/driver.
            pygame.display.set_mode((WIDTH, HEIGHT), flags)
        self.clock = pygame.time.Clock()
        # Gameplay time: wall-clock frame deltas, clamped to MAX_FRAME_DT_MS
        self.sim_clock = SimulationClock(MAX_FRAME_DT_MS)

        # GL state
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_CULL_FACE)
        glClearColor(*BACKGROUND_COLOR)
        self._resize(*pygame.display.get_surface().get_size())

        self.canvas = Canvas(WIDTH, HEIGHT)
        self.text = TextRenderer()

        # Active scene (owns gameplay & input handling)
        self.scene = RunnerScene(
            text=self.text,
            loaders=(generate_runner_textures, synthesize_runner_sounds),
        )

    def _resize(self, w: int, h: int) -> None:
        self.window_size = (w, h)
        self.viewport = fit_viewport(w, h, WIDTH, HEIGHT)
        glViewport(*self.viewport.as_gl(h))

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)
                continue
            self.dispatch(event)
        return True

    def dispatch(self, event) -> None:
        """Forward one event to the scene, pointer positions in playfield coords."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.scene.on_pointer_down(*self.viewport.to_game(*event.pos))
        elif event.type == pygame.MOUSEMOTION:
            x, y = self.viewport.to_game(*event.pos)
            self.scene.on_pointer_move(x, y, bool(event.buttons[0]))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.scene.on_pointer_up(*self.viewport.to_game(*event.pos))
        elif event.type == pygame.KEYDOWN:
            self.scene.on_key_down(event.key)
        else:
            self.scene.handle_event(event)

    # ------------------------------------------------------------------
    def update(self, now: float, dt: float):
        # Scene owns all gameplay updates
        self.scene.update(now, dt)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        glClear(GL_COLOR_BUFFER_BIT)
        self.scene.render(self.canvas, self.text)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            # With vsync on, keep the FPS cap as a safety net for drivers that
            # don't honor it; otherwise tick() just measures the frame.
            if VSYNC:
                raw_dt = self.clock.tick(FPS)
            else:
                raw_dt = self.clock.tick()
            now, dt = self.sim_clock.tick(raw_dt)
            running = self.handle_events()
            if not running:
                break
            self.update(now, dt)
            self.render()
        pygame.quit()
