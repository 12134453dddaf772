"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard events into model commands.
  - Drive the game loop: accumulate frame time, step the model when the
    move interval elapses, ask the view to render.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

Input is rising-edge: only KEYDOWN events count, never held keys, and at
most one direction change reaches the model per frame.

The controller is the only layer that imports pygame directly for events.
"""

import logging
import sys
from typing import Optional

import pygame

from .config import CELL, FPS, GameConfig
from .model import Direction, GameState
from .view import GameView

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_a:     Direction.LEFT,
    pygame.K_d:     Direction.RIGHT,
    pygame.K_w:     Direction.UP,
    pygame.K_s:     Direction.DOWN,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class StepTimer:
    """Accumulates frame time and fires once the move interval is reached."""

    def __init__(self):
        self.elapsed: float = 0.0

    def advance(self, dt: float, interval: float) -> bool:
        self.elapsed += dt
        if self.elapsed >= interval:
            # Restart from zero: a late frame never triggers a catch-up step.
            self.elapsed = 0.0
            return True
        return False


def direction_for_events(events) -> Optional[Direction]:
    """First direction key pressed in this frame's events, if any."""
    for event in events:
        if event.type == pygame.KEYDOWN and event.key in DIRECTION_KEYS:
            return DIRECTION_KEYS[event.key]
    return None


def wants_quit(events) -> bool:
    for event in events:
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
            return True
    return False


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        cell: int = CELL,
        fps: int = FPS,
    ):
        self.config = config or GameConfig()
        self.fps = fps
        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.config.width * cell, self.config.height * cell)
        )
        pygame.display.set_caption("Torus Snake")
        self.clock = pygame.time.Clock()
        self.model = GameState(self.config, seed=seed)
        self.view  = GameView(self.screen, cell)
        self.timer = StepTimer()
        logger.info(
            "Started %dx%d grid, seed=%s, cell=%dpx, fps=%d",
            self.config.width, self.config.height, seed, cell, fps,
        )

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        while True:
            dt = self.clock.tick(self.fps) / 1000.0
            self.frame(pygame.event.get(), dt)

    def frame(self, events, dt: float) -> bool:
        """
        One frame: input, timing, at most one step, render.
        Returns True if the model reset this frame.
        """
        if wants_quit(events):
            self._quit()

        new_dir = direction_for_events(events)
        if new_dir is not None:
            self.model.apply_input(new_dir)

        crashed = False
        if self.timer.advance(dt, self.model.move_interval):
            crashed = self.model.step()
            if crashed:
                self.view.flash_crash()

        self.view.render(self.model.snapshot())
        return crashed

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        logger.info("Quitting")
        pygame.quit()
        sys.exit()
