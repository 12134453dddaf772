"""
Tests for controller.py - input sampling, step timing and one frame of the loop.

Runs pygame against its dummy video driver so no window is opened.
"""

import os
import sys

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from torus_snake.config import GameConfig
from torus_snake.controller import (
    GameController,
    StepTimer,
    direction_for_events,
    wants_quit,
)
from torus_snake.model import Direction


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


class TestStepTimer:
    """Tests for StepTimer."""

    def test_fires_once_interval_reached(self):
        timer = StepTimer()
        assert timer.advance(0.05, 0.12) is False
        assert timer.advance(0.05, 0.12) is False
        assert timer.advance(0.05, 0.12) is True
        assert timer.elapsed == 0.0

    def test_long_frame_fires_only_once(self):
        timer = StepTimer()
        assert timer.advance(1.0, 0.12) is True
        assert timer.advance(0.0, 0.12) is False


class TestInputMapping:
    """Tests for event translation."""

    def test_arrows_and_wasd(self):
        assert direction_for_events([key_down(pygame.K_w)]) == Direction.UP
        assert direction_for_events([key_down(pygame.K_DOWN)]) == Direction.DOWN
        assert direction_for_events([key_down(pygame.K_a)]) == Direction.LEFT
        assert direction_for_events([key_down(pygame.K_RIGHT)]) == Direction.RIGHT

    def test_first_key_in_frame_wins(self):
        events = [key_down(pygame.K_UP), key_down(pygame.K_LEFT)]
        assert direction_for_events(events) == Direction.UP

    def test_key_release_ignored(self):
        assert direction_for_events([key_up(pygame.K_UP)]) is None
        assert direction_for_events([key_down(pygame.K_SPACE)]) is None

    def test_quit_events(self):
        assert wants_quit([pygame.event.Event(pygame.QUIT)])
        assert wants_quit([key_down(pygame.K_ESCAPE)])
        assert wants_quit([key_down(pygame.K_q)])
        assert not wants_quit([key_down(pygame.K_UP)])


class TestGameController:
    """One frame at a time against the dummy display."""

    @pytest.fixture
    def controller(self):
        ctrl = GameController(GameConfig(width=10, height=8), seed=3, cell=4)
        yield ctrl
        pygame.quit()

    def test_frame_steps_when_interval_elapsed(self, controller):
        hx, hy = controller.model.head
        controller.model.food = (hx, (hy + 3) % 8)
        assert controller.frame([], 0.2) is False
        assert controller.model.head == ((hx + 1) % 10, hy)

    def test_frame_applies_input_without_stepping(self, controller):
        head = controller.model.head
        controller.frame([key_down(pygame.K_DOWN)], 0.01)
        assert controller.model.direction == Direction.DOWN
        assert controller.model.head == head

    def test_quit_key_exits(self, controller):
        with pytest.raises(SystemExit):
            controller.frame([key_down(pygame.K_ESCAPE)], 0.0)
