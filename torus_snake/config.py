"""
config.py — Shared constants and the gameplay configuration.
No logic beyond validation, no imports from internal modules.

Display constants are plain module-level values.
Gameplay parameters live in GameConfig and are fixed at construction.
"""

from dataclasses import dataclass, field
from typing import Optional

# ── Window & Grid ─────────────────────────────────────────────────
CELL            = 20
FPS             = 60
GRID_COLS       = 30
GRID_ROWS       = 24

# ── Colors ────────────────────────────────────────────────────────
BG          = (0,   0,   0)
GRID_COL    = (15,  20,  32)
FOOD_COL    = (220, 30,  30)
OBSTACLE_COL = (128, 128, 128)
CRASH_COL   = (255, 40,  40)
BLACK       = (0,   0,   0)

SNAKE_PALETTE = (
    (0,   200, 0),
    (0,   255, 136),
    (80,  200, 255),
    (255, 200, 0),
    (255, 120, 0),
    (200, 90,  255),
)

# ── Gameplay defaults ─────────────────────────────────────────────
BASE_INTERVAL        = 0.12   # seconds between moves at the start
MIN_INTERVAL         = 0.04
INTERVAL_STEP        = 0.005  # shaved off the interval per food eaten
OBSTACLE_PROBABILITY = 0.3
OBSTACLE_COUNT       = (1, 3)
MAX_PLACEMENT_ATTEMPTS = 1000
INITIAL_LENGTH       = 3

CRASH_FLASH_FRAMES   = 18


class ConfigError(ValueError):
    """Raised when a GameConfig cannot describe a playable game."""


@dataclass(frozen=True)
class GameConfig:
    """Construction-time gameplay parameters. Validated on creation."""

    width: int = GRID_COLS
    height: int = GRID_ROWS
    base_interval: float = BASE_INTERVAL
    min_interval: float = MIN_INTERVAL
    interval_step: float = INTERVAL_STEP
    obstacle_probability: float = OBSTACLE_PROBABILITY
    obstacle_count: tuple = OBSTACLE_COUNT
    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS
    initial_length: int = INITIAL_LENGTH
    start: Optional[tuple] = None
    palette: tuple = field(default=SNAKE_PALETTE)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(
                f"grid must be at least 1x1, got {self.width}x{self.height}"
            )
        if self.initial_length < 1:
            raise ConfigError(f"initial_length must be >= 1, got {self.initial_length}")
        if self.initial_length > self.width:
            raise ConfigError(
                f"initial_length {self.initial_length} does not fit a grid "
                f"{self.width} cells wide"
            )
        if self.start is not None:
            sx, sy = self.start
            if not (0 <= sx < self.width and 0 <= sy < self.height):
                raise ConfigError(f"start cell {self.start} lies outside the grid")
        if self.base_interval <= 0 or self.min_interval <= 0:
            raise ConfigError("move intervals must be positive")
        if self.min_interval > self.base_interval:
            raise ConfigError(
                f"min_interval {self.min_interval} exceeds base_interval "
                f"{self.base_interval}"
            )
        if self.interval_step < 0:
            raise ConfigError(f"interval_step must be >= 0, got {self.interval_step}")
        if not 0.0 <= self.obstacle_probability <= 1.0:
            raise ConfigError(
                f"obstacle_probability must be within [0, 1], got "
                f"{self.obstacle_probability}"
            )
        lo, hi = self.obstacle_count
        if lo < 0 or lo > hi:
            raise ConfigError(f"invalid obstacle_count range {self.obstacle_count}")
        if self.max_placement_attempts < 1:
            raise ConfigError(
                f"max_placement_attempts must be >= 1, got "
                f"{self.max_placement_attempts}"
            )
        if not self.palette:
            raise ConfigError("palette needs at least one colour")

    @property
    def start_cell(self) -> tuple[int, int]:
        if self.start is not None:
            return tuple(self.start)
        return (self.width // 2, self.height // 2)
