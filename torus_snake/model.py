"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Direction   — immutable (dx, dy) value object
    Snapshot    — frozen read-only view handed to the renderer
    GameState   — snake, food, obstacles, growth and move cadence

The controller calls apply_input() once per frame and step() once per
move interval. A collision is not an error: step() resets the game in
place and reports it through its return value.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Optional

from .config import GameConfig
from .placement import place_food, place_obstacle

logger = logging.getLogger(__name__)


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError(f"Direction is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Direction is immutable, cannot delete {name!r}")

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    @classmethod
    def coerce(cls, value) -> Optional["Direction"]:
        """Map a Direction or (dx, dy) pair onto one of the four units, else None."""
        if isinstance(value, Direction):
            value = value.as_tuple()
        for d in ALL_DIRS:
            if d.as_tuple() == value:
                return d
        return None

    def __neg__(self) -> "Direction":
        return Direction(-self.x, -self.y)

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)
ALL_DIRS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]


# ─────────────────────────── Snapshot ────────────────────────────
@dataclass(frozen=True)
class Snapshot:
    """Everything the view needs for one frame. Shares nothing mutable."""
    width: int
    height: int
    snake: tuple[tuple[int, int], ...]  # head first
    food: tuple[int, int]
    obstacles: frozenset
    score: int
    heading: Direction  # direction of the last completed move
    color: tuple


# ─────────────────────────── GameState ───────────────────────────
class GameState:
    """
    Top-level model.  Owns all game state and its random source.

    `direction` is what the next step() will use and is what a reversing
    input is checked against. `heading` only records the direction of the
    last completed move, for drawing.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.config: GameConfig = config or GameConfig()
        self.rng: random.Random = rng if rng is not None else random.Random(seed)
        self.snake: deque[tuple[int, int]] = deque()
        self.direction: Direction = Direction.RIGHT
        self.heading: Direction = Direction.RIGHT
        self.food: tuple[int, int] = (0, 0)
        self.obstacles: set[tuple[int, int]] = set()
        self.pending_growth: int = 0
        self.move_interval: float = self.config.base_interval
        self.color: tuple = self.config.palette[0]
        self.reset()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    @property
    def score(self) -> int:
        return len(self.snake) - self.config.initial_length

    # ── Commands ─────────────────────────────────────────────────
    def reset(self) -> None:
        """Re-initialise every entity; nothing survives a reset."""
        cfg = self.config
        sx, sy = cfg.start_cell
        self.snake = deque(
            ((sx - i) % cfg.width, sy) for i in range(cfg.initial_length)
        )
        self.direction = Direction.RIGHT
        self.heading = Direction.RIGHT
        self.obstacles = set()
        self.pending_growth = 0
        self.move_interval = cfg.base_interval
        self.color = cfg.palette[0]
        self.food = self._place_food()

    def apply_input(self, requested) -> bool:
        """Queue a direction change (ignored if unknown or it would reverse the snake)."""
        new_dir = Direction.coerce(requested)
        if new_dir is None:
            return False
        if new_dir.is_opposite(self.direction):
            logger.debug("Ignored reversing input %r", new_dir)
            return False
        self.direction = new_dir
        return True

    def step(self) -> bool:
        """
        Advance one tick.
        Returns True if the move collided and the game was reset.
        """
        cfg = self.config
        hx, hy = self.head
        new_head = (
            (hx + self.direction.x) % cfg.width,
            (hy + self.direction.y) % cfg.height,
        )

        # The tail has not moved yet, so its cell still counts as occupied.
        if new_head in self.snake or new_head in self.obstacles:
            cause = "obstacle" if new_head in self.obstacles else "self"
            logger.debug("Collision with %s at %s, length %d", cause, new_head, len(self.snake))
            self.reset()
            return True

        self.heading = self.direction
        self.snake.appendleft(new_head)

        if new_head == self.food:
            self._eat()

        if self.pending_growth > 0:
            self.pending_growth -= 1
        else:
            self.snake.pop()
        return False

    def snapshot(self) -> Snapshot:
        return Snapshot(
            width=self.config.width,
            height=self.config.height,
            snake=tuple(self.snake),
            food=self.food,
            obstacles=frozenset(self.obstacles),
            score=self.score,
            heading=self.heading,
            color=self.color,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _eat(self) -> None:
        cfg = self.config
        self.pending_growth += 1
        self.color = self.rng.choice(cfg.palette)

        if self.rng.random() < cfg.obstacle_probability:
            self._spawn_obstacles(self.rng.randint(*cfg.obstacle_count))

        self.move_interval = max(cfg.min_interval, self.move_interval - cfg.interval_step)
        self.food = self._place_food()
        logger.debug(
            "Food eaten, length %d, interval %.3f, next food at %s",
            len(self.snake), self.move_interval, self.food,
        )

    def _spawn_obstacles(self, count: int) -> None:
        cfg = self.config
        placed = 0
        for _ in range(count):
            cell = place_obstacle(
                self.rng, cfg.width, cfg.height,
                self.snake, self.obstacles, (self.food,),
                max_attempts=cfg.max_placement_attempts,
            )
            if cell is not None:
                self.obstacles.add(cell)
                placed += 1
        logger.debug("Spawned %d/%d obstacles (%d total)", placed, count, len(self.obstacles))

    def _place_food(self) -> tuple[int, int]:
        cfg = self.config
        return place_food(
            self.rng, cfg.width, cfg.height,
            self.snake, self.obstacles,
            max_attempts=cfg.max_placement_attempts,
        )
