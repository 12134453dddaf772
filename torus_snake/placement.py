"""
placement.py — Random free-cell selection.

Completely isolated from rendering, input and game rules.
Receives the random source and the collections to avoid, returns a cell.

Strategy:
  - Draw uniformly random cells from the whole grid.
  - Reject any candidate found in one of the avoid collections.
  - Give up after `max_attempts` draws.
  - Food falls back to the last candidate; an obstacle is simply skipped.
"""

import logging
import random
from collections.abc import Collection

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


def sample_free_cell(
    rng: random.Random,
    width: int,
    height: int,
    avoid: tuple[Collection[Cell], ...],
    max_attempts: int,
) -> tuple[Cell, bool]:
    """
    Return (candidate, found).

    `found` is False when every attempt landed on an occupied cell; the
    candidate is then the last one drawn.
    """
    candidate = (0, 0)
    for _ in range(max_attempts):
        candidate = (rng.randrange(width), rng.randrange(height))
        if not any(candidate in cells for cells in avoid):
            return candidate, True
    return candidate, False


def place_food(
    rng: random.Random,
    width: int,
    height: int,
    *avoid: Collection[Cell],
    max_attempts: int,
) -> Cell:
    """Food must always exist, so an exhausted search keeps its last draw."""
    cell, found = sample_free_cell(rng, width, height, avoid, max_attempts)
    if not found:
        logger.warning(
            "No free cell for food after %d attempts, placing it on %s",
            max_attempts, cell,
        )
    return cell


def place_obstacle(
    rng: random.Random,
    width: int,
    height: int,
    *avoid: Collection[Cell],
    max_attempts: int,
) -> Cell | None:
    cell, found = sample_free_cell(rng, width, height, avoid, max_attempts)
    if not found:
        logger.debug("Obstacle skipped after %d attempts", max_attempts)
        return None
    return cell
