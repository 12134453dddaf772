"""
main.py — Entry point.

Run with:
    python main.py [--width 30] [--height 24] [--seed 7]

Requires:
    pip install pygame
"""

import argparse
import logging

from torus_snake.config import CELL, FPS, GRID_COLS, GRID_ROWS, ConfigError, GameConfig
from torus_snake.controller import GameController


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around grid with growing obstacles")
    parser.add_argument("--width", type=int, default=GRID_COLS, help="Grid columns")
    parser.add_argument("--height", type=int, default=GRID_ROWS, help="Grid rows")
    parser.add_argument("--cell", type=int, default=CELL, help="Cell size in pixels")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        config = GameConfig(width=args.width, height=args.height)
    except ConfigError as exc:
        parser.error(str(exc))
    if args.cell <= 0 or args.fps <= 0:
        parser.error("--cell and --fps must be positive")

    GameController(config, seed=args.seed, cell=args.cell, fps=args.fps).run()


if __name__ == "__main__":
    main()
