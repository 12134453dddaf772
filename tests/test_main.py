"""
Tests for main.py - command-line parsing and config errors.
"""

import os
import sys

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pytest.importorskip("pygame")

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main


class TestCli:
    """Tests for the entry point."""

    def test_defaults(self):
        args = main.build_parser().parse_args([])
        assert (args.width, args.height) == (30, 24)
        assert args.seed is None
        assert args.log_level == "WARNING"

    def test_invalid_grid_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(["--width", "0"])
        assert exc.value.code == 2
        assert "grid must be at least 1x1" in capsys.readouterr().err

    def test_non_positive_cell_rejected(self):
        with pytest.raises(SystemExit):
            main.main(["--cell", "0"])
