"""Solutions to 2024 Advent of Code puzzles, one module per day."""

__version__ = "0.1.0"