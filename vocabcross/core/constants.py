"""Shared constants and enumerations for the crossword placer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)


class WordMode(str, Enum):
    """How many prepared terms a puzzle should use."""

    FIRST_25 = "25"
    ALL = "all"


GRID_SIZE = 50

MIN_TERM_LENGTH = 3
MAX_TERM_LENGTH = 15
FIRST_N_COUNT = 25

# Seed word placement: distance from each border and slack along its axis.
SEED_MARGIN = 5
SEED_SLACK = 10

# Placement scoring.
INTERSECTION_WEIGHT = 10.0
CENTER_DISTANCE_WEIGHT = 0.1

# Fallback placement around the occupied bounding box.
FALLBACK_OFFSETS: Tuple[Tuple[int, int], ...] = ((-3, 0), (3, 0), (0, -3), (0, 3))
FALLBACK_RADIUS = 10
COARSE_SCAN_STRIDE = 2
COARSE_SCAN_MARGIN = 2

DIRECTIONS: Tuple[Direction, ...] = (Direction.ACROSS, Direction.DOWN)


@dataclass(frozen=True)
class Rect:
    """Inclusive rectangle of grid coordinates."""

    min_row: int
    min_col: int
    max_row: int
    max_col: int

    @property
    def rows(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def cols(self) -> int:
        return self.max_col - self.min_col + 1

    def contains(self, row: int, col: int) -> bool:
        return self.min_row <= row <= self.max_row and self.min_col <= col <= self.max_col
