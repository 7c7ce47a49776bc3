"""Shared constants and grid geometry primitives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


DEFAULT_ROWS = 8
DEFAULT_COLS = 6

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
DIAGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
KING_STEPS: Tuple[Tuple[int, int], ...] = ORTHOGONAL_STEPS + DIAGONAL_STEPS

# Layout policy
DEFAULT_MAX_BACKTRACKS = 3
DEFAULT_MAX_ATTEMPTS = 50
DEFAULT_TIME_LIMIT_MS = 3000

# Puzzle submission limits
MAX_TITLE_LENGTH = 100
MAX_AUTHOR_LENGTH = 50
MAX_THEME_CLUE_LENGTH = 200
MIN_WORD_LENGTH = 4
MAX_SPANGRAM_LENGTH = 20

LAYOUT_FAILURE_MESSAGE = (
    "Could not find a valid layout after multiple attempts. "
    "Try different words or shuffle again."
)


class Edge(str, Enum):
    """Grid edges, in the order spangram starts are tried."""

    TOP = "TOP"
    LEFT = "LEFT"
    BOTTOM = "BOTTOM"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class GridShape:
    """Rectangle dimensions of a puzzle grid."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid must have at least one cell, got {self.rows}x{self.cols}")

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


DEFAULT_SHAPE = GridShape()
