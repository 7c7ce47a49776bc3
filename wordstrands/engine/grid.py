"""Grid geometry and the mutable letter state used during layout.

All geometry helpers are pure and take the grid shape as a keyword so that
grids other than the default 8x6 use exactly the same rules. The play-time
selection checks and the submission validator call these same functions.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set

from ..core.constants import DEFAULT_SHAPE, KING_STEPS, GridShape
from ..core.models import Coordinate


def is_valid_coord(coord: Coordinate, shape: GridShape = DEFAULT_SHAPE) -> bool:
    return shape.contains(coord.row, coord.col)


def coord_to_index(coord: Coordinate, shape: GridShape = DEFAULT_SHAPE) -> int:
    if not is_valid_coord(coord, shape):
        raise ValueError(f"Coordinate {tuple(coord)} outside {shape.rows}x{shape.cols} grid")
    return coord.row * shape.cols + coord.col


def index_to_coord(index: int, shape: GridShape = DEFAULT_SHAPE) -> Coordinate:
    if not 0 <= index < shape.size:
        raise ValueError(f"Index {index} outside {shape.rows}x{shape.cols} grid")
    return Coordinate(index // shape.cols, index % shape.cols)


def are_adjacent(a: Coordinate, b: Coordinate) -> bool:
    """True when ``b`` is one king move away from ``a``."""

    row_diff = abs(a.row - b.row)
    col_diff = abs(a.col - b.col)
    return row_diff <= 1 and col_diff <= 1 and (row_diff + col_diff) > 0


def neighbors(coord: Coordinate, shape: GridShape = DEFAULT_SHAPE) -> List[Coordinate]:
    result: List[Coordinate] = []
    for dr, dc in KING_STEPS:
        row, col = coord.row + dr, coord.col + dc
        if shape.contains(row, col):
            result.append(Coordinate(row, col))
    return result


def is_valid_path(path: Sequence[Coordinate], shape: GridShape = DEFAULT_SHAPE) -> bool:
    """Check bounds and step adjacency.

    Repeated cells are not rejected here; see :func:`is_simple_path`.
    """

    if len(path) < 2:
        return False
    for position, coord in enumerate(path):
        if not is_valid_coord(coord, shape):
            return False
        if position > 0 and not are_adjacent(path[position - 1], coord):
            return False
    return True


def has_repeated_cells(path: Sequence[Coordinate]) -> bool:
    return len(set(path)) != len(path)


def is_simple_path(path: Sequence[Coordinate], shape: GridShape = DEFAULT_SHAPE) -> bool:
    """A valid path that never revisits a cell."""

    return is_valid_path(path, shape) and not has_repeated_cells(path)


def spans_opposite_edges(path: Sequence[Coordinate], shape: GridShape = DEFAULT_SHAPE) -> bool:
    if not path:
        return False
    rows = {coord.row for coord in path}
    cols = {coord.col for coord in path}
    spans_vertically = 0 in rows and (shape.rows - 1) in rows
    spans_horizontally = 0 in cols and (shape.cols - 1) in cols
    return spans_vertically or spans_horizontally


def all_cells_used_once(
    paths: Iterable[Sequence[Coordinate]], shape: GridShape = DEFAULT_SHAPE
) -> bool:
    """True when the paths partition the grid: no overlaps and no gaps."""

    used: Set[int] = set()
    for path in paths:
        for coord in path:
            if not is_valid_coord(coord, shape):
                return False
            index = coord_to_index(coord, shape)
            if index in used:
                return False
            used.add(index)
    return len(used) == shape.size


def letter_at(grid_letters: str, coord: Coordinate, shape: GridShape = DEFAULT_SHAPE) -> str:
    if not is_valid_coord(coord, shape):
        return ""
    index = coord_to_index(coord, shape)
    return grid_letters[index] if index < len(grid_letters) else ""


def word_from_path(
    grid_letters: str, path: Sequence[Coordinate], shape: GridShape = DEFAULT_SHAPE
) -> str:
    return "".join(letter_at(grid_letters, coord, shape) for coord in path)


@dataclass
class GridState:
    """Letters placed so far plus the set of occupied cell indices.

    ``letters[i]`` is ``None`` while cell ``i`` is empty. ``used`` is always
    the union of the cells of every applied path.
    """

    shape: GridShape = DEFAULT_SHAPE
    letters: List[Optional[str]] = field(default_factory=list)
    used: Set[int] = field(default_factory=set)

    def __post_init__(self) -> None:
        if not self.letters:
            self.letters = [None] * self.shape.size
        if len(self.letters) != self.shape.size:
            raise ValueError(
                f"Grid state needs {self.shape.size} cells, got {len(self.letters)}"
            )

    @classmethod
    def empty(cls, shape: GridShape = DEFAULT_SHAPE) -> "GridState":
        return cls(shape=shape)

    def clone(self) -> "GridState":
        return GridState(shape=self.shape, letters=list(self.letters), used=set(self.used))

    def is_free(self, index: int) -> bool:
        return index not in self.used

    @property
    def free_count(self) -> int:
        return self.shape.size - len(self.used)

    def apply(self, word: str, path: Sequence[Coordinate]) -> None:
        if len(word) != len(path):
            raise ValueError(f"Path length {len(path)} does not match '{word}'")
        indices = [coord_to_index(coord, self.shape) for coord in path]
        if any(index in self.used for index in indices):
            raise ValueError(f"Path for '{word}' overlaps occupied cells")
        for letter, index in zip(word, indices):
            self.letters[index] = letter
            self.used.add(index)

    def to_string(self, empty: str = " ") -> str:
        return "".join(letter if letter is not None else empty for letter in self.letters)


def free_regions(state: GridState) -> List[Set[int]]:
    """Connected groups of free cells under king-move adjacency."""

    shape = state.shape
    seen: Set[int] = set()
    regions: List[Set[int]] = []
    for start in range(shape.size):
        if start in seen or not state.is_free(start):
            continue
        region = {start}
        seen.add(start)
        queue = deque([start])
        while queue:
            current = index_to_coord(queue.popleft(), shape)
            for neighbor in neighbors(current, shape):
                index = coord_to_index(neighbor, shape)
                if index in seen or not state.is_free(index):
                    continue
                seen.add(index)
                region.add(index)
                queue.append(index)
        regions.append(region)
    return regions


def has_stranded_region(state: GridState, min_length: int) -> bool:
    """True when some free region is too small to hold a ``min_length`` word."""

    return any(len(region) < min_length for region in free_regions(state))
