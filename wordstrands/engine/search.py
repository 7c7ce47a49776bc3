"""Randomized depth-first placement of single words."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Set

from ..core.constants import KING_STEPS, Edge
from ..core.models import Coordinate, Path
from .grid import GridState, coord_to_index, spans_opposite_edges


def find_word_path(
    word: str,
    start: Coordinate,
    state: GridState,
    rng: random.Random,
) -> Optional[Path]:
    """Find one self-avoiding path for ``word`` that begins at ``start``.

    Only free cells of ``state`` are visited and ``state`` itself is never
    modified. The eight step directions are reshuffled at every depth, which
    is where layout variety comes from. Returns ``None`` when ``start`` is
    taken or every branch dead-ends.
    """

    shape = state.shape
    if not word or not shape.contains(start.row, start.col):
        return None
    start_index = coord_to_index(start, shape)
    if not state.is_free(start_index):
        return None

    path: Path = [start]
    in_path: Set[int] = {start_index}

    def extend(letter_index: int, current: Coordinate) -> bool:
        if letter_index == len(word):
            return True
        steps = list(KING_STEPS)
        rng.shuffle(steps)
        for dr, dc in steps:
            row, col = current.row + dr, current.col + dc
            if not shape.contains(row, col):
                continue
            index = row * shape.cols + col
            if index in in_path or not state.is_free(index):
                continue
            step = Coordinate(row, col)
            path.append(step)
            in_path.add(index)
            if extend(letter_index + 1, step):
                return True
            path.pop()
            in_path.discard(index)
        return False

    if extend(1, start):
        return path
    return None


def edge_starts(state: GridState, rng: random.Random) -> Dict[Edge, List[Coordinate]]:
    """Every cell on each edge, each list independently shuffled."""

    shape = state.shape
    starts = {
        Edge.TOP: [Coordinate(0, col) for col in range(shape.cols)],
        Edge.LEFT: [Coordinate(row, 0) for row in range(shape.rows)],
        Edge.BOTTOM: [Coordinate(shape.rows - 1, col) for col in range(shape.cols)],
        Edge.RIGHT: [Coordinate(row, shape.cols - 1) for row in range(shape.rows)],
    }
    for candidates in starts.values():
        rng.shuffle(candidates)
    return starts


def place_spangram(word: str, state: GridState, rng: random.Random) -> Optional[Path]:
    """Place ``word`` so that it touches two opposite edges.

    Starts are tried edge by edge (top, left, bottom, right). The first
    spanning path is committed into ``state`` and returned.
    """

    starts = edge_starts(state, rng)
    for edge in (Edge.TOP, Edge.LEFT, Edge.BOTTOM, Edge.RIGHT):
        for start in starts[edge]:
            path = find_word_path(word, start, state, rng)
            if path is None or not spans_opposite_edges(path, state.shape):
                continue
            state.apply(word, path)
            return path
    return None
