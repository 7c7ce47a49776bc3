"""Pretty-print helpers for puzzle layouts."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

from ..core.constants import DEFAULT_SHAPE, GridShape

if TYPE_CHECKING:
    from ..core.models import LayoutResult


def format_letters(grid_letters: str, shape: GridShape = DEFAULT_SHAPE) -> str:
    header_cells = [f"{c:>2}" for c in range(shape.cols)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * shape.cols - 1))
    for r in range(shape.rows):
        row_letters = grid_letters[r * shape.cols:(r + 1) * shape.cols].ljust(shape.cols, ".")
        row_render = " ".join(f"{letter:>2}" for letter in row_letters)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_word_map(result: LayoutResult, shape: GridShape = DEFAULT_SHAPE) -> str:
    """Grid of word markers: ``*`` for the spangram, 1-9/a-z for theme words."""

    markers = ["."] * shape.size
    for coord in result.spangram_path:
        markers[coord.row * shape.cols + coord.col] = "*"
    symbols = "123456789abcdefghijklmnopqrstuvwxyz"
    for position, path in enumerate(result.theme_word_paths):
        symbol = symbols[position % len(symbols)]
        for coord in path:
            markers[coord.row * shape.cols + coord.col] = symbol
    return format_letters("".join(markers), shape)


def format_paths(result: LayoutResult, spangram: str, theme_words: Sequence[str]) -> str:
    lines = [f"  * {spangram:<12} {_render_path(result.spangram_path)}"]
    for position, (word, path) in enumerate(zip(theme_words, result.theme_word_paths), start=1):
        lines.append(f"{position:>3} {word:<12} {_render_path(path)}")
    return "\n".join(lines)


def _render_path(path) -> str:
    return " ".join(f"({coord.row},{coord.col})" for coord in path)


def pretty_print_layout(
    result: LayoutResult,
    spangram: str,
    theme_words: Sequence[str],
    *,
    shape: GridShape = DEFAULT_SHAPE,
    stream=None,
) -> None:
    """Print the letter grid, the word map and every path."""

    stream = stream or sys.stdout
    print(format_letters(result.grid_letters, shape), file=stream)
    print(file=stream)
    print(format_word_map(result, shape), file=stream)
    print(file=stream)
    print("--- Paths ---", file=stream)
    print(format_paths(result, spangram, theme_words), file=stream)
    print(file=stream)
    print(f"Attempts: {result.attempts}", file=stream)
