"""Deterministic checks for generated layouts and submitted puzzles."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import (
    DEFAULT_SHAPE,
    MAX_AUTHOR_LENGTH,
    MAX_SPANGRAM_LENGTH,
    MAX_THEME_CLUE_LENGTH,
    MAX_TITLE_LENGTH,
    MIN_WORD_LENGTH,
    GridShape,
)
from ..core.exceptions import ValidationError
from ..core.models import Coordinate, LayoutResult, PuzzleDraft
from ..utils.logger import get_logger
from .grid import (
    all_cells_used_once,
    has_repeated_cells,
    is_valid_path,
    spans_opposite_edges,
    word_from_path,
)


LOGGER = get_logger(__name__)

GRID_LETTERS_RE = re.compile(r"^[A-Z]+$")


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class LayoutVerifier:
    """Re-reads every word off a candidate layout before it is accepted."""

    def __init__(self, shape: GridShape = DEFAULT_SHAPE) -> None:
        self.shape = shape

    def verify(
        self, result: LayoutResult, spangram: str, theme_words: Sequence[str]
    ) -> List[str]:
        """Return every mismatch found; an empty list means the layout is sound."""

        mismatches: List[str] = []
        if len(result.grid_letters) != self.shape.size:
            mismatches.append(
                f"Grid has {len(result.grid_letters)} letters, expected {self.shape.size}"
            )
        if len(result.theme_word_paths) != len(theme_words):
            mismatches.append(
                f"Layout has {len(result.theme_word_paths)} theme paths "
                f"for {len(theme_words)} theme words"
            )

        expected = [("spangram", spangram, result.spangram_path)] + [
            (f"theme word {position + 1}", word, path)
            for position, (word, path) in enumerate(zip(theme_words, result.theme_word_paths))
        ]
        for label, word, path in expected:
            traced = word_from_path(result.grid_letters, path, self.shape)
            if traced != word:
                mismatches.append(f"{label}: path traces '{traced}' instead of '{word}'")

        if not spans_opposite_edges(result.spangram_path, self.shape):
            mismatches.append("spangram does not span opposite edges")
        if not all_cells_used_once(
            [result.spangram_path, *result.theme_word_paths], self.shape
        ):
            mismatches.append("paths do not cover every cell exactly once")

        return mismatches


def format_path_mismatch(label: str, expected_word: str, actual_word: str) -> str:
    """Describe where a traced path diverges from the word it should spell."""

    if len(actual_word) != len(expected_word):
        return (
            f"{label}: Path has {len(actual_word)} cells but word has {len(expected_word)} "
            f"letters. The path traced \"{actual_word}\" but expected \"{expected_word}\"."
        )
    for position, (expected, actual) in enumerate(zip(expected_word, actual_word)):
        if expected != actual:
            return (
                f"{label}: Path mismatch at position {position + 1}. Expected "
                f"\"{expected_word}\" but path traced \"{actual_word}\". "
                "Try regenerating the layout or adjusting your words."
            )
    return (
        f"{label}: Path does not match the word in the grid. Expected "
        f"\"{expected_word}\" but got \"{actual_word}\"."
    )


class PuzzleValidator:
    """Runs the submission checks a puzzle must pass before it is stored."""

    def __init__(self, shape: GridShape = DEFAULT_SHAPE) -> None:
        self.shape = shape

    def validate(self, draft: PuzzleDraft) -> ValidationResult:
        messages: List[str] = []
        self._check_metadata(draft, messages)
        grid_ok = self._check_grid_letters(draft.grid_letters, messages)
        self._check_spangram(draft, grid_ok, messages)
        self._check_theme_words(draft, grid_ok, messages)
        self._check_coverage(draft, messages)
        if messages:
            LOGGER.warning("Puzzle validation failed with %d problem(s)", len(messages))
        return ValidationResult(ok=not messages, messages=messages)

    def ensure_valid(self, draft: PuzzleDraft) -> None:
        result = self.validate(draft)
        if not result.ok:
            raise ValidationError(result.messages)

    # ------------------------------------------------------------------
    # Individual checks
    # ------------------------------------------------------------------
    @staticmethod
    def _check_metadata(draft: PuzzleDraft, messages: List[str]) -> None:
        fields = (
            ("Title", draft.title, MAX_TITLE_LENGTH),
            ("Author", draft.author, MAX_AUTHOR_LENGTH),
            ("Theme clue", draft.theme_clue, MAX_THEME_CLUE_LENGTH),
        )
        for name, value, limit in fields:
            if not value or not value.strip():
                messages.append(f"{name} is required")
            elif len(value) > limit:
                messages.append(f"{name} must be {limit} characters or less")

    def _check_grid_letters(self, grid_letters: str, messages: List[str]) -> bool:
        if not grid_letters or len(grid_letters) != self.shape.size:
            messages.append(f"Grid must contain exactly {self.shape.size} letters")
            return False
        if not GRID_LETTERS_RE.match(grid_letters):
            messages.append("Grid must contain only uppercase letters A-Z")
            return False
        return True

    def _check_path(
        self,
        label: str,
        word: str,
        path: Sequence[Coordinate],
        grid_letters: Optional[str],
        messages: List[str],
    ) -> None:
        if not is_valid_path(path, self.shape):
            messages.append(
                f"{label}: Path contains invalid or non-adjacent coordinates. "
                "Each cell must be adjacent to the previous one."
            )
        if has_repeated_cells(path):
            messages.append(f"{label}: Path uses the same cell more than once.")
        if grid_letters is not None:
            traced = word_from_path(grid_letters, path, self.shape)
            if traced != word:
                messages.append(format_path_mismatch(label, word, traced))

    def _check_spangram(self, draft: PuzzleDraft, grid_ok: bool, messages: List[str]) -> None:
        word = draft.spangram_word or ""
        if len(word) < MIN_WORD_LENGTH:
            messages.append(f"Spangram must be at least {MIN_WORD_LENGTH} characters")
        elif len(word) > MAX_SPANGRAM_LENGTH:
            messages.append(f"Spangram must be {MAX_SPANGRAM_LENGTH} characters or less")

        if not draft.spangram_path:
            messages.append("Spangram path is required")
            return
        label = f"Spangram (\"{word}\")"
        self._check_path(
            label, word, draft.spangram_path, draft.grid_letters if grid_ok else None, messages
        )
        if not spans_opposite_edges(draft.spangram_path, self.shape):
            messages.append(
                f"{label}: Must span from one edge to the opposite edge "
                "(top-to-bottom or left-to-right)."
            )

    def _check_theme_words(self, draft: PuzzleDraft, grid_ok: bool, messages: List[str]) -> None:
        if not draft.theme_words:
            messages.append("At least one theme word is required")
            return
        for position, theme_word in enumerate(draft.theme_words):
            label = f"Theme word {position + 1} (\"{theme_word.word}\")"
            if len(theme_word.word or "") < MIN_WORD_LENGTH:
                messages.append(f"{label}: Must be at least {MIN_WORD_LENGTH} characters long.")
            if not theme_word.path:
                messages.append(
                    f"{label}: Missing path. Please draw or generate a path for this word."
                )
                continue
            self._check_path(
                label,
                theme_word.word,
                theme_word.path,
                draft.grid_letters if grid_ok else None,
                messages,
            )

    def _check_coverage(self, draft: PuzzleDraft, messages: List[str]) -> None:
        if not draft.spangram_path or not draft.theme_words:
            return
        paths = [draft.spangram_path] + [theme_word.path for theme_word in draft.theme_words]
        if not all_cells_used_once(paths, self.shape):
            messages.append("All grid cells must be used exactly once (no overlaps, no gaps)")
