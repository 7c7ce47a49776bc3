"""Judging a player's selected path against a stored puzzle.

Selections are checked with the same geometry helpers the layout engine and
the submission validator use, so a word is found during play exactly when
its path would have been accepted at creation time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from ..core.constants import DEFAULT_SHAPE, MIN_WORD_LENGTH, GridShape
from ..core.models import Coordinate, PuzzleDraft
from ..data.dictionary import WordDictionary
from .grid import is_simple_path, word_from_path


class MatchKind(str, Enum):
    SPANGRAM = "SPANGRAM"
    THEME = "THEME"
    BONUS = "BONUS"
    NONE = "NONE"
    INVALID = "INVALID"


@dataclass(frozen=True)
class SelectionMatch:
    kind: MatchKind
    word: str = ""
    theme_index: Optional[int] = None

    @property
    def is_puzzle_word(self) -> bool:
        return self.kind in (MatchKind.SPANGRAM, MatchKind.THEME)


class SelectionMatcher:
    """Classifies selections for one puzzle.

    A puzzle word only counts when both its letters and its exact cells, in
    order, match the stored path. Other dictionary words of at least
    ``MIN_WORD_LENGTH`` letters are reported as bonus words.
    """

    def __init__(
        self,
        puzzle: PuzzleDraft,
        dictionary: Optional[WordDictionary] = None,
        shape: GridShape = DEFAULT_SHAPE,
    ) -> None:
        self.puzzle = puzzle
        self.dictionary = dictionary
        self.shape = shape

    def match(self, selection: Sequence[Coordinate]) -> SelectionMatch:
        if not is_simple_path(selection, self.shape):
            return SelectionMatch(MatchKind.INVALID)

        selected = list(selection)
        word = word_from_path(self.puzzle.grid_letters, selected, self.shape)
        if word == self.puzzle.spangram_word and selected == list(self.puzzle.spangram_path):
            return SelectionMatch(MatchKind.SPANGRAM, word)
        for position, theme_word in enumerate(self.puzzle.theme_words):
            if word == theme_word.word and selected == list(theme_word.path):
                return SelectionMatch(MatchKind.THEME, word, theme_index=position)

        if (
            self.dictionary is not None
            and len(word) >= MIN_WORD_LENGTH
            and not self._is_puzzle_word(word)
            and self.dictionary.is_valid_word(word)
        ):
            return SelectionMatch(MatchKind.BONUS, word)
        return SelectionMatch(MatchKind.NONE, word)

    def is_solved(self, found: Iterable[SelectionMatch]) -> bool:
        """True once the spangram and every theme word have been found."""

        found_spangram = False
        found_themes = set()
        for item in found:
            if item.kind == MatchKind.SPANGRAM:
                found_spangram = True
            elif item.kind == MatchKind.THEME:
                found_themes.add(item.theme_index)
        return found_spangram and len(found_themes) == len(self.puzzle.theme_words)

    def _is_puzzle_word(self, word: str) -> bool:
        if word == self.puzzle.spangram_word:
            return True
        return any(theme_word.word == word for theme_word in self.puzzle.theme_words)
