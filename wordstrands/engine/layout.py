"""Automatic layout of a spangram and its theme words onto the grid.

Each attempt places the spangram first, then the theme words longest first
with bounded backtracking: at most ``max_backtracks`` successful placements
are tried for any one word before the attempt is abandoned. Attempts repeat
with fresh randomness until one passes verification, the attempt cap is hit,
or the deadline for the whole call passes.
"""

from __future__ import annotations

import random
import re
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from ..core.constants import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_BACKTRACKS,
    DEFAULT_SHAPE,
    DEFAULT_TIME_LIMIT_MS,
    LAYOUT_FAILURE_MESSAGE,
    GridShape,
)
from ..core.exceptions import InvalidWordError, LayoutNotFoundError, LetterCountError
from ..core.models import LayoutResult, Path
from ..utils.logger import get_logger
from .grid import GridState, has_stranded_region, index_to_coord
from .search import find_word_path, place_spangram
from .validator import LayoutVerifier


WORD_RE = re.compile(r"^[A-Z]+$")

# (original position in the caller's list, word)
TaggedWord = Tuple[int, str]


@dataclass
class LayoutConfig:
    shape: GridShape = field(default_factory=lambda: DEFAULT_SHAPE)
    max_backtracks: int = DEFAULT_MAX_BACKTRACKS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    time_limit_ms: float = DEFAULT_TIME_LIMIT_MS
    seed: Optional[int] = None
    prune_stranded_regions: bool = False

    def __post_init__(self) -> None:
        if self.max_backtracks < 1:
            raise ValueError("max_backtracks must be at least 1")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.time_limit_ms < 0:
            raise ValueError("time_limit_ms cannot be negative")


class LayoutObserver(Protocol):
    """Receives progress events from :class:`LayoutEngine`."""

    def attempt_started(self, attempt: int) -> None: ...

    def attempt_failed(self, attempt: int, reason: str) -> None: ...

    def verification_failed(self, attempt: int, mismatches: List[str]) -> None: ...

    def layout_found(self, attempt: int, elapsed_ms: float) -> None: ...


class NullLayoutObserver:
    def attempt_started(self, attempt: int) -> None:
        pass

    def attempt_failed(self, attempt: int, reason: str) -> None:
        pass

    def verification_failed(self, attempt: int, mismatches: List[str]) -> None:
        pass

    def layout_found(self, attempt: int, elapsed_ms: float) -> None:
        pass


class LoggingLayoutObserver:
    """Forwards engine events to the package logger."""

    def __init__(self, name: Optional[str] = None) -> None:
        self.logger = get_logger(name or __name__)

    def attempt_started(self, attempt: int) -> None:
        self.logger.debug("Layout attempt %s started", attempt)

    def attempt_failed(self, attempt: int, reason: str) -> None:
        self.logger.debug("Layout attempt %s failed: %s", attempt, reason)

    def verification_failed(self, attempt: int, mismatches: List[str]) -> None:
        self.logger.warning(
            "Layout attempt %s rejected by verifier: %s", attempt, "; ".join(mismatches)
        )

    def layout_found(self, attempt: int, elapsed_ms: float) -> None:
        self.logger.info("Layout found on attempt %s after %.0f ms", attempt, elapsed_ms)


class LayoutEngine:
    """Finds a verified layout for one spangram and its theme words."""

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        rng: Optional[random.Random] = None,
        observer: Optional[LayoutObserver] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or LayoutConfig()
        self.shape = self.config.shape
        self.rng = rng or random.Random(self.config.seed)
        self.observer = observer or NullLayoutObserver()
        self.clock = clock
        self.verifier = LayoutVerifier(self.shape)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def layout(self, spangram: str, theme_words: Sequence[str]) -> LayoutResult:
        """Lay out every word or raise.

        Raises :class:`InvalidWordError` or :class:`LetterCountError` before
        searching when the inputs cannot tile the grid, and
        :class:`LayoutNotFoundError` when every attempt failed.
        """

        theme_words = list(theme_words)
        self._check_inputs(spangram, theme_words)

        started = self.clock()
        deadline = started + self.config.time_limit_ms / 1000.0
        # Stable sort keeps the caller's order among equal lengths.
        ordered: List[TaggedWord] = sorted(
            enumerate(theme_words), key=lambda tagged: -len(tagged[1])
        )

        attempts = 0
        for attempt in range(1, self.config.max_attempts + 1):
            if self._expired(deadline):
                break
            attempts = attempt
            self.observer.attempt_started(attempt)
            candidate = self._attempt(spangram, ordered, deadline)
            if candidate is None:
                reason = "deadline reached" if self._expired(deadline) else "placements exhausted"
                self.observer.attempt_failed(attempt, reason)
                continue
            candidate.attempts = attempt
            mismatches = self.verifier.verify(candidate, spangram, theme_words)
            if mismatches:
                self.observer.verification_failed(attempt, mismatches)
                continue
            self.observer.layout_found(attempt, (self.clock() - started) * 1000.0)
            return candidate

        raise LayoutNotFoundError(LAYOUT_FAILURE_MESSAGE, attempts=attempts)

    # ------------------------------------------------------------------
    # Single attempt
    # ------------------------------------------------------------------
    def _attempt(
        self, spangram: str, ordered: List[TaggedWord], deadline: float
    ) -> Optional[LayoutResult]:
        state = GridState.empty(self.shape)
        spangram_path = place_spangram(spangram, state, self.rng)
        if spangram_path is None:
            return None
        if self._is_stranded(state, ordered, 0):
            return None

        placed = self._place_words(ordered, 0, state, deadline)
        if placed is None:
            return None
        paths, final_state = placed

        theme_word_paths: List[Path] = [[] for _ in ordered]
        for (original_position, _), path in zip(ordered, paths):
            theme_word_paths[original_position] = path
        return LayoutResult(
            grid_letters=final_state.to_string(),
            spangram_path=spangram_path,
            theme_word_paths=theme_word_paths,
        )

    def _place_words(
        self, words: List[TaggedWord], position: int, state: GridState, deadline: float
    ) -> Optional[Tuple[List[Path], GridState]]:
        if self._expired(deadline):
            return None
        if position >= len(words):
            return [], state

        _, word = words[position]
        starts = list(range(self.shape.size))
        self.rng.shuffle(starts)

        alternatives = 0
        for index in starts:
            if alternatives >= self.config.max_backtracks:
                break
            if self._expired(deadline):
                return None
            if not state.is_free(index):
                continue
            path = find_word_path(word, index_to_coord(index, self.shape), state, self.rng)
            if path is None:
                continue

            branch = state.clone()
            branch.apply(word, path)
            if self._is_stranded(branch, words, position + 1):
                continue
            alternatives += 1

            rest = self._place_words(words, position + 1, branch, deadline)
            if rest is not None:
                rest_paths, final_state = rest
                return [path] + rest_paths, final_state
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_inputs(self, spangram: str, theme_words: List[str]) -> None:
        for word in [spangram, *theme_words]:
            if not isinstance(word, str) or not WORD_RE.match(word):
                raise InvalidWordError(
                    f"Word {word!r} must be non-empty and use only uppercase letters A-Z"
                )
        total = len(spangram) + sum(len(word) for word in theme_words)
        if total != self.shape.size:
            raise LetterCountError(total, self.shape.size)

    def _is_stranded(self, state: GridState, words: List[TaggedWord], position: int) -> bool:
        if not self.config.prune_stranded_regions or position >= len(words):
            return False
        shortest = min(len(word) for _, word in words[position:])
        return has_stranded_region(state, shortest)

    def _expired(self, deadline: float) -> bool:
        return self.clock() > deadline


def auto_layout(
    spangram: str,
    theme_words: Sequence[str],
    config: Optional[LayoutConfig] = None,
    **kwargs,
) -> LayoutResult:
    """Convenience wrapper around :meth:`LayoutEngine.layout`."""

    return LayoutEngine(config, **kwargs).layout(spangram, theme_words)
