"""Data models shared by the layout engine and the puzzle validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Sequence


class Coordinate(NamedTuple):
    """A grid cell addressed by row and column."""

    row: int
    col: int

    def to_dict(self) -> Dict[str, int]:
        return {"row": self.row, "col": self.col}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Coordinate":
        return cls(int(payload["row"]), int(payload["col"]))


Path = List[Coordinate]


def path_to_jsonable(path: Sequence[Coordinate]) -> List[Dict[str, int]]:
    return [coord.to_dict() for coord in path]


def path_from_jsonable(payload: Sequence[Dict[str, Any]]) -> Path:
    return [Coordinate.from_dict(item) for item in payload]


@dataclass
class LayoutResult:
    """A verified layout.

    ``theme_word_paths[i]`` always belongs to the i-th theme word the caller
    passed in, whatever order the search placed them in.
    """

    grid_letters: str
    spangram_path: Path
    theme_word_paths: List[Path]
    attempts: int = 1

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "gridLetters": self.grid_letters,
            "spangramPath": path_to_jsonable(self.spangram_path),
            "themeWordPaths": [path_to_jsonable(path) for path in self.theme_word_paths],
        }


@dataclass
class ThemeWord:
    """A theme word together with the path it occupies."""

    word: str
    path: Path = field(default_factory=list)

    def to_jsonable(self) -> Dict[str, Any]:
        return {"word": self.word, "path": path_to_jsonable(self.path)}


@dataclass
class PuzzleDraft:
    """Everything a caller submits to the puzzle store for one puzzle."""

    title: str
    author: str
    theme_clue: str
    grid_letters: str
    spangram_word: str
    spangram_path: Path
    theme_words: List[ThemeWord] = field(default_factory=list)

    @classmethod
    def from_layout(
        cls,
        result: LayoutResult,
        spangram: str,
        theme_words: Sequence[str],
        *,
        title: str = "",
        author: str = "",
        theme_clue: str = "",
    ) -> "PuzzleDraft":
        return cls(
            title=title,
            author=author,
            theme_clue=theme_clue,
            grid_letters=result.grid_letters,
            spangram_word=spangram,
            spangram_path=list(result.spangram_path),
            theme_words=[
                ThemeWord(word=word, path=list(path))
                for word, path in zip(theme_words, result.theme_word_paths)
            ],
        )

    @classmethod
    def from_jsonable(cls, payload: Dict[str, Any]) -> "PuzzleDraft":
        return cls(
            title=payload.get("title", ""),
            author=payload.get("author", ""),
            theme_clue=payload.get("themeClue", ""),
            grid_letters=payload.get("gridLetters", ""),
            spangram_word=payload.get("spangramWord", ""),
            spangram_path=path_from_jsonable(payload.get("spangramPath") or []),
            theme_words=[
                ThemeWord(word=item.get("word", ""), path=path_from_jsonable(item.get("path") or []))
                for item in payload.get("themeWords") or []
            ],
        )

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "themeClue": self.theme_clue,
            "gridLetters": self.grid_letters,
            "spangramWord": self.spangram_word,
            "spangramPath": path_to_jsonable(self.spangram_path),
            "themeWords": [theme_word.to_jsonable() for theme_word in self.theme_words],
        }
