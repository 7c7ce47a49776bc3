"""English word list used to recognise bonus words during play."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Set

from ..core.exceptions import DictionaryLoadError
from ..io.wordlist_client import WordListClient, WordListFetchError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

DEFAULT_WORDLIST_PATH = Path("local_db/words_alpha.txt")


@dataclass
class DictionaryConfig:
    """Configuration for word list loading."""

    path: Path | str = DEFAULT_WORDLIST_PATH
    source_url: Optional[str] = None
    min_length: int = 1
    persist_download: bool = True


class WordDictionary:
    """Case-insensitive membership test over a plain-text word list.

    The list is read from ``config.path``. When that file does not exist and
    ``config.source_url`` is set, the list is downloaded once and cached at
    ``config.path`` for the next run. Passing ``words`` skips the file entirely.
    """

    def __init__(
        self,
        config: Optional[DictionaryConfig] = None,
        client: Optional[WordListClient] = None,
        words: Optional[Iterable[str]] = None,
    ) -> None:
        self.config = config or DictionaryConfig()
        self.client = client
        self._words: Set[str] = set()
        if words is None:
            self._load()
        else:
            self._add_all(words)

    @classmethod
    def from_words(cls, words: Iterable[str], min_length: int = 1) -> "WordDictionary":
        return cls(DictionaryConfig(min_length=min_length), words=words)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def _load(self) -> None:
        source = Path(self.config.path)
        if source.exists():
            try:
                text = source.read_text(encoding="utf-8")
            except OSError as exc:
                raise DictionaryLoadError(f"Cannot read word list {source}: {exc}") from exc
            self._add_all(text.splitlines())
        elif self.config.source_url:
            self._download(source)
        else:
            raise DictionaryLoadError(f"Missing word list: {source}")
        LOGGER.info("Loaded %d dictionary words", len(self._words))

    def _download(self, destination: Path) -> None:
        client = self.client or WordListClient()
        try:
            words = client.fetch_words(self.config.source_url)
        except WordListFetchError as exc:
            raise DictionaryLoadError(str(exc)) from exc
        self._add_all(words)
        if self.config.persist_download:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text("\n".join(sorted(self._words)) + "\n", encoding="utf-8")
            LOGGER.info("Cached word list at %s", destination)

    def _add_all(self, words: Iterable[str]) -> None:
        for raw in words:
            word = clean_word(raw.strip())
            if len(word) >= max(1, self.config.min_length):
                self._words.add(word)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def is_valid_word(self, word: str) -> bool:
        return clean_word(word) in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._words)
