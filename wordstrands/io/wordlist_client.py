"""Lightweight HTTP client for downloading plain-text word lists."""

from __future__ import annotations

from typing import List

import requests

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_WORDLIST_URL = (
    "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
)


class WordListFetchError(RuntimeError):
    """Raised when the word list cannot be downloaded."""


class WordListClient:
    """Fetches a newline-separated word list over HTTP."""

    def __init__(self, timeout_seconds: float = 30.0) -> None:
        self.timeout_seconds = timeout_seconds

    def fetch_text(self, url: str = DEFAULT_WORDLIST_URL) -> str:
        LOGGER.info("Downloading word list from %s", url)
        try:
            response = requests.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise WordListFetchError(f"Word list request failed: {exc}") from exc
        return response.text

    def fetch_words(self, url: str = DEFAULT_WORDLIST_URL) -> List[str]:
        text = self.fetch_text(url)
        words = [line.strip() for line in text.splitlines() if line.strip()]
        if not words:
            raise WordListFetchError(f"Word list at {url} is empty")
        return words
