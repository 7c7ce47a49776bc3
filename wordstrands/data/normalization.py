"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Za-z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``.

    Accents are folded to their base letter and anything that is not a
    letter (spaces, hyphens, apostrophes) is dropped.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    ascii_word = WORD_RE.sub("", decomposed.encode("ascii", "ignore").decode("ascii"))
    return ascii_word.upper()


__all__ = ["clean_word"]
