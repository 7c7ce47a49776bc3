"""Custom exception hierarchy for puzzle layout and validation."""


class StrandsError(Exception):
    """Base exception for puzzle failures."""


class LayoutInputError(StrandsError):
    """Raised when layout inputs are rejected before any search happens."""


class InvalidWordError(LayoutInputError):
    """Raised when a word is empty or contains characters other than A-Z."""


class LetterCountError(LayoutInputError):
    """Raised when the words do not add up to exactly one letter per cell."""

    def __init__(self, total: int, expected: int) -> None:
        self.total = total
        self.expected = expected
        super().__init__(
            f"Total letters ({total}) must equal {expected}. Add or remove letters."
        )


class LayoutNotFoundError(StrandsError):
    """Raised when no verified layout was found within the attempt and time caps."""

    def __init__(self, message: str, attempts: int = 0) -> None:
        self.attempts = attempts
        super().__init__(message)


class ValidationError(StrandsError):
    """Raised when the puzzle integrity checks fail."""

    def __init__(self, messages) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class DictionaryLoadError(StrandsError):
    """Raised when the word list cannot be read or fetched."""
