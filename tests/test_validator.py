import unittest
from unittest.mock import patch

from wordstrands.core.constants import GridShape
from wordstrands.core.exceptions import ValidationError
from wordstrands.core.models import Coordinate, LayoutResult, PuzzleDraft, ThemeWord
from wordstrands.engine.validator import LayoutVerifier, PuzzleValidator, format_path_mismatch


C = Coordinate
SHAPE = GridShape(rows=4, cols=4)


def row_path(row: int):
    return [C(row, col) for col in range(4)]


def sample_draft() -> PuzzleDraft:
    """ABCD / EFGH / IJKL / MNOP with one word per row."""

    return PuzzleDraft(
        title="Alphabet",
        author="Tester",
        theme_clue="Letters in order",
        grid_letters="ABCDEFGHIJKLMNOP",
        spangram_word="ABCD",
        spangram_path=row_path(0),
        theme_words=[
            ThemeWord("EFGH", row_path(1)),
            ThemeWord("IJKL", row_path(2)),
            ThemeWord("MNOP", row_path(3)),
        ],
    )


class LayoutVerifierTests(unittest.TestCase):
    def setUp(self) -> None:
        self.verifier = LayoutVerifier(SHAPE)
        self.result = LayoutResult(
            grid_letters="ABCDEFGHIJKLMNOP",
            spangram_path=row_path(0),
            theme_word_paths=[row_path(1), row_path(2), row_path(3)],
        )

    def test_sound_layout_has_no_mismatches(self) -> None:
        self.assertEqual(self.verifier.verify(self.result, "ABCD", ["EFGH", "IJKL", "MNOP"]), [])

    def test_letter_mismatch_is_reported(self) -> None:
        self.result.grid_letters = "ABCDEFGHIJKLMNOQ"
        with patch("wordstrands.engine.validator.LOGGER") as logger:
            mismatches = self.verifier.verify(self.result, "ABCD", ["EFGH", "IJKL", "MNOP"])
        # Reporting mismatches is left to the layout observer.
        self.assertFalse(logger.method_calls)
        self.assertEqual(len(mismatches), 1)
        self.assertIn("MNOQ", mismatches[0])
        self.assertIn("theme word 3", mismatches[0])

    def test_swapped_paths_are_rejected(self) -> None:
        mismatches = self.verifier.verify(self.result, "ABCD", ["IJKL", "EFGH", "MNOP"])
        self.assertEqual(len(mismatches), 2)

    def test_overlap_and_missing_paths_are_rejected(self) -> None:
        self.result.theme_word_paths = [row_path(1), row_path(1)]
        mismatches = self.verifier.verify(self.result, "ABCD", ["EFGH", "EFGH", "MNOP"])
        self.assertTrue(any("theme paths" in message for message in mismatches))
        self.assertTrue(any("exactly once" in message for message in mismatches))


class PathMismatchMessageTests(unittest.TestCase):
    def test_length_difference(self) -> None:
        message = format_path_mismatch("Spangram", "ABCD", "ABC")
        self.assertIn("Path has 3 cells but word has 4 letters", message)

    def test_position_of_first_difference(self) -> None:
        message = format_path_mismatch("Theme word 1", "ABCD", "ABXD")
        self.assertIn("position 3", message)


class PuzzleValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = PuzzleValidator(SHAPE)

    def test_valid_puzzle_passes(self) -> None:
        result = self.validator.validate(sample_draft())
        self.assertTrue(result.ok, result.messages)
        self.validator.ensure_valid(sample_draft())

    def test_metadata_required_and_bounded(self) -> None:
        draft = sample_draft()
        draft.title = "   "
        draft.author = "x" * 51
        draft.theme_clue = ""
        result = self.validator.validate(draft)
        self.assertFalse(result.ok)
        self.assertIn("Title is required", result.messages)
        self.assertIn("Author must be 50 characters or less", result.messages)
        self.assertIn("Theme clue is required", result.messages)

    def test_grid_letters_checked(self) -> None:
        draft = sample_draft()
        draft.grid_letters = "abcdefghijklmnop"
        result = self.validator.validate(draft)
        self.assertIn("Grid must contain only uppercase letters A-Z", result.messages)

        draft.grid_letters = "ABC"
        result = self.validator.validate(draft)
        self.assertIn("Grid must contain exactly 16 letters", result.messages)

    def test_spangram_must_span(self) -> None:
        draft = sample_draft()
        # Spangram packed into the top-left 2x2 block touches only two edges.
        draft.grid_letters = "ABEFCDGHIJKLMNOP"
        draft.spangram_path = [C(0, 0), C(0, 1), C(1, 0), C(1, 1)]
        draft.theme_words[0] = ThemeWord("EFGH", [C(0, 2), C(0, 3), C(1, 2), C(1, 3)])
        result = self.validator.validate(draft)
        self.assertFalse(result.ok)
        self.assertEqual(len(result.messages), 1)
        self.assertIn("Must span", result.messages[0])

    def test_path_mismatch_and_adjacency(self) -> None:
        draft = sample_draft()
        draft.theme_words[1] = ThemeWord("IJKL", [C(2, 0), C(2, 1), C(2, 3), C(2, 2)])
        result = self.validator.validate(draft)
        self.assertTrue(any("non-adjacent" in message for message in result.messages))
        self.assertTrue(any("position 3" in message for message in result.messages))

    def test_repeated_cells_and_coverage(self) -> None:
        draft = sample_draft()
        draft.theme_words[2] = ThemeWord("MNOP", [C(3, 0), C(3, 1), C(3, 0), C(3, 1)])
        result = self.validator.validate(draft)
        self.assertTrue(any("same cell" in message for message in result.messages))
        self.assertIn(
            "All grid cells must be used exactly once (no overlaps, no gaps)", result.messages
        )

    def test_short_words_and_missing_paths(self) -> None:
        draft = sample_draft()
        draft.theme_words.append(ThemeWord("ZZ", []))
        result = self.validator.validate(draft)
        self.assertTrue(any("at least 4 characters" in message for message in result.messages))
        self.assertTrue(any("Missing path" in message for message in result.messages))

    def test_ensure_valid_raises_with_messages(self) -> None:
        draft = sample_draft()
        draft.theme_words = []
        with self.assertRaises(ValidationError) as ctx:
            self.validator.ensure_valid(draft)
        self.assertIn("At least one theme word is required", ctx.exception.messages)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
