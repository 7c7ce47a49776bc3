import random
import unittest

from wordstrands.core.constants import Edge, GridShape
from wordstrands.core.models import Coordinate
from wordstrands.engine.grid import GridState, coord_to_index, is_simple_path, spans_opposite_edges
from wordstrands.engine.search import edge_starts, find_word_path, place_spangram


C = Coordinate


class FindWordPathTests(unittest.TestCase):
    def test_path_has_word_length_and_starts_at_start(self) -> None:
        state = GridState.empty()
        path = find_word_path("BREEZE", C(3, 2), state, random.Random(1))
        self.assertIsNotNone(path)
        assert path is not None
        self.assertEqual(len(path), 6)
        self.assertEqual(path[0], C(3, 2))
        self.assertTrue(is_simple_path(path))

    def test_search_avoids_used_cells_and_leaves_state_alone(self) -> None:
        shape = GridShape(rows=3, cols=3)
        state = GridState.empty(shape)
        state.apply("ABC", [C(0, 0), C(0, 1), C(0, 2)])
        before = (list(state.letters), set(state.used))
        for seed in range(20):
            path = find_word_path("DEFGHI", C(1, 0), state, random.Random(seed))
            self.assertIsNotNone(path)
            assert path is not None
            self.assertTrue(all(coord_to_index(c, shape) not in state.used for c in path))
            self.assertTrue(is_simple_path(path, shape))
        self.assertEqual((state.letters, state.used), before)

    def test_used_start_or_too_long_word_returns_none(self) -> None:
        shape = GridShape(rows=2, cols=2)
        state = GridState.empty(shape)
        state.apply("AB", [C(0, 0), C(0, 1)])
        self.assertIsNone(find_word_path("CD", C(0, 0), state, random.Random(0)))
        self.assertIsNone(find_word_path("CDE", C(1, 0), state, random.Random(0)))

    def test_single_letter_word(self) -> None:
        state = GridState.empty(GridShape(rows=2, cols=2))
        self.assertEqual(find_word_path("A", C(1, 1), state, random.Random(0)), [C(1, 1)])

    def test_same_seed_same_path(self) -> None:
        state = GridState.empty()
        first = find_word_path("SHELL", C(4, 4), state, random.Random(42))
        second = find_word_path("SHELL", C(4, 4), state, random.Random(42))
        self.assertEqual(first, second)


class SpangramPlacementTests(unittest.TestCase):
    def test_edge_starts_cover_every_edge_cell(self) -> None:
        starts = edge_starts(GridState.empty(), random.Random(3))
        self.assertEqual(len(starts[Edge.TOP]), 6)
        self.assertEqual(len(starts[Edge.LEFT]), 8)
        self.assertTrue(all(c.row == 7 for c in starts[Edge.BOTTOM]))
        self.assertTrue(all(c.col == 5 for c in starts[Edge.RIGHT]))

    def test_spangram_spans_and_is_committed(self) -> None:
        placed = 0
        for seed in range(40):
            state = GridState.empty()
            path = place_spangram("BEACHGOING", state, random.Random(seed))
            if path is None:
                self.assertEqual(state.used, set())
                continue
            placed += 1
            self.assertTrue(spans_opposite_edges(path))
            self.assertTrue(is_simple_path(path))
            self.assertEqual(len(state.used), 10)
            self.assertEqual("".join(state.letters[coord_to_index(c)] for c in path), "BEACHGOING")
        self.assertGreater(placed, 0)

    def test_two_row_grid_any_path_crossing_rows_spans(self) -> None:
        shape = GridShape(rows=2, cols=2)
        state = GridState.empty(shape)
        path = place_spangram("AB", state, random.Random(5))
        self.assertIsNotNone(path)
        self.assertEqual(len(state.used), 2)

    def test_impossible_spangram_leaves_state_untouched(self) -> None:
        shape = GridShape(rows=3, cols=3)
        state = GridState.empty(shape)
        self.assertIsNone(place_spangram("AB", state, random.Random(0)))
        self.assertEqual(state.used, set())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
