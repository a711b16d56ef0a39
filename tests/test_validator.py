import random
import unittest

from vocabcross.core.constants import Direction
from vocabcross.core.models import PlacedWord, Term
from vocabcross.engine.placement import Placement, PlacementEngine, PuzzleState
from vocabcross.engine.validator import GridValidator


def term(text: str) -> Term:
    return Term(text.lower(), "", text)


class GridValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = PlacementEngine(rng=random.Random(0))
        self.state = PuzzleState.empty(30)
        self.engine.commit(self.state, term("CAT"), Placement(10, 10, Direction.ACROSS))
        self.engine.commit(self.state, term("ACE"), Placement(9, 10, Direction.DOWN))
        self.validator = GridValidator()

    def test_valid_puzzle_passes(self) -> None:
        result = self.validator.validate(self.state.grid, self.state.placed_words)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_empty_puzzle_passes(self) -> None:
        self.assertTrue(self.validator.validate(PuzzleState.empty(10).grid, []).ok)

    def test_end_contact_fails(self) -> None:
        self.engine.commit(self.state, term("DOG"), Placement(10, 13, Direction.ACROSS))
        result = self.validator.validate(self.state.grid, self.state.placed_words)
        self.assertFalse(result.ok)
        self.assertIn("touches", result.messages[0])

    def test_parallel_adjacency_fails(self) -> None:
        self.engine.commit(self.state, term("DOG"), Placement(11, 11, Direction.ACROSS))
        result = self.validator.validate(self.state.grid, self.state.placed_words)
        self.assertFalse(result.ok)

    def test_orphan_letter_fails(self) -> None:
        self.state.grid.write_letter(20, 20, "Z", 99)
        result = self.validator.validate(self.state.grid, self.state.placed_words)
        self.assertFalse(result.ok)
        self.assertIn("Orphan", result.messages[0])

    def test_numbering_gap_fails(self) -> None:
        words = list(self.state.placed_words)
        ace = words[1]
        words[1] = PlacedWord(
            term=ace.term,
            start_row=ace.start_row,
            start_col=ace.start_col,
            direction=ace.direction,
            clue_number=3,
            cells=ace.cells,
        )
        self.state.grid.cell(9, 10).start_numbers.append(3)
        result = self.validator.validate(self.state.grid, words)
        self.assertFalse(result.ok)
        self.assertIn("dense", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
