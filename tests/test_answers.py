import random
import unittest

from vocabcross.core.constants import Direction
from vocabcross.core.models import Term
from vocabcross.engine import answers
from vocabcross.engine.placement import Placement, PlacementEngine, PuzzleState


def term(text: str) -> Term:
    return Term(text.lower(), "", text)


class AnswersTests(unittest.TestCase):
    def setUp(self) -> None:
        engine = PlacementEngine(rng=random.Random(0))
        self.state = PuzzleState.empty(30)
        self.cat = engine.commit(self.state, term("CAT"), Placement(10, 10, Direction.ACROSS))
        self.ace = engine.commit(self.state, term("ACE"), Placement(9, 10, Direction.DOWN))
        self.grid = self.state.grid

    def test_check_guesses_is_case_insensitive_and_skips_blanks(self) -> None:
        guesses = {(10, 10): "c", (10, 11): "X", (10, 12): " ", (0, 0): "Q"}
        self.assertEqual(answers.check_guesses(self.grid, guesses), {(10, 10): True, (10, 11): False})

    def test_word_completion(self) -> None:
        guesses = {(10, 10): "C", (10, 11): "A", (10, 12): "T"}
        self.assertTrue(answers.is_word_complete(self.grid, self.cat, guesses))
        self.assertFalse(answers.is_word_complete(self.grid, self.ace, guesses))
        self.assertEqual(answers.completed_words(self.grid, self.state.placed_words, guesses), [0])

    def test_progress_counts_filled_letter_cells(self) -> None:
        self.assertEqual(answers.progress(self.grid, {}), (0, 5))
        self.assertEqual(answers.progress(self.grid, {(10, 10): "Z", (9, 10): "a", (3, 3): "B"}), (2, 5))

    def test_is_solved(self) -> None:
        self.assertFalse(answers.is_solved(self.grid, self.state.placed_words, {}))
        solution = answers.reveal_all(self.grid)
        self.assertTrue(answers.is_solved(self.grid, self.state.placed_words, solution))
        self.assertFalse(answers.is_solved(PuzzleState.empty(5).grid, [], {}))

    def test_reveals(self) -> None:
        self.assertEqual(answers.reveal_first_letter(self.grid, self.ace), {(9, 10): "A"})
        self.assertEqual(
            answers.reveal_word(self.grid, self.ace),
            {(9, 10): "A", (10, 10): "C", (11, 10): "E"},
        )
        self.assertEqual(len(answers.reveal_all(self.grid)), 5)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
