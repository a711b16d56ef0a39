"""Answer checking and hints over caller-owned guesses.

The grid only knows the solution. Guesses live with the caller as a mapping
``{(row, col): letter}``; these helpers compare the two and hand back
solution letters for hints without storing anything.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Tuple

from ..core.models import PlacedWord
from .grid import Grid

Guesses = Mapping[Tuple[int, int], str]


def _normalize(guess: str) -> str:
    return (guess or "").strip().upper()


def check_guesses(grid: Grid, guesses: Guesses) -> Dict[Tuple[int, int], bool]:
    """Map each non-blank guess on an occupied cell to whether it is right."""

    results: Dict[Tuple[int, int], bool] = {}
    for (row, col), guess in guesses.items():
        value = _normalize(guess)
        answer = grid.letter(row, col)
        if not value or answer is None:
            continue
        results[(row, col)] = value == answer
    return results


def is_word_complete(grid: Grid, word: PlacedWord, guesses: Guesses) -> bool:
    return all(_normalize(guesses.get(cell, "")) == grid.letter(*cell) for cell in word.cells)


def completed_words(grid: Grid, placed_words: Sequence[PlacedWord], guesses: Guesses) -> List[int]:
    """Indices of the placed words whose every cell is guessed correctly."""

    return [index for index, word in enumerate(placed_words) if is_word_complete(grid, word, guesses)]


def progress(grid: Grid, guesses: Guesses) -> Tuple[int, int]:
    """``(filled, total)`` letter cells, counting any non-blank guess."""

    filled = sum(
        1 for row, col, _ in grid.occupied_cells() if _normalize(guesses.get((row, col), ""))
    )
    return filled, grid.occupied_count


def is_solved(grid: Grid, placed_words: Sequence[PlacedWord], guesses: Guesses) -> bool:
    if not placed_words:
        return False
    return all(
        _normalize(guesses.get((row, col), "")) == cell.letter
        for row, col, cell in grid.occupied_cells()
    )


def reveal_first_letter(grid: Grid, word: PlacedWord) -> Dict[Tuple[int, int], str]:
    first = word.cells[0]
    return {first: grid.letter(*first) or ""}


def reveal_word(grid: Grid, word: PlacedWord) -> Dict[Tuple[int, int], str]:
    return {cell: grid.letter(*cell) or "" for cell in word.cells}


def reveal_all(grid: Grid) -> Dict[Tuple[int, int], str]:
    return {(row, col): cell.letter for row, col, cell in grid.occupied_cells()}
