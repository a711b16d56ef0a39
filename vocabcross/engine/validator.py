"""Deterministic rule validation for generated crosswords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Set, Tuple

from ..core.exceptions import ValidationError
from ..core.models import PlacedWord
from ..utils.logger import get_logger
from .grid import Grid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs structural validation over a finished grid."""

    def validate(self, grid: Grid, placed_words: Sequence[PlacedWord]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters_consistent(grid, placed_words)
            self._check_occupancy_matches_words(grid, placed_words)
            self._check_separation(grid, placed_words)
            self._check_no_false_adjacency(grid, placed_words)
            self._check_numbering(grid, placed_words)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters_consistent(self, grid: Grid, placed_words: Sequence[PlacedWord]) -> None:
        for word in placed_words:
            if len(word.cells) != len(word.clean_term):
                raise ValidationError(f"Word '{word.clean_term}' has {len(word.cells)} cells")
            for (row, col), letter in zip(word.cells, word.clean_term):
                if grid.letter(row, col) != letter:
                    raise ValidationError(
                        f"Letter mismatch for '{word.clean_term}' at ({row},{col}): "
                        f"grid has {grid.letter(row, col)!r}"
                    )

    def _check_occupancy_matches_words(self, grid: Grid, placed_words: Sequence[PlacedWord]) -> None:
        covered: Set[Tuple[int, int]] = {cell for word in placed_words for cell in word.cells}
        for row, col, cell in grid.occupied_cells():
            if (row, col) not in covered:
                raise ValidationError(f"Orphan letter {cell.letter!r} at ({row},{col})")
            for word_id in cell.crossing_word_ids:
                if not 0 <= word_id < len(placed_words) or (row, col) not in placed_words[word_id].cells:
                    raise ValidationError(f"Cell ({row},{col}) references unknown word {word_id}")

    def _check_separation(self, grid: Grid, placed_words: Sequence[PlacedWord]) -> None:
        for word in placed_words:
            dr, dc = word.direction.step
            end_row, end_col = word.end
            if grid.is_occupied(word.start_row - dr, word.start_col - dc):
                raise ValidationError(f"'{word.clean_term}' touches a letter before its start")
            if grid.is_occupied(end_row + dr, end_col + dc):
                raise ValidationError(f"'{word.clean_term}' touches a letter after its end")

    def _check_no_false_adjacency(self, grid: Grid, placed_words: Sequence[PlacedWord]) -> None:
        for word in placed_words:
            dr, dc = word.direction.step
            for row, col in word.cells:
                cell = grid.cell(row, col)
                if cell is None or cell.is_intersection:
                    continue
                if grid.is_occupied(row - dc, col - dr) or grid.is_occupied(row + dc, col + dr):
                    raise ValidationError(
                        f"'{word.clean_term}' runs alongside another word at ({row},{col})"
                    )

    def _check_numbering(self, grid: Grid, placed_words: Sequence[PlacedWord]) -> None:
        numbers_by_start: Dict[Tuple[int, int], int] = {}
        for word in placed_words:
            start = (word.start_row, word.start_col)
            known = numbers_by_start.setdefault(start, word.clue_number)
            if known != word.clue_number:
                raise ValidationError(f"Words starting at {start} carry different clue numbers")
            cell = grid.cell(*start)
            if cell is None or word.clue_number not in cell.start_numbers:
                raise ValidationError(f"Clue {word.clue_number} missing from start cell {start}")

        used = sorted(set(numbers_by_start.values()))
        if used != list(range(1, len(numbers_by_start) + 1)):
            raise ValidationError(f"Clue numbers are not dense from 1: {used}")
