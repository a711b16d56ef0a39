"""Crossword clue numbering."""

from __future__ import annotations

from typing import Sequence

from ..core.models import PlacedWord


def next_clue_number(placed_words: Sequence[PlacedWord], row: int, col: int) -> int:
    """Number for a word about to start at ``(row, col)``.

    A word already starting on that cell lends its number, so an across and a
    down entry sharing a first cell share a clue number. Otherwise the
    smallest positive integer not yet in use is returned. Must be called
    before the new word joins ``placed_words``.
    """

    for word in placed_words:
        if word.start_row == row and word.start_col == col:
            return word.clue_number

    used = {word.clue_number for word in placed_words}
    number = 1
    while number in used:
        number += 1
    return number
