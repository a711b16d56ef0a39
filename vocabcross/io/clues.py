"""Clue list building for presentation layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..core.constants import DIRECTIONS, Direction
from ..core.models import PlacedWord


@dataclass(frozen=True)
class ClueEntry:
    number: int
    direction: Direction
    text: str
    answer: str
    length: int
    word_index: int


def build_clue_list(placed_words: Sequence[PlacedWord]) -> Dict[Direction, List[ClueEntry]]:
    """Group placed words by direction, each group sorted by clue number."""

    grouped: Dict[Direction, List[ClueEntry]] = {direction: [] for direction in DIRECTIONS}
    for index, word in enumerate(placed_words):
        grouped[word.direction].append(
            ClueEntry(
                number=word.clue_number,
                direction=word.direction,
                text=word.definition,
                answer=word.clean_term,
                length=word.length,
                word_index=index,
            )
        )
    for entries in grouped.values():
        entries.sort(key=lambda entry: (entry.number, entry.word_index))
    return grouped
