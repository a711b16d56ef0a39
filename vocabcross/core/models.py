"""Data models supporting the crossword placer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class VocabularyEntry:
    """A raw vocabulary item as supplied by the caller."""

    term: str
    definition: str = ""


@dataclass(frozen=True)
class Term:
    """An eligible vocabulary entry with its placeable letters."""

    term: str
    definition: str
    clean_term: str

    def __len__(self) -> int:
        return len(self.clean_term)


@dataclass
class Cell:
    """Represents an occupied grid cell with metadata."""

    letter: str
    # Set semantics; lists keep write order for serialization.
    crossing_word_ids: List[int] = field(default_factory=list)
    start_numbers: List[int] = field(default_factory=list)

    @property
    def display_number(self) -> Optional[int]:
        return min(self.start_numbers) if self.start_numbers else None

    @property
    def is_intersection(self) -> bool:
        return len(self.crossing_word_ids) > 1


@dataclass(frozen=True)
class PlacedWord:
    """A term committed to the grid. Never mutated after placement."""

    term: Term
    start_row: int
    start_col: int
    direction: Direction
    clue_number: int
    cells: Tuple[Tuple[int, int], ...]

    @property
    def clean_term(self) -> str:
        return self.term.clean_term

    @property
    def text(self) -> str:
        return self.term.term

    @property
    def definition(self) -> str:
        return self.term.definition

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def end(self) -> Tuple[int, int]:
        return self.cells[-1]


def word_cells(row: int, col: int, direction: Direction, length: int) -> Tuple[Tuple[int, int], ...]:
    dr, dc = direction.step
    return tuple((row + dr * i, col + dc * i) for i in range(length))
