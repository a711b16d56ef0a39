"""Heuristic word placement.

The engine works in four passes over a shuffled term list:

  1. Seed: the first term goes on the empty grid at a random orientation and
     a random position well inside the borders.
  2. Intersect: every other term is placed at the best-scoring crossing with
     a letter already on the grid, or deferred.
  3. Retry: deferred terms get one more intersect pass on the denser grid.
  4. Fallback: anything still left is dropped into open space near the
     existing words, then anywhere on a coarse scan. Terms that fail even
     that are left out of the puzzle.

All passes share one :class:`PuzzleState`, owned by a single generation run.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import (
    CENTER_DISTANCE_WEIGHT,
    COARSE_SCAN_MARGIN,
    COARSE_SCAN_STRIDE,
    DIRECTIONS,
    FALLBACK_OFFSETS,
    FALLBACK_RADIUS,
    GRID_SIZE,
    INTERSECTION_WEIGHT,
    SEED_MARGIN,
    SEED_SLACK,
    Direction,
)
from ..core.models import PlacedWord, Term, word_cells
from ..data.vocabulary import shuffled
from ..utils.logger import get_logger
from .grid import Grid, occupied_extent
from .numbering import next_clue_number


LOGGER = get_logger(__name__)


@dataclass
class PuzzleState:
    """Grid plus the append-only list of placed words for one run."""

    grid: Grid
    placed_words: List[PlacedWord] = field(default_factory=list)
    dropped: List[Term] = field(default_factory=list)

    @classmethod
    def empty(cls, size: int = GRID_SIZE) -> "PuzzleState":
        return cls(grid=Grid(size))


@dataclass(frozen=True)
class Placement:
    row: int
    col: int
    direction: Direction
    score: float = 0.0


class PlacementEngine:
    """Places terms on a grid, maximizing letter crossings."""

    def __init__(self, rng: Optional[random.Random] = None, grid_size: int = GRID_SIZE) -> None:
        self.rng = rng or random.Random()
        self.grid_size = grid_size

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def place_all(self, terms: Sequence[Term], state: Optional[PuzzleState] = None) -> PuzzleState:
        state = state or PuzzleState.empty(self.grid_size)
        ordered = shuffled(terms, self.rng)
        if not ordered:
            LOGGER.info("No terms to place")
            return state

        if state.grid.is_empty():
            self.place_seed(state, ordered[0])
            ordered = ordered[1:]

        deferred = self._intersect_pass(state, shuffled(ordered, self.rng))
        LOGGER.info(
            "Intersect pass placed %d/%d terms, %d deferred",
            len(ordered) - len(deferred),
            len(ordered),
            len(deferred),
        )

        still_deferred = self._intersect_pass(state, shuffled(deferred, self.rng))
        LOGGER.info(
            "Retry pass placed %d/%d deferred terms",
            len(deferred) - len(still_deferred),
            len(deferred),
        )

        for term in shuffled(still_deferred, self.rng):
            if not self.place_in_empty_area(state, term):
                LOGGER.info("Dropping %r: no valid position on the grid", term.clean_term)
                state.dropped.append(term)

        LOGGER.info(
            "Placed %d words (%d dropped, %d occupied cells)",
            len(state.placed_words),
            len(state.dropped),
            state.grid.occupied_count,
        )
        return state

    # ------------------------------------------------------------------
    # Passes
    # ------------------------------------------------------------------
    def place_seed(self, state: PuzzleState, term: Term) -> Optional[PlacedWord]:
        """Place ``term`` at a random spot with room to grow on every side."""

        size = state.grid.size
        length = len(term)
        direction = Direction.ACROSS if self.rng.random() < 0.5 else Direction.DOWN
        max_row = size - length - SEED_MARGIN if direction == Direction.DOWN else size - SEED_MARGIN
        max_col = size - length - SEED_MARGIN if direction == Direction.ACROSS else size - SEED_MARGIN
        row = self.rng.randrange(max(1, max_row - SEED_SLACK)) + SEED_MARGIN
        col = self.rng.randrange(max(1, max_col - SEED_SLACK)) + SEED_MARGIN

        if not self.fits(state, term.clean_term, row, col, direction):
            # Only reachable on grids too small for the seed margins.
            LOGGER.warning("Seed %r does not fit at (%s,%s); scanning", term.clean_term, row, col)
            if self.place_in_empty_area(state, term):
                return state.placed_words[-1]
            LOGGER.info("Dropping %r: no valid position on the grid", term.clean_term)
            state.dropped.append(term)
            return None

        LOGGER.debug("Seeding %r at (%s,%s) %s", term.clean_term, row, col, direction.value)
        return self.commit(state, term, Placement(row, col, direction))

    def _intersect_pass(self, state: PuzzleState, terms: Sequence[Term]) -> List[Term]:
        deferred: List[Term] = []
        for term in terms:
            if not self.place_intersecting(state, term):
                deferred.append(term)
        return deferred

    def place_intersecting(self, state: PuzzleState, term: Term) -> bool:
        placement = self.find_best_placement(state, term)
        if placement is None:
            LOGGER.debug("No crossing found for %r", term.clean_term)
            return False
        self.commit(state, term, placement)
        return True

    def find_best_placement(self, state: PuzzleState, term: Term) -> Optional[Placement]:
        """Best-scoring valid crossing for ``term``.

        Occupied cells are scanned row-major, then the term's letters in
        order, across before down. Ties keep the first candidate found.
        """

        word = term.clean_term
        best: Optional[Placement] = None
        for row, col, cell in list(state.grid.occupied_cells()):
            for index, letter in enumerate(word):
                if letter != cell.letter:
                    continue
                for direction in DIRECTIONS:
                    if direction == Direction.ACROSS:
                        start_row, start_col = row, col - index
                    else:
                        start_row, start_col = row - index, col
                    if not self.fits(state, word, start_row, start_col, direction):
                        continue
                    score = self.score(state, word, start_row, start_col, direction)
                    if best is None or score > best.score:
                        best = Placement(start_row, start_col, direction, score)
        return best

    def place_in_empty_area(self, state: PuzzleState, term: Term) -> bool:
        """Place ``term`` without requiring a crossing."""

        word = term.clean_term
        grid = state.grid
        extent = occupied_extent(grid)
        if extent is None:
            center_row = center_col = grid.size // 2
        else:
            center_row = (extent.min_row + extent.max_row) // 2
            center_col = (extent.min_col + extent.max_col) // 2

        for direction in DIRECTIONS:
            for d_row, d_col in FALLBACK_OFFSETS:
                probe_row = center_row + d_row
                probe_col = center_col + d_col
                for row in range(probe_row - FALLBACK_RADIUS, probe_row + FALLBACK_RADIUS):
                    for col in range(probe_col - FALLBACK_RADIUS, probe_col + FALLBACK_RADIUS):
                        if self.fits(state, word, row, col, direction):
                            LOGGER.debug("Fallback placed %r near (%s,%s)", word, probe_row, probe_col)
                            self.commit(state, term, Placement(row, col, direction))
                            return True

        for row in range(COARSE_SCAN_MARGIN, grid.size - COARSE_SCAN_MARGIN, COARSE_SCAN_STRIDE):
            for col in range(COARSE_SCAN_MARGIN, grid.size - COARSE_SCAN_MARGIN, COARSE_SCAN_STRIDE):
                for direction in DIRECTIONS:
                    if self.fits(state, word, row, col, direction):
                        LOGGER.debug("Coarse scan placed %r at (%s,%s)", word, row, col)
                        self.commit(state, term, Placement(row, col, direction))
                        return True
        return False

    # ------------------------------------------------------------------
    # Validity and scoring
    # ------------------------------------------------------------------
    def fits(self, state: PuzzleState, word: str, row: int, col: int, direction: Direction) -> bool:
        grid = state.grid
        dr, dc = direction.step
        end_row = row + dr * (len(word) - 1)
        end_col = col + dc * (len(word) - 1)

        if row < 1 or col < 1 or end_row >= grid.size - 1 or end_col >= grid.size - 1:
            return False
        if grid.is_occupied(row - dr, col - dc):
            return False
        if grid.is_occupied(end_row + dr, end_col + dc):
            return False

        for index, letter in enumerate(word):
            r, c = row + dr * index, col + dc * index
            cell = grid.cell(r, c)
            if cell is not None:
                if cell.letter != letter:
                    return False
                # A shared cell must be a crossing, never a run along another word.
                if any(state.placed_words[word_id].direction == direction for word_id in cell.crossing_word_ids):
                    return False
                continue
            # Swapping the step gives the perpendicular axis.
            if grid.is_occupied(r - dc, c - dr) or grid.is_occupied(r + dc, c + dr):
                return False
        return True

    def score(self, state: PuzzleState, word: str, row: int, col: int, direction: Direction) -> float:
        grid = state.grid
        dr, dc = direction.step
        matches = sum(
            1
            for index, letter in enumerate(word)
            if grid.letter(row + dr * index, col + dc * index) == letter
        )
        center = grid.size / 2
        distance = abs(row - center) + abs(col - center)
        return INTERSECTION_WEIGHT * matches - CENTER_DISTANCE_WEIGHT * distance

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------
    def commit(self, state: PuzzleState, term: Term, placement: Placement) -> PlacedWord:
        clue_number = next_clue_number(state.placed_words, placement.row, placement.col)
        word_id = len(state.placed_words)
        cells = word_cells(placement.row, placement.col, placement.direction, len(term))
        for index, (r, c) in enumerate(cells):
            state.grid.write_letter(
                r,
                c,
                term.clean_term[index],
                word_id,
                clue_number=clue_number if index == 0 else None,
            )
        placed = PlacedWord(
            term=term,
            start_row=placement.row,
            start_col=placement.col,
            direction=placement.direction,
            clue_number=clue_number,
            cells=cells,
        )
        state.placed_words.append(placed)
        return placed
