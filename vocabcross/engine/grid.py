"""Grid representation and helper utilities."""

from __future__ import annotations

import copy
from typing import Iterator, List, Optional, Tuple

from ..core.constants import GRID_SIZE, Rect
from ..core.exceptions import PlacementError
from ..core.models import Cell
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class Grid:
    """Fixed-size square cell store. Empty cells are ``None``."""

    def __init__(self, size: int = GRID_SIZE) -> None:
        if size <= 0:
            raise ValueError("Grid size must be positive")
        self.size = size
        self.cells: List[List[Optional[Cell]]] = [[None] * size for _ in range(size)]
        self._occupied_count = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Optional[Cell]:
        """Return the cell at ``(row, col)``; out-of-range reads are empty."""

        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def is_occupied(self, row: int, col: int) -> bool:
        return self.cell(row, col) is not None

    def letter(self, row: int, col: int) -> Optional[str]:
        cell = self.cell(row, col)
        return cell.letter if cell is not None else None

    def occupied_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield occupied cells in row-major order."""

        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if cell is not None:
                    yield r, c, cell

    @property
    def occupied_count(self) -> int:
        return self._occupied_count

    def is_empty(self) -> bool:
        return self._occupied_count == 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def write_letter(
        self,
        row: int,
        col: int,
        letter: str,
        word_id: int,
        clue_number: Optional[int] = None,
    ) -> Cell:
        """Merge ``letter`` into the cell, creating it when absent."""

        if not self.in_bounds(row, col):
            raise PlacementError(f"Cell outside grid: {(row, col)}")
        cell = self.cells[row][col]
        if cell is None:
            cell = Cell(letter=letter)
            self.cells[row][col] = cell
            self._occupied_count += 1
        elif cell.letter != letter:
            raise PlacementError(
                f"Letter conflict at {(row, col)}: {cell.letter!r} vs {letter!r}"
            )
        if word_id not in cell.crossing_word_ids:
            cell.crossing_word_ids.append(word_id)
        if clue_number is not None and clue_number not in cell.start_numbers:
            cell.start_numbers.append(clue_number)
        return cell

    def copy(self) -> "Grid":
        return copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self, bounds: Optional[Rect] = None) -> List[List[Optional[dict]]]:
        """Serialize the cells inside ``bounds`` (whole grid by default)."""

        area = bounds or Rect(0, 0, self.size - 1, self.size - 1)
        serialized: List[List[Optional[dict]]] = []
        for r in range(area.min_row, area.max_row + 1):
            serialized_row: List[Optional[dict]] = []
            for c in range(area.min_col, area.max_col + 1):
                cell = self.cells[r][c]
                if cell is None:
                    serialized_row.append(None)
                    continue
                serialized_row.append(
                    {
                        "row": r,
                        "col": c,
                        "letter": cell.letter,
                        "crossing_word_ids": list(cell.crossing_word_ids),
                        "start_numbers": sorted(cell.start_numbers),
                    }
                )
            serialized.append(serialized_row)
        return serialized


def occupied_extent(grid: Grid) -> Optional[Rect]:
    """Tight rectangle around every occupied cell, or ``None`` when empty."""

    min_row = min_col = grid.size
    max_row = max_col = -1
    for r, c, _ in grid.occupied_cells():
        min_row = min(min_row, r)
        max_row = max(max_row, r)
        min_col = min(min_col, c)
        max_col = max(max_col, c)
    if max_row < 0:
        return None
    return Rect(min_row, min_col, max_row, max_col)


def compute_bounds(grid: Grid, padding: int = 1) -> Optional[Rect]:
    """Crop rectangle for presentation: occupied extent plus ``padding``."""

    extent = occupied_extent(grid)
    if extent is None:
        return None
    last = grid.size - 1
    return Rect(
        min_row=max(0, extent.min_row - padding),
        min_col=max(0, extent.min_col - padding),
        max_row=min(last, extent.max_row + padding),
        max_col=min(last, extent.max_col + padding),
    )
