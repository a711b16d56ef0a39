"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

from ..core.constants import Rect
from ..io.clues import build_clue_list

if TYPE_CHECKING:
    from ..engine.generator import PuzzleResult
    from ..engine.grid import Grid


EMPTY_SYMBOL = "#"


def format_grid(grid: Grid, bounds: Optional[Rect] = None) -> str:
    area = bounds or Rect(0, 0, grid.size - 1, grid.size - 1)
    header_cells = [f"{c:>2}" for c in range(area.min_col, area.max_col + 1)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * area.cols - 1))
    for r in range(area.min_row, area.max_row + 1):
        row_cells = [grid.letter(r, c) or EMPTY_SYMBOL for c in range(area.min_col, area.max_col + 1)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: Grid, *, bounds: Optional[Rect] = None, label: str | None = None, stream=None) -> None:
    """Print the crossword grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid, bounds), file=stream)


def print_puzzle(result: PuzzleResult, *, stream=None) -> None:
    """Print cropped grid, clue list and stats for a generated puzzle."""

    stream = stream or sys.stdout
    if result.bounds is None:
        print("(empty puzzle)", file=stream)
        return
    pretty_print_grid(result.grid, bounds=result.bounds, stream=stream)

    for direction, entries in build_clue_list(result.placed_words).items():
        print(file=stream)
        print(f"--- {direction.value.capitalize()} ---", file=stream)
        for entry in entries:
            print(f"  {entry.number:>3}. {entry.text} ({entry.length})", file=stream)

    # --- Stats ---
    grid = result.grid
    intersections = sum(1 for _, _, cell in grid.occupied_cells() if cell.is_intersection)
    lengths = Counter(word.length for word in result.placed_words)
    print(file=stream)
    print("--- Stats ---", file=stream)
    print(f"  Words placed:  {len(result.placed_words)}/{len(result.requested)}", file=stream)
    print(f"  Letters:       {grid.occupied_count}", file=stream)
    print(f"  Crossings:     {intersections}", file=stream)
    print(f"  Crop:          {result.bounds.rows} x {result.bounds.cols}", file=stream)
    if lengths:
        dist_parts = [f"{l}:{c}" for l, c in sorted(lengths.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    if result.dropped:
        print(f"  Dropped:       {', '.join(term.clean_term for term in result.dropped)}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
