"""JSON-ready payloads for finished puzzles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from .clues import build_clue_list

if TYPE_CHECKING:
    from ..engine.generator import PuzzleResult


def puzzle_to_dict(result: "PuzzleResult") -> Dict[str, Any]:
    bounds = result.bounds
    clues = build_clue_list(result.placed_words)
    return {
        "grid_size": result.grid.size,
        "bounds": (
            {
                "min_row": bounds.min_row,
                "min_col": bounds.min_col,
                "max_row": bounds.max_row,
                "max_col": bounds.max_col,
            }
            if bounds
            else None
        ),
        "cells": result.grid.to_jsonable(bounds) if bounds else [],
        "words": [
            {
                "term": word.text,
                "definition": word.definition,
                "clean_term": word.clean_term,
                "start": [word.start_row, word.start_col],
                "direction": word.direction.value,
                "clue_number": word.clue_number,
                "cells": [list(cell) for cell in word.cells],
            }
            for word in result.placed_words
        ],
        "clues": {
            direction.value: [
                {"number": entry.number, "clue": entry.text, "length": entry.length}
                for entry in entries
            ]
            for direction, entries in clues.items()
        },
        "dropped": [term.term for term in result.dropped],
        "validation": result.validation_messages,
        "seed": result.seed,
    }
