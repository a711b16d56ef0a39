"""Vocabulary crossword placer.

This package exposes the public API surface via:

- ``vocabcross.engine.generator.PuzzleGenerator``: prepares terms and lays
  them out on the grid.
- ``vocabcross.engine.placement.PlacementEngine``: the placement heuristic.
- ``vocabcross.data.vocabulary`` helpers: vocabulary loading and term
  preparation.
"""

from .core.constants import Direction, WordMode
from .core.models import PlacedWord, Term, VocabularyEntry
from .data.vocabulary import load_vocabulary, prepare_terms
from .engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from .engine.grid import Grid, compute_bounds
from .engine.placement import PlacementEngine, PuzzleState

__all__ = [
    "Direction",
    "WordMode",
    "PlacedWord",
    "Term",
    "VocabularyEntry",
    "load_vocabulary",
    "prepare_terms",
    "GeneratorConfig",
    "PuzzleGenerator",
    "PuzzleResult",
    "Grid",
    "compute_bounds",
    "PlacementEngine",
    "PuzzleState",
]

__version__ = "0.1.0"
