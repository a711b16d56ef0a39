"""Puzzle generation orchestration.

One call to :meth:`PuzzleGenerator.generate` runs term preparation, word
placement and (optionally) validation against a freshly created
:class:`PuzzleState`. Nothing is carried over between calls.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..core.constants import GRID_SIZE, Rect, WordMode
from ..core.models import PlacedWord, Term
from ..data.vocabulary import RawEntry, prepare_terms
from ..utils.logger import get_logger
from .grid import Grid, compute_bounds
from .placement import PlacementEngine, PuzzleState
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    mode: WordMode = WordMode.FIRST_25
    grid_size: int = GRID_SIZE
    seed: Optional[int] = None
    validate: bool = True

    def __post_init__(self) -> None:
        self.mode = WordMode(self.mode)
        if self.grid_size < 3:
            raise ValueError("grid_size must be at least 3")


@dataclass
class PuzzleResult:
    grid: Grid
    placed_words: List[PlacedWord]
    bounds: Optional[Rect]
    requested: List[Term] = field(default_factory=list)
    dropped: List[Term] = field(default_factory=list)
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return not self.placed_words


class PuzzleGenerator:
    """High-level orchestrator: prepare terms, place them, crop."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = random.Random(self.config.seed)
        self.validator = GridValidator()

    def generate(self, vocabulary: Iterable[RawEntry]) -> PuzzleResult:
        terms = prepare_terms(vocabulary, self.config.mode, rng=self.rng)
        state = PuzzleState.empty(self.config.grid_size)
        engine = PlacementEngine(rng=self.rng, grid_size=self.config.grid_size)
        engine.place_all(terms, state)

        messages: List[str] = []
        if self.config.validate:
            validation = self.validator.validate(state.grid, state.placed_words)
            messages = validation.messages

        LOGGER.info(
            "Puzzle generated with %d/%d words",
            len(state.placed_words),
            len(terms),
        )
        return PuzzleResult(
            grid=state.grid.copy(),
            placed_words=list(state.placed_words),
            bounds=compute_bounds(state.grid),
            requested=terms,
            dropped=list(state.dropped),
            validation_messages=messages,
            seed=self.config.seed,
        )
