"""Custom exception hierarchy for crossword generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class VocabularyLoadError(CrosswordError):
    """Raised when a vocabulary file cannot be read or parsed."""


class PlacementError(CrosswordError):
    """Raised when a grid write would contradict a letter already placed."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""
