"""Helpers for turning display text into placeable letters."""

from __future__ import annotations

import re

from ..core.constants import MAX_TERM_LENGTH, MIN_TERM_LENGTH

NON_LETTER_RE = re.compile(r"[^A-Za-z]")


def clean_term(text: str) -> str:
    """Return the uppercase ASCII-letter projection of ``text``."""

    if not text:
        return ""
    return NON_LETTER_RE.sub("", text).upper()


def is_eligible(text: str) -> bool:
    return MIN_TERM_LENGTH <= len(clean_term(text)) <= MAX_TERM_LENGTH


__all__ = ["clean_term", "is_eligible"]
