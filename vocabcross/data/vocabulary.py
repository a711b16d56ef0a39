"""Vocabulary loading and term preparation."""

from __future__ import annotations

import csv
import json
import random
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, TypeVar, Union

from ..core.constants import FIRST_N_COUNT, WordMode
from ..core.exceptions import VocabularyLoadError
from ..core.models import Term, VocabularyEntry
from ..utils.logger import get_logger
from .normalization import clean_term, is_eligible


LOGGER = get_logger(__name__)

T = TypeVar("T")

RawEntry = Union[VocabularyEntry, Mapping[str, str]]


def shuffled(items: Iterable[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a Fisher-Yates shuffled copy of ``items``."""

    result = list(items)
    randbelow = rng.randrange if rng is not None else random.randrange
    for i in range(len(result) - 1, 0, -1):
        j = randbelow(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def _coerce_entry(raw: RawEntry) -> VocabularyEntry:
    if isinstance(raw, VocabularyEntry):
        return raw
    return VocabularyEntry(term=str(raw.get("term", "")), definition=str(raw.get("definition", "")))


def prepare_terms(
    vocabulary: Iterable[RawEntry],
    mode: WordMode = WordMode.FIRST_25,
    rng: Optional[random.Random] = None,
) -> List[Term]:
    """Filter, shuffle and truncate the raw vocabulary into placeable terms."""

    mode = WordMode(mode)
    eligible: List[Term] = []
    skipped = 0
    for raw in vocabulary:
        entry = _coerce_entry(raw)
        if not is_eligible(entry.term):
            skipped += 1
            LOGGER.debug("Skipping ineligible term %r", entry.term)
            continue
        eligible.append(Term(term=entry.term, definition=entry.definition, clean_term=clean_term(entry.term)))

    terms = shuffled(eligible, rng)
    if mode == WordMode.FIRST_25:
        terms = terms[:FIRST_N_COUNT]
    LOGGER.info(
        "Prepared %d terms (%d eligible, %d skipped, mode=%s)",
        len(terms),
        len(eligible),
        skipped,
        mode.value,
    )
    return terms


# ----------------------------------------------------------------------
# File loading
# ----------------------------------------------------------------------
def load_vocabulary(path: Path | str) -> List[VocabularyEntry]:
    """Read a vocabulary file.

    ``.json`` files hold an array of ``{"term", "definition"}`` objects,
    ``.tsv`` and ``.csv`` files need a header row naming ``term`` and
    ``definition``. Any other file is read as one ``TERM`` or
    ``TERM:definition`` per line, skipping blank lines and ``#`` comments.
    """

    source = Path(path)
    if not source.exists():
        raise VocabularyLoadError(f"Missing vocabulary file: {source}")

    suffix = source.suffix.lower()
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise VocabularyLoadError(f"Cannot read {source}: {exc}") from exc

    if suffix == ".json":
        entries = _parse_json(text, source)
    elif suffix in {".tsv", ".csv"}:
        entries = _parse_table(text, "\t" if suffix == ".tsv" else ",", source)
    else:
        entries = _parse_lines(text)
    LOGGER.info("Loaded %d vocabulary entries from %s", len(entries), source)
    return entries


def _parse_json(text: str, source: Path) -> List[VocabularyEntry]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise VocabularyLoadError(f"Invalid JSON in {source}: {exc}") from exc
    if not isinstance(data, list):
        raise VocabularyLoadError(f"Expected a JSON array in {source}")
    entries: List[VocabularyEntry] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or "term" not in item:
            raise VocabularyLoadError(f"Entry {index} in {source} has no 'term'")
        entries.append(_coerce_entry(item))
    return entries


def _parse_table(text: str, delimiter: str, source: Path) -> List[VocabularyEntry]:
    reader = csv.DictReader(text.splitlines(), delimiter=delimiter)
    fieldnames: Sequence[str] = reader.fieldnames or ()
    if "term" not in fieldnames:
        raise VocabularyLoadError(f"{source} header must include a 'term' column")
    return [
        VocabularyEntry(term=(row.get("term") or "").strip(), definition=(row.get("definition") or "").strip())
        for row in reader
    ]


def _parse_lines(text: str) -> List[VocabularyEntry]:
    entries: List[VocabularyEntry] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        term, _, definition = line.partition(":")
        entries.append(VocabularyEntry(term=term.strip(), definition=definition.strip()))
    return entries


__all__ = ["shuffled", "prepare_terms", "load_vocabulary"]
