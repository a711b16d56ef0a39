"""CLI entrypoint for the vocabulary crossword placer."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from vocabcross.core.constants import GRID_SIZE, WordMode
from vocabcross.core.exceptions import CrosswordError
from vocabcross.data.vocabulary import load_vocabulary
from vocabcross.engine.generator import GeneratorConfig, PuzzleGenerator
from vocabcross.io.export import puzzle_to_dict
from vocabcross.utils.logger import configure_logging
from vocabcross.utils.pretty import print_puzzle


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out a vocabulary list as a crossword",
    )
    parser.add_argument(
        "vocabulary",
        type=Path,
        help="Vocabulary file (.json, .tsv, .csv, or one TERM:definition per line)",
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in WordMode],
        default=WordMode.FIRST_25.value,
        help="Use 25 random terms or all eligible terms",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE, help="Grid side length in cells")
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "text"],
        default="json",
        help="Output format",
    )
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip structural validation of the finished grid",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.grid_size < 3:
        parser.error("--grid-size must be at least 3")

    config = GeneratorConfig(
        mode=WordMode(args.mode),
        grid_size=args.grid_size,
        seed=args.seed,
        validate=not args.no_validate,
    )

    try:
        vocabulary = load_vocabulary(args.vocabulary)
        result = PuzzleGenerator(config).generate(vocabulary)
    except CrosswordError as exc:
        parser.exit(1, f"error: {exc}\n")

    if args.format == "text":
        if args.output:
            with args.output.open("w", encoding="utf-8") as handle:
                print_puzzle(result, stream=handle)
        else:
            print_puzzle(result)
        return

    output_text = json.dumps(puzzle_to_dict(result), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
