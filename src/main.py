"""
Main entry point for generating word search puzzles.

Usage:
    python -m src.main --size 10
    python -m src.main config.yaml --output output/puzzle.txt --verbose
    python -m src.main --size 15 --output   # saves to output/puzzle_output.txt
    python -m src.main --size 5 --words CAT,DOG,OWL
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .generator import (
    DEFAULT_OUTPUT_PATH,
    GeneratorConfig,
    GenerationSession,
    GridBuilder,
    format_puzzle,
    save_puzzle,
)


def load_config(config_path: Optional[str]) -> GeneratorConfig:
    """Load generator configuration from a YAML file (defaults when no path)."""
    if config_path is None:
        return GeneratorConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GeneratorConfig(**data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a word search puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  size: 10
  seed: 42
  placement_attempts: 100
  word_source:
    max_workers: 8
    max_rounds: 100
    connect_timeout: 3
    read_timeout: 3
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        help="Grid side length (overrides config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--words", "-w",
        help="Comma-separated words to place instead of fetching them"
    )
    parser.add_argument(
        "--output", "-o",
        nargs="?",
        const=str(DEFAULT_OUTPUT_PATH),
        help=f"Save the puzzle text file (default path: {DEFAULT_OUTPUT_PATH})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {}
    if args.size is not None:
        overrides["size"] = args.size
    if args.seed is not None:
        overrides["seed"] = args.seed

    try:
        config = load_config(args.config)
        if overrides:
            config = GeneratorConfig(**{**config.model_dump(), **overrides})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.words:
        words = [w for w in args.words.split(",") if w.strip()]
        outcome = GridBuilder.create(config=config).build_from_words(config.size, words)
    else:
        session = GenerationSession.create(config)
        session.start(config.size)
        try:
            outcome = session.wait()
        except KeyboardInterrupt:
            print("\nGeneration interrupted by user", file=sys.stderr)
            return 1

    if not outcome.ok:
        print(f"Error: {outcome.reason}", file=sys.stderr)
        return 1

    puzzle = outcome.puzzle
    print()
    print(format_puzzle(puzzle), end="")

    if args.output:
        output_path = save_puzzle(puzzle, args.output)
        print()
        print(f"Grid saved to {output_path}")

    if args.verbose:
        print()
        print(f"Placed {len(puzzle.words)} of {outcome.requested_words} requested words")

    return 0


if __name__ == "__main__":
    sys.exit(main())
