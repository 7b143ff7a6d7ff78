"""Word search puzzle generation."""

from .puzzle import PuzzleModel, PuzzleProgress, CheckResult
from .models import (
    DIRECTIONS,
    Direction,
    PlacementAttempt,
    WordRequest,
    GeneratorConfig,
    BuildSuccess,
    BuildFailure,
    BuildOutcome,
)
from .grid import Grid, EMPTY, find_word
from .placement import PlacementEngine
from .builder import GridBuilder
from .export import DEFAULT_OUTPUT_PATH, format_puzzle, save_puzzle, parse_puzzle, load_puzzle
from .session import GenerationSession

__all__ = [
    "PuzzleModel",
    "PuzzleProgress",
    "CheckResult",
    "DIRECTIONS",
    "Direction",
    "PlacementAttempt",
    "WordRequest",
    "GeneratorConfig",
    "BuildSuccess",
    "BuildFailure",
    "BuildOutcome",
    "Grid",
    "EMPTY",
    "find_word",
    "PlacementEngine",
    "GridBuilder",
    "DEFAULT_OUTPUT_PATH",
    "format_puzzle",
    "save_puzzle",
    "parse_puzzle",
    "load_puzzle",
    "GenerationSession",
]
