"""Plain-text export of finished puzzles."""

from pathlib import Path
from typing import List

from .puzzle import PuzzleModel


GRID_HEADER = "Word Search Grid:"
WORDS_HEADER = "Find these words:"
DEFAULT_OUTPUT_PATH = Path("output") / "puzzle_output.txt"


def format_puzzle(puzzle: PuzzleModel) -> str:
    """
    Serialize a puzzle to the export text format.

    Every letter is followed by one space, one row per line, then a blank
    line and the target words one per line.
    """
    lines = [GRID_HEADER + "\n"]
    for row in puzzle.grid:
        lines.append("".join(f"{letter} " for letter in row) + "\n")
    lines.append("\n" + WORDS_HEADER + "\n")
    for word in puzzle.words:
        lines.append(word + "\n")
    return "".join(lines)


def save_puzzle(puzzle: PuzzleModel, output_path: str | Path = DEFAULT_OUTPUT_PATH) -> Path:
    """
    Write a puzzle to disk in the export format.

    Args:
        puzzle: Puzzle to export
        output_path: Destination file (parent directories are created)

    Returns:
        Path to the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="\n") as f:
        f.write(format_puzzle(puzzle))
    return output_path


def parse_puzzle(text: str) -> PuzzleModel:
    """
    Parse export text back into a PuzzleModel.

    Raises:
        ValueError: If a header is missing or the grid is not square
    """
    if GRID_HEADER not in text or WORDS_HEADER not in text:
        raise ValueError("Missing puzzle headers")

    _, rest = text.split(GRID_HEADER, 1)
    grid_text, words_text = rest.split(WORDS_HEADER, 1)

    grid: List[List[str]] = [line.split() for line in grid_text.splitlines() if line.strip()]
    words = [line.strip() for line in words_text.splitlines() if line.strip()]

    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError(f"Grid is not square ({size} rows)")

    return PuzzleModel(grid=grid, words=words)


def load_puzzle(path: str | Path) -> PuzzleModel:
    """Read and parse an exported puzzle file."""
    with open(path) as f:
        return parse_puzzle(f.read())
