"""Mutable letter grid used while a puzzle is under construction."""

import random
import string
from typing import List, Tuple

from pydantic import BaseModel, Field

from .models import DIRECTIONS, PlacementAttempt, Direction


EMPTY = " "


class Grid(BaseModel):
    """
    Square matrix of cells, row-major.

    Each cell holds EMPTY or a single uppercase letter. Only the build flow
    mutates a Grid; finished puzzles take a tuple snapshot.
    """

    size: int = Field(ge=1)
    cells: List[List[str]] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        """Allocate an all-empty matrix when no cells were given."""
        if not self.cells:
            self.cells = [[EMPTY] * self.size for _ in range(self.size)]
        elif len(self.cells) != self.size or any(len(row) != self.size for row in self.cells):
            raise ValueError(f"Grid cells must be {self.size}x{self.size}")

    @classmethod
    def create(cls, size: int) -> "Grid":
        """Factory for an empty grid of side `size`."""
        return cls(size=size)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def fits(self, attempt: PlacementAttempt) -> bool:
        """
        Check whether a word can be written along an attempt.

        Every cell must be in bounds and either empty or already hold the
        letter the word needs there.
        """
        for letter, (row, col) in zip(attempt.word, attempt.cells()):
            if not self.in_bounds(row, col):
                return False
            cell = self.cells[row][col]
            if cell != EMPTY and cell != letter:
                return False
        return True

    def write(self, attempt: PlacementAttempt) -> None:
        """Write the word's letters. Call only after `fits` returned True."""
        for letter, (row, col) in zip(attempt.word, attempt.cells()):
            self.cells[row][col] = letter

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [
            (row, col)
            for row in range(self.size)
            for col in range(self.size)
            if self.cells[row][col] == EMPTY
        ]

    @property
    def is_full(self) -> bool:
        """True once no cell holds the empty marker."""
        return all(cell != EMPTY for row in self.cells for cell in row)

    def fill_empty(self, rng: random.Random) -> int:
        """
        Fill every empty cell with a uniformly random uppercase letter.

        Returns:
            Number of cells filled
        """
        empty = self.empty_cells()
        for row, col in empty:
            self.cells[row][col] = rng.choice(string.ascii_uppercase)
        return len(empty)

    def snapshot(self) -> Tuple[Tuple[str, ...], ...]:
        """Immutable copy of the cells."""
        return tuple(tuple(row) for row in self.cells)

    def render(self) -> str:
        """Render rows as space-separated letters, one row per line."""
        return "\n".join(" ".join(row) for row in self.cells)


def find_word(
    grid: Tuple[Tuple[str, ...], ...] | List[List[str]],
    word: str,
) -> List[PlacementAttempt]:
    """
    Find every start cell and direction that spells `word` in a grid.

    Args:
        grid: Row-major letters (a Grid snapshot or a list of lists)
        word: Word to search for

    Returns:
        All matching placements, scanning starts row by row
    """
    matches: List[PlacementAttempt] = []
    if not word:
        return matches

    size = len(grid)
    directions: List[Direction] = list(DIRECTIONS.values())

    for row in range(size):
        for col in range(len(grid[row])):
            if grid[row][col] != word[0]:
                continue
            for direction in directions:
                attempt = PlacementAttempt(word, row, col, direction)
                if all(
                    0 <= r < size and 0 <= c < len(grid[r]) and grid[r][c] == letter
                    for letter, (r, c) in zip(word, attempt.cells())
                ):
                    matches.append(attempt)

    return matches
