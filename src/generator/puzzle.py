"""Finished puzzle and word-finding progress."""

from typing import Dict, List, Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field


CheckResult = Literal["correct", "already_found", "incorrect"]


class PuzzleModel(BaseModel):
    """
    A completed word search: the letter grid and its target words.

    Instances are frozen. Regenerating a puzzle always produces a new
    instance. Target words keep placement order; no coordinates are stored,
    so found words are matched by string equality.

    Attributes:
        grid: Row-major letters, one tuple per row
        words: Target words in the order they were placed
    """

    model_config = ConfigDict(frozen=True)

    grid: Tuple[Tuple[str, ...], ...]
    words: Tuple[str, ...] = ()

    @property
    def size(self) -> int:
        """Side length of the square grid."""
        return len(self.grid)

    def rows(self) -> List[str]:
        """Each row joined into a string."""
        return ["".join(row) for row in self.grid]

    def letter_at(self, row: int, col: int) -> str:
        return self.grid[row][col]

    def contains_word(self, word: str) -> bool:
        """Whether `word` (any case) is one of the target words."""
        return word.upper() in self.words


class PuzzleProgress(BaseModel):
    """
    Tracks which target words a player has found in a puzzle.

    Attributes:
        puzzle: The puzzle being played
        found: One flag per target word, parallel to `puzzle.words`
    """

    puzzle: PuzzleModel
    found: List[bool] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        """Start with nothing found."""
        if not self.found:
            self.found = [False] * len(self.puzzle.words)
        elif len(self.found) != len(self.puzzle.words):
            raise ValueError(
                f"Expected {len(self.puzzle.words)} found flags, got {len(self.found)}"
            )

    def check(self, selection: str) -> CheckResult:
        """
        Check a selected letter sequence against the target words.

        Args:
            selection: Letters the player selected, in order

        Returns:
            "correct" for a newly found word, "already_found" if it was found
            before, "incorrect" if it is not a target word
        """
        selection = selection.strip().upper()
        for i, word in enumerate(self.puzzle.words):
            if word != selection:
                continue
            if self.found[i]:
                return "already_found"
            self.found[i] = True
            return "correct"
        return "incorrect"

    @property
    def found_words(self) -> List[str]:
        return [w for w, f in zip(self.puzzle.words, self.found) if f]

    @property
    def remaining_words(self) -> List[str]:
        return [w for w, f in zip(self.puzzle.words, self.found) if not f]

    @property
    def is_solved(self) -> bool:
        """True once every target word is found (never for an empty word list)."""
        return bool(self.found) and all(self.found)

    def get_state(self) -> Dict:
        """
        Get the current progress as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "size": self.puzzle.size,
            "total_words": len(self.puzzle.words),
            "found_words": self.found_words,
            "remaining_words": self.remaining_words,
            "is_solved": self.is_solved,
        }
