"""
Pydantic models for the generator layer.

Holds the generator configuration, the tagged build outcome returned by
GridBuilder, and the small value types used during placement search.
"""

from typing import Dict, Iterator, List, Literal, NamedTuple, Optional, Tuple, Union
from pydantic import BaseModel, Field

from ..wordsource.models import WordSourceConfig
from .puzzle import PuzzleModel


Direction = Tuple[int, int]

# 8 compass directions as (d_row, d_col)
DIRECTIONS: Dict[str, Direction] = {
    "N": (-1, 0),
    "NE": (-1, 1),
    "E": (0, 1),
    "SE": (1, 1),
    "S": (1, 0),
    "SW": (1, -1),
    "W": (0, -1),
    "NW": (-1, -1),
}

MIN_WORD_LENGTH = 3
DEFAULT_PLACEMENT_ATTEMPTS = 100


class PlacementAttempt(NamedTuple):
    """A word anchored at (row, col) running along a direction."""
    word: str
    row: int
    col: int
    direction: Direction

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the grid coordinates the word occupies, in letter order."""
        d_row, d_col = self.direction
        for i in range(len(self.word)):
            yield (self.row + i * d_row, self.col + i * d_col)


class WordRequest(BaseModel):
    """How many words of which lengths a grid of a given size asks for."""
    count: int = Field(ge=0)
    min_length: int
    max_length: int

    @property
    def is_satisfiable(self) -> bool:
        """False when no word length fits the range."""
        return MIN_WORD_LENGTH <= self.min_length <= self.max_length


class GeneratorConfig(BaseModel):
    """Configuration for a puzzle generation run."""
    size: int = Field(default=10, ge=1)
    word_count: Optional[int] = Field(default=None, ge=0)
    min_word_length: Optional[int] = Field(default=None, ge=MIN_WORD_LENGTH)
    max_word_length: Optional[int] = Field(default=None, ge=MIN_WORD_LENGTH)
    placement_attempts: int = Field(default=DEFAULT_PLACEMENT_ATTEMPTS, ge=1)
    seed: Optional[int] = None
    word_source: WordSourceConfig = Field(default_factory=WordSourceConfig)


class BuildSuccess(BaseModel):
    """A finished puzzle."""
    status: Literal["success"] = "success"
    puzzle: PuzzleModel
    requested_words: int = 0

    @property
    def ok(self) -> bool:
        return True


class BuildFailure(BaseModel):
    """Generation could not produce a puzzle."""
    status: Literal["failure"] = "failure"
    reason: str
    collected_words: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False


BuildOutcome = Union[BuildSuccess, BuildFailure]
