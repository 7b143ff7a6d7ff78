import logging
import random
from typing import List, Optional
from pydantic import BaseModel, Field

from .grid import Grid
from .models import DIRECTIONS, DEFAULT_PLACEMENT_ATTEMPTS, Direction, PlacementAttempt

logger = logging.getLogger(__name__)


class PlacementEngine(BaseModel):
    """
    Places single words into a grid at random positions and orientations.

    Words may cross existing words only where the letters agree. Each attempt
    picks a random start cell and tries the 8 directions in shuffled order;
    after `max_attempts` starts without a fit the word is rejected.

    Attributes:
        max_attempts: Number of random start cells to try per word
        seed: Optional random seed for reproducibility
    """

    max_attempts: int = Field(default=DEFAULT_PLACEMENT_ATTEMPTS, ge=1)
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    def find_placement(self, grid: Grid, word: str) -> Optional[PlacementAttempt]:
        """
        Search for a valid placement without touching the grid.

        Args:
            grid: Grid to search
            word: Uppercase word to place

        Returns:
            The first valid attempt found, or None once the budget is spent
        """
        # No straight line on the grid is longer than its side
        if not word or len(word) > grid.size:
            return None

        directions: List[Direction] = list(DIRECTIONS.values())
        for _ in range(self.max_attempts):
            row = self._rng.randrange(grid.size)
            col = self._rng.randrange(grid.size)
            self._rng.shuffle(directions)

            for direction in directions:
                attempt = PlacementAttempt(word, row, col, direction)
                if grid.fits(attempt):
                    return attempt

        return None

    def place(self, grid: Grid, word: str) -> Optional[PlacementAttempt]:
        """
        Place a word, writing it into the grid on success.

        The grid is left unchanged when no placement is found.

        Returns:
            The committed attempt, or None if the word could not be placed
        """
        attempt = self.find_placement(grid, word)
        if attempt is None:
            logger.debug(f"Could not place '{word}' after {self.max_attempts} attempts")
            return None

        grid.write(attempt)
        return attempt

    def try_place(self, grid: Grid, word: str) -> bool:
        """Place a word and report whether it fit."""
        return self.place(grid, word) is not None
