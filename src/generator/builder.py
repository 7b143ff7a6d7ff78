import logging
import random
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..wordsource import WordSourceClient, WordSourceExhausted
from .grid import Grid
from .models import (
    MIN_WORD_LENGTH,
    BuildFailure,
    BuildOutcome,
    BuildSuccess,
    GeneratorConfig,
    WordRequest,
)
from .placement import PlacementEngine
from .puzzle import PuzzleModel

logger = logging.getLogger(__name__)


class GridBuilder(BaseModel):
    """
    Top-level orchestrator for puzzle generation.

    Sizes the grid, asks the word source for confirmed candidates, places
    each one with the placement engine, fills the leftover cells and wraps the
    result in a PuzzleModel.

    Attributes:
        config: Generator configuration
        word_source: Anything with a `fetch_candidates(count, min_len, max_len)`
            method, normally a WordSourceClient
        placement: Placement engine used for every word
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GeneratorConfig = Field(default_factory=GeneratorConfig)
    word_source: Any = None
    placement: Optional[PlacementEngine] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize collaborators that were not supplied."""
        self._rng = random.Random(self.config.seed)
        if self.word_source is None:
            self.word_source = WordSourceClient(
                config=self.config.word_source,
                seed=self.config.seed,
            )
        if self.placement is None:
            self.placement = PlacementEngine(
                max_attempts=self.config.placement_attempts,
                seed=self.config.seed,
            )

    @classmethod
    def create(
        cls,
        config: Optional[GeneratorConfig] = None,
        **config_kwargs: Any
    ) -> "GridBuilder":
        """
        Factory method to create a builder with its default collaborators.

        Args:
            config: Optional GeneratorConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured GridBuilder instance
        """
        if config is None:
            config = GeneratorConfig(**config_kwargs)
        return cls(config=config)

    def word_request(self, size: int) -> WordRequest:
        """
        Derive how many words of which lengths a grid of `size` asks for.

        Defaults to one word per row, lengths from max(3, size // 4) up to the
        side length. Config values override each part.
        """
        return WordRequest(
            count=self.config.word_count if self.config.word_count is not None else size,
            min_length=self.config.min_word_length or max(MIN_WORD_LENGTH, size // 4),
            max_length=min(self.config.max_word_length or size, size),
        )

    def build(self, size: Optional[int] = None) -> BuildOutcome:
        """
        Generate a complete puzzle.

        Args:
            size: Grid side length (defaults to config.size)

        Returns:
            BuildSuccess with the puzzle, or BuildFailure when the size admits
            no valid word length or the word source gave up
        """
        size = size if size is not None else self.config.size
        request = self.word_request(size)

        if not request.is_satisfiable:
            return BuildFailure(
                reason=(
                    f"Cannot generate puzzle: grid size {size} allows no word length "
                    f"in [{request.min_length}, {request.max_length}]"
                )
            )

        logger.info(
            f"Requesting {request.count} words of length "
            f"{request.min_length}-{request.max_length} for a {size}x{size} grid"
        )
        try:
            candidates = self.word_source.fetch_candidates(
                request.count, request.min_length, request.max_length
            )
        except WordSourceExhausted as e:
            logger.error(f"Word source exhausted: {e}")
            return BuildFailure(
                reason=f"Generation failed: {e}",
                collected_words=e.collected,
            )

        outcome = self.build_from_words(size, candidates)
        outcome.requested_words = request.count
        return outcome

    def build_from_words(self, size: int, words: List[str]) -> BuildSuccess:
        """
        Place the given words into a fresh grid and fill the rest.

        Words that do not fit, or contain anything other than ASCII letters,
        are dropped. Words are uppercased first.

        Args:
            size: Grid side length
            words: Candidate words, placed in order

        Returns:
            BuildSuccess wrapping the finished puzzle
        """
        grid = Grid.create(size)
        placed: List[str] = []

        for word in words:
            word = word.strip().upper()
            if not (word.isascii() and word.isalpha()):
                continue
            if self.placement.try_place(grid, word):
                placed.append(word)

        dropped = len(words) - len(placed)
        if dropped:
            logger.info(f"Dropped {dropped} of {len(words)} words that did not fit")

        grid.fill_empty(self._rng)
        puzzle = PuzzleModel(grid=grid.snapshot(), words=tuple(placed))
        return BuildSuccess(puzzle=puzzle, requested_words=len(words))
