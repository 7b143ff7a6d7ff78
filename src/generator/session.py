"""
Background puzzle generation for interactive callers.

A display loop starts a build, keeps rendering, and polls once per frame
until the finished puzzle is published. Starting a new build or resetting
discards whatever build is still in flight; its result is dropped when it
lands.
"""

import logging
import threading
from typing import Callable, Optional

from .builder import GridBuilder
from .models import BuildFailure, BuildOutcome, GeneratorConfig
from .puzzle import PuzzleModel

logger = logging.getLogger(__name__)


class GenerationSession:
    """
    Runs one GridBuilder.build at a time on a worker thread.

    Each build uses a fresh builder from `builder_factory`, so a discarded
    build never shares a grid or random state with the next one.
    """

    def __init__(self, builder_factory: Optional[Callable[[], GridBuilder]] = None):
        self.builder_factory = builder_factory or GridBuilder.create
        self._lock = threading.Lock()
        self._ticket = 0
        self._outcome: Optional[BuildOutcome] = None
        self._done = threading.Event()
        self._loading = False

    @classmethod
    def create(cls, config: Optional[GeneratorConfig] = None) -> "GenerationSession":
        """Session whose builds all use the given config."""
        return cls(builder_factory=lambda: GridBuilder.create(config=config))

    def start(self, size: int) -> int:
        """
        Begin generating a puzzle of the given size.

        Any build already running is discarded.

        Returns:
            Ticket identifying this build
        """
        with self._lock:
            self._ticket += 1
            ticket = self._ticket
            self._outcome = None
            self._loading = True
            self._done.set()
            self._done = threading.Event()
            done = self._done

        thread = threading.Thread(
            target=self._run,
            args=(ticket, size, done),
            name=f"puzzle-build-{ticket}",
            daemon=True,
        )
        thread.start()
        logger.info(f"Started build {ticket} for a {size}x{size} grid")
        return ticket

    def _run(self, ticket: int, size: int, done: threading.Event) -> None:
        try:
            outcome = self.builder_factory().build(size)
        except Exception as e:
            logger.exception(f"Build {ticket} raised")
            outcome = BuildFailure(reason=f"Generation failed: {e}")

        with self._lock:
            if ticket != self._ticket:
                logger.info(f"Discarding result of superseded build {ticket}")
                return
            self._outcome = outcome
            self._loading = False
        done.set()

    def poll(self) -> bool:
        """Non-blocking check whether the current build has finished."""
        with self._lock:
            return self._outcome is not None

    @property
    def is_loading(self) -> bool:
        with self._lock:
            return self._loading

    @property
    def ticket(self) -> int:
        with self._lock:
            return self._ticket

    @property
    def outcome(self) -> Optional[BuildOutcome]:
        """The published outcome, or None while loading or idle."""
        with self._lock:
            return self._outcome

    @property
    def puzzle(self) -> Optional[PuzzleModel]:
        """The published puzzle, or None if not ready or the build failed."""
        outcome = self.outcome
        if outcome is None or not outcome.ok:
            return None
        return outcome.puzzle

    def wait(self, timeout: Optional[float] = None) -> Optional[BuildOutcome]:
        """
        Block until the current build publishes (or `timeout` seconds pass).

        Returns immediately when no build is in flight.
        """
        with self._lock:
            if not self._loading:
                return self._outcome
            done = self._done
        done.wait(timeout)
        return self.outcome

    def reset(self) -> None:
        """Drop the published puzzle and discard any build still in flight."""
        with self._lock:
            self._ticket += 1
            self._outcome = None
            self._loading = False
            self._done.set()
            self._done = threading.Event()
