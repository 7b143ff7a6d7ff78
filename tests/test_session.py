import threading
import time
from unittest.mock import Mock

from src.generator import (
    BuildFailure,
    BuildSuccess,
    GenerationSession,
    GridBuilder,
    PuzzleModel,
)


def create_success(letter: str = "A") -> BuildSuccess:
    return BuildSuccess(puzzle=PuzzleModel(grid=[[letter]], words=[letter]))


def create_blocking_builder(release: threading.Event, outcome) -> Mock:
    """Builder whose build waits for `release` before returning `outcome`."""
    builder = Mock(spec=GridBuilder)

    def build(size):
        release.wait(5)
        return outcome

    builder.build.side_effect = build
    return builder


def wait_until(predicate, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return False


class TestGenerationSession:
    """Test cases for background generation with polling."""

    def test_poll_until_published(self):
        """poll stays False while building and turns True once published."""
        release = threading.Event()
        outcome = create_success()
        session = GenerationSession(lambda: create_blocking_builder(release, outcome))

        session.start(5)
        assert session.poll() is False
        assert session.is_loading is True
        assert session.puzzle is None

        release.set()
        assert wait_until(session.poll)
        assert session.outcome is outcome
        assert session.puzzle is outcome.puzzle
        assert session.is_loading is False

    def test_wait_returns_outcome(self):
        outcome = create_success()
        builder = Mock(spec=GridBuilder)
        builder.build.return_value = outcome
        session = GenerationSession(lambda: builder)

        session.start(7)

        assert session.wait(5) is outcome
        builder.build.assert_called_once_with(7)

    def test_restart_discards_previous_build(self):
        """A superseded build's result is never published."""
        first_release = threading.Event()
        first = create_success("A")
        second = create_success("B")
        builders = iter([
            create_blocking_builder(first_release, first),
            Mock(spec=GridBuilder, **{"build.return_value": second}),
        ])
        session = GenerationSession(lambda: next(builders))

        first_ticket = session.start(5)
        second_ticket = session.start(5)
        assert second_ticket == first_ticket + 1
        assert session.wait(5) is second

        first_release.set()
        time.sleep(0.1)
        assert session.outcome is second

    def test_reset_discards_in_flight(self):
        """Resetting drops a build that has not finished yet."""
        release = threading.Event()
        session = GenerationSession(lambda: create_blocking_builder(release, create_success()))

        session.start(5)
        session.reset()
        release.set()
        time.sleep(0.1)

        assert session.poll() is False
        assert session.outcome is None
        assert session.is_loading is False

    def test_fresh_builder_per_build(self):
        """Each start asks the factory for a new builder."""
        factory = Mock(side_effect=lambda: Mock(spec=GridBuilder, **{"build.return_value": create_success()}))
        session = GenerationSession(factory)

        session.start(5)
        session.wait(5)
        session.start(5)
        session.wait(5)

        assert factory.call_count == 2

    def test_build_exception_becomes_failure(self):
        """An unexpected error is published as a failure outcome."""
        builder = Mock(spec=GridBuilder)
        builder.build.side_effect = RuntimeError("boom")
        session = GenerationSession(lambda: builder)

        session.start(5)
        outcome = session.wait(5)

        assert isinstance(outcome, BuildFailure)
        assert "boom" in outcome.reason
        assert session.puzzle is None

    def test_failure_outcome_has_no_puzzle(self):
        failure = BuildFailure(reason="Cannot generate puzzle")
        builder = Mock(spec=GridBuilder)
        builder.build.return_value = failure
        session = GenerationSession(lambda: builder)

        session.start(2)

        assert session.wait(5) is failure
        assert session.puzzle is None

    def test_wait_when_idle_returns_immediately(self):
        """With nothing started, wait does not block."""
        session = GenerationSession(lambda: Mock(spec=GridBuilder))
        assert session.wait() is None

    def test_wait_after_reset_returns_immediately(self):
        """A reset build leaves nothing to wait for."""
        release = threading.Event()
        session = GenerationSession(lambda: create_blocking_builder(release, create_success()))

        session.start(5)
        session.reset()

        started = time.monotonic()
        assert session.wait() is None
        assert time.monotonic() - started < 1
        release.set()

    def test_reset_releases_blocked_waiter(self):
        """A caller already waiting is woken when the build is reset."""
        release = threading.Event()
        session = GenerationSession(lambda: create_blocking_builder(release, create_success()))
        results = []

        session.start(5)
        waiter = threading.Thread(target=lambda: results.append(session.wait()), daemon=True)
        waiter.start()
        time.sleep(0.05)
        session.reset()
        waiter.join(1)

        assert not waiter.is_alive()
        assert results == [None]
        release.set()

    def test_build_runs_on_daemon_thread(self):
        """Each build gets its own daemon thread named after its ticket."""
        threads = []
        builder = Mock(spec=GridBuilder)
        builder.build.side_effect = lambda size: threads.append(threading.current_thread()) or create_success()
        session = GenerationSession(lambda: builder)

        ticket = session.start(5)
        session.wait(5)

        assert len(threads) == 1
        assert threads[0] is not threading.main_thread()
        assert threads[0].daemon is True
        assert threads[0].name == f"puzzle-build-{ticket}"
