import logging
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
import requests

from .models import (
    WordSourceConfig,
    WordSourceExhausted,
    NO_DEFINITIONS_TITLE,
)

logger = logging.getLogger(__name__)


class WordSourceClient(BaseModel):
    """
    Client for the remote random-word generator and dictionary services.

    Fetches batches of candidate words, confirms each one against the
    dictionary concurrently, and keeps going until enough real words are found
    or the round budget runs out.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: WordSourceConfig = Field(default_factory=WordSourceConfig)
    seed: Optional[int] = None
    session_factory: Callable[[], requests.Session] = requests.Session
    session: Optional[requests.Session] = None
    _rng: random.Random = None
    _local: threading.local = None

    def model_post_init(self, __context) -> None:
        """Create the random generator and HTTP session after model creation."""
        self._rng = random.Random(self.seed)
        self._local = threading.local()
        if self.session is None:
            self.session = self.session_factory()

    def _thread_session(self) -> requests.Session:
        """Session owned by the calling validation thread."""
        session = getattr(self._local, "session", None)
        if session is None:
            session = self.session_factory()
            self._local.session = session
        return session

    @property
    def timeout(self) -> Tuple[float, float]:
        """(connect, read) timeout passed to every request."""
        return (self.config.connect_timeout, self.config.read_timeout)

    def fetch_batch(self, length: int, number: int) -> List[str]:
        """
        Request `number` random words of `length` letters from the generator.

        Transport errors, non-200 responses and malformed payloads all yield an
        empty list so the caller can retry.

        Args:
            length: Word length to request
            number: How many words to request

        Returns:
            Uppercased candidate words (non-alphabetic entries dropped)
        """
        url = f"{self.config.generator_url.rstrip('/')}/word"
        try:
            response = self.session.get(
                url,
                params={"length": length, "number": number},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Word generator request failed: {e}")
            return []

        if response.status_code != 200:
            logger.warning(f"Word generator returned status {response.status_code}")
            return []

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Word generator returned malformed JSON: {e}")
            return []

        if not isinstance(payload, list):
            logger.warning("Word generator payload is not a list")
            return []

        words = []
        for item in payload:
            if isinstance(item, str) and item.isascii() and item.isalpha():
                words.append(item.upper())
        return words

    def is_valid_word(self, word: str) -> bool:
        """
        Check a word against the dictionary service.

        A word is valid only for a 200 response whose body is not the
        "No Definitions Found" payload. Any request error rejects the word.
        """
        url = f"{self.config.dictionary_url.rstrip('/')}/api/v2/entries/en/{word.lower()}"
        try:
            response = self._thread_session().get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug(f"Dictionary lookup for {word} failed: {e}")
            return False

        if response.status_code != 200:
            return False
        return NO_DEFINITIONS_TITLE not in response.text

    def validate_batch(self, words: List[str], needed: int) -> List[str]:
        """
        Validate candidates concurrently and return up to `needed` accepted words.

        Words are accepted in the order their lookups complete. Once `needed`
        words are accepted, queued lookups are cancelled and in-flight ones are
        left to finish in the background.
        """
        accepted: List[str] = []
        if needed <= 0 or not words:
            return accepted

        executor = ThreadPoolExecutor(
            max_workers=min(self.config.max_workers, len(words)),
            thread_name_prefix="word-validate",
        )
        try:
            futures = {executor.submit(self.is_valid_word, word): word for word in words}
            for future in as_completed(futures):
                if not future.result():
                    continue
                accepted.append(futures[future])
                if len(accepted) >= needed:
                    break
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        return accepted

    def _backoff(self, failures: int) -> None:
        """Sleep before retrying after an unproductive round."""
        delay = min(
            self.config.backoff_initial * (self.config.backoff_factor ** failures),
            self.config.backoff_max,
        )
        if delay > 0:
            logger.debug(f"Backing off for {delay:.2f}s")
            time.sleep(delay)

    def fetch_candidates(self, count: int, min_len: int, max_len: int) -> List[str]:
        """
        Collect `count` dictionary-confirmed words with lengths in [min_len, max_len].

        Args:
            count: Number of words wanted
            min_len: Minimum word length
            max_len: Maximum word length

        Returns:
            Exactly `count` uppercase words, in acceptance order

        Raises:
            ValueError: If the length range is empty or below 1
            WordSourceExhausted: If `max_rounds` generator requests did not
                yield enough words
        """
        if count <= 0:
            return []
        if min_len < 1 or min_len > max_len:
            raise ValueError(f"Invalid word length range [{min_len}, {max_len}]")

        collected: List[str] = []
        rounds = 0
        failures = 0

        while len(collected) < count:
            if self.config.max_rounds is not None and rounds >= self.config.max_rounds:
                raise WordSourceExhausted(
                    f"Only confirmed {len(collected)} of {count} words "
                    f"after {rounds} rounds",
                    collected=collected,
                )
            rounds += 1

            remaining = count - len(collected)
            length = self._rng.randint(min_len, max_len)
            batch = self.fetch_batch(length, min(self.config.batch_size, remaining))
            accepted = self.validate_batch(batch, remaining)

            if not accepted:
                self._backoff(failures)
                failures += 1
                continue

            failures = 0
            collected.extend(accepted)
            logger.info(f"Confirmed {len(collected)}/{count} words (round {rounds})")

        return collected
