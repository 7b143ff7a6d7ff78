"""Configuration and error types for the remote word source."""

from typing import List, Optional
from pydantic import BaseModel, Field


DEFAULT_GENERATOR_URL = "https://random-word-api.herokuapp.com"
DEFAULT_DICTIONARY_URL = "https://api.dictionaryapi.dev"

# Title the dictionary service returns (with a 200) for unknown words
NO_DEFINITIONS_TITLE = '"title":"No Definitions Found"'


class WordSourceConfig(BaseModel):
    """Connection and retry settings for the generator and dictionary services."""
    generator_url: str = DEFAULT_GENERATOR_URL
    dictionary_url: str = DEFAULT_DICTIONARY_URL
    connect_timeout: float = Field(default=3.0, gt=0)
    read_timeout: float = Field(default=3.0, gt=0)
    batch_size: int = Field(default=30, ge=1)
    max_workers: int = Field(default=8, ge=1)
    max_rounds: Optional[int] = Field(default=100, ge=1)  # None retries forever
    backoff_initial: float = Field(default=0.5, ge=0)
    backoff_factor: float = Field(default=2.0, ge=1)
    backoff_max: float = Field(default=8.0, ge=0)


class WordSourceError(Exception):
    """Base class for word source failures."""


class WordSourceExhausted(WordSourceError):
    """Raised when the round budget runs out before enough words were confirmed."""

    def __init__(self, message: str, collected: Optional[List[str]] = None):
        super().__init__(message)
        self.collected = list(collected or [])
