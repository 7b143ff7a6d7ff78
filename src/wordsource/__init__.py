"""Remote word source for puzzle generation."""

from .models import (
    WordSourceConfig,
    WordSourceError,
    WordSourceExhausted,
    DEFAULT_GENERATOR_URL,
    DEFAULT_DICTIONARY_URL,
)
from .client import WordSourceClient

__all__ = [
    "WordSourceConfig",
    "WordSourceError",
    "WordSourceExhausted",
    "DEFAULT_GENERATOR_URL",
    "DEFAULT_DICTIONARY_URL",
    "WordSourceClient",
]
