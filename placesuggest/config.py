"""
Configuration loaded from environment variables with sensible defaults.

Only the settings the suggestion core consumes live here. Listening
address, port and worker count belong to whatever host serves the API.

Variables:
  PLACESUGGEST_DATA_SOURCE  gazetteer path (falls back to DATA_SOURCE;
                            unset means the bundled sample catalog)
  PLACESUGGEST_MAX_RESULTS  suggestions per query (falls back to
                            MAX_RESULTS; default 4)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 4


def _first_set(environ: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = environ.get(name)
        if value is not None and value.strip():
            return value.strip()
    return None


@dataclass(frozen=True)
class Settings:
    data_source: Optional[str] = None
    max_results: int = DEFAULT_MAX_RESULTS

    def __post_init__(self) -> None:
        if self.max_results < 0:
            raise ValueError(f"max_results must be >= 0, got {self.max_results}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Raises:
            ValueError: If the max-results variable is not a non-negative integer
        """
        environ = os.environ if environ is None else environ

        raw_max = _first_set(environ, "PLACESUGGEST_MAX_RESULTS", "MAX_RESULTS")
        if raw_max is None:
            max_results = DEFAULT_MAX_RESULTS
        else:
            try:
                max_results = int(raw_max)
            except ValueError:
                raise ValueError(f"PLACESUGGEST_MAX_RESULTS must be an integer, got {raw_max!r}") from None

        settings = cls(
            data_source=_first_set(environ, "PLACESUGGEST_DATA_SOURCE", "DATA_SOURCE"),
            max_results=max_results,
        )
        logger.debug(f"Settings loaded: {settings}")
        return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings.from_env()


def clear_settings_cache() -> None:
    """Forget cached settings so the next get_settings() rereads the environment."""
    get_settings.cache_clear()


__all__ = [
    "DEFAULT_MAX_RESULTS",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
