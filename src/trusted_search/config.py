"""
Configuration helpers for search limits, corpus location and logging.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path


ENV_CORPUS_PATH = "TRUSTED_SEARCH_CORPUS_PATH"
ENV_LOG_LEVEL = "TRUSTED_SEARCH_LOG_LEVEL"
ENV_DEFAULT_PAGE_SIZE = "TRUSTED_SEARCH_DEFAULT_PAGE_SIZE"
ENV_MAX_PAGE_SIZE = "TRUSTED_SEARCH_MAX_PAGE_SIZE"
ENV_MAX_QUERY_LENGTH = "TRUSTED_SEARCH_MAX_QUERY_LENGTH"
ENV_MAX_AUTHORITY_SCORE = "TRUSTED_SEARCH_MAX_AUTHORITY_SCORE"
ENV_SIMULATED_LATENCY_MS = "TRUSTED_SEARCH_SIMULATED_LATENCY_MS"

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50
MAX_QUERY_LENGTH = 500
DEFAULT_SUGGESTION_LIMIT = 5
MAX_SUGGESTION_LIMIT = 20
MIN_SUGGESTION_QUERY_LENGTH = 2
MAX_AUTHORITY_SCORE = 10.0
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class SearchSettings:
    """Limits applied at the request boundary."""

    default_page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = MAX_PAGE_SIZE
    max_query_length: int = MAX_QUERY_LENGTH
    default_suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    max_suggestion_limit: int = MAX_SUGGESTION_LIMIT
    max_authority_score: float = MAX_AUTHORITY_SCORE
    simulated_latency_ms: int = 0

    @classmethod
    def from_env(cls) -> SearchSettings:
        """Build settings from TRUSTED_SEARCH_* variables, falling back to defaults."""
        return cls(
            default_page_size=int(os.getenv(ENV_DEFAULT_PAGE_SIZE, str(DEFAULT_PAGE_SIZE))),
            max_page_size=int(os.getenv(ENV_MAX_PAGE_SIZE, str(MAX_PAGE_SIZE))),
            max_query_length=int(os.getenv(ENV_MAX_QUERY_LENGTH, str(MAX_QUERY_LENGTH))),
            max_authority_score=float(
                os.getenv(ENV_MAX_AUTHORITY_SCORE, str(MAX_AUTHORITY_SCORE))
            ),
            simulated_latency_ms=int(os.getenv(ENV_SIMULATED_LATENCY_MS, "0")),
        )


def resolve_corpus_path(override_path: str | None = None) -> str | None:
    """
    Resolve the corpus JSON path from CLI override or env var.

    Precedence:
    1) explicit override_path
    2) TRUSTED_SEARCH_CORPUS_PATH
    3) None, meaning the bundled sample corpus
    """
    raw_path = override_path or os.getenv(ENV_CORPUS_PATH)
    if not raw_path:
        return None
    return str(Path(raw_path).expanduser().resolve())


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the server and CLI entry points."""
    level_name = (level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
