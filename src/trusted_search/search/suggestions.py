"""
Autocomplete suggestions from a static prefix dictionary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..config import MAX_SUGGESTION_LIMIT, MIN_SUGGESTION_QUERY_LENGTH

logger = logging.getLogger(__name__)


class SuggestionEngine:
    """Map a partial query onto completions from ``dictionary``."""

    def __init__(
        self,
        dictionary: Mapping[str, Sequence[str]],
        *,
        max_limit: int = MAX_SUGGESTION_LIMIT,
    ) -> None:
        self.dictionary = dictionary
        self.max_limit = max_limit

    def suggest(self, partial_query: str, limit: int = 5) -> list[str]:
        """
        Return up to ``limit`` distinct completions for ``partial_query``.

        Completions under keys starting with the query come first, in key
        order. Any other completion containing the query follows, in
        dictionary order. Queries shorter than two characters return nothing.
        """
        if not 1 <= limit <= self.max_limit:
            raise ValueError(f"limit must be between 1 and {self.max_limit}, got {limit}")

        query = (partial_query or "").strip().lower()
        if len(query) < MIN_SUGGESTION_QUERY_LENGTH:
            return []

        try:
            return self._collect(query)[:limit]
        except Exception:
            logger.warning("Suggestion lookup failed for %r", query, exc_info=True)
            return []

    def _collect(self, query: str) -> list[str]:
        collected: dict[str, None] = {}

        for key, suggestions in self.dictionary.items():
            if key.lower().startswith(query):
                for suggestion in suggestions:
                    collected.setdefault(suggestion, None)

        for suggestions in self.dictionary.values():
            for suggestion in suggestions:
                if query in suggestion.lower():
                    collected.setdefault(suggestion, None)

        return list(collected)
