"""
Request boundary for the search pipeline.

Takes raw string parameters, as they arrive on a URL, and returns either a
result or a ``ServiceError`` describing why the request was refused.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .config import SearchSettings
from .corpus import Corpus
from .errors import INVALID_LIMIT, INVALID_PARAMETERS, SearchError
from .models import FilterOptions, FilterSet, ResultPage
from .search import (
    SearchEngine,
    SuggestionEngine,
    decode_filters,
    derive_filter_options,
    filters_from_json,
    normalize_query,
)
from .search.codec import (
    COMBINED_FILTERS_PARAM,
    LIMIT_PARAM,
    PAGE_PARAM,
    QUERY_PARAM,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceError:
    """A refused request: machine-readable code plus a caller-facing message."""

    code: str
    message: str
    status_code: int = 400


@dataclass(frozen=True)
class SuggestionResult:
    suggestions: tuple[str, ...]
    query: str

    @property
    def count(self) -> int:
        return len(self.suggestions)


class SearchService:
    """Wire raw request parameters to the search engine and suggestion engine."""

    def __init__(self, corpus: Corpus, settings: SearchSettings | None = None) -> None:
        self.corpus = corpus
        self.settings = settings or SearchSettings()
        self.engine = SearchEngine(corpus, self.settings)
        self.suggestion_engine = SuggestionEngine(
            corpus.suggestions, max_limit=self.settings.max_suggestion_limit
        )

    def search(self, params: Mapping[str, str]) -> ResultPage | ServiceError:
        """
        Run a search from URL parameters.

        A ``filters`` parameter is decoded strictly as one JSON object; without
        it, itemized filter parameters are decoded leniently.
        """
        query = params.get(QUERY_PARAM, "")
        try:
            normalize_query(query, max_length=self.settings.max_query_length)

            page = _parse_int(params.get(PAGE_PARAM), default=1)
            limit = _parse_int(params.get(LIMIT_PARAM), default=self.settings.default_page_size)
            if page is None or limit is None:
                return ServiceError(INVALID_PARAMETERS, "Invalid page or limit parameters")

            filters = self._filters_from_params(params)
            return self.engine.search(query, filters=filters, page=page, limit=limit)
        except SearchError as exc:
            logger.info("Rejected search request (%s): %s", exc.code, exc.message)
            return ServiceError(exc.code, exc.message)

    def suggest(self, params: Mapping[str, str]) -> SuggestionResult | ServiceError:
        query = params.get(QUERY_PARAM, "")
        limit = _parse_int(
            params.get(LIMIT_PARAM), default=self.settings.default_suggestion_limit
        )
        if limit is None or not 1 <= limit <= self.settings.max_suggestion_limit:
            return ServiceError(
                INVALID_LIMIT,
                f"Limit must be between 1 and {self.settings.max_suggestion_limit}",
            )
        suggestions = self.suggestion_engine.suggest(query, limit)
        return SuggestionResult(suggestions=tuple(suggestions), query=query)

    def filter_options(self) -> FilterOptions:
        return derive_filter_options(self.corpus)

    @staticmethod
    def _filters_from_params(params: Mapping[str, str]) -> FilterSet:
        combined = params.get(COMBINED_FILTERS_PARAM)
        if combined:
            return filters_from_json(combined)
        return decode_filters(params)


def _parse_int(raw: str | None, *, default: int) -> int | None:
    if raw is None or raw == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return None
