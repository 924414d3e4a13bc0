"""
Query matching and the match -> filter -> rank -> paginate pipeline.
"""

from __future__ import annotations

import logging
import time

from ..config import SearchSettings
from ..corpus import Corpus
from ..errors import MISSING_QUERY, QueryValidationError
from ..models import Document, FilterSet, ResultPage
from .filters import matches_filters, validate_filters
from .paginator import check_page_bounds, paginate
from .ranker import rank_documents

logger = logging.getLogger(__name__)


def matches_query(query: str, document: Document) -> bool:
    """
    Case-insensitive substring match on title, snippet, topics, then source name.

    No tokenization, stemming or fuzzy matching: a phrase must appear verbatim.
    ``query`` is expected to be trimmed and non-empty.
    """
    needle = query.lower()
    if needle in document.title.lower():
        return True
    if needle in document.snippet.lower():
        return True
    if any(needle in topic.lower() for topic in document.topics):
        return True
    return needle in document.source.name.lower()


def normalize_query(query: str | None, *, max_length: int) -> str:
    """Trim ``query`` and reject it when blank or longer than ``max_length``."""
    trimmed = (query or "").strip()
    if not trimmed:
        raise QueryValidationError("Search query is required", code=MISSING_QUERY)
    if len(trimmed) > max_length:
        raise QueryValidationError(
            f"Query is too long (maximum {max_length} characters)"
        )
    return trimmed


class SearchEngine:
    """Run searches against an injected, read-only corpus."""

    def __init__(self, corpus: Corpus, settings: SearchSettings | None = None) -> None:
        self.corpus = corpus
        self.settings = settings or SearchSettings()

    def search(
        self,
        query: str,
        *,
        filters: FilterSet | None = None,
        page: int = 1,
        limit: int | None = None,
    ) -> ResultPage:
        """Return one page of ranked documents matching ``query`` and ``filters``."""
        started = time.perf_counter()
        active_filters = filters or FilterSet()
        page_size = limit if limit is not None else self.settings.default_page_size

        normalized = normalize_query(query, max_length=self.settings.max_query_length)
        check_page_bounds(page, page_size, max_page_size=self.settings.max_page_size)
        validate_filters(
            active_filters,
            max_authority_score=self.settings.max_authority_score,
        )

        candidates = self.select(normalized, active_filters)
        ranked = rank_documents(candidates)
        result_page = paginate(
            ranked,
            page=page,
            page_size=page_size,
            max_page_size=self.settings.max_page_size,
        )
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.debug(
            "Search %r matched %d documents (page %d/%d) in %.2fms",
            normalized,
            result_page.total_count,
            page,
            result_page.total_pages,
            elapsed_ms,
        )
        return ResultPage(
            results=result_page.items,
            total_count=result_page.total_count,
            current_page=page,
            total_pages=result_page.total_pages,
            query=query,
            filters=active_filters,
            search_time=elapsed_ms,
        )

    def select(self, query: str, filters: FilterSet) -> list[Document]:
        """Corpus documents matching both the query and the filters, in corpus order."""
        return [
            document
            for document in self.corpus
            if matches_query(query, document) and matches_filters(filters, document)
        ]
