"""
Trusted Search - filterable search over curated trusted sources.

This package evaluates free-text queries against an in-memory corpus of
encyclopedia, academic and government documents: matching, filtering,
relevance ordering and pagination, plus autocomplete suggestions and a
URL-safe codec for filter state.

Example usage:
    >>> from trusted_search import SearchEngine, FilterSet, load_sample_corpus
    >>> engine = SearchEngine(load_sample_corpus())
    >>> page = engine.search("quantum", filters=FilterSet(source_types=("academic",)))
    >>> [doc.id for doc in page.results]
    ['physics-arxiv-1']
"""

from .config import SearchSettings
from .corpus import Corpus, load_corpus, load_sample_corpus
from .errors import (
    FilterDecodeError,
    FilterValidationError,
    PaginationError,
    QueryValidationError,
    SearchError,
)
from .models import (
    DateRange,
    Document,
    FilterOptions,
    FilterSet,
    ResultPage,
    Source,
)
from .search import (
    SearchEngine,
    SuggestionEngine,
    decode_filters,
    derive_filter_options,
    encode_filters,
)
from .service import SearchService, ServiceError

__all__ = [
    # Configuration
    "SearchSettings",
    # Corpus
    "Corpus",
    "load_corpus",
    "load_sample_corpus",
    # Errors
    "FilterDecodeError",
    "FilterValidationError",
    "PaginationError",
    "QueryValidationError",
    "SearchError",
    # Models
    "DateRange",
    "Document",
    "FilterOptions",
    "FilterSet",
    "ResultPage",
    "Source",
    # Pipeline
    "SearchEngine",
    "SuggestionEngine",
    "decode_filters",
    "derive_filter_options",
    "encode_filters",
    "SearchService",
    "ServiceError",
]
