"""Search pipeline stages over an in-memory corpus."""

from .codec import (
    build_search_url,
    decode_filters,
    encode_filters,
    filters_from_json,
    filters_to_dict,
    filters_to_json,
)
from .filters import (
    describe_filters,
    has_active_filters,
    matches_filters,
    validate_filters,
)
from .options import derive_filter_options
from .paginator import Page, paginate, total_pages
from .query import SearchEngine, matches_query, normalize_query
from .ranker import rank_documents
from .suggestions import SuggestionEngine

__all__ = [
    "build_search_url",
    "decode_filters",
    "encode_filters",
    "filters_from_json",
    "filters_to_dict",
    "filters_to_json",
    "describe_filters",
    "has_active_filters",
    "matches_filters",
    "validate_filters",
    "derive_filter_options",
    "Page",
    "paginate",
    "total_pages",
    "SearchEngine",
    "matches_query",
    "normalize_query",
    "rank_documents",
    "SuggestionEngine",
]
