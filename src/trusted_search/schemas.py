"""
Wire models for the HTTP API. Field names are emitted in camelCase.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import ContentType, Document, FilterOptions, ResultPage, SourceType, TrustLevel
from .search import filters_to_dict
from .service import SuggestionResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SourcePayload(_CamelModel):
    """Source metadata attached to each result."""

    id: str
    name: str
    type: SourceType
    domain: str
    authority_score: float
    trust_level: TrustLevel


class DocumentPayload(_CamelModel):
    """One search result."""

    id: str
    title: str
    snippet: str
    url: str
    source: SourcePayload
    relevance_score: float
    published_date: datetime | None = None
    last_updated: datetime
    topics: list[str]
    content_type: ContentType

    @classmethod
    def from_document(cls, document: Document) -> DocumentPayload:
        source = document.source
        return cls(
            id=document.id,
            title=document.title,
            snippet=document.snippet,
            url=document.url,
            source=SourcePayload(
                id=source.id,
                name=source.name,
                type=source.type,
                domain=source.domain,
                authority_score=source.authority_score,
                trust_level=source.trust_level,
            ),
            relevance_score=document.relevance_score,
            published_date=document.published_date,
            last_updated=document.last_updated,
            topics=list(document.topics),
            content_type=document.content_type,
        )


class SearchResponse(_CamelModel):
    results: list[DocumentPayload]
    total_count: int
    current_page: int
    total_pages: int
    query: str
    filters: dict[str, Any] = Field(default_factory=dict)
    search_time: float = Field(description="Pipeline time in milliseconds")

    @classmethod
    def from_result_page(cls, page: ResultPage) -> SearchResponse:
        return cls(
            results=[DocumentPayload.from_document(doc) for doc in page.results],
            total_count=page.total_count,
            current_page=page.current_page,
            total_pages=page.total_pages,
            query=page.query,
            filters=filters_to_dict(page.filters),
            search_time=round(page.search_time, 3),
        )


class SuggestionsResponse(_CamelModel):
    suggestions: list[str]
    query: str
    count: int

    @classmethod
    def from_result(cls, result: SuggestionResult) -> SuggestionsResponse:
        return cls(
            suggestions=list(result.suggestions),
            query=result.query,
            count=result.count,
        )


class DateBounds(_CamelModel):
    min: datetime
    max: datetime


class FilterOptionsPayload(_CamelModel):
    available_source_types: list[SourceType]
    available_content_types: list[ContentType]
    available_topics: list[str]
    date_range: DateBounds

    @classmethod
    def from_options(cls, options: FilterOptions) -> FilterOptionsPayload:
        return cls(
            available_source_types=list(options.source_types),
            available_content_types=list(options.content_types),
            available_topics=list(options.topics),
            date_range=DateBounds(min=options.date_min, max=options.date_max),
        )


class FilterOptionsResponse(_CamelModel):
    success: bool = True
    data: FilterOptionsPayload
