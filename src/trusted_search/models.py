"""
Core records for sources, documents, filters and result pages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, TypeAlias
from urllib.parse import urlparse


SourceType: TypeAlias = Literal["wikipedia", "academic", "government", "encyclopedia"]
ContentType: TypeAlias = Literal["article", "paper", "document", "page"]
TrustLevel: TypeAlias = Literal["verified", "high", "institutional"]

SOURCE_TYPES: tuple[SourceType, ...] = ("wikipedia", "academic", "government", "encyclopedia")
CONTENT_TYPES: tuple[ContentType, ...] = ("article", "paper", "document", "page")

VERIFIED_THRESHOLD = 9.0
HIGH_THRESHOLD = 8.5


@dataclass(frozen=True)
class Source:
    """A trusted publisher shared by every document drawn from it."""

    id: str
    name: str
    type: SourceType
    domain: str
    authority_score: float

    @property
    def trust_level(self) -> TrustLevel:
        if self.authority_score >= VERIFIED_THRESHOLD:
            return "verified"
        if self.authority_score >= HIGH_THRESHOLD:
            return "high"
        return "institutional"

    @classmethod
    def from_base_url(
        cls,
        *,
        id: str,
        name: str,
        type: SourceType,
        base_url: str,
        authority_score: float,
    ) -> Source:
        """Build a source whose domain is the hostname of ``base_url``."""
        domain = urlparse(base_url).hostname or base_url
        return cls(
            id=id,
            name=name,
            type=type,
            domain=domain,
            authority_score=authority_score,
        )


@dataclass(frozen=True)
class Document:
    """An indexed document. ``source`` is a reference, never a copy."""

    id: str
    title: str
    snippet: str
    url: str
    source: Source
    relevance_score: float
    last_updated: datetime
    topics: tuple[str, ...]
    content_type: ContentType
    published_date: datetime | None = None


@dataclass(frozen=True)
class DateRange:
    """Inclusive publication date window."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class FilterSet:
    """
    User-chosen constraints narrowing a search.

    Every field is optional; ``None`` or an empty tuple imposes no constraint.
    """

    source_types: tuple[SourceType, ...] | None = None
    content_types: tuple[ContentType, ...] | None = None
    topics: tuple[str, ...] | None = None
    date_range: DateRange | None = None
    min_authority_score: float | None = None


@dataclass(frozen=True)
class FilterOptions:
    """Selectable filter values derived from a corpus."""

    source_types: tuple[SourceType, ...]
    content_types: tuple[ContentType, ...]
    topics: tuple[str, ...]
    date_min: datetime
    date_max: datetime


@dataclass(frozen=True)
class ResultPage:
    """One page of ranked results plus the totals needed to page further."""

    results: tuple[Document, ...]
    total_count: int
    current_page: int
    total_pages: int
    query: str
    filters: FilterSet = field(default_factory=FilterSet)
    search_time: float = 0.0
