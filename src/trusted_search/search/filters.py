"""
Filter evaluation and validation helpers.
"""

from __future__ import annotations

from ..config import MAX_AUTHORITY_SCORE
from ..errors import FilterValidationError
from ..models import CONTENT_TYPES, SOURCE_TYPES, Document, FilterSet


def matches_filters(filters: FilterSet, document: Document) -> bool:
    """
    Return whether ``document`` satisfies every active constraint in ``filters``.

    Constraints are ANDed together; values within a list constraint are ORed.
    """
    if filters.source_types and document.source.type not in filters.source_types:
        return False

    if filters.content_types and document.content_type not in filters.content_types:
        return False

    if filters.topics and not _matches_topics(filters.topics, document.topics):
        return False

    if filters.date_range is not None:
        published = document.published_date
        if published is None:
            return False
        if not filters.date_range.start <= published <= filters.date_range.end:
            return False

    if filters.min_authority_score:
        if document.source.authority_score < filters.min_authority_score:
            return False

    return True


def _matches_topics(wanted: tuple[str, ...], topics: tuple[str, ...]) -> bool:
    lowered = [topic.lower() for topic in topics]
    return any(
        needle.lower() in topic for needle in wanted for topic in lowered
    )


def validate_filters(
    filters: FilterSet,
    *,
    max_authority_score: float = MAX_AUTHORITY_SCORE,
) -> None:
    """Raise FilterValidationError listing every unacceptable filter value."""
    errors: list[str] = []

    if filters.source_types:
        invalid = [value for value in filters.source_types if value not in SOURCE_TYPES]
        if invalid:
            errors.append(f"Invalid source types: {', '.join(map(str, invalid))}")

    if filters.content_types:
        invalid = [value for value in filters.content_types if value not in CONTENT_TYPES]
        if invalid:
            errors.append(f"Invalid content types: {', '.join(map(str, invalid))}")

    if filters.date_range is not None:
        if filters.date_range.start > filters.date_range.end:
            errors.append("Start date must be before end date")

    if filters.min_authority_score is not None:
        if not 0 <= filters.min_authority_score <= max_authority_score:
            errors.append(
                f"Authority score must be between 0 and {max_authority_score:g}"
            )

    if errors:
        raise FilterValidationError(errors)


def has_active_filters(filters: FilterSet) -> bool:
    """Return True when at least one constraint would narrow a search."""
    return bool(
        filters.source_types
        or filters.content_types
        or filters.topics
        or filters.date_range is not None
        or filters.min_authority_score is not None
    )


def describe_filters(filters: FilterSet) -> str:
    """Human-readable one-line summary of the active filters."""
    parts: list[str] = []

    if filters.source_types:
        parts.append(f"Sources: {', '.join(filters.source_types)}")

    if filters.content_types:
        parts.append(f"Content: {', '.join(filters.content_types)}")

    if filters.topics:
        topics = filters.topics
        if len(topics) > 3:
            topic_list = f"{', '.join(topics[:3])} +{len(topics) - 3} more"
        else:
            topic_list = ", ".join(topics)
        parts.append(f"Topics: {topic_list}")

    if filters.date_range is not None:
        start = filters.date_range.start.date().isoformat()
        end = filters.date_range.end.date().isoformat()
        parts.append(f"Date: {start} - {end}")

    if filters.min_authority_score:
        parts.append(f"Min Authority: {filters.min_authority_score:.1f}")

    return " • ".join(parts)
