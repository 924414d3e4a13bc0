"""
Derive the selectable filter values from a corpus.
"""

from __future__ import annotations

from datetime import datetime, timezone

from ..corpus import Corpus
from ..models import FilterOptions

DEFAULT_DATE_MIN = datetime(2000, 1, 1, tzinfo=timezone.utc)


def derive_filter_options(corpus: Corpus) -> FilterOptions:
    """Scan ``corpus`` once and return its filter universe."""
    source_types = tuple(dict.fromkeys(source.type for source in corpus.sources))
    content_types = tuple(dict.fromkeys(doc.content_type for doc in corpus))
    topics = tuple(sorted({topic for doc in corpus for topic in doc.topics}))

    dates = [doc.published_date for doc in corpus if doc.published_date is not None]
    if dates:
        date_min, date_max = min(dates), max(dates)
    else:
        date_min, date_max = DEFAULT_DATE_MIN, datetime.now(timezone.utc)

    return FilterOptions(
        source_types=source_types,
        content_types=content_types,
        topics=topics,
        date_min=date_min,
        date_max=date_max,
    )
