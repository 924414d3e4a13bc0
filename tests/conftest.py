from datetime import datetime, timezone

import pytest

from trusted_search.corpus import Corpus, load_sample_corpus
from trusted_search.models import Document, Source


def day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


ACADEMIC = Source(
    id="journal",
    name="Journal of Tests",
    type="academic",
    domain="journal.example.org",
    authority_score=9.4,
)
GOVERNMENT = Source(
    id="agency",
    name="Testing Agency",
    type="government",
    domain="agency.example.gov",
    authority_score=8.0,
)


def make_document(
    doc_id: str,
    *,
    title: str = "Untitled",
    snippet: str = "",
    source: Source = ACADEMIC,
    relevance_score: float = 0.5,
    published_date: datetime | None = None,
    topics: tuple[str, ...] = (),
    content_type: str = "article",
) -> Document:
    return Document(
        id=doc_id,
        title=title,
        snippet=snippet,
        url=f"https://{source.domain}/{doc_id}",
        source=source,
        relevance_score=relevance_score,
        published_date=published_date,
        last_updated=day(2024, 2, 1),
        topics=topics,
        content_type=content_type,  # type: ignore[arg-type]
    )


@pytest.fixture()
def sample_corpus() -> Corpus:
    return load_sample_corpus()


@pytest.fixture()
def synthetic_corpus() -> Corpus:
    """Fifteen 'widget' documents with descending scores plus two unrelated ones."""
    documents = [
        make_document(
            f"widget-{i:02d}",
            title=f"Widget report {i}",
            relevance_score=round(0.99 - i * 0.01, 2),
            published_date=day(2024, 1, i + 1),
        )
        for i in range(15)
    ]
    documents.append(make_document("other-1", title="Gadget overview", source=GOVERNMENT))
    documents.append(make_document("other-2", title="Sprocket manual"))
    return Corpus(
        [ACADEMIC, GOVERNMENT],
        documents,
        {"widget": ["widget report", "widget pricing"], "gadget": ["gadget overview"]},
    )
