"""
Relevance ordering for matched documents.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..models import Document


def rank_documents(documents: Iterable[Document]) -> list[Document]:
    """
    Sort by relevance score, highest first.

    ``sorted`` is stable, so documents with equal scores keep corpus order.
    Scores are precomputed per document; a live corpus must assign real
    per-query scores before calling this.
    """
    return sorted(documents, key=lambda doc: -doc.relevance_score)
