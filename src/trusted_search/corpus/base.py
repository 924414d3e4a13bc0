"""
Read-only corpus container passed into every pipeline call.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

from ..models import Document, Source


class Corpus:
    """Immutable collection of sources, documents and the suggestion dictionary."""

    def __init__(
        self,
        sources: Sequence[Source],
        documents: Sequence[Document],
        suggestions: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self._sources: tuple[Source, ...] = tuple(sources)
        self._documents: tuple[Document, ...] = tuple(documents)
        self._suggestions: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {key: tuple(values) for key, values in (suggestions or {}).items()}
        )
        self._by_id: dict[str, Document] = {}

        source_ids: set[str] = set()
        for source in self._sources:
            if source.id in source_ids:
                raise ValueError(f"Duplicate source id: {source.id!r}")
            source_ids.add(source.id)

        for document in self._documents:
            if document.id in self._by_id:
                raise ValueError(f"Duplicate document id: {document.id!r}")
            self._by_id[document.id] = document

    @property
    def sources(self) -> tuple[Source, ...]:
        return self._sources

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    @property
    def suggestions(self) -> Mapping[str, tuple[str, ...]]:
        return self._suggestions

    def get_document(self, doc_id: str) -> Document | None:
        return self._by_id.get(doc_id)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)
