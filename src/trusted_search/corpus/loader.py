"""
Load a corpus from a JSON file.

Expected shape::

    {
      "sources": [{"id", "name", "type", "base_url" | "domain", "authority_score"}],
      "documents": [{"id", "title", "snippet", "url", "source_id", "relevance_score",
                     "published_date"?, "last_updated", "topics", "content_type"}],
      "suggestions": {"prefix": ["completion", ...]}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..dates import parse_iso_datetime
from ..models import CONTENT_TYPES, SOURCE_TYPES, Document, Source
from .base import Corpus
from .sample import load_sample_corpus

logger = logging.getLogger(__name__)


class CorpusLoadError(ValueError):
    """Raised when a corpus file is missing or malformed."""


def load_corpus(path: str | None = None) -> Corpus:
    """Load the corpus at ``path``, or the bundled sample when no path is given."""
    if path is None:
        return load_sample_corpus()
    return load_corpus_file(path)


def load_corpus_file(path: str) -> Corpus:
    file_path = Path(path)
    if not file_path.is_file():
        raise CorpusLoadError(f"No such corpus file: {path}")

    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CorpusLoadError(f"Corpus file is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise CorpusLoadError("Corpus file must contain a JSON object.")

    sources = [_parse_source(raw) for raw in payload.get("sources", [])]
    by_id = {source.id: source for source in sources}
    documents = [_parse_document(raw, by_id) for raw in payload.get("documents", [])]

    suggestions = payload.get("suggestions", {})
    if not isinstance(suggestions, dict):
        raise CorpusLoadError("`suggestions` must be an object of string lists.")

    try:
        corpus = Corpus(sources, documents, suggestions)
    except (TypeError, ValueError) as exc:
        raise CorpusLoadError(str(exc)) from exc

    logger.info(
        "Loaded corpus from %s: %d sources, %d documents",
        file_path,
        len(corpus.sources),
        len(corpus),
    )
    return corpus


def _parse_source(raw: Any) -> Source:
    if not isinstance(raw, dict):
        raise CorpusLoadError(f"Source entry must be an object: {raw!r}")
    try:
        source_type = raw["type"]
        if source_type not in SOURCE_TYPES:
            raise CorpusLoadError(f"Unknown source type: {source_type!r}")
        if "base_url" in raw:
            return Source.from_base_url(
                id=str(raw["id"]),
                name=str(raw["name"]),
                type=source_type,
                base_url=str(raw["base_url"]),
                authority_score=float(raw["authority_score"]),
            )
        return Source(
            id=str(raw["id"]),
            name=str(raw["name"]),
            type=source_type,
            domain=str(raw["domain"]),
            authority_score=float(raw["authority_score"]),
        )
    except CorpusLoadError:
        raise
    except KeyError as exc:
        raise CorpusLoadError(f"Source entry missing field {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise CorpusLoadError(f"Invalid source entry {raw.get('id')!r}: {exc}") from exc


def _parse_document(raw: Any, sources: dict[str, Source]) -> Document:
    if not isinstance(raw, dict):
        raise CorpusLoadError(f"Document entry must be an object: {raw!r}")
    try:
        source_id = str(raw["source_id"])
        source = sources.get(source_id)
        if source is None:
            raise CorpusLoadError(f"Document {raw.get('id')!r} references unknown source {source_id!r}")
        content_type = raw["content_type"]
        if content_type not in CONTENT_TYPES:
            raise CorpusLoadError(f"Unknown content type: {content_type!r}")
        published = raw.get("published_date")
        return Document(
            id=str(raw["id"]),
            title=str(raw["title"]),
            snippet=str(raw["snippet"]),
            url=str(raw["url"]),
            source=source,
            relevance_score=float(raw["relevance_score"]),
            published_date=parse_iso_datetime(published) if published else None,
            last_updated=parse_iso_datetime(raw["last_updated"]),
            topics=tuple(str(topic) for topic in raw.get("topics", [])),
            content_type=content_type,
        )
    except CorpusLoadError:
        raise
    except KeyError as exc:
        raise CorpusLoadError(f"Document entry missing field {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise CorpusLoadError(f"Invalid document entry {raw.get('id')!r}: {exc}") from exc
