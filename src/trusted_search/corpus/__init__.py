"""Corpus containers and loaders."""

from .base import Corpus
from .loader import CorpusLoadError, load_corpus, load_corpus_file
from .sample import SAMPLE_SUGGESTIONS, load_sample_corpus

__all__ = [
    "Corpus",
    "CorpusLoadError",
    "load_corpus",
    "load_corpus_file",
    "SAMPLE_SUGGESTIONS",
    "load_sample_corpus",
]
