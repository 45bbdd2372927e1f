"""Application layer: the corpus build pipeline and index persistence."""

from .app import DictionaryPipeline
from .data import IndexFileRepository

__all__ = ["DictionaryPipeline", "IndexFileRepository"]
