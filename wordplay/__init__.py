"""Dictionary ingestion, indexing and word-game scoring."""

__version__ = "0.1.0"

from .config import CorpusPaths
from .core import DictionaryStore, Difficulty

__all__ = ["CorpusPaths", "DictionaryStore", "Difficulty", "__version__"]
