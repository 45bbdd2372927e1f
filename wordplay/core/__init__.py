"""Corpus parsing, index construction and dictionary queries."""

from .cmudict_loader import CMUDictParser
from .definitions import WebsterDefinitionParser
from .dictionary_store import DictionaryStats, DictionaryStore
from .documents import indices_from_documents, indices_to_documents
from .errors import (
    NoCandidateWordsError,
    NotLoadedError,
    SourceUnreadableError,
    WordplayError,
)
from .index_builder import DictionaryIndices, IndexBuilder
from .parse_result import ParseResult
from .records import (
    DefinitionRecord,
    Difficulty,
    PhoneticRecord,
    RhymeGroups,
    WordRecord,
)
from .wordlist import WordListParser

__all__ = [
    "CMUDictParser",
    "WebsterDefinitionParser",
    "WordListParser",
    "ParseResult",
    "DictionaryIndices",
    "IndexBuilder",
    "DictionaryStore",
    "DictionaryStats",
    "indices_to_documents",
    "indices_from_documents",
    "DefinitionRecord",
    "Difficulty",
    "PhoneticRecord",
    "RhymeGroups",
    "WordRecord",
    "WordplayError",
    "SourceUnreadableError",
    "NotLoadedError",
    "NoCandidateWordsError",
]
