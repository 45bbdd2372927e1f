"""Plain serializable documents for pre-built dictionary indices.

The document names and shapes match the files the precomputation step writes:
``words-by-difficulty``, ``words-by-length``, ``phonetics``, ``rhyme-groups``
and the optional ``definitions``. JSON object keys are strings, so length
buckets are keyed by ``str(length)`` and converted back on load.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from ..config import RHYME_GROUP_MIN_WORDS
from .index_builder import DictionaryIndices
from .records import DefinitionRecord, Difficulty, PhoneticRecord, WordRecord

WORDS_BY_DIFFICULTY = "words-by-difficulty"
WORDS_BY_LENGTH = "words-by-length"
PHONETICS = "phonetics"
RHYME_GROUPS = "rhyme-groups"
DEFINITIONS = "definitions"

REQUIRED_DOCUMENTS = (WORDS_BY_DIFFICULTY, WORDS_BY_LENGTH, PHONETICS, RHYME_GROUPS)
OPTIONAL_DOCUMENTS = (DEFINITIONS,)


def indices_to_documents(
    indices: DictionaryIndices, *, include_definitions: bool = True
) -> Dict[str, Any]:
    documents: Dict[str, Any] = {
        WORDS_BY_DIFFICULTY: {
            level.value: [record.to_dict() for record in indices.by_difficulty.get(level, ())]
            for level in Difficulty
        },
        WORDS_BY_LENGTH: {
            str(length): list(words) for length, words in indices.by_length.items()
        },
        PHONETICS: [record.to_dict() for record in indices.phonetics],
        RHYME_GROUPS: {key: list(words) for key, words in indices.rhyme_groups.items()},
    }
    if include_definitions:
        documents[DEFINITIONS] = [record.to_dict() for record in indices.definitions]
    return documents


def _distinct(words: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(str(word) for word in words))


def indices_from_documents(documents: Mapping[str, Any]) -> DictionaryIndices:
    """Rebuild :class:`DictionaryIndices` from :func:`indices_to_documents` output.

    Missing required documents raise ``KeyError``. Rhyme groups that are
    below the minimum size after de-duplication are dropped.
    """

    difficulty_doc = documents[WORDS_BY_DIFFICULTY]
    by_difficulty = {
        level: [WordRecord.from_dict(entry) for entry in difficulty_doc.get(level.value, ())]
        for level in Difficulty
    }
    by_length = {
        int(length): [str(word) for word in words]
        for length, words in documents[WORDS_BY_LENGTH].items()
    }
    phonetics = [PhoneticRecord.from_dict(entry) for entry in documents[PHONETICS]]

    rhyme_groups = {}
    for key, words in documents[RHYME_GROUPS].items():
        distinct = _distinct(words)
        if len(distinct) >= RHYME_GROUP_MIN_WORDS:
            rhyme_groups[str(key)] = distinct

    definitions = [
        DefinitionRecord.from_dict(entry) for entry in documents.get(DEFINITIONS) or ()
    ]

    return DictionaryIndices.assemble(
        by_difficulty=by_difficulty,
        by_length=by_length,
        phonetics=phonetics,
        rhyme_groups=rhyme_groups,
        definitions=definitions,
    )


__all__ = [
    "indices_to_documents",
    "indices_from_documents",
    "WORDS_BY_DIFFICULTY",
    "WORDS_BY_LENGTH",
    "PHONETICS",
    "RHYME_GROUPS",
    "DEFINITIONS",
    "REQUIRED_DOCUMENTS",
    "OPTIONAL_DOCUMENTS",
]
