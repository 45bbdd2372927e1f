"""Immutable query surface over the dictionary indices."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..utils.observability import create_counter, get_logger
from .documents import indices_from_documents
from .errors import NotLoadedError
from .index_builder import (
    DictionaryIndices,
    IndexBuilder,
    build_definition_lookup,
    build_phonetic_lookup,
)
from .records import DefinitionRecord, Difficulty, PhoneticRecord, WordRecord

STORE_QUERIES = create_counter(
    "wordplay_store_queries",
    "Dictionary store queries, by operation.",
    label_names=("operation",),
)


@dataclass(frozen=True)
class DictionaryStats:
    total_words: int
    words_by_difficulty: Dict[str, int]
    phonetics_count: int
    rhyme_groups_count: int
    definitions_count: int


class DictionaryStore:
    """Serves validity, bucket, rhyme, definition and anagram lookups.

    A store is built once from :class:`DictionaryIndices` and never mutated,
    so a single instance can be shared by any number of readers. Game code
    receives the store explicitly rather than reaching for a global.

    ``rng`` supplies randomness for the sampling helpers; pass a seeded
    :class:`random.Random` (or any object with ``sample``/``choice``) to make
    them deterministic.
    """

    def __init__(
        self,
        indices: Optional[DictionaryIndices],
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._indices = indices
        self._rng = rng or random.Random()
        self._logger = get_logger(__name__).bind(component="dictionary_store")

        if indices is None:
            self._phonetic_lookup: Mapping[str, PhoneticRecord] = MappingProxyType({})
            self._definition_lookup: Mapping[str, Tuple[DefinitionRecord, ...]] = (
                MappingProxyType({})
            )
            return

        self._phonetic_lookup = MappingProxyType(build_phonetic_lookup(indices.phonetics))
        self._definition_lookup = MappingProxyType(
            build_definition_lookup(indices.definitions)
        )
        self._logger.info(
            "Dictionary store ready",
            context={
                "valid_words": len(indices.valid_words),
                "rhyme_groups": len(indices.rhyme_groups),
                "definitions": len(indices.definitions),
            },
        )

    # Construction ----------------------------------------------------------
    @classmethod
    def unloaded(cls, *, rng: Optional[random.Random] = None) -> "DictionaryStore":
        """Return a store whose queries raise :class:`NotLoadedError`."""

        return cls(None, rng=rng)

    @classmethod
    def from_records(
        cls,
        words: Sequence[WordRecord],
        phonetics: Sequence[PhoneticRecord] = (),
        definitions: Sequence[DefinitionRecord] = (),
        *,
        builder: Optional[IndexBuilder] = None,
        rng: Optional[random.Random] = None,
    ) -> "DictionaryStore":
        indices = (builder or IndexBuilder()).build(words, phonetics, definitions)
        return cls(indices, rng=rng)

    @classmethod
    def from_documents(
        cls,
        documents: Mapping[str, Any],
        *,
        rng: Optional[random.Random] = None,
    ) -> "DictionaryStore":
        return cls(indices_from_documents(documents), rng=rng)

    # Internal helpers ------------------------------------------------------
    @property
    def loaded(self) -> bool:
        return self._indices is not None

    @property
    def indices(self) -> DictionaryIndices:
        return self._require("indices")

    def _require(self, operation: str) -> DictionaryIndices:
        STORE_QUERIES.labels(operation=operation).inc()
        if self._indices is None:
            raise NotLoadedError(operation)
        return self._indices

    def _bucket_words(
        self, level: Optional[Difficulty | str], length: Optional[int]
    ) -> List[str]:
        if (level is None) == (length is None):
            raise ValueError("Specify exactly one of level or length")
        if level is not None:
            return [record.word for record in self.by_difficulty_level(level)]
        return list(self.by_length(int(length)))

    # Public API ------------------------------------------------------------
    def is_valid(self, word: str) -> bool:
        if self._indices is None:
            self._logger.warning("Validity check before dictionary load")
            return False
        STORE_QUERIES.labels(operation="is_valid").inc()
        return word.lower() in self._indices.valid_words

    def by_difficulty_level(self, level: Difficulty | str) -> Tuple[WordRecord, ...]:
        indices = self._require("by_difficulty_level")
        return indices.by_difficulty[Difficulty.coerce(level)]

    def by_length(self, length: int) -> Tuple[str, ...]:
        indices = self._require("by_length")
        return indices.by_length.get(length, ())

    def by_length_range(self, min_length: int, max_length: int) -> List[str]:
        """Words of every length in ``[min_length, max_length]``, shortest first."""

        indices = self._require("by_length_range")
        words: List[str] = []
        for length in range(min_length, max_length + 1):
            words.extend(indices.by_length.get(length, ()))
        return words

    def random_sample(
        self,
        count: int,
        *,
        level: Optional[Difficulty | str] = None,
        length: Optional[int] = None,
    ) -> List[str]:
        """Sample ``count`` distinct words from one difficulty or length bucket."""

        bucket = self._bucket_words(level, length)
        size = max(0, min(int(count), len(bucket)))
        return self._rng.sample(bucket, size)

    def phonetic_of(self, word: str) -> Optional[PhoneticRecord]:
        self._require("phonetic_of")
        return self._phonetic_lookup.get(word.lower())

    def rhymes_of(self, word: str) -> List[str]:
        indices = self._require("rhymes_of")
        normalized = word.lower()
        record = self._phonetic_lookup.get(normalized)
        if record is None or record.rhyme_key is None:
            return []
        group = indices.rhyme_groups.get(record.rhyme_key)
        if not group:
            return []
        return [candidate for candidate in group if candidate != normalized]

    def rhyme_groups(self) -> Mapping[str, Tuple[str, ...]]:
        return self._require("rhyme_groups").rhyme_groups

    def random_rhyme_group(
        self, min_words: int = 3
    ) -> Optional[Tuple[str, Tuple[str, ...]]]:
        groups = [
            (key, words)
            for key, words in self._require("random_rhyme_group").rhyme_groups.items()
            if len(words) >= min_words
        ]
        if not groups:
            return None
        return self._rng.choice(groups)

    def definition_of(self, word: str) -> Optional[DefinitionRecord]:
        matches = self.all_definitions_of(word)
        return matches[0] if matches else None

    def all_definitions_of(self, word: str) -> List[DefinitionRecord]:
        self._require("all_definitions_of")
        return list(self._definition_lookup.get(word.lower(), ()))

    def words_formable_from(self, letters: str, min_length: int = 3) -> List[str]:
        """Valid words spellable from ``letters`` with each letter used at most as often as given.

        The result is in set iteration order; compare it as a set.
        """

        indices = self._require("words_formable_from")
        available = Counter(letters.lower())
        max_length = len(letters)

        results: List[str] = []
        for word in indices.valid_words:
            if len(word) < min_length or len(word) > max_length:
                continue
            needed = Counter(word)
            if all(available[char] >= count for char, count in needed.items()):
                results.append(word)
        return results

    def words_for_word_search(
        self, level: Difficulty | str, count: int, max_length: int = 10
    ) -> List[str]:
        candidates = [
            record.word
            for record in self.by_difficulty_level(level)
            if len(record.word) <= max_length
        ]
        return self._rng.sample(candidates, max(0, min(int(count), len(candidates))))

    def sample_words(self, count: int = 10) -> List[str]:
        """The first ``count`` easy words, in corpus order."""

        return [record.word for record in self.by_difficulty_level(Difficulty.EASY)[:count]]

    def stats(self) -> DictionaryStats:
        indices = self._require("stats")
        return DictionaryStats(
            total_words=len(indices.valid_words),
            words_by_difficulty={
                level.value: len(records) for level, records in indices.by_difficulty.items()
            },
            phonetics_count=len(indices.phonetics),
            rhyme_groups_count=len(indices.rhyme_groups),
            definitions_count=len(indices.definitions),
        )


__all__ = ["DictionaryStore", "DictionaryStats", "STORE_QUERIES"]
