"""Derive the lookup indices served by :class:`DictionaryStore`."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..config import RHYME_GROUP_MIN_WORDS
from ..utils.observability import create_histogram, get_logger, observe_duration
from ..utils.telemetry import StructuredTelemetry
from .records import DefinitionRecord, Difficulty, PhoneticRecord, WordRecord

INDEX_BUILD_SECONDS = create_histogram(
    "wordplay_index_build_seconds",
    "Time spent deriving each dictionary index.",
    label_names=("index",),
)


def build_by_difficulty(
    words: Iterable[WordRecord],
) -> Dict[Difficulty, Tuple[WordRecord, ...]]:
    buckets: Dict[Difficulty, List[WordRecord]] = {level: [] for level in Difficulty}
    for record in words:
        buckets[record.difficulty].append(record)
    return {level: tuple(records) for level, records in buckets.items()}


def build_by_length(words: Iterable[WordRecord]) -> Dict[int, Tuple[str, ...]]:
    """Group words by their exact character length, keeping input order."""

    buckets: Dict[int, List[str]] = {}
    for record in words:
        buckets.setdefault(len(record.word), []).append(record.word)
    return {length: tuple(bucket) for length, bucket in buckets.items()}


def build_rhyme_groups(
    phonetics: Iterable[PhoneticRecord],
) -> Dict[str, Tuple[str, ...]]:
    """Group words by the last two sounds of each pronunciation.

    Groups are de-duplicated in first-seen order and dropped when they hold
    fewer than ``RHYME_GROUP_MIN_WORDS`` distinct words.
    """

    grouped: Dict[str, Dict[str, None]] = {}
    for record in phonetics:
        key = record.rhyme_key
        if key is None:
            continue
        grouped.setdefault(key, {})[record.word] = None

    return {
        key: tuple(words)
        for key, words in grouped.items()
        if len(words) >= RHYME_GROUP_MIN_WORDS
    }


def build_valid_words(
    by_difficulty: Mapping[Difficulty, Sequence[WordRecord]],
) -> FrozenSet[str]:
    return frozenset(
        record.word.lower() for bucket in by_difficulty.values() for record in bucket
    )


def build_phonetic_lookup(
    phonetics: Iterable[PhoneticRecord],
) -> Dict[str, PhoneticRecord]:
    """Map each word to its first pronunciation record."""

    lookup: Dict[str, PhoneticRecord] = {}
    for record in phonetics:
        lookup.setdefault(record.word, record)
    return lookup


def build_definition_lookup(
    definitions: Iterable[DefinitionRecord],
) -> Dict[str, Tuple[DefinitionRecord, ...]]:
    lookup: Dict[str, List[DefinitionRecord]] = {}
    for record in definitions:
        lookup.setdefault(record.word, []).append(record)
    return {word: tuple(records) for word, records in lookup.items()}


@dataclass(frozen=True)
class DictionaryIndices:
    """Read-only bundle of every index derived from the corpora.

    Construction copies every mapping into a read-only view and derives
    ``valid_words`` from ``by_difficulty``, however the bundle is built.
    """

    by_difficulty: Mapping[Difficulty, Tuple[WordRecord, ...]]
    by_length: Mapping[int, Tuple[str, ...]]
    phonetics: Tuple[PhoneticRecord, ...]
    rhyme_groups: Mapping[str, Tuple[str, ...]]
    definitions: Tuple[DefinitionRecord, ...] = ()
    valid_words: FrozenSet[str] = field(init=False, default=frozenset())

    def __post_init__(self) -> None:
        difficulty_view = {
            level: tuple(self.by_difficulty.get(level, ())) for level in Difficulty
        }
        normalized = {
            "by_difficulty": MappingProxyType(difficulty_view),
            "by_length": MappingProxyType(
                {int(length): tuple(words) for length, words in self.by_length.items()}
            ),
            "phonetics": tuple(self.phonetics),
            "rhyme_groups": MappingProxyType(
                {key: tuple(words) for key, words in self.rhyme_groups.items()}
            ),
            "definitions": tuple(self.definitions),
            "valid_words": build_valid_words(difficulty_view),
        }
        for name, value in normalized.items():
            object.__setattr__(self, name, value)

    @classmethod
    def assemble(
        cls,
        *,
        by_difficulty: Mapping[Difficulty, Sequence[WordRecord]],
        by_length: Mapping[int, Sequence[str]],
        phonetics: Sequence[PhoneticRecord],
        rhyme_groups: Mapping[str, Sequence[str]],
        definitions: Sequence[DefinitionRecord] = (),
    ) -> "DictionaryIndices":
        return cls(
            by_difficulty=by_difficulty,
            by_length=by_length,
            phonetics=tuple(phonetics),
            rhyme_groups=rhyme_groups,
            definitions=tuple(definitions),
        )


class IndexBuilder:
    """Builds :class:`DictionaryIndices` from parsed corpus records."""

    def __init__(
        self,
        *,
        telemetry: Optional[StructuredTelemetry] = None,
    ) -> None:
        self.telemetry = telemetry or StructuredTelemetry()
        self._logger = get_logger(__name__).bind(component="index_builder")

    @contextmanager
    def _timed(self, index_name: str) -> Iterator[None]:
        with self.telemetry.timer(f"index.{index_name}"), observe_duration(
            INDEX_BUILD_SECONDS.labels(index=index_name)
        ):
            yield

    def build(
        self,
        words: Sequence[WordRecord],
        phonetics: Sequence[PhoneticRecord],
        definitions: Sequence[DefinitionRecord] = (),
    ) -> DictionaryIndices:
        with self._timed("by_difficulty"):
            by_difficulty = build_by_difficulty(words)
        with self._timed("by_length"):
            by_length = build_by_length(words)
        with self._timed("rhyme_groups"):
            rhyme_groups = build_rhyme_groups(phonetics)

        indices = DictionaryIndices.assemble(
            by_difficulty=by_difficulty,
            by_length=by_length,
            phonetics=phonetics,
            rhyme_groups=rhyme_groups,
            definitions=definitions,
        )

        self.telemetry.annotate("valid_words", len(indices.valid_words))
        self.telemetry.annotate("rhyme_groups", len(rhyme_groups))
        self._logger.info(
            "Indices built",
            context={
                "words": len(words),
                "valid_words": len(indices.valid_words),
                "lengths": len(by_length),
                "phonetics": len(phonetics),
                "rhyme_groups": len(rhyme_groups),
                "definitions": len(definitions),
            },
        )
        return indices


__all__ = [
    "DictionaryIndices",
    "IndexBuilder",
    "build_by_difficulty",
    "build_by_length",
    "build_rhyme_groups",
    "build_valid_words",
    "build_phonetic_lookup",
    "build_definition_lookup",
]
