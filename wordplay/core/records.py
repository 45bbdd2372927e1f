"""Normalized records produced by the corpus parsers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple


class Difficulty(str, Enum):
    """Difficulty bucket derived purely from word length."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def from_length(cls, length: int) -> "Difficulty":
        if length <= 4:
            return cls.EASY
        if length <= 7:
            return cls.MEDIUM
        return cls.HARD

    @classmethod
    def coerce(cls, value: "Difficulty | str") -> "Difficulty":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True)
class WordRecord:
    """A word-list entry with its length and difficulty bucket."""

    word: str
    length: int
    difficulty: Difficulty

    @classmethod
    def from_word(cls, raw: str) -> "WordRecord":
        word = raw.strip().lower()
        return cls(word=word, length=len(word), difficulty=Difficulty.from_length(len(word)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "length": self.length,
            "difficulty": self.difficulty.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordRecord":
        return cls.from_word(str(data["word"]))


@dataclass(frozen=True)
class PhoneticRecord:
    """One pronunciation of a word from the phonetic corpus."""

    word: str
    phonetic: str
    sounds: Tuple[str, ...]

    @classmethod
    def from_transcription(cls, word: str, transcription: str) -> "PhoneticRecord":
        sounds = tuple(transcription.split())
        return cls(word=word, phonetic=" ".join(sounds), sounds=sounds)

    @property
    def rhyme_key(self) -> Optional[str]:
        """The last two phoneme tokens joined by a space."""

        if len(self.sounds) < 2:
            return None
        return " ".join(self.sounds[-2:])

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "phonetic": self.phonetic, "sounds": list(self.sounds)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhoneticRecord":
        sounds = tuple(str(sound) for sound in data.get("sounds") or ())
        phonetic = str(data.get("phonetic") or " ".join(sounds))
        return cls(word=str(data["word"]), phonetic=phonetic, sounds=sounds or tuple(phonetic.split()))


@dataclass(frozen=True)
class DefinitionRecord:
    """Definitions collected for a single headword."""

    word: str
    definitions: Tuple[str, ...]
    part_of_speech: Optional[str] = None
    pronunciation: Optional[str] = None

    def extended(self, definitions: Iterable[str]) -> "DefinitionRecord":
        """Return a copy with ``definitions`` appended in order."""

        return DefinitionRecord(
            word=self.word,
            definitions=self.definitions + tuple(definitions),
            part_of_speech=self.part_of_speech,
            pronunciation=self.pronunciation,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"word": self.word, "definitions": list(self.definitions)}
        if self.part_of_speech is not None:
            payload["partOfSpeech"] = self.part_of_speech
        if self.pronunciation is not None:
            payload["pronunciation"] = self.pronunciation
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DefinitionRecord":
        return cls(
            word=str(data["word"]),
            definitions=tuple(str(text) for text in data.get("definitions") or ()),
            part_of_speech=data.get("partOfSpeech"),
            pronunciation=data.get("pronunciation"),
        )


RhymeGroups = Dict[str, Tuple[str, ...]]

__all__ = [
    "Difficulty",
    "WordRecord",
    "PhoneticRecord",
    "DefinitionRecord",
    "RhymeGroups",
]
