import random
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wordplay.core import DictionaryStore, PhoneticRecord, WordRecord
from wordplay.core.records import DefinitionRecord


WORDS = [
    "cat", "hat", "bat", "a", "houses", "crane", "slate", "eagle",
    "allee", "speed", "erase", "stare", "tears", "zygon", "abbey", "eerie",
    "lemon", "melon", "extraordinary",
]

PHONETIC_LINES = [
    ("CAT", "K AE1 T"),
    ("HAT", "HH AE1 T"),
    ("BAT", "B AE1 T"),
    ("MAT", "M AE1 T"),
    ("LEMON", "L EH1 M AH0 N"),
    ("MELON", "M EH1 L AH0 N"),
    ("A", "AH0"),
]


class SequenceRandom(random.Random):
    """Random source whose ``choice`` always returns the first candidate."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def word_records():
    return [WordRecord.from_word(word) for word in WORDS]


@pytest.fixture
def phonetic_records():
    return [
        PhoneticRecord.from_transcription(word.lower(), phonemes)
        for word, phonemes in PHONETIC_LINES
    ]


@pytest.fixture
def definition_records():
    return [
        DefinitionRecord(
            word="cat",
            definitions=("A small domesticated carnivore.",),
            part_of_speech="n.",
            pronunciation="Cat",
        ),
        DefinitionRecord(word="hat", definitions=("A covering for the head.",)),
    ]


@pytest.fixture
def store(word_records, phonetic_records, definition_records):
    return DictionaryStore.from_records(
        word_records,
        phonetic_records,
        definition_records,
        rng=random.Random(1234),
    )


@pytest.fixture
def corpus_dir(tmp_path):
    """A dictionaries directory holding three tiny corpora."""

    directory = tmp_path / "dictionaries"
    directory.mkdir()
    (directory / "words_alpha.txt").write_text(
        "cat\nhat\n\nbat\nhouses\nA\n", encoding="utf-8"
    )
    (directory / "cmudict-0.7b").write_text(
        ";;; test dictionary\n"
        "CAT  K AE1 T\n"
        "HAT  HH AE1 T\n"
        "BAT  B AE1 T\n"
        "BAT(1)  B AE1 T\n"
        "!EXCLAMATION-POINT  EH2 K S K L AH0 M EY1 SH AH0 N P OY2 N T\n"
        "BROKENLINE\n",
        encoding="utf-8",
    )
    header = ["Project Gutenberg header line"] * 27
    entries = [
        "CAT",
        "Cat, n.",
        "",
        "Defn: A small domesticated carnivore.",
        "",
        "HAT",
        "Hat, n.",
        "",
        "1. A covering for the head. [Obs.]",
        "",
    ]
    (directory / "WebstersEnglishDictionary.txt").write_text(
        "\n".join(header + entries) + "\n", encoding="utf-8"
    )
    return directory


@pytest.fixture
def first_choice_rng():
    return SequenceRandom(0)
