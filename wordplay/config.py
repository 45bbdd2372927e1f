"""Corpus locations and pipeline constants.

Paths resolve from environment variables first and fall back to the
conventional ``dictionaries/`` and ``data/`` directories under ``base_dir``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

WEBSTER_HEADER_LINES = 27
RHYME_GROUP_MIN_WORDS = 3

DICTIONARIES_DIR_ENV = "WORDPLAY_DICTIONARIES_DIR"
WORD_LIST_ENV = "WORDPLAY_WORD_LIST"
CMUDICT_ENV = "WORDPLAY_CMUDICT"
WEBSTER_ENV = "WORDPLAY_WEBSTER"
OUTPUT_DIR_ENV = "WORDPLAY_OUTPUT_DIR"

DEFAULT_WORD_LIST = "words_alpha.txt"
DEFAULT_CMUDICT = "cmudict-0.7b"
DEFAULT_WEBSTER = "WebstersEnglishDictionary.txt"


@dataclass(frozen=True)
class CorpusPaths:
    """Where the raw corpora live and where index documents are written."""

    word_list: Path
    phonetics: Path
    definitions: Path
    output_dir: Path

    @classmethod
    def from_directory(
        cls, dictionaries_dir: Path | str, output_dir: Path | str
    ) -> "CorpusPaths":
        base = Path(dictionaries_dir)
        return cls(
            word_list=base / DEFAULT_WORD_LIST,
            phonetics=base / DEFAULT_CMUDICT,
            definitions=base / DEFAULT_WEBSTER,
            output_dir=Path(output_dir),
        )

    @classmethod
    def from_env(
        cls,
        base_dir: Optional[Path | str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "CorpusPaths":
        env = os.environ if environ is None else environ
        root = Path(base_dir) if base_dir is not None else Path.cwd()

        dictionaries_dir = Path(env.get(DICTIONARIES_DIR_ENV) or root / "dictionaries")
        defaults = cls.from_directory(
            dictionaries_dir, env.get(OUTPUT_DIR_ENV) or root / "data"
        )
        return cls(
            word_list=Path(env.get(WORD_LIST_ENV) or defaults.word_list),
            phonetics=Path(env.get(CMUDICT_ENV) or defaults.phonetics),
            definitions=Path(env.get(WEBSTER_ENV) or defaults.definitions),
            output_dir=defaults.output_dir,
        )


__all__ = [
    "CorpusPaths",
    "WEBSTER_HEADER_LINES",
    "RHYME_GROUP_MIN_WORDS",
    "DICTIONARIES_DIR_ENV",
    "WORD_LIST_ENV",
    "CMUDICT_ENV",
    "WEBSTER_ENV",
    "OUTPUT_DIR_ENV",
]
