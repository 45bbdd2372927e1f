"""Parser for the CMU pronouncing dictionary (``cmudict-0.7b``)."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional, Tuple

from ..utils.observability import get_logger
from .parse_result import ParseResult, read_corpus_lines
from .records import PhoneticRecord

COMMENT_PREFIX = ";;;"

_WORD_VARIANT_PATTERN = re.compile(r"\(\d+\)$")
_FIELD_SEPARATOR = re.compile(r"\s{2,}")
_DISALLOWED_CHARS = re.compile(r"[^a-z'-]")
_HAS_LETTER = re.compile(r"[a-z]")

# Number of rejected lines echoed at DEBUG level per parse.
_SAMPLE_LIMIT = 5


def _strip_variant(word: str) -> str:
    return _WORD_VARIANT_PATTERN.sub("", word).lower()


def clean_headword(raw_word: str) -> Optional[str]:
    """Normalise a CMU headword, or return ``None`` when it should be dropped.

    ``READ(1)`` becomes ``read``; symbol entries such as ``!EXCLAMATION-POINT``
    keep only ``[a-z'-]`` characters, and anything shorter than two characters
    or without a letter is rejected.
    """

    word = _DISALLOWED_CHARS.sub("", _strip_variant(raw_word.strip()))
    if len(word) < 2 or not _HAS_LETTER.search(word):
        return None
    return word


def split_entry(line: str) -> Optional[Tuple[str, str]]:
    """Split a data line into its word field and phoneme field."""

    parts = _FIELD_SEPARATOR.split(line.rstrip(), maxsplit=1)
    if len(parts) < 2:
        return None
    word_field, phoneme_field = parts[0].strip(), parts[1].strip()
    if not phoneme_field:
        return None
    return word_field, phoneme_field


class CMUDictParser:
    """Turns CMU dictionary lines into :class:`PhoneticRecord` entries.

    Every pronunciation variant becomes its own record under the same
    cleaned word, in file order.
    """

    corpus_name = "phonetics"

    def __init__(self) -> None:
        self._logger = get_logger(__name__).bind(component="cmudict_parser")

    def parse_lines(
        self, lines: Iterable[str], *, source: str = "<memory>"
    ) -> ParseResult[PhoneticRecord]:
        result: ParseResult[PhoneticRecord] = ParseResult(records=[], source=source)

        for line in lines:
            result.total_lines += 1
            if line.startswith(COMMENT_PREFIX) or not line.strip():
                result.skipped += 1
                continue

            entry = split_entry(line)
            if entry is None:
                result.malformed += 1
                if result.malformed <= _SAMPLE_LIMIT:
                    self._logger.debug(
                        "Skipped unparseable line", context={"line": line[:50]}
                    )
                continue

            word_field, phoneme_field = entry
            word = clean_headword(word_field)
            if word is None:
                result.filtered += 1
                continue

            result.records.append(PhoneticRecord.from_transcription(word, phoneme_field))
            result.parsed += 1

        result.publish(self.corpus_name)
        self._logger.info(
            "Phonetic corpus parsed",
            context={
                "source": source,
                "records": result.parsed,
                "skipped": result.skipped,
                "malformed": result.malformed,
                "filtered": result.filtered,
            },
        )
        return result

    def parse(self, path: Path | str) -> ParseResult[PhoneticRecord]:
        return self.parse_lines(read_corpus_lines(path), source=str(path))


__all__ = ["CMUDictParser", "clean_headword", "split_entry", "COMMENT_PREFIX"]
