"""Parser for the Project Gutenberg Webster's dictionary text.

The file is prose: a fixed introduction, then entries shaped like::

    ABANDON
    A*ban"don, v. t.

    Defn: To give up wholly.

    1. To cast away. [Obs.]
    2. To resign; to surrender.

Headwords are upper-case lines. The line after a headword may carry the
pronunciation and part of speech, and definition paragraphs start with
``Defn:`` or a numbered marker. Formatting is inconsistent throughout, so
malformed regions are skipped by scanning forward to the next headword.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..config import WEBSTER_HEADER_LINES
from ..utils.observability import get_logger
from .parse_result import ParseResult, read_corpus_lines
from .records import DefinitionRecord

DEFN_MARKER = "Defn:"

_HEADWORD_PATTERN = re.compile(r"[A-Z '\-]+")
_NUMBERED_MARKER = re.compile(r"^\d+\.")
_NUMBERED_PREFIX = re.compile(r"^\d+\.\s*")
_PRONUNCIATION_PATTERN = re.compile(r"([^,]+),\s*([^.]+)\.")
_WHITESPACE = re.compile(r"\s+")
_BRACKETED = re.compile(r"\[.*?\]")
_OBSOLETE = "[Obs.]"


class ParserState(Enum):
    SEEK_HEADWORD = "seek_headword"
    SEEK_PRONUNCIATION = "seek_pronunciation"
    SEEK_DEFINITION_START = "seek_definition_start"
    IN_DEFINITION_BODY = "in_definition_body"


def is_headword(line: str) -> bool:
    """True for a stripped line made only of ``A-Z``, space, ``'`` and ``-``."""

    return bool(line) and _HEADWORD_PATTERN.fullmatch(line) is not None


def is_definition_marker(line: str) -> bool:
    return line.startswith(DEFN_MARKER) or _NUMBERED_MARKER.match(line) is not None


def strip_definition_marker(line: str) -> str:
    if line.startswith(DEFN_MARKER):
        return line[len(DEFN_MARKER):].strip()
    return _NUMBERED_PREFIX.sub("", line).strip()


def clean_definition_text(parts: Sequence[str]) -> str:
    """Join paragraph lines and drop editorial bracket notes."""

    text = _WHITESPACE.sub(" ", " ".join(parts).strip())
    text = text.replace(_OBSOLETE, "(Obsolete)")
    text = _BRACKETED.sub("", text)
    return text.strip()


@dataclass(frozen=True)
class EntryScan:
    """Outcome of scanning one entry: the record (if any) and where to resume."""

    entry: Optional[DefinitionRecord]
    next_index: int
    found_headword: bool = True


def scan_entry(lines: Sequence[str], start: int) -> EntryScan:
    """Scan forward from ``start`` for one headword entry.

    Returns the parsed entry, or ``None`` when the headword had no definition
    paragraphs, together with the index of the next unconsumed line.
    """

    state = ParserState.SEEK_HEADWORD
    index = start
    total = len(lines)

    word = ""
    pronunciation: Optional[str] = None
    part_of_speech: Optional[str] = None
    definitions: List[str] = []
    paragraph: List[str] = []

    while True:
        if state is ParserState.SEEK_HEADWORD:
            while index < total and not is_headword(lines[index].strip()):
                index += 1
            if index >= total:
                return EntryScan(entry=None, next_index=total, found_headword=False)
            word = lines[index].strip().lower()
            index += 1
            state = ParserState.SEEK_PRONUNCIATION

        elif state is ParserState.SEEK_PRONUNCIATION:
            if index < total:
                line = lines[index].strip()
                if line and not is_definition_marker(line):
                    match = _PRONUNCIATION_PATTERN.search(line)
                    if match:
                        pronunciation = match.group(1).strip()
                        part_of_speech = match.group(2).strip()
                        index += 1
            while index < total and not lines[index].strip():
                index += 1
            state = ParserState.SEEK_DEFINITION_START

        elif state is ParserState.SEEK_DEFINITION_START:
            if index >= total or is_headword(lines[index].strip()):
                break
            line = lines[index].strip()
            if is_definition_marker(line):
                first = strip_definition_marker(line)
                paragraph = [first] if first else []
                index += 1
                state = ParserState.IN_DEFINITION_BODY
            else:
                index += 1

        elif state is ParserState.IN_DEFINITION_BODY:
            line = lines[index].strip() if index < total else None
            if line is None or is_definition_marker(line) or is_headword(line):
                ended = True
            elif not line:
                index += 1
                ended = True
            else:
                paragraph.append(line)
                index += 1
                ended = False

            if ended:
                text = clean_definition_text(paragraph)
                if text:
                    definitions.append(text)
                paragraph = []
                state = ParserState.SEEK_DEFINITION_START

    if not definitions:
        return EntryScan(entry=None, next_index=index)

    return EntryScan(
        entry=DefinitionRecord(
            word=word,
            definitions=tuple(definitions),
            part_of_speech=part_of_speech or None,
            pronunciation=pronunciation or None,
        ),
        next_index=index,
    )


class WebsterDefinitionParser:
    """Parses the whole dictionary, folding repeated headwords together.

    The first entry for a headword keeps its position, pronunciation and part
    of speech; definitions from later entries for the same headword are
    appended in parse order.
    """

    corpus_name = "definitions"

    def __init__(self, header_lines: int = WEBSTER_HEADER_LINES) -> None:
        self.header_lines = max(0, int(header_lines))
        self._logger = get_logger(__name__).bind(component="webster_parser")

    def parse_lines(
        self, lines: Sequence[str], *, source: str = "<memory>"
    ) -> ParseResult[DefinitionRecord]:
        lines = list(lines)
        result: ParseResult[DefinitionRecord] = ParseResult(
            records=[], source=source, total_lines=len(lines)
        )
        result.skipped = min(self.header_lines, len(lines))

        folded: Dict[str, DefinitionRecord] = {}
        index = self.header_lines
        while index < len(lines):
            scan = scan_entry(lines, index)
            if scan.entry is not None:
                result.parsed += 1
                existing = folded.get(scan.entry.word)
                if existing is None:
                    folded[scan.entry.word] = scan.entry
                else:
                    folded[scan.entry.word] = existing.extended(scan.entry.definitions)
            elif scan.found_headword:
                result.malformed += 1
            index = scan.next_index

        result.records = list(folded.values())
        result.publish(self.corpus_name)
        self._logger.info(
            "Definitions parsed",
            context={
                "source": source,
                "entries": result.parsed,
                "headwords": len(result.records),
                "empty_entries": result.malformed,
            },
        )
        return result

    def parse(self, path: Path | str) -> ParseResult[DefinitionRecord]:
        return self.parse_lines(read_corpus_lines(path), source=str(path))


__all__ = [
    "ParserState",
    "EntryScan",
    "WebsterDefinitionParser",
    "scan_entry",
    "is_headword",
    "is_definition_marker",
    "strip_definition_marker",
    "clean_definition_text",
]
