"""Parser for flat one-word-per-line corpora such as ``words_alpha.txt``."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..utils.observability import get_logger
from .parse_result import ParseResult, read_corpus_lines
from .records import WordRecord


class WordListParser:
    """Turns each non-blank line into a :class:`WordRecord`."""

    corpus_name = "word_list"

    def __init__(self) -> None:
        self._logger = get_logger(__name__).bind(component="wordlist_parser")

    def parse_lines(
        self, lines: Iterable[str], *, source: str = "<memory>"
    ) -> ParseResult[WordRecord]:
        result: ParseResult[WordRecord] = ParseResult(records=[], source=source)

        for line in lines:
            result.total_lines += 1
            token = line.strip()
            if not token:
                result.skipped += 1
                continue
            result.records.append(WordRecord.from_word(token))
            result.parsed += 1

        result.publish(self.corpus_name)
        self._logger.info(
            "Word list parsed",
            context={
                "source": source,
                "words": result.parsed,
                "blank_lines": result.skipped,
            },
        )
        return result

    def parse(self, path: Path | str) -> ParseResult[WordRecord]:
        return self.parse_lines(read_corpus_lines(path), source=str(path))


__all__ = ["WordListParser"]
