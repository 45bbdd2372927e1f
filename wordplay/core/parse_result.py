"""Shared result type and source reading for the corpus parsers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, List, TypeVar

from ..utils.observability import create_counter
from .errors import SourceUnreadableError

RecordT = TypeVar("RecordT")

CORPUS_LINES = create_counter(
    "wordplay_corpus_lines",
    "Corpus lines processed, by corpus and outcome.",
    label_names=("corpus", "outcome"),
)


@dataclass
class ParseResult(Generic[RecordT]):
    """Records parsed from one corpus plus diagnostic line counts."""

    records: List[RecordT]
    source: str
    total_lines: int = 0
    parsed: int = 0
    skipped: int = 0      # comments and blank lines
    malformed: int = 0    # lines or entries that could not be parsed
    filtered: int = 0     # parsed but rejected by word cleaning rules

    def __repr__(self) -> str:
        return (
            f"ParseResult({self.source}: {self.parsed}/{self.total_lines} parsed, "
            f"{self.skipped} skipped, {self.malformed} malformed, {self.filtered} filtered)"
        )

    def publish(self, corpus: str) -> None:
        """Export the diagnostic counts as Prometheus counters."""

        for outcome in ("parsed", "skipped", "malformed", "filtered"):
            amount = getattr(self, outcome)
            if amount:
                CORPUS_LINES.labels(corpus=corpus, outcome=outcome).inc(amount)


def read_corpus_lines(path: Path | str, *, encoding: str = "utf-8") -> List[str]:
    """Read ``path`` into a list of lines without trailing newlines.

    Undecodable bytes are replaced rather than rejected; any other failure to
    read the file raises :class:`SourceUnreadableError`.
    """

    source = Path(path)
    try:
        with source.open("r", encoding=encoding, errors="replace") as handle:
            return handle.read().splitlines()
    except OSError as exc:
        raise SourceUnreadableError(str(source), exc.strerror or str(exc)) from exc


__all__ = ["ParseResult", "read_corpus_lines", "CORPUS_LINES"]
