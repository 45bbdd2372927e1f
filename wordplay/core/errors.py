"""Exceptions raised by the corpus pipeline and the dictionary store."""

from __future__ import annotations


class WordplayError(Exception):
    """Base class for all wordplay errors."""


class SourceUnreadableError(WordplayError):
    """A corpus file or stream could not be read."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Corpus source unreadable: {source} ({reason})")
        self.source = source
        self.reason = reason


class NotLoadedError(WordplayError, RuntimeError):
    """A store query ran before the indices were constructed."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Dictionary not loaded; cannot run {operation}()")
        self.operation = operation


class NoCandidateWordsError(WordplayError):
    """No word in the store satisfies the requested game constraints."""


__all__ = [
    "WordplayError",
    "SourceUnreadableError",
    "NotLoadedError",
    "NoCandidateWordsError",
]
