"""Persistence helpers for the wordplay application layer."""

from .index_files import IndexFileRepository

__all__ = ["IndexFileRepository"]
