"""JSON file storage for pre-built dictionary index documents."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List

from wordplay.core.documents import (
    OPTIONAL_DOCUMENTS,
    REQUIRED_DOCUMENTS,
    indices_from_documents,
    indices_to_documents,
)
from wordplay.core.errors import SourceUnreadableError
from wordplay.core.index_builder import DictionaryIndices
from wordplay.utils.observability import get_logger


class IndexFileRepository:
    """Reads and writes one ``<document>.json`` file per index document."""

    def __init__(self, directory: Path | str, *, indent: int | None = 2) -> None:
        self.directory = Path(directory)
        self.indent = indent
        self._logger = get_logger(__name__).bind(
            component="index_files",
            directory=str(self.directory),
        )

    def path_for(self, document: str) -> Path:
        return self.directory / f"{document}.json"

    def exists(self) -> bool:
        return all(self.path_for(name).is_file() for name in REQUIRED_DOCUMENTS)

    def write(self, indices: DictionaryIndices, *, include_definitions: bool = True) -> List[Path]:
        os.makedirs(self.directory, exist_ok=True)
        documents = indices_to_documents(indices, include_definitions=include_definitions)

        written: List[Path] = []
        for name, document in documents.items():
            path = self.path_for(name)
            with path.open("w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=self.indent, ensure_ascii=False)
                handle.write("\n")
            written.append(path)

        self._logger.info(
            "Index documents written",
            context={"files": [path.name for path in written]},
        )
        return written

    def _load(self, name: str) -> Any:
        path = self.path_for(name)
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except OSError as exc:
            raise SourceUnreadableError(str(path), exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise SourceUnreadableError(str(path), f"invalid UTF-8: {exc.reason}") from exc
        except json.JSONDecodeError as exc:
            raise SourceUnreadableError(str(path), f"invalid JSON: {exc.msg}") from exc

    def read_documents(self) -> Dict[str, Any]:
        documents = {name: self._load(name) for name in REQUIRED_DOCUMENTS}
        for name in OPTIONAL_DOCUMENTS:
            if self.path_for(name).is_file():
                documents[name] = self._load(name)
            else:
                self._logger.info("Optional index document absent", context={"document": name})
        return documents

    def read(self) -> DictionaryIndices:
        return indices_from_documents(self.read_documents())


__all__ = ["IndexFileRepository"]
