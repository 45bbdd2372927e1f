"""Application wiring for the dictionary build pipeline."""

from __future__ import annotations

import random
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional

from wordplay.config import CorpusPaths
from wordplay.core import (
    CMUDictParser,
    DictionaryIndices,
    DictionaryStore,
    IndexBuilder,
    ParseResult,
    WebsterDefinitionParser,
    WordListParser,
)
from wordplay.utils.observability import get_logger, record_exception, start_span
from wordplay.utils.telemetry import StructuredTelemetry

from wordplay.app.data.index_files import IndexFileRepository


class DictionaryPipeline:
    """High-level facade: parse the corpora, build indices, persist and load them."""

    def __init__(
        self,
        paths: CorpusPaths,
        *,
        telemetry: Optional[StructuredTelemetry] = None,
        word_parser: Optional[WordListParser] = None,
        phonetic_parser: Optional[CMUDictParser] = None,
        definition_parser: Optional[WebsterDefinitionParser] = None,
        builder: Optional[IndexBuilder] = None,
        repository: Optional[IndexFileRepository] = None,
    ) -> None:
        self.paths = paths
        self.telemetry = telemetry or StructuredTelemetry()
        self.word_parser = word_parser or WordListParser()
        self.phonetic_parser = phonetic_parser or CMUDictParser()
        self.definition_parser = definition_parser or WebsterDefinitionParser()
        self.builder = builder or IndexBuilder(telemetry=self.telemetry)
        self.repository = repository or IndexFileRepository(paths.output_dir)
        self.parse_results: Dict[str, ParseResult[Any]] = {}
        self._logger = get_logger(__name__).bind(component="dictionary_pipeline")
        self._logger.info(
            "Dictionary pipeline configured",
            context={
                "word_list": str(paths.word_list),
                "phonetics": str(paths.phonetics),
                "definitions": str(paths.definitions),
                "output_dir": str(paths.output_dir),
            },
        )

    # Corpus parsing --------------------------------------------------------
    def _parse_corpus(self, name: str, parse: Callable[[], ParseResult[Any]]) -> ParseResult[Any]:
        with start_span(f"wordplay.parse.{name}", {"corpus": name}) as span:
            try:
                with self.telemetry.timer(f"parse.{name}"):
                    result = parse()
            except Exception as exc:
                record_exception(span, exc)
                self._logger.error(
                    "Corpus parsing failed",
                    context={"corpus": name, "error": str(exc)},
                )
                raise
        self.telemetry.increment(f"records.{name}", len(result.records))
        return result

    def parse_words(self) -> ParseResult[Any]:
        return self._parse_corpus(
            "word_list", lambda: self.word_parser.parse(self.paths.word_list)
        )

    def parse_phonetics(self) -> ParseResult[Any]:
        return self._parse_corpus(
            "phonetics", lambda: self.phonetic_parser.parse(self.paths.phonetics)
        )

    def parse_definitions(self) -> ParseResult[Any]:
        if not self.paths.definitions.is_file():
            self._logger.warning(
                "Definitions corpus not found, skipping definitions",
                context={"path": str(self.paths.definitions)},
            )
            return ParseResult(records=[], source=str(self.paths.definitions))
        return self._parse_corpus(
            "definitions", lambda: self.definition_parser.parse(self.paths.definitions)
        )

    # Public API ------------------------------------------------------------
    def process_all(self, *, parallel: bool = False) -> DictionaryIndices:
        """Parse every corpus and build the indices.

        With ``parallel`` the three corpora are parsed on worker threads; they
        share no state, so the result is the same either way.
        """

        self.telemetry.start_trace("dictionary_build")
        self.telemetry.annotate("parallel", parallel)

        with start_span("wordplay.process_all", {"parallel": parallel}):
            steps = {
                "word_list": self.parse_words,
                "phonetics": self.parse_phonetics,
                "definitions": self.parse_definitions,
            }
            if parallel:
                with ThreadPoolExecutor(max_workers=len(steps)) as executor:
                    futures = {name: executor.submit(step) for name, step in steps.items()}
                    results = {name: future.result() for name, future in futures.items()}
            else:
                results = {name: step() for name, step in steps.items()}

            self.parse_results = results
            with self.telemetry.timer("build"):
                indices = self.builder.build(
                    results["word_list"].records,
                    results["phonetics"].records,
                    results["definitions"].records,
                )

        self._logger.info(
            "Dictionary processing complete",
            context={name: repr(result) for name, result in results.items()},
        )
        return indices

    def write_outputs(self, indices: DictionaryIndices) -> List[Any]:
        with self.telemetry.timer("write"):
            return self.repository.write(indices)

    def load_store(self, *, rng: Optional[random.Random] = None) -> DictionaryStore:
        """Load the persisted indices into a ready :class:`DictionaryStore`."""

        with self.telemetry.timer("load"):
            indices = self.repository.read()
        return DictionaryStore(indices, rng=rng)

    def run(self, *, parallel: bool = False) -> DictionaryStore:
        """Process, persist and return a store over the freshly built indices."""

        indices = self.process_all(parallel=parallel)
        self.write_outputs(indices)
        return DictionaryStore(indices)


__all__ = ["DictionaryPipeline"]
