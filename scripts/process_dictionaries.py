#!/usr/bin/env python3
"""CLI helper that turns the raw corpora into the JSON index documents."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, replace
from pathlib import Path
from typing import Sequence

from wordplay.app.app import DictionaryPipeline
from wordplay.config import CorpusPaths
from wordplay.core import DictionaryStore, SourceUnreadableError
from wordplay.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Parse the word list, CMU pronouncing dictionary and Webster's "
            "dictionary, then write the pre-built index documents."
        )
    )
    parser.add_argument(
        "--dictionaries-dir",
        help=(
            "Directory holding words_alpha.txt, cmudict-0.7b and "
            "WebstersEnglishDictionary.txt (defaults to WORDPLAY_DICTIONARIES_DIR "
            "or ./dictionaries)."
        ),
    )
    parser.add_argument(
        "--output-dir",
        help="Where to write the JSON documents (defaults to WORDPLAY_OUTPUT_DIR or ./data).",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Parse the corpora one after another instead of on worker threads.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level override (defaults to WORDPLAY_LOG_LEVEL or INFO).",
    )
    return parser


def _resolve_paths(namespace: argparse.Namespace) -> CorpusPaths:
    paths = CorpusPaths.from_env()
    if namespace.dictionaries_dir:
        paths = CorpusPaths.from_directory(namespace.dictionaries_dir, paths.output_dir)
    if namespace.output_dir:
        paths = replace(paths, output_dir=Path(namespace.output_dir))
    return paths


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    pipeline = DictionaryPipeline(_resolve_paths(args))

    try:
        indices = pipeline.process_all(parallel=not args.sequential)
    except SourceUnreadableError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    pipeline.write_outputs(indices)
    stats = DictionaryStore(indices).stats()
    json.dump(asdict(stats), sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
