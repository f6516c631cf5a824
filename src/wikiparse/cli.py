"""Command-line entry point.

Usage::

    wikiparse xmlInput/WikiParseTestFile.xml
    wikiparse export.xml --output-dir out --document categories --document text
    python -m wikiparse.cli export.xml --workers 4 --verbose
    wikiparse export.xml --tagger-input
    wikiparse export.xml --tagger-input tagger-in
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from .config import ParserConfig
from .documents import DocumentKind, write_documents
from .engine import ExtractionEngine
from .errors import WikiParseError
from .loader import load_pages
from .tagger_input import write_tagger_inputs


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikiparse",
        description=(
            "Extract categories, citations, anchors and plain text from a "
            "Special:Export XML file"
        ),
    )
    parser.add_argument("input", type=Path, help="Special:Export XML file to parse")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the output documents (default: from config, xmlOutput)",
    )
    parser.add_argument(
        "--document",
        action="append",
        type=DocumentKind.parse,
        default=None,
        metavar="KIND",
        help=(
            "Document to write; repeat for several "
            f"({', '.join(k.value for k in DocumentKind)}; default: all of them)"
        ),
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Threads used to extract pages (default: from config, 1)",
    )
    parser.add_argument(
        "--max-capture",
        type=_positive_int,
        default=None,
        help="Abandon [[...]]/{{...}} captures longer than this (default: no limit)",
    )
    parser.add_argument(
        "--tagger-input",
        type=Path,
        nargs="?",
        const="",
        default=None,
        metavar="DIR",
        help=(
            "Also write one-token-per-line tagger input files for each document "
            "(default DIR: from config, POSTaggerInput)"
        ),
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-page extraction details to stderr",
    )
    return parser


def run(args: argparse.Namespace, config: ParserConfig | None = None) -> int:
    """Load, extract and write documents, then optional tagger input.

    Returns the process exit status.
    """
    config = config or ParserConfig()

    output_dir = args.output_dir or config.output_dir
    workers = args.workers or config.workers
    max_capture = args.max_capture if args.max_capture is not None else config.max_capture

    try:
        pages = load_pages(args.input)
        engine = ExtractionEngine(max_capture=max_capture, workers=workers)
        extracted = engine.extract_many(pages)
        written = write_documents(extracted, output_dir, config.filenames, kinds=args.document)
        tagger_files = {}
        if args.tagger_input is not None:
            # A bare --tagger-input leaves the empty const, so the config dir is used.
            tagger_dir = args.tagger_input or config.tagger_dir
            tagger_files = write_tagger_inputs(written, tagger_dir, config.tagger_filenames)
    except WikiParseError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    for path in [*written.values(), *tagger_files.values()]:
        print(f"Saved: {path.resolve()}")
    print(f"Parsed {len(extracted)} page(s) into {len(written)} document(s)")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
