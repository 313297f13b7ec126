"""CLI entrypoints for glossary generation and per-paragraph glossary fill."""

from __future__ import annotations

import argparse
import io
from pathlib import Path
import sys
from typing import Callable, NoReturn, Sequence

from glossary_pipeline.config import RunOptions, default_glossary_path, default_source_path
from glossary_pipeline.glossary.repository import GlossaryRepository
from glossary_pipeline.io.json_io import read_json, write_json
from glossary_pipeline.logging_config import setup_logging
from glossary_pipeline.pipeline import run_fill, run_generate
from glossary_pipeline.reporting.log_lines import emit, fill_log_lines, generate_log_lines

USAGE_EXIT_CODE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def _build_parser(
    prog: str,
    description: str,
    source_name: str,
    source_help: str,
    default_source: Callable[[], Path],
) -> argparse.ArgumentParser:
    """Construct a parser shared by both workflows.

    Args:
        prog: Program name shown in usage.
        description: Parser description.
        source_name: Metavar of the optional second positional argument.
        source_help: Help text for that argument.
        default_source: Callable giving the default path for that argument.

    Returns:
        Configured parser.
    """

    parser = _ArgumentParser(prog=prog, description=description)
    parser.add_argument("input", type=Path, metavar="INPUT", help="Annotated input JSON document.")
    parser.add_argument(
        "source",
        type=Path,
        nargs="?",
        default=None,
        metavar=source_name,
        help=f"{source_help} (default: {default_source()}).",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Write nothing to stderr when every gloss is matched; omit per-gloss warnings.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Always write summary lines to stderr.",
    )
    parser.add_argument(
        "--no-log-symbols",
        dest="log_symbols",
        action="store_false",
        help="Leave pure punctuation/symbol glosses out of unmatched statistics.",
    )
    parser.set_defaults(default_source=default_source)
    return parser


def build_generate_parser() -> argparse.ArgumentParser:
    return _build_parser(
        prog="generate-glossary",
        description="Build a global glossary from an annotated JSON document.",
        source_name="SOURCE",
        source_help="Reference gloss conventions JSON with a 'glosses' array",
        default_source=default_source_path,
    )


def build_fill_parser() -> argparse.ArgumentParser:
    return _build_parser(
        prog="fill-glossary",
        description="Fill each paragraph's glossary-abbreviations from a prebuilt glossary.",
        source_name="GLOSSARY",
        source_help="Prebuilt glossary JSON array from generate-glossary",
        default_source=default_glossary_path,
    )


def _parse(parser: argparse.ArgumentParser, argv: Sequence[str] | None) -> argparse.Namespace:
    args = parser.parse_intermixed_args(argv)
    if args.source is None:
        args.source = args.default_source()
    return args


def _use_utf8_streams() -> None:
    """Write JSON and log lines as UTF-8 whatever the locale encoding is."""

    for stream in (sys.stdout, sys.stderr):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(encoding="utf-8")


def _options(args: argparse.Namespace) -> RunOptions:
    return RunOptions(quiet=args.quiet, verbose=args.verbose, log_symbols=args.log_symbols)


def generate_main(argv: Sequence[str] | None = None) -> int:
    """Run glossary generation: glossary JSON to stdout, summary to stderr.

    Returns:
        Zero exit status on success.
    """

    args = _parse(build_generate_parser(), argv)
    if not args.input.is_file():
        raise SystemExit(f"Error: input not found: {args.input}")
    if not args.source.is_file():
        raise SystemExit(f"Error: source not found: {args.source}")

    _use_utf8_streams()
    logger = setup_logging()
    options = _options(args)

    document = read_json(args.input)
    repository = GlossaryRepository(args.source)
    result = run_generate(document, repository.glossary, include_symbols=options.log_symbols)

    write_json([record.to_dict() for record in result.glossary], sys.stdout)
    emit(generate_log_lines(result.report, options), logger)
    return 0


def fill_main(argv: Sequence[str] | None = None) -> int:
    """Run glossary fill: updated document to stdout, paragraph summaries to stderr.

    Returns:
        Zero exit status on success.
    """

    args = _parse(build_fill_parser(), argv)
    if not args.input.is_file():
        raise SystemExit(f"Error: input not found: {args.input}")
    if not args.source.is_file():
        raise SystemExit(f"Error: glossary source not found: {args.source}")

    _use_utf8_streams()
    logger = setup_logging()
    options = _options(args)

    document = read_json(args.input)
    repository = GlossaryRepository(args.source)
    result = run_fill(document, repository.glossary, include_symbols=options.log_symbols)

    write_json(result.document, sys.stdout)
    emit(fill_log_lines(result.reports, options), logger)
    return 0
