"""Command-line interface for pkgdeps."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pkgdeps.config import FORMATS, load_config, parse_name_list
from pkgdeps.errors import InputUnavailableError, OutputUnwritableError
from pkgdeps.pipeline import run

logger = logging.getLogger("pkgdeps")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pkgdeps",
        description="Summarize Java class-level dependencies (JSONL) as a "
        "base-package Markdown report.",
    )
    parser.add_argument(
        "input",
        help="Path to the JSONL dependency file ('-' for stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: package-dependencies.md)",
    )
    parser.add_argument(
        "-l",
        "--libraries",
        default=None,
        help="Comma-separated library keywords to count "
        "(default: struts,commons,log4j,cryptix)",
    )
    parser.add_argument(
        "--no-libraries",
        action="store_true",
        help="Disable library usage counting",
    )
    parser.add_argument(
        "--two-segment-roots",
        default=None,
        help="Comma-separated top-level names whose base package is two "
        "segments deep (default: java,javax,org,net)",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: markdown)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    logger.setLevel(logging.DEBUG if args.verbose else logging.INFO)

    config = load_config()
    if args.output is not None:
        config.output = args.output
    if args.libraries is not None:
        config.libraries = parse_name_list(args.libraries)
    if args.no_libraries:
        config.libraries = []
    if args.two_segment_roots is not None:
        config.two_segment_roots = parse_name_list(args.two_segment_roots)
    if args.format is not None:
        config.format = args.format

    try:
        run(args.input, config)
    except (InputUnavailableError, OutputUnwritableError) as e:
        logger.error("Error: %s", e)
        sys.exit(1)
