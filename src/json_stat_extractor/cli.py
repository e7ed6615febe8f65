"""Command-line entry point: print size statistics of a JSON document."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from json_stat_extractor import __version__
from json_stat_extractor.api import extract_stats_from_source
from json_stat_extractor.config import DEFAULT_MAX_DEPTH, ExtractorConfig
from json_stat_extractor.errors import JsonStatError
from json_stat_extractor.render import dumps

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-stat-extractor",
        description=(
            "Report serialized size statistics for every value, object and "
            "array of a JSON document."
        ),
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Path to a JSON file (or omit / '-' to read from stdin)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Deepest nesting level accepted (default: {DEFAULT_MAX_DEPTH})",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--compact", action="store_true", help="Emit compact JSON output."
    )
    output.add_argument(
        "--indent", type=int, default=2, help="Indentation width (default: 2)"
    )
    parser.add_argument(
        "--last-key-wins",
        action="store_true",
        help="Collapse repeated object member names, keeping the last value.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v for info, -vv for debug).",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ExtractorConfig(
            max_depth=args.max_depth,
            keep_duplicate_keys=not args.last_key_wins,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        stat = extract_stats_from_source(args.file, config=config)
    except OSError as exc:
        logger.error("cannot read %s: %s", args.file, exc)
        return 1
    except json.JSONDecodeError as exc:
        logger.error("invalid JSON: %s", exc)
        return 1
    except JsonStatError as exc:
        logger.error("%s", exc)
        return 1

    print(dumps(stat, indent=None if args.compact else args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
