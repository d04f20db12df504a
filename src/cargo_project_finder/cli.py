"""Command-line entrypoint: find Cargo projects in directories recursively."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import DEFAULT_OUTPUT_NAME, ConfigError, load_settings
from .core import scan_projects
from .report import write_report
from .summary import render_table

VERSION = "0.1.0"
AUTHOR = "Ahmet Özcan"
DESCRIPTION = "Finds Cargo projects in directories recursively"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cargo-project-finder",
        description=DESCRIPTION,
        epilog=f"Author: {AUTHOR}",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        nargs="?",
        const=DEFAULT_OUTPUT_NAME,
        default=None,
        help=f"Write output to JSON file (defaults to {DEFAULT_OUTPUT_NAME})",
    )
    parser.add_argument(
        "-p",
        "--path",
        metavar="DIR",
        default=None,
        help="Directory to search (defaults to home directory)",
    )
    parser.add_argument(
        "-n",
        "--noskip",
        action="store_true",
        help="Don't skip hidden files and directories (will take some time)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_settings(args.path, noskip=args.noskip, output=args.output)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if not settings.search_path.exists():
        print(f"Search path does not exist: {settings.search_path}", file=sys.stderr)
        return 0

    result = scan_projects(settings.search_path, skip_hidden=settings.skip_hidden)
    sys.stdout.write(render_table(result.projects))

    if settings.output_path is not None:
        try:
            write_report(result, settings.output_path)
        except OSError as exc:
            print(f"ERROR: Failed to write output file: {exc}", file=sys.stderr)
            return 1
        print(f"\nOutput written to: {settings.output_path}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
