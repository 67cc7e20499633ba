"""CLI entrypoints for tsdocgen commands."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from .errors import DocsError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root containing package.json (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tsdocgen",
        description="Generate a documentation site from TypeScript JSDoc comments.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Validate sources, type-check examples and write the markdown site.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_path_argument(build_parser)

    check_parser = subparsers.add_parser(
        "check",
        help="Validate sources and type-check examples without writing the site.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_path_argument(check_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tsdocgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()

    if args.command == "build":
        runner = orchestrator.build
    elif args.command == "check":
        runner = orchestrator.check
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    try:
        modules = asyncio.run(runner(args.path))
    except DocsError as exc:
        parser.exit(1, f"{exc}\n")
    print(f"Documented {len(modules)} modules")


if __name__ == "__main__":
    main(sys.argv[1:])
