"""CLI entrypoint for the tcalint scanner."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from tcalint import __version__
from tcalint.cli.handlers import (
    handle_composition,
    handle_graph,
    handle_recommend,
    handle_testability,
    handle_validate_config,
    preflight_errors,
)
from tcalint.constants.branding import CLI_DESCRIPTION
from tcalint.constants.reporting import EXIT_CONFIG_ERROR
from tcalint.exceptions import ConfigError

_HANDLERS: dict[str, Callable[[argparse.Namespace], int]] = {
    "composition": handle_composition,
    "testability": handle_testability,
    "graph": handle_graph,
    "recommend": handle_recommend,
}


def _score_value(raw: str) -> int:
    value = int(raw)
    if not 0 <= value <= 100:
        raise argparse.ArgumentTypeError(f"must be between 0 and 100, got {value}")
    return value


def _scan_options() -> argparse.ArgumentParser:
    """Options shared by every scan command."""
    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument("path", type=Path, nargs="?", default=Path("."), help="Directory to scan (default: .)")
    shared.add_argument("--json", action="store_true", help="Print the structured JSON report instead of text")
    shared.add_argument("-c", "--config", type=Path, help="Explicit config file")
    shared.add_argument("-o", "--output", type=Path, default=None, help="Also write the JSON report to this file")
    shared.add_argument("--no-color", action="store_true", help="Disable colored output")
    shared.add_argument("-v", "--verbose", action="store_true", help="Log progress and diagnostics to stderr")
    return shared


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="tcalint",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)
    shared = _scan_options()

    composition = subparsers.add_parser(
        "composition",
        parents=[shared],
        help="Check reducers against composition rules 1.1-1.5",
    )
    composition.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any HIGH violation is found",
    )

    testability = subparsers.add_parser("testability", parents=[shared], help="Score reducer testability (0-100)")
    testability.add_argument(
        "--threshold",
        type=_score_value,
        default=None,
        help="Minimum passing score (default: pass_threshold from config, 75)",
    )

    graph = subparsers.add_parser("graph", parents=[shared], help="Estimate state coupling per reducer")
    graph.add_argument("--detailed", action="store_true", help="Include state property names")

    recommend = subparsers.add_parser("recommend", parents=[shared], help="Suggest prioritised feature extractions")
    recommend.add_argument(
        "--effort-only",
        action="store_true",
        help="Leave priority 3 clarifications out of the plan and effort totals",
    )

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scanning")
    validate.add_argument("path", type=Path, nargs="?", default=Path("."), help="Directory holding tcalint.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    problems = preflight_errors(args)
    if problems:
        print(f"Configuration error:\n{problems}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        return handler(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
