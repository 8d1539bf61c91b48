"""CLI subcommand handlers and gate evaluation."""

from __future__ import annotations

import argparse
import sys

from tcalint.analysis import build_graph_report, recommend_extractions
from tcalint.config import TcalintConfig, load_config, validate_config_file
from tcalint.constants.reporting import (
    EXIT_CONFIG_ERROR,
    EXIT_GATE_FAILED,
    EXIT_OK,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
)
from tcalint.exceptions import ConfigError
from tcalint.exceptions.validation import format_errors
from tcalint.io import render_json, write_json_atomic
from tcalint.model import ScanResult
from tcalint.reporting import (
    CompositionReporter,
    GraphReporter,
    RecommendReporter,
    TestabilityReporter,
    composition_payload,
    graph_payload,
    recommend_payload,
    testability_payload,
)
from tcalint.reporting.stdout import BaseReporter
from tcalint.scanner import scan_workspace
from tcalint.types import JsonObject, ToolName


def evaluate_exit_code(result: ScanResult, *, strict: bool = False) -> int:
    """Return 1 when the command's gate fails, 0 otherwise.

    Composition only gates in strict mode, on any high violation.
    Testability gates on the score falling below the pass threshold.
    Graph and recommend are informational and always succeed.
    """
    if result.tool == "composition":
        return EXIT_GATE_FAILED if strict and result.has_blocking else EXIT_OK
    if result.tool == "testability":
        return EXIT_OK if result.passed else EXIT_GATE_FAILED
    return EXIT_OK


def handle_composition(args: argparse.Namespace) -> int:
    result, _ = _scan(args, "composition")
    reporter = CompositionReporter(result, color=_use_color(args), strict=args.strict)
    _emit(args, composition_payload(result, strict=args.strict), reporter)
    return evaluate_exit_code(result, strict=args.strict)


def handle_testability(args: argparse.Namespace) -> int:
    result, _ = _scan(args, "testability", pass_threshold=args.threshold)
    _emit(args, testability_payload(result), TestabilityReporter(result, color=_use_color(args)))
    return evaluate_exit_code(result)


def handle_graph(args: argparse.Namespace) -> int:
    result, _ = _scan(args, "graph")
    report = build_graph_report(result)
    reporter = GraphReporter(result, report, color=_use_color(args), detailed=args.detailed)
    _emit(args, graph_payload(report, result, detailed=args.detailed), reporter)
    return evaluate_exit_code(result)


def handle_recommend(args: argparse.Namespace) -> int:
    result, config = _scan(args, "recommend")
    plan = recommend_extractions(result, config.thresholds, include_p3=not args.effort_only)
    _emit(args, recommend_payload(plan, result), RecommendReporter(result, plan, color=_use_color(args)))
    return evaluate_exit_code(result)


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.path, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    print("Configuration is valid.")
    return EXIT_OK


def preflight_errors(args: argparse.Namespace) -> str | None:
    """Return formatted config problems for a scan command, or ``None`` when clean."""
    errors = validate_config_file(args.path, args.config, config_explicit=args.config is not None)
    return format_errors(errors) if errors else None


def _scan(
    args: argparse.Namespace,
    tool: ToolName,
    *,
    pass_threshold: int | None = None,
) -> tuple[ScanResult, TcalintConfig]:
    config = load_config(args.path, args.config)
    result = scan_workspace(root=args.path, tool=tool, config=config, pass_threshold=pass_threshold)
    return result, config


def _use_color(args: argparse.Namespace) -> bool:
    return not args.no_color and sys.stdout.isatty()


def _emit(args: argparse.Namespace, payload: JsonObject, reporter: BaseReporter) -> None:
    if args.json:
        print(render_json(payload))
    else:
        print(reporter.render())
    if args.output is None:
        return
    try:
        write_json_atomic(
            path=args.output,
            payload=payload,
            temp_prefix=REPORT_TEMP_PREFIX,
            temp_suffix=REPORT_TEMP_SUFFIX,
        )
    except OSError as exc:
        raise ConfigError(f"cannot write output file {args.output}: {exc}") from exc
