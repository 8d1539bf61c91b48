"""Tests for human-readable stdout reporters."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tcalint.analysis import build_graph_report, recommend_extractions
from tcalint.constants.reporting import ANSI_RED, ANSI_RESET
from tcalint.reporting import CompositionReporter, GraphReporter, RecommendReporter, TestabilityReporter
from tcalint.reporting.stdout import BaseReporter, progress_bar
from tcalint.scanner import scan_workspace
from tcalint.types.config import ThresholdConfig


@pytest.mark.parametrize(("score", "bar"), [(100, "██████████"), (70, "███████░░░"), (5, "░░░░░░░░░░"), (0, "░" * 10)])
def test_progress_bar_has_ten_cells(score: int, bar: str) -> None:
    assert progress_bar(score) == bar


def test_base_reporter_requires_body_and_summary(tmp_path: Path) -> None:
    with pytest.raises(TypeError):
        BaseReporter(scan_workspace(root=tmp_path, tool="composition"), color=False)


def test_empty_tree_prints_notice_and_summary(tmp_path: Path) -> None:
    output = CompositionReporter(scan_workspace(root=tmp_path, tool="composition"), color=False).render()

    assert "No reducer files found" in output
    assert "Files analyzed    0" in output
    assert "No composition violations found" in output


def test_composition_groups_high_before_low(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_private_funcs_source: Callable[..., str],
    make_state_source: Callable[[int], str],
) -> None:
    write_swift("AFeature.swift", make_private_funcs_source(4, name="helper"))
    write_swift("BFeature.swift", make_state_source(16))
    result = scan_workspace(root=tmp_path, tool="composition")

    output = CompositionReporter(result, color=False).render()

    assert output.index("HIGH  BFeature.swift:3") < output.index("LOW  AFeature.swift:2")
    assert "Rule 1.4: Unclear Organization" in output
    assert "\033[" not in output


def test_strict_mode_explains_failure(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_closure_source: Callable[[int], str],
) -> None:
    write_swift("ClosureFeature.swift", make_closure_source(1))
    result = scan_workspace(root=tmp_path, tool="composition")

    output = CompositionReporter(result, color=False, strict=True).render()

    assert "STRICT MODE" in output
    assert "Rule 1.2: Replace closure injection with @Dependency declarations" in output


def test_color_wraps_severity_labels(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_closure_source: Callable[[int], str],
) -> None:
    write_swift("ClosureFeature.swift", make_closure_source(1))
    result = scan_workspace(root=tmp_path, tool="composition")

    output = CompositionReporter(result, color=True).render()

    assert f"{ANSI_RED}HIGH{ANSI_RESET}" in output


def test_testability_report(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_closure_source: Callable[[int], str],
) -> None:
    write_swift("ClosureFeature.swift", make_closure_source(3))
    result = scan_workspace(root=tmp_path, tool="testability")

    output = TestabilityReporter(result, color=False).render()

    assert "Score       70/100 (needs_work)" in output
    assert "[███████░░░] 70%" in output
    assert "ClosureFeature.swift: 3 closure injection(s) - prevents isolated unit testing" in output
    assert "Score (70) below threshold (75)" in output


def test_graph_report_detailed(tmp_path: Path, counter_source: str) -> None:
    (tmp_path / "CounterFeature.swift").write_text(counter_source, encoding="utf-8")
    result = scan_workspace(root=tmp_path, tool="graph")
    report = build_graph_report(result)

    plain = GraphReporter(result, report, color=False).render()
    detailed = GraphReporter(result, report, color=False, detailed=True).render()

    assert "Complexity score  2" in plain
    assert "acceptable complexity" in plain
    assert "Properties        count isLoading body" not in plain
    assert "Properties        count isLoading body" in detailed
    assert "No high-complexity patterns detected" in plain


def test_recommend_report_effort_summary(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_closure_source: Callable[[int], str],
    make_state_source: Callable[[int], str],
) -> None:
    write_swift("ClosureFeature.swift", make_closure_source(1))
    write_swift("BigFeature.swift", make_state_source(30))
    result = scan_workspace(root=tmp_path, tool="recommend")
    plan = recommend_extractions(result, ThresholdConfig())

    output = RecommendReporter(result, plan, color=False).render()

    assert "PRIORITY 1 (Do First - Unblocks Testing)" in output
    assert "EXTRACT: BigFeature - State has 30 properties, Actions: 0" in output
    assert "Effort  8-12 hours" in output
    assert "P1: ~2 hours (closure replacements)" in output
    assert "P2: ~5 hours (feature extractions)" in output
    assert "Total: ~7 hours" in output
    assert "Week 1: Priority 1 items (~2h) - unblock testing" in output


def test_recommend_report_without_recommendations(tmp_path: Path, counter_source: str) -> None:
    (tmp_path / "CounterFeature.swift").write_text(counter_source, encoding="utf-8")
    result = scan_workspace(root=tmp_path, tool="recommend")

    output = RecommendReporter(result, recommend_extractions(result, ThresholdConfig()), color=False).render()

    assert "No extraction recommendations at this time" in output
