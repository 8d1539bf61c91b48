"""Tests for the extraction recommender."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from tcalint.analysis import recommend_extractions
from tcalint.analysis.extraction import recommendations_for
from tcalint.model import Detection, FileAnalysis
from tcalint.scanner import scan_workspace
from tcalint.types.config import ThresholdConfig


def _analysis(file: str = "Sources/AppFeature.swift", **counts: int) -> FileAnalysis:
    return FileAnalysis(file=file, detections={rule_id: Detection(count=count) for rule_id, count in counts.items()})


def test_closures_are_priority_one() -> None:
    items = recommendations_for(_analysis(CLOSURE_INJECTION=2), ThresholdConfig())

    assert [(item.priority, item.task, item.effort, item.hours) for item in items] == [
        ("p1", "EXTRACT: AppFeature - Replace 2 closure injection(s) with @Dependency", "2 hours", 2)
    ]
    assert items[0].impact == "Unblocks unit testing"


def test_large_state_is_priority_two() -> None:
    items = recommendations_for(_analysis(STATE_PROPERTIES=16, ACTION_CASES=3), ThresholdConfig())

    assert [(item.priority, item.task, item.effort) for item in items] == [
        ("p2", "EXTRACT: AppFeature - State has 16 properties, Actions: 3", "4-6 hours")
    ]


def test_very_large_state_raises_effort() -> None:
    items = recommendations_for(_analysis(STATE_PROPERTIES=26), ThresholdConfig())

    assert items[0].effort == "8-12 hours"
    assert items[0].hours == 5


def test_many_actions_alone_is_priority_two() -> None:
    items = recommendations_for(_analysis(STATE_PROPERTIES=2, ACTION_CASES=41), ThresholdConfig())

    assert [item.priority for item in items] == ["p2"]


def test_helper_sprawl_is_priority_three() -> None:
    items = recommendations_for(_analysis(HELPER_METHODS=6), ThresholdConfig())

    assert [(item.priority, item.task, item.effort, item.impact) for item in items] == [
        ("p3", "CLARIFY: AppFeature - 6 helper methods", "4-8 hours", "Improved clarity")
    ]


def test_thresholds_are_exclusive() -> None:
    items = recommendations_for(_analysis(STATE_PROPERTIES=15, ACTION_CASES=40, HELPER_METHODS=5), ThresholdConfig())

    assert items == []


def test_plan_orders_by_priority_and_sums_effort(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_state_source: Callable[[int], str],
    make_closure_source: Callable[[int], str],
    make_private_funcs_source: Callable[..., str],
) -> None:
    write_swift("A/HelperFeature.swift", make_private_funcs_source(6))
    write_swift("B/BigFeature.swift", make_state_source(20))
    write_swift("C/ClosureFeature.swift", make_closure_source(1))
    result = scan_workspace(root=tmp_path, tool="recommend")

    plan = recommend_extractions(result, ThresholdConfig())

    assert [(item.priority, item.file) for item in plan.recommendations] == [
        ("p1", "C/ClosureFeature.swift"),
        ("p2", "B/BigFeature.swift"),
        ("p3", "A/HelperFeature.swift"),
    ]
    assert plan.hours_for("p1") == 2
    assert plan.hours_for("p2") == 5
    assert plan.hours_for("p3") == 6
    assert plan.total_hours == 13


def test_effort_only_drops_priority_three(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_closure_source: Callable[[int], str],
    make_private_funcs_source: Callable[..., str],
) -> None:
    write_swift("HelperFeature.swift", make_private_funcs_source(7))
    write_swift("ClosureFeature.swift", make_closure_source(2))
    result = scan_workspace(root=tmp_path, tool="recommend")

    plan = recommend_extractions(result, ThresholdConfig(), include_p3=False)

    assert [item.priority for item in plan.recommendations] == ["p1"]
    assert plan.by_priority("p3") == ()
    assert plan.total_hours == 2


def test_empty_scan_has_no_recommendations(tmp_path: Path) -> None:
    plan = recommend_extractions(scan_workspace(root=tmp_path, tool="recommend"), ThresholdConfig())

    assert plan.total == 0
    assert plan.total_hours == 0
