"""Tests for structured JSON payloads."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from tcalint.analysis import build_graph_report, recommend_extractions
from tcalint.io import render_json
from tcalint.reporting import composition_payload, graph_payload, recommend_payload
from tcalint.reporting import testability_payload as build_testability_payload
from tcalint.scanner import scan_workspace
from tcalint.types.config import ThresholdConfig

DUPLICATE_SOURCE = """\
switch action {
case .load:
  return .none
case .load:
  return .none
}
"""


def test_empty_composition_payload_has_minimum_shape(tmp_path: Path) -> None:
    payload = composition_payload(scan_workspace(root=tmp_path, tool="composition"))

    assert list(payload)[:8] == [
        "schema_version",
        "tool",
        "success",
        "violations",
        "high",
        "medium",
        "low",
        "files_analyzed",
    ]
    assert payload["success"] is True
    assert payload["violations"] == 0
    assert payload["files_analyzed"] == 0
    assert payload["high_violations"] == []


def test_composition_payload_groups_violations_by_severity(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_state_source: Callable[[int], str],
) -> None:
    write_swift("BigFeature.swift", make_state_source(16))
    write_swift("DupFeature.swift", DUPLICATE_SOURCE)
    result = scan_workspace(root=tmp_path, tool="composition")

    payload = composition_payload(result)

    assert payload["violations"] == 2
    assert (payload["high"], payload["medium"], payload["low"]) == (1, 1, 0)
    assert payload["high_violations"] == [
        {
            "file": "BigFeature.swift",
            "rule": "1.1",
            "rule_id": "STATE_PROPERTIES",
            "severity": "high",
            "line": 3,
            "message": "State has 16 properties (threshold: 15) - consider extracting features",
            "count": 16,
            "threshold": 15,
        }
    ]
    assert [item["rule"] for item in payload["medium_violations"]] == ["1.3"]


def test_strict_payload_reports_failure(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_closure_source: Callable[[int], str],
) -> None:
    write_swift("ClosureFeature.swift", make_closure_source(1))
    result = scan_workspace(root=tmp_path, tool="composition")

    assert composition_payload(result)["success"] is True
    assert composition_payload(result, strict=True)["success"] is False


def test_testability_payload_splits_blockers_and_warnings(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_closure_source: Callable[[int], str],
) -> None:
    write_swift("ClosureFeature.swift", make_closure_source(3))
    write_swift("DupFeature.swift", DUPLICATE_SOURCE)
    result = scan_workspace(root=tmp_path, tool="testability")

    payload = build_testability_payload(result)

    assert payload["score"] == 70
    assert payload["status"] == "needs_work"
    assert payload["passed"] is False
    assert payload["closure_injections"] == 3
    assert [item["rule"] for item in payload["blockers"]] == ["T1"]
    assert [item["rule"] for item in payload["warnings"]] == ["T4"]


def test_graph_payload(tmp_path: Path, counter_source: str) -> None:
    (tmp_path / "CounterFeature.swift").write_text(counter_source, encoding="utf-8")
    result = scan_workspace(root=tmp_path, tool="graph")

    payload = graph_payload(build_graph_report(result), result)

    assert payload["files_analyzed"] == 1
    assert payload["high_complexity_reducers"] == 0
    assert payload["tiers"] == {"healthy": 1, "monitor": 0, "refactor": 0}
    assert payload["graphs"][0]["file"] == "CounterFeature.swift"
    assert payload["graphs"][0]["complexity_score"] == 2


def test_recommend_payload_buckets(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_closure_source: Callable[[int], str],
) -> None:
    write_swift("ClosureFeature.swift", make_closure_source(2))
    result = scan_workspace(root=tmp_path, tool="recommend")

    payload = recommend_payload(recommend_extractions(result, ThresholdConfig()), result)

    assert payload["recommendations"] == {
        "p1": [
            {
                "task": "EXTRACT: ClosureFeature - Replace 2 closure injection(s) with @Dependency",
                "file": "ClosureFeature.swift",
                "effort": "2 hours",
                "impact": "Unblocks unit testing",
            }
        ],
        "p2": [],
        "p3": [],
    }
    assert payload["effort"] == {"p1": 2, "p2": 0, "p3": 0, "total": 2}


def test_rendered_json_is_stable_and_timeless(
    tmp_path: Path,
    write_swift: Callable[[str, str], Path],
    make_state_source: Callable[[int], str],
) -> None:
    write_swift("BigFeature.swift", make_state_source(40))

    first = render_json(composition_payload(scan_workspace(root=tmp_path, tool="composition")))
    second = render_json(composition_payload(scan_workspace(root=tmp_path, tool="composition")))

    assert first == second
    assert "duration" not in first
    assert "\033[" not in first
    assert json.loads(first)["schema_version"] == "1.0.0"
