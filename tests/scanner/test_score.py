"""Tests for scoring and status helpers."""

from __future__ import annotations

import itertools

import pytest

from tcalint.model import Finding
from tcalint.scanner.score import (
    complexity_score,
    complexity_tier,
    rule_counts,
    score_findings,
    severity_counts,
    status_from_score,
)
from tcalint.types import Classification, Severity


def _make_finding(
    *,
    delta: int,
    severity: Severity = "high",
    rule: str = "T1",
    classification: Classification = "violation",
) -> Finding:
    return Finding(
        file="AppFeature.swift",
        rule_id="CLOSURE_INJECTION",
        rule=rule,
        severity=severity,
        title="Closure Injection",
        message="msg",
        count=1,
        threshold=0,
        score_delta=delta,
        classification=classification,
    )


def test_score_starts_at_base() -> None:
    assert score_findings([]) == 100


def test_three_closures_score_seventy() -> None:
    score = score_findings([_make_finding(delta=-30)])

    assert score == 70
    assert status_from_score(score) == "needs_work"


def test_score_is_clamped() -> None:
    assert score_findings([_make_finding(delta=-250)]) == 0
    assert score_findings([_make_finding(delta=40, classification="healthy")]) == 100


def test_score_is_order_independent() -> None:
    findings = [
        _make_finding(delta=-60),
        _make_finding(delta=-60),
        _make_finding(delta=30, classification="healthy"),
        _make_finding(delta=-5, severity="medium"),
    ]

    scores = {score_findings(list(order)) for order in itertools.permutations(findings)}

    assert scores == {5}


@pytest.mark.parametrize(
    ("score", "expected"),
    [(100, "pass"), (75, "pass"), (74, "needs_work"), (50, "needs_work"), (49, "critical"), (0, "critical")],
)
def test_status_boundaries(score: int, expected: str) -> None:
    assert status_from_score(score) == expected


def test_status_respects_custom_thresholds() -> None:
    assert status_from_score(85, pass_threshold=90, critical_threshold=60) == "needs_work"
    assert status_from_score(59, pass_threshold=90, critical_threshold=60) == "critical"


def test_severity_counts_have_stable_keys_and_skip_healthy() -> None:
    findings = [
        _make_finding(delta=-10),
        _make_finding(delta=-5, severity="medium"),
        _make_finding(delta=2, severity="low", classification="healthy"),
    ]

    assert severity_counts(findings) == {"high": 1, "medium": 1, "low": 0}
    assert severity_counts([]) == {"high": 0, "medium": 0, "low": 0}


def test_rule_counts_sorted_by_code() -> None:
    findings = [
        _make_finding(delta=0, rule="1.3"),
        _make_finding(delta=0, rule="1.1"),
        _make_finding(delta=0, rule="1.3"),
    ]

    assert list(rule_counts(findings).items()) == [("1.1", 1), ("1.3", 2)]


@pytest.mark.parametrize(
    ("reduce_blocks", "update_methods", "score", "tier"),
    [
        (1, 0, 2, "healthy"),
        (3, 1, 7, "healthy"),
        (4, 0, 8, "monitor"),
        (5, 5, 15, "monitor"),
        (8, 0, 16, "refactor"),
        (20, 30, 70, "refactor"),
    ],
)
def test_complexity_tiers(reduce_blocks: int, update_methods: int, score: int, tier: str) -> None:
    assert complexity_score(reduce_blocks, update_methods) == score
    assert complexity_tier(score) == tier
