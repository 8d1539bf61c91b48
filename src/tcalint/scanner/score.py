"""Scoring utilities for findings and complexity metrics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from tcalint.constants.config import DEFAULT_CRITICAL_THRESHOLD, DEFAULT_PASS_THRESHOLD
from tcalint.constants.scoring import (
    BASE_SCORE,
    COMPLEXITY_MONITOR_MIN,
    COMPLEXITY_REDUCE_WEIGHT,
    COMPLEXITY_REFACTOR_MIN,
    MAX_SCORE,
    MIN_SCORE,
)
from tcalint.model import Finding
from tcalint.types import ComplexityTier, Severity, Status


def score_findings(findings: Iterable[Finding], *, base: int = BASE_SCORE) -> int:
    """Sum signed finding deltas onto ``base`` and clamp to 0-100.

    Clamping happens once, after the sum, so the result does not depend on
    the order of ``findings``.
    """
    total = base + sum(finding.score_delta for finding in findings)
    return max(MIN_SCORE, min(MAX_SCORE, total))


def status_from_score(
    score: int,
    *,
    pass_threshold: int = DEFAULT_PASS_THRESHOLD,
    critical_threshold: int = DEFAULT_CRITICAL_THRESHOLD,
) -> Status:
    """Map a 0-100 score to pass / needs_work / critical."""
    if score < critical_threshold:
        return "critical"
    if score < pass_threshold:
        return "needs_work"
    return "pass"


def severity_counts(findings: Iterable[Finding]) -> dict[Severity, int]:
    """Count violations by severity with stable keys; healthy findings are excluded."""
    counts = Counter(finding.severity for finding in findings if finding.classification == "violation")
    return {
        "high": int(counts.get("high", 0)),
        "medium": int(counts.get("medium", 0)),
        "low": int(counts.get("low", 0)),
    }


def rule_counts(findings: Iterable[Finding]) -> dict[str, int]:
    """Count findings per public rule code, sorted by code."""
    counts = Counter(finding.rule for finding in findings)
    return {rule: int(counts[rule]) for rule in sorted(counts)}


def complexity_score(reduce_blocks: int, update_methods: int) -> int:
    """Unbounded coupling estimate: two points per Reduce block plus one per update method."""
    return COMPLEXITY_REDUCE_WEIGHT * reduce_blocks + update_methods


def complexity_tier(score: int) -> ComplexityTier:
    if score >= COMPLEXITY_REFACTOR_MIN:
        return "refactor"
    if score >= COMPLEXITY_MONITOR_MIN:
        return "monitor"
    return "healthy"
