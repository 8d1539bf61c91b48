"""Extraction recommender: turn per-file metrics into a prioritised backlog.

Priorities are fixed buckets.  P1 closure replacements unblock unit tests,
P2 extractions split oversized features, and P3 clarifications tidy helper
sprawl.  Effort totals are additive estimates (records times a per-bucket
constant), not a schedule.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from tcalint.constants.recommendations import (
    P1_EFFORT,
    P1_IMPACT,
    P2_EFFORT,
    P2_IMPACT,
    P2_LARGE_EFFORT,
    P3_EFFORT,
    P3_IMPACT,
    PRIORITY_HOURS,
)
from tcalint.model import FileAnalysis, Recommendation, RecommendationPlan, ScanResult
from tcalint.types.config import ThresholdConfig


def _stem(file_key: str) -> str:
    return PurePosixPath(file_key).stem


def recommendations_for(analysis: FileAnalysis, thresholds: ThresholdConfig) -> list[Recommendation]:
    """Return every recommendation one file qualifies for, in priority order."""
    stem = _stem(analysis.file)
    closures = analysis.count("CLOSURE_INJECTION")
    state_properties = analysis.count("STATE_PROPERTIES")
    action_cases = analysis.count("ACTION_CASES")
    helper_methods = analysis.count("HELPER_METHODS")

    items: list[Recommendation] = []
    if closures > 0:
        items.append(
            Recommendation(
                priority="p1",
                file=analysis.file,
                task=f"EXTRACT: {stem} - Replace {closures} closure injection(s) with @Dependency",
                effort=P1_EFFORT,
                impact=P1_IMPACT,
                hours=PRIORITY_HOURS["p1"],
            )
        )

    if state_properties > thresholds.state_properties or action_cases > thresholds.action_cases:
        effort = P2_LARGE_EFFORT if state_properties > thresholds.large_state_properties else P2_EFFORT
        items.append(
            Recommendation(
                priority="p2",
                file=analysis.file,
                task=f"EXTRACT: {stem} - State has {state_properties} properties, Actions: {action_cases}",
                effort=effort,
                impact=P2_IMPACT,
                hours=PRIORITY_HOURS["p2"],
            )
        )

    if helper_methods > thresholds.helper_methods:
        items.append(
            Recommendation(
                priority="p3",
                file=analysis.file,
                task=f"CLARIFY: {stem} - {helper_methods} helper methods",
                effort=P3_EFFORT,
                impact=P3_IMPACT,
                hours=PRIORITY_HOURS["p3"],
            )
        )
    return items


def recommend_extractions(
    result: ScanResult,
    thresholds: ThresholdConfig,
    *,
    include_p3: bool = True,
) -> RecommendationPlan:
    """Build the recommendation plan for a scan.

    Recommendations are ordered by priority first, then by file key.  With
    ``include_p3=False`` clarification items are dropped from both the plan
    and its effort totals.
    """
    collected: list[Recommendation] = []
    for analysis in result.analyses:
        collected.extend(recommendations_for(analysis, thresholds))

    if not include_p3:
        collected = [item for item in collected if item.priority != "p3"]

    # Analyses arrive sorted by file key, so a stable sort keeps that order within a bucket.
    collected.sort(key=lambda item: item.priority)
    return RecommendationPlan(
        files_analyzed=result.files_analyzed,
        recommendations=tuple(collected),
        include_p3=include_p3,
    )
