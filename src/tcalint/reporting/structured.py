"""Structured (JSON) report payloads.

Every payload starts with ``schema_version`` and ``tool`` and keeps a fixed
key order.  Payloads never carry timestamps or durations, so repeated runs
over an unchanged tree serialise to identical bytes.
"""

from __future__ import annotations

from tcalint.constants.recommendations import PRIORITY_ORDER
from tcalint.constants.reporting import SCHEMA_VERSION
from tcalint.constants.scoring import SEVERITY_ORDER, TIER_ORDER
from tcalint.model import Finding, GraphReport, RecommendationPlan, ScanResult
from tcalint.scanner.score import rule_counts
from tcalint.types import JsonObject, ToolName


def _envelope(tool: ToolName) -> JsonObject:
    return {"schema_version": SCHEMA_VERSION, "tool": tool}


def _total_count(result: ScanResult, rule_id: str) -> int:
    return sum(analysis.count(rule_id) for analysis in result.analyses)


def _finding_list(findings: tuple[Finding, ...]) -> list[JsonObject]:
    return [finding.to_dict() for finding in findings]


def composition_payload(result: ScanResult, *, strict: bool = False) -> JsonObject:
    """Composition report: violation counts plus violations grouped by severity."""
    counts = result.counts_by_severity
    violations = result.violations
    payload = _envelope("composition")
    payload.update(
        {
            "success": not (strict and result.has_blocking),
            "violations": len(violations),
            "high": counts["high"],
            "medium": counts["medium"],
            "low": counts["low"],
            "files_analyzed": result.files_analyzed,
            "score": result.score,
            "status": result.status,
            "by_rule": rule_counts(violations),
        }
    )
    for severity in SEVERITY_ORDER:
        payload[f"{severity}_violations"] = _finding_list(
            tuple(finding for finding in violations if finding.severity == severity)
        )
    payload["scan_warnings"] = list(result.warnings)
    return payload


def testability_payload(result: ScanResult) -> JsonObject:
    """Testability report: score, status, blockers and warnings."""
    violations = result.violations
    payload = _envelope("testability")
    payload.update(
        {
            "score": result.score,
            "status": result.status,
            "threshold": result.pass_threshold,
            "passed": result.passed,
            "files_analyzed": result.files_analyzed,
            "closure_injections": _total_count(result, "CLOSURE_INJECTION"),
            "proper_dependencies": _total_count(result, "DEPENDENCY_CLIENT"),
            "blockers": _finding_list(tuple(finding for finding in violations if finding.severity == "high")),
            "warnings": _finding_list(tuple(finding for finding in violations if finding.severity != "high")),
            "scan_warnings": list(result.warnings),
        }
    )
    return payload


def graph_payload(report: GraphReport, result: ScanResult, *, detailed: bool = False) -> JsonObject:
    """Dependency graph report with one entry per reducer that has a state block."""
    payload = _envelope("graph")
    payload.update(
        {
            "files_analyzed": report.files_analyzed,
            "total_sync_points": report.total_sync_points,
            "high_complexity_reducers": report.high_complexity_reducers,
            "tiers": {tier: report.tier_counts.get(tier, 0) for tier in TIER_ORDER},
            "graphs": [entry.to_dict(detailed=detailed) for entry in report.entries],
            "scan_warnings": list(result.warnings),
        }
    )
    return payload


def recommend_payload(plan: RecommendationPlan, result: ScanResult) -> JsonObject:
    """Extraction backlog bucketed by priority with additive effort totals."""
    payload = _envelope("recommend")
    effort: JsonObject = {priority: plan.hours_for(priority) for priority in PRIORITY_ORDER}
    effort["total"] = plan.total_hours
    payload.update(
        {
            "files_analyzed": plan.files_analyzed,
            "total": plan.total,
            "recommendations": {
                priority: [item.to_dict() for item in plan.by_priority(priority)] for priority in PRIORITY_ORDER
            },
            "effort": effort,
            "scan_warnings": list(result.warnings),
        }
    )
    return payload
