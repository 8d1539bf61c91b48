"""Frozen dataclasses shared across the scanner, analyses and reporters."""

from __future__ import annotations

from dataclasses import dataclass, field

from tcalint.types import (
    Classification,
    ComplexityTier,
    JsonObject,
    Priority,
    Severity,
    Status,
    ToolName,
    WeightMode,
)


@dataclass(frozen=True)
class Detection:
    """Raw detector output for one file."""

    count: int = 0
    lines: tuple[int, ...] = ()
    labels: tuple[str, ...] = ()

    @property
    def first_line(self) -> int | None:
        return self.lines[0] if self.lines else None


@dataclass(frozen=True)
class Rule:
    """Static rule configuration binding a detector to severity and scoring."""

    rule_id: str
    code: str
    title: str
    severity: Severity
    threshold: int
    weight: int
    message: str
    recommendation: str
    weight_mode: WeightMode = "per_finding"
    classification: Classification = "violation"

    def score_delta(self, count: int) -> int:
        """Return the signed score contribution for a finding with ``count`` matches."""
        if self.weight_mode == "per_match":
            return self.weight * count
        return self.weight

    def render_message(self, count: int) -> str:
        return self.message.format(count=count, threshold=self.threshold)


@dataclass(frozen=True)
class Finding:
    """One reported rule result for one file."""

    file: str
    rule_id: str
    rule: str
    severity: Severity
    title: str
    message: str
    count: int
    threshold: int
    line: int | None = None
    lines: tuple[int, ...] = ()
    labels: tuple[str, ...] = ()
    score_delta: int = 0
    classification: Classification = "violation"
    recommendation: str = ""

    def to_dict(self) -> JsonObject:
        """Serialize the finding with a fixed key order."""
        return {
            "file": self.file,
            "rule": self.rule,
            "rule_id": self.rule_id,
            "severity": self.severity,
            "line": self.line,
            "message": self.message,
            "count": self.count,
            "threshold": self.threshold,
        }


@dataclass(frozen=True)
class FileAnalysis:
    """All detector results for a single selected file."""

    file: str
    detections: dict[str, Detection] = field(default_factory=dict)

    def detection(self, rule_id: str) -> Detection:
        return self.detections.get(rule_id, Detection())

    def count(self, rule_id: str) -> int:
        return self.detection(rule_id).count


@dataclass(frozen=True)
class ScanResult:
    """Aggregate output of one scan invocation."""

    tool: ToolName
    root: str
    files: tuple[str, ...]
    analyses: tuple[FileAnalysis, ...]
    findings: tuple[Finding, ...]
    counts_by_severity: dict[Severity, int]
    score: int
    status: Status
    pass_threshold: int
    critical_threshold: int
    warnings: tuple[str, ...] = ()
    duration_seconds: float = 0.0

    @property
    def files_analyzed(self) -> int:
        return len(self.analyses)

    @property
    def violations(self) -> tuple[Finding, ...]:
        return tuple(finding for finding in self.findings if finding.classification == "violation")

    @property
    def healthy(self) -> tuple[Finding, ...]:
        return tuple(finding for finding in self.findings if finding.classification == "healthy")

    @property
    def has_blocking(self) -> bool:
        """Whether any high-severity violation is present."""
        return any(finding.severity == "high" for finding in self.violations)

    @property
    def passed(self) -> bool:
        """Whether the score clears the pass threshold."""
        return self.score >= self.pass_threshold


@dataclass(frozen=True)
class ComplexityEntry:
    """Coupling metrics for one reducer file with a state block."""

    file: str
    name: str
    properties: tuple[str, ...]
    reduce_blocks: int
    update_methods: int
    sync_points: int
    complexity_score: int
    tier: ComplexityTier

    def to_dict(self, *, detailed: bool = False) -> JsonObject:
        payload: JsonObject = {
            "file": self.name,
            "path": self.file,
            "properties": len(self.properties),
            "reduce_blocks": self.reduce_blocks,
            "update_methods": self.update_methods,
            "complexity_score": self.complexity_score,
            "tier": self.tier,
            "sync_points": self.sync_points,
        }
        if detailed:
            payload["property_names"] = list(self.properties)
        return payload


@dataclass(frozen=True)
class GraphReport:
    """Dependency graph summary derived from a scan."""

    files_analyzed: int
    entries: tuple[ComplexityEntry, ...]
    total_sync_points: int
    tier_counts: dict[ComplexityTier, int]

    @property
    def high_complexity_reducers(self) -> int:
        return self.tier_counts.get("refactor", 0)


@dataclass(frozen=True)
class Recommendation:
    """One extraction or clarification task derived from scan metrics."""

    priority: Priority
    file: str
    task: str
    effort: str
    impact: str
    hours: int

    def to_dict(self) -> JsonObject:
        return {
            "task": self.task,
            "file": self.file,
            "effort": self.effort,
            "impact": self.impact,
        }


@dataclass(frozen=True)
class RecommendationPlan:
    """Recommendations bucketed by priority with naive effort totals."""

    files_analyzed: int
    recommendations: tuple[Recommendation, ...]
    include_p3: bool = True

    def by_priority(self, priority: Priority) -> tuple[Recommendation, ...]:
        return tuple(item for item in self.recommendations if item.priority == priority)

    def hours_for(self, priority: Priority) -> int:
        return sum(item.hours for item in self.by_priority(priority))

    @property
    def total_hours(self) -> int:
        return sum(item.hours for item in self.recommendations)

    @property
    def total(self) -> int:
        return len(self.recommendations)
