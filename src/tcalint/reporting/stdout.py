"""Human-readable stdout reporters for each scan command."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePosixPath

from tcalint.constants.branding import (
    ASCII_LOGO_LINES,
    COMPOSITION_TITLE,
    GRAPH_TITLE,
    PATTERNS_REFERENCE,
    RECOMMEND_TITLE,
    TESTABILITY_TITLE,
)
from tcalint.constants.recommendations import PRIORITY_HEADINGS, PRIORITY_ORDER, SPRINT_PLAN
from tcalint.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    SEPARATOR,
    SEVERITY_COLORS,
    SEVERITY_LABELS,
    STATUS_COLORS,
    TIER_COLORS,
)
from tcalint.constants.scoring import (
    COMPLEXITY_MONITOR_MIN,
    COMPLEXITY_REFACTOR_MIN,
    PROGRESS_BAR_WIDTH,
    SEVERITY_ORDER,
)
from tcalint.model import Finding, GraphReport, RecommendationPlan, ScanResult

_TIER_VERDICTS: dict[str, str] = {
    "healthy": "acceptable complexity",
    "monitor": "medium complexity: monitor for coupling",
    "refactor": "high complexity: consider decomposing",
}

_PRIORITY_COLORS: dict[str, str] = {
    "p1": ANSI_RED,
    "p2": ANSI_YELLOW,
    "p3": ANSI_GREEN,
}

_EFFORT_LABELS: dict[str, str] = {
    "p1": "closure replacements",
    "p2": "feature extractions",
    "p3": "clarifications",
}


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def progress_bar(score: int, width: int = PROGRESS_BAR_WIDTH) -> str:
    """Render a fixed-width bar with one filled cell per 10 points."""
    filled = max(0, min(width, score * width // 100))
    return "█" * filled + "░" * (width - filled)


class BaseReporter(ABC):
    """Shared header, colour and empty-input handling for stdout reporters."""

    title: str = ""

    def __init__(self, result: ScanResult, *, color: bool = True) -> None:
        self._result = result
        self._color = color

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header()]
        if self._result.files_analyzed == 0:
            sections.append(self._render_empty())
        else:
            sections.append(self._render_body())
        sections.append(self._render_summary())
        return "\n".join(section for section in sections if section)

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color and color else text

    def _render_header(self) -> str:
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {self._paint(self.title, ANSI_BOLD)}",
            f"  {SEPARATOR}",
            f"  Path        {self._result.root}",
        ]
        for warning in self._result.warnings:
            lines.append(f"  {self._paint('Skipped', ANSI_YELLOW)}     {warning}")
        lines.append("")
        return "\n".join(lines)

    def _render_empty(self) -> str:
        return "\n".join(
            [
                f"  {self._paint('No reducer files found', ANSI_YELLOW)} in {self._result.root}",
                "",
            ]
        )

    @abstractmethod
    def _render_body(self) -> str:
        """Render the command-specific findings."""

    @abstractmethod
    def _render_summary(self) -> str:
        """Render the closing summary block."""

    def _section(self, heading: str) -> list[str]:
        return [f"  {SEPARATOR}", f"  {self._paint(heading, ANSI_BOLD)}", f"  {SEPARATOR}", ""]

    def _duration_line(self) -> str:
        return f"  Duration    {self._result.duration_seconds:.3f}s"


class CompositionReporter(BaseReporter):
    """Composition violations grouped by severity."""

    title = COMPOSITION_TITLE

    def __init__(self, result: ScanResult, *, color: bool = True, strict: bool = False) -> None:
        super().__init__(result, color=color)
        self._strict = strict

    def _render_body(self) -> str:
        lines: list[str] = []
        violations = self._result.violations
        for severity in SEVERITY_ORDER:
            for finding in violations:
                if finding.severity == severity:
                    lines.extend(self._render_finding(finding))
        return "\n".join(lines)

    def _render_finding(self, finding: Finding) -> list[str]:
        label = self._paint(finding.severity.upper(), SEVERITY_COLORS.get(finding.severity, ""))
        location = finding.file if finding.line is None else f"{finding.file}:{finding.line}"
        lines = [
            f"  {label}  {location}",
            f"    Rule {finding.rule}: {finding.title}",
            f"    {finding.message}",
        ]
        if finding.labels:
            lines.append(f"    Duplicate cases: {', '.join(finding.labels)}")
        lines.append("")
        return lines

    def _render_summary(self) -> str:
        r = self._result
        counts = r.counts_by_severity
        lines = self._section("Composition summary")
        lines.append(f"  Files analyzed    {r.files_analyzed}")
        lines.append(f"  Total violations  {len(r.violations)}")
        lines.append("")
        for severity in SEVERITY_ORDER:
            label = self._paint(f"{SEVERITY_LABELS[severity]:<20}", SEVERITY_COLORS[severity])
            lines.append(f"  {label}{counts[severity]}")
        lines.append("")
        status = self._paint(r.status, STATUS_COLORS.get(r.status, ""))
        lines.append(f"  Score       {r.score}/100 ({status})")
        lines.append(self._duration_line())
        lines.append("")

        if not r.violations:
            lines.append(f"  {self._paint('No composition violations found', ANSI_GREEN)}")
            lines.append(f"  Reference: see {PATTERNS_REFERENCE} for composition guidelines")
            return "\n".join(lines)

        lines.append(f"  {self._paint('Composition violations detected', ANSI_RED)}")
        lines.append("")
        if self._strict and r.has_blocking:
            lines.append(f"  {self._paint('STRICT MODE: HIGH violations found, failing build', ANSI_RED)}")
            lines.append("")
            lines.append("  To fix HIGH violations:")
            for finding in r.violations:
                if finding.severity == "high":
                    lines.append(f"    Rule {finding.rule}: {finding.recommendation}")
            lines.append("")
        lines.append("  To fix violations:")
        lines.append("    HIGH (1.1-1.2): these block testing and maintainability, fix immediately")
        lines.append("    MEDIUM (1.3, 1.5): important for clarity and reducing bugs")
        lines.append("    LOW (1.4): improve clarity for team understanding")
        lines.append("")
        lines.append(f"  Reference: see {PATTERNS_REFERENCE} for detailed guidance")
        return "\n".join(lines)


class TestabilityReporter(BaseReporter):
    """Testability score with progress bar, blockers and warnings."""

    __test__ = False
    title = TESTABILITY_TITLE

    def _total(self, rule_id: str) -> int:
        return sum(analysis.count(rule_id) for analysis in self._result.analyses)

    def _render_body(self) -> str:
        violations = self._result.violations
        blockers = [finding for finding in violations if finding.severity == "high"]
        warnings = [finding for finding in violations if finding.severity != "high"]
        lines: list[str] = []
        if blockers:
            lines.append(f"  {self._paint('BLOCKERS', ANSI_RED)} (prevent isolated testing)")
            lines.extend(f"    - {PurePosixPath(f.file).name}: {f.message}" for f in blockers)
            lines.append("")
        if warnings:
            lines.append(f"  {self._paint('WARNINGS', ANSI_YELLOW)} (increase test complexity)")
            lines.extend(f"    - {PurePosixPath(f.file).name}: {f.message}" for f in warnings)
            lines.append("")
        return "\n".join(lines)

    def _render_summary(self) -> str:
        r = self._result
        closures = self._total("CLOSURE_INJECTION")
        lines = self._section("Testability score")
        status = self._paint(r.status, STATUS_COLORS.get(r.status, ""))
        lines.append(f"  Score       {r.score}/100 ({status})")
        lines.append(f"  Progress    [{progress_bar(r.score)}] {r.score}%")
        lines.append("")
        lines.append(f"  Reducers analyzed          {r.files_analyzed}")
        lines.append(f"  Closure injections found   {closures}")
        lines.append(f"  Proper @Dependency uses    {self._total('DEPENDENCY_CLIENT')}")
        lines.append(self._duration_line())
        lines.append("")

        lines.append("  Recommendations:")
        if r.score < r.critical_threshold:
            lines.append("    CRITICAL: testability is severely limited")
            lines.append(f"    Priority 1: replace {closures} closure injection(s) with @Dependency")
            lines.append("    Priority 2: consolidate duplicate action handlers")
            lines.append("    Priority 3: extract overly complex reducers")
        elif r.score < r.pass_threshold:
            lines.append(f"    Fix blockers to reach {r.pass_threshold}+")
            if closures:
                lines.append("    Replace closure injection with @Dependency (+10 per closure)")
            lines.append("    Consolidate duplicate logic")
            lines.append(f"    Expected improvement: +{r.pass_threshold - r.score} points")
        else:
            lines.append(f"    {self._paint('Testability is good', ANSI_GREEN)}")
            lines.append("    Continue using the @Dependency pattern")
        lines.append("")
        lines.append(f"  Reference: {PATTERNS_REFERENCE}, Testing section")

        if not r.passed:
            lines.append("")
            lines.append(f"  {self._paint(f'Score ({r.score}) below threshold ({r.pass_threshold})', ANSI_RED)}")
        return "\n".join(lines)


class GraphReporter(BaseReporter):
    """Per-reducer coupling metrics and tier guidance."""

    title = GRAPH_TITLE

    def __init__(
        self,
        result: ScanResult,
        report: GraphReport,
        *,
        color: bool = True,
        detailed: bool = False,
    ) -> None:
        super().__init__(result, color=color)
        self._report = report
        self._detailed = detailed

    def _render_body(self) -> str:
        lines: list[str] = []
        for entry in self._report.entries:
            tier_color = TIER_COLORS.get(entry.tier, "")
            lines.append(f"  {self._paint(entry.name, ANSI_BOLD)}")
            lines.append(f"    Path              {entry.file}")
            lines.append(f"    State properties  {len(entry.properties)}")
            if self._detailed:
                lines.append(f"    Properties        {' '.join(entry.properties)}")
            lines.append(f"    Reduce blocks     {entry.reduce_blocks}")
            lines.append(f"    Update methods    {entry.update_methods}")
            lines.append(f"    Complexity score  {entry.complexity_score}")
            lines.append(f"    {self._paint(_TIER_VERDICTS[entry.tier], tier_color)}")
            lines.append("")
        return "\n".join(lines)

    def _render_summary(self) -> str:
        report = self._report
        high = report.high_complexity_reducers
        lines = self._section("Dependency graph summary")
        lines.append(f"  Reducers analyzed             {report.files_analyzed}")
        lines.append(f"  Total synchronization points  {report.total_sync_points}")
        lines.append(f"  High-complexity reducers      {high}")
        lines.append(self._duration_line())
        lines.append("")
        if high == 0:
            lines.append(f"  {self._paint('No high-complexity patterns detected', ANSI_GREEN)}")
        else:
            lines.append(f"  {self._paint(f'{high} reducer(s) have high complexity', ANSI_RED)}")
            lines.append("    Break them into smaller, focused reducers")
            lines.append("    Reduce the number of child features in state")
            lines.append("    Simplify state update logic")
        lines.append("")
        lines.append("  Guidance:")
        lines.append(f"    {self._paint(f'Complexity < {COMPLEXITY_MONITOR_MIN}', ANSI_DIM)}     healthy composition")
        lines.append(
            f"    {self._paint(f'Complexity {COMPLEXITY_MONITOR_MIN}-{COMPLEXITY_REFACTOR_MIN - 1}', ANSI_DIM)}"
            "  monitor for coupling"
        )
        lines.append(
            f"    {self._paint(f'Complexity >= {COMPLEXITY_REFACTOR_MIN}', ANSI_DIM)}   consider decomposition"
        )
        lines.append("")
        lines.append(f"  Reference: {PATTERNS_REFERENCE}, Pattern 3: Multiple Destinations")
        return "\n".join(lines)


class RecommendReporter(BaseReporter):
    """Prioritised extraction backlog with effort summary and sprint plan."""

    title = RECOMMEND_TITLE

    def __init__(self, result: ScanResult, plan: RecommendationPlan, *, color: bool = True) -> None:
        super().__init__(result, color=color)
        self._plan = plan

    def _render_body(self) -> str:
        lines: list[str] = []
        for priority in PRIORITY_ORDER:
            items = self._plan.by_priority(priority)
            if not items:
                continue
            lines.append(f"  {self._paint(PRIORITY_HEADINGS[priority], _PRIORITY_COLORS[priority])}")
            lines.append("")
            for item in items:
                lines.append(f"    {item.task}")
                lines.append(f"      Effort  {item.effort}")
                lines.append(f"      Impact  {item.impact}")
                lines.append("")
        return "\n".join(lines)

    def _render_summary(self) -> str:
        plan = self._plan
        lines = self._section("Extraction summary")
        if plan.total == 0:
            lines.append(f"  {self._paint('No extraction recommendations at this time', ANSI_GREEN)}")
            lines.append("  Keep monitoring composition metrics")
            lines.append(self._duration_line())
            return "\n".join(lines)

        lines.append(f"  Total recommendations  {plan.total}")
        lines.append("")
        lines.append("  Effort summary:")
        for priority in PRIORITY_ORDER:
            hours = plan.hours_for(priority)
            if hours:
                lines.append(f"    {priority.upper()}: ~{hours} hours ({_EFFORT_LABELS[priority]})")
        lines.append(f"    Total: ~{plan.total_hours} hours (phased approach recommended)")
        lines.append("")
        lines.append("  Suggested sprint plan:")
        for priority in PRIORITY_ORDER:
            hours = plan.hours_for(priority)
            if hours:
                lines.append(f"    {SPRINT_PLAN[priority].format(hours=hours)}")
        lines.append(self._duration_line())
        lines.append("")
        lines.append(f"  Reference: {PATTERNS_REFERENCE}, Pattern 3: Multiple Destinations")
        return "\n".join(lines)
