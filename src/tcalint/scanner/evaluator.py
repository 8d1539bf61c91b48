"""Apply detectors and rules to selected files."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tcalint.detectors import Detector
from tcalint.model import FileAnalysis, Finding, Rule


def analyze_text(file_key: str, text: str, detectors: Sequence[Detector]) -> FileAnalysis:
    """Run every detector once over the full text of a file."""
    return FileAnalysis(
        file=file_key,
        detections={detector.rule_id: detector.detect(text) for detector in detectors},
    )


def evaluate_analysis(analysis: FileAnalysis, rules: Sequence[Rule]) -> list[Finding]:
    """Turn one file's detections into findings.

    A rule fires at most once per file, when its count exceeds its threshold;
    the finding carries the raw count so N matches never become N findings.
    """
    findings: list[Finding] = []
    for rule in rules:
        detection = analysis.detection(rule.rule_id)
        if detection.count <= rule.threshold:
            continue
        findings.append(
            Finding(
                file=analysis.file,
                rule_id=rule.rule_id,
                rule=rule.code,
                severity=rule.severity,
                title=rule.title,
                message=rule.render_message(detection.count),
                count=detection.count,
                threshold=rule.threshold,
                line=detection.first_line,
                lines=detection.lines,
                labels=detection.labels,
                score_delta=rule.score_delta(detection.count),
                classification=rule.classification,
                recommendation=rule.recommendation,
            )
        )
    return findings


def evaluate_all(analyses: Iterable[FileAnalysis], rules: Sequence[Rule]) -> tuple[Finding, ...]:
    """Fold per-file finding batches into one ordered tuple."""
    return tuple(finding for analysis in analyses for finding in evaluate_analysis(analysis, rules))
