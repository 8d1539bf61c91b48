"""End-to-end scan orchestration for tcalint.

``scan_workspace`` is the single pipeline behind every command: select files,
run detectors, evaluate the command's rule set, then score.  Analyses that
need more than findings (dependency graph, extraction recommendations) read
the per-file detections carried on the returned :class:`ScanResult`.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from pathlib import Path

from tcalint.config import TcalintConfig, load_config
from tcalint.constants.detectors import RULE_IDS
from tcalint.detectors import build_detectors, rules_for_tool
from tcalint.exceptions import ConfigError
from tcalint.io import read_source_text
from tcalint.model import FileAnalysis, ScanResult
from tcalint.scanner.discovery import relative_key, select_files
from tcalint.scanner.evaluator import analyze_text, evaluate_all
from tcalint.scanner.score import score_findings, severity_counts, status_from_score
from tcalint.types import ToolName

logger = logging.getLogger(__name__)


def scan_workspace(
    *,
    root: Path,
    tool: ToolName,
    config_path: Path | None = None,
    config: TcalintConfig | None = None,
    pass_threshold: int | None = None,
) -> ScanResult:
    """Scan reducer files under ``root`` and score them with ``tool``'s rule set.

    Raises :class:`ConfigError` when the root or the configuration is invalid;
    every other condition (no files, unreadable files, failing score)
    still yields a complete result.
    """
    started_at = time.perf_counter()
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Scan root does not exist or is not a directory: {root}")

    if config is None:
        config = load_config(root, config_path)
    if pass_threshold is not None:
        if not 0 <= pass_threshold <= 100:
            raise ConfigError(f"threshold must be between 0 and 100, got {pass_threshold}")
        config = replace(config, pass_threshold=pass_threshold)

    selected = select_files(root, config.include_globs, config.exclude_dirs, config.max_file_mb)
    detectors = build_detectors(tuple(rule_id for rule_id in RULE_IDS if config.is_rule_enabled(rule_id)))

    warnings: list[str] = []
    analyses: list[FileAnalysis] = []
    for path in selected:
        file_key = relative_key(path, root)
        try:
            text = read_source_text(path)
        except OSError as exc:
            warning = f"Failed to read {file_key}: {exc}"
            warnings.append(warning)
            logger.warning(warning)
            continue
        analyses.append(analyze_text(file_key, text, detectors))

    rules = rules_for_tool(tool, config)
    findings = evaluate_all(analyses, rules)
    score = score_findings(findings)
    status = status_from_score(
        score,
        pass_threshold=config.pass_threshold,
        critical_threshold=config.critical_threshold,
    )
    logger.info(
        "%s scan: %d file(s) selected, %d analysed, %d finding(s), score %d",
        tool,
        len(selected),
        len(analyses),
        len(findings),
        score,
    )

    return ScanResult(
        tool=tool,
        root=str(root),
        files=tuple(analysis.file for analysis in analyses),
        analyses=tuple(analyses),
        findings=findings,
        counts_by_severity=severity_counts(findings),
        score=score,
        status=status,
        pass_threshold=config.pass_threshold,
        critical_threshold=config.critical_threshold,
        warnings=tuple(warnings),
        duration_seconds=time.perf_counter() - started_at,
    )
