"""Dependency graph analysis: per-reducer coupling estimates."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from tcalint.constants.scoring import TIER_ORDER
from tcalint.model import ComplexityEntry, FileAnalysis, GraphReport, ScanResult
from tcalint.scanner.score import complexity_score, complexity_tier
from tcalint.types import ComplexityTier

logger = logging.getLogger(__name__)


def complexity_entry(analysis: FileAnalysis) -> ComplexityEntry | None:
    """Build the graph entry for one file, or ``None`` when it has no state block."""
    state = analysis.detection("STATE_BLOCK")
    if not state.labels:
        return None

    reduce_blocks = analysis.count("REDUCE_BLOCKS")
    update_methods = analysis.count("UPDATE_METHODS")
    score = complexity_score(reduce_blocks, update_methods)
    return ComplexityEntry(
        file=analysis.file,
        name=PurePosixPath(analysis.file).name,
        properties=state.labels,
        reduce_blocks=reduce_blocks,
        update_methods=update_methods,
        sync_points=analysis.count("SYNC_POINTS"),
        complexity_score=score,
        tier=complexity_tier(score),
    )


def build_graph_report(result: ScanResult) -> GraphReport:
    """Summarise coupling for every analysed file that declares a state block."""
    entries: list[ComplexityEntry] = []
    for analysis in result.analyses:
        entry = complexity_entry(analysis)
        if entry is None:
            logger.debug("No state block in %s; skipping graph entry", analysis.file)
            continue
        entries.append(entry)

    tier_counts: dict[ComplexityTier, int] = {tier: 0 for tier in TIER_ORDER}
    for entry in entries:
        tier_counts[entry.tier] += 1

    return GraphReport(
        files_analyzed=result.files_analyzed,
        entries=tuple(entries),
        total_sync_points=sum(entry.sync_points for entry in entries),
        tier_counts=tier_counts,
    )
