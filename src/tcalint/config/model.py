"""Config data model for tcalint scans."""

from __future__ import annotations

from dataclasses import dataclass

from tcalint.constants.config import (
    DEFAULT_CRITICAL_THRESHOLD,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_INCLUDE_GLOBS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_PASS_THRESHOLD,
)
from tcalint.types.config import RuleToggleConfig, ThresholdConfig, WeightConfig


@dataclass(frozen=True)
class TcalintConfig:
    """Resolved scanner config."""

    include_globs: tuple[str, ...] = DEFAULT_INCLUDE_GLOBS
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    pass_threshold: int = DEFAULT_PASS_THRESHOLD
    critical_threshold: int = DEFAULT_CRITICAL_THRESHOLD
    thresholds: ThresholdConfig = ThresholdConfig()
    weights: WeightConfig = WeightConfig()
    rules: RuleToggleConfig = RuleToggleConfig()

    def is_rule_enabled(self, rule_id: str) -> bool:
        return rule_id not in self.rules.disabled
