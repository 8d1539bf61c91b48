"""Typed configuration structures for tcalint scanner settings."""

from __future__ import annotations

from dataclasses import dataclass

from tcalint.constants.config import DEFAULT_THRESHOLDS, DEFAULT_WEIGHTS


@dataclass(frozen=True)
class ThresholdConfig:
    """Counts above which a rule fires."""

    state_properties: int = DEFAULT_THRESHOLDS["state_properties"]
    action_cases: int = DEFAULT_THRESHOLDS["action_cases"]
    child_features: int = DEFAULT_THRESHOLDS["child_features"]
    vague_methods: int = DEFAULT_THRESHOLDS["vague_methods"]
    effect_handlers: int = DEFAULT_THRESHOLDS["effect_handlers"]
    helper_methods: int = DEFAULT_THRESHOLDS["helper_methods"]
    large_state_properties: int = DEFAULT_THRESHOLDS["large_state_properties"]


@dataclass(frozen=True)
class WeightConfig:
    """Signed score contributions applied by the scorers."""

    closure_injection: int = DEFAULT_WEIGHTS["closure_injection"]
    effect_handlers: int = DEFAULT_WEIGHTS["effect_handlers"]
    dependency_client: int = DEFAULT_WEIGHTS["dependency_client"]
    high_violation: int = DEFAULT_WEIGHTS["high_violation"]
    medium_violation: int = DEFAULT_WEIGHTS["medium_violation"]
    low_violation: int = DEFAULT_WEIGHTS["low_violation"]


@dataclass(frozen=True)
class RuleToggleConfig:
    """Rule enablement toggles."""

    disabled: tuple[str, ...] = ()
