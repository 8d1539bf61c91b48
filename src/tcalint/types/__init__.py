"""Shared type aliases for tcalint."""

from .common import (
    Classification,
    ComplexityTier,
    JsonObject,
    JsonScalar,
    JsonValue,
    Priority,
    Severity,
    Status,
    ToolName,
    WeightMode,
)
from .config import RuleToggleConfig, ThresholdConfig, WeightConfig

__all__ = [
    "Classification",
    "ComplexityTier",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Priority",
    "RuleToggleConfig",
    "Severity",
    "Status",
    "ThresholdConfig",
    "ToolName",
    "WeightConfig",
    "WeightMode",
]
