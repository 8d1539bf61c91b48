"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "tcalint.yaml"
DEFAULT_MAX_FILE_MB: int = 2

DEFAULT_INCLUDE_GLOBS: tuple[str, ...] = ("*Feature.swift", "*Reducer.swift")
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (".build", "Pods", ".git", "DerivedData", "Carthage")

DEFAULT_PASS_THRESHOLD: int = 75
DEFAULT_CRITICAL_THRESHOLD: int = 50

DEFAULT_THRESHOLDS: dict[str, int] = {
    "state_properties": 15,
    "action_cases": 40,
    "child_features": 5,
    "vague_methods": 3,
    "effect_handlers": 5,
    "helper_methods": 5,
    "large_state_properties": 25,
}

DEFAULT_WEIGHTS: dict[str, int] = {
    "closure_injection": -10,
    "effect_handlers": -5,
    "dependency_client": 2,
    "high_violation": -10,
    "medium_violation": -5,
    "low_violation": -2,
}
