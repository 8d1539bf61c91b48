"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # value out of range
CFG007: str = "CFG007"  # contradictory thresholds
CFG008: str = "CFG008"  # unknown rule id
CFG010: str = "CFG010"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "include_globs",
        "exclude_dirs",
        "max_file_mb",
        "pass_threshold",
        "critical_threshold",
        "thresholds",
        "weights",
        "rules",
    }
)
ALLOWED_RULES_KEYS: frozenset[str] = frozenset({"disabled"})
LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("include_globs", "exclude_dirs")

KEY_SUGGESTION_CUTOFF: float = 0.6
