"""Constants for structured output, atomic writing and stdout formatting."""

from __future__ import annotations

SCHEMA_VERSION: str = "1.0.0"

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

EXIT_OK: int = 0
EXIT_GATE_FAILED: int = 1
EXIT_CONFIG_ERROR: int = 2

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

SEVERITY_COLORS: dict[str, str] = {
    "high": ANSI_RED,
    "medium": ANSI_YELLOW,
    "low": ANSI_GREEN,
}

SEVERITY_LABELS: dict[str, str] = {
    "high": "HIGH (blocking)",
    "medium": "MEDIUM (important)",
    "low": "LOW (guidance)",
}

STATUS_COLORS: dict[str, str] = {
    "pass": ANSI_GREEN,
    "needs_work": ANSI_YELLOW,
    "critical": ANSI_RED,
}

TIER_COLORS: dict[str, str] = {
    "healthy": ANSI_GREEN,
    "monitor": ANSI_YELLOW,
    "refactor": ANSI_RED,
}

SEPARATOR: str = "─" * 60
