"""Constants for score bounds, status mapping and complexity tiers."""

from __future__ import annotations

BASE_SCORE: int = 100
MIN_SCORE: int = 0
MAX_SCORE: int = 100

SEVERITY_ORDER: tuple[str, ...] = ("high", "medium", "low")

# Complexity score = 2 * reduce blocks + update methods.
COMPLEXITY_REDUCE_WEIGHT: int = 2
COMPLEXITY_MONITOR_MIN: int = 8
COMPLEXITY_REFACTOR_MIN: int = 16

TIER_ORDER: tuple[str, ...] = ("healthy", "monitor", "refactor")

PROGRESS_BAR_WIDTH: int = 10
