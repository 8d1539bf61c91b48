"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "TCALINT"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ TCALINT",
    "     // composition checks for TCA reducers",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} reducer scanner"))

COMPOSITION_TITLE: str = "Composition validation"
TESTABILITY_TITLE: str = "Testability assessment"
GRAPH_TITLE: str = "Dependency graph analysis"
RECOMMEND_TITLE: str = "Extraction recommendations"

PATTERNS_REFERENCE: str = "AGENTS-TCA-PATTERNS.md"
