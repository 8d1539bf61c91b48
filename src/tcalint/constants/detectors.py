"""Regex patterns used by the reducer detectors."""

from __future__ import annotations

import re

STATE_PROPERTY_PATTERN: re.Pattern[str] = re.compile(r"^\s*var ")
ACTION_CASE_PATTERN: re.Pattern[str] = re.compile(r"^\s*case ")
CLOSURE_INJECTION_PATTERN: re.Pattern[str] = re.compile(r"var\s+\w+:\s*\([^)]*\)\s*->\s*(Effect|some\s+Effect)")
VAGUE_METHOD_PATTERN: re.Pattern[str] = re.compile(
    r"^\s*private\s+func\s+(.*Features|.*Reducers|utility|helper|misc)"
)
CHILD_FEATURE_PATTERN: re.Pattern[str] = re.compile(r"@Presents\s+var|var\s+\w+:\s*\w+Feature\.State\?")
EFFECT_HANDLER_PATTERN: re.Pattern[str] = re.compile(r"\.run\s*\{")
DEPENDENCY_CLIENT_PATTERN: re.Pattern[str] = re.compile(r"@Dependency")
REDUCE_BLOCK_PATTERN: re.Pattern[str] = re.compile(r"Reduce \{")
UPDATE_METHOD_PATTERN: re.Pattern[str] = re.compile(r"^\s*private\s*func.*\{")
HELPER_METHOD_PATTERN: re.Pattern[str] = re.compile(r"^\s*private\s*func")
SYNC_POINT_PATTERN: re.Pattern[str] = re.compile(r"@ObservableState|Reduce")

ACTION_LABEL_PATTERN: re.Pattern[str] = re.compile(r"case \.[a-zA-Z_][a-zA-Z0-9_]*")
STATE_START_PATTERN: re.Pattern[str] = re.compile(r"@ObservableState|struct State")
STATE_END_PATTERN: re.Pattern[str] = re.compile(r"^}")
STATE_VAR_NAME_PATTERN: re.Pattern[str] = re.compile(r"^\s*var\s+(?P<name>\w+)")

RULE_IDS: tuple[str, ...] = (
    "STATE_PROPERTIES",
    "ACTION_CASES",
    "CLOSURE_INJECTION",
    "DUPLICATE_ACTIONS",
    "VAGUE_METHODS",
    "CHILD_FEATURES",
    "EFFECT_HANDLERS",
    "DEPENDENCY_CLIENT",
    "REDUCE_BLOCKS",
    "UPDATE_METHODS",
    "HELPER_METHODS",
    "SYNC_POINTS",
    "STATE_BLOCK",
)
