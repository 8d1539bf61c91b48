"""Detector implementations for reducer source files."""

from __future__ import annotations

from tcalint.constants.detectors import (
    ACTION_CASE_PATTERN,
    ACTION_LABEL_PATTERN,
    CHILD_FEATURE_PATTERN,
    CLOSURE_INJECTION_PATTERN,
    DEPENDENCY_CLIENT_PATTERN,
    EFFECT_HANDLER_PATTERN,
    HELPER_METHOD_PATTERN,
    REDUCE_BLOCK_PATTERN,
    STATE_END_PATTERN,
    STATE_PROPERTY_PATTERN,
    STATE_START_PATTERN,
    STATE_VAR_NAME_PATTERN,
    SYNC_POINT_PATTERN,
    UPDATE_METHOD_PATTERN,
    VAGUE_METHOD_PATTERN,
)
from tcalint.detectors.base import Detector, LinePatternDetector
from tcalint.detectors.common import block_lines, duplicated_labels, occurrences
from tcalint.model import Detection


class StatePropertiesDetector(LinePatternDetector):
    """Count ``var`` declarations anywhere in the file."""

    rule_id = "STATE_PROPERTIES"
    pattern = STATE_PROPERTY_PATTERN


class ActionCasesDetector(LinePatternDetector):
    """Count lines opening with ``case``: enum cases and switch arms alike."""

    rule_id = "ACTION_CASES"
    pattern = ACTION_CASE_PATTERN


class ClosureInjectionDetector(LinePatternDetector):
    """Detect closure-typed properties returning an Effect (``var x: (...) -> Effect``)."""

    rule_id = "CLOSURE_INJECTION"
    pattern = CLOSURE_INJECTION_PATTERN


class VagueMethodsDetector(LinePatternDetector):
    """Detect private helpers with catch-all names (``helper``, ``misc``, ``...Features``)."""

    rule_id = "VAGUE_METHODS"
    pattern = VAGUE_METHOD_PATTERN


class ChildFeaturesDetector(LinePatternDetector):
    """Detect ``@Presents`` and optional child ``Feature.State`` properties."""

    rule_id = "CHILD_FEATURES"
    pattern = CHILD_FEATURE_PATTERN


class EffectHandlersDetector(LinePatternDetector):
    rule_id = "EFFECT_HANDLERS"
    pattern = EFFECT_HANDLER_PATTERN


class DependencyClientDetector(LinePatternDetector):
    rule_id = "DEPENDENCY_CLIENT"
    pattern = DEPENDENCY_CLIENT_PATTERN


class ReduceBlocksDetector(LinePatternDetector):
    rule_id = "REDUCE_BLOCKS"
    pattern = REDUCE_BLOCK_PATTERN


class UpdateMethodsDetector(LinePatternDetector):
    """Count private methods whose body opens on the declaration line."""

    rule_id = "UPDATE_METHODS"
    pattern = UPDATE_METHOD_PATTERN


class HelperMethodsDetector(LinePatternDetector):
    rule_id = "HELPER_METHODS"
    pattern = HELPER_METHOD_PATTERN


class SyncPointsDetector(LinePatternDetector):
    rule_id = "SYNC_POINTS"
    pattern = SYNC_POINT_PATTERN


class DuplicateActionsDetector(Detector):
    """Detect action case labels (``case .name``) handled more than once."""

    rule_id = "DUPLICATE_ACTIONS"

    def detect(self, text: str) -> Detection:
        matches = occurrences(text, ACTION_LABEL_PATTERN)
        labels = duplicated_labels(matches)
        if not labels:
            return Detection()
        duplicated = set(labels)
        lines = tuple(sorted({line for line, label in matches if label in duplicated}))
        return Detection(count=len(labels), lines=lines, labels=labels)


class StateBlockDetector(Detector):
    """Collect property names declared inside the first ``State`` block."""

    rule_id = "STATE_BLOCK"

    def detect(self, text: str) -> Detection:
        names: list[str] = []
        lines: list[int] = []
        for number, line in block_lines(text, STATE_START_PATTERN, STATE_END_PATTERN):
            match = STATE_VAR_NAME_PATTERN.match(line)
            if match is None:
                continue
            names.append(match.group("name"))
            lines.append(number)
        return Detection(count=len(names), lines=tuple(lines), labels=tuple(names))


DETECTOR_CLASSES: tuple[type[Detector], ...] = (
    StatePropertiesDetector,
    ActionCasesDetector,
    ClosureInjectionDetector,
    DuplicateActionsDetector,
    VagueMethodsDetector,
    ChildFeaturesDetector,
    EffectHandlersDetector,
    DependencyClientDetector,
    ReduceBlocksDetector,
    UpdateMethodsDetector,
    HelperMethodsDetector,
    SyncPointsDetector,
    StateBlockDetector,
)


def build_detectors(rule_ids: tuple[str, ...] | None = None) -> list[Detector]:
    """Instantiate detectors, optionally restricted to ``rule_ids``, in registry order."""
    selected = set(rule_ids) if rule_ids is not None else None
    return [cls() for cls in DETECTOR_CLASSES if selected is None or cls.rule_id in selected]
