"""Detector package for tcalint."""

from .base import Detector, LinePatternDetector
from .rules import DETECTOR_CLASSES, build_detectors
from .ruleset import composition_rules, rules_for_tool, testability_rules

__all__ = [
    "DETECTOR_CLASSES",
    "Detector",
    "LinePatternDetector",
    "build_detectors",
    "composition_rules",
    "rules_for_tool",
    "testability_rules",
]
