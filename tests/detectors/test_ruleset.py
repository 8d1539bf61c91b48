"""Tests for composition and testability rule tables."""

from __future__ import annotations

from dataclasses import replace

from tcalint.config import TcalintConfig
from tcalint.detectors import composition_rules, rules_for_tool
from tcalint.detectors import testability_rules as build_testability_rules
from tcalint.types.config import RuleToggleConfig, ThresholdConfig


def test_composition_rule_table_defaults() -> None:
    rules = composition_rules(TcalintConfig())

    assert [(rule.code, rule.rule_id, rule.severity, rule.threshold, rule.weight) for rule in rules] == [
        ("1.1", "STATE_PROPERTIES", "high", 15, -10),
        ("1.1", "ACTION_CASES", "high", 40, -10),
        ("1.2", "CLOSURE_INJECTION", "high", 0, -10),
        ("1.3", "DUPLICATE_ACTIONS", "medium", 0, -5),
        ("1.4", "VAGUE_METHODS", "low", 3, -2),
        ("1.5", "CHILD_FEATURES", "medium", 5, -5),
    ]


def test_testability_rule_table_defaults() -> None:
    rules = {rule.code: rule for rule in build_testability_rules(TcalintConfig())}

    assert rules["T1"].score_delta(3) == -30
    assert rules["T2"].classification == "healthy"
    assert rules["T2"].score_delta(4) == 8
    assert rules["T3"].threshold == 5
    assert rules["T3"].score_delta(9) == -5
    assert rules["T4"].score_delta(2) == 0


def test_thresholds_come_from_config() -> None:
    config = replace(TcalintConfig(), thresholds=ThresholdConfig(state_properties=20))

    rule = composition_rules(config)[0]

    assert rule.threshold == 20
    assert rule.render_message(21) == "State has 21 properties (threshold: 20) - consider extracting features"


def test_disabled_rule_ids_are_dropped() -> None:
    config = replace(TcalintConfig(), rules=RuleToggleConfig(disabled=("CLOSURE_INJECTION",)))

    assert "CLOSURE_INJECTION" not in {rule.rule_id for rule in composition_rules(config)}
    assert "CLOSURE_INJECTION" not in {rule.rule_id for rule in build_testability_rules(config)}


def test_analysis_tools_have_no_scored_rules() -> None:
    assert rules_for_tool("graph", TcalintConfig()) == ()
    assert rules_for_tool("recommend", TcalintConfig()) == ()
