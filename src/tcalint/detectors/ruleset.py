"""Static rule tables binding detectors to severity, thresholds and weights.

Each scan command selects its own rule set; the evaluator and scorer are
shared.  Thresholds and weights come from :class:`TcalintConfig` so they can
be tuned per project without touching the rule definitions.
"""

from __future__ import annotations

from tcalint.config.model import TcalintConfig
from tcalint.model import Rule
from tcalint.types import Severity, ToolName


def _violation_weight(config: TcalintConfig, severity: Severity) -> int:
    weights = config.weights
    return {
        "high": weights.high_violation,
        "medium": weights.medium_violation,
        "low": weights.low_violation,
    }[severity]


def composition_rules(config: TcalintConfig) -> tuple[Rule, ...]:
    """Rules 1.1-1.5 of the composition validator."""
    thresholds = config.thresholds
    rules = (
        Rule(
            rule_id="STATE_PROPERTIES",
            code="1.1",
            title="Monolithic Feature",
            severity="high",
            threshold=thresholds.state_properties,
            weight=_violation_weight(config, "high"),
            message="State has {count} properties (threshold: {threshold}) - consider extracting features",
            recommendation=f"Extract features when State > {thresholds.state_properties} properties",
        ),
        Rule(
            rule_id="ACTION_CASES",
            code="1.1",
            title="Monolithic Feature",
            severity="high",
            threshold=thresholds.action_cases,
            weight=_violation_weight(config, "high"),
            message="Action enum has {count} cases (threshold: {threshold}) - indicates multiple features",
            recommendation=f"Extract features when Actions > {thresholds.action_cases} cases",
        ),
        Rule(
            rule_id="CLOSURE_INJECTION",
            code="1.2",
            title="Closure Dependency Injection",
            severity="high",
            threshold=0,
            weight=_violation_weight(config, "high"),
            message="Found {count} closure injection pattern(s) - use @Dependency instead",
            recommendation="Replace closure injection with @Dependency declarations",
        ),
        Rule(
            rule_id="DUPLICATE_ACTIONS",
            code="1.3",
            title="Code Duplication",
            severity="medium",
            threshold=0,
            weight=_violation_weight(config, "medium"),
            message="Found {count} duplicate action case(s) - consolidate into single handler",
            recommendation="Handle each action in exactly one place",
        ),
        Rule(
            rule_id="VAGUE_METHODS",
            code="1.4",
            title="Unclear Organization",
            severity="low",
            threshold=thresholds.vague_methods,
            weight=_violation_weight(config, "low"),
            message="Found {count} vague reducer methods - clarify boundaries",
            recommendation="Name reducer helpers after the feature they serve",
        ),
        Rule(
            rule_id="CHILD_FEATURES",
            code="1.5",
            title="Tight Coupling",
            severity="medium",
            threshold=thresholds.child_features,
            weight=_violation_weight(config, "medium"),
            message="Found {count} child features - may have cascading update complexity",
            recommendation="Reduce the number of child features held in one State",
        ),
    )
    return _enabled(rules, config)


def testability_rules(config: TcalintConfig) -> tuple[Rule, ...]:
    """Rules feeding the testability score.

    Only closure injection and effect-handler density move the score down;
    ``@Dependency`` usage is the single healthy pattern that moves it up.
    """
    thresholds = config.thresholds
    weights = config.weights
    rules = (
        Rule(
            rule_id="CLOSURE_INJECTION",
            code="T1",
            title="Closure Injection",
            severity="high",
            threshold=0,
            weight=weights.closure_injection,
            weight_mode="per_match",
            message="{count} closure injection(s) - prevents isolated unit testing",
            recommendation="Replace closure injection with @Dependency",
        ),
        Rule(
            rule_id="DEPENDENCY_CLIENT",
            code="T2",
            title="Dependency Client",
            severity="low",
            threshold=0,
            weight=weights.dependency_client,
            weight_mode="per_match",
            classification="healthy",
            message="{count} @Dependency declaration(s)",
            recommendation="Continue using the @Dependency pattern",
        ),
        Rule(
            rule_id="EFFECT_HANDLERS",
            code="T3",
            title="Complex Effects",
            severity="medium",
            threshold=thresholds.effect_handlers,
            weight=weights.effect_handlers,
            message="{count} effect handlers - ensure comprehensive testing",
            recommendation="Split effect-heavy reducers and cover each .run with a TestStore test",
        ),
        Rule(
            rule_id="DUPLICATE_ACTIONS",
            code="T4",
            title="Duplicate Handlers",
            severity="medium",
            threshold=0,
            weight=0,
            message="{count} duplicate action handlers - consolidate for single test point",
            recommendation="Consolidate duplicate logic",
        ),
    )
    return _enabled(rules, config)


def rules_for_tool(tool: ToolName, config: TcalintConfig) -> tuple[Rule, ...]:
    """Return the rule set scored by ``tool``; analysis-only tools score nothing."""
    if tool == "composition":
        return composition_rules(config)
    if tool == "testability":
        return testability_rules(config)
    return ()


def _enabled(rules: tuple[Rule, ...], config: TcalintConfig) -> tuple[Rule, ...]:
    return tuple(rule for rule in rules if config.is_rule_enabled(rule.rule_id))
