"""Deterministic rule engine.

Evaluates every rule of a RuleSet against one parsed config tree and
produces findings in rule order. Evaluation never raises: incomplete or
unrecognized checks simply do not violate.
"""

from __future__ import annotations

import logging

from paramguard.exceptions import RuleEngineError
from paramguard.model import ConfigTree, Finding
from paramguard.rules.context import EvalContext
from paramguard.rules.registry import CHECK_REGISTRY
from paramguard.rules.schema import Rule, RuleSet

logger = logging.getLogger(__name__)


def evaluate_rule(rule: Rule, tree: ConfigTree) -> Finding | None:
    """Evaluate one rule against one config, yielding zero or one finding."""
    predicate = CHECK_REGISTRY.get(rule.check.kind)
    if predicate is None:
        logger.debug("Skipping rule %s: unrecognized check type %r", rule.id, rule.check.kind)
        return None

    outcome = predicate(EvalContext(rule=rule, tree=tree), rule.check)
    if not outcome.violated:
        return None

    return Finding(
        rule_id=rule.id,
        name=rule.name,
        severity=rule.severity,
        category=rule.category,
        description=rule.description,
        location=outcome.location,
        recommendation=rule.recommendation,
        references=rule.references,
    )


class RuleEngine:
    """Runs a loaded RuleSet against parsed config trees."""

    def __init__(self, rule_set: RuleSet) -> None:
        self._rule_set = rule_set

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    @property
    def rule_ids(self) -> list[str]:
        """Loaded rule IDs in evaluation order."""
        return self._rule_set.rule_ids

    @property
    def rule_count(self) -> int:
        """Number of loaded rules."""
        return len(self._rule_set)

    def run_all(self, tree: ConfigTree) -> list[Finding]:
        """Execute every rule against ``tree`` and collect findings in rule order."""
        findings: list[Finding] = []
        for rule in self._rule_set.rules:
            finding = evaluate_rule(rule, tree)
            if finding is not None:
                findings.append(finding)
        logger.debug("%s: %d rule(s) evaluated, %d finding(s)", tree.source, self.rule_count, len(findings))
        return findings

    def run_rule(self, rule_id: str, tree: ConfigTree) -> Finding | None:
        """Execute a single rule by ID."""
        rule = self._rule_set.get(rule_id)
        if rule is None:
            raise RuleEngineError(f"Rule '{rule_id}' not loaded")
        return evaluate_rule(rule, tree)
