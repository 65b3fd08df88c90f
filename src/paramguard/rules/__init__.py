"""Rule model, rule document loader and evaluation engine."""

from __future__ import annotations

from .engine import RuleEngine, evaluate_rule
from .loader import load_bundled_rule_set, load_rule_set, parse_rule_document
from .schema import Rule, RuleSet

__all__ = [
    "Rule",
    "RuleEngine",
    "RuleSet",
    "evaluate_rule",
    "load_bundled_rule_set",
    "load_rule_set",
    "parse_rule_document",
]
