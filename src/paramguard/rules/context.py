"""Immutable evaluation context and predicate outcome."""

from __future__ import annotations

from dataclasses import dataclass

from paramguard.model import ConfigTree
from paramguard.rules.schema import Rule


@dataclass(frozen=True)
class EvalContext:
    """Immutable context for a single rule evaluation against one config."""

    rule: Rule
    tree: ConfigTree


@dataclass(frozen=True)
class Outcome:
    """Predicate result: whether the rule is violated and where."""

    violated: bool
    location: str = ""


NO_VIOLATION: Outcome = Outcome(violated=False)


def violation(location: str) -> Outcome:
    return Outcome(violated=True, location=location)
