"""Text predicates: pattern_match and field_check."""

from __future__ import annotations

from paramguard.constants.checks import CONTENT_LOCATION
from paramguard.rules.context import NO_VIOLATION, EvalContext, Outcome, violation
from paramguard.rules.operations.shared import pattern_matches, stringify
from paramguard.rules.schema import FieldCheck, PatternMatchCheck


def run_pattern_match(ctx: EvalContext, check: PatternMatchCheck) -> Outcome:
    """Search patterns in scoped string values, or in the whole content corpus.

    When the rule lists ``fields``, only string values stored under those keys
    (at any depth) are searched and the location is the matching field name.
    Without ``fields`` every string in the config is searched at once.
    """
    if not check.patterns:
        return NO_VIOLATION

    if ctx.rule.fields:
        for name in ctx.rule.fields:
            for candidate in ctx.tree.collect_values(name):
                if not isinstance(candidate, str):
                    continue
                if any(pattern_matches(pattern, candidate) for pattern in check.patterns):
                    return violation(name)
        return NO_VIOLATION

    corpus = ctx.tree.content_corpus()
    if any(pattern_matches(pattern, corpus) for pattern in check.patterns):
        return violation(CONTENT_LOCATION)
    return NO_VIOLATION


def run_field_check(ctx: EvalContext, check: FieldCheck) -> Outcome:
    """Violate when any candidate of a listed field equals a forbidden value."""
    forbidden = {stringify(value) for value in check.values}
    if not forbidden:
        return NO_VIOLATION

    for name in check.fields:
        for candidate in ctx.tree.collect_values(name):
            if stringify(candidate) in forbidden:
                return violation(name)
    return NO_VIOLATION
