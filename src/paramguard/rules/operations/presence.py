"""Field presence predicates: missing_field, missing_fields, field_exists, conditional_missing."""

from __future__ import annotations

from paramguard.constants.checks import LOCATION_SEPARATOR
from paramguard.rules.context import NO_VIOLATION, EvalContext, Outcome, violation
from paramguard.rules.schema import (
    ConditionalMissingCheck,
    FieldExistsCheck,
    MissingFieldCheck,
    MissingFieldsCheck,
)


def run_missing_field(ctx: EvalContext, check: MissingFieldCheck) -> Outcome:
    """Violate when the named field occurs nowhere in the tree."""
    if ctx.tree.field_exists(check.field):
        return NO_VIOLATION
    return violation(check.field)


def run_missing_fields(ctx: EvalContext, check: MissingFieldsCheck) -> Outcome:
    """Violate only when every listed field is absent; any one present suppresses."""
    if not check.fields:
        return NO_VIOLATION
    if any(ctx.tree.field_exists(name) for name in check.fields):
        return NO_VIOLATION
    return violation(LOCATION_SEPARATOR.join(check.fields))


def run_field_exists(ctx: EvalContext, check: FieldExistsCheck) -> Outcome:
    """Violate when a field that must never appear is present at any depth."""
    if ctx.tree.field_exists(check.field):
        return violation(check.field)
    return NO_VIOLATION


def run_conditional_missing(ctx: EvalContext, check: ConditionalMissingCheck) -> Outcome:
    """Violate when a trigger field is configured but none of its companions are."""
    if not check.missing_all:
        return NO_VIOLATION
    if not any(ctx.tree.field_exists(name) for name in check.has_any):
        return NO_VIOLATION
    if any(ctx.tree.field_exists(name) for name in check.missing_all):
        return NO_VIOLATION
    return violation(LOCATION_SEPARATOR.join(check.missing_all))
