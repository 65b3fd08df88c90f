"""Numeric predicates: numeric_range and combined_conditions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from paramguard.constants.checks import (
    CONDITION_ANY_VALUE_EXCEEDS,
    LOCATION_SEPARATOR,
    OPERATOR_EQUALS,
    OPERATOR_GREATER_THAN,
    OPERATOR_NOT_EQUALS,
    REQUIRE_ALL,
    REQUIRE_ANY,
    REQUIRE_AT_LEAST_TWO,
    REQUIRE_BOTH,
)
from paramguard.model import ConfigTree
from paramguard.rules.context import NO_VIOLATION, EvalContext, Outcome, violation
from paramguard.rules.operations.shared import stringify, to_number
from paramguard.rules.schema import CombinedConditionsCheck, Condition, NumericRangeCheck

# (satisfied_count, total_conditions) -> violated
_REQUIREMENTS: dict[str, Callable[[int, int], bool]] = {
    REQUIRE_ALL: lambda met, total: met == total,
    REQUIRE_AT_LEAST_TWO: lambda met, total: met >= 2,
    REQUIRE_BOTH: lambda met, total: met == 2,
    REQUIRE_ANY: lambda met, total: met >= 1,
}


def run_numeric_range(ctx: EvalContext, check: NumericRangeCheck) -> Outcome:
    """Violate when a numeric candidate of a target parameter is outside [min, max].

    A single ``parameter`` takes precedence over ``parameters``; with several
    parameters the first violator wins. The range test is inactive when both
    bounds are zero, unless the check's condition is ``any_value_exceeds``.
    """
    if not _range_active(check):
        return NO_VIOLATION

    if check.parameter:
        return _check_parameter(ctx.tree, check.parameter, check)

    for parameter in check.parameters:
        outcome = _check_parameter(ctx.tree, parameter, check)
        if outcome.violated:
            return outcome
    return NO_VIOLATION


def run_combined_conditions(ctx: EvalContext, check: CombinedConditionsCheck) -> Outcome:
    """Count satisfied sub-conditions and apply the ``require`` aggregation policy."""
    if not check.conditions:
        return NO_VIOLATION

    satisfied = [condition.parameter for condition in check.conditions if _condition_met(ctx.tree, condition)]

    requirement = _REQUIREMENTS.get(check.require)
    if requirement is None or not requirement(len(satisfied), len(check.conditions)):
        return NO_VIOLATION
    return violation(LOCATION_SEPARATOR.join(satisfied))


def _range_active(check: NumericRangeCheck) -> bool:
    if check.condition == CONDITION_ANY_VALUE_EXCEEDS:
        return True
    return check.min_value != 0 or check.max_value != 0


def _check_parameter(tree: ConfigTree, parameter: str, check: NumericRangeCheck) -> Outcome:
    for candidate in tree.collect_values(parameter):
        number = to_number(candidate)
        if number is None:
            continue
        if number < check.min_value or number > check.max_value:
            return violation(parameter)
    return NO_VIOLATION


def _condition_met(tree: ConfigTree, condition: Condition) -> bool:
    """A condition holds when any candidate of its parameter satisfies the operator."""
    return any(
        _compare(candidate, condition.operator, condition.value)
        for candidate in tree.collect_values(condition.parameter)
    )


def _compare(candidate: Any, operator: str, expected: Any) -> bool:
    if operator == OPERATOR_GREATER_THAN:
        number = to_number(candidate)
        threshold = to_number(expected)
        return number is not None and threshold is not None and number > threshold
    if operator == OPERATOR_EQUALS:
        return stringify(candidate) == stringify(expected)
    if operator == OPERATOR_NOT_EQUALS:
        return stringify(candidate) != stringify(expected)
    return False
