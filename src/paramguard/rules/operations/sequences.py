"""Stop sequence complexity predicate."""

from __future__ import annotations

from paramguard.rules.context import NO_VIOLATION, EvalContext, Outcome, violation
from paramguard.rules.schema import StopSequenceComplexityCheck


def run_stop_sequence_complexity(ctx: EvalContext, check: StopSequenceComplexityCheck) -> Outcome:
    """Flag too many stop sequences, or any single sequence that is too long.

    A zero limit disables that half of the test.
    """
    if not check.field:
        return NO_VIOLATION

    for candidate in ctx.tree.collect_values(check.field):
        if isinstance(candidate, list | tuple):
            if check.max_sequences > 0 and len(candidate) > check.max_sequences:
                return violation(check.field)
            if check.max_length > 0 and any(
                isinstance(item, str) and len(item) > check.max_length for item in candidate
            ):
                return violation(check.field)
        elif isinstance(candidate, str):
            if check.max_length > 0 and len(candidate) > check.max_length:
                return violation(check.field)
    return NO_VIOLATION
