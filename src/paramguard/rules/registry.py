"""Central predicate registry.

Maps check kind tags to their predicate functions. Only registered kinds
produce findings; any other kind is skipped at evaluation time.
"""

from __future__ import annotations

from typing import Any

from paramguard.constants.checks import (
    CHECK_COMBINED_CONDITIONS,
    CHECK_CONDITIONAL_MISSING,
    CHECK_FIELD_CHECK,
    CHECK_FIELD_EXISTS,
    CHECK_MISSING_FIELD,
    CHECK_MISSING_FIELDS,
    CHECK_NUMERIC_RANGE,
    CHECK_PATTERN_MATCH,
    CHECK_STOP_SEQUENCE_COMPLEXITY,
)
from paramguard.rules.operations.numeric import run_combined_conditions, run_numeric_range
from paramguard.rules.operations.presence import (
    run_conditional_missing,
    run_field_exists,
    run_missing_field,
    run_missing_fields,
)
from paramguard.rules.operations.sequences import run_stop_sequence_complexity
from paramguard.rules.operations.text_match import run_field_check, run_pattern_match

CHECK_REGISTRY: dict[str, Any] = {
    CHECK_PATTERN_MATCH: run_pattern_match,
    CHECK_NUMERIC_RANGE: run_numeric_range,
    CHECK_MISSING_FIELD: run_missing_field,
    CHECK_MISSING_FIELDS: run_missing_fields,
    CHECK_FIELD_EXISTS: run_field_exists,
    CHECK_COMBINED_CONDITIONS: run_combined_conditions,
    CHECK_CONDITIONAL_MISSING: run_conditional_missing,
    CHECK_FIELD_CHECK: run_field_check,
    CHECK_STOP_SEQUENCE_COMPLEXITY: run_stop_sequence_complexity,
}
