"""Check kind tags and literals recognized by the rule evaluator."""

from __future__ import annotations

CHECK_PATTERN_MATCH: str = "pattern_match"
CHECK_NUMERIC_RANGE: str = "numeric_range"
CHECK_MISSING_FIELD: str = "missing_field"
CHECK_MISSING_FIELDS: str = "missing_fields"
CHECK_FIELD_EXISTS: str = "field_exists"
CHECK_COMBINED_CONDITIONS: str = "combined_conditions"
CHECK_CONDITIONAL_MISSING: str = "conditional_missing"
CHECK_FIELD_CHECK: str = "field_check"
CHECK_STOP_SEQUENCE_COMPLEXITY: str = "stop_sequence_complexity"

KNOWN_CHECK_TYPES: frozenset[str] = frozenset(
    {
        CHECK_PATTERN_MATCH,
        CHECK_NUMERIC_RANGE,
        CHECK_MISSING_FIELD,
        CHECK_MISSING_FIELDS,
        CHECK_FIELD_EXISTS,
        CHECK_COMBINED_CONDITIONS,
        CHECK_CONDITIONAL_MISSING,
        CHECK_FIELD_CHECK,
        CHECK_STOP_SEQUENCE_COMPLEXITY,
    }
)

OPERATOR_GREATER_THAN: str = "greater_than"
OPERATOR_EQUALS: str = "equals"
OPERATOR_NOT_EQUALS: str = "not_equals"

REQUIRE_ALL: str = "all"
REQUIRE_AT_LEAST_TWO: str = "at_least_two"
REQUIRE_BOTH: str = "both"
REQUIRE_ANY: str = "any"

# Activates the numeric range test even when min and max are both zero.
CONDITION_ANY_VALUE_EXCEEDS: str = "any_value_exceeds"

CONTENT_LOCATION: str = "config content"
LOCATION_SEPARATOR: str = ", "
