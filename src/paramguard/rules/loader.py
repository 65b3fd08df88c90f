"""Rule document loader.

Decodes a rule document into a RuleSet. Only structure is checked: a value
of the wrong shape raises RuleLoadError, while unknown check types, empty
parameters and unconventional severities are accepted as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

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
from paramguard.constants.config import BUNDLED_RULES_FILENAME
from paramguard.exceptions import RuleLoadError
from paramguard.rules.schema import (
    Check,
    CombinedConditionsCheck,
    Condition,
    ConditionalMissingCheck,
    FieldCheck,
    FieldExistsCheck,
    MissingFieldCheck,
    MissingFieldsCheck,
    NumericRangeCheck,
    PatternMatchCheck,
    Rule,
    RuleSet,
    StopSequenceComplexityCheck,
    UnknownCheck,
)

logger = logging.getLogger(__name__)

BUNDLED_RULES_PATH: Path = Path(__file__).parent / "bundled" / BUNDLED_RULES_FILENAME


def load_rule_set(path: Path) -> RuleSet:
    """Read and decode a YAML (or JSON) rule document from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuleLoadError(f"Failed to read rules file {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuleLoadError(f"Failed to parse rules file {path}: {exc}") from exc

    rule_set = parse_rule_document(raw, str(path))
    logger.debug("Loaded %d rule(s) from %s", len(rule_set), path)
    return rule_set


def load_bundled_rule_set() -> RuleSet:
    """Load the default rule document shipped with the package."""
    return load_rule_set(BUNDLED_RULES_PATH)


def parse_rule_document(data: Any, source: str = "<memory>") -> RuleSet:
    """Decode an already-parsed rule document into a RuleSet."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RuleLoadError(f"{source}: rule document must be a mapping, got {type(data).__name__}")

    raw_rules = _list(data.get("rules"), "rules", source)
    rules: list[Rule] = []
    seen: set[str] = set()
    for index, raw_rule in enumerate(raw_rules):
        rule = _decode_rule(raw_rule, f"{source}: rules[{index}]")
        if rule.id in seen:
            logger.warning("%s: duplicate rule id '%s'", source, rule.id)
        seen.add(rule.id)
        rules.append(rule)

    return RuleSet(
        version=_string(data.get("version"), "version", source),
        rules=tuple(rules),
        categories=_string_tuple(data.get("categories"), "categories", source),
        source=source,
    )


def _decode_rule(raw: Any, where: str) -> Rule:
    if not isinstance(raw, dict):
        raise RuleLoadError(f"{where}: rule must be a mapping, got {type(raw).__name__}")

    return Rule(
        id=_string(raw.get("id"), "id", where),
        name=_string(raw.get("name"), "name", where),
        severity=_string(raw.get("severity"), "severity", where),
        category=_string(raw.get("category"), "category", where),
        description=_string(raw.get("description"), "description", where),
        check=_decode_check(raw.get("check"), f"{where}.check"),
        recommendation=_string(raw.get("recommendation"), "recommendation", where),
        references=_string_tuple(raw.get("references"), "references", where),
        fields=_string_tuple(raw.get("fields"), "fields", where),
    )


def _decode_check(raw: Any, where: str) -> Check:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise RuleLoadError(f"{where}: check must be a mapping, got {type(raw).__name__}")

    check_type = _string(raw.get("type"), "type", where)
    decoder = _CHECK_DECODERS.get(check_type)
    if decoder is None:
        logger.debug("%s: unrecognized check type %r kept as a no-op", where, check_type)
        return UnknownCheck(type_name=check_type)
    return decoder(raw, where)


def _decode_pattern_match(raw: dict[str, Any], where: str) -> Check:
    return PatternMatchCheck(patterns=_string_tuple(raw.get("patterns"), "patterns", where))


def _decode_numeric_range(raw: dict[str, Any], where: str) -> Check:
    return NumericRangeCheck(
        parameter=_string(raw.get("parameter"), "parameter", where),
        parameters=_string_tuple(raw.get("parameters"), "parameters", where),
        min_value=_number(raw.get("min"), "min", where),
        max_value=_number(raw.get("max"), "max", where),
        condition=_string(raw.get("condition"), "condition", where),
    )


def _decode_missing_field(raw: dict[str, Any], where: str) -> Check:
    return MissingFieldCheck(field=_string(raw.get("field"), "field", where))


def _decode_missing_fields(raw: dict[str, Any], where: str) -> Check:
    return MissingFieldsCheck(fields=_string_tuple(raw.get("fields"), "fields", where))


def _decode_field_exists(raw: dict[str, Any], where: str) -> Check:
    return FieldExistsCheck(field=_string(raw.get("field"), "field", where))


def _decode_combined_conditions(raw: dict[str, Any], where: str) -> Check:
    conditions: list[Condition] = []
    for index, item in enumerate(_list(raw.get("conditions"), "conditions", where)):
        if not isinstance(item, dict):
            raise RuleLoadError(f"{where}: conditions[{index}] must be a mapping")
        conditions.append(
            Condition(
                parameter=_string(item.get("parameter"), "parameter", where),
                operator=_string(item.get("operator"), "operator", where),
                value=item.get("value"),
            )
        )
    return CombinedConditionsCheck(
        conditions=tuple(conditions),
        require=_string(raw.get("require"), "require", where),
    )


def _decode_conditional_missing(raw: dict[str, Any], where: str) -> Check:
    return ConditionalMissingCheck(
        has_any=_string_tuple(raw.get("has_any"), "has_any", where),
        missing_all=_string_tuple(raw.get("missing_all"), "missing_all", where),
    )


def _decode_field_check(raw: dict[str, Any], where: str) -> Check:
    return FieldCheck(
        fields=_string_tuple(raw.get("fields"), "fields", where),
        values=tuple(_list(raw.get("values"), "values", where)),
    )


def _decode_stop_sequence_complexity(raw: dict[str, Any], where: str) -> Check:
    return StopSequenceComplexityCheck(
        field=_string(raw.get("field"), "field", where),
        max_sequences=_integer(raw.get("max_sequences"), "max_sequences", where),
        max_length=_integer(raw.get("max_length"), "max_length", where),
    )


_CHECK_DECODERS: dict[str, Callable[[dict[str, Any], str], Check]] = {
    CHECK_PATTERN_MATCH: _decode_pattern_match,
    CHECK_NUMERIC_RANGE: _decode_numeric_range,
    CHECK_MISSING_FIELD: _decode_missing_field,
    CHECK_MISSING_FIELDS: _decode_missing_fields,
    CHECK_FIELD_EXISTS: _decode_field_exists,
    CHECK_COMBINED_CONDITIONS: _decode_combined_conditions,
    CHECK_CONDITIONAL_MISSING: _decode_conditional_missing,
    CHECK_FIELD_CHECK: _decode_field_check,
    CHECK_STOP_SEQUENCE_COMPLEXITY: _decode_stop_sequence_complexity,
}


def _string(value: Any, key: str, where: str) -> str:
    """Decode a scalar into a string; absent values become empty."""
    if value is None:
        return ""
    if isinstance(value, dict | list):
        raise RuleLoadError(f"{where}: '{key}' must be a scalar, got {type(value).__name__}")
    return str(value)


def _list(value: Any, key: str, where: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise RuleLoadError(f"{where}: '{key}' must be a list, got {type(value).__name__}")
    return value


def _string_tuple(value: Any, key: str, where: str) -> tuple[str, ...]:
    return tuple(_string(item, key, where) for item in _list(value, key, where))


def _number(value: Any, key: str, where: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise RuleLoadError(f"{where}: '{key}' must be a number, got {value!r}")
    return float(value)


def _integer(value: Any, key: str, where: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise RuleLoadError(f"{where}: '{key}' must be an integer, got {value!r}")
    return value
