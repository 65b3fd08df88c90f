"""Typed rule model: rule metadata plus one of nine check variants.

Each check kind is its own frozen dataclass tagged by a class-level ``kind``.
A check whose ``type`` is not recognized still loads, as ``UnknownCheck``,
and evaluates to no finding.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, TypeAlias

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
from paramguard.types import Severity


@dataclass(frozen=True)
class PatternMatchCheck:
    """Regular expressions searched in scoped field values or the whole content."""

    kind: ClassVar[str] = CHECK_PATTERN_MATCH
    patterns: tuple[str, ...] = ()


@dataclass(frozen=True)
class NumericRangeCheck:
    """Numeric candidates of one or more parameters must lie within [min, max]."""

    kind: ClassVar[str] = CHECK_NUMERIC_RANGE
    parameter: str = ""
    parameters: tuple[str, ...] = ()
    min_value: float = 0.0
    max_value: float = 0.0
    condition: str = ""


@dataclass(frozen=True)
class MissingFieldCheck:
    kind: ClassVar[str] = CHECK_MISSING_FIELD
    field: str = ""


@dataclass(frozen=True)
class MissingFieldsCheck:
    kind: ClassVar[str] = CHECK_MISSING_FIELDS
    fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class FieldExistsCheck:
    kind: ClassVar[str] = CHECK_FIELD_EXISTS
    field: str = ""


@dataclass(frozen=True)
class Condition:
    """One sub-condition of a combined_conditions check."""

    parameter: str
    operator: str
    value: Any = None


@dataclass(frozen=True)
class CombinedConditionsCheck:
    kind: ClassVar[str] = CHECK_COMBINED_CONDITIONS
    conditions: tuple[Condition, ...] = ()
    require: str = ""


@dataclass(frozen=True)
class ConditionalMissingCheck:
    """If any ``has_any`` field is present, every ``missing_all`` field must not be absent."""

    kind: ClassVar[str] = CHECK_CONDITIONAL_MISSING
    has_any: tuple[str, ...] = ()
    missing_all: tuple[str, ...] = ()


@dataclass(frozen=True)
class FieldCheck:
    """Field values compared, as strings, against a forbidden-value list."""

    kind: ClassVar[str] = CHECK_FIELD_CHECK
    fields: tuple[str, ...] = ()
    values: tuple[Any, ...] = ()


@dataclass(frozen=True)
class StopSequenceComplexityCheck:
    kind: ClassVar[str] = CHECK_STOP_SEQUENCE_COMPLEXITY
    field: str = ""
    max_sequences: int = 0
    max_length: int = 0


@dataclass(frozen=True)
class UnknownCheck:
    """Placeholder for a check type this version does not implement."""

    type_name: str = ""

    @property
    def kind(self) -> str:
        return self.type_name


Check: TypeAlias = (
    PatternMatchCheck
    | NumericRangeCheck
    | MissingFieldCheck
    | MissingFieldsCheck
    | FieldExistsCheck
    | CombinedConditionsCheck
    | ConditionalMissingCheck
    | FieldCheck
    | StopSequenceComplexityCheck
    | UnknownCheck
)


@dataclass(frozen=True)
class Rule:
    """Declarative detection definition: metadata plus one check."""

    id: str
    name: str
    severity: Severity
    category: str
    description: str
    check: Check
    recommendation: str = ""
    references: tuple[str, ...] = ()
    fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class RuleSet:
    """Ordered, immutable collection of rules loaded from one rule document."""

    version: str = ""
    rules: tuple[Rule, ...] = ()
    categories: tuple[str, ...] = ()
    source: str = ""

    @property
    def rule_ids(self) -> list[str]:
        """Rule IDs in document order."""
        return [rule.id for rule in self.rules]

    def get(self, rule_id: str) -> Rule | None:
        """Return the first rule with ``rule_id``, or None."""
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        return None

    def without(self, rule_ids: Iterable[str]) -> RuleSet:
        """Return a copy with every rule whose ID is in ``rule_ids`` removed."""
        excluded = frozenset(rule_ids)
        return RuleSet(
            version=self.version,
            rules=tuple(rule for rule in self.rules if rule.id not in excluded),
            categories=self.categories,
            source=self.source,
        )

    def __len__(self) -> int:
        return len(self.rules)
