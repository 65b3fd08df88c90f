"""Frozen result entities emitted by the rule engine and scan orchestration."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from paramguard.types import JsonObject, Severity


@dataclass(frozen=True)
class Finding:
    """One reported concern from evaluating a single rule against a single config."""

    rule_id: str
    name: str
    severity: Severity
    category: str
    description: str
    recommendation: str
    references: tuple[str, ...] = ()
    location: str = ""

    def to_dict(self) -> JsonObject:
        """Serialize for JSON output, omitting an empty location."""
        payload: JsonObject = {
            "rule_id": self.rule_id,
            "name": self.name,
            "severity": self.severity,
            "category": self.category,
            "description": self.description,
        }
        if self.location:
            payload["location"] = self.location
        payload["recommendation"] = self.recommendation
        payload["references"] = list(self.references)
        return payload


@dataclass(frozen=True)
class ScanResult:
    """Findings for one scanned file, in rule-evaluation order."""

    file: str
    findings: tuple[Finding, ...] = ()

    def to_dict(self) -> JsonObject:
        return {
            "file": self.file,
            "findings": [finding.to_dict() for finding in self.findings],
        }


@dataclass(frozen=True)
class ScanReport:
    """Aggregate of per-file results plus per-file parse failures."""

    results: tuple[ScanResult, ...] = ()
    errors: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def total_findings(self) -> int:
        return sum(len(result.findings) for result in self.results)

    @property
    def has_findings(self) -> bool:
        return self.total_findings > 0

    @property
    def counts_by_severity(self) -> dict[str, int]:
        """Count findings per severity string, as stored on each rule."""
        counts: Counter[str] = Counter()
        for result in self.results:
            for finding in result.findings:
                counts[finding.severity] += 1
        return dict(counts)
