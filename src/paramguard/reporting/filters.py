"""Shared output-filter helpers for reporters and file writers."""

from __future__ import annotations

from dataclasses import dataclass

from paramguard.constants.reporting import SEVERITY_RANK
from paramguard.model import Finding, ScanReport, ScanResult
from paramguard.types import Severity


@dataclass(frozen=True)
class OutputFilters:
    """Display/output filters that do not affect scan execution."""

    min_severity: Severity | None = None

    def active(self) -> bool:
        """Whether any filter is enabled."""
        return self.min_severity is not None


def finding_passes_filters(finding: Finding, filters: OutputFilters) -> bool:
    """Return whether a finding should be shown under the configured filters.

    Severities outside the four known levels rank below LOW.
    """
    if filters.min_severity is None:
        return True
    threshold = SEVERITY_RANK.get(filters.min_severity.upper(), 0)
    return SEVERITY_RANK.get(finding.severity.upper(), 0) >= threshold


def filter_report(report: ScanReport, filters: OutputFilters) -> ScanReport:
    """Return a report whose per-file findings pass all configured filters."""
    if not filters.active():
        return report
    results = tuple(
        ScanResult(
            file=result.file,
            findings=tuple(finding for finding in result.findings if finding_passes_filters(finding, filters)),
        )
        for result in report.results
    )
    return ScanReport(results=results, errors=report.errors)
