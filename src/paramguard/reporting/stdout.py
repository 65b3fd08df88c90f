"""Human-readable stdout reporter for scan results."""

from __future__ import annotations

from paramguard.constants.branding import (
    CLEAN_FILE_MARK,
    FILE_MARK,
    RECOMMENDATION_MARK,
    REFERENCES_MARK,
    SUMMARY_TITLE,
)
from paramguard.constants.reporting import (
    ANSI_BOLD,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    RULE_SEPARATOR,
    SEVERITY_COLORS,
    SEVERITY_ICONS,
    SEVERITY_ORDER,
)
from paramguard.model import Finding, ScanReport, ScanResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats a scan report as plain text, one block per file plus a summary."""

    def __init__(self, report: ScanReport, *, color: bool = False, verbose: bool = False) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_result(result) for result in self._report.results]
        if self._report.errors:
            sections.append(self._render_errors())
        sections.append(self._render_summary())
        return "\n".join(sections)

    def _render_result(self, result: ScanResult) -> str:
        if not result.findings:
            mark = _colorize(CLEAN_FILE_MARK, ANSI_GREEN) if self._color else CLEAN_FILE_MARK
            return f"{mark} {result.file} - No issues found"

        lines = ["", RULE_SEPARATOR, f"{FILE_MARK} {result.file}", RULE_SEPARATOR]
        for finding in result.findings:
            lines.extend(self._render_finding(finding))
        return "\n".join(lines)

    def _render_finding(self, finding: Finding) -> list[str]:
        icon = SEVERITY_ICONS.get(finding.severity, "")
        severity = finding.severity
        color = SEVERITY_COLORS.get(severity)
        if self._color and color:
            severity = _colorize(severity, color)

        heading = f"{icon} {finding.name} [{severity}]" if icon else f"{finding.name} [{severity}]"
        lines = [
            "",
            heading,
            f"   ID: {finding.rule_id}",
            f"   {finding.description}",
        ]
        if finding.location:
            lines.append(f"   Location: {finding.location}")
        lines.append(f"   {RECOMMENDATION_MARK} {finding.recommendation}")
        if finding.references:
            lines.append(f"   {REFERENCES_MARK} References:")
            lines.extend(f"      • {reference}" for reference in finding.references)
        if self._verbose and finding.category:
            lines.append(f"   Category: {finding.category}")
        return lines

    def _render_errors(self) -> str:
        lines = ["", "Files not scanned:"]
        for file, message in self._report.errors:
            entry = f"  ✗ {file}: {message}"
            lines.append(_colorize(entry, ANSI_RED) if self._color else entry)
        return "\n".join(lines)

    def _render_summary(self) -> str:
        title = _colorize(SUMMARY_TITLE, ANSI_BOLD) if self._color else SUMMARY_TITLE
        counts = self._report.counts_by_severity
        lines = [
            "",
            RULE_SEPARATOR,
            title,
            RULE_SEPARATOR,
            f"Total files scanned: {len(self._report.results)}",
            f"Total findings: {self._report.total_findings}",
        ]
        for severity in SEVERITY_ORDER:
            count = counts.get(severity, 0)
            if count > 0:
                lines.append(f"  {SEVERITY_ICONS[severity]} {severity.capitalize()}: {count}")
        other = sum(count for severity, count in counts.items() if severity not in SEVERITY_ORDER)
        if other > 0:
            lines.append(f"  Other: {other}")
        lines.append("")
        return "\n".join(lines)
