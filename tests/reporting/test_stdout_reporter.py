"""Tests for the human-readable stdout reporter."""

from __future__ import annotations

from paramguard.constants.reporting import ANSI_GREEN, ANSI_MAGENTA, ANSI_RESET
from paramguard.model import Finding, ScanReport, ScanResult
from paramguard.reporting.stdout import StdoutReporter


def _make_finding(
    *,
    rule_id: str = "PARAM_001",
    severity: str = "MEDIUM",
    location: str = "temperature",
    references: tuple[str, ...] = ("OWASP LLM09",),
) -> Finding:
    return Finding(
        rule_id=rule_id,
        name=f"Test {rule_id}",
        severity=severity,
        category="parameters",
        description="Test description",
        recommendation="Fix it",
        references=references,
        location=location,
    )


def test_clean_file_line() -> None:
    report = ScanReport(results=(ScanResult(file="safe.json"),))

    output = StdoutReporter(report).render()

    assert "✓ safe.json - No issues found" in output
    assert "Total files scanned: 1" in output
    assert "Total findings: 0" in output


def test_finding_block_contents() -> None:
    report = ScanReport(results=(ScanResult(file="app.json", findings=(_make_finding(),)),))

    output = StdoutReporter(report).render()

    assert "📄 app.json" in output
    assert "🟡 Test PARAM_001 [MEDIUM]" in output
    assert "   ID: PARAM_001" in output
    assert "   Location: temperature" in output
    assert "   💡 Fix it" in output
    assert "      • OWASP LLM09" in output
    assert "Category:" not in output


def test_location_and_references_omitted_when_empty() -> None:
    finding = _make_finding(location="", references=())
    report = ScanReport(results=(ScanResult(file="app.json", findings=(finding,)),))

    output = StdoutReporter(report).render()

    assert "Location:" not in output
    assert "References:" not in output


def test_verbose_shows_category() -> None:
    report = ScanReport(results=(ScanResult(file="app.json", findings=(_make_finding(),)),))

    assert "   Category: parameters" in StdoutReporter(report, verbose=True).render()


def test_summary_counts_by_severity_including_other() -> None:
    findings = (
        _make_finding(rule_id="A", severity="CRITICAL"),
        _make_finding(rule_id="B", severity="CRITICAL"),
        _make_finding(rule_id="C", severity="LOW"),
        _make_finding(rule_id="D", severity="INFO"),
    )
    report = ScanReport(results=(ScanResult(file="a.json", findings=findings), ScanResult(file="b.json")))

    output = StdoutReporter(report).render()

    assert "Total files scanned: 2" in output
    assert "Total findings: 4" in output
    assert "  🔴 Critical: 2" in output
    assert "  🔵 Low: 1" in output
    assert "High:" not in output
    assert "  Other: 1" in output
    assert "Test D [INFO]" in output


def test_errors_section_lists_unscanned_files() -> None:
    report = ScanReport(errors=(("bad.json", "Failed to parse JSON"),))

    output = StdoutReporter(report).render()

    assert "Files not scanned:" in output
    assert "  ✗ bad.json: Failed to parse JSON" in output


def test_no_ansi_codes_without_color() -> None:
    report = ScanReport(results=(ScanResult(file="a.json", findings=(_make_finding(severity="CRITICAL"),)),))

    assert "\033[" not in StdoutReporter(report).render()


def test_color_wraps_severity_and_clean_mark() -> None:
    report = ScanReport(
        results=(
            ScanResult(file="a.json", findings=(_make_finding(severity="CRITICAL"),)),
            ScanResult(file="b.json"),
        )
    )

    output = StdoutReporter(report, color=True).render()

    assert f"[{ANSI_MAGENTA}CRITICAL{ANSI_RESET}]" in output
    assert f"{ANSI_GREEN}✓{ANSI_RESET} b.json" in output
