"""Tests for JSON report output, filtering and schema conformance."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from paramguard import __version__
from paramguard.model import Finding, ScanReport, ScanResult
from paramguard.reporting import OutputFilters, build_json_payload, filter_report, render_json, write_json_report

SCHEMA_PATH: Path = Path(__file__).resolve().parents[2] / "schemas" / "report.schema.json"


def _finding(rule_id: str, severity: str, location: str = "") -> Finding:
    return Finding(
        rule_id=rule_id,
        name=f"{rule_id} name",
        severity=severity,
        category="testing",
        description="desc",
        recommendation="rec",
        references=("ref",),
        location=location,
    )


@pytest.fixture()
def report() -> ScanReport:
    return ScanReport(
        results=(
            ScanResult(
                file="a.json",
                findings=(
                    _finding("SECRETS_001", "CRITICAL", "config content"),
                    _finding("PARAM_001", "MEDIUM", "temperature"),
                    _finding("PRIVACY_002", "LOW"),
                    _finding("CUSTOM_001", "INFO"),
                ),
            ),
            ScanResult(file="b.json"),
        )
    )


@pytest.fixture(scope="module")
def report_schema() -> dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_report_schema_is_valid_json_schema(report_schema: dict[str, Any]) -> None:
    jsonschema.Draft202012Validator.check_schema(report_schema)


def test_payload_shape(report: ScanReport) -> None:
    payload = build_json_payload(report)

    assert payload["version"] == __version__
    assert [result["file"] for result in payload["results"]] == ["a.json", "b.json"]
    assert payload["results"][1]["findings"] == []
    assert "errors" not in payload
    first = payload["results"][0]["findings"][0]
    assert first["rule_id"] == "SECRETS_001"
    assert first["location"] == "config content"
    assert first["references"] == ["ref"]


def test_empty_location_is_omitted(report: ScanReport) -> None:
    privacy = build_json_payload(report)["results"][0]["findings"][2]

    assert "location" not in privacy


def test_payload_validates_against_schema(report: ScanReport, report_schema: dict[str, Any]) -> None:
    with_errors = ScanReport(results=report.results, errors=(("bad.yaml", "Failed to parse YAML"),))

    jsonschema.validate(json.loads(render_json(report)), report_schema)
    jsonschema.validate(json.loads(render_json(with_errors)), report_schema)


def test_errors_are_serialized() -> None:
    payload = build_json_payload(ScanReport(errors=(("bad.yaml", "boom"),)))

    assert payload["errors"] == [{"file": "bad.yaml", "error": "boom"}]


def test_render_json_keeps_non_ascii() -> None:
    report = ScanReport(results=(ScanResult(file="café.json"),))

    assert "café.json" in render_json(report)


def test_write_json_report_is_atomic(tmp_path: Path, report: ScanReport) -> None:
    target = tmp_path / "out" / "report.json"

    write_json_report(target, report)

    assert json.loads(target.read_text(encoding="utf-8")) == build_json_payload(report)
    assert [path.name for path in target.parent.iterdir()] == ["report.json"]


@pytest.mark.parametrize(
    ("min_severity", "expected"),
    [
        pytest.param(None, ["SECRETS_001", "PARAM_001", "PRIVACY_002", "CUSTOM_001"], id="no-filter"),
        pytest.param("LOW", ["SECRETS_001", "PARAM_001", "PRIVACY_002"], id="low"),
        pytest.param("medium", ["SECRETS_001", "PARAM_001"], id="medium-lowercase"),
        pytest.param("CRITICAL", ["SECRETS_001"], id="critical"),
    ],
)
def test_filter_report_by_min_severity(report: ScanReport, min_severity: str | None, expected: list[str]) -> None:
    filtered = filter_report(report, OutputFilters(min_severity=min_severity))

    assert [finding.rule_id for finding in filtered.results[0].findings] == expected
    assert len(filtered.results) == 2


def test_filter_report_keeps_errors(report: ScanReport) -> None:
    with_errors = ScanReport(results=report.results, errors=(("x.json", "bad"),))

    assert filter_report(with_errors, OutputFilters(min_severity="HIGH")).errors == with_errors.errors
