"""Machine-readable JSON report."""

from __future__ import annotations

import json
from pathlib import Path

from paramguard import __version__
from paramguard.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from paramguard.io import write_text_atomic
from paramguard.model import ScanReport
from paramguard.types import JsonObject


def build_json_payload(report: ScanReport) -> JsonObject:
    """Build the ``{"version", "results"}`` payload, plus ``errors`` when any file failed."""
    payload: JsonObject = {
        "version": __version__,
        "results": [result.to_dict() for result in report.results],
    }
    if report.errors:
        payload["errors"] = [{"file": file, "error": message} for file, message in report.errors]
    return payload


def render_json(report: ScanReport) -> str:
    return json.dumps(build_json_payload(report), indent=2, ensure_ascii=False)


def write_json_report(path: Path, report: ScanReport) -> None:
    """Write the JSON report atomically."""
    write_text_atomic(path, render_json(report), prefix=REPORT_TEMP_PREFIX, suffix=REPORT_TEMP_SUFFIX)
