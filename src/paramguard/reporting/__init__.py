"""Reporting package for ParamGuard outputs."""

from __future__ import annotations

from .filters import OutputFilters, filter_report
from .json_report import build_json_payload, render_json, write_json_report
from .stdout import StdoutReporter

__all__ = [
    "OutputFilters",
    "StdoutReporter",
    "build_json_payload",
    "filter_report",
    "render_json",
    "write_json_report",
]
