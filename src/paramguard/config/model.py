"""Settings data model for ParamGuard scans."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from paramguard.constants.reporting import DEFAULT_OUTPUT_FORMAT
from paramguard.types import OutputFormat, Severity


@dataclass(frozen=True)
class ParamGuardConfig:
    """Resolved scanner settings. ``rules_file=None`` selects the bundled rules."""

    rules_file: Path | None = None
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT  # type: ignore[assignment]
    min_severity: Severity | None = None
    fail_fast: bool = True
    disabled_rules: tuple[str, ...] = ()
    color: bool = True
