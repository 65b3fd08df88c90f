"""Settings loading and normalization for ParamGuard scans."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from paramguard.config.model import ParamGuardConfig
from paramguard.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from paramguard.constants.reporting import DEFAULT_OUTPUT_FORMAT, SEVERITY_RANK, VALID_OUTPUT_FORMATS
from paramguard.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None = None, *, cwd: Path | None = None) -> ParamGuardConfig:
    """Load settings from ``.paramguard.yaml`` in ``cwd`` or an explicit path.

    A missing default file yields default settings; a missing explicit file
    is an error. Relative ``rules_file`` values resolve against the settings
    file's directory.
    """
    base = (cwd or Path.cwd()).resolve()
    path = config_path.resolve() if config_path else (base / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ParamGuardConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Config file at {path} has unknown keys: {sorted(unknown)}")

    rules_file_raw = raw.get("rules_file")
    rules_file: Path | None = None
    if rules_file_raw is not None:
        if not isinstance(rules_file_raw, str) or not rules_file_raw.strip():
            raise ConfigError("rules_file must be a non-empty string")
        rules_file = Path(rules_file_raw)
        if not rules_file.is_absolute():
            rules_file = path.parent / rules_file

    output_format = raw.get("format", DEFAULT_OUTPUT_FORMAT)
    if output_format not in VALID_OUTPUT_FORMATS:
        raise ConfigError(f"format must be one of {sorted(VALID_OUTPUT_FORMATS)}, got {output_format!r}")

    min_severity = raw.get("min_severity")
    if min_severity is not None:
        if not isinstance(min_severity, str) or min_severity.upper() not in SEVERITY_RANK:
            raise ConfigError(f"min_severity must be one of {sorted(SEVERITY_RANK)}, got {min_severity!r}")
        min_severity = min_severity.upper()

    fail_fast = raw.get("fail_fast", True)
    if not isinstance(fail_fast, bool):
        raise ConfigError("fail_fast must be a boolean")

    color = raw.get("color", True)
    if not isinstance(color, bool):
        raise ConfigError("color must be a boolean")

    logger.debug("Loaded settings from %s", path)
    return ParamGuardConfig(
        rules_file=rules_file,
        output_format=output_format,
        min_severity=min_severity,
        fail_fast=fail_fast,
        disabled_rules=tuple(_ensure_string_list(raw.get("disabled_rules", []), "disabled_rules")),
        color=color,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
