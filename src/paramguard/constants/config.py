"""Constants for scanner settings files."""

from __future__ import annotations

CONFIG_FILENAME: str = ".paramguard.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "rules_file",
        "format",
        "min_severity",
        "fail_fast",
        "disabled_rules",
        "color",
    }
)

BUNDLED_RULES_FILENAME: str = "rules.yaml"
