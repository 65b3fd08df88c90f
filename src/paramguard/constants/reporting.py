"""Constants for report rendering and output filtering."""

from __future__ import annotations

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SEVERITY_CRITICAL: str = "CRITICAL"
SEVERITY_HIGH: str = "HIGH"
SEVERITY_MEDIUM: str = "MEDIUM"
SEVERITY_LOW: str = "LOW"

SEVERITY_ORDER: tuple[str, ...] = (SEVERITY_CRITICAL, SEVERITY_HIGH, SEVERITY_MEDIUM, SEVERITY_LOW)

SEVERITY_RANK: dict[str, int] = {
    SEVERITY_LOW: 1,
    SEVERITY_MEDIUM: 2,
    SEVERITY_HIGH: 3,
    SEVERITY_CRITICAL: 4,
}

SEVERITY_ICONS: dict[str, str] = {
    SEVERITY_CRITICAL: "🔴",
    SEVERITY_HIGH: "🟠",
    SEVERITY_MEDIUM: "🟡",
    SEVERITY_LOW: "🔵",
}

RULE_SEPARATOR: str = "━" * 52

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_MAGENTA: str = "\033[35;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_BLUE: str = "\033[34;1m"
ANSI_GREEN: str = "\033[32;1m"

SEVERITY_COLORS: dict[str, str] = {
    SEVERITY_CRITICAL: ANSI_MAGENTA,
    SEVERITY_HIGH: ANSI_RED,
    SEVERITY_MEDIUM: ANSI_YELLOW,
    SEVERITY_LOW: ANSI_BLUE,
}
