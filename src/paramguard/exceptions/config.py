"""Configuration-related exceptions."""

from __future__ import annotations

from paramguard.exceptions.base import ParamGuardError


class ConfigError(ParamGuardError, ValueError):
    """Raised when scanner settings are invalid."""
