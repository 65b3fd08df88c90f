"""Parsing-related exceptions."""

from __future__ import annotations

from paramguard.exceptions.base import ParamGuardError


class ConfigParseError(ParamGuardError, ValueError):
    """Raised when a scanned configuration file cannot be decoded into a tree."""
