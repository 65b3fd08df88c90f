"""Shared exception hierarchy for ParamGuard."""

from __future__ import annotations

from .base import ParamGuardError
from .config import ConfigError
from .parsing import ConfigParseError
from .rules import RuleEngineError, RuleLoadError

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ParamGuardError",
    "RuleEngineError",
    "RuleLoadError",
]
