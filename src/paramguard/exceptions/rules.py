"""Rule document and rule engine exceptions."""

from __future__ import annotations

from paramguard.exceptions.base import ParamGuardError


class RuleLoadError(ParamGuardError, ValueError):
    """Raised when a rule document cannot be structurally decoded."""


class RuleEngineError(ParamGuardError):
    """Raised on misuse of the rule engine API, never during evaluation."""
