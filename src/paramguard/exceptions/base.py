"""Root exception type."""

from __future__ import annotations


class ParamGuardError(Exception):
    """Base class for all errors raised by ParamGuard."""
