"""Scanner settings loading and validation.

This package facade re-exports all public names so that
``from paramguard.config import ...`` works for callers.
"""

from __future__ import annotations

from paramguard.config.loader import load_config
from paramguard.config.model import ParamGuardConfig

__all__ = ["ParamGuardConfig", "load_config"]
