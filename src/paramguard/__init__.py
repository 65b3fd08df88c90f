"""ParamGuard: security scanner for LLM provider configuration files."""

from __future__ import annotations

__version__ = "1.0.0"

__all__ = ["__version__"]
