"""Filesystem helpers."""

from __future__ import annotations

from .atomic import write_text_atomic

__all__ = ["write_text_atomic"]
