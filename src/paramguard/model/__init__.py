"""Core data models for ParamGuard."""

from .entities import Finding, ScanReport, ScanResult
from .tree import ConfigTree

__all__ = [
    "ConfigTree",
    "Finding",
    "ScanReport",
    "ScanResult",
]
