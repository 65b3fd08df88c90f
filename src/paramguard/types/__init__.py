"""Shared type aliases for ParamGuard."""

from .common import JsonObject, JsonScalar, JsonValue, OutputFormat, Severity

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputFormat",
    "Severity",
]
