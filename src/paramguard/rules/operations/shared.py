"""Shared coercion and matching helpers used by several predicates."""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

logger = logging.getLogger(__name__)


def to_number(value: Any) -> float | None:
    """Return ``value`` as a float when it is an int or float, else None.

    Booleans and numeric-looking strings are not numbers here. Integers too
    large for a float become signed infinity so range tests still apply.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    return None


def stringify(value: Any) -> str:
    """Render a config or rule value for string comparison.

    Integral floats drop the fractional part so that ``100`` and ``100.0``
    compare equal across formats.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str | int | float):
        return str(value)
    if isinstance(value, Mapping | list | tuple):
        return json.dumps(value, sort_keys=True, default=str)
    return str(value)


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern[str] | None:
    """Compile and cache a rule pattern; an invalid pattern never matches."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.warning("Ignoring invalid pattern %r: %s", pattern, exc)
        return None


def pattern_matches(pattern: str, text: str) -> bool:
    compiled = compile_pattern(pattern)
    return compiled is not None and compiled.search(text) is not None
