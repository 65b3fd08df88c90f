"""Decode JSON, YAML, TOML and KEY=VALUE env files into ConfigTree instances."""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from paramguard.constants.parsing import (
    AUTODETECT_ORDER,
    ENV_ASSIGNMENT,
    ENV_COMMENT_PREFIX,
    ENV_FILENAME_PREFIX,
    ENV_QUOTE_CHARS,
    EXTENSION_FORMATS,
    FORMAT_ENV,
    FORMAT_JSON,
    FORMAT_TOML,
    FORMAT_YAML,
    IN_MEMORY_SOURCE,
)
from paramguard.exceptions import ConfigParseError
from paramguard.model import ConfigTree

logger = logging.getLogger(__name__)


def detect_format(path: Path) -> str | None:
    """Return the format implied by a file's extension or name, if any."""
    fmt = EXTENSION_FORMATS.get(path.suffix.lower())
    if fmt is not None:
        return fmt
    if path.name.startswith(ENV_FILENAME_PREFIX):
        return FORMAT_ENV
    return None


def parse_config_file(path: Path) -> ConfigTree:
    """Parse a config file into a tree, choosing the decoder by extension.

    Files without a recognized extension are tried as JSON, YAML and TOML
    in that order.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"Failed to read file {path}: {exc}") from exc

    source = str(path)
    fmt = detect_format(path)
    if fmt is not None:
        return parse_config_text(text, fmt, source)

    for candidate in AUTODETECT_ORDER:
        try:
            tree = parse_config_text(text, candidate, source)
        except ConfigParseError:
            continue
        logger.debug("Detected %s format for %s", candidate, path)
        return tree
    raise ConfigParseError(f"Unsupported file format: {path.suffix or path.name} ({path})")


def parse_config_text(text: str, fmt: str, source: str = IN_MEMORY_SOURCE) -> ConfigTree:
    """Decode config text in the named format."""
    decoder = _DECODERS.get(fmt)
    if decoder is None:
        raise ConfigParseError(f"Unknown config format {fmt!r} for {source}")

    data = decoder(text, source)
    return ConfigTree.from_mapping(data, source=source)


def _decode_json(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    # JSONDecodeError is a ValueError; so is an integer literal past the digit limit.
    except (ValueError, RecursionError) as exc:
        raise ConfigParseError(f"Failed to parse JSON in {source}: {exc}") from exc


def _decode_yaml(text: str, source: str) -> Any:
    try:
        data = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError, RecursionError) as exc:
        raise ConfigParseError(f"Failed to parse YAML in {source}: {exc}") from exc
    return {} if data is None else data


def _decode_toml(text: str, source: str) -> Any:
    try:
        return tomllib.loads(text)
    except (ValueError, RecursionError) as exc:
        raise ConfigParseError(f"Failed to parse TOML in {source}: {exc}") from exc


def _decode_env(text: str, source: str) -> Any:
    """Parse KEY=VALUE lines; every value stays a string."""
    result: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(ENV_COMMENT_PREFIX):
            continue
        key, sep, value = stripped.partition(ENV_ASSIGNMENT)
        if not sep:
            continue
        result[key.strip()] = value.strip().strip(ENV_QUOTE_CHARS)
    return result


_DECODERS: dict[str, Callable[[str, str], Any]] = {
    FORMAT_JSON: _decode_json,
    FORMAT_YAML: _decode_yaml,
    FORMAT_TOML: _decode_toml,
    FORMAT_ENV: _decode_env,
}
