"""Constants for config file decoding and discovery."""

from __future__ import annotations

FORMAT_JSON: str = "json"
FORMAT_YAML: str = "yaml"
FORMAT_TOML: str = "toml"
FORMAT_ENV: str = "env"

EXTENSION_FORMATS: dict[str, str] = {
    ".json": FORMAT_JSON,
    ".yaml": FORMAT_YAML,
    ".yml": FORMAT_YAML,
    ".toml": FORMAT_TOML,
    ".env": FORMAT_ENV,
}

# Order tried for files whose extension does not name a format.
AUTODETECT_ORDER: tuple[str, ...] = (FORMAT_JSON, FORMAT_YAML, FORMAT_TOML)

ENV_COMMENT_PREFIX: str = "#"
ENV_ASSIGNMENT: str = "="
ENV_QUOTE_CHARS: str = "\"'"

# Files named like ".env.local" or ".env.production" are env files too.
ENV_FILENAME_PREFIX: str = ".env"

IN_MEMORY_SOURCE: str = "<memory>"
