"""Config file parsers producing format-agnostic config trees."""

from .config_file import detect_format, parse_config_file, parse_config_text

__all__ = ["detect_format", "parse_config_file", "parse_config_text"]
