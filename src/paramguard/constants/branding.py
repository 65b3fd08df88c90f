"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "ParamGuard"
TAGLINE: str = "LLM Configuration Security Scanner"
SUMMARY_TITLE: str = "📊 SUMMARY"
CLEAN_FILE_MARK: str = "✓"
FILE_MARK: str = "📄"
RECOMMENDATION_MARK: str = "💡"
REFERENCES_MARK: str = "📚"
CLI_DESCRIPTION: str = f"{BRAND_NAME} - {TAGLINE}"
