"""Shared pytest fixtures for ParamGuard tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from paramguard.model import ConfigTree
from paramguard.rules import RuleEngine, load_bundled_rule_set

SAFE_CONFIG: dict[str, Any] = {
    "model": "gpt-4-0613",
    "temperature": 0.7,
    "max_tokens": 1000,
    "timeout": 30,
    "system_prompt": "You are a helpful assistant",
    "user_id": "user123",
    "rate_limit": {"rpm": 100, "tpm": 10000, "per_user_limit": True},
    "logging": True,
    "content_moderation": True,
    "error_handling": {"max_retries": 3},
    "cors": ["https://example.com"],
    "input_validation": True,
    "output_validation": True,
}

VULNERABLE_CONFIG: dict[str, Any] = {
    "api_key": "sk-test1234567890abcdefghijklmnopqr",
    "temperature": 1.5,
    "max_tokens": 10000,
}


@pytest.fixture()
def make_tree() -> Callable[..., ConfigTree]:
    """Return a factory building a ConfigTree from keyword or mapping data."""

    def _make(data: dict[str, Any] | None = None, **fields: Any) -> ConfigTree:
        return ConfigTree.from_mapping({**(data or {}), **fields}, source="test.json")

    return _make


@pytest.fixture(scope="session")
def bundled_engine() -> RuleEngine:
    return RuleEngine(load_bundled_rule_set())


@pytest.fixture()
def safe_config_file(tmp_path: Path) -> Path:
    path = tmp_path / "safe.json"
    path.write_text(json.dumps(SAFE_CONFIG, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def vulnerable_config_file(tmp_path: Path) -> Path:
    path = tmp_path / "vulnerable.json"
    path.write_text(json.dumps(VULNERABLE_CONFIG, indent=2), encoding="utf-8")
    return path
