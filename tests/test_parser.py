"""Tests for config file decoding."""

from __future__ import annotations

from pathlib import Path

import pytest

from paramguard.exceptions import ConfigParseError
from paramguard.parsers import detect_format, parse_config_file, parse_config_text


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("app.json", "json"),
        ("app.YAML", "yaml"),
        ("app.yml", "yaml"),
        ("pyproject.toml", "toml"),
        ("prod.env", "env"),
        (".env", "env"),
        (".env.local", "env"),
        ("settings.ini", None),
        ("Dockerfile", None),
    ],
)
def test_detect_format(name: str, expected: str | None) -> None:
    assert detect_format(Path(name)) == expected


def test_parse_json_file(tmp_path: Path) -> None:
    path = tmp_path / "llm.json"
    path.write_text('{"model": "gpt-4", "params": {"temperature": 0.2}}', encoding="utf-8")

    tree = parse_config_file(path)

    assert tree.source == str(path)
    assert tree.collect_values("temperature") == [0.2]


def test_parse_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "llm.yaml"
    path.write_text("model: gpt-4\nstop:\n  - END\nlimits:\n  rpm: 60\n", encoding="utf-8")

    tree = parse_config_file(path)

    assert tree.collect_values("stop") == [["END"]]
    assert tree.field_exists("rpm")


def test_parse_empty_yaml_is_empty_tree(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("# nothing configured\n", encoding="utf-8")

    assert dict(parse_config_file(path).data) == {}


def test_parse_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "llm.toml"
    path.write_text('model = "gpt-4"\n\n[sampling]\ntemperature = 1.2\n', encoding="utf-8")

    tree = parse_config_file(path)

    assert tree.value_at_path("sampling.temperature") == (True, 1.2)


def test_parse_env_file_keeps_values_as_strings(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_text(
        "# provider settings\n"
        "OPENAI_API_KEY=sk-abc\n"
        "\n"
        'MODEL="gpt-4"\n'
        "TEMPERATURE = 1.5\n"
        "GREETING='hi=there'\n"
        "not an assignment\n",
        encoding="utf-8",
    )

    tree = parse_config_file(path)

    assert dict(tree.data) == {
        "OPENAI_API_KEY": "sk-abc",
        "MODEL": "gpt-4",
        "TEMPERATURE": "1.5",
        "GREETING": "hi=there",
    }


def test_unknown_extension_autodetects_json_then_yaml(tmp_path: Path) -> None:
    json_like = tmp_path / "settings.conf"
    json_like.write_text('{"temperature": 0.3}', encoding="utf-8")
    yaml_like = tmp_path / "settings.cfg"
    yaml_like.write_text("temperature: 0.4\n", encoding="utf-8")

    assert parse_config_file(json_like).collect_values("temperature") == [0.3]
    assert parse_config_file(yaml_like).collect_values("temperature") == [0.4]


def test_unknown_extension_autodetects_toml(tmp_path: Path) -> None:
    path = tmp_path / "settings.conf"
    path.write_text('[llm]\nmodel = "gpt-4"\nstop = ["a", "b"]\n[llm.extra]\nseed = 1\n', encoding="utf-8")

    tree = parse_config_file(path)

    assert tree.field_exists("seed")


def test_unknown_extension_unparseable_raises(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("just some prose\n", encoding="utf-8")

    with pytest.raises(ConfigParseError, match="Unsupported file format"):
        parse_config_file(path)


@pytest.mark.parametrize(
    ("name", "content", "match"),
    [
        pytest.param("bad.json", '{"model": ', "Failed to parse JSON", id="json"),
        pytest.param("bad.yaml", "model: [unclosed\n", "Failed to parse YAML", id="yaml"),
        pytest.param("bad.toml", "model = \n", "Failed to parse TOML", id="toml"),
        pytest.param("list.json", "[1, 2, 3]", "must be a mapping", id="json-list-root"),
        pytest.param("scalar.yaml", "just a string\n", "must be a mapping", id="yaml-scalar-root"),
    ],
)
def test_parse_failures_raise_config_parse_error(tmp_path: Path, name: str, content: str, match: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigParseError, match=match):
        parse_config_file(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigParseError, match="Failed to read file"):
        parse_config_file(tmp_path / "absent.json")


def test_parse_config_text_unknown_format() -> None:
    with pytest.raises(ConfigParseError, match="Unknown config format"):
        parse_config_text("{}", "ini")


def test_parse_config_text_in_memory_source() -> None:
    tree = parse_config_text('{"seed": 1}', "json")

    assert tree.source == "<memory>"
    assert tree.field_exists("seed")


def test_oversized_json_integer_is_a_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "huge.json"
    path.write_text('{"max_tokens": ' + "9" * 5000 + "}", encoding="utf-8")

    with pytest.raises(ConfigParseError, match="Failed to parse JSON"):
        parse_config_file(path)


def test_self_referencing_yaml_alias_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "loop.yaml"
    path.write_text("a: &node\n  b: *node\n", encoding="utf-8")

    with pytest.raises(ConfigParseError, match="self-referencing"):
        parse_config_file(path)


def test_repeated_yaml_alias_is_accepted(tmp_path: Path) -> None:
    path = tmp_path / "shared.yaml"
    path.write_text(
        "defaults: &defaults\n  temperature: 0.2\nprimary: *defaults\nfallback:\n  - *defaults\n",
        encoding="utf-8",
    )

    tree = parse_config_file(path)

    assert tree.collect_values("temperature") == [0.2, 0.2]
