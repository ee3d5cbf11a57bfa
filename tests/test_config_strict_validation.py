from __future__ import annotations

import logging
from pathlib import Path

import pytest

from codescope.rules.config import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG_TOML,
    CodeScopeConfig,
    ConfigError,
    RulesConfig,
    build_registry,
    find_config,
    load_config,
    load_config_or_default,
)


def _write_config(repo_root: Path, toml_content: str) -> Path:
    config_path = repo_root / CONFIG_FILENAME
    config_path.write_text(toml_content, encoding="utf-8")
    return config_path


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_unknown_rules_key_rejected(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        """
[rules]
max_file_loc = 100
max_widgets = 3
""".strip(),
    )

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_unknown_severity_key_rejected(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        """
[rules.severity]
max_widgets = "Error"
""".strip(),
    )

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_negative_threshold_rejected(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "[rules]\nmax_complexity = -1\n")

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "[rules\nmax_file_loc = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(config_path)


def test_missing_file_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path / CONFIG_FILENAME)


def test_valid_config_accepted(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path,
        """
exclude = ["generated/**"]

[rules]
max_file_loc = 150
max_fan_out = 3

[rules.severity]
max_file_loc = "Error"
""".strip(),
    )

    config = load_config(config_path)

    assert config.exclude == ["generated/**"]
    assert config.rules.max_file_loc == 150
    assert config.rules.max_fan_out == 3
    assert config.rules.max_complexity == 10
    assert config.rules.severity.max_file_loc == "Error"
    assert config.rules.severity.max_complexity == "Warning"


def test_empty_config_accepted(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "")

    config = load_config(config_path)

    assert config == CodeScopeConfig()
    assert config.include == []
    assert config.exclude == []
    assert config.nested_gitignore is False


def test_default_template_matches_defaults(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, DEFAULT_CONFIG_TOML)

    config = load_config(config_path)

    assert config.rules == RulesConfig()


def test_load_config_or_default_falls_back(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config_path = _write_config(tmp_path, "not = [valid")

    with caplog.at_level(logging.WARNING, logger="codescope.rules.config"):
        config = load_config_or_default(config_path)

    assert config == CodeScopeConfig()
    assert "using default configuration" in caplog.text


def test_load_config_or_default_without_path() -> None:
    assert load_config_or_default(None) == CodeScopeConfig()


def test_find_config(tmp_path: Path) -> None:
    source = tmp_path / "app.ts"
    source.write_text("", encoding="utf-8")

    assert find_config(tmp_path) is None
    assert find_config(source) is None

    config_path = _write_config(tmp_path, "")

    assert find_config(tmp_path) == config_path
    assert find_config(source) == config_path


def test_build_registry_uses_configured_thresholds_and_severities() -> None:
    rules = RulesConfig.model_validate(
        {
            "max_file_loc": 50,
            "max_fan_out": 2,
            "severity": {"max_file_loc": "ERROR", "max_fan_out": "bogus"},
        }
    )

    registry = build_registry(rules)

    assert [rule.name for rule in registry.rules] == [
        "file_size",
        "function_size",
        "complexity",
        "coupling",
        "structure_stats",
    ]
    file_size, _, _, coupling, _ = registry.rules
    assert file_size.max_loc == 50  # type: ignore[attr-defined]
    assert file_size.severity == "error"  # type: ignore[attr-defined]
    assert coupling.max_fan_out == 2  # type: ignore[attr-defined]
    assert coupling.severity == "info"  # type: ignore[attr-defined]
