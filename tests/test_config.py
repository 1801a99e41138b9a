"""Tests for Config loading and dot-path access."""

from __future__ import annotations

from pathlib import Path

import pytest

from scriptsmith.config import DEFAULT_TITLE, DEFAULTS, Config
from scriptsmith.errors import ConfigError, ConfigNotFoundError


class TestConfigDefaults:
    def test_defaults_without_data(self) -> None:
        config = Config()
        assert config.get("generator.title") == DEFAULT_TITLE
        assert config.get("generator.strict") is False
        assert config.get("generator.apply_input_defaults") is False
        assert config.get("registry.path") is None
        assert config.get("logging.level") == "WARNING"

    def test_override_merges_nested(self) -> None:
        config = Config({"generator": {"strict": True}})
        assert config.get("generator.strict") is True
        assert config.get("generator.title") == DEFAULT_TITLE

    def test_unknown_key_returns_default(self) -> None:
        config = Config()
        assert config.get("nope.deeper") is None
        assert config.get("nope", "fallback") == "fallback"

    def test_get_through_scalar(self) -> None:
        assert Config().get("generator.title.more", 1) == 1

    def test_to_dict_is_copy(self) -> None:
        config = Config()
        data = config.to_dict()
        data["generator"]["strict"] = True
        assert config.get("generator.strict") is False

    def test_defaults_not_mutated(self) -> None:
        Config({"generator": {"title": "Changed"}})
        assert DEFAULTS["generator"]["title"] == DEFAULT_TITLE


class TestConfigLoad:
    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "scriptsmith.yaml"
        path.write_text("generator:\n  title: Laptop Setup\nregistry:\n  path: ./catalog.yaml\n")
        config = Config.load(path)
        assert config.get("generator.title") == "Laptop Setup"
        assert config.get("registry.path") == "./catalog.yaml"
        assert config.get("generator.strict") is False

    def test_load_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Config.load(path).get("generator.title") == DEFAULT_TITLE

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError) as exc_info:
            Config.load(tmp_path / "missing.yaml")
        assert exc_info.value.details["config_path"].endswith("missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("generator: [unclosed\n")
        with pytest.raises(ConfigError):
            Config.load(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ConfigError):
            Config.load(path)


class TestConfigValidation:
    @pytest.mark.parametrize("title", [None, 42, ["a"]])
    def test_title_must_be_string(self, title) -> None:
        with pytest.raises(ConfigError):
            Config({"generator": {"title": title}})

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            Config({"logging": {"level": "loud"}})
        assert "logging" in exc_info.value.message

    def test_log_level_normalized(self) -> None:
        assert Config({"logging": {"level": "debug"}}).get("logging.level") == "DEBUG"

    def test_bool_values_stored_coerced(self) -> None:
        config = Config({"generator": {"strict": "no", "apply_input_defaults": "yes"}})
        assert config.get("generator.strict") is False
        assert config.get("generator.apply_input_defaults") is True

    def test_section_must_be_mapping(self) -> None:
        with pytest.raises(ConfigError):
            Config({"generator": "strict"})

    def test_unknown_key_in_section(self) -> None:
        with pytest.raises(ConfigError):
            Config({"generator": {"strcit": True}})

    def test_unknown_top_level_section_kept(self) -> None:
        assert Config({"extra": {"k": 1}}).get("extra.k") == 1

    def test_load_rejects_bad_level(self, tmp_path: Path) -> None:
        path = tmp_path / "scriptsmith.yaml"
        path.write_text("logging:\n  level: loud\n")
        with pytest.raises(ConfigError):
            Config.load(path)
