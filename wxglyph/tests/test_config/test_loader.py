"""Tests for settings and token loading."""

import json
from pathlib import Path

import pytest

from wxglyph.config.defaults import DEFAULT_LATITUDE, DEFAULT_TOKEN_PATH
from wxglyph.config.loader import ConfigError, load_config, load_token


class TestLoadConfig:
    def test_no_path_uses_defaults(self):
        config = load_config()
        assert config.token_file == DEFAULT_TOKEN_PATH
        assert config.location.latitude == DEFAULT_LATITUDE
        assert config.display.hourly_count == 8

    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.provider.base_url == "https://test-darksky.example.com"
        assert config.provider.timeout == 5.0
        assert config.display.color is True

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.provider.base_url == "https://api.darksky.net"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config(tmp_path / "nope.yaml")

    def test_bad_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("provider: [unclosed")
        with pytest.raises(ConfigError, match="Badly formatted"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_schema_violation(self, tmp_path: Path):
        path = tmp_path / "bad_count.yaml"
        path.write_text("display:\n  hourly_count: 0\n")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)


class TestLoadToken:
    def test_valid(self, token_path: Path):
        assert load_token(token_path).token == "abc123"

    def test_extra_keys_ignored(self, tmp_path: Path):
        path = tmp_path / "token.json"
        path.write_text(json.dumps({"token": "xyz", "note": "personal key"}))
        assert load_token(path).token == "xyz"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Cannot read auth token"):
            load_token(tmp_path / "missing.json")

    def test_bad_json(self, tmp_path: Path):
        path = tmp_path / "token.json"
        path.write_text("{token: abc")
        with pytest.raises(ConfigError, match="Badly formatted"):
            load_token(path)

    def test_missing_token_key(self, tmp_path: Path):
        path = tmp_path / "token.json"
        path.write_text(json.dumps({"key": "abc"}))
        with pytest.raises(ConfigError, match="Badly formatted"):
            load_token(path)

    def test_empty_token(self, tmp_path: Path):
        path = tmp_path / "token.json"
        path.write_text(json.dumps({"token": ""}))
        with pytest.raises(ConfigError):
            load_token(path)
