# Area: Shared Tests
"""Tests for jeopardy_board.config — defaults, JSON file and environment."""

import json
import logging

import pytest

from jeopardy_board.config import (
    DEFAULT_CONFIG,
    ENV_MAPPINGS,
    load_config,
    log_level,
    validate_config,
)
from jeopardy_board.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Isolate each test from the caller's environment and .env files."""
    monkeypatch.chdir(tmp_path)
    for env_key in ENV_MAPPINGS:
        # setenv first so monkeypatch restores anything load_dotenv sets
        monkeypatch.setenv(env_key, "")
        monkeypatch.delenv(env_key)


class TestDefaults:

    def test_defaults_without_sources(self):
        config = load_config()
        assert config == DEFAULT_CONFIG

    def test_defaults_not_mutated(self, monkeypatch):
        monkeypatch.setenv("JEOPARDY_LOG_LEVEL", "debug")
        load_config()
        assert DEFAULT_CONFIG["log_level"] == "INFO"


class TestConfigFile:

    def test_file_values_override_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"minimum_player_count": 2, "log_file": "game.log"}))
        config = load_config(str(path))
        assert config["minimum_player_count"] == 2
        assert config["log_file"] == "game.log"

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "missing.json"))
        assert config["minimum_player_count"] == 3

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{nope")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError) as exc_info:
            load_config(str(path))
        assert "JSON object" in str(exc_info.value)

    def test_unreadable_path(self, tmp_path):
        directory = tmp_path / "config.d"
        directory.mkdir()
        with pytest.raises(ConfigError):
            load_config(str(directory))


class TestEnvironment:

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"minimum_player_count": 2}))
        monkeypatch.setenv("JEOPARDY_MIN_PLAYERS", "4")
        assert load_config(str(path))["minimum_player_count"] == 4

    def test_question_set_path(self, monkeypatch):
        monkeypatch.setenv("JEOPARDY_QUESTION_SET", "clues.json")
        assert load_config()["question_set_path"] == "clues.json"

    def test_dotenv_file_is_read(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("JEOPARDY_LOG_FILE=from_dotenv.log\n")
        assert load_config(env_file=str(env_file))["log_file"] == "from_dotenv.log"

    def test_dotenv_found_in_working_directory(self, tmp_path):
        (tmp_path / ".env").write_text("JEOPARDY_LOG_LEVEL=warning\n")
        assert load_config()["log_level"] == "WARNING"

    def test_non_integer_min_players(self, monkeypatch):
        monkeypatch.setenv("JEOPARDY_MIN_PLAYERS", "three")
        with pytest.raises(ConfigError):
            load_config()


class TestValidateConfig:

    def test_log_level_normalized(self):
        config = dict(DEFAULT_CONFIG, log_level="debug")
        validate_config(config)
        assert config["log_level"] == "DEBUG"
        assert log_level(config) == logging.DEBUG

    def test_unknown_log_level(self):
        with pytest.raises(ConfigError):
            validate_config(dict(DEFAULT_CONFIG, log_level="LOUD"))

    @pytest.mark.parametrize("value", [0, -1, "3", True, None])
    def test_invalid_minimum_player_count(self, value):
        with pytest.raises(ConfigError):
            validate_config(dict(DEFAULT_CONFIG, minimum_player_count=value))
