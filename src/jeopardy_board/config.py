# Area: Shared
"""
jeopardy_board.config — Configuration loading
=============================================

Builds the configuration dict from defaults, an optional JSON file and
environment variables (a ``.env`` file is read first with python-dotenv).

Environment variables:
    JEOPARDY_LOG_FILE        Path of the JSON log file
    JEOPARDY_LOG_LEVEL       DEBUG, INFO, WARNING, ERROR or CRITICAL
    JEOPARDY_MIN_PLAYERS     Roster size required to start a game
    JEOPARDY_QUESTION_SET    Question-set file to load at startup

The rules of the game (board shape, wager bounds) are not configurable.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

from .constants import MINIMUM_PLAYER_COUNT
from .errors import ConfigError

logger = logging.getLogger("jeopardy_board.config")

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_file": "jeopardy_board.log",
    "log_level": "INFO",
    "minimum_player_count": MINIMUM_PLAYER_COUNT,
    "question_set_path": None,
}

ENV_MAPPINGS = {
    "JEOPARDY_LOG_FILE": "log_file",
    "JEOPARDY_LOG_LEVEL": "log_level",
    "JEOPARDY_MIN_PLAYERS": "minimum_player_count",
    "JEOPARDY_QUESTION_SET": "question_set_path",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(config_path: Optional[str] = None, env_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config from defaults, a JSON file and the environment.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Optional .env path (default: search from the working directory)

    Returns:
        Validated configuration dict

    Raises:
        ConfigError: If the file is malformed or a value is invalid
    """
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Malformed config file {path}: {e}") from e
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigError(f"Could not read config file {path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(
                    f"Config file {path} must contain a JSON object, got {type(data).__name__}"
                )
            config.update(data)
        else:
            logger.warning(f"Config file not found: {path}")

    load_dotenv(env_file or find_dotenv(usecwd=True))

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key == "minimum_player_count":
                try:
                    value = int(value)
                except ValueError as e:
                    raise ConfigError(f"{env_key} must be an integer, got {value!r}") from e
            config[config_key] = value

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration values.

    Raises:
        ConfigError: If a value is out of range or unknown
    """
    level = str(config.get("log_level", "")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {config.get('log_level')!r}")
    config["log_level"] = level

    minimum = config.get("minimum_player_count")
    if isinstance(minimum, bool) or not isinstance(minimum, int) or minimum < 1:
        raise ConfigError(f"minimum_player_count must be a positive integer, got {minimum!r}")


def log_level(config: Dict[str, Any]) -> int:
    """Return the numeric logging level for a validated config."""
    return getattr(logging, config["log_level"])
