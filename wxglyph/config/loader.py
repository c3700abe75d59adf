"""YAML settings and JSON token loaders."""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from wxglyph.config.schema import ApiToken, AppConfig


class ConfigError(Exception):
    """Raised when the settings or token file is missing or malformed."""


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate settings from a YAML file.

    With no path, or an empty file, every setting takes its default.
    """
    if path is None:
        return AppConfig()

    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Badly formatted config {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    try:
        return AppConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


def load_token(path: str | Path) -> ApiToken:
    """Read the API token from a JSON file shaped like {"token": "..."}."""
    path = Path(path)
    try:
        with open(path) as f:
            raw = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read auth token file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Badly formatted auth token file {path}: {e}") from e

    try:
        return ApiToken.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Badly formatted auth token file {path}: {e}") from e
