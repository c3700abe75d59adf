"""Shared test fixtures."""

import json
import time
from pathlib import Path

import pytest
import yaml

from wxglyph.models.provider import DSForecasts


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def seattle_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "darksky_forecast_seattle.json") as f:
        return json.load(f)


@pytest.fixture
def seattle_forecasts(seattle_payload: dict) -> DSForecasts:
    return DSForecasts.model_validate(seattle_payload)


@pytest.fixture
def now_payload() -> dict:
    """Single-entry payload timestamped now: clear daily, cloudy hourly."""
    now = int(time.time())
    return {
        "daily": {"summary": "", "data": [{"time": now, "icon": "clear-day"}]},
        "hourly": {
            "summary": "",
            "data": [{"time": now, "icon": "cloudy", "precipProbability": 0.4}],
        },
        "currently": {"temperature": 56.2, "icon": "rain", "precipProbability": 0.9},
    }


@pytest.fixture
def token_path(tmp_path: Path) -> Path:
    """Write a valid token file and return its path."""
    path = tmp_path / "darksky.json"
    path.write_text(json.dumps({"token": "abc123"}))
    return path


@pytest.fixture
def config_yaml_path(tmp_path: Path, token_path: Path) -> Path:
    """Write a settings YAML pointing at a test host and return its path."""
    data = {
        "token_file": str(token_path),
        "location": {"latitude": 47.698, "longitude": -122.379},
        "provider": {"base_url": "https://test-darksky.example.com", "timeout": 5.0},
    }
    path = tmp_path / "wxglyph.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
