"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

TEST_BASE_URL = "https://test-darksky.example.com/forecast"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def chicago_body(fixtures_dir: Path) -> bytes:
    """Raw Dark Sky response body for Chicago with three alerts."""
    return (fixtures_dir / "chicago_forecast.json").read_bytes()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api_key": "yaml_key",
        "base_url": TEST_BASE_URL,
        "units": "si",
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DARKSKY_API_KEY", raising=False)
