"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from darksky.api.forecast_request import API_CALLS_HEADER
from darksky.cli import main

BASE_URL = "https://test-darksky.example.com/forecast"
FORECAST_URL = f"{BASE_URL}/yaml_key/41.8781,-87.6297"


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_config_show(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "yaml_key" not in captured.out
        assert json.loads(captured.out)["units"] == "si"

    def test_forecast_without_key(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "forecast", "41.8781", "-87.6297"])
        assert result == 1
        assert "API key" in capsys.readouterr().out

    @respx.mock
    def test_forecast_summary(self, config_yaml_path: Path, chicago_body: bytes, capsys):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(
                200, content=chicago_body, headers={API_CALLS_HEADER: "12"}
            )
        )

        result = main(["--config", str(config_yaml_path), "forecast", "41.8781", "-87.6297"])
        assert result == 0
        out = capsys.readouterr().out
        assert "America/Chicago" in out
        assert "Light Snow" in out
        assert "SE" in out
        assert "Alerts: 3" in out
        assert "Winter Weather Advisory for Cook, IL" in out
        assert "API calls today: 12" in out

    @respx.mock
    def test_forecast_options(self, config_yaml_path: Path, chicago_body: bytes, capsys):
        route = respx.get(url__startswith=BASE_URL).mock(
            return_value=httpx.Response(200, content=chicago_body)
        )

        result = main([
            "--config", str(config_yaml_path),
            "forecast", "41.8781", "-87.6297",
            "--time", "1486324800", "--lang", "de", "--units", "auto", "--json",
        ])
        assert result == 0
        sent = str(route.calls[0].request.url)
        assert sent == f"{FORECAST_URL},1486324800?lang=de&units=auto"
        data = json.loads(capsys.readouterr().out)
        assert len(data["alerts"]) == 3
        assert data["currently"]["windBearing"] == 147

    @respx.mock
    def test_forecast_api_error(self, config_yaml_path: Path, capsys):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(500, text="A Server Error Occurred.")
        )

        result = main(["--config", str(config_yaml_path), "forecast", "41.8781", "-87.6297"])
        assert result == 1
        assert "Error: A Server Error Occurred." in capsys.readouterr().out

    def test_forecast_bad_base_url(self, config_yaml_path: Path, capsys):
        result = main([
            "--config", str(config_yaml_path),
            "forecast", "41.8781", "-87.6297", "--base-url", "not-a-url",
        ])
        assert result == 1
        assert "Invalid base URL" in capsys.readouterr().out
