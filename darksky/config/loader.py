"""YAML config loader and request factory."""

import os
from pathlib import Path

import yaml

from darksky.api.forecast_request import ForecastRequest, make_request
from darksky.config.schema import ClientConfig

API_KEY_ENV = "DARKSKY_API_KEY"


def load_config(path: str | Path | None = None) -> ClientConfig:
    """Load and validate config from a YAML file.

    A missing path gives the defaults. An empty ``api_key`` is filled
    from the DARKSKY_API_KEY environment variable.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if not raw.get("api_key"):
        raw["api_key"] = os.environ.get(API_KEY_ENV, "")

    return ClientConfig(**raw)


def request_from_config(
    config: ClientConfig, latitude: float, longitude: float
) -> ForecastRequest:
    """Build a request carrying the configured key, base URL, lang, units and timeout."""
    return (
        make_request(config.api_key, latitude, longitude)
        .with_base_url(config.base_url)
        .with_lang(config.lang)
        .with_units(config.units)
        .with_timeout(config.timeout)
    )


def masked_config_json(config: ClientConfig) -> str:
    data = config.model_copy(
        update={"api_key": "***" if config.api_key else ""}
    )
    return data.model_dump_json(indent=2)
