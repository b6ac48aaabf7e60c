"""JSON codec for the forecast models.

Decoding walks the dataclass fields: a missing key or ``null`` yields the
field's zero value, unknown keys are ignored, and a value of the wrong
JSON type raises ``DecodeError``.
"""

import json
from dataclasses import fields, is_dataclass
from typing import Any, get_args, get_origin

from darksky.api.errors import DecodeError
from darksky.models.forecast import Forecast


def forecast_from_json(body: bytes | str) -> Forecast:
    """Decode an API response body into a ``Forecast``."""
    try:
        raw = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid JSON: {e}") from e
    return _decode(Forecast, raw, "forecast")


def forecast_from_dict(raw: dict) -> Forecast:
    return _decode(Forecast, raw, "forecast")


def forecast_to_dict(forecast: Forecast) -> dict:
    """Encode a ``Forecast`` using the API's key names."""
    return _encode(forecast)


def forecast_to_json(forecast: Forecast, indent: int | None = None) -> str:
    return json.dumps(_encode(forecast), indent=indent)


def _decode(tp: Any, value: Any, path: str) -> Any:
    if is_dataclass(tp):
        if value is None:
            return tp()
        if not isinstance(value, dict):
            raise DecodeError(f"{path}: expected object, got {_json_type(value)}")
        kwargs = {}
        for f in fields(tp):
            key = f.metadata["json"]
            if key in value:
                kwargs[f.name] = _decode(f.type, value[key], f"{path}.{key}")
        return tp(**kwargs)

    if get_origin(tp) is list:
        if value is None:
            return []
        if not isinstance(value, list):
            raise DecodeError(f"{path}: expected array, got {_json_type(value)}")
        (item_type,) = get_args(tp)
        return [_decode(item_type, item, f"{path}[{i}]") for i, item in enumerate(value)]

    if tp is str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise DecodeError(f"{path}: expected string, got {_json_type(value)}")
        return value

    if tp is float:
        if value is None:
            return 0.0
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DecodeError(f"{path}: expected number, got {_json_type(value)}")
        return float(value)

    if tp is int:
        if value is None:
            return 0
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodeError(f"{path}: expected integer, got {_json_type(value)}")
        return value

    raise TypeError(f"Unsupported field type at {path}: {tp!r}")


def _encode(value: Any) -> Any:
    if is_dataclass(value):
        return {f.metadata["json"]: _encode(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, list):
        return [_encode(item) for item in value]
    return value


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"
