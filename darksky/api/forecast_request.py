"""Dark Sky forecast request builder and executor."""

import logging

import httpx

from darksky.api.codec import forecast_from_json
from darksky.api.errors import (
    APIError,
    DecodeError,
    TransportError,
    URLConstructionError,
)
from darksky.models.common import NO_TIME, Lang, Units
from darksky.models.response import ForecastResponse

logger = logging.getLogger(__name__)

DARKSKY_BASE_URL = "https://api.darksky.net/forecast"
# Number of calls made by the key in the current 24h period.
API_CALLS_HEADER = "X-Forecast-API-Calls"


class ForecastRequest:
    """Chainable forecast request.

    Setters mutate the request in place and return it. A request belongs
    to one caller; do not share it between threads while configuring it.
    ``exclude`` and ``extend_hourly`` are kept on the request but are not
    sent to the API.
    """

    def __init__(
        self,
        key: str,
        latitude: float,
        longitude: float,
        base_url: str = DARKSKY_BASE_URL,
    ):
        self.key = key
        self.latitude = latitude
        self.longitude = longitude
        self.time: int = NO_TIME
        self.lang: Lang | str = Lang.ENGLISH
        self.units: Units | str = Units.US
        self.extend_hourly = False
        self.exclude: list[str] = []
        self.timeout: float | None = None
        self.base_url = base_url

    def with_base_url(self, base_url: str) -> "ForecastRequest":
        self.base_url = base_url
        return self

    def with_time(self, time: int) -> "ForecastRequest":
        """Request a Time Machine forecast at ``time`` (Unix seconds)."""
        self.time = time
        return self

    def with_lang(self, lang: Lang | str) -> "ForecastRequest":
        self.lang = lang
        return self

    def with_units(self, units: Units | str) -> "ForecastRequest":
        self.units = units
        return self

    def with_exclude(self, *blocks: str) -> "ForecastRequest":
        self.exclude = list(blocks)
        return self

    def with_extend_hourly(self, extend: bool = True) -> "ForecastRequest":
        self.extend_hourly = extend
        return self

    def with_timeout(self, timeout: float | None) -> "ForecastRequest":
        self.timeout = timeout
        return self

    def render_url(self) -> str:
        """Build ``{base}/{key}/{lat},{lng}[,{time}]?lang=..&units=..``.

        Key and coordinates go into the path as-is.
        """
        base = self.base_url.rstrip("/")
        try:
            parsed = httpx.URL(base)
        except httpx.InvalidURL as e:
            raise URLConstructionError(f"Invalid base URL {self.base_url!r}: {e}") from e
        if not parsed.scheme or not parsed.host:
            raise URLConstructionError(
                f"Invalid base URL {self.base_url!r}: scheme and host are required"
            )

        path = f"{base}/{self.key}/{self.latitude},{self.longitude}"
        if self.time != NO_TIME:
            path += f",{self.time}"
        query = httpx.QueryParams({"lang": str(self.lang), "units": str(self.units)})
        url = f"{path}?{query}"
        try:
            httpx.URL(url)
        except httpx.InvalidURL as e:
            raise URLConstructionError(f"Invalid request URL: {e}") from e
        return url

    def get(self) -> ForecastResponse:
        """Perform the request. Failures come back in ``response.error``."""
        try:
            url = self.render_url()
        except URLConstructionError as e:
            logger.warning("Cannot build Dark Sky URL: %s", e)
            return ForecastResponse(error=e)

        safe_url = self._redact(url)
        logger.debug("GET %s", safe_url)
        try:
            if self.timeout is None:
                resp = httpx.get(url, follow_redirects=True)
            else:
                resp = httpx.get(url, follow_redirects=True, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.warning("Dark Sky request failed: %s -> %s", safe_url, e)
            error = TransportError(str(e))
            error.__cause__ = e
            return ForecastResponse(error=error)

        if resp.status_code >= 400:
            body = resp.text
            logger.warning("Dark Sky API %d: %s -> %s", resp.status_code, safe_url, body)
            return ForecastResponse(error=APIError(body, resp.status_code))

        api_call_count = 0
        raw_count = resp.headers.get(API_CALLS_HEADER)
        if raw_count is not None:
            parsed_count = _parse_call_count(raw_count)
            if parsed_count is not None:
                api_call_count = parsed_count
            else:
                logger.debug("Ignoring unparsable %s header: %r", API_CALLS_HEADER, raw_count)

        try:
            forecast = forecast_from_json(resp.content)
        except DecodeError as e:
            logger.warning("Dark Sky response did not decode: %s -> %s", safe_url, e)
            return ForecastResponse(api_call_count=api_call_count, error=e)

        return ForecastResponse(forecast=forecast, api_call_count=api_call_count)

    def _redact(self, url: str) -> str:
        if not self.key:
            return url
        return url.replace(f"/{self.key}/", "/***/", 1)


def make_request(key: str, latitude: float, longitude: float) -> ForecastRequest:
    """Start a request for the current forecast at a location, in English and US units."""
    return ForecastRequest(key, latitude, longitude)


def _parse_call_count(raw: str) -> int | None:
    """Parse a plain decimal header value with an optional sign."""
    digits = raw[1:] if raw.startswith(("+", "-")) else raw
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(raw)
