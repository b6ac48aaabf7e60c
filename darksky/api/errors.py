"""Errors reported by the forecast client.

``ForecastRequest.get`` returns these inside the response instead of
raising them; ``render_url`` and the codec raise them directly.
"""


class DarkSkyError(Exception):
    """Base class for every failure the client reports."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class URLConstructionError(DarkSkyError):
    """The configured base URL cannot be turned into a request URL."""


class TransportError(DarkSkyError):
    """The API host could not be reached (connect, DNS, timeout, read)."""


class APIError(DarkSkyError):
    """The API answered with HTTP >= 400. The message is the raw body."""


class DecodeError(DarkSkyError):
    """A successful response body did not match the forecast schema."""
