"""Result of a single forecast request."""

from dataclasses import dataclass, field

from darksky.api.errors import APIError, DarkSkyError
from darksky.models.forecast import Forecast


@dataclass(frozen=True)
class ForecastResponse:
    """Forecast plus quota telemetry, or the error that prevented it.

    When ``error`` is set, ``forecast`` is the empty ``Forecast()`` and
    must not be trusted.
    """

    forecast: Forecast = field(default_factory=Forecast)
    api_call_count: int = 0
    error: DarkSkyError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status_code(self) -> int | None:
        """HTTP status of a failed API call, None otherwise."""
        if isinstance(self.error, APIError):
            return self.error.status_code
        return None
