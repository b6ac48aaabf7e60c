"""Pydantic v2 configuration schema for the forecast client."""

from pydantic import BaseModel, Field

from darksky.api.forecast_request import DARKSKY_BASE_URL
from darksky.models.common import Lang, Units


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = DARKSKY_BASE_URL
    # Plain strings so codes the enums don't know yet still reach the API.
    lang: str = Lang.ENGLISH.value
    units: str = Units.US.value
    timeout: float | None = Field(default=None, gt=0.0)
