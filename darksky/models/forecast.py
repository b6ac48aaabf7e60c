"""Dark Sky forecast data models.

Every field defaults to its zero value: the API omits whatever it has no
data for, and an absent key is not an error. The ``json`` metadata entry
names the key the field is read from and written to.
"""

from dataclasses import dataclass, field


def _key(name: str, default=None, factory=None):
    if factory is not None:
        return field(default_factory=factory, metadata={"json": name})
    return field(default=default, metadata={"json": name})


@dataclass(frozen=True)
class DataPoint:
    time: int = _key("time", 0)
    summary: str = _key("summary", "")
    icon: str = _key("icon", "")
    sunrise_time: int = _key("sunriseTime", 0)
    sunset_time: int = _key("sunsetTime", 0)
    precip_intensity: float = _key("precipIntensity", 0.0)
    precip_intensity_max: float = _key("precipIntensityMax", 0.0)
    precip_intensity_max_time: int = _key("precipIntensityMaxTime", 0)
    precip_probability: float = _key("precipProbability", 0.0)
    precip_type: str = _key("precipType", "")
    precip_accumulation: float = _key("precipAccumulation", 0.0)
    temperature: float = _key("temperature", 0.0)
    temperature_min: float = _key("temperatureMin", 0.0)
    temperature_min_time: int = _key("temperatureMinTime", 0)
    temperature_max: float = _key("temperatureMax", 0.0)
    temperature_max_time: int = _key("temperatureMaxTime", 0)
    apparent_temperature: float = _key("apparentTemperature", 0.0)
    dew_point: float = _key("dewPoint", 0.0)
    wind_speed: float = _key("windSpeed", 0.0)
    wind_bearing: float = _key("windBearing", 0.0)
    cloud_cover: float = _key("cloudCover", 0.0)
    humidity: float = _key("humidity", 0.0)
    pressure: float = _key("pressure", 0.0)
    visibility: float = _key("visibility", 0.0)
    ozone: float = _key("ozone", 0.0)
    moon_phase: float = _key("moonPhase", 0.0)

    @property
    def wind_direction(self) -> str:
        """Compass text for ``wind_bearing`` in degrees, e.g. 225 -> "SW".

        The four sectors overlap, so a bearing can pick up two letters.
        Sector edges are exclusive and the bearing is not normalised:
        430 gives "N" where 70 gives "E".
        """
        bearing = self.wind_bearing
        direction = ""
        if bearing > 293 or bearing < 67:
            direction += "N"
        if bearing < 247 and bearing > 113:
            direction += "S"
        if bearing > 22 and bearing < 157:
            direction += "E"
        if bearing < 337 and bearing > 203:
            direction += "W"
        return direction


@dataclass(frozen=True)
class DataBlock:
    summary: str = _key("summary", "")
    icon: str = _key("icon", "")
    data: list[DataPoint] = _key("data", factory=list)  # chronological


@dataclass(frozen=True)
class Alert:
    title: str = _key("title", "")
    description: str = _key("description", "")
    expires: int = _key("expires", 0)
    uri: str = _key("uri", "")


@dataclass(frozen=True)
class Flags:
    darksky_unavailable: str = _key("darksky-unavailable", "")
    darksky_stations: list[str] = _key("darksky-stations", factory=list)
    datapoint_stations: list[str] = _key("datapoint-stations", factory=list)
    isd_stations: list[str] = _key("isds-stations", factory=list)
    lamp_stations: list[str] = _key("lamp-stations", factory=list)
    metar_stations: list[str] = _key("metars-stations", factory=list)
    metno_license: str = _key("metnol-license", "")
    sources: list[str] = _key("sources", factory=list)
    units: str = _key("units", "")


@dataclass(frozen=True)
class Forecast:
    latitude: float = _key("latitude", 0.0)
    longitude: float = _key("longitude", 0.0)
    timezone: str = _key("timezone", "")
    offset: int = _key("offset", 0)  # hours from UTC
    currently: DataPoint = _key("currently", factory=DataPoint)
    minutely: DataBlock = _key("minutely", factory=DataBlock)
    hourly: DataBlock = _key("hourly", factory=DataBlock)
    daily: DataBlock = _key("daily", factory=DataBlock)
    alerts: list[Alert] = _key("alerts", factory=list)
    flags: Flags = _key("flags", factory=Flags)
