# ABOUTME: Pydantic BaseModels for location search, IP lookup and weather API responses.
# ABOUTME: Wire field names are mapped with aliases; missing or null fields default to zero or empty.

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _WireModel(BaseModel):
    """Base for decoded response bodies: accepts wire aliases and Python field names."""

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat an explicit JSON null like a missing key so the field default applies."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Coordinate(_WireModel):
    """A (latitude, longitude) pair in decimal degrees."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    latitude: float = Field(0.0, alias="lat")
    longitude: float = Field(0.0, alias="lon")


class LocationCandidate(_WireModel):
    """One ranked match returned by a place search."""

    coordinate: Coordinate = Field(default_factory=Coordinate, alias="coord")
    name: str = ""
    full_name: str = ""
    compact_name: str = ""
    country: str = ""


class LocationSearchResult(_WireModel):
    """Parsed response from the place-search endpoint, in provider order."""

    message: str = ""
    status_code: str = Field("", alias="cod")
    count: int = 0
    candidates: list[LocationCandidate] = Field(default_factory=list, alias="list")


class WeatherCondition(_WireModel):
    id: int = 0
    main: str = ""
    description: str = ""
    icon_code: str = Field("", alias="icon")


class CurrentWeather(_WireModel):
    """Current conditions. A wind_gust of 0 means the gust was not reported."""

    dt: int = 0
    sunrise: int = 0
    sunset: int = 0
    temp: float = 0.0
    feels_like: float = 0.0
    pressure: int = 0
    humidity: int = 0
    dew_point: float = 0.0
    uv_index: float = Field(0.0, alias="uvi")
    clouds: int = 0
    visibility: int = 0
    wind_speed: float = 0.0
    wind_deg: int = 0
    wind_gust: float = 0.0
    weather: list[WeatherCondition] = []


class MinutelyPoint(_WireModel):
    dt: int = 0
    precipitation: float = 0.0


class RainInfo(_WireModel):
    one_hour: float = Field(0.0, alias="1h")


class HourlyPoint(_WireModel):
    dt: int = 0
    temp: float = 0.0
    feels_like: float = 0.0
    pressure: int = 0
    humidity: int = 0
    dew_point: float = 0.0
    uv_index: float = Field(0.0, alias="uvi")
    clouds: int = 0
    visibility: int = 0
    wind_speed: float = 0.0
    wind_deg: int = 0
    wind_gust: float = 0.0
    weather: list[WeatherCondition] = []
    pop: float = 0.0
    rain: RainInfo | None = None


class Forecast(_WireModel):
    """Sub-daily point nested inside a DailyPoint."""

    dt: int = 0
    temp: float = 0.0
    precipitation: float = 0.0


class DailyPoint(_WireModel):
    dt: int = 0
    sunrise: int = 0
    sunset: int = 0
    temp_max: float = 0.0
    temp_min: float = 0.0
    pressure: int = 0
    humidity: int = 0
    wind_speed: float = 0.0
    wind_deg: int = 0
    wind_gust: float = 0.0
    weather: list[WeatherCondition] = []
    clouds: int = 0
    precipitation: float = 0.0
    pop: float = 0.0
    uv_index: float = Field(0.0, alias="uvi")
    forecast: list[Forecast] = []


class WeatherSnapshot(_WireModel):
    """Parsed response from the weather endpoint: current conditions plus short-range forecasts."""

    latitude: float = Field(0.0, alias="lat")
    longitude: float = Field(0.0, alias="lon")
    timezone_name: str = Field("", alias="timezone")
    timezone_offset_seconds: float = Field(0.0, alias="timezone_offset")
    current: CurrentWeather = Field(default_factory=CurrentWeather)
    minutely: list[MinutelyPoint] = []
    hourly: list[HourlyPoint] = []
    daily: list[DailyPoint] = []


class IPInfo(_WireModel):
    """Response from the IP-info service. Only the coordinate is used."""

    ip: str = ""
    country: str = ""
    country_code: str = ""
    region: str = ""
    zip_code: str = ""
    city: str = ""
    state_code: str = ""
    longitude: float = 0.0
    latitude: float = 0.0
    isp: str = ""
    isp_asn: int = 0
    gdpr_flag: bool = Field(False, alias="gdpr")
    protected_flag: bool = Field(False, alias="protected")

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)
