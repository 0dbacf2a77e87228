# ABOUTME: Service layer for IP geolocation, place search and weather API calls.
# ABOUTME: Builds provider URLs from Settings, fetches raw bodies and decodes them into models.

import logging

from pydantic import BaseModel, ValidationError

from weather_cli.config import Settings, Units
from weather_cli.deps import WeatherDeps
from weather_cli.errors import DecodeError, IPInfoDecodeError
from weather_cli.models import Coordinate, IPInfo, LocationSearchResult, WeatherSnapshot
from weather_cli.transport import fetch

logger = logging.getLogger(__name__)


def search_url(settings: Settings, query: str) -> str:
    """Place-search URL with the query embedded as given."""
    return f"{settings.base_url}/1.1/find/?q={query}&appid={settings.app_id}&deviceid={settings.device_id}"


def weather_url(settings: Settings, coordinate: Coordinate, units: Units) -> str:
    return (
        f"{settings.base_url}/1.0/weather/?lat={coordinate.latitude:f}&lon={coordinate.longitude:f}"
        f"&units={Units(units).value}&appid={settings.app_id}&deviceid={settings.device_id}&token={settings.token}"
    )


def locate_caller(deps: WeatherDeps) -> Coordinate:
    """Resolve the caller's public IP to a coordinate.

    The upstream coordinate is returned as-is, including a zero or nonsensical one.
    """
    logger.info("Fetching your coordinates")
    body = fetch(deps, deps.settings.ip_info_url)
    info = decode(IPInfo, body, error=IPInfoDecodeError, what="IP info")
    logger.debug("IP %s located in %s, %s", info.ip, info.city, info.country)
    return info.coordinate


def search_locations(deps: WeatherDeps, query: str) -> LocationSearchResult:
    """Search places matching a free-text query, preserving the provider's ranking."""
    logger.info("Searching for %s", query)
    body = fetch(deps, search_url(deps.settings, query))
    result = decode(LocationSearchResult, body)
    logger.debug("Search returned %d candidates (count=%d)", len(result.candidates), result.count)
    return result


def fetch_weather(deps: WeatherDeps, coordinate: Coordinate, units: Units = Units.METRIC) -> WeatherSnapshot:
    """Fetch current weather and short-range forecasts for a coordinate."""
    logger.info("Searching for weather")
    body = fetch(deps, weather_url(deps.settings, coordinate, units))
    return decode(WeatherSnapshot, body)


def decode(model: type[BaseModel], body: bytes, error: type[DecodeError] = DecodeError, what: str = "response"):
    """Decode a raw JSON body into the given model, raising `error` with the body attached on failure."""
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise error(f"Failed to parse {what} as JSON", body=body) from e
