# ABOUTME: Shared test fixtures for the weather CLI test suite.
# ABOUTME: Provides sample API payloads and WeatherDeps wired to an httpx.MockTransport.

import json

import httpx
import pytest

from weather_cli.config import Settings
from weather_cli.deps import WeatherDeps

SEARCH_PARIS = {
    "message": "accurate",
    "cod": "200",
    "count": 2,
    "list": [
        {
            "coord": {"lat": 48.8534, "lon": 2.3488},
            "name": "Paris",
            "full_name": "Paris, Ile-de-France, FR",
            "compact_name": "Paris, FR",
            "country": "FR",
        },
        {
            "coord": {"lat": 33.6609, "lon": -95.5555},
            "name": "Paris",
            "full_name": "Paris, Texas, US",
            "compact_name": "Paris, US",
            "country": "US",
        },
    ],
}

WEATHER_SF = {
    "lat": 37.7749,
    "lon": -122.4194,
    "timezone": "America/Los_Angeles",
    "timezone_offset": -25200,
    "current": {
        "dt": 1700000000,
        "sunrise": 1699972800,
        "sunset": 1700010000,
        "temp": 18.5,
        "feels_like": 17.9,
        "pressure": 1016,
        "humidity": 62,
        "dew_point": 11.1,
        "uvi": 3.2,
        "clouds": 20,
        "visibility": 10000,
        "wind_speed": 4.12,
        "wind_deg": 270,
        "wind_gust": 0,
        "weather": [{"id": 801, "main": "Clouds", "description": "few clouds", "icon": "02d"}],
    },
    "minutely": [{"dt": 1700000040, "precipitation": 0}],
    "hourly": [
        {
            "dt": 1700002800,
            "temp": 18.1,
            "feels_like": 17.5,
            "pressure": 1016,
            "humidity": 64,
            "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
            "pop": 0.4,
            "rain": {"1h": 0.25},
        }
    ],
    "daily": [
        {
            "dt": 1700000000,
            "temp_max": 20.2,
            "temp_min": 11.4,
            "uvi": 4.1,
            "forecast": [{"dt": 1700010000, "temp": 15.0, "precipitation": 0.1}],
        }
    ],
}

IP_INFO = {
    "ip": "203.0.113.7",
    "country": "Germany",
    "country_code": "DE",
    "region": "Berlin",
    "zip_code": "10115",
    "city": "Berlin",
    "state_code": "BE",
    "longitude": 13.405,
    "latitude": 52.52,
    "isp": "Example Telecom",
    "isp_asn": 64500,
    "gdpr": True,
    "protected": False,
}


def json_body(payload) -> bytes:
    return json.dumps(payload).encode()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        base_url="https://owm.test/app",
        ip_info_url="https://ip.test/v1/ips/info",
        app_id="APPID",
        device_id="DEVICE",
        token="DEVICE:TOKEN",
    )


@pytest.fixture
def make_deps(settings):
    """Build WeatherDeps whose HTTP calls are answered by `handler`.

    Requests seen by the transport accumulate in `make_deps.requests`.
    """
    seen: list[httpx.Request] = []

    def _make(handler) -> WeatherDeps:
        def _recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        return WeatherDeps(settings=settings, transport=httpx.MockTransport(_recording))

    _make.requests = seen
    return _make


@pytest.fixture
def respond_by_path():
    """Handler factory routing requests to JSON bodies by URL path."""

    def _factory(routes: dict[str, bytes], status_code: int = 200):
        def _handler(request: httpx.Request) -> httpx.Response:
            for path, body in routes.items():
                if request.url.path.startswith(path):
                    return httpx.Response(status_code, content=body)
            return httpx.Response(404, content=b'{"cod":"404","message":"not found"}')

        return _handler

    return _factory
