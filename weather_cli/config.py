# ABOUTME: Process-wide settings for the weather CLI: endpoints, static credentials, timeout, units.
# ABOUTME: Populated once at startup from built-in defaults, the environment (.env) and CLI overrides.

import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError

from weather_cli.errors import ConfigError

DEFAULT_BASE_URL = "https://app.owm.io/app"
DEFAULT_IP_INFO_URL = "https://web-api.nordvpn.com/v1/ips/info"
DEFAULT_TIMEOUT = 10.0

DEFAULT_DEVICE_ID = "e13401912dbaf7cc"
DEFAULT_APP_ID = "e0c56f6c3cee94d1a83f36043ff1ce5b"
DEFAULT_TOKEN = (
    DEFAULT_DEVICE_ID
    + ":APA91bGAmF46L0bGb2jVYVfVKNpWePUqWdgoo4hz8_LLkfECQ8qw8JdcA-8hsJ6WSgjfEY5CvgjNoYMYF8PLvGlJ9GFM2ERKnKWjBR_Hq2tjsuZABJ_io3c"
)


class Units(str, Enum):
    """Unit system applied by the weather service to temperature and wind speed."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class Settings(BaseModel):
    """Static configuration passed explicitly to every network-facing call."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    ip_info_url: str = DEFAULT_IP_INFO_URL
    app_id: str = DEFAULT_APP_ID
    device_id: str = DEFAULT_DEVICE_ID
    token: str = DEFAULT_TOKEN
    timeout: float = DEFAULT_TIMEOUT
    units: Units = Units.METRIC


_ENV_VARS = {
    "base_url": "OWM_BASE_URL",
    "ip_info_url": "IP_INFO_URL",
    "app_id": "OWM_APP_ID",
    "device_id": "OWM_DEVICE_ID",
    "token": "OWM_TOKEN",
    "timeout": "WEATHER_TIMEOUT",
    "units": "WEATHER_UNITS",
}


def load_settings(**overrides) -> Settings:
    """Build Settings from the environment, with keyword overrides taking precedence.

    Overrides whose value is None are ignored so unset CLI flags fall back to the environment.
    Raises ConfigError naming the offending variable when a value does not validate.
    """
    load_dotenv()

    values = {}
    sources = {}
    for field, env_var in _ENV_VARS.items():
        value = os.environ.get(env_var)
        if value:
            values[field] = value
            sources[field] = env_var
    for field, value in overrides.items():
        if value is not None:
            values[field] = value
            sources.pop(field, None)

    try:
        return Settings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{sources.get(err['loc'][0], err['loc'][0])}={values.get(err['loc'][0])!r}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
