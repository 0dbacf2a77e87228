# ABOUTME: Dependency container for the weather pipeline using Pydantic BaseModel.
# ABOUTME: Holds the Settings and the optional httpx transport used when opening HTTP clients.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_cli.config import Settings

MAX_REDIRECTS = 10


class WeatherDeps(BaseModel):
    """Dependencies passed to every network-facing call."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: Settings = Settings()
    transport: httpx.BaseTransport | None = None


def create_http_client(deps: WeatherDeps) -> httpx.Client:
    """Create an httpx client that follows redirects and bounds each I/O phase by the configured timeout.

    No retry transport is installed: a failed request is final. The overall deadline is enforced by `fetch`.
    """
    return httpx.Client(
        timeout=deps.settings.timeout,
        transport=deps.transport,
        follow_redirects=True,
        max_redirects=MAX_REDIRECTS,
    )
