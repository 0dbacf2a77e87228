# ABOUTME: Single bounded-timeout HTTPS GET returning the raw response body.
# ABOUTME: Each failure stage (build, send, read) maps to its own error class.

import logging
import re
import time

import httpx

from weather_cli.deps import WeatherDeps, create_http_client
from weather_cli.errors import TransportBuildError, TransportReadError, TransportSendError

logger = logging.getLogger(__name__)

_SECRET_PARAMS = re.compile(r"(appid|deviceid|token)=[^&]*")


def redact(url: str) -> str:
    """Mask credential query parameters for logging."""
    return _SECRET_PARAMS.sub(r"\1=***", url)


def fetch(deps: WeatherDeps, url: str) -> bytes:
    """GET a URL and return the full body, whatever the HTTP status code.

    The whole exchange, redirects and body included, must finish within
    `settings.timeout` seconds. The client is opened for this call only and
    closed before returning.
    """
    timeout = deps.settings.timeout
    with create_http_client(deps) as client:
        try:
            request = client.build_request("GET", url)
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            raise TransportBuildError(f"Failed to create a new request: {e}") from e

        logger.debug("GET %s", redact(url))
        deadline = time.monotonic() + timeout
        try:
            response = client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise TransportSendError(f"Failed to send request to {request.url.host}: {e}") from e

        try:
            if time.monotonic() > deadline:
                raise TransportSendError(f"Failed to send request to {request.url.host}: timed out after {timeout}s")
            chunks = []
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise TransportReadError(f"Failed to read response body: timed out after {timeout}s")
            body = b"".join(chunks)
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise TransportReadError(f"Failed to read response body: {e}") from e
        finally:
            response.close()

    logger.debug("Response status %d, %d bytes", response.status_code, len(body))
    return body
