# ABOUTME: Error taxonomy for the weather CLI pipeline.
# ABOUTME: Each error class carries the stable process exit code reported by the top-level handler.


class WeatherCliError(Exception):
    """Base class for every unrecoverable failure in the pipeline."""

    exit_code = 1

    def __init__(self, message: str, body: bytes | str | None = None):
        super().__init__(message)
        self.message = message
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        self.body = body


class TransportBuildError(WeatherCliError):
    """The GET request could not be constructed."""

    exit_code = 1


class TransportSendError(WeatherCliError):
    """The request could not be sent or timed out."""

    exit_code = 2


class TransportReadError(WeatherCliError):
    """The response body could not be fully read."""

    exit_code = 3


class DecodeError(WeatherCliError):
    """A response body did not decode into the expected JSON shape."""

    exit_code = 4


class StdinReadError(WeatherCliError):
    exit_code = 7


class InvalidSelection(WeatherCliError):
    """The chosen candidate index is not a number or is out of bounds."""

    exit_code = 8


class IPInfoDecodeError(DecodeError):
    exit_code = 10


class RenderError(WeatherCliError):
    """A decoded snapshot holds times that cannot be represented as calendar dates."""

    exit_code = 5


class ConfigError(WeatherCliError):
    """A setting from the environment or the command line does not validate."""

    exit_code = 6
