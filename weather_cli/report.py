# ABOUTME: Text rendering of weather snapshots and place-search candidates for the terminal.
# ABOUTME: Pure functions; times are shown in the snapshot's fixed UTC offset, never the host zone.

from datetime import datetime, timedelta

from weather_cli.config import Units
from weather_cli.errors import RenderError
from weather_cli.models import LocationSearchResult, WeatherSnapshot

WEATHER_ICONS = {
    "01d": "☀️",
    "01n": "🌙",
    "02d": "🌤️",
    "02n": "🌥️",
    "03d": "🌥️",
    "03n": "☁️",
    "04d": "☁️",
    "04n": "☁️",
    "09d": "🌦️",
    "09n": "🌧️",
    "10d": "🌦️",
    "10n": "🌧️",
    "11d": "⛈️",
    "11n": "⛈️",
    "13d": "🌨️",
    "13n": "🌨️",
    "50d": "🌫️",
    "50n": "🌫️",
}

TEMPERATURE_UNITS = {Units.METRIC: "°C", Units.IMPERIAL: "°F"}
SPEED_UNITS = {Units.METRIC: "m/s", Units.IMPERIAL: "mph"}

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
LABEL_WIDTH = 21
RULE = "-----------------------"
EPOCH = datetime(1970, 1, 1)


def weather_icon(icon_code: str) -> str:
    """Map a provider icon code to an emoji, or an empty string if the code is unknown."""
    return WEATHER_ICONS.get(icon_code, "")


def zone_label(offset_seconds: float, name: str = "") -> str:
    """Display name of a fixed-offset zone: the given name, else UTC+HH:MM."""
    if name:
        return name
    seconds = int(offset_seconds)
    sign = "+" if seconds >= 0 else "-"
    hours, rest = divmod(abs(seconds), 3600)
    return f"UTC{sign}{hours:02d}:{rest // 60:02d}"


def local_time(timestamp: int, offset_seconds: float) -> datetime:
    """Wall-clock time of a Unix timestamp at a constant UTC offset of any size.

    No DST or historical rules apply, and the host's time zone is never consulted.
    """
    try:
        return EPOCH + timedelta(seconds=timestamp + int(offset_seconds))
    except OverflowError as e:
        raise RenderError(f"Timestamp {timestamp} with offset {offset_seconds}s is out of range") from e


def _field(label: str, value: str) -> str:
    return f"{label + ':':<{LABEL_WIDTH}}{value}"


def render(snapshot: WeatherSnapshot, units: Units = Units.METRIC, label: str | None = None) -> str:
    """Format the current conditions of a snapshot as a fixed-order report.

    The header label defaults to the snapshot's timezone name. The wind gust line is left
    out when the gust is 0, which the provider uses for "not reported". Forecast arrays
    are not rendered.
    """
    units = Units(units)
    deg = TEMPERATURE_UNITS[units]
    speed = SPEED_UNITS[units]

    offset = snapshot.timezone_offset_seconds
    zone = zone_label(offset, snapshot.timezone_name)
    current = snapshot.current
    observed = local_time(current.dt, offset)
    sunrise = local_time(current.sunrise, offset)
    sunset = local_time(current.sunset, offset)
    icon = weather_icon(current.weather[0].icon_code) if current.weather else ""

    lines = [
        "",
        f"Location: {label or snapshot.timezone_name} (Lat: {snapshot.latitude:.4f}, Lon: {snapshot.longitude:.4f})",
        f"Timezone Offset: {int(offset)} seconds",
        "",
        f"{icon}  Current Weather: ",
        _field("Time", f"{observed.strftime(DATE_FORMAT)} {observed.strftime(TIME_FORMAT)} {zone}"),
        _field("Sunrise", f"{sunrise.strftime(TIME_FORMAT)} {zone}"),
        _field("Sunset", f"{sunset.strftime(TIME_FORMAT)} {zone}"),
        _field("Temperature", f"{current.temp:.2f}{deg}"),
        _field("Feels Like", f"{current.feels_like:.2f}{deg}"),
        _field("Pressure", f"{current.pressure:d} hPa"),
        _field("Humidity", f"{current.humidity:d}%"),
        _field("Dew Point", f"{current.dew_point:.2f}{deg}"),
        _field("UV Index", f"{current.uv_index:.2f}"),
        _field("Clouds", f"{current.clouds:d}%"),
        _field("Visibility", f"{current.visibility:d} m"),
        _field("Wind Speed", f"{current.wind_speed:.2f} {speed}"),
        _field("Wind Degrees", f"{current.wind_deg:d}°"),
    ]
    if current.wind_gust != 0:
        lines.append(_field("Wind Gust", f"{current.wind_gust:.2f} {speed}"))
    lines.append(RULE)
    return "\n".join(lines) + "\n"


def render_candidates(result: LocationSearchResult) -> str:
    """List search candidates with the 1-based index the user picks from."""
    lines = [f"Total available locations: {result.count}"]
    for index, candidate in enumerate(result.candidates, start=1):
        lines.extend(
            [
                f"---------------[{index}]----------------",
                f"Country: {candidate.country}",
                f"Location: {candidate.compact_name}",
                f"Latitude: {candidate.coordinate.latitude:f}",
                f"Longitude: {candidate.coordinate.longitude:f}",
                "",
            ]
        )
    return "\n".join(lines) + "\n"
