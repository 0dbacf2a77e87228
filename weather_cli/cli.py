# ABOUTME: Command-line entry point: parses flags, resolves a coordinate and prints the weather report.
# ABOUTME: The single top-level handler that turns pipeline errors into stable exit codes.

import argparse
import logging
import sys
from typing import TextIO

from weather_cli.config import Units, load_settings
from weather_cli.deps import WeatherDeps
from weather_cli.errors import DecodeError, WeatherCliError
from weather_cli.models import Coordinate, LocationCandidate
from weather_cli.report import render, render_candidates
from weather_cli.selection import read_index, select_candidate
from weather_cli.weather_service import fetch_weather, locate_caller, search_locations

logger = logging.getLogger(__name__)

BANNER = "🌤️  weather: Know the weather from your command-line"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather",
        description=BANNER,
        epilog="A latitude or longitude of exactly 0 is treated as not provided.",
    )
    parser.add_argument("--search", default="", help="Search for a location")
    parser.add_argument("--lat", type=float, default=0.0, help="Latitude of the location")
    parser.add_argument("--lon", type=float, default=0.0, help="Longitude of the location")
    parser.add_argument("--auto", action="store_true", help="Automatically fetch your weather")
    parser.add_argument(
        "--units",
        choices=[u.value for u in Units],
        default=None,
        help="Unit system for temperature and wind speed (default: metric)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[@] %(message)s" if not verbose else "%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def choose_candidate(deps: WeatherDeps, query: str, stdin: TextIO, stdout: TextIO) -> LocationCandidate:
    """Search for a place, list the candidates and let the user pick one by index."""
    result = search_locations(deps, query)
    stdout.write(render_candidates(result))
    stdout.write("\nChoose searched index: ")
    stdout.flush()
    return select_candidate(result, read_index(stdin))


def report_weather(deps: WeatherDeps, coordinate: Coordinate, stdout: TextIO, label: str | None = None) -> None:
    units = deps.settings.units
    snapshot = fetch_weather(deps, coordinate, units)
    stdout.write(render(snapshot, units, label=label))


def run(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    deps: WeatherDeps | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        if deps is None:
            deps = WeatherDeps(settings=load_settings(units=args.units))
        elif args.units is not None:
            deps = deps.model_copy(update={"settings": deps.settings.model_copy(update={"units": Units(args.units)})})

        label = None
        if args.auto:
            coordinate = locate_caller(deps)
        elif args.search != "":
            candidate = choose_candidate(deps, args.search, stdin, stdout)
            coordinate, label = candidate.coordinate, candidate.compact_name
        elif args.lat != 0.0 and args.lon != 0.0:
            coordinate = Coordinate(latitude=args.lat, longitude=args.lon)
        else:
            stdout.write(parser.format_help())
            return 0
        report_weather(deps, coordinate, stdout, label=label)
    except WeatherCliError as e:
        logger.debug("Pipeline failed", exc_info=True)
        print(e.message, file=sys.stderr)
        if e.__cause__ is not None:
            print(e.__cause__, file=sys.stderr)
        if isinstance(e, DecodeError) and e.body is not None:
            print(e.body, file=sys.stderr)
        return e.exit_code
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
