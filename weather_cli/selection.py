# ABOUTME: Disambiguation of place-search results by a 1-based index chosen by the user.
# ABOUTME: Validates the index and reads it from a text stream.

import re
from typing import TextIO

from weather_cli.errors import InvalidSelection, StdinReadError
from weather_cli.models import Coordinate, LocationCandidate, LocationSearchResult

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_index(text: str) -> int:
    """Parse a user-typed index, rejecting anything but a plain decimal integer."""
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidSelection("Provided index is invalid or out of bounds.")
    return int(text)


def select_candidate(result: LocationSearchResult, chosen_index: int | str) -> LocationCandidate:
    """Return the candidate at a 1-based index.

    Raises InvalidSelection when the index is not an integer, is <= 0, or is past the last candidate.
    """
    if isinstance(chosen_index, str):
        chosen_index = parse_index(chosen_index)
    elif isinstance(chosen_index, bool) or not isinstance(chosen_index, int):
        raise InvalidSelection("Provided index is invalid or out of bounds.")

    if chosen_index <= 0 or chosen_index > len(result.candidates):
        raise InvalidSelection("Provided index is invalid or out of bounds.")
    return result.candidates[chosen_index - 1]


def select(result: LocationSearchResult, chosen_index: int | str) -> Coordinate:
    return select_candidate(result, chosen_index).coordinate


def read_index(stream: TextIO) -> str:
    """Read one newline-terminated line from the stream.

    Input that ends before a newline fails like a broken stream does.
    """
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        raise StdinReadError(f"Failed to read from stdin: {e}") from e
    if not line.endswith("\n"):
        raise StdinReadError("Failed to read from stdin: end of input before newline")
    return line
