"""durafmt - format durations as human readable text."""

from durafmt.config import Settings
from durafmt.duration import Duration, format_duration, parse_duration
from durafmt.errors import DurafmtError, InvalidDurationText, MissingUnit, UnknownUnit
from durafmt.formatter import (
    DurationFormatter,
    parse,
    parse_short,
    parse_string,
    parse_string_short,
)
from durafmt.units import Unit

__all__ = [
    # Formatting
    "DurationFormatter",
    "parse",
    "parse_short",
    "parse_string",
    "parse_string_short",
    # Duration values
    "Duration",
    "Unit",
    "format_duration",
    "parse_duration",
    # Errors
    "DurafmtError",
    "InvalidDurationText",
    "MissingUnit",
    "UnknownUnit",
    # Configuration
    "Settings",
]
