"""Parsing of provider clock strings such as "06:30 AM"."""

import re

from skycolor.errors import FormatError


_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$")


def parse_time_to_minutes(value: str) -> int:
    """
    Convert a 12-hour clock string to minutes since midnight.

    Example:
        parse_time_to_minutes("06:30 AM")  # 390
        parse_time_to_minutes("06:30 PM")  # 1110
        parse_time_to_minutes("12:05 AM")  # 5

    Raises:
        FormatError: Missing AM/PM suffix, hour outside 1-12, or minute outside 0-59
    """
    if not isinstance(value, str):
        raise FormatError(f"Time must be a string, got {type(value).__name__}")

    match = _TIME_PATTERN.match(value)
    if match is None:
        raise FormatError(f"Invalid time string: {value!r} (expected 'hh:mm AM|PM')")

    hours = int(match.group(1))
    minutes = int(match.group(2))
    suffix = match.group(3).upper()

    if not 1 <= hours <= 12:
        raise FormatError(f"Hour out of range in {value!r}")
    if not 0 <= minutes <= 59:
        raise FormatError(f"Minute out of range in {value!r}")

    if suffix == "AM":
        hours = 0 if hours == 12 else hours
    elif hours != 12:
        hours += 12

    return hours * 60 + minutes
