"""Date resolution from timestamps and text.

This module turns the loosely typed inputs accepted by Period.make into
timestamps. Text is read with ``date()`` style format strings, the
notation used by the library's default formats.

Supported Tokens:
    Y - 4-digit year (e.g., 2021)
    y - 2-digit year (70-99 -> 19xx, 00-69 -> 20xx)
    m - 2-digit month (01-12)
    n - Month without leading zero (1-12)
    d - 2-digit day (01-31)
    j - Day without leading zero (1-31)
    H - 2-digit hour, 24-hour (00-23)
    G - Hour without leading zero (0-23)
    i - 2-digit minute (00-59)
    s - 2-digit second (00-59)
    u - Microseconds (up to 6 digits)
    P - UTC offset with colon (+02:00)
    O - UTC offset without colon (+0200)
    \\ - Escapes the next character

Any other character must appear literally in the text.

Examples:
    >>> parse_date("2021-01-15", "Y-m-d")
    datetime.datetime(2021, 1, 15, 0, 0)

    >>> parse_date("15/1/2021 08:30", "j/n/Y H:i")
    datetime.datetime(2021, 1, 15, 8, 30)

    >>> resolve_format("2021-01-15 10:00:00", None)
    'Y-m-d H:i:s'
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any

from calperiod._internal.constants import DEFAULT_DATE_FORMAT, DEFAULT_DATETIME_FORMAT
from calperiod._internal.rounding import as_datetime
from calperiod.errors import InvalidDateError

logger = logging.getLogger(__name__)

# Mapping of format tokens to (group name, pattern)
_PARSE_PATTERNS: dict[str, tuple[str, str]] = {
    "Y": ("year", r"\d{4}"),
    "y": ("short_year", r"\d{2}"),
    "m": ("month", r"\d{2}"),
    "n": ("month", r"\d{1,2}"),
    "d": ("day", r"\d{2}"),
    "j": ("day", r"\d{1,2}"),
    "H": ("hour", r"\d{2}"),
    "G": ("hour", r"\d{1,2}"),
    "i": ("minute", r"\d{2}"),
    "s": ("second", r"\d{2}"),
    "u": ("microsecond", r"\d{1,6}"),
    "P": ("tz_offset", r"[+-]\d{2}:\d{2}"),
    "O": ("tz_offset", r"[+-]\d{4}"),
}


def resolve_format(value: Any, fmt: str | None) -> str:
    """Return the format used to read value.

    An explicit format always wins. Otherwise text containing a space is
    read as a datetime, anything else as a date.
    """
    if fmt is not None:
        return fmt
    if isinstance(value, str) and " " in value:
        return DEFAULT_DATETIME_FORMAT
    return DEFAULT_DATE_FORMAT


def resolve_date(value: Any, fmt: str | None = None) -> datetime:
    """Resolve a datetime, date or string into a datetime.

    Args:
        value: The input to resolve.
        fmt: Optional format for text input.

    Returns:
        The resolved timestamp. Text read with a format that has no space
        is reset to midnight.

    Raises:
        InvalidDateError: If value has an unsupported type or the text
            does not match the format.

    Examples:
        >>> resolve_date(datetime(2021, 1, 1, 12))
        datetime.datetime(2021, 1, 1, 12, 0)

        >>> resolve_date(date(2021, 1, 1))
        datetime.datetime(2021, 1, 1, 0, 0)

        >>> resolve_date("2021-01-01 12:30:00")
        datetime.datetime(2021, 1, 1, 12, 30)
    """
    if isinstance(value, date):
        return as_datetime(value)

    fmt = resolve_format(value, fmt)

    if not isinstance(value, str):
        raise InvalidDateError.for_format(value, fmt)

    resolved = parse_date(value, fmt)

    if " " not in fmt:
        resolved = resolved.replace(hour=0, minute=0, second=0, microsecond=0)

    logger.debug("Resolved %r with format %r to %s", value, fmt, resolved.isoformat())
    return resolved


def parse_date(s: str, fmt: str) -> datetime:
    """Parse a string using a ``date()`` style format string.

    Missing date components default to 1, missing time components to 0.

    Raises:
        InvalidDateError: If the string doesn't match the format or names
            an impossible date.
    """
    match = re.fullmatch(_format_to_regex(fmt), s)
    if not match:
        raise InvalidDateError.for_format(s, fmt)

    groups = match.groupdict()

    year = int(groups["year"]) if groups.get("year") else None
    if year is None and groups.get("short_year"):
        short_year = int(groups["short_year"])
        year = 1900 + short_year if short_year >= 70 else 2000 + short_year
    if year is None:
        raise InvalidDateError.for_format(s, fmt)

    month = int(groups.get("month") or 1)
    day = int(groups.get("day") or 1)
    hour = int(groups.get("hour") or 0)
    minute = int(groups.get("minute") or 0)
    second = int(groups.get("second") or 0)
    microsecond = int((groups.get("microsecond") or "0").ljust(6, "0"))

    tzinfo = None
    if groups.get("tz_offset"):
        tzinfo = _parse_offset(groups["tz_offset"])

    try:
        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tzinfo)
    except ValueError as e:
        raise InvalidDateError.for_format(s, fmt) from e


def _parse_offset(offset: str) -> timezone:
    """Convert +HH:MM or +HHMM to a fixed-offset timezone."""
    digits = offset[1:].replace(":", "")
    delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:4]))
    if offset[0] == "-":
        delta = -delta
    return timezone(delta)


def _format_to_regex(fmt: str) -> str:
    """Convert a ``date()`` style format string to a regex pattern.

    A token that appears twice must match the same text both times.
    """
    result = []
    seen: set[str] = set()
    i = 0
    while i < len(fmt):
        char = fmt[i]
        if char == "\\" and i + 1 < len(fmt):
            result.append(re.escape(fmt[i + 1]))
            i += 2
            continue

        if char in _PARSE_PATTERNS:
            name, pattern = _PARSE_PATTERNS[char]
            if name in seen:
                result.append(f"(?P={name})")
            else:
                result.append(f"(?P<{name}>{pattern})")
                seen.add(name)
        else:
            # Escape regex special characters
            result.append(re.escape(char))
        i += 1

    return "".join(result)


__all__ = ["parse_date", "resolve_date", "resolve_format"]
