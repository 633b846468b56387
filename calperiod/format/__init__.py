"""Reading dates and rendering periods.

This module provides functions for converting between periods and text:
    - Date resolution from datetimes, dates or formatted strings
    - Text bars showing periods on a shared timeline

Functions:
    resolve_date: Resolve a datetime, date or string into a datetime.
    resolve_format: Pick the format used to read a value.
    parse_date: Parse a string with a ``date()`` style format.

Classes:
    Visualizer: Render periods as rows of bars.

Examples:
    >>> from calperiod.format import parse_date
    >>> parse_date("2021-01-15 14:30:45", "Y-m-d H:i:s")
    datetime.datetime(2021, 1, 15, 14, 30, 45)
"""

from __future__ import annotations

from calperiod.format.resolve import parse_date, resolve_date, resolve_format
from calperiod.format.visualize import Visualizer

__all__: list[str] = [
    "parse_date",
    "resolve_date",
    "resolve_format",
    "Visualizer",
]
