"""Calperiod: calendar periods and the algebra between them.

Calperiod models a bounded span of calendar time at a chosen precision,
from a whole year down to a single second, with either endpoint optionally
excluded, and answers questions about pairs of such spans: do they
overlap, touch, contain one another, what lies between or outside them.

Core Types:
    Period: Span between two rounded timestamps
    PeriodCollection: Ordered sequence of periods
    PeriodDuration: Calendar time covered by a period

Units:
    Precision: Granularity, YEAR down to SECOND
    Boundaries: Endpoint exclusion flags

Exceptions:
    CalperiodError: Base exception
    InvalidPeriodError: End before start
    InvalidDateError: Missing or unreadable date
    PrecisionMismatchError: Periods of different precision combined

Example:
    >>> from calperiod import Period, Precision
    >>> a = Period.make("2021-01-01", "2021-01-10")
    >>> [str(p) for p in a.subtract(Period.make("2021-01-05", "2021-01-06"))]
    ['[2021-01-01, 2021-01-04]', '[2021-01-07, 2021-01-10]']
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from calperiod.core.collection import PeriodCollection
from calperiod.core.duration import PeriodDuration
from calperiod.core.period import Period

# Units
from calperiod.units.boundaries import Boundaries
from calperiod.units.precision import CalendarField, Precision

# Exceptions
from calperiod.errors import (
    CalperiodError,
    InvalidDateError,
    InvalidPeriodError,
    PrecisionMismatchError,
)

# Format functions
from calperiod.format import Visualizer, resolve_date

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Period",
    "PeriodCollection",
    "PeriodDuration",
    # Units
    "Boundaries",
    "CalendarField",
    "Precision",
    # Exceptions
    "CalperiodError",
    "InvalidDateError",
    "InvalidPeriodError",
    "PrecisionMismatchError",
    # Format functions
    "Visualizer",
    "resolve_date",
]
