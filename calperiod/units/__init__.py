"""Period units and enumerations.

This module provides:
    - CalendarField: The six calendar fields of a timestamp
    - Precision: Period granularity (YEAR down to SECOND)
    - Boundaries: Endpoint exclusion flags
"""

from __future__ import annotations

from calperiod.units.boundaries import Boundaries
from calperiod.units.precision import CALENDAR_FIELDS, CalendarField, Precision

__all__: list[str] = [
    "Boundaries",
    "CALENDAR_FIELDS",
    "CalendarField",
    "Precision",
]
