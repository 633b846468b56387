"""Core period types.

This module provides the fundamental types:
    - Period: A bounded span of calendar time at a given precision
    - PeriodCollection: An ordered sequence of periods
    - PeriodDuration: The calendar time a period covers
"""

from __future__ import annotations

from calperiod.core.collection import PeriodCollection
from calperiod.core.duration import PeriodDuration
from calperiod.core.period import Period

__all__: list[str] = [
    "Period",
    "PeriodCollection",
    "PeriodDuration",
]
