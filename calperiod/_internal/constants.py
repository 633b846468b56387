"""Internal constants for Calperiod.

These constants define the defaults used throughout the library. This
module is not part of the public API.
"""

from __future__ import annotations

from datetime import datetime

# Text formats used when none is given (date() style tokens)
DEFAULT_DATE_FORMAT: str = "Y-m-d"
DEFAULT_DATETIME_FORMAT: str = "Y-m-d H:i:s"

# Precision.DAY
DEFAULT_PRECISION_MASK: int = 0b111000

SECONDS_PER_MINUTE: int = 60
MINUTES_PER_HOUR: int = 60

# Fixed instant that PeriodDuration spans are laid against for comparison
DURATION_REFERENCE: datetime = datetime(1970, 1, 1)

DEFAULT_VISUALIZER_WIDTH: int = 27


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_DATETIME_FORMAT",
    "DEFAULT_PRECISION_MASK",
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "DURATION_REFERENCE",
    "DEFAULT_VISUALIZER_WIDTH",
]
