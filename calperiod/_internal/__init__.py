"""Internal utilities for Calperiod.

This module contains private implementation details:
    - Constants and defaults
    - Rounding and unit-step helpers
    - Precondition checks

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calperiod._internal.rounding import (
    as_datetime,
    calendar_difference,
    round_datetime,
    span_between,
    unit_interval,
)
from calperiod._internal.validation import (
    ensure_precision_matches,
    requires_matching_precision,
    validate_not_null,
)

__all__: list[str] = [
    "as_datetime",
    "calendar_difference",
    "ensure_precision_matches",
    "requires_matching_precision",
    "round_datetime",
    "span_between",
    "unit_interval",
    "validate_not_null",
]
