"""PeriodDuration class representing the length of a period.

This module provides the PeriodDuration class, the amount of calendar time
a Period covers. It is built once when the period is constructed.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from dateutil.relativedelta import relativedelta

from calperiod._internal.constants import DURATION_REFERENCE
from calperiod._internal.rounding import span_between

if TYPE_CHECKING:
    from calperiod.core.period import Period


class PeriodDuration:
    """The calendar time covered by a period's included range.

    The span runs from the included start to one unit past the included
    end, so a single-day period lasts one day. An empty period lasts
    nothing. MONTH and YEAR periods measure whole calendar units, finer
    precisions the exact elapsed time.

    Durations are compared by laying both spans against the same fixed
    reference instant. This makes "1 month" and "31 days" comparable while
    keeping the result independent of when the comparison runs.

    Examples:
        >>> from calperiod import Period
        >>> january = Period.make("2021-01-01", "2021-01-31").duration
        >>> february = Period.make("2021-02-01", "2021-02-28").duration
        >>> january.is_larger_than(february)
        True
        >>> january.span
        relativedelta(days=+31)
    """

    __slots__ = ("_period", "_span")

    def __init__(self, period: Period) -> None:
        """Create the duration of a finished period.

        Args:
            period: The period whose included range is measured.
        """
        self._period = period
        if period.is_empty:
            self._span = relativedelta()
        else:
            self._span = span_between(
                period.included_start,
                period.included_end + period.interval,
                period.precision,
            )

    @classmethod
    def make(cls, period: Period) -> PeriodDuration:
        return cls(period)

    @property
    def period(self) -> Period:
        """Return the period this duration was built from."""
        return self._period

    @property
    def span(self) -> relativedelta:
        """Return the covered span as a normalized relativedelta."""
        return self._span

    def _end_instant(self) -> datetime:
        return DURATION_REFERENCE + self._span

    def compare_to(self, other: PeriodDuration) -> int:
        """Return -1, 0 or 1 as this duration is shorter, equal or longer.

        Examples:
            >>> from calperiod import Period
            >>> a = Period.make("2021-01-01", "2021-01-10").duration
            >>> b = Period.make("2021-03-01", "2021-03-10").duration
            >>> a.compare_to(b)
            0
        """
        mine = self._end_instant()
        theirs = other._end_instant()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def equals(self, other: PeriodDuration) -> bool:
        return self.compare_to(other) == 0

    def is_larger_than(self, other: PeriodDuration) -> bool:
        return self.compare_to(other) == 1

    def is_smaller_than(self, other: PeriodDuration) -> bool:
        return self.compare_to(other) == -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeriodDuration):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PeriodDuration):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PeriodDuration):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PeriodDuration):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PeriodDuration):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash(self._end_instant())

    def __repr__(self) -> str:
        return f"PeriodDuration({self._span!r})"


__all__ = ["PeriodDuration"]
