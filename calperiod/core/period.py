"""Period class representing a bounded span of calendar time.

This module provides the Period class: a span between two timestamps at a
chosen precision (YEAR down to SECOND), with either endpoint optionally
excluded, and the relational and set operations between such spans.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterator, Union

from dateutil.relativedelta import relativedelta

from calperiod._internal.constants import (
    DEFAULT_PRECISION_MASK,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from calperiod._internal.rounding import (
    as_datetime,
    calendar_difference,
    round_datetime,
    span_between,
    unit_interval,
)
from calperiod._internal.validation import requires_matching_precision, validate_not_null
from calperiod.core.collection import PeriodCollection
from calperiod.core.duration import PeriodDuration
from calperiod.errors import InvalidDateError, InvalidPeriodError
from calperiod.format.resolve import resolve_date
from calperiod.units.boundaries import Boundaries
from calperiod.units.precision import CALENDAR_FIELDS, Precision

DateInput = Union[datetime, date, str]

_DISPLAY_FORMATS: dict[Precision, str] = {
    Precision.YEAR: "%Y",
    Precision.MONTH: "%Y-%m",
    Precision.DAY: "%Y-%m-%d",
    Precision.HOUR: "%Y-%m-%d %H:00",
    Precision.MINUTE: "%Y-%m-%d %H:%M",
    Precision.SECOND: "%Y-%m-%d %H:%M:%S",
}


class Period:
    """A span of calendar time between two rounded endpoints.

    Both endpoints are rounded down to the period's precision when the
    period is built. The *included* endpoints, which every operation works
    from, are derived once at the same time: an excluded start moves one
    unit forward, an excluded end one unit back.

    A period one unit wide with both boundaries excluded covers nothing:
    its included start lies after its included end. Such a period is
    empty; it overlaps, touches and contains nothing, and has length 0.

    Periods are immutable. Every operation returns new values.

    Attributes:
        start: Rounded start timestamp.
        end: Rounded end timestamp.
        precision: Granularity of the period.
        boundaries: Which endpoints are excluded.
        included_start: First timestamp inside the period.
        included_end: Last timestamp inside the period.

    Examples:
        >>> january = Period.make("2021-01-01", "2021-01-31")
        >>> january.length()
        31
        >>> february = Period.make("2021-02-01", "2021-02-28")
        >>> january.touches_with(february)
        True
        >>> january.overlaps_with(february)
        False
        >>> str(Period.make("2021-01-01", "2021-01-31", boundaries=Boundaries.EXCLUDE_END))
        '[2021-01-01, 2021-01-31)'
    """

    __slots__ = (
        "_start",
        "_end",
        "_precision",
        "_boundaries",
        "_interval",
        "_included_start",
        "_included_end",
        "_duration",
    )

    def __init__(
        self,
        start: datetime,
        end: datetime,
        precision: int | Precision | None = Precision.DAY,
        boundaries: int | Boundaries | None = Boundaries.EXCLUDE_NONE,
    ) -> None:
        """Create a period from two timestamps.

        Args:
            start: Start timestamp; rounded to precision.
            end: End timestamp; rounded to precision.
            precision: A Precision or canonical mask. Defaults to DAY.
            boundaries: Endpoint exclusion flags. Defaults to EXCLUDE_NONE.

        Raises:
            InvalidPeriodError: If the rounded start is after the rounded end.
            InvalidDateError: If only one endpoint has a timezone.
            ValueError: If precision or boundaries is not a valid mask.

        Examples:
            >>> Period(datetime(2021, 1, 1, 15, 30), datetime(2021, 1, 3))
            Period(datetime.datetime(2021, 1, 1, 0, 0), datetime.datetime(2021, 1, 3, 0, 0), precision=Precision.DAY, boundaries=Boundaries.EXCLUDE_NONE)
        """
        if precision is None:
            precision = DEFAULT_PRECISION_MASK
        self._precision = Precision.from_mask(precision)
        self._boundaries = Boundaries.from_mask(boundaries)

        self._start = round_datetime(start, self._precision)
        self._end = round_datetime(end, self._precision)
        if (self._start.tzinfo is None) != (self._end.tzinfo is None):
            raise InvalidDateError.mixed_timezones(self._start, self._end)
        if self._start > self._end:
            raise InvalidPeriodError.end_before_start(self._start, self._end)

        self._interval = unit_interval(self._precision)

        self._included_start = (
            self._start
            if self._boundaries.start_included
            else self._start + self._interval
        )
        self._included_end = (
            self._end
            if self._boundaries.end_included
            else self._end - self._interval
        )

        self._duration = PeriodDuration(self)

    @classmethod
    def make(
        cls,
        start: DateInput | None,
        end: DateInput | None,
        precision: int | Precision | None = None,
        boundaries: int | Boundaries | None = None,
        format: str | None = None,
    ) -> Period:
        """Create a period from timestamps, dates or text.

        Text is read with format when given, otherwise as ``Y-m-d``, or
        ``Y-m-d H:i:s`` when it contains a space.

        Args:
            start: Start as a datetime, date or string.
            end: End as a datetime, date or string.
            precision: A Precision or canonical mask. Defaults to DAY.
            boundaries: Endpoint exclusion flags. Defaults to EXCLUDE_NONE.
            format: Optional format for text input.

        Returns:
            A new Period.

        Raises:
            InvalidDateError: If either input is missing or unreadable.
            InvalidPeriodError: If the rounded start is after the rounded end.

        Examples:
            >>> Period.make("2021-01-01", "2021-01-10").length()
            10

            >>> p = Period.make("2021-01-01 10:00:00", "2021-01-01 10:00:05",
            ...                 precision=Precision.SECOND)
            >>> p.length()
            6

            >>> str(Period.make("01/03/2021", "31/03/2021", format="d/m/Y"))
            '[2021-03-01, 2021-03-31]'
        """
        validate_not_null(start, "Start date")
        validate_not_null(end, "End date")

        return cls(
            resolve_date(start, format),
            resolve_date(end, format),
            precision,
            boundaries,
        )

    def renew(self) -> Period:
        """Return the period of the same length that directly follows this one.

        The new period's included start is one unit after this period's
        included end. Precision and boundaries are kept.

        Examples:
            >>> str(Period.make("2021-01-01", "2021-01-31").renew())
            '[2021-02-01, 2021-03-03]'

            >>> str(Period.make("2021-01-01", "2021-03-01", Precision.MONTH).renew())
            '[2021-04, 2021-06]'
        """
        length = span_between(self._included_start, self._included_end, self._precision)

        included_start = self._included_end + self._interval
        included_end = included_start + length

        start = (
            included_start
            if self._boundaries.start_included
            else included_start - self._interval
        )
        end = (
            included_end
            if self._boundaries.end_included
            else included_end + self._interval
        )

        return type(self)(start, end, self._precision, self._boundaries)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def start(self) -> datetime:
        """Return the rounded start, whether or not it is included."""
        return self._start

    @property
    def end(self) -> datetime:
        """Return the rounded end, whether or not it is included."""
        return self._end

    @property
    def included_start(self) -> datetime:
        """Return the first timestamp inside the period."""
        return self._included_start

    @property
    def included_end(self) -> datetime:
        """Return the last timestamp inside the period."""
        return self._included_end

    @property
    def precision(self) -> Precision:
        return self._precision

    @property
    def precision_mask(self) -> int:
        return self._precision.mask

    @property
    def boundaries(self) -> Boundaries:
        return self._boundaries

    @property
    def interval(self) -> relativedelta:
        """Return the unit step at this period's precision."""
        return self._interval

    @property
    def duration(self) -> PeriodDuration:
        """Return the duration built when the period was constructed."""
        return self._duration

    @property
    def start_included(self) -> bool:
        return self._boundaries.start_included

    @property
    def start_excluded(self) -> bool:
        return self._boundaries.start_excluded

    @property
    def end_included(self) -> bool:
        return self._boundaries.end_included

    @property
    def end_excluded(self) -> bool:
        return self._boundaries.end_excluded

    @property
    def is_empty(self) -> bool:
        """Return True if the included range holds no timestamp at all.

        Examples:
            >>> Period.make("2021-01-01", "2021-01-02",
            ...             boundaries=Boundaries.EXCLUDE_ALL).is_empty
            True
            >>> Period.make("2021-01-01", "2021-01-01").is_empty
            False
        """
        return self._included_start > self._included_end

    # ------------------------------------------------------------------
    # Length and iteration
    # ------------------------------------------------------------------

    def length(self) -> int:
        """Return the number of units in the included range.

        Months and years vary in length, so MONTH and YEAR periods are
        counted by iterating. Finer precisions are computed directly.

        Examples:
            >>> Period.make("2021-01-01", "2021-12-31", Precision.MONTH).length()
            12
            >>> Period.make("2021-01-01 00:00:00", "2021-01-02 00:00:00",
            ...             Precision.HOUR).length()
            25
        """
        if self.is_empty:
            return 0

        if self._precision in (Precision.MONTH, Precision.YEAR):
            return sum(1 for _ in self.iterate())

        if self._precision in (Precision.HOUR, Precision.MINUTE, Precision.SECOND):
            length = abs(int((self._included_end - self._included_start).total_seconds()))

            if self._precision is Precision.SECOND:
                return length + 1

            length //= SECONDS_PER_MINUTE

            if self._precision is Precision.MINUTE:
                return length + 1

            return length // MINUTES_PER_HOUR + 1

        return (self._included_end - self._included_start).days + 1

    def iterate(self) -> Iterator[datetime]:
        """Yield every unit timestamp from included start to included end.

        Each call returns a fresh iterator.

        Examples:
            >>> [d.month for d in Period.make("2021-01-01", "2021-03-31", Precision.MONTH)]
            [1, 2, 3]
        """
        step = 0
        current = self._included_start
        while current <= self._included_end:
            yield current
            step += 1
            current = self._included_start + self._interval * step

    def __iter__(self) -> Iterator[datetime]:
        return self.iterate()

    # ------------------------------------------------------------------
    # Relations between periods
    # ------------------------------------------------------------------

    @requires_matching_precision
    def overlaps_with(self, other: Period) -> bool:
        """Return True if both periods share at least one unit.

        Raises:
            PrecisionMismatchError: If the precisions differ.

        Examples:
            >>> a = Period.make("2021-01-01", "2021-01-10")
            >>> a.overlaps_with(Period.make("2021-01-10", "2021-01-20"))
            True
            >>> a.overlaps_with(Period.make("2021-01-11", "2021-01-20"))
            False
        """
        if self.is_empty or other.is_empty:
            return False

        if self._included_start > other._included_end:
            return False

        if other._included_start > self._included_end:
            return False

        return True

    @requires_matching_precision
    def touches_with(self, other: Period) -> bool:
        """Return True if the periods meet with no unit between them.

        The nearer endpoints are compared field by field: the field at
        this precision may differ by at most one, every other field must
        be equal. Two day periods touch when one ends the day before the
        other starts.

        Raises:
            PrecisionMismatchError: If the precisions differ.

        Examples:
            >>> a = Period.make("2020-12-01", "2020-12-31")
            >>> a.touches_with(Period.make("2021-01-01", "2021-01-31"))
            True
            >>> a.touches_with(Period.make("2021-01-02", "2021-01-31"))
            False
        """
        if self.is_empty or other.is_empty:
            return False

        if self.ends_before(other._included_start):
            diff = calendar_difference(self._included_end, other._included_start)
        else:
            diff = calendar_difference(self._included_start, other._included_end)

        unit = self._precision.unit
        for field in CALENDAR_FIELDS:
            value = getattr(diff, field.plural)
            if field is unit:
                if value > 1:
                    return False
            elif value != 0:
                return False

        return True

    def contains(self, other: Period | date | datetime) -> bool:
        """Check if this period contains a timestamp or another period.

        For a timestamp: True if its rounded value lies in the included
        range. For a period: True if the other included range lies inside
        this one.

        Examples:
            >>> january = Period.make("2021-01-01", "2021-01-31")
            >>> january.contains(datetime(2021, 1, 31, 23, 59))
            True
            >>> january.contains(Period.make("2021-01-10", "2021-01-20"))
            True
            >>> date(2021, 2, 1) in january
            False
        """
        if self.is_empty:
            return False

        if isinstance(other, Period):
            return (
                self._included_start <= other._included_start
                and self._included_end >= other._included_end
            )

        rounded = round_datetime(other, self._precision)
        return self._included_start <= rounded <= self._included_end

    def __contains__(self, other: Period | date | datetime) -> bool:
        return self.contains(other)

    @requires_matching_precision
    def equals(self, other: Period) -> bool:
        """Return True if both included ranges are identical.

        Raises:
            PrecisionMismatchError: If the precisions differ.

        Examples:
            >>> a = Period.make("2021-01-01", "2021-01-31")
            >>> b = Period.make("2020-12-31", "2021-02-01", boundaries=Boundaries.EXCLUDE_ALL)
            >>> a.equals(b)
            True
        """
        return (
            self._included_start == other._included_start
            and self._included_end == other._included_end
        )

    # ------------------------------------------------------------------
    # Comparisons against a timestamp
    #
    # The starts_* predicates (except starts_at) compare against the raw
    # argument; the ends_* predicates round it first.
    # ------------------------------------------------------------------

    def starts_before(self, value: date | datetime) -> bool:
        return self._included_start < as_datetime(value)

    def starts_before_or_at(self, value: date | datetime) -> bool:
        return self._included_start <= as_datetime(value)

    def starts_after(self, value: date | datetime) -> bool:
        return self._included_start > as_datetime(value)

    def starts_after_or_at(self, value: date | datetime) -> bool:
        return self._included_start >= as_datetime(value)

    def starts_at(self, value: date | datetime) -> bool:
        return self._included_start == round_datetime(value, self._precision)

    def ends_before(self, value: date | datetime) -> bool:
        return self._included_end < round_datetime(value, self._precision)

    def ends_before_or_at(self, value: date | datetime) -> bool:
        return self._included_end <= round_datetime(value, self._precision)

    def ends_after(self, value: date | datetime) -> bool:
        return self._included_end > round_datetime(value, self._precision)

    def ends_after_or_at(self, value: date | datetime) -> bool:
        return self._included_end >= round_datetime(value, self._precision)

    def ends_at(self, value: date | datetime) -> bool:
        return self._included_end == round_datetime(value, self._precision)

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    @requires_matching_precision
    def gap(self, other: Period) -> Period | None:
        """Return the period strictly between two disjoint periods.

        Returns None if the periods overlap or touch. The result does not
        depend on argument order.

        Raises:
            PrecisionMismatchError: If the precisions differ.

        Examples:
            >>> a = Period.make("2021-01-01", "2021-01-10")
            >>> b = Period.make("2021-01-15", "2021-01-20")
            >>> str(a.gap(b))
            '[2021-01-11, 2021-01-14]'
            >>> str(b.gap(a))
            '[2021-01-11, 2021-01-14]'
            >>> a.gap(Period.make("2021-01-11", "2021-01-20")) is None
            True
        """
        if self.is_empty or other.is_empty:
            return None

        if self.overlaps_with(other) or self.touches_with(other):
            return None

        if self._included_start >= other._included_end:
            return type(self)(
                other._included_end + self._interval,
                self._included_start - self._interval,
                self._precision,
            )

        return type(self)(
            self._included_end + self._interval,
            other._included_start - self._interval,
            self._precision,
        )

    @requires_matching_precision
    def overlap(self, other: Period) -> Period | None:
        """Return the intersection of two periods, or None.

        The result includes both of its endpoints whatever the boundaries
        of the operands.

        Raises:
            PrecisionMismatchError: If the precisions differ.

        Examples:
            >>> a = Period.make("2021-01-01", "2021-01-15")
            >>> b = Period.make("2021-01-10", "2021-01-31")
            >>> str(a.overlap(b))
            '[2021-01-10, 2021-01-15]'
        """
        start = max(self._included_start, other._included_start)
        end = min(self._included_end, other._included_end)

        if start > end:
            return None

        return type(self)(start, end, self._precision)

    def overlap_any(self, *periods: Period) -> PeriodCollection:
        """Return the overlap of this period with each argument.

        Arguments that do not overlap are left out; order is kept.

        Examples:
            >>> a = Period.make("2021-01-01", "2021-01-31")
            >>> [str(p) for p in a.overlap_any(
            ...     Period.make("2020-12-25", "2021-01-05"),
            ...     Period.make("2021-03-01", "2021-03-05"),
            ...     Period.make("2021-01-28", "2021-02-05"),
            ... )]
            ['[2021-01-01, 2021-01-05]', '[2021-01-28, 2021-01-31]']
        """
        overlaps = []
        for period in periods:
            overlap = self.overlap(period)
            if overlap is None:
                continue
            overlaps.append(overlap)
        return PeriodCollection(*overlaps)

    def overlap_all(self, *periods: Period) -> Period | None:
        """Return the part of this period shared by every argument.

        Returns this period when there are no arguments, and None as soon
        as one intersection is empty.

        Examples:
            >>> a = Period.make("2021-01-01", "2021-01-31")
            >>> str(a.overlap_all(Period.make("2021-01-05", "2021-02-10"),
            ...                   Period.make("2020-12-01", "2021-01-20")))
            '[2021-01-05, 2021-01-20]'
        """
        overlap: Period | None = self

        for period in periods:
            overlap = overlap.overlap(period)
            if overlap is None:
                return None

        return overlap

    @requires_matching_precision
    def diff(self, other: Period) -> PeriodCollection:
        """Return the symmetric difference of two periods.

        Periods that do not overlap are both returned unchanged. Otherwise
        the parts of their union before and after the overlap are returned.

        Raises:
            PrecisionMismatchError: If the precisions differ.

        Examples:
            >>> a = Period.make("2021-01-01", "2021-01-15")
            >>> b = Period.make("2021-01-10", "2021-01-31")
            >>> [str(p) for p in a.diff(b)]
            ['[2021-01-01, 2021-01-09]', '[2021-01-16, 2021-01-31]']
        """
        if not self.overlaps_with(other):
            return PeriodCollection(self, other)

        overlap = self.overlap(other)
        assert overlap is not None

        start = min(self._included_start, other._included_start)
        end = max(self._included_end, other._included_end)

        fragments = []

        if overlap._included_start > start:
            fragments.append(
                type(self)(start, overlap._included_start - self._interval, self._precision)
            )

        if overlap._included_end < end:
            fragments.append(
                type(self)(overlap._included_end + self._interval, end, self._precision)
            )

        return PeriodCollection(*fragments)

    def subtract(self, *periods: Period) -> PeriodCollection:
        """Return what is left of this period once every argument is removed.

        Each argument's diff holds the fragments outside it; intersecting
        this period with all of those at once keeps only the parts that no
        argument covers.

        Raises:
            PrecisionMismatchError: If any precision differs.

        Examples:
            >>> a = Period.make("2021-01-01", "2021-01-10")
            >>> [str(p) for p in a.subtract(Period.make("2021-01-05", "2021-01-06"))]
            ['[2021-01-01, 2021-01-04]', '[2021-01-07, 2021-01-10]']
            >>> len(a.subtract(a))
            0
        """
        diffs = [self.diff(period) for period in periods]

        return PeriodCollection(self).overlap_all(*diffs)

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Check value equality with another period.

        Unlike equals(), periods of different precision are simply unequal.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._precision is other._precision
            and self._included_start == other._included_start
            and self._included_end == other._included_end
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._precision, self._included_start, self._included_end))

    def __bool__(self) -> bool:
        """Return True if this period is non-empty."""
        return not self.is_empty

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._start!r}, {self._end!r}, "
            f"precision=Precision.{self._precision.name}, "
            f"boundaries=Boundaries.{self._boundaries.name})"
        )

    def __str__(self) -> str:
        """Return interval notation, brackets marking included endpoints.

        Examples:
            >>> str(Period.make("2021-01-01", "2021-01-31",
            ...                 boundaries=Boundaries.EXCLUDE_START))
            '(2021-01-01, 2021-01-31]'
        """
        fmt = _DISPLAY_FORMATS[self._precision]
        opening = "[" if self._boundaries.start_included else "("
        closing = "]" if self._boundaries.end_included else ")"
        return f"{opening}{self._start.strftime(fmt)}, {self._end.strftime(fmt)}{closing}"


__all__ = ["DateInput", "Period"]
