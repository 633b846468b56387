"""Rounding and unit-step helpers.

This module is the single normalization path for timestamps compared
against a period. It is not part of the public API.
"""

from __future__ import annotations

from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from calperiod.units.precision import CALENDAR_FIELDS, Precision


def as_datetime(value: date | datetime) -> datetime:
    """Promote a plain date to a midnight datetime.

    Examples:
        >>> as_datetime(date(2021, 3, 4))
        datetime.datetime(2021, 3, 4, 0, 0)
    """
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def round_datetime(value: date | datetime, precision: int | Precision) -> datetime:
    """Reset every field not significant at precision to its minimum.

    Sub-second components are always dropped. The time zone is kept.

    Args:
        value: The timestamp to round.
        precision: A Precision or canonical precision mask.

    Returns:
        The rounded timestamp.

    Examples:
        >>> round_datetime(datetime(2021, 5, 17, 13, 45, 12), Precision.MONTH)
        datetime.datetime(2021, 5, 1, 0, 0)

        >>> round_datetime(datetime(2021, 5, 17, 13, 45, 12, 999), Precision.SECOND)
        datetime.datetime(2021, 5, 17, 13, 45, 12)
    """
    precision = Precision.from_mask(precision)
    value = as_datetime(value)

    reset = {
        field.attribute: field.minimum
        for field in CALENDAR_FIELDS
        if not precision.is_significant(field)
    }
    return value.replace(microsecond=0, **reset)


def unit_interval(precision: int | Precision) -> relativedelta:
    """Return the unit step for a precision.

    Raises:
        ValueError: If precision is not one of the canonical masks.

    Examples:
        >>> unit_interval(Precision.DAY)
        relativedelta(days=+1)
        >>> unit_interval(0b110000)
        relativedelta(months=+1)
    """
    return Precision.from_mask(precision).interval()


def calendar_difference(a: datetime, b: datetime) -> relativedelta:
    """Return the field-by-field difference between two timestamps.

    The result is never negative: the earlier timestamp is subtracted
    from the later one whatever the argument order.

    Examples:
        >>> calendar_difference(datetime(2021, 2, 1), datetime(2021, 1, 31))
        relativedelta(days=+1)
        >>> calendar_difference(datetime(2020, 12, 31), datetime(2021, 1, 1))
        relativedelta(days=+1)
    """
    if a < b:
        a, b = b, a
    return relativedelta(a, b)


def span_between(
    start: datetime, end: datetime, precision: int | Precision
) -> relativedelta:
    """Return the distance from start to end as a relativedelta.

    MONTH and YEAR precision measure in whole calendar units so that the
    number of months or years is kept when the span is applied to another
    start. Finer precisions measure the exact elapsed time.

    Examples:
        >>> span_between(datetime(2021, 1, 1), datetime(2021, 3, 1), Precision.MONTH)
        relativedelta(months=+2)
        >>> span_between(datetime(2021, 1, 1), datetime(2021, 3, 1), Precision.DAY)
        relativedelta(days=+59)
    """
    precision = Precision.from_mask(precision)
    if precision in (Precision.YEAR, Precision.MONTH):
        return relativedelta(end, start)
    elapsed = end - start
    return relativedelta(days=elapsed.days, seconds=elapsed.seconds)


__all__ = [
    "as_datetime",
    "calendar_difference",
    "round_datetime",
    "span_between",
    "unit_interval",
]
