"""Calperiod exception hierarchy.

All Calperiod-specific exceptions inherit from CalperiodError.
"""

from __future__ import annotations

from typing import Any


class CalperiodError(Exception):
    """Base exception for all Calperiod errors."""

    pass


class InvalidPeriodError(CalperiodError):
    """A period whose end precedes its start.

    Raised at construction when, after both endpoints are rounded to the
    period's precision, the start lies after the end.
    """

    @classmethod
    def end_before_start(cls, start: Any, end: Any) -> InvalidPeriodError:
        """Build the error for a period that ends before it starts.

        Examples:
            >>> from datetime import datetime
            >>> str(InvalidPeriodError.end_before_start(
            ...     datetime(2021, 1, 2), datetime(2021, 1, 1)))
            'The end time `2021-01-01 00:00:00` is before the start time `2021-01-02 00:00:00`.'
        """
        return cls(
            f"The end time `{_display(end)}` is before the start time "
            f"`{_display(start)}`."
        )


class InvalidDateError(CalperiodError):
    """Missing or unparsable date input.

    Examples:
        - None passed as a start or end date
        - Text that does not match the expected format
        - A value that is neither a date, a datetime nor a string
    """

    @classmethod
    def cannot_be_null(cls, parameter: str) -> InvalidDateError:
        """Build the error for a missing date argument.

        Examples:
            >>> str(InvalidDateError.cannot_be_null("Start date"))
            'Start date cannot be null'
        """
        return cls(f"{parameter} cannot be null")

    @classmethod
    def for_format(cls, value: Any, fmt: str | None) -> InvalidDateError:
        """Build the error for a value that cannot be read with a format.

        Examples:
            >>> str(InvalidDateError.for_format("2021-13-45", "Y-m-d"))
            "Could not construct a date from `'2021-13-45'` with format `Y-m-d`."
        """
        return cls(f"Could not construct a date from `{value!r}` with format `{fmt}`.")

    @classmethod
    def mixed_timezones(cls, start: Any, end: Any) -> InvalidDateError:
        """Build the error for one timezone-aware and one naive endpoint.

        Examples:
            >>> from datetime import datetime, timezone
            >>> str(InvalidDateError.mixed_timezones(
            ...     datetime(2021, 1, 1, tzinfo=timezone.utc), datetime(2021, 1, 2)))
            'Cannot compare the start time `2021-01-01 00:00:00` with the end time `2021-01-02 00:00:00`: only one of them has a timezone.'
        """
        return cls(
            f"Cannot compare the start time `{_display(start)}` with the end time "
            f"`{_display(end)}`: only one of them has a timezone."
        )


class PrecisionMismatchError(CalperiodError):
    """Two periods of different precision were combined or compared.

    Raised by every binary relational or algebraic operation. Neither
    operand is modified.
    """

    @classmethod
    def precision_does_not_match(cls) -> PrecisionMismatchError:
        """Build the error for a precision mismatch."""
        return cls("Cannot compare two periods whose precision is not the same.")


def _display(value: Any) -> str:
    strftime = getattr(value, "strftime", None)
    if strftime is None:
        return str(value)
    return strftime("%Y-%m-%d %H:%M:%S")


__all__ = [
    "CalperiodError",
    "InvalidPeriodError",
    "InvalidDateError",
    "PrecisionMismatchError",
]
