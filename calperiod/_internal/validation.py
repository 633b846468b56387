"""Validation utilities for Calperiod.

This module provides the precondition checks shared by period
construction and the binary period operations.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable, Concatenate, ParamSpec, TypeVar

from calperiod.errors import InvalidDateError, PrecisionMismatchError

if TYPE_CHECKING:
    from calperiod.core.period import Period

P = ParamSpec("P")
T = TypeVar("T")
S = TypeVar("S", bound="Period")


def ensure_precision_matches(period: Period, other: Period) -> None:
    """Raise unless both periods share the same precision.

    Raises:
        PrecisionMismatchError: If the precisions differ.
    """
    if period.precision is not other.precision:
        raise PrecisionMismatchError.precision_does_not_match()


def requires_matching_precision(
    method: Callable[Concatenate[S, Period, P], T],
) -> Callable[Concatenate[S, Period, P], T]:
    """Decorator for Period methods whose first argument is another period.

    The check runs before the method body, so a mismatch leaves both
    periods untouched.
    """

    @functools.wraps(method)
    def wrapper(self: S, other: Period, *args: P.args, **kwargs: P.kwargs) -> T:
        ensure_precision_matches(self, other)
        return method(self, other, *args, **kwargs)

    return wrapper


def validate_not_null(value: Any, parameter: str) -> None:
    """Raise if a required date argument is missing.

    Raises:
        InvalidDateError: If value is None.
    """
    if value is None:
        raise InvalidDateError.cannot_be_null(parameter)


__all__ = [
    "ensure_precision_matches",
    "requires_matching_precision",
    "validate_not_null",
]
