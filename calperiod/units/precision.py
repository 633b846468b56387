"""Precision enumeration for period granularity.

This module provides the CalendarField enum (the six calendar fields a
timestamp is decomposed into) and the Precision enum selecting which of
those fields are significant for a period.
"""

from __future__ import annotations

from enum import Enum

from dateutil.relativedelta import relativedelta


class CalendarField(Enum):
    """A single calendar field, carrying its own bit.

    Examples:
        >>> CalendarField.DAY.attribute
        'day'
        >>> CalendarField.DAY.minimum
        1
        >>> CalendarField.HOUR.minimum
        0
    """

    YEAR = 0b100000
    MONTH = 0b010000
    DAY = 0b001000
    HOUR = 0b000100
    MINUTE = 0b000010
    SECOND = 0b000001

    @property
    def attribute(self) -> str:
        """Name of the matching ``datetime`` attribute."""
        return self.name.lower()

    @property
    def plural(self) -> str:
        """Name of the matching ``relativedelta`` attribute."""
        return self.name.lower() + "s"

    @property
    def minimum(self) -> int:
        """Smallest legal value of this field."""
        if self in (CalendarField.MONTH, CalendarField.DAY):
            return 1
        return 0


# Coarsest first; rounding and touch detection walk the fields in this order.
CALENDAR_FIELDS: tuple[CalendarField, ...] = (
    CalendarField.YEAR,
    CalendarField.MONTH,
    CalendarField.DAY,
    CalendarField.HOUR,
    CalendarField.MINUTE,
    CalendarField.SECOND,
)


class Precision(Enum):
    """Granularity of a period, from YEAR down to SECOND.

    Each member's value is the canonical mask "every field down to this
    level": SECOND has all six field bits set, YEAR only the year bit.
    Only these six masks are precisions; arbitrary bit combinations are
    rejected by from_mask().

    Examples:
        >>> Precision.DAY.fields
        (<CalendarField.YEAR: 32>, <CalendarField.MONTH: 16>, <CalendarField.DAY: 8>)

        >>> Precision.MONTH.is_significant(CalendarField.DAY)
        False

        >>> Precision.from_mask(0b111000)
        <Precision.DAY: 56>

        >>> Precision.HOUR.interval()
        relativedelta(hours=+1)
    """

    YEAR = 0b100000
    MONTH = 0b110000
    DAY = 0b111000
    HOUR = 0b111100
    MINUTE = 0b111110
    SECOND = 0b111111

    @classmethod
    def from_mask(cls, mask: int | Precision) -> Precision:
        """Return the precision for a canonical mask.

        Args:
            mask: A Precision member or one of the six canonical integers.

        Returns:
            The matching Precision.

        Raises:
            ValueError: If mask is not one of the canonical combinations.
        """
        if isinstance(mask, Precision):
            return mask
        try:
            return cls(mask)
        except ValueError:
            raise ValueError(
                f"{mask!r} is not a valid precision mask, expected one of "
                f"{', '.join(f'{p.name}={p.value:#08b}' for p in cls)}"
            ) from None

    @property
    def mask(self) -> int:
        """Return the integer bitmask of this precision."""
        return self.value

    @property
    def unit(self) -> CalendarField:
        """Return the finest significant field (the unit being counted)."""
        return CalendarField[self.name]

    @property
    def fields(self) -> tuple[CalendarField, ...]:
        """Return the significant fields, coarsest first."""
        return tuple(f for f in CALENDAR_FIELDS if self.is_significant(f))

    def is_significant(self, field: CalendarField) -> bool:
        """Return True if field is kept when rounding to this precision."""
        return self.value & field.value == field.value

    def interval(self) -> relativedelta:
        """Return the smallest addressable step at this precision."""
        return relativedelta(**{self.unit.plural: 1})


__all__ = ["CALENDAR_FIELDS", "CalendarField", "Precision"]
