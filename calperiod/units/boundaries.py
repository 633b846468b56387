"""Boundaries flags for period endpoint exclusion."""

from __future__ import annotations

from enum import IntFlag


class Boundaries(IntFlag):
    """Which endpoints of a period are excluded.

    Two independent flags give four valid values. The default,
    EXCLUDE_NONE, makes both endpoints part of the period.

    Examples:
        >>> Boundaries.EXCLUDE_START | Boundaries.EXCLUDE_END == Boundaries.EXCLUDE_ALL
        True
        >>> Boundaries.EXCLUDE_END.start_included
        True
        >>> Boundaries.from_mask(6)
        <Boundaries.EXCLUDE_ALL: 6>
    """

    EXCLUDE_NONE = 0
    EXCLUDE_START = 2
    EXCLUDE_END = 4
    EXCLUDE_ALL = EXCLUDE_START | EXCLUDE_END

    @classmethod
    def from_mask(cls, mask: int | Boundaries | None) -> Boundaries:
        """Return the boundaries for a mask, treating None as EXCLUDE_NONE.

        Raises:
            ValueError: If mask carries bits other than the two exclusion flags.
        """
        if mask is None:
            return cls.EXCLUDE_NONE
        if isinstance(mask, Boundaries):
            return mask
        if int(mask) & ~int(cls.EXCLUDE_ALL):
            raise ValueError(f"{mask!r} is not a valid boundary exclusion mask")
        return cls(mask)

    @property
    def start_excluded(self) -> bool:
        return bool(self & Boundaries.EXCLUDE_START)

    @property
    def start_included(self) -> bool:
        return not self.start_excluded

    @property
    def end_excluded(self) -> bool:
        return bool(self & Boundaries.EXCLUDE_END)

    @property
    def end_included(self) -> bool:
        return not self.end_excluded


__all__ = ["Boundaries"]
