"""PeriodCollection class: an ordered sequence of periods.

This module provides the PeriodCollection class and the operations that
work across several periods at once:
    - overlap_all: Running intersection with other collections
    - boundaries: The period spanning every member
    - gaps: The holes between members
    - union: Members merged where they overlap or touch
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Sequence, TypeVar, overload

if TYPE_CHECKING:
    from calperiod.core.period import Period

logger = logging.getLogger(__name__)

R = TypeVar("R")


class PeriodCollection(Sequence["Period"]):
    """An ordered collection of periods.

    Collections never change once built: add() and every other operation
    return a new collection.

    Examples:
        >>> from calperiod import Period
        >>> collection = PeriodCollection(
        ...     Period.make("2021-01-01", "2021-01-05"),
        ...     Period.make("2021-01-10", "2021-01-15"),
        ... )
        >>> len(collection)
        2
        >>> str(collection.boundaries())
        '[2021-01-01, 2021-01-15]'
        >>> [str(p) for p in collection.gaps()]
        ['[2021-01-06, 2021-01-09]']
    """

    __slots__ = ("_periods",)

    def __init__(self, *periods: Period) -> None:
        self._periods: tuple[Period, ...] = tuple(periods)

    @classmethod
    def make(cls, *periods: Period) -> PeriodCollection:
        return cls(*periods)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> Period: ...

    @overload
    def __getitem__(self, index: slice) -> PeriodCollection: ...

    def __getitem__(self, index: int | slice) -> Period | PeriodCollection:
        if isinstance(index, slice):
            return type(self)(*self._periods[index])
        return self._periods[index]

    def __len__(self) -> int:
        return len(self._periods)

    def __iter__(self) -> Iterator[Period]:
        return iter(self._periods)

    def __bool__(self) -> bool:
        return bool(self._periods)

    def __eq__(self, other: object) -> bool:
        """Check equality with another collection, member by member, in order."""
        if not isinstance(other, PeriodCollection):
            return NotImplemented
        return self._periods == other._periods

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(self._periods)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(p) for p in self._periods)})"

    def __str__(self) -> str:
        return "{" + ", ".join(str(p) for p in self._periods) + "}"

    def is_empty(self) -> bool:
        return not self._periods

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add(self, *periods: Period) -> PeriodCollection:
        """Return a new collection with periods appended."""
        return type(self)(*self._periods, *periods)

    def map(self, fn: Callable[[Period], Period]) -> PeriodCollection:
        return type(self)(*(fn(period) for period in self._periods))

    def filter(self, fn: Callable[[Period], bool]) -> PeriodCollection:
        return type(self)(*(period for period in self._periods if fn(period)))

    def reduce(self, fn: Callable[[R, Period], R], initial: R) -> R:
        result = initial
        for period in self._periods:
            result = fn(result, period)
        return result

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    def overlap_all(self, *others: PeriodCollection) -> PeriodCollection:
        """Intersect this collection with every other collection in turn.

        Each step keeps, for every running fragment, its overlap with each
        member of the next collection. A fragment that overlaps nothing is
        dropped; the fold stops once no fragment is left.

        Raises:
            PrecisionMismatchError: If any two compared precisions differ.

        Examples:
            >>> from calperiod import Period
            >>> running = PeriodCollection(Period.make("2021-01-01", "2021-01-31"))
            >>> other = PeriodCollection(
            ...     Period.make("2020-12-20", "2021-01-03"),
            ...     Period.make("2021-01-20", "2021-02-03"),
            ... )
            >>> [str(p) for p in running.overlap_all(other)]
            ['[2021-01-01, 2021-01-03]', '[2021-01-20, 2021-01-31]']
        """
        overlap = self

        for other in others:
            if overlap.is_empty():
                break
            overlap = overlap._overlap(other)

        logger.debug(
            "Folded %d collection(s) over %d period(s) into %d fragment(s)",
            len(others),
            len(self),
            len(overlap),
        )
        return overlap

    def _overlap(self, others: Iterable[Period]) -> PeriodCollection:
        others = tuple(others)
        overlaps = []

        for period in self._periods:
            for other in others:
                overlap = period.overlap(other)
                if overlap is None:
                    continue
                overlaps.append(overlap)

        return type(self)(*overlaps)

    def intersect(self, intersection: Period) -> PeriodCollection:
        """Return the overlap of every member with intersection.

        Examples:
            >>> from calperiod import Period
            >>> collection = PeriodCollection(
            ...     Period.make("2021-01-01", "2021-01-10"),
            ...     Period.make("2021-01-20", "2021-01-31"),
            ... )
            >>> [str(p) for p in collection.intersect(Period.make("2021-01-05", "2021-01-25"))]
            ['[2021-01-05, 2021-01-10]', '[2021-01-20, 2021-01-25]']
        """
        return self._overlap((intersection,))

    def boundaries(self) -> Period | None:
        """Return the period from the earliest start to the latest end.

        The result uses the precision of the first member and default
        boundaries. Returns None for an empty collection.
        """
        if not self._periods:
            return None

        first = self._periods[0]
        start = min(period.included_start for period in self._periods)
        end = max(period.included_end for period in self._periods)

        return type(first)(start, end, first.precision)

    def gaps(self) -> PeriodCollection:
        """Return the periods inside the boundaries that no member covers."""
        boundaries = self.boundaries()

        if boundaries is None:
            return type(self)()

        return boundaries.subtract(*self._periods)

    def subtract(self, others: PeriodCollection | Period) -> PeriodCollection:
        """Return every member with all of others removed.

        Examples:
            >>> from calperiod import Period
            >>> collection = PeriodCollection(
            ...     Period.make("2021-01-01", "2021-01-10"),
            ...     Period.make("2021-01-20", "2021-01-31"),
            ... )
            >>> [str(p) for p in collection.subtract(Period.make("2021-01-05", "2021-01-25"))]
            ['[2021-01-01, 2021-01-04]', '[2021-01-26, 2021-01-31]']
        """
        from calperiod.core.period import Period

        if isinstance(others, Period):
            others = type(self)(others)

        fragments: list[Period] = []
        for period in self._periods:
            fragments.extend(period.subtract(*others))

        return type(self)(*fragments)

    def sort(self) -> PeriodCollection:
        """Return the members ordered by included start, then included end."""
        return type(self)(
            *sorted(self._periods, key=lambda p: (p.included_start, p.included_end))
        )

    def unique(self) -> PeriodCollection:
        """Return the members with later duplicates removed."""
        seen: list[Period] = []
        for period in self._periods:
            if period not in seen:
                seen.append(period)
        return type(self)(*seen)

    def union(self) -> PeriodCollection:
        """Return the members merged wherever they overlap or touch.

        Empty members are dropped. The result is sorted.

        Examples:
            >>> from calperiod import Period
            >>> collection = PeriodCollection(
            ...     Period.make("2021-01-20", "2021-01-31"),
            ...     Period.make("2021-01-01", "2021-01-10"),
            ...     Period.make("2021-01-11", "2021-01-15"),
            ... )
            >>> [str(p) for p in collection.union()]
            ['[2021-01-01, 2021-01-15]', '[2021-01-20, 2021-01-31]']
        """
        members = [period for period in self.sort() if not period.is_empty]

        if not members:
            return type(self)()

        merged: list[Period] = []
        current = members[0]

        for period in members[1:]:
            if current.overlaps_with(period) or current.touches_with(period):
                current = type(current)(
                    current.included_start,
                    max(current.included_end, period.included_end),
                    current.precision,
                )
            else:
                merged.append(current)
                current = period

        merged.append(current)
        return type(self)(*merged)


__all__ = ["PeriodCollection"]
