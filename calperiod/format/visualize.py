"""Text rendering of periods on a shared timeline.

The Visualizer draws one bar per named period or collection, all scaled
against the combined boundaries of everything drawn. It is meant for
debugging and doctests.

Examples:
    >>> from calperiod import Period
    >>> print(Visualizer(width=10).visualize({
    ...     "A": Period.make("2021-01-01", "2021-01-05"),
    ...     "B": Period.make("2021-01-06", "2021-01-10"),
    ... }))
    A    =====
    B         =====
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Mapping, Union

from calperiod._internal.constants import DEFAULT_VISUALIZER_WIDTH
from calperiod.core.collection import PeriodCollection

if TYPE_CHECKING:
    from calperiod.core.period import Period

Block = Union["Period", PeriodCollection]

_SEPARATOR = "    "


class Visualizer:
    """Render periods as rows of ``=`` bars.

    Attributes:
        width: Number of characters the full timeline spans.
    """

    __slots__ = ("_width",)

    def __init__(self, width: int = DEFAULT_VISUALIZER_WIDTH) -> None:
        if width < 1:
            raise ValueError(f"width must be at least 1, got {width}")
        self._width = width

    @property
    def width(self) -> int:
        return self._width

    def visualize(self, blocks: Mapping[str, Block]) -> str:
        """Return one line per block: its padded name and its bar.

        Trailing spaces are stripped from every line.
        """
        matrix = self.matrix(blocks)
        if not matrix:
            return ""

        name_length = max(len(name) for name in matrix)
        lines = [
            f"{name.ljust(name_length)}{_SEPARATOR}{self._to_bars(row)}".rstrip()
            for name, row in matrix.items()
        ]
        return "\n".join(lines)

    def matrix(self, blocks: Mapping[str, Block]) -> dict[str, list[bool]]:
        """Return, per block, which of the width positions it covers."""
        periods: list[Period] = []
        for block in blocks.values():
            if isinstance(block, PeriodCollection):
                periods.extend(block)
            else:
                periods.append(block)

        absolute = PeriodCollection(*periods).boundaries()
        if absolute is None:
            return {name: [False] * self._width for name in blocks}

        matrix: dict[str, list[bool]] = {}
        for name, block in blocks.items():
            members = block if isinstance(block, PeriodCollection) else (block,)
            row = [False] * self._width
            for period in members:
                for index in self.coords(period, absolute):
                    row[index] = True
            matrix[name] = row

        return matrix

    def coords(self, period: Period, absolute: Period) -> range:
        """Return the positions period covers on the absolute timeline."""
        if period.is_empty:
            return range(0)

        origin = absolute.included_start
        total = (absolute.included_end + absolute.interval - origin).total_seconds()

        start = (period.included_start - origin).total_seconds() / total
        end = (period.included_end + period.interval - origin).total_seconds() / total

        first = max(0, math.floor(start * self._width))
        last = min(self._width, math.ceil(end * self._width))
        return range(first, last)

    @staticmethod
    def _to_bars(row: list[bool]) -> str:
        return "".join("=" if filled else " " for filled in row)


__all__ = ["Visualizer"]
