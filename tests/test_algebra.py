"""Tests for gap, overlap, diff and subtract."""

from __future__ import annotations

import pytest

from calperiod import Boundaries, Period, PeriodCollection, Precision, PrecisionMismatchError


def day(start: str, end: str, boundaries: Boundaries = Boundaries.EXCLUDE_NONE) -> Period:
    return Period.make(start, end, Precision.DAY, boundaries)


def month(start: str, end: str) -> Period:
    return Period.make(start, end, Precision.MONTH)


def as_text(collection: PeriodCollection) -> list[str]:
    return [str(period) for period in collection]


# =============================================================================
# gap
# =============================================================================


class TestGap:
    """Tests for Period.gap()."""

    def test_gap_between_days(self) -> None:
        a = day("2021-01-01", "2021-01-10")
        b = day("2021-01-15", "2021-01-20")
        assert a.gap(b) == day("2021-01-11", "2021-01-14")

    def test_gap_is_symmetric(self) -> None:
        a = day("2021-01-01", "2021-01-10")
        b = day("2021-01-15", "2021-01-20")
        assert a.gap(b) == b.gap(a)

    def test_gap_between_months(self) -> None:
        a = month("2021-01-01", "2021-02-01")
        b = month("2021-05-01", "2021-06-01")
        assert a.gap(b) == month("2021-03-01", "2021-04-01")

    def test_single_unit_gap(self) -> None:
        gap = day("2021-01-01", "2021-01-10").gap(day("2021-01-12", "2021-01-20"))
        assert gap == day("2021-01-11", "2021-01-11")
        assert gap is not None
        assert gap.length() == 1

    def test_gap_uses_included_endpoints(self) -> None:
        a = day("2021-01-01", "2021-01-10", Boundaries.EXCLUDE_END)
        b = day("2021-01-15", "2021-01-20", Boundaries.EXCLUDE_START)
        assert a.gap(b) == day("2021-01-10", "2021-01-15")

    def test_overlapping_periods_have_no_gap(self) -> None:
        assert day("2021-01-01", "2021-01-10").gap(day("2021-01-05", "2021-01-20")) is None

    def test_touching_periods_have_no_gap(self) -> None:
        assert day("2021-01-01", "2021-01-10").gap(day("2021-01-11", "2021-01-20")) is None

    def test_result_has_default_boundaries(self) -> None:
        a = day("2021-01-01", "2021-01-10", Boundaries.EXCLUDE_ALL)
        b = day("2021-01-15", "2021-01-20", Boundaries.EXCLUDE_ALL)
        gap = a.gap(b)
        assert gap is not None
        assert gap.boundaries is Boundaries.EXCLUDE_NONE

    def test_precision_mismatch(self) -> None:
        with pytest.raises(PrecisionMismatchError):
            day("2021-01-01", "2021-01-10").gap(month("2021-05-01", "2021-06-01"))


# =============================================================================
# overlap
# =============================================================================


class TestOverlap:
    """Tests for Period.overlap() and its multi-period variants."""

    def test_overlap(self) -> None:
        a = day("2021-01-01", "2021-01-15")
        b = day("2021-01-10", "2021-01-31")
        assert a.overlap(b) == day("2021-01-10", "2021-01-15")

    def test_overlap_is_commutative(self) -> None:
        a = day("2021-01-01", "2021-01-15")
        b = day("2021-01-10", "2021-01-31")
        assert a.overlap(b) == b.overlap(a)

    def test_contained_period(self) -> None:
        outer = day("2021-01-01", "2021-01-31")
        inner = day("2021-01-10", "2021-01-12")
        assert outer.overlap(inner) == inner

    def test_no_overlap(self) -> None:
        assert day("2021-01-01", "2021-01-10").overlap(day("2021-01-11", "2021-01-20")) is None

    def test_single_shared_day(self) -> None:
        overlap = day("2021-01-01", "2021-01-10").overlap(day("2021-01-10", "2021-01-20"))
        assert overlap == day("2021-01-10", "2021-01-10")

    def test_result_includes_both_endpoints(self) -> None:
        a = day("2021-01-01", "2021-01-15", Boundaries.EXCLUDE_ALL)
        b = day("2021-01-10", "2021-01-31")
        overlap = a.overlap(b)
        assert overlap is not None
        assert overlap.boundaries is Boundaries.EXCLUDE_NONE
        assert str(overlap) == "[2021-01-10, 2021-01-14]"

    def test_precision_mismatch(self) -> None:
        with pytest.raises(PrecisionMismatchError):
            day("2021-01-01", "2021-01-31").overlap(month("2021-01-01", "2021-02-01"))

    def test_overlap_any_keeps_argument_order(self) -> None:
        a = day("2021-01-01", "2021-01-31")
        result = a.overlap_any(
            day("2021-01-28", "2021-02-05"),
            day("2021-03-01", "2021-03-05"),
            day("2020-12-25", "2021-01-05"),
        )
        assert as_text(result) == ["[2021-01-28, 2021-01-31]", "[2021-01-01, 2021-01-05]"]

    def test_overlap_any_without_arguments(self) -> None:
        assert len(day("2021-01-01", "2021-01-31").overlap_any()) == 0

    def test_overlap_all(self) -> None:
        a = day("2021-01-01", "2021-01-31")
        result = a.overlap_all(
            day("2021-01-05", "2021-02-10"),
            day("2020-12-01", "2021-01-20"),
        )
        assert result == day("2021-01-05", "2021-01-20")

    def test_overlap_all_without_arguments_returns_self(self) -> None:
        a = day("2021-01-01", "2021-01-31")
        assert a.overlap_all() is a

    def test_overlap_all_stops_at_first_empty_intersection(self) -> None:
        """Arguments after an empty intersection are never compared."""
        a = day("2021-01-01", "2021-01-31")
        result = a.overlap_all(
            day("2021-03-01", "2021-03-05"),
            month("2021-01-01", "2021-02-01"),
        )
        assert result is None

    def test_overlap_any_checks_each_precision(self) -> None:
        a = day("2021-01-01", "2021-01-31")
        with pytest.raises(PrecisionMismatchError):
            a.overlap_any(
                day("2021-01-05", "2021-01-10"),
                month("2021-01-01", "2021-02-01"),
            )

    def test_overlap_all_checks_each_precision(self) -> None:
        a = day("2021-01-01", "2021-01-31")
        with pytest.raises(PrecisionMismatchError):
            a.overlap_all(
                day("2021-01-05", "2021-02-10"),
                month("2021-01-01", "2021-02-01"),
            )


# =============================================================================
# diff
# =============================================================================


class TestDiff:
    """Tests for Period.diff()."""

    def test_partial_overlap(self) -> None:
        a = day("2021-01-01", "2021-01-15")
        b = day("2021-01-10", "2021-01-31")
        assert as_text(a.diff(b)) == ["[2021-01-01, 2021-01-09]", "[2021-01-16, 2021-01-31]"]

    def test_diff_is_symmetric(self) -> None:
        a = day("2021-01-01", "2021-01-15")
        b = day("2021-01-10", "2021-01-31")
        assert a.diff(b) == b.diff(a)

    def test_contained_period(self) -> None:
        outer = day("2021-01-01", "2021-01-31")
        inner = day("2021-01-10", "2021-01-20")
        assert as_text(outer.diff(inner)) == [
            "[2021-01-01, 2021-01-09]",
            "[2021-01-21, 2021-01-31]",
        ]

    def test_shared_start(self) -> None:
        a = day("2021-01-01", "2021-01-31")
        b = day("2021-01-01", "2021-01-10")
        assert as_text(a.diff(b)) == ["[2021-01-11, 2021-01-31]"]

    def test_identical_periods(self) -> None:
        a = day("2021-01-01", "2021-01-31")
        assert len(a.diff(a)) == 0

    def test_disjoint_periods_are_returned_unchanged(self) -> None:
        a = day("2021-01-01", "2021-01-10")
        b = day("2021-02-01", "2021-02-10")
        result = a.diff(b)
        assert len(result) == 2
        assert result[0] is a
        assert result[1] is b

    def test_precision_mismatch(self) -> None:
        with pytest.raises(PrecisionMismatchError):
            day("2021-01-01", "2021-01-31").diff(month("2021-01-01", "2021-02-01"))


# =============================================================================
# subtract
# =============================================================================


class TestSubtract:
    """Tests for Period.subtract()."""

    def test_subtract_middle(self) -> None:
        a = day("2021-01-01", "2021-01-10")
        result = a.subtract(day("2021-01-05", "2021-01-06"))
        assert as_text(result) == ["[2021-01-01, 2021-01-04]", "[2021-01-07, 2021-01-10]"]

    def test_subtract_self_is_empty(self) -> None:
        a = day("2021-01-01", "2021-01-10")
        assert len(a.subtract(a)) == 0

    def test_subtract_nothing(self) -> None:
        a = day("2021-01-01", "2021-01-10")
        assert list(a.subtract()) == [a]

    def test_subtract_disjoint(self) -> None:
        a = day("2021-01-01", "2021-01-10")
        assert list(a.subtract(day("2021-02-01", "2021-02-05"))) == [a]

    def test_subtract_covering_period(self) -> None:
        a = day("2021-01-05", "2021-01-06")
        assert len(a.subtract(day("2021-01-01", "2021-01-10"))) == 0

    def test_subtract_several(self) -> None:
        a = day("2021-01-01", "2021-01-31")
        result = a.subtract(
            day("2021-01-05", "2021-01-10"),
            day("2021-01-20", "2021-01-25"),
        )
        assert as_text(result) == [
            "[2021-01-01, 2021-01-04]",
            "[2021-01-11, 2021-01-19]",
            "[2021-01-26, 2021-01-31]",
        ]

    def test_subtract_overlapping_periods(self) -> None:
        a = day("2021-01-01", "2021-01-31")
        result = a.subtract(
            day("2021-01-05", "2021-01-15"),
            day("2021-01-10", "2021-01-20"),
        )
        assert as_text(result) == ["[2021-01-01, 2021-01-04]", "[2021-01-21, 2021-01-31]"]

    def test_precision_mismatch(self) -> None:
        with pytest.raises(PrecisionMismatchError):
            day("2021-01-01", "2021-01-31").subtract(month("2021-01-01", "2021-02-01"))
