"""Tests for date resolution from timestamps and text."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from calperiod.errors import InvalidDateError
from calperiod.format import parse_date, resolve_date, resolve_format


class TestResolveFormat:
    """Tests for format inference."""

    def test_explicit_format_wins(self) -> None:
        assert resolve_format("2021-01-01 10:00:00", "d/m/Y") == "d/m/Y"

    def test_date_text(self) -> None:
        assert resolve_format("2021-01-01", None) == "Y-m-d"

    def test_text_with_space_is_datetime(self) -> None:
        assert resolve_format("2021-01-01 10:00:00", None) == "Y-m-d H:i:s"

    def test_non_text_falls_back_to_date_format(self) -> None:
        assert resolve_format(12345, None) == "Y-m-d"


class TestResolveDate:
    """Tests for resolve_date."""

    def test_datetime_passes_through(self) -> None:
        value = datetime(2021, 1, 1, 12, 30, 15)
        assert resolve_date(value) is value

    def test_date_becomes_midnight(self) -> None:
        assert resolve_date(date(2021, 1, 1)) == datetime(2021, 1, 1)

    def test_date_text(self) -> None:
        assert resolve_date("2021-01-15") == datetime(2021, 1, 15)

    def test_datetime_text(self) -> None:
        assert resolve_date("2021-01-15 14:30:45") == datetime(2021, 1, 15, 14, 30, 45)

    def test_format_without_space_resets_time(self) -> None:
        """A format with no space always yields midnight."""
        resolved = resolve_date("2021-01-15T14:30", "Y-m-d\\TH:i")
        assert resolved == datetime(2021, 1, 15)

    def test_custom_format(self) -> None:
        assert resolve_date("15/01/2021", "d/m/Y") == datetime(2021, 1, 15)

    def test_unparsable_text(self) -> None:
        with pytest.raises(InvalidDateError, match="with format `Y-m-d`"):
            resolve_date("yesterday")

    def test_unparsable_datetime_text(self) -> None:
        with pytest.raises(InvalidDateError, match="with format `Y-m-d H:i:s`"):
            resolve_date("next tuesday")

    def test_text_not_matching_explicit_format(self) -> None:
        with pytest.raises(InvalidDateError, match="d/m/Y"):
            resolve_date("2021-01-15", "d/m/Y")

    def test_unsupported_type(self) -> None:
        with pytest.raises(InvalidDateError):
            resolve_date(20210115)


class TestParseDate:
    """Tests for parse_date."""

    def test_all_numeric_tokens(self) -> None:
        parsed = parse_date("2021-01-15 14:30:45.5", "Y-m-d H:i:s.u")
        assert parsed == datetime(2021, 1, 15, 14, 30, 45, 500000)

    def test_tokens_without_leading_zero(self) -> None:
        assert parse_date("5/1/2021 8", "j/n/Y G") == datetime(2021, 1, 5, 8)

    def test_two_digit_year(self) -> None:
        assert parse_date("21-01-15", "y-m-d") == datetime(2021, 1, 15)
        assert parse_date("99-01-15", "y-m-d") == datetime(1999, 1, 15)

    def test_offset_with_colon(self) -> None:
        parsed = parse_date("2021-01-15 10:00:00+02:00", "Y-m-d H:i:sP")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_offset_without_colon(self) -> None:
        parsed = parse_date("2021-01-15 10:00:00 -0530", "Y-m-d H:i:s O")
        assert parsed.tzinfo == timezone(-timedelta(hours=5, minutes=30))

    def test_escaped_token_is_literal(self) -> None:
        assert parse_date("2021Y01", "Y\\Ym") == datetime(2021, 1, 1)

    def test_missing_date_parts_default_to_first(self) -> None:
        assert parse_date("2021", "Y") == datetime(2021, 1, 1)

    def test_impossible_date(self) -> None:
        """Out-of-range fields are rejected, not rolled over."""
        with pytest.raises(InvalidDateError):
            parse_date("2021-02-30", "Y-m-d")

    def test_missing_year(self) -> None:
        with pytest.raises(InvalidDateError):
            parse_date("01-15", "m-d")

    def test_partial_match_is_rejected(self) -> None:
        with pytest.raises(InvalidDateError):
            parse_date("2021-01-15 extra", "Y-m-d")
