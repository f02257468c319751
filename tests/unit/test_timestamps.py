#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_timestamps.py
"""Unit tests for timestamp parsing and formatting.

Tests cover:
- Active and inactive timestamps with and without times
- Same-day time spans and date ranges
- Repeaters and warning delays
- Formatting back to org syntax
- Conversion to date and datetime values

"""

import datetime

import pytest

from orgast.ast.objects import Timestamp
from orgast.parsers.timestamps import format_timestamp, parse_repeater, parse_timestamp, parse_warning


@pytest.mark.unit
class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_active_date(self) -> None:
        """Test parsing an active date."""
        ts = parse_timestamp("<2024-01-15 Mon>")
        assert ts is not None
        assert ts.timestamp_type == "active"
        assert (ts.year_start, ts.month_start, ts.day_start) == (2024, 1, 15)
        assert ts.hour_start is None
        assert ts.is_active

    def test_inactive_date_with_time(self) -> None:
        """Test parsing an inactive timestamp with a time of day."""
        ts = parse_timestamp("[2024-01-15 Mon 10:30]")
        assert ts is not None
        assert ts.timestamp_type == "inactive"
        assert (ts.hour_start, ts.minute_start) == (10, 30)
        assert not ts.is_active

    def test_day_name_is_optional(self) -> None:
        """Test that the day name may be omitted."""
        ts = parse_timestamp("<2024-03-01>")
        assert ts is not None
        assert ts.day_start == 1

    def test_time_span(self) -> None:
        """Test a same-day time span."""
        ts = parse_timestamp("<2024-01-15 Mon 10:00-12:30>")
        assert ts is not None
        assert (ts.hour_start, ts.minute_start) == (10, 0)
        assert (ts.hour_end, ts.minute_end) == (12, 30)
        assert ts.year_end is None

    def test_repeater_and_warning(self) -> None:
        """Test repeater and warning suffixes."""
        ts = parse_timestamp("<2024-01-15 Mon .+1w -2d>")
        assert ts is not None
        assert (ts.repeater_type, ts.repeater_value, ts.repeater_unit) == (".+", 1, "w")
        assert (ts.warning_type, ts.warning_value, ts.warning_unit) == ("-", 2, "d")

    def test_date_range(self) -> None:
        """Test a two-date range."""
        ts = parse_timestamp("<2024-01-15 Mon>--<2024-01-17 Wed>")
        assert ts is not None
        assert ts.timestamp_type == "active-range"
        assert (ts.year_end, ts.month_end, ts.day_end) == (2024, 1, 17)
        assert ts.raw_value == "<2024-01-15 Mon>--<2024-01-17 Wed>"

    def test_inactive_range(self) -> None:
        """Test an inactive range keeps end times."""
        ts = parse_timestamp("[2024-01-15 Mon 09:00]--[2024-01-16 Tue 11:15]")
        assert ts is not None
        assert ts.timestamp_type == "inactive-range"
        assert (ts.hour_end, ts.minute_end) == (11, 15)

    def test_mixed_range_is_rejected(self) -> None:
        """Test that an active start with an inactive end is not a range."""
        assert parse_timestamp("<2024-01-15 Mon>--[2024-01-17 Wed]") is None

    def test_offset_sets_range(self) -> None:
        """Test that the offset positions the timestamp in the document."""
        ts = parse_timestamp("<2024-01-15 Mon>", offset=10)
        assert ts is not None
        assert (ts.range.start, ts.range.end) == (10, 26)

    @pytest.mark.parametrize(
        "token",
        ["", "<>", "<not a date>", "2024-01-15", "<2024-01-15 Mon]", "[2024-1-5]"],
    )
    def test_invalid_tokens(self, token: str) -> None:
        """Test that malformed tokens yield None."""
        assert parse_timestamp(token) is None


@pytest.mark.unit
class TestRepeaterAndWarning:
    """Tests for the suffix parsers."""

    @pytest.mark.parametrize(
        "text,expected",
        [("+1w", ("+", 1, "w")), ("++2d", ("++", 2, "d")), (".+3m", (".+", 3, "m"))],
    )
    def test_repeaters(self, text: str, expected: tuple) -> None:
        """Test every repeater kind."""
        assert parse_repeater(text) == expected

    def test_warnings(self) -> None:
        """Test single and double dash warnings."""
        assert parse_warning("-3d") == ("-", 3, "d")
        assert parse_warning("--1w") == ("--", 1, "w")

    def test_invalid_suffixes(self) -> None:
        """Test that unknown units are rejected."""
        assert parse_repeater("+1x") is None
        assert parse_warning("3d") is None


@pytest.mark.unit
class TestFormatTimestamp:
    """Tests for format_timestamp."""

    def test_prefers_raw_value(self) -> None:
        """Test that the literal as written is reproduced."""
        ts = parse_timestamp("<2024-01-15  Mon>")
        assert ts is not None
        assert format_timestamp(ts) == "<2024-01-15  Mon>"

    def test_rebuilds_from_fields(self) -> None:
        """Test formatting a timestamp built from fields."""
        ts = Timestamp(
            timestamp_type="active", year_start=2024, month_start=1, day_start=15, hour_start=9, minute_start=5
        )
        assert format_timestamp(ts) == "<2024-01-15 Mon 09:05>"

    def test_rebuilds_suffixes(self) -> None:
        """Test that repeaters and warnings are written after the time."""
        ts = parse_timestamp("<2024-01-15 Mon 10:00-11:00 +1w -1d>")
        assert ts is not None
        assert format_timestamp(ts, prefer_raw=False) == "<2024-01-15 Mon 10:00-11:00 +1w -1d>"

    def test_rebuilds_range(self) -> None:
        """Test formatting a date range without its raw value."""
        ts = parse_timestamp("[2024-01-15 Mon]--[2024-01-17 Wed]")
        assert ts is not None
        assert format_timestamp(ts, prefer_raw=False) == "[2024-01-15 Mon]--[2024-01-17 Wed]"

    def test_invalid_calendar_date_omits_day_name(self) -> None:
        """Test that a date with no weekday is written without a day name."""
        ts = Timestamp(timestamp_type="inactive", year_start=2024, month_start=2, day_start=31)
        assert format_timestamp(ts) == "[2024-02-31]"


@pytest.mark.unit
class TestTimestampDates:
    """Tests for Timestamp.start_date and end_date."""

    def test_start_date_without_time(self) -> None:
        """Test that a date-only timestamp yields a date."""
        ts = parse_timestamp("<2024-01-15 Mon>")
        assert ts is not None
        assert ts.start_date() == datetime.date(2024, 1, 15)
        assert ts.end_date() is None

    def test_start_date_with_time(self) -> None:
        """Test that a timed timestamp yields a datetime."""
        ts = parse_timestamp("<2024-01-15 Mon 08:45>")
        assert ts is not None
        assert ts.start_date() == datetime.datetime(2024, 1, 15, 8, 45)

    def test_end_date_of_time_span(self) -> None:
        """Test that a time span ends on the same day."""
        ts = parse_timestamp("<2024-01-15 Mon 10:00-12:00>")
        assert ts is not None
        assert ts.end_date() == datetime.datetime(2024, 1, 15, 12, 0)

    def test_end_date_of_range(self) -> None:
        """Test the end of a date range."""
        ts = parse_timestamp("<2024-01-15 Mon>--<2024-01-20 Sat>")
        assert ts is not None
        assert ts.end_date() == datetime.date(2024, 1, 20)
