"""Unit tests for integer encodings of time values."""

from __future__ import annotations

from datetime import datetime

import pytest

from mysqltime.encoding import date_to_uint64, datetime_to_uint64, time_to_uint64
from mysqltime.value import ZERO_TIME, TimeValue


class TestEncoding:
    """Tests for date_to_uint64, time_to_uint64 and datetime_to_uint64."""

    @pytest.mark.parametrize(
        ("t", "date_value", "time_value", "datetime_value"),
        [
            (TimeValue(2024, 2, 29, 13, 5, 9), 20240229, 130509, 20240229130509),
            (TimeValue(2006, 12, 0), 20061200, 0, 20061200000000),
            (TimeValue(9999, 12, 31, 23, 59, 59, 999999), 99991231, 235959, 99991231235959),
            (ZERO_TIME, 0, 0, 0),
        ],
        ids=["plain", "zero_day", "maximum", "zero_date"],
    )
    def test_encode(self, t: TimeValue, date_value: int, time_value: int, datetime_value: int) -> None:
        """Test YYYYMMDD, HHMMSS and YYYYMMDDHHMMSS encodings; microseconds are dropped."""
        assert date_to_uint64(t) == date_value
        assert time_to_uint64(t) == time_value
        assert datetime_to_uint64(t) == datetime_value

    def test_matches_digit_concatenation(self) -> None:
        """Test encoding equals concatenated zero-padded digits for valid fields."""
        samples = [
            TimeValue(year, month, day, hour, minute, second)
            for year in (1, 999, 2024, 9999)
            for month in (1, 9, 12)
            for day in (1, 15, 28)
            for hour, minute, second in ((0, 0, 0), (7, 8, 9), (23, 59, 59))
        ]
        for t in samples:
            digits = f"{t.year:04d}{t.month:02d}{t.day:02d}{t.hour:02d}{t.minute:02d}{t.second:02d}"
            assert datetime_to_uint64(t) == int(digits)

    def test_accepts_datetime(self) -> None:
        """Test any time-like value can be encoded."""
        assert datetime_to_uint64(datetime(2001, 2, 3, 4, 5, 6)) == 20010203040506
