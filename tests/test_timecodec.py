"""Unit tests for the timestamp codec."""

from datetime import datetime, timedelta, timezone

import pytest

from store.exceptions import MalformedTimestampError, StoreException
from store.timecodec import format_time, parse_time


class TestFormatTime:
    """Test rendering datetimes to stored text."""

    def test_format_utc(self):
        dt = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert format_time(dt) == "2024-01-01T00:00:00Z"

    def test_format_normalizes_offset_to_utc(self):
        tz = timezone(timedelta(hours=5, minutes=30))
        dt = datetime(2024, 1, 1, 3, 15, 0, tzinfo=tz)
        assert format_time(dt) == "2023-12-31T21:45:00Z"

    def test_format_naive_is_treated_as_utc(self):
        assert format_time(datetime(2024, 3, 9, 8, 7, 6)) == "2024-03-09T08:07:06Z"

    def test_format_drops_microseconds(self):
        dt = datetime(2024, 1, 1, 0, 0, 0, 999999, tzinfo=timezone.utc)
        assert format_time(dt) == "2024-01-01T00:00:00Z"

    def test_format_pads_small_years(self):
        dt = datetime(5, 1, 1, tzinfo=timezone.utc)
        assert format_time(dt) == "0005-01-01T00:00:00Z"

    def test_formatted_strings_sort_chronologically(self):
        times = [
            datetime(2099, 1, 1, tzinfo=timezone.utc),
            datetime(1970, 1, 1, tzinfo=timezone.utc),
            datetime(2024, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
            datetime(2024, 2, 1, tzinfo=timezone(timedelta(hours=-8))),
        ]
        assert sorted(format_time(t) for t in times) == [format_time(t) for t in sorted(times)]


class TestParseTime:
    """Test parsing stored text back to datetimes."""

    def test_parse_returns_aware_utc(self):
        parsed = parse_time("2024-01-01T00:00:00Z")
        assert parsed == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert parsed.tzinfo == timezone.utc

    @pytest.mark.parametrize("value", [
        "",
        "not a time",
        "2024-01-01",
        "2024-01-01 00:00:00Z",
        "2024-01-01T00:00:00",
        "2024-01-01T00:00:00+00:00",
        "2024-01-01T00:00:00.5Z",
        "2024-13-01T00:00:00Z",
        "2024-02-30T00:00:00Z",
    ])
    def test_parse_rejects_malformed(self, value):
        with pytest.raises(MalformedTimestampError):
            parse_time(value)

    def test_parse_rejects_non_string(self):
        with pytest.raises(MalformedTimestampError):
            parse_time(None)

    def test_malformed_timestamp_is_store_and_value_error(self):
        with pytest.raises(StoreException):
            parse_time("garbage")
        with pytest.raises(ValueError):
            parse_time("garbage")


class TestRoundTrip:
    """Test parse_time(format_time(t)) == t truncated to seconds."""

    @pytest.mark.parametrize("dt", [
        datetime(1970, 1, 1, tzinfo=timezone.utc),
        datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
        datetime(2024, 7, 4, 18, 30, 15, 123456, tzinfo=timezone.utc),
        datetime(2024, 7, 4, 18, 30, 15, tzinfo=timezone(timedelta(hours=-7))),
        datetime(2000, 2, 29, 1, 2, 3, tzinfo=timezone(timedelta(hours=14))),
    ])
    def test_round_trip(self, dt):
        assert parse_time(format_time(dt)) == dt.replace(microsecond=0)
