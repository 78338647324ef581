"""Date/time parsing tests for the accepted input formats."""

from datetime import date, datetime, timedelta, timezone

import pytest

from shifts_logger.utils.datetimes import format_datetime, parse_date, parse_datetime


class TestParseDatetime:
    @pytest.mark.parametrize(
        "text",
        ["15-01-2025 09:30", "15/01/2025 09:30", "15-01-2025 9:30", "2025-01-15T09:30:00", "2025-01-15 09:30"],
    )
    def test_accepted_formats(self, text):
        assert parse_datetime(text) == datetime(2025, 1, 15, 9, 30)

    def test_utc_suffix_is_dropped(self):
        assert parse_datetime("2025-01-15T09:30:00Z") == datetime(2025, 1, 15, 9, 30)

    def test_offset_converted_to_utc(self):
        assert parse_datetime("2025-01-15T10:30:00+01:00") == datetime(2025, 1, 15, 9, 30)

    def test_aware_datetime_made_naive(self):
        aware = datetime(2025, 1, 15, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert parse_datetime(aware) == datetime(2025, 1, 15, 10, 0)

    def test_garbage_rejected(self):
        with pytest.raises(ValueError):
            parse_datetime("next tuesday")

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            parse_datetime("  ")


class TestParseDate:
    @pytest.mark.parametrize("text", ["15-01-2025", "15/01/2025", "2025-01-15"])
    def test_accepted_formats(self, text):
        assert parse_date(text) == date(2025, 1, 15)

    def test_timestamp_keeps_date_part(self):
        assert parse_date("15-01-2025 23:00") == date(2025, 1, 15)


def test_format_datetime():
    assert format_datetime(datetime(2025, 1, 5, 7, 5)) == "05-01-2025 07:05"
