"""Tests for release history extraction and cadence."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pkgmaint.analyzers.history import (
    calculate_release_frequency,
    days_between,
    extract_release_history,
    parse_timestamp,
)
from pkgmaint.models.schemas import ReleaseEntry


def _utc(year: int, month: int, day: int, hour: int = 0) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


class TestParseTimestamp:
    def test_naive_timestamp_is_utc(self):
        assert parse_timestamp("2020-01-01T12:30:00") == _utc(2020, 1, 1, 12).replace(minute=30)

    def test_zulu_suffix(self):
        assert parse_timestamp("2020-01-01T00:00:00.123456Z").tzinfo is not None

    def test_date_only(self):
        assert parse_timestamp("2020-01-01") == _utc(2020, 1, 1)

    def test_invalid(self):
        assert parse_timestamp("yesterday") is None
        assert parse_timestamp(None) is None


class TestDaysBetween:
    def test_rounds_half_up(self):
        assert days_between(_utc(2020, 1, 2, 12), _utc(2020, 1, 1)) == 2

    def test_rounds_down_below_half(self):
        assert days_between(_utc(2020, 1, 2, 11), _utc(2020, 1, 1)) == 1


class TestExtractReleaseHistory:
    def test_empty_file_list_is_dropped(self):
        history = extract_release_history({
            "1.0": [{"upload_time": "2020-01-01"}],
            "1.1": [],
        })

        assert history == [ReleaseEntry(version="1.0", date=_utc(2020, 1, 1))]

    def test_sorted_newest_first(self):
        history = extract_release_history({
            "1.0": [{"upload_time": "2020-01-01T00:00:00"}],
            "2.0": [{"upload_time": "2022-01-01T00:00:00"}],
            "1.5": [{"upload_time": "2021-01-01T00:00:00"}],
        })

        assert [entry.version for entry in history] == ["2.0", "1.5", "1.0"]

    def test_first_file_dates_the_release(self):
        history = extract_release_history({
            "1.0": [
                {"upload_time": "2020-03-01T00:00:00"},
                {"upload_time": "2020-01-01T00:00:00"},
            ],
        })

        assert history[0].date == _utc(2020, 3, 1)

    def test_iso_8601_fallback(self):
        history = extract_release_history({
            "1.0": [{"upload_time_iso_8601": "2020-01-01T00:00:00.000000Z"}],
        })

        assert history[0].date == _utc(2020, 1, 1)

    def test_unparsable_upload_time_is_skipped(self):
        history = extract_release_history({
            "1.0": [{"upload_time": "not a date"}],
            "1.1": [{"upload_time": "2020-01-01T00:00:00"}],
        })

        assert [entry.version for entry in history] == ["1.1"]

    def test_missing_mapping(self):
        assert extract_release_history(None) == []
        assert extract_release_history({}) == []


class TestCalculateReleaseFrequency:
    def _history(self, *dates: datetime) -> list[ReleaseEntry]:
        return [ReleaseEntry(version=str(i), date=date) for i, date in enumerate(dates)]

    def test_average_gap(self):
        history = self._history(_utc(2024, 1, 1), _utc(2023, 11, 1), _utc(2023, 9, 1))

        assert calculate_release_frequency(history) == 61

    def test_needs_two_releases(self):
        assert calculate_release_frequency([]) is None
        assert calculate_release_frequency(self._history(_utc(2024, 1, 1))) is None

    def test_only_recent_window_counts(self):
        newest = _utc(2024, 1, 1)
        recent = [newest - timedelta(days=7 * i) for i in range(10)]
        ancient = [_utc(2000, 1, 1)]

        assert calculate_release_frequency(self._history(*recent, *ancient)) == 7

    def test_same_day_releases(self):
        history = self._history(_utc(2024, 1, 1), _utc(2024, 1, 1))

        assert calculate_release_frequency(history) == 0
