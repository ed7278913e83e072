"""Tests for filename dates, period filtering and streaks."""

from datetime import date, datetime, timedelta

import pytest

from mdtrack.core.types import DocumentRef, Period
from mdtrack.scanning import (
    calculate_streak,
    extract_date_from_filename,
    filter_files_by_period,
    start_of_period,
)

# Thursday
TODAY = date(2026, 1, 15)


def _ref(basename: str) -> DocumentRef:
    return DocumentRef(path=f"Daily/{basename}.md", basename=basename)


class TestExtractDateFromFilename:
    """Tests for extract_date_from_filename."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("2026-01-15", date(2026, 1, 15)),
            ("Daily 2026-01-15 notes", date(2026, 1, 15)),
            ("20260115", date(2026, 1, 15)),
            ("15-01-2026", date(2026, 1, 15)),
        ],
    )
    def test_supported_formats(self, name, expected):
        """ISO, compact and day-first dates are recognized."""
        assert extract_date_from_filename(name) == expected

    def test_no_date(self):
        """Names without a date return None."""
        assert extract_date_from_filename("01") is None
        assert extract_date_from_filename("Meeting notes") is None

    def test_invalid_calendar_date_rejected(self):
        """Matches that are not real dates are rejected."""
        assert extract_date_from_filename("2026-13-40") is None
        assert extract_date_from_filename("2026-02-30") is None

    def test_falls_through_to_next_format(self):
        """An invalid ISO-looking match lets later formats try."""
        assert extract_date_from_filename("9999-99-99 20260115") == date(2026, 1, 15)


class TestStartOfPeriod:
    """Tests for start_of_period."""

    def test_daily(self):
        assert start_of_period(Period.DAILY, TODAY) == TODAY

    def test_weekly_starts_sunday(self):
        """Weeks start on Sunday by default."""
        assert start_of_period(Period.WEEKLY, TODAY) == date(2026, 1, 11)

    def test_weekly_monday_start(self):
        """week_start selects another first weekday."""
        assert start_of_period(Period.WEEKLY, TODAY, week_start=0) == date(2026, 1, 12)

    def test_weekly_on_start_day(self):
        """The start day itself begins the week."""
        assert start_of_period(Period.WEEKLY, date(2026, 1, 11)) == date(2026, 1, 11)

    def test_monthly_and_yearly(self):
        assert start_of_period(Period.MONTHLY, TODAY) == date(2026, 1, 1)
        assert start_of_period(Period.YEARLY, date(2026, 6, 3)) == date(2026, 1, 1)

    def test_all_time(self):
        assert start_of_period(Period.ALL_TIME, TODAY) == date.min


class TestFilterFilesByPeriod:
    """Tests for filter_files_by_period."""

    def test_all_time_keeps_undated_files(self):
        """all-time keeps every file, with or without a date."""
        files = [_ref("01"), _ref("2026-01-01")]
        assert filter_files_by_period(files, Period.ALL_TIME, today=TODAY) == files

    def test_other_periods_drop_undated_files(self):
        """Any other period keeps only dated files in range."""
        files = [_ref("01"), _ref("2026-01-01")]
        assert filter_files_by_period(files, Period.MONTHLY, today=TODAY) == [
            _ref("2026-01-01")
        ]

    def test_unknown_period_keeps_dated_files(self):
        """An unknown period name keeps every dated file and drops undated ones."""
        files = [_ref("01"), _ref("1999-06-30"), _ref("2026-01-01")]
        assert filter_files_by_period(files, "hourly", today=TODAY) == files[1:]

    def test_weekly(self):
        """Weekly keeps files from the start of the week on."""
        files = [_ref("2026-01-10"), _ref("2026-01-11"), _ref("2026-01-15")]
        assert filter_files_by_period(files, Period.WEEKLY, today=TODAY) == files[1:]

    def test_daily(self):
        files = [_ref("2026-01-14"), _ref("2026-01-15")]
        assert filter_files_by_period(files, Period.DAILY, today=TODAY) == files[1:]

    def test_yearly_excludes_previous_year(self):
        files = [_ref("2025-12-31"), _ref("2026-01-01")]
        assert filter_files_by_period(files, Period.YEARLY, today=TODAY) == files[1:]

    def test_preserves_order(self):
        """Filtering keeps the input order."""
        files = [_ref("2026-01-15"), _ref("2026-01-02")]
        assert filter_files_by_period(files, Period.MONTHLY, today=TODAY) == files


class TestCalculateStreak:
    """Tests for calculate_streak."""

    def _days(self, *offsets):
        return [TODAY - timedelta(days=o) for o in offsets]

    def test_consecutive_days_ending_today(self):
        """Three days up to today make a streak of 3."""
        assert calculate_streak(self._days(0, 1, 2), today=TODAY) == 3

    def test_missing_today_is_zero(self):
        """A streak must include today."""
        assert calculate_streak(self._days(1, 2), today=TODAY) == 0

    def test_gap_stops_streak(self):
        """Days before a gap do not count."""
        assert calculate_streak(self._days(0, 1, 3, 4), today=TODAY) == 2

    def test_duplicates_ignored(self):
        """The same day twice counts once."""
        assert calculate_streak(self._days(0, 0, 1), today=TODAY) == 2

    def test_unsorted_input(self):
        """Input order does not matter."""
        assert calculate_streak(self._days(2, 0, 1), today=TODAY) == 3

    def test_future_dates_skipped(self):
        """Dates after today do not break the streak."""
        assert calculate_streak(self._days(-1, 0, 1), today=TODAY) == 2

    def test_datetimes_normalized_to_days(self):
        """Datetimes count as their calendar day."""
        dates = [datetime(2026, 1, 15, 8, 30), datetime(2026, 1, 15, 21), date(2026, 1, 14)]
        assert calculate_streak(dates, today=TODAY) == 2

    def test_empty(self):
        assert calculate_streak([], today=TODAY) == 0
