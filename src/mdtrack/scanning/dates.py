"""Filename dates, period filtering and streaks for folder scans."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Iterable, Sequence, TypeVar

from mdtrack.core.types import DocumentRef, Period

# Monday is 0; weeks start on Sunday unless configured otherwise
SUNDAY = 6

# Tried in order; the first match that parses strictly wins
_FILENAME_DATE_FORMATS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\d{4}-\d{2}-\d{2}"), "%Y-%m-%d"),
    (re.compile(r"\d{8}"), "%Y%m%d"),
    (re.compile(r"\d{2}-\d{2}-\d{4}"), "%d-%m-%Y"),
)

RefT = TypeVar("RefT", bound=DocumentRef)


def extract_date_from_filename(name: str) -> date | None:
    """Extract a calendar date from a filename.

    Supports ``YYYY-MM-DD``, ``YYYYMMDD`` and ``DD-MM-YYYY`` anywhere in the
    name. A match that is not a real calendar date (e.g. month 13) is
    rejected and the next format is tried.

    Args:
        name: File name or basename.

    Returns:
        The date, or None if no format matches.
    """
    for pattern, fmt in _FILENAME_DATE_FORMATS:
        match = pattern.search(name)
        if not match:
            continue
        try:
            return datetime.strptime(match.group(), fmt).date()
        except ValueError:
            continue
    return None


def start_of_period(period: Period | str, today: date, week_start: int = SUNDAY) -> date:
    """Return the first day of the period containing today.

    Args:
        period: Time window.
        today: Reference day.
        week_start: Weekday number weeks start on (Monday is 0).

    Returns:
        First day of the period; date.min for all-time and unknown periods.
    """
    if period is Period.DAILY:
        return today
    if period is Period.WEEKLY:
        return today - timedelta(days=(today.weekday() - week_start) % 7)
    if period is Period.MONTHLY:
        return today.replace(day=1)
    if period is Period.YEARLY:
        return today.replace(month=1, day=1)
    return date.min


def filter_files_by_period(
    files: Sequence[RefT],
    period: Period | str,
    today: date | None = None,
    week_start: int = SUNDAY,
) -> list[RefT]:
    """Keep the files that fall inside a period.

    ``all-time`` keeps every file, dated or not. Any other period keeps only
    files with a date in their name on or after the start of the period. An
    unknown period name starts at date.min, so it keeps every dated file.

    Args:
        files: Documents to filter.
        period: Time window.
        today: Reference day (defaults to the current local date).
        week_start: Weekday number weeks start on (Monday is 0).

    Returns:
        Filtered documents in their original order.
    """
    if period is Period.ALL_TIME:
        return list(files)

    start = start_of_period(period, today or date.today(), week_start)
    kept = []
    for ref in files:
        file_date = extract_date_from_filename(ref.basename)
        if file_date is not None and file_date >= start:
            kept.append(ref)
    return kept


def calculate_streak(dates: Iterable[date], today: date | None = None) -> int:
    """Count consecutive days, ending today, that appear in dates.

    Missing today means a streak of 0, even if every earlier day is present.

    Args:
        dates: Days with a positive value; datetimes count as their day
            and duplicates are ignored.
        today: Reference day (defaults to the current local date).

    Returns:
        Length of the current streak.
    """
    expected = today or date.today()
    streak = 0

    days = {d.date() if isinstance(d, datetime) else d for d in dates}

    for day in sorted(days, reverse=True):
        if day == expected:
            streak += 1
            expected -= timedelta(days=1)
        elif day < expected:
            break

    return streak
