"""Tests for plain-text rendering."""

from datetime import date

import pytest

from mdtrack.core.exceptions import ConfigError, DocumentReadError
from mdtrack.core.types import (
    DateRange,
    Source,
    TimePoint,
    TrackerConfig,
    TrackerData,
    TrackerType,
)
from mdtrack.render import format_number, render_block, render_error, render_tracker
from mdtrack.services import BlockResult, TrackerResult


def _config(tracker_type: TrackerType, source: str = "current-file", **kwargs) -> TrackerConfig:
    return TrackerConfig(type=tracker_type, source=Source.parse(source), pattern="x", **kwargs)


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        "value, expected",
        [(2.0, "2"), (2, "2"), (2.5, "2.5"), (1 / 3, "0.33"), (None, "-")],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestRenderTracker:
    """Tests for render_tracker."""

    def test_progress_bar(self):
        """Progress bars show filled share and count over goal."""
        text = render_tracker(_config(TrackerType.PROGRESS_BAR), TrackerData(count=2, goal=5))
        assert text == "[" + "█" * 8 + "░" * 12 + "] 2 / 5"

    def test_progress_bar_complete(self):
        """Reaching the goal adds a check mark and caps the bar."""
        text = render_tracker(_config(TrackerType.PROGRESS_BAR), TrackerData(count=7, goal=5))
        assert text == "[" + "█" * 20 + "] 7 / 5 ✓"

    def test_counter_with_label_and_goal(self):
        """Counters show the label, count and goal."""
        config = _config(TrackerType.COUNTER, label="Runs")
        assert render_tracker(config, TrackerData(count=3, goal=4)) == "Runs\n3\nGoal: 4"

    def test_percentage(self):
        """Percentages are rounded."""
        text = render_tracker(_config(TrackerType.PERCENTAGE), TrackerData(count=2, goal=3))
        assert text.split("\n") == ["67%", "2 / 3"]

    def test_percentage_without_goal(self):
        assert render_tracker(_config(TrackerType.PERCENTAGE), TrackerData(count=2)) == "0%"

    def test_streak_for_folders(self):
        """Folder streaks show the day count and a footer."""
        data = TrackerData(
            count=5,
            files_scanned=5,
            streak=3,
            date_range=DateRange(date(2026, 1, 11), date(2026, 1, 15)),
        )
        text = render_tracker(_config(TrackerType.STREAK, "folder:Daily"), data)
        assert text.split("\n") == [
            "🔥 3 day streak",
            "5 files scanned • 2026-01-11 - 2026-01-15",
        ]

    def test_streak_for_single_document(self):
        """A single document shows completions instead of a streak."""
        text = render_tracker(_config(TrackerType.STREAK), TrackerData(count=2, files_scanned=1))
        assert text == "✓ 2 completed"

    def test_line_plot(self):
        """Line plots draw a sparkline over the time series."""
        data = TrackerData(
            time_series=[
                TimePoint(date(2026, 1, 14), 0),
                TimePoint(date(2026, 1, 15), 4),
            ]
        )
        lines = render_tracker(_config(TrackerType.LINE_PLOT), data).split("\n")
        assert lines[0] == "▁█"
        assert lines[1] == "2026-01-14 → 2026-01-15  max 4"

    def test_line_plot_without_data(self):
        assert render_tracker(_config(TrackerType.LINE_PLOT), TrackerData()) == "No data to plot"


class TestRenderErrors:
    """Tests for error rendering."""

    def test_config_error_with_hint_and_example(self):
        """Configuration errors show the hint and an indented example."""
        error = ConfigError("Missing required field: type", hint="Add a type", example="a: 1\nb: 2")
        assert render_error(error) == (
            "Error: Missing required field: type\nHint: Add a type\nExample:\n    a: 1\n    b: 2"
        )

    def test_other_errors(self):
        """Other errors show the message only."""
        error = DocumentReadError("a.md", "Permission denied")
        assert render_error(error) == "Error: Failed to read a.md: Permission denied"

    def test_render_block_mixes_results_and_errors(self):
        """Blocks render each tracker, errors in place."""
        result = BlockResult(
            results=[
                TrackerResult(index=0, config=_config(TrackerType.COUNTER), data=TrackerData(count=1)),
                TrackerResult(index=1, error=ConfigError("bad")),
            ]
        )
        assert render_block(result) == "1\n\nError: bad"
