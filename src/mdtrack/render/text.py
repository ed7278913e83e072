"""Plain-text rendering of tracker results.

Dispatches on tracker type and otherwise treats :class:`TrackerData` as
opaque. Output is meant for terminals: one short block of lines per
tracker.
"""

from __future__ import annotations

from typing import Callable

from mdtrack.core.exceptions import ConfigError, MdTrackError
from mdtrack.core.types import SourceKind, TrackerConfig, TrackerData, TrackerType
from mdtrack.services.tracker import BlockResult

BAR_WIDTH = 20
_SPARK_CHARS = "▁▂▃▄▅▆▇█"


def format_number(value: float | None) -> str:
    """Format a value without a trailing .0 for whole numbers."""
    if value is None:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _render_progress_bar(data: TrackerData) -> list[str]:
    percentage = min(data.count / data.goal * 100, 100) if data.goal else 100
    filled = round(BAR_WIDTH * max(percentage, 0) / 100)
    bar = "█" * filled + "░" * (BAR_WIDTH - filled)
    if data.goal:
        text = f"{format_number(data.count)} / {format_number(data.goal)}"
    else:
        text = format_number(data.count)
    suffix = " ✓" if percentage >= 100 else ""
    return [f"[{bar}] {text}{suffix}"]


def _render_counter(data: TrackerData) -> list[str]:
    lines = [format_number(data.count)]
    if data.goal:
        lines.append(f"Goal: {format_number(data.goal)}")
    return lines


def _render_percentage(data: TrackerData) -> list[str]:
    percentage = round(data.count / data.goal * 100) if data.goal else 0
    lines = [f"{percentage}%"]
    if data.goal:
        lines.append(f"{format_number(data.count)} / {format_number(data.goal)}")
    return lines


def _render_streak(data: TrackerData) -> list[str]:
    # Single-document scans have no streak
    if data.files_scanned > 1:
        return [f"🔥 {data.streak} day streak"]
    return [f"✓ {format_number(data.count)} completed"]


def _render_line_plot(data: TrackerData) -> list[str]:
    if not data.time_series:
        return ["No data to plot"]

    values = [point.value for point in data.time_series]
    top = max(max(values), data.goal or 0) or 1
    spark = "".join(
        _SPARK_CHARS[min(int(max(v, 0) / top * (len(_SPARK_CHARS) - 1)), len(_SPARK_CHARS) - 1)]
        for v in values
    )
    first, last = data.time_series[0].date, data.time_series[-1].date
    lines = [spark, f"{first.isoformat()} → {last.isoformat()}  max {format_number(max(values))}"]
    if data.goal:
        lines.append(f"Goal: {format_number(data.goal)}")
    return lines


_RENDERERS: dict[TrackerType, Callable[[TrackerData], list[str]]] = {
    TrackerType.PROGRESS_BAR: _render_progress_bar,
    TrackerType.COUNTER: _render_counter,
    TrackerType.PERCENTAGE: _render_percentage,
    TrackerType.STREAK: _render_streak,
    TrackerType.LINE_PLOT: _render_line_plot,
}


def _footer(config: TrackerConfig, data: TrackerData) -> str:
    items = []
    if config.source.kind is SourceKind.FOLDER and data.files_scanned > 0:
        items.append(f"{data.files_scanned} files scanned")
    if data.date_range.start and data.date_range.end:
        items.append(
            f"{data.date_range.start.isoformat()} - {data.date_range.end.isoformat()}"
        )
    return " • ".join(items)


def render_tracker(config: TrackerConfig, data: TrackerData) -> str:
    """Render one tracker as text.

    Args:
        config: Tracker config (type, label and source are used).
        data: Computed tracker data.

    Returns:
        Multi-line text.
    """
    lines = []
    if config.label:
        lines.append(config.label)
    lines.extend(_RENDERERS[config.type](data))
    if footer := _footer(config, data):
        lines.append(footer)
    return "\n".join(lines)


def render_error(error: MdTrackError) -> str:
    """Render an error, with hint and example for configuration errors."""
    lines = [f"Error: {error}"]
    if isinstance(error, ConfigError):
        if error.hint:
            lines.append(f"Hint: {error.hint}")
        if error.example:
            lines.append("Example:")
            lines.extend(f"    {line}" for line in error.example.split("\n"))
    return "\n".join(lines)


def render_block(result: BlockResult) -> str:
    """Render every tracker of a block, separated by blank lines."""
    parts = []
    for tracker in result.results:
        if tracker.error is not None:
            parts.append(render_error(tracker.error))
        elif tracker.config is not None and tracker.data is not None:
            parts.append(render_tracker(tracker.config, tracker.data))
    return "\n\n".join(parts)
