"""Type definitions for mdtrack."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

from .exceptions import ConfigError


class TrackerType(Enum):
    """Visualization a tracker renders as."""

    PROGRESS_BAR = "progress_bar"
    COUNTER = "counter"
    PERCENTAGE = "percentage"
    STREAK = "streak"
    LINE_PLOT = "line_plot"


class Period(Enum):
    """Time window used to select dated documents in folder scans."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ALL_TIME = "all-time"


class AggregateMethod(Enum):
    """How extracted values are reduced to one number."""

    COUNT = "count"
    SUM = "sum"
    AVERAGE = "average"
    MAX = "max"
    MIN = "min"


class LayoutMode(Enum):
    """Layout for multi-tracker blocks."""

    GRID = "grid"
    COMPACT_LIST = "compact-list"


class SourceKind(Enum):
    """Where a tracker reads its documents from."""

    CURRENT_FILE = "current-file"
    FILE = "file"
    FOLDER = "folder"


# Special value specs for table mode; anything else is literal text
VALUE_NUMERIC = "numeric"
VALUE_ANY = "any"


@dataclass(frozen=True)
class Source:
    """Parsed ``source`` directive.

    Attributes:
        kind: current-file, file or folder.
        path: Store-relative path for file and folder sources.
    """

    kind: SourceKind
    path: str | None = None

    @classmethod
    def parse(cls, text: str) -> "Source":
        """Parse ``current-file``, ``file:<path>`` or ``folder:<path>``.

        Args:
            text: Raw source value from the block.

        Returns:
            Parsed Source.

        Raises:
            ConfigError: If the value does not match the source grammar.
        """
        if text == "current-file":
            return cls(SourceKind.CURRENT_FILE)

        for kind in (SourceKind.FOLDER, SourceKind.FILE):
            prefix = f"{kind.value}:"
            if text.startswith(prefix):
                path = text[len(prefix) :].strip()
                if not path:
                    raise ConfigError(
                        f"{kind.value} source requires a path",
                        hint=f'Add a path after the colon, e.g. "{prefix}Daily Notes"',
                    )
                return cls(kind, path)

        raise ConfigError(
            f'Invalid source format: "{text}". '
            'Use "current-file", "folder:<path>", or "file:<path>"',
            hint="source must be current-file, or start with folder: or file:",
        )

    def __str__(self) -> str:
        if self.kind is SourceKind.CURRENT_FILE:
            return self.kind.value
        return f"{self.kind.value}:{self.path}"


@dataclass(frozen=True)
class BlockConfig:
    """Shared defaults declared at the top of a multi-tracker block."""

    layout: str | None = None
    grid_columns: int | None = None
    source: str | None = None
    table_tag: str | None = None

    @property
    def layout_mode(self) -> LayoutMode:
        """Resolved layout, grid unless compact-list was requested."""
        if self.layout == LayoutMode.COMPACT_LIST.value:
            return LayoutMode.COMPACT_LIST
        return LayoutMode.GRID


@dataclass(frozen=True)
class TrackerConfig:
    """Validated configuration for one tracker.

    Exactly one of table mode (key_column, value_column and value set) or
    pattern mode (pattern set) applies.
    """

    type: TrackerType
    source: Source
    # Unrecognised names are kept as raw strings
    aggregate: AggregateMethod | str = AggregateMethod.COUNT
    period: Period | str = Period.ALL_TIME
    table_tag: str | None = None
    key_column: str | None = None
    key: str | None = None
    value_column: str | None = None
    value: str | None = None
    pattern: str | None = None
    use_regex: bool = False
    goal: int | None = None
    goal_column: str | None = None
    label: str | None = None
    layout: str | None = None
    grid_columns: int | None = None

    @property
    def is_pattern_mode(self) -> bool:
        """Whether the tracker counts pattern matches instead of table cells."""
        return self.pattern is not None

    @property
    def mode(self) -> str:
        return "pattern" if self.is_pattern_mode else "table"


@dataclass(frozen=True)
class TimePoint:
    """One value of a folder scan, keyed by the date in its filename."""

    date: date
    value: float


@dataclass(frozen=True)
class DateRange:
    """Dates of the first and last scanned documents."""

    start: date | None = None
    end: date | None = None


@dataclass
class TrackerData:
    """Result of scanning documents for one tracker.

    Attributes:
        count: Aggregated value.
        goal: Static or table-derived goal, if any.
        files_scanned: Number of documents that contributed.
        date_range: Dates of the first and last scanned documents.
        streak: Consecutive days up to today with a positive value.
        numeric_sum: Aggregated value when value spec is numeric.
        time_series: One point per dated document, in filename order.
    """

    count: float = 0
    goal: float | None = None
    files_scanned: int = 0
    date_range: DateRange = field(default_factory=DateRange)
    streak: int = 0
    numeric_sum: float | None = None
    time_series: list[TimePoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-compatible primitives."""

        def _iso(value: date | None) -> str | None:
            return value.isoformat() if value else None

        return {
            "count": self.count,
            "goal": self.goal,
            "files_scanned": self.files_scanned,
            "date_range": {
                "start": _iso(self.date_range.start),
                "end": _iso(self.date_range.end),
            },
            "streak": self.streak,
            "numeric_sum": self.numeric_sum,
            "time_series": [
                {"date": point.date.isoformat(), "value": point.value}
                for point in self.time_series
            ],
        }


@dataclass(frozen=True)
class DocumentRef:
    """A markdown document listed by a store.

    Attributes:
        path: Store-relative path (e.g. ``Daily/2026-01-01.md``).
        basename: File name without extension.
    """

    path: str
    basename: str
