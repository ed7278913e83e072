"""Extract values from markdown tables.

Tables are scanned in a single forward pass. Each table moves through a
small state machine driven by whether the current line is a table line:

    OUTSIDE --first table line--> HEADER --(separator)--> BODY
        \\--tag not in lookback--> SKIPPED

Any non-table line returns the scanner to OUTSIDE and forgets the
current table's header and column positions.
"""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from mdtrack.core.types import VALUE_ANY, VALUE_NUMERIC, TrackerConfig

# Number of lines (current line included) searched for a table tag
TAG_LOOKBACK_LINES = 5

_NUMBER_PATTERN = re.compile(r"-?\d+\.?\d*")
_LEADING_FLOAT_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def table_tag_marker(tag: str) -> str:
    """Return the HTML comment that tags the table below it."""
    return f"<!-- table-tag: {tag} -->"


def is_table_line(line: str) -> bool:
    return line.strip().startswith("|")


def split_cells(line: str) -> list[str]:
    """Split a table line into trimmed cells.

    Only the empty pieces produced by a leading or trailing pipe are
    dropped; interior empty cells are kept so column indices stay aligned.

    Example:
        >>> split_cells("| A |  | 5 |")
        ['A', '', '5']
    """
    cells = [c.strip() for c in line.split("|")]
    if cells and cells[0] == "":
        cells.pop(0)
    if cells and cells[-1] == "":
        cells.pop()
    return cells


def extract_value(cell: str, value_spec: str) -> float | None:
    """Interpret a value cell according to the value spec.

    Args:
        cell: Trimmed cell text.
        value_spec: "numeric", "any", or literal text to look for.

    Returns:
        The numeric value, 1 for a match, or None when the cell does not count.
    """
    if not cell:
        return None

    if value_spec == VALUE_NUMERIC:
        match = _NUMBER_PATTERN.search(cell)
        return float(match.group()) if match else None

    if value_spec == VALUE_ANY:
        return 1

    return 1 if value_spec in cell else None


def parse_float(text: str) -> float | None:
    """Parse the leading number of a cell, None when it has none."""
    match = _LEADING_FLOAT_PATTERN.match(text.strip())
    return float(match.group()) if match else None


def _column_index(headers: list[str], name: str | None) -> int | None:
    if not name:
        return None
    wanted = name.lower()
    for index, header in enumerate(headers):
        if header.lower() == wanted:
            return index
    return None


def _cell(cells: list[str], index: int | None) -> str | None:
    if index is None or index >= len(cells):
        return None
    return cells[index]


@dataclass
class TableExtraction:
    """Values and accumulated goal extracted from one document.

    Attributes:
        values: One entry per counted data row, in document order.
        goal: Sum of parsable goal-column cells, None when there were none.
    """

    values: list[float] = field(default_factory=list)
    goal: float | None = None


class TableState(Enum):
    """Position of the scanner relative to the current table."""

    OUTSIDE = "outside"
    SKIPPED = "skipped"
    HEADER = "header"
    BODY = "body"


class TableScanner:
    """Single-pass markdown table scanner.

    Example:
        scanner = TableScanner(key_column="Activity", value_column="Done", value="✓")
        result = scanner.scan(content)
        print(result.values, result.goal)
    """

    def __init__(
        self,
        key_column: str,
        value_column: str,
        value: str,
        key: str | None = None,
        table_tag: str | None = None,
        goal_column: str | None = None,
    ):
        self.key_column = key_column
        self.value_column = value_column
        self.value = value
        self.key = key
        self.table_tag = table_tag
        self.goal_column = goal_column

    @classmethod
    def from_config(cls, config: TrackerConfig) -> "TableScanner":
        return cls(
            key_column=config.key_column or "",
            value_column=config.value_column or "",
            value=config.value or VALUE_ANY,
            key=config.key,
            table_tag=config.table_tag,
            goal_column=config.goal_column,
        )

    def scan(self, content: str) -> TableExtraction:
        """Scan a document and extract values from matching tables.

        Args:
            content: Full document text.

        Returns:
            TableExtraction with values and any column-derived goal.
        """
        result = TableExtraction()
        recent: deque[str] = deque(maxlen=TAG_LOOKBACK_LINES)
        state = TableState.OUTSIDE
        key_index: int | None = None
        value_index: int | None = None
        goal_index: int | None = None

        for line in content.split("\n"):
            recent.append(line)

            if not is_table_line(line):
                state = TableState.OUTSIDE
                key_index = value_index = goal_index = None
                continue

            if state is TableState.OUTSIDE:
                if self.table_tag and not self._tag_in(recent):
                    state = TableState.SKIPPED
                    continue
                headers = split_cells(line)
                key_index = _column_index(headers, self.key_column)
                value_index = _column_index(headers, self.value_column)
                goal_index = _column_index(headers, self.goal_column)
                state = TableState.HEADER
                continue

            if state is TableState.SKIPPED:
                continue

            if state is TableState.HEADER:
                state = TableState.BODY
                if "---" in line:
                    continue

            self._scan_row(split_cells(line), key_index, value_index, goal_index, result)

        return result

    def _tag_in(self, recent: deque[str]) -> bool:
        marker = table_tag_marker(self.table_tag or "")
        return any(marker in line for line in recent)

    def _scan_row(
        self,
        cells: list[str],
        key_index: int | None,
        value_index: int | None,
        goal_index: int | None,
        result: TableExtraction,
    ) -> None:
        if self.key:
            key_cell = _cell(cells, key_index)
            if not key_cell or self.key not in key_cell:
                return

        if value_index is not None:
            value = extract_value(_cell(cells, value_index) or "", self.value)
            if value is not None:
                result.values.append(value)

        goal_cell = _cell(cells, goal_index)
        if goal_cell is not None:
            goal = parse_float(goal_cell)
            if goal is not None:
                result.goal = (result.goal or 0) + goal


def extract_from_tables(content: str, config: TrackerConfig) -> TableExtraction:
    """Extract table values from a document for a table-mode tracker."""
    return TableScanner.from_config(config).scan(content)
