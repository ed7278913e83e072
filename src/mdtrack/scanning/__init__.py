"""Document scanning: table extraction, pattern matching, aggregation and dates."""

from .aggregate import aggregate
from .dates import (
    calculate_streak,
    extract_date_from_filename,
    filter_files_by_period,
    start_of_period,
)
from .patterns import compile_pattern, count_pattern_matches
from .tables import (
    TableExtraction,
    TableScanner,
    TableState,
    extract_from_tables,
    extract_value,
    split_cells,
    table_tag_marker,
)

__all__ = [
    "aggregate",
    "calculate_streak",
    "extract_date_from_filename",
    "filter_files_by_period",
    "start_of_period",
    "compile_pattern",
    "count_pattern_matches",
    "TableExtraction",
    "TableScanner",
    "TableState",
    "extract_from_tables",
    "extract_value",
    "split_cells",
    "table_tag_marker",
]
