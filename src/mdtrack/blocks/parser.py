"""Parse tracker block text into validated tracker configurations.

A block holds one or more ``key: value`` directive sections separated by
lines of three or more hyphens. When there are several sections, directives
at the top of the first section (before any tracker-specific key) act as
block defaults:

    layout: grid
    source: current-file

    type: counter
    keyColumn: Activity
    valueColumn: Done
    value: "✓"
    ---
    type: progress_bar
    ...
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from mdtrack.core.exceptions import ConfigError
from mdtrack.core.types import (
    AggregateMethod,
    BlockConfig,
    Period,
    Source,
    TrackerConfig,
    TrackerType,
)

from .examples import example_for
from .keys import BOOLEAN_FIELDS, INTEGER_FIELDS, KeyScope, key_scope, normalize_key

# Separator line: three or more hyphens, optional trailing whitespace
_SEPARATOR_PATTERN = re.compile(r"^-{3,}[^\S\n]*$", re.MULTILINE)

# Leading integer, the way lenient integer parsing reads "5", " 7" or "3 days"
_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


@dataclass
class ParsedBlock:
    """Block defaults plus the raw directive text of each tracker.

    Attributes:
        block: Shared defaults from the top of the first section.
        sections: Directive text for each tracker, in block order.
    """

    block: BlockConfig = field(default_factory=BlockConfig)
    sections: list[str] = field(default_factory=list)


def split_sections(text: str) -> list[str]:
    """Split block text on separator lines.

    Args:
        text: Raw block text.

    Returns:
        Non-empty sections; the whole text when no separator is present.
    """
    sections = [s for s in _SEPARATOR_PATTERN.split(text) if s.strip()]
    return sections or [text]


def _split_line(line: str) -> tuple[str, str] | None:
    """Split a directive line into raw key and value.

    Returns None for blank lines, comments and lines without a colon.
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith("#"):
        return None

    key, sep, value = trimmed.partition(":")
    if not sep:
        return None
    return key.strip(), _strip_quotes(value.strip())


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _parse_int(value: str) -> int | None:
    """Parse a leading integer; None when the value is not numeric."""
    match = _LEADING_INT_PATTERN.match(value)
    return int(match.group(1)) if match else None


def _coerce(field_name: str, value: str) -> Any:
    if field_name in INTEGER_FIELDS:
        return _parse_int(value)
    if field_name in BOOLEAN_FIELDS:
        return value.lower() == "true"
    return value


def extract_block_defaults(first_section: str) -> tuple[BlockConfig, str]:
    """Separate block defaults from the first tracker's own directives.

    Lines before the first widget directive populate the block defaults
    (block-only and shared keys). From the first widget directive on,
    every line belongs to the tracker.

    Args:
        first_section: Text of the first section of a multi-tracker block.

    Returns:
        Tuple of (block defaults, remaining widget text).
    """
    values: dict[str, Any] = {}
    widget_lines: list[str] = []
    in_widget = False

    for line in first_section.split("\n"):
        if in_widget:
            widget_lines.append(line)
            continue

        parsed = _split_line(line)
        if parsed is None:
            continue

        field_name = normalize_key(parsed[0])
        scope = key_scope(field_name) if field_name else None

        if scope is KeyScope.WIDGET:
            in_widget = True
            widget_lines.append(line)
        elif scope in (KeyScope.BLOCK_ONLY, KeyScope.SHARED):
            values[field_name] = _coerce(field_name, parsed[1])

    return BlockConfig(**values), "\n".join(widget_lines)


def parse_sections(text: str) -> ParsedBlock:
    """Split a block into defaults and per-tracker sections.

    Block defaults are only extracted when the block has more than one
    section; a single section is one tracker's config even if it contains
    source or layout lines.
    """
    sections = split_sections(text)
    if len(sections) == 1:
        return ParsedBlock(sections=sections)

    block, first = extract_block_defaults(sections[0])
    remaining = sections[1:]
    if first.strip():
        remaining = [first, *remaining]

    logger.debug(f"Parsed block defaults: {block}, trackers={len(remaining)}")
    return ParsedBlock(block=block, sections=remaining)


def parse_one(section: str) -> dict[str, Any]:
    """Parse one tracker section into raw field values.

    Keys are case-insensitive and accept camelCase or snake_case spellings.
    Unrecognized keys are ignored; a later duplicate overrides an earlier one.

    Args:
        section: Directive text of a single tracker.

    Returns:
        Mapping of field name to value (str, bool, or int/None for integers).
    """
    fields: dict[str, Any] = {}
    for line in section.split("\n"):
        parsed = _split_line(line)
        if parsed is None:
            continue

        field_name = normalize_key(parsed[0])
        if field_name is None:
            logger.debug(f"Ignoring unknown directive: {parsed[0]!r}")
            continue
        fields[field_name] = _coerce(field_name, parsed[1])
    return fields


def apply_defaults(fields: dict[str, Any], block: BlockConfig) -> dict[str, Any]:
    """Fill source and table_tag from block defaults where unset.

    Args:
        fields: Raw tracker fields from :func:`parse_one`.
        block: Block defaults.

    Returns:
        New field mapping; explicit tracker values always win.
    """
    merged = dict(fields)
    if block.source and not merged.get("source"):
        merged["source"] = block.source
    if block.table_tag and not merged.get("table_tag"):
        merged["table_tag"] = block.table_tag
    return merged


def validate(
    fields: dict[str, Any],
    default_period: Period = Period.ALL_TIME,
) -> TrackerConfig:
    """Validate raw fields and build a TrackerConfig.

    Checks run in a fixed order so the first problem reported is stable:
    type, source, source format, table mode completeness, mode conflicts,
    type name. Unknown period and aggregate names are not errors.

    Args:
        fields: Raw tracker fields.
        default_period: Period used when the tracker does not set one.

    Returns:
        Validated, immutable TrackerConfig.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    if not fields.get("type"):
        raise ConfigError(
            "Missing required field: type",
            hint="Add a type line: progress_bar, counter, percentage, streak or line_plot",
            example=example_for("table"),
        )
    if not fields.get("source"):
        raise ConfigError(
            "Missing required field: source "
            '(e.g., "current-file", "folder:Daily Notes", "file:path/to/file.md")',
            hint="Add a source line, or set source once at the top of a dashboard block",
            example=example_for("table"),
        )

    source = Source.parse(fields["source"])

    is_table_mode = bool(fields.get("key_column") or fields.get("value_column"))
    is_pattern_mode = bool(fields.get("pattern"))

    if is_table_mode:
        if not fields.get("key_column"):
            raise ConfigError(
                "keyColumn is required for table mode",
                hint="Name the column that identifies each row, e.g. keyColumn: Activity",
                example=example_for("table"),
            )
        if not fields.get("value_column"):
            raise ConfigError(
                "valueColumn is required for table mode",
                hint="Name the column to read values from, e.g. valueColumn: Done",
                example=example_for("table"),
            )
        if not fields.get("value"):
            raise ConfigError(
                'value is required for table mode (e.g., "numeric", "any", '
                'or a text pattern like "✓")',
                hint="Use numeric, any, or the text that marks a row as done",
                example=example_for("table"),
            )

    if is_pattern_mode and is_table_mode:
        raise ConfigError(
            "Cannot use both table mode (keyColumn/valueColumn) "
            "and pattern mode (pattern) together",
            hint="Remove either the pattern line or the keyColumn/valueColumn lines",
            example=example_for("pattern"),
        )
    if not is_table_mode and not is_pattern_mode:
        raise ConfigError(
            "Either table mode (keyColumn, valueColumn, value) "
            "or pattern mode (pattern) must be specified",
            hint="Add keyColumn/valueColumn/value to read a table, or pattern to count text",
            example=example_for("pattern"),
        )

    tracker_type = _parse_enum(TrackerType, "type", fields["type"])
    period = (
        _parse_lenient(Period, "period", fields["period"])
        if fields.get("period")
        else default_period
    )
    aggregate = (
        _parse_lenient(AggregateMethod, "aggregate", fields["aggregate"])
        if fields.get("aggregate")
        else AggregateMethod.COUNT
    )

    return TrackerConfig(
        type=tracker_type,
        source=source,
        aggregate=aggregate,
        period=period,
        table_tag=fields.get("table_tag") or None,
        key_column=fields.get("key_column") if is_table_mode else None,
        key=fields.get("key") or None,
        value_column=fields.get("value_column") if is_table_mode else None,
        value=fields.get("value") if is_table_mode else None,
        pattern=fields.get("pattern") if is_pattern_mode else None,
        use_regex=fields.get("use_regex", False),
        goal=fields.get("goal"),
        goal_column=fields.get("goal_column") or None,
        label=fields.get("label") or None,
        layout=fields.get("layout") or None,
        grid_columns=fields.get("grid_columns"),
    )


def _parse_enum(enum_cls, field_name: str, value: str):
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigError(
            f"Invalid {field_name}: {value!r}",
            hint=f"Use one of: {choices}",
        ) from None


def _parse_lenient(enum_cls, field_name: str, value: str):
    """Enum member for value, or the raw value when it names no member.

    An unknown aggregate sums; an unknown period keeps every dated document.
    """
    try:
        return enum_cls(value)
    except ValueError:
        logger.debug(f"Unknown {field_name} {value!r}, keeping it as given")
        return value


def parse_tracker(
    section: str,
    block: BlockConfig | None = None,
    default_period: Period = Period.ALL_TIME,
) -> TrackerConfig:
    """Parse, apply block defaults to, and validate one tracker section."""
    fields = parse_one(section)
    if block is not None:
        fields = apply_defaults(fields, block)
    return validate(fields, default_period)


def parse_block(
    text: str,
    default_period: Period = Period.ALL_TIME,
) -> tuple[BlockConfig, list[TrackerConfig]]:
    """Parse a whole block, failing on the first invalid tracker.

    Args:
        text: Raw block text.
        default_period: Period used when a tracker does not set one.

    Returns:
        Tuple of (block defaults, tracker configs in block order).

    Raises:
        ConfigError: If any tracker section is invalid.
    """
    parsed = parse_sections(text)
    trackers = [
        parse_tracker(section, parsed.block, default_period)
        for section in parsed.sections
    ]
    return parsed.block, trackers
