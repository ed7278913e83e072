"""Directive key names, aliases and scopes.

Every directive accepted in a tracker block is listed here once. The scope
table decides how a line is treated in the first section of a multi-tracker
block; it is a lookup, so the classification does not depend on line order.
"""

from __future__ import annotations

from enum import Enum


class KeyScope(Enum):
    """Where a directive may appear."""

    # Only meaningful for the block as a whole
    BLOCK_ONLY = "block_only"
    # Marks the start of a tracker's own configuration
    WIDGET = "widget"
    # Block default or per-tracker override
    SHARED = "shared"


# Lowercased spelling -> field name
KEY_ALIASES: dict[str, str] = {
    "type": "type",
    "source": "source",
    "tabletag": "table_tag",
    "table_tag": "table_tag",
    "keycolumn": "key_column",
    "key_column": "key_column",
    "key": "key",
    "valuecolumn": "value_column",
    "value_column": "value_column",
    "value": "value",
    "aggregate": "aggregate",
    "pattern": "pattern",
    "useregex": "use_regex",
    "use_regex": "use_regex",
    "goal": "goal",
    "goalcolumn": "goal_column",
    "goal_column": "goal_column",
    "period": "period",
    "label": "label",
    "layout": "layout",
    "gridcolumns": "grid_columns",
    "grid_columns": "grid_columns",
}

KEY_SCOPES: dict[str, KeyScope] = {
    "layout": KeyScope.BLOCK_ONLY,
    "grid_columns": KeyScope.BLOCK_ONLY,
    "type": KeyScope.WIDGET,
    "key_column": KeyScope.WIDGET,
    "value_column": KeyScope.WIDGET,
    "key": KeyScope.WIDGET,
    "value": KeyScope.WIDGET,
    "pattern": KeyScope.WIDGET,
    "goal": KeyScope.WIDGET,
    "goal_column": KeyScope.WIDGET,
    "aggregate": KeyScope.WIDGET,
    "use_regex": KeyScope.WIDGET,
    "period": KeyScope.WIDGET,
    "label": KeyScope.WIDGET,
    "source": KeyScope.SHARED,
    "table_tag": KeyScope.SHARED,
}

INTEGER_FIELDS = frozenset({"goal", "grid_columns"})
BOOLEAN_FIELDS = frozenset({"use_regex"})


def normalize_key(raw: str) -> str | None:
    """Map a directive key as written to its field name.

    Args:
        raw: Key text before the colon.

    Returns:
        Field name, or None for unrecognized keys.
    """
    return KEY_ALIASES.get(raw.strip().lower())


def key_scope(field_name: str) -> KeyScope | None:
    """Scope of a field name, or None if unknown."""
    return KEY_SCOPES.get(field_name)
