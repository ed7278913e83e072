"""Tracker block parsing.

Turns the text of a ``progress-tracker`` block into validated
:class:`~mdtrack.core.types.TrackerConfig` objects.
"""

from .examples import EXAMPLES, example_for
from .fenced import BLOCK_LANGUAGE, TrackerBlock, find_tracker_blocks
from .keys import KeyScope, key_scope, normalize_key
from .parser import (
    ParsedBlock,
    apply_defaults,
    extract_block_defaults,
    parse_block,
    parse_one,
    parse_sections,
    parse_tracker,
    split_sections,
    validate,
)

__all__ = [
    "EXAMPLES",
    "example_for",
    "BLOCK_LANGUAGE",
    "TrackerBlock",
    "find_tracker_blocks",
    "KeyScope",
    "key_scope",
    "normalize_key",
    "ParsedBlock",
    "apply_defaults",
    "extract_block_defaults",
    "parse_block",
    "parse_one",
    "parse_sections",
    "parse_tracker",
    "split_sections",
    "validate",
]
