"""Count literal or regex occurrences of a pattern in document text."""

from __future__ import annotations

import re

from loguru import logger

from mdtrack.core.exceptions import PatternError


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a user-supplied regular expression.

    Raises:
        PatternError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(pattern, str(e)) from e


def count_pattern_matches(content: str, pattern: str, use_regex: bool = False) -> int:
    """Count occurrences of a pattern in content.

    Literal patterns count non-overlapping occurrences. Regex patterns
    count every match; an invalid regex is logged and counts as zero.

    Args:
        content: Document text.
        pattern: Literal text or regular expression.
        use_regex: Treat pattern as a regular expression.

    Returns:
        Number of matches.
    """
    if use_regex:
        try:
            regex = compile_pattern(pattern)
        except PatternError as e:
            logger.warning(str(e))
            return 0
        return sum(1 for _ in regex.finditer(content))

    if not pattern:
        return 0
    return content.count(pattern)
