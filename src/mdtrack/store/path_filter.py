"""Include/exclude glob filtering for vault paths."""

from __future__ import annotations

from pathlib import PurePosixPath

from loguru import logger


class PathFilter:
    """Match relative paths against include and exclude glob patterns.

    Patterns without a prefix are includes (OR'd together); patterns with a
    ``!`` prefix are excludes. A path matches if it satisfies any include
    and no exclude.

    Example:
        path_filter = PathFilter(["**/*.md", "!**/templates/**"])
        path_filter.matches("Daily/2026-01-01.md")   # True
        path_filter.matches("templates/daily.md")    # False
    """

    def __init__(self, patterns: list[str]) -> None:
        """Initialize with pattern list.

        Raises:
            ValueError: If no include patterns are provided.
        """
        self.includes = [p for p in patterns if not p.startswith("!")]
        self.excludes = [p[1:] for p in patterns if p.startswith("!")]

        if not self.includes:
            raise ValueError(
                "At least one include pattern required (patterns without ! prefix)"
            )

        logger.debug(f"PathFilter: includes={self.includes}, excludes={self.excludes}")

    def matches(self, path: str) -> bool:
        normalized = path.replace("\\", "/")
        if not any(_glob_match(normalized, p) for p in self.includes):
            return False
        return not any(_glob_match(normalized, p) for p in self.excludes)


def _glob_match(path: str, pattern: str) -> bool:
    """Match a path against one glob, letting a leading ``**/`` match zero dirs."""
    p = PurePosixPath(path)

    if not pattern.startswith("**/"):
        return p.match(pattern)

    rest = pattern[3:]
    # "**/name/**" excludes everything under any directory called name
    if rest.endswith("/**"):
        return rest[:-3] in p.parts[:-1]
    return p.match(rest) or p.match(pattern) or _glob_match(path, rest)
