"""Locate progress-tracker fenced code blocks in a markdown note."""

from __future__ import annotations

import re
from dataclasses import dataclass

BLOCK_LANGUAGE = "progress-tracker"

# Opening fence: ``` or ~~~ (3+), then an info string whose first word is the language
_OPEN_FENCE_PATTERN = re.compile(r"^\s*(`{3,}|~{3,})\s*([^\s`]*)[^`]*$")


@dataclass(frozen=True)
class TrackerBlock:
    """A progress-tracker block found in a note.

    Attributes:
        index: Position of the block among tracker blocks in the note.
        line: 1-based line number of the opening fence.
        text: Block body without the fences.
    """

    index: int
    line: int
    text: str


def find_tracker_blocks(content: str, language: str = BLOCK_LANGUAGE) -> list[TrackerBlock]:
    """Find every fenced block of the given language.

    Fences of other languages are skipped as a whole so that their bodies
    are never mistaken for tracker blocks. An unterminated fence runs to
    the end of the note.

    Args:
        content: Full markdown note.
        language: Fence info string to match.

    Returns:
        Tracker blocks in document order.
    """
    lines = content.split("\n")
    blocks: list[TrackerBlock] = []
    i = 0

    while i < len(lines):
        match = _OPEN_FENCE_PATTERN.match(lines[i])
        if not match:
            i += 1
            continue

        fence, info = match.group(1), match.group(2)
        start = i
        i += 1
        body: list[str] = []
        while i < len(lines):
            stripped = lines[i].strip()
            if stripped.startswith(fence[0] * len(fence)) and not stripped.strip(fence[0]):
                break
            body.append(lines[i])
            i += 1
        i += 1

        if info == language:
            blocks.append(TrackerBlock(index=len(blocks), line=start + 1, text="\n".join(body)))

    return blocks
