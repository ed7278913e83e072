"""Service layer for mdtrack."""

from .registry import DisplayEntry, DisplayRegistry
from .tracker import BlockResult, TrackerResult, TrackerService

__all__ = [
    "BlockResult",
    "DisplayEntry",
    "DisplayRegistry",
    "TrackerResult",
    "TrackerService",
]
