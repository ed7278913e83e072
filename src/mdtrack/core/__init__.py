"""Core types, configuration and exceptions for mdtrack."""

from .config import Config
from .exceptions import (
    ConfigError,
    DocumentNotFoundError,
    DocumentReadError,
    FolderNotFoundError,
    MdTrackError,
    PatternError,
    SourceError,
)
from .types import (
    VALUE_ANY,
    VALUE_NUMERIC,
    AggregateMethod,
    BlockConfig,
    DateRange,
    DocumentRef,
    LayoutMode,
    Period,
    Source,
    SourceKind,
    TimePoint,
    TrackerConfig,
    TrackerData,
    TrackerType,
)

__all__ = [
    "Config",
    "MdTrackError",
    "ConfigError",
    "SourceError",
    "DocumentNotFoundError",
    "FolderNotFoundError",
    "DocumentReadError",
    "PatternError",
    "TrackerType",
    "Period",
    "AggregateMethod",
    "LayoutMode",
    "SourceKind",
    "Source",
    "BlockConfig",
    "TrackerConfig",
    "TrackerData",
    "TimePoint",
    "DateRange",
    "DocumentRef",
    "VALUE_NUMERIC",
    "VALUE_ANY",
]
