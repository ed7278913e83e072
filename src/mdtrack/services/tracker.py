"""Tracker service: compute tracker results from documents.

Composes block parsing, table/pattern scanning, aggregation, period
filtering and streaks into one :class:`TrackerData` per tracker. Every
computation is stateless; each call reads what it needs from the store.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import date
from typing import Callable

from loguru import logger

from mdtrack.blocks import parse_sections, parse_tracker
from mdtrack.core.config import Config
from mdtrack.core.exceptions import (
    ConfigError,
    DocumentNotFoundError,
    FolderNotFoundError,
    MdTrackError,
    SourceError,
)
from mdtrack.core.types import (
    VALUE_NUMERIC,
    BlockConfig,
    DateRange,
    DocumentRef,
    SourceKind,
    TimePoint,
    TrackerConfig,
    TrackerData,
)
from mdtrack.scanning import (
    aggregate,
    calculate_streak,
    count_pattern_matches,
    extract_date_from_filename,
    extract_from_tables,
    filter_files_by_period,
)
from mdtrack.store import DocumentStore


# =============================================================================
# Result Types
# =============================================================================


@dataclass
class TrackerResult:
    """Outcome of one tracker in a block.

    Attributes:
        index: Position of the tracker in the block.
        config: Validated config, None when the section failed to parse.
        data: Computed data, None on error.
        error: Configuration or source error for this tracker.
    """

    index: int
    config: TrackerConfig | None = None
    data: TrackerData | None = None
    error: MdTrackError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BlockResult:
    """Results for every tracker in a block, in block order."""

    block: BlockConfig = field(default_factory=BlockConfig)
    results: list[TrackerResult] = field(default_factory=list)

    @property
    def is_dashboard(self) -> bool:
        """Whether the block renders as a multi-tracker dashboard."""
        return len(self.results) > 1

    @property
    def errors(self) -> list[MdTrackError]:
        return [r.error for r in self.results if r.error is not None]


# =============================================================================
# Tracker Service
# =============================================================================


class TrackerService:
    """Service for computing tracker data.

    Example:
        service = TrackerService(VaultStore("~/notes"), Config.from_env())
        result = await service.compute_block(block_text, "Weekly/2026-W42.md")
        for tracker in result.results:
            print(tracker.config.label, tracker.data.count)
    """

    def __init__(
        self,
        store: DocumentStore,
        config: Config | None = None,
        today: Callable[[], date] | None = None,
    ):
        """Initialize TrackerService.

        Args:
            store: Document store to read from.
            config: Application configuration (default period, week start).
            today: Clock returning the current local date.
        """
        self._store = store
        self._config = config or Config()
        self._today = today or date.today

    @property
    def config(self) -> Config:
        return self._config

    async def compute_block(
        self,
        text: str,
        current_path: str | None = None,
    ) -> BlockResult:
        """Parse a tracker block and compute every tracker in it.

        A tracker that fails to parse or scan records its error; the other
        trackers in the block are still computed.

        Args:
            text: Raw block text.
            current_path: Path of the note containing the block.

        Returns:
            BlockResult with one TrackerResult per section.
        """
        parsed = parse_sections(text)
        results: list[TrackerResult] = []
        for index, section in enumerate(parsed.sections):
            try:
                tracker = parse_tracker(section, parsed.block, self._config.default_period)
            except ConfigError as e:
                logger.debug(f"Tracker {index} config error: {e}")
                results.append(TrackerResult(index=index, error=e))
                continue
            results.append(TrackerResult(index=index, config=tracker))

        await asyncio.gather(
            *(
                self._fill(result, result.config, current_path)
                for result in results
                if result.config is not None
            )
        )
        return BlockResult(block=parsed.block, results=results)

    async def _fill(
        self,
        result: TrackerResult,
        tracker: TrackerConfig,
        current_path: str | None,
    ) -> None:
        try:
            result.data = await self.scan(tracker, current_path)
        except MdTrackError as e:
            logger.warning(f"Tracker {result.index} failed: {e}")
            result.error = e
        except Exception as e:
            logger.warning(f"Tracker {result.index} failed unexpectedly: {e!r}")
            error = SourceError(f"Failed to scan tracker {result.index}: {e}")
            error.__cause__ = e
            result.error = error

    async def scan(
        self,
        tracker: TrackerConfig,
        current_path: str | None = None,
    ) -> TrackerData:
        """Compute data for one tracker.

        Args:
            tracker: Validated tracker config.
            current_path: Path of the note containing the tracker, used for
                current-file sources.

        Returns:
            TrackerData; an empty result when the source does not exist.
        """
        source = tracker.source
        if source.kind is SourceKind.FOLDER:
            return await self._scan_folder(tracker, source.path or "")
        if source.kind is SourceKind.FILE:
            return await self._scan_document(tracker, source.path)
        return await self._scan_document(tracker, current_path)

    async def _scan_document(
        self,
        tracker: TrackerConfig,
        path: str | None,
    ) -> TrackerData:
        """Scan one document (current-file or file: source)."""
        if not path:
            return self._empty_result(tracker)

        try:
            content = await self._store.read(path)
        except DocumentNotFoundError:
            logger.warning(f"File not found: {path}")
            return self._empty_result(tracker)

        if tracker.is_pattern_mode:
            count = count_pattern_matches(content, tracker.pattern or "", tracker.use_regex)
            return TrackerData(count=count, goal=tracker.goal, files_scanned=1)

        extraction = extract_from_tables(content, tracker)
        value = aggregate(extraction.values, tracker.aggregate)
        return TrackerData(
            count=value,
            goal=extraction.goal if extraction.goal is not None else tracker.goal,
            files_scanned=1,
            numeric_sum=value if tracker.value == VALUE_NUMERIC else None,
        )

    async def _scan_folder(self, tracker: TrackerConfig, folder: str) -> TrackerData:
        """Scan the folder documents that fall inside the tracker period."""
        try:
            refs = self._store.list(folder)
        except FolderNotFoundError:
            logger.warning(f"Folder not found: {folder}")
            return self._empty_result(tracker)

        files = filter_files_by_period(
            refs,
            tracker.period,
            today=self._today(),
            week_start=self._config.week_start_index,
        )
        files.sort(key=lambda ref: ref.basename)
        logger.debug(
            f"Scanning folder {folder!r}: {len(files)} of {len(refs)} documents "
            f"in period {getattr(tracker.period, 'value', tracker.period)}"
        )

        contents = await asyncio.gather(*(self._read_or_none(ref) for ref in files))

        values: list[float] = []
        goal = tracker.goal
        streak_dates: list[date] = []
        time_series: list[TimePoint] = []

        for ref, content in zip(files, contents):
            value = 0.0
            if content is not None:
                if tracker.is_pattern_mode:
                    value = count_pattern_matches(
                        content, tracker.pattern or "", tracker.use_regex
                    )
                else:
                    extraction = extract_from_tables(content, tracker)
                    value = aggregate(extraction.values, tracker.aggregate)
                    if goal is None and extraction.goal is not None:
                        goal = extraction.goal

            values.append(value)

            file_date = extract_date_from_filename(ref.basename)
            if file_date is None:
                continue
            time_series.append(TimePoint(date=file_date, value=value))
            if value > 0:
                streak_dates.append(file_date)

        total = aggregate(values, tracker.aggregate)
        return TrackerData(
            count=total,
            goal=goal,
            files_scanned=len(files),
            date_range=DateRange(
                start=extract_date_from_filename(files[0].basename) if files else None,
                end=extract_date_from_filename(files[-1].basename) if files else None,
            ),
            streak=calculate_streak(streak_dates, today=self._today()),
            numeric_sum=total if tracker.value == VALUE_NUMERIC else None,
            time_series=time_series,
        )

    async def _read_or_none(self, ref: DocumentRef) -> str | None:
        """Read a folder document; a failure only drops this document."""
        try:
            return await self._store.read(ref.path)
        except SourceError as e:
            logger.warning(f"Skipping unreadable document {ref.path}: {e}")
            return None

    @staticmethod
    def _empty_result(tracker: TrackerConfig) -> TrackerData:
        return TrackerData(count=0, goal=tracker.goal, files_scanned=0)
