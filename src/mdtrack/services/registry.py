"""Registry of rendered trackers, for refreshing them on document changes."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Awaitable, Callable, Hashable

from loguru import logger

from mdtrack.core.types import TrackerConfig, TrackerData

from .tracker import TrackerService

RefreshCallback = Callable[
    [Hashable, TrackerConfig, TrackerData], "Awaitable[None] | None"
]


@dataclass(frozen=True)
class DisplayEntry:
    """Config and note path last used to render a display target."""

    config: TrackerConfig
    source_path: str | None


class DisplayRegistry:
    """Map display targets to the tracker config they render.

    Targets are opaque keys owned by the rendering layer (a widget, a
    terminal region, a block index). Registering a target again replaces
    its entry, so the latest render wins.

    Example:
        registry = DisplayRegistry()
        registry.register(("note.md", 0), config, "note.md")
        store.subscribe(lambda event: registry.refresh_all(service, redraw))
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, DisplayEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, target: Hashable) -> bool:
        return target in self._entries

    def register(
        self,
        target: Hashable,
        config: TrackerConfig,
        source_path: str | None,
    ) -> None:
        self._entries[target] = DisplayEntry(config=config, source_path=source_path)

    def unregister(self, target: Hashable) -> bool:
        """Remove a target; returns False if it was not registered."""
        return self._entries.pop(target, None) is not None

    def get(self, target: Hashable) -> DisplayEntry | None:
        return self._entries.get(target)

    def targets(self) -> list[Hashable]:
        return list(self._entries)

    def clear(self) -> None:
        """Forget every target (on teardown)."""
        self._entries.clear()

    async def refresh_all(
        self,
        service: TrackerService,
        on_result: RefreshCallback,
    ) -> int:
        """Recompute every registered target and hand results to on_result.

        A target whose scan or callback fails is logged and skipped; the
        rest still refresh.

        Args:
            service: Tracker service used to recompute data.
            on_result: Called with (target, config, data) for each success.

        Returns:
            Number of targets refreshed successfully.
        """
        refreshed = 0
        for target, entry in list(self._entries.items()):
            try:
                data = await service.scan(entry.config, entry.source_path)
                result = on_result(target, entry.config, data)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.warning(f"Error refreshing tracker {target!r}: {e}")
                continue
            refreshed += 1

        logger.debug(f"Refreshed {refreshed} of {len(self._entries)} trackers")
        return refreshed
