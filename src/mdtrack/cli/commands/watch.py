"""Watch command for mdtrack CLI."""

import asyncio
from typing import Hashable

from loguru import logger

from ...core.config import Config
from ...core.types import TrackerConfig, TrackerData
from ...render import render_error, render_tracker
from ...services import DisplayRegistry, TrackerService
from ...store import ChangeEvent
from .render import load_blocks, open_vault


def add_watch_arguments(parser) -> None:
    """Add watch-specific arguments.

    Args:
        parser: Argument parser to add arguments to.
    """
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        help="Seconds between vault polls (default: MDTRACK_POLL_INTERVAL or 2)",
    )


def handle_watch(args, config: Config) -> None:
    """Handle watch command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    registry = DisplayRegistry()
    try:
        asyncio.run(_handle_watch_async(args, config, registry))
    except KeyboardInterrupt:
        print("Stopped watching.")
    finally:
        registry.clear()


def _print_result(target: Hashable, config: TrackerConfig, data: TrackerData) -> None:
    block_index, tracker_index = target
    print(f"[block {block_index + 1}, tracker {tracker_index + 1}]")
    print(render_tracker(config, data))
    print()


async def _handle_watch_async(args, config: Config, registry: DisplayRegistry) -> None:
    store, note_path = open_vault(args, config)
    service = TrackerService(store, config)
    interval = args.interval or config.poll_interval

    for block in await load_blocks(store, note_path):
        result = await service.compute_block(block.text, note_path)
        for tracker in result.results:
            target = (block.index, tracker.index)
            if tracker.error is not None:
                print(f"[block {block.index + 1}, tracker {tracker.index + 1}]")
                print(render_error(tracker.error))
                print()
                continue
            registry.register(target, tracker.config, note_path)
            _print_result(target, tracker.config, tracker.data)

    if not len(registry):
        print(f"No valid trackers to watch in {note_path}")
        return

    changed = asyncio.Event()

    def on_change(event: ChangeEvent) -> None:
        changed.set()

    unsubscribe = store.subscribe(on_change)
    logger.info(f"Watching {store.root} every {interval}s ({len(registry)} trackers)")
    print(f"Watching {len(registry)} trackers. Press Ctrl-C to stop.")

    try:
        await store.poll()
        while True:
            await asyncio.sleep(interval)
            await store.poll()
            if changed.is_set():
                changed.clear()
                await registry.refresh_all(service, _print_result)
    finally:
        unsubscribe()
