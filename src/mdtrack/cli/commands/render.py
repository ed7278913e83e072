"""Render command for mdtrack CLI."""

import asyncio
import json
from pathlib import Path
from typing import Any

from ...blocks import TrackerBlock, find_tracker_blocks
from ...core.config import Config
from ...core.exceptions import MdTrackError
from ...render import render_block
from ...services import BlockResult, TrackerService
from ...store import VaultStore


def add_note_arguments(parser) -> None:
    """Add arguments shared by commands that operate on a note.

    Args:
        parser: Argument parser to add arguments to.
    """
    parser.add_argument("note", help="Markdown note containing progress-tracker blocks")
    parser.add_argument(
        "--vault",
        help="Vault root directory (default: MDTRACK_VAULT or current directory)",
    )


def open_vault(args, config: Config) -> tuple[VaultStore, str]:
    """Create the vault store and resolve the note's vault-relative path.

    Args:
        args: Parsed command arguments with note and vault.
        config: Application configuration.

    Returns:
        Tuple of (store, note path relative to the vault).

    Raises:
        MdTrackError: If the vault is missing or the note is outside it.
    """
    vault = Path(args.vault or config.vault_path).expanduser().resolve()
    if not vault.is_dir():
        raise MdTrackError(f"Vault directory does not exist: {vault}")

    note = Path(args.note).expanduser().resolve()
    try:
        note_path = note.relative_to(vault).as_posix()
    except ValueError:
        raise MdTrackError(f"Note {note} is not inside vault {vault}") from None

    store = VaultStore(
        str(vault),
        encoding=config.encoding,
        glob_patterns=config.glob_patterns,
    )
    return store, note_path


async def load_blocks(store: VaultStore, note_path: str) -> list[TrackerBlock]:
    """Read a note and return its progress-tracker blocks."""
    content = await store.read(note_path)
    return find_tracker_blocks(content)


def handle_render(args, config: Config) -> None:
    """Handle render command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    asyncio.run(_handle_render_async(args, config))


async def _handle_render_async(args, config: Config) -> None:
    store, note_path = open_vault(args, config)
    service = TrackerService(store, config)

    blocks = await load_blocks(store, note_path)
    if not blocks:
        print(f"No progress-tracker blocks found in {note_path}")
        return

    results = [await service.compute_block(block.text, note_path) for block in blocks]

    if args.json:
        payload = [_block_to_dict(block, result) for block, result in zip(blocks, results)]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for block, result in zip(blocks, results):
        if len(blocks) > 1:
            print(f"── Block {block.index + 1} (line {block.line}) ──")
        print(render_block(result))
        print()


def _block_to_dict(block: TrackerBlock, result: BlockResult) -> dict[str, Any]:
    trackers = []
    for tracker in result.results:
        entry: dict[str, Any] = {"index": tracker.index}
        if tracker.config is not None:
            entry["type"] = tracker.config.type.value
            entry["label"] = tracker.config.label
            entry["source"] = str(tracker.config.source)
        if tracker.data is not None:
            entry["data"] = tracker.data.to_dict()
        if tracker.error is not None:
            entry["error"] = str(tracker.error)
        trackers.append(entry)

    return {
        "block": block.index,
        "line": block.line,
        "layout": result.block.layout_mode.value,
        "grid_columns": result.block.grid_columns or 2,
        "trackers": trackers,
    }
