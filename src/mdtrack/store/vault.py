"""Vault document store backed by fsspec.

Reads markdown documents from a vault directory on any fsspec filesystem
(local by default) and detects changes by polling per-document checksums.
"""

from __future__ import annotations

import posixpath
from typing import Any

import fsspec
from loguru import logger

from mdtrack.core.exceptions import (
    DocumentNotFoundError,
    DocumentReadError,
    FolderNotFoundError,
)
from mdtrack.core.types import DocumentRef

from .base import BaseDocumentStore, ChangeEvent, ChangeKind
from .path_filter import PathFilter


class VaultStore(BaseDocumentStore):
    """Document store for a vault directory.

    Paths are vault-relative with forward slashes (``Daily/2026-01-01.md``).

    Example:
        store = VaultStore("~/notes")
        for ref in store.list("Daily"):
            text = await store.read(ref.path)

        # In a loop: emit modified/created/deleted events to subscribers
        await store.poll()
    """

    def __init__(
        self,
        root: str,
        protocol: str = "file",
        encoding: str = "utf-8",
        glob_patterns: list[str] | None = None,
        **storage_options: Any,
    ) -> None:
        """Initialize vault store.

        Args:
            root: Vault root directory.
            protocol: fsspec protocol name (e.g. "file", "memory").
            encoding: Text encoding of documents.
            glob_patterns: Include/exclude patterns (default: ["**/*.md"]).
            **storage_options: Passed to the fsspec filesystem.
        """
        super().__init__()
        self._fs = fsspec.filesystem(protocol, **storage_options)
        if protocol == "file":
            root = posixpath.expanduser(root)
        self._root = self._fs._strip_protocol(root).rstrip("/") or "/"
        self._encoding = encoding
        self._filter = PathFilter(glob_patterns or ["**/*.md"])
        self._snapshot: dict[str, str] | None = None

    @property
    def root(self) -> str:
        """Resolved vault root."""
        return self._root

    def _full_path(self, path: str) -> str:
        path = path.strip("/")
        return posixpath.join(self._root, path) if path else self._root

    def _relative(self, full_path: str) -> str:
        return posixpath.relpath(self._fs._strip_protocol(full_path), self._root)

    def exists(self, path: str) -> bool:
        return self._fs.isfile(self._full_path(path))

    def is_folder(self, path: str) -> bool:
        return self._fs.isdir(self._full_path(path))

    async def read(self, path: str) -> str:
        """Read document text.

        Raises:
            DocumentNotFoundError: If no document exists at path.
            DocumentReadError: If the file can't be read or decoded.
        """
        full_path = self._full_path(path)
        if not self._fs.isfile(full_path):
            raise DocumentNotFoundError(path)

        try:
            with self._fs.open(full_path, "r", encoding=self._encoding) as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise DocumentReadError(path, f"Encoding error ({self._encoding}): {e}")
        except PermissionError:
            raise DocumentReadError(path, "Permission denied")
        except OSError as e:
            raise DocumentReadError(path, str(e))

    def list(self, folder: str) -> list[DocumentRef]:
        """List matching documents under a folder, recursively.

        Raises:
            FolderNotFoundError: If the folder does not exist.
        """
        full_path = self._full_path(folder)
        if not self._fs.isdir(full_path):
            raise FolderNotFoundError(folder)

        refs = []
        for found in self._fs.find(full_path):
            relative = self._relative(found)
            if not self._filter.matches(relative):
                continue
            basename = posixpath.splitext(posixpath.basename(relative))[0]
            refs.append(DocumentRef(path=relative, basename=basename))

        logger.debug(f"Listed {len(refs)} documents in {folder!r}")
        return refs

    def snapshot(self) -> dict[str, str]:
        """Map every vault document to a checksum of its current version."""
        versions: dict[str, str] = {}
        for ref in self.list(""):
            try:
                versions[ref.path] = str(self._fs.checksum(self._full_path(ref.path)))
            except FileNotFoundError:
                # Deleted between listing and checksum
                continue
        return versions

    async def poll(self) -> list[ChangeEvent]:
        """Compare the vault with the last snapshot and notify subscribers.

        The first call records a baseline and reports nothing.

        Returns:
            Events emitted by this poll.
        """
        current = self.snapshot()
        previous = self._snapshot
        self._snapshot = current
        if previous is None:
            return []

        events = [
            ChangeEvent(ChangeKind.CREATED, path)
            for path in current.keys() - previous.keys()
        ]
        events += [
            ChangeEvent(ChangeKind.DELETED, path)
            for path in previous.keys() - current.keys()
        ]
        events += [
            ChangeEvent(ChangeKind.MODIFIED, path)
            for path in current.keys() & previous.keys()
            if current[path] != previous[path]
        ]
        events.sort(key=lambda e: e.path)

        for event in events:
            await self.notify(event)
        return events
