"""In-memory document store fake for testing.

Lets services be tested without a filesystem. Implements the
DocumentStore protocol from mdtrack.store.base.
"""

from __future__ import annotations

import posixpath

from mdtrack.core.exceptions import (
    DocumentNotFoundError,
    DocumentReadError,
    FolderNotFoundError,
)
from mdtrack.core.types import DocumentRef
from mdtrack.store import BaseDocumentStore, ChangeEvent, ChangeKind


class InMemoryDocumentStore(BaseDocumentStore):
    """Document store holding documents in a dict keyed by path."""

    def __init__(self, documents: dict[str, str] | None = None) -> None:
        super().__init__()
        self.documents: dict[str, str] = dict(documents or {})
        self.unreadable: set[str] = set()
        self.reads: list[str] = []

    async def read(self, path: str) -> str:
        self.reads.append(path)
        if path in self.unreadable:
            raise DocumentReadError(path, "Permission denied")
        if path not in self.documents:
            raise DocumentNotFoundError(path)
        return self.documents[path]

    def list(self, folder: str) -> list[DocumentRef]:
        prefix = folder.strip("/") + "/" if folder.strip("/") else ""
        paths = [p for p in self.documents if p.startswith(prefix)]
        if prefix and not paths:
            raise FolderNotFoundError(folder)
        return [
            DocumentRef(path=p, basename=posixpath.splitext(posixpath.basename(p))[0])
            for p in sorted(paths, reverse=True)
        ]

    def exists(self, path: str) -> bool:
        return path in self.documents

    async def write(self, path: str, content: str) -> None:
        """Store a document and notify subscribers."""
        kind = ChangeKind.MODIFIED if path in self.documents else ChangeKind.CREATED
        self.documents[path] = content
        await self.notify(ChangeEvent(kind, path))

    async def delete(self, path: str) -> None:
        """Remove a document and notify subscribers."""
        del self.documents[path]
        await self.notify(ChangeEvent(ChangeKind.DELETED, path))
