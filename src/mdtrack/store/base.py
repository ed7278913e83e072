"""Base protocol and types for document stores.

A document store is the only way the scanner touches documents: it reads
text, lists the markdown documents of a folder, and tells subscribers that
something changed. Uses Protocol (structural subtyping), so stores don't need
to inherit from a base class, just implement the required methods.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Protocol, runtime_checkable

from loguru import logger

from mdtrack.core.types import DocumentRef


class ChangeKind(Enum):
    """Kind of change reported by a store."""

    MODIFIED = "modified"
    CREATED = "created"
    DELETED = "deleted"


@dataclass(frozen=True)
class ChangeEvent:
    """Notification that a document changed.

    Trackers recompute from scratch on any event; the path is informational.
    """

    kind: ChangeKind
    path: str


ChangeListener = Callable[[ChangeEvent], "Awaitable[None] | None"]


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol defining the interface for document stores."""

    async def read(self, path: str) -> str:
        """Read the full text of a document.

        Raises:
            DocumentNotFoundError: If the document does not exist.
            DocumentReadError: If the document exists but can't be read.
        """
        ...

    def list(self, folder: str) -> list[DocumentRef]:
        """List markdown documents under a folder, recursively.

        Raises:
            FolderNotFoundError: If the folder does not exist.
        """
        ...

    def exists(self, path: str) -> bool:
        """Whether a document exists at path."""
        ...

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a function that unsubscribes it."""
        ...


class BaseDocumentStore:
    """Optional base class providing change notification fan-out."""

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def notify(self, event: ChangeEvent) -> None:
        """Deliver an event to every listener, in subscription order.

        A failing listener is logged and does not stop delivery to the rest.
        """
        logger.debug(f"Document {event.kind.value}: {event.path}")
        for listener in list(self._listeners):
            try:
                result = listener(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.warning(f"Change listener failed for {event.path}: {e}")
