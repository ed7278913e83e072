"""Document store abstraction for mdtrack.

Trackers read documents only through a :class:`DocumentStore`:

    from mdtrack.store import VaultStore

    store = VaultStore("/path/to/vault")
    refs = store.list("Daily Notes")
    text = await store.read(refs[0].path)

``VaultStore`` works on any fsspec filesystem (``protocol="memory"`` is
handy in tests) and reports changes through :meth:`VaultStore.poll`.
"""

from .base import (
    BaseDocumentStore,
    ChangeEvent,
    ChangeKind,
    ChangeListener,
    DocumentStore,
)
from .path_filter import PathFilter
from .vault import VaultStore

__all__ = [
    "BaseDocumentStore",
    "ChangeEvent",
    "ChangeKind",
    "ChangeListener",
    "DocumentStore",
    "PathFilter",
    "VaultStore",
]
