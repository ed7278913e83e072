"""Test fakes for testing without real infrastructure.

Example:
    from tests.fakes import InMemoryDocumentStore

    store = InMemoryDocumentStore({"Daily/2026-01-15.md": "- [x] Run"})
    service = TrackerService(store)
"""

from .store import InMemoryDocumentStore

__all__ = [
    "InMemoryDocumentStore",
]
