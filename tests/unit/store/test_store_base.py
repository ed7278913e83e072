"""Tests for store change notification."""

import pytest

from mdtrack.store import ChangeEvent, ChangeKind, DocumentStore
from tests.fakes import InMemoryDocumentStore


class TestBaseDocumentStore:
    """Tests for subscribe and notify."""

    def test_fake_implements_protocol(self):
        """The in-memory fake satisfies the DocumentStore protocol."""
        assert isinstance(InMemoryDocumentStore(), DocumentStore)

    @pytest.mark.asyncio
    async def test_listeners_called_in_order(self):
        """Listeners are notified in subscription order."""
        store = InMemoryDocumentStore()
        calls = []
        store.subscribe(lambda e: calls.append(("first", e.kind)))
        store.subscribe(lambda e: calls.append(("second", e.kind)))

        await store.write("a.md", "x")

        assert calls == [("first", ChangeKind.CREATED), ("second", ChangeKind.CREATED)]

    @pytest.mark.asyncio
    async def test_async_listener_awaited(self):
        """Coroutine listeners are awaited."""
        store = InMemoryDocumentStore({"a.md": "x"})
        received = []

        async def listener(event: ChangeEvent) -> None:
            received.append(event)

        store.subscribe(listener)
        await store.write("a.md", "y")

        assert received == [ChangeEvent(ChangeKind.MODIFIED, "a.md")]

    @pytest.mark.asyncio
    async def test_unsubscribe(self):
        """An unsubscribed listener is no longer called."""
        store = InMemoryDocumentStore()
        calls = []
        unsubscribe = store.subscribe(calls.append)
        unsubscribe()
        unsubscribe()

        await store.write("a.md", "x")

        assert calls == []

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_stop_delivery(self):
        """A listener error is logged and later listeners still run."""
        store = InMemoryDocumentStore({"a.md": "x"})
        calls = []

        def broken(event: ChangeEvent) -> None:
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(calls.append)
        await store.delete("a.md")

        assert calls == [ChangeEvent(ChangeKind.DELETED, "a.md")]
