"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from mdtrack.core.config import Config
from mdtrack.services import TrackerService
from tests.fakes import InMemoryDocumentStore

# Thursday; the Sunday-start week began on 2026-01-11
TODAY = date(2026, 1, 15)


@pytest.fixture
def today() -> date:
    """Provide the fixed date used as "today" by clock-dependent tests."""
    return TODAY


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Provide an empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def config() -> Config:
    """Provide a default Config instance."""
    return Config()


@pytest.fixture
def service(store: InMemoryDocumentStore, config: Config, today: date) -> TrackerService:
    """Provide a TrackerService over the in-memory store with a fixed clock."""
    return TrackerService(store, config, today=lambda: today)
