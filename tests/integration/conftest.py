"""Pytest configuration and fixtures for integration tests."""

from datetime import date
from pathlib import Path

import pytest

from mdtrack.core.config import Config
from mdtrack.services import TrackerService
from mdtrack.store import VaultStore

WEEKLY_NOTE = """\
# 2026-W03

<!-- table-tag: weekly -->
| Activity | Done | Target |
|----------|------|--------|
| Exercise | ✓    | 3      |
| Reading  |      | 5      |

<!-- table-tag: backlog -->
| Activity | Done |
|----------|------|
| Exercise | ✓    |
"""


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Provide a vault with daily notes, a weekly note and a template."""
    daily = tmp_path / "Daily Notes"
    daily.mkdir()
    notes = {
        "2025-12-30": "- [x] Meditation\nMinutes: 10",
        "2026-01-12": "- [x] Meditation\n- [x] Meditation",
        "2026-01-13": "- [ ] Meditation",
        "2026-01-14": "- [x] Meditation",
        "2026-01-15": "- [x] Meditation",
        "Ideas": "- [x] Meditation",
    }
    for name, content in notes.items():
        (daily / f"{name}.md").write_text(content)

    (tmp_path / "Weekly").mkdir()
    (tmp_path / "Weekly" / "2026-W03.md").write_text(WEEKLY_NOTE)
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "daily.md").write_text("- [x] Meditation")
    return tmp_path


@pytest.fixture
def config(vault: Path) -> Config:
    """Provide a Config pointing at the vault and excluding templates."""
    return Config(vault_path=vault, glob_patterns=["**/*.md", "!**/templates/**"])


@pytest.fixture
def service(vault: Path, config: Config) -> TrackerService:
    """Provide a TrackerService over the vault with a fixed clock."""
    store = VaultStore(str(vault), glob_patterns=config.glob_patterns)
    return TrackerService(store, config, today=lambda: date(2026, 1, 15))
