# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_status.core.models import SummaryConfig
from task_status.core.state import AppState

from .fakes import FakeClipboard, FakeNotifier, FakeOpener, InMemoryConfigStore, InMemoryDocumentStore

SOURCE = """\
## Active
- [ ] Write docs [[101]]
- [x] Review [[102|done]]
## Done
- [x] Shipped [[103]]
"""


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object; tests never read the real environment.
    """
    return SimpleNamespace(
        app_name="task-status",
        log_level="DEBUG",
        vault_dir=tmp_path / "vault",
        data_dir=tmp_path / "data",
        config_path=tmp_path / "data" / "config.json",
        clipboard_command="",
        open_command="",
    )


@pytest.fixture()
def config() -> SummaryConfig:
    return SummaryConfig(source_path="Tasks.md", target_path="Status.md")


@pytest.fixture()
def state(settings: SimpleNamespace, config: SummaryConfig) -> AppState:
    """AppState wired with in-memory fakes."""
    return AppState(
        settings=settings,
        documents=InMemoryDocumentStore({"Tasks.md": SOURCE, "Notes/Other.md": "# x"}),
        config_store=InMemoryConfigStore(config),
        clipboard=FakeClipboard(),
        opener=FakeOpener(),
        notifier=FakeNotifier(),
    )
