# src/task_status/cli/bootstrap.py

"""
Composition root: wires concrete adapters into AppState.

Settings stay injectable so tests never read the real environment.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.clipboard import SystemClipboard
from ..connectors.notifier import ConsoleNotifier
from ..connectors.opener import SystemOpener
from ..core.state import AppState
from ..storage.config_store import JsonConfigStore
from ..storage.vault_store import VaultDocumentStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    state = AppState(
        settings=settings,
        documents=VaultDocumentStore(settings.vault_dir),
        config_store=JsonConfigStore(settings.config_path),
        clipboard=SystemClipboard(fallback_command=settings.clipboard_command),
        opener=SystemOpener(settings.vault_dir, command=settings.open_command),
        notifier=ConsoleNotifier(),
    )
    logger.debug("State ready vault=%s config=%s", settings.vault_dir, settings.config_path)
    return state
