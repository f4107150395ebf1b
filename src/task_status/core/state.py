# src/task_status/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import ClipboardWriter, ConfigStore, DocumentOpener, DocumentStore, Notifier


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace).
    settings: object

    documents: DocumentStore
    config_store: ConfigStore
    clipboard: ClipboardWriter
    opener: DocumentOpener
    notifier: Notifier
