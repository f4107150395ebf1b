# src/task_status/core/ports.py

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations, so the
update pipeline can run against in-memory fakes in tests.
"""

from __future__ import annotations

from typing import Protocol

from .models import NoticeLevel, SummaryConfig


class DocumentStore(Protocol):
    """Markdown documents addressed by vault-relative paths ("Folder/Tasks.md")."""

    def exists(self, path: str) -> bool: ...

    def read(self, path: str) -> str:
        """Raise DocumentNotFound when `path` does not resolve to a document."""
        ...

    def write(self, path: str, text: str) -> None:
        """Replace the document, creating it (and its folders) if absent."""
        ...

    def list_paths(self) -> list[str]: ...


class ClipboardWriter(Protocol):
    def copy(self, text: str) -> None: ...


class DocumentOpener(Protocol):
    def open(self, path: str) -> None: ...


class ConfigStore(Protocol):
    def load(self) -> SummaryConfig: ...
    def save(self, config: SummaryConfig) -> None: ...


class Notifier(Protocol):
    """Transient user-facing notification."""

    def notify(self, message: str, *, level: NoticeLevel = NoticeLevel.INFO) -> None: ...
