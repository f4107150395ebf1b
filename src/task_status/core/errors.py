# src/task_status/core/errors.py

"""
Error taxonomy.

Every error carries a short message that is safe to show to the user as-is.
None of them is fatal: each update run is independent.
"""

from __future__ import annotations


class TaskStatusError(Exception):
    """Base class; ``str(err)`` is the user-facing message."""


class ConfigurationInvalid(TaskStatusError):
    pass


class DocumentNotFound(TaskStatusError):
    """Raised by DocumentStore.read when the path does not resolve to a document."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File {path} not found")
        self.path = path


class SourceNotFound(TaskStatusError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File {path} not found")
        self.path = path


class NoTasksFound(TaskStatusError):
    """Informational: extraction produced nothing, the target is left untouched."""

    def __init__(self) -> None:
        super().__init__("No tasks found for processing")


class WriteFailure(TaskStatusError):
    pass


class OpenFailure(TaskStatusError):
    pass


class ClipboardFailure(TaskStatusError):
    pass
