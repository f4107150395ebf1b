# src/task_status/core/models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import StrEnum

from .errors import ConfigurationInvalid

DOCUMENT_SUFFIX = ".md"


class NoticeLevel(StrEnum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class TaskRecord:
    identifier: str
    section: str

    def render(self) -> str:
        return f"{self.identifier} - {self.section}"


@dataclass(frozen=True, slots=True)
class SummaryConfig:
    """
    User-editable configuration, loaded once per invocation.

    allowed_sections keeps the user's order for display; matching treats it as a set.
    """

    source_path: str = ""
    target_path: str = ""
    allowed_sections: tuple[str, ...] = ()
    auto_open: bool = True
    auto_copy: bool = True

    def allowed_set(self) -> frozenset[str]:
        return frozenset(self.allowed_sections)

    def validate(self) -> None:
        """Raise ConfigurationInvalid unless both paths are set and end with .md."""
        if not self.source_path:
            raise ConfigurationInvalid("Source file not specified")
        if not self.target_path:
            raise ConfigurationInvalid("Target file not specified")
        if not self.source_path.endswith(DOCUMENT_SUFFIX) or not self.target_path.endswith(
            DOCUMENT_SUFFIX
        ):
            raise ConfigurationInvalid(f"File paths must end with {DOCUMENT_SUFFIX} extension")

    def with_section(self, section: str, enabled: bool) -> SummaryConfig:
        sections = [s for s in self.allowed_sections if s != section]
        if enabled:
            if section in self.allowed_sections:
                return self
            sections = [*self.allowed_sections, section]
        return replace(self, allowed_sections=tuple(sections))

    @classmethod
    def reset(cls, sections: Iterable[str] = ()) -> SummaryConfig:
        """Defaults, with every known heading pre-selected."""
        return cls(allowed_sections=tuple(sections))


@dataclass(slots=True)
class UpdateReport:
    """
    What an update run did. Failures of later steps never undo earlier ones.

    errors holds the messages of failures that aborted the run or the write;
    open/copy failures show up as opened/copied staying False.
    """

    records: list[TaskRecord] = field(default_factory=list)
    content: str = ""
    written: bool = False
    opened: bool = False
    copied: bool = False
    errors: list[str] = field(default_factory=list)
