# src/task_status/core/extract.py

"""
Task extraction from a markdown document.

A task line is a checkbox item ("- [ ]" or "- [x]") whose text contains a
wiki-link starting with a numeric id: "[[101]]" or "[[101|alias]]".
Tasks are grouped by the nearest preceding "## " heading.

Everything here is pure: no I/O, no state kept between calls.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Set

from .models import TaskRecord

SECTION_PREFIX = "## "

# Checkbox is case-sensitive: "[X]" does not qualify.
# Digits must be followed directly by "]" or "|", so "[[42abc]]" is rejected.
TASK_REGEX = re.compile(
    r"^\s*"  # indentation
    r"-\s*"  # list marker
    r"\[[ x]\]"  # checkbox
    r".*?"  # task text, shortest run up to the first "[["
    r"\[\["  # wiki-link open
    r"([0-9]+)"  # identifier, ASCII digits only
    r"(?:\]|\|)"  # link close or alias separator
)


def heading_label(line: str) -> str | None:
    """Return the section label if `line` is a level-2 heading, else None."""
    if line.startswith(SECTION_PREFIX):
        return line[len(SECTION_PREFIX) :].strip()
    return None


def next_section(line: str, current: str) -> str:
    label = heading_label(line)
    return current if label is None else label


def _may_be_task(line: str) -> bool:
    return line.startswith("- [") or "[[" in line


def match_task(line: str, section: str, allowed: Set[str] = frozenset()) -> TaskRecord | None:
    """
    Recognize a single non-heading line.

    Only the first wiki-link on the line is considered. Completion state is
    parsed but not reported.
    """
    if not _may_be_task(line):
        return None
    m = TASK_REGEX.match(line)
    if m is None:
        return None
    if allowed and section not in allowed:
        return None
    return TaskRecord(identifier=m.group(1), section=section)


def extract_tasks(text: str, allowed: Set[str] = frozenset()) -> list[TaskRecord]:
    """Single pass over `text`; records come back in document order."""
    records: list[TaskRecord] = []
    section = ""
    for line in text.split("\n"):
        label = heading_label(line)
        if label is not None:
            section = label
            continue
        record = match_task(line, section, allowed)
        if record is not None:
            records.append(record)
    return records


def format_summary(records: Iterable[TaskRecord]) -> str:
    return "\n".join(r.render() for r in records)


def list_sections(text: str) -> list[str]:
    """Distinct "## " labels in first-seen order."""
    seen: list[str] = []
    for line in text.split("\n"):
        label = heading_label(line)
        if label is not None and label not in seen:
            seen.append(label)
    return seen
