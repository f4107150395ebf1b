# src/task_status/core/summary.py

"""
Update pipeline: source document -> task summary -> target document.

Steps after extraction (write, open, copy) are independent: a failure in one
is reported and the others still run. Nothing here raises to the caller;
every outcome is reported through the Notifier and the returned UpdateReport.
"""

from __future__ import annotations

import logging

from .errors import (
    ClipboardFailure,
    DocumentNotFound,
    NoTasksFound,
    OpenFailure,
    SourceNotFound,
    TaskStatusError,
    WriteFailure,
)
from .extract import extract_tasks, format_summary
from .models import NoticeLevel, SummaryConfig, UpdateReport
from .ports import ClipboardWriter, DocumentOpener, DocumentStore, Notifier

logger = logging.getLogger(__name__)

GENERIC_ERROR = "check the log for details"


def friendly_error_message(exc: BaseException) -> str:
    return f"Error: {str(exc) or GENERIC_ERROR}"


def _fail(report: UpdateReport, notifier: Notifier, message: str) -> None:
    report.errors.append(message)
    notifier.notify(message, level=NoticeLevel.ERROR)


def _read_source(config: SummaryConfig, documents: DocumentStore) -> str:
    if not documents.exists(config.source_path):
        raise SourceNotFound(config.source_path)
    try:
        return documents.read(config.source_path)
    except DocumentNotFound as e:
        raise SourceNotFound(config.source_path) from e


def update_summary(
    config: SummaryConfig,
    *,
    documents: DocumentStore,
    clipboard: ClipboardWriter,
    opener: DocumentOpener,
    notifier: Notifier,
) -> UpdateReport:
    report = UpdateReport()
    try:
        config.validate()
        text = _read_source(config, documents)

        report.records = extract_tasks(text, config.allowed_set())
        if not report.records:
            raise NoTasksFound()
        report.content = format_summary(report.records)
        logger.info(
            "Extracted %d tasks from %s (sections filter=%s)",
            len(report.records),
            config.source_path,
            sorted(config.allowed_set()) or "all",
        )
    except NoTasksFound as e:
        logger.info("No tasks in %s", config.source_path)
        notifier.notify(str(e), level=NoticeLevel.INFO)
        return report
    except TaskStatusError as e:
        logger.warning("Update aborted: %s", e)
        _fail(report, notifier, str(e))
        return report
    except Exception as e:
        logger.exception("Update failed.")
        _fail(report, notifier, friendly_error_message(e))
        return report

    try:
        documents.write(config.target_path, report.content)
        report.written = True
        notifier.notify(
            f"Updated {len(report.records)} tasks in {config.target_path}",
            level=NoticeLevel.SUCCESS,
        )
    except WriteFailure as e:
        logger.error("Write failed: %s", e)
        _fail(report, notifier, str(e))
    except Exception:
        logger.exception("Failed to write %s", config.target_path)
        _fail(report, notifier, f"Failed to write {config.target_path}")

    if config.auto_open:
        report.opened = open_status_file(
            config.target_path, documents=documents, opener=opener, notifier=notifier
        )

    if config.auto_copy:
        report.copied = _copy(report.content, clipboard=clipboard, notifier=notifier)
        if report.copied:
            notifier.notify("Status copied to clipboard", level=NoticeLevel.SUCCESS)

    return report


def open_status_file(
    path: str,
    *,
    documents: DocumentStore,
    opener: DocumentOpener,
    notifier: Notifier,
) -> bool:
    if not documents.exists(path):
        notifier.notify(f"Status file {path} not found", level=NoticeLevel.ERROR)
        return False
    try:
        opener.open(path)
    except Exception as e:
        logger.error("Failed to open %s: %s", path, e, exc_info=not isinstance(e, OpenFailure))
        notifier.notify("Error opening file", level=NoticeLevel.ERROR)
        return False
    return True


def _copy(text: str, *, clipboard: ClipboardWriter, notifier: Notifier) -> bool:
    try:
        clipboard.copy(text)
    except Exception as e:
        logger.error("Copy error: %s", e, exc_info=not isinstance(e, ClipboardFailure))
        notifier.notify("Failed to copy to clipboard", level=NoticeLevel.ERROR)
        return False
    return True


def copy_status(
    config: SummaryConfig,
    *,
    documents: DocumentStore,
    clipboard: ClipboardWriter,
    notifier: Notifier,
) -> bool:
    """Copy the current target document (as last written) to the clipboard."""
    path = config.target_path
    if not path:
        notifier.notify("Target file not specified", level=NoticeLevel.ERROR)
        return False
    try:
        text = documents.read(path)
    except DocumentNotFound:
        notifier.notify(f"Status file {path} not found", level=NoticeLevel.ERROR)
        return False
    except Exception:
        logger.exception("Failed to read %s", path)
        notifier.notify("Copy error", level=NoticeLevel.ERROR)
        return False

    if not _copy(text, clipboard=clipboard, notifier=notifier):
        return False
    notifier.notify("Task status copied to clipboard", level=NoticeLevel.SUCCESS)
    return True
