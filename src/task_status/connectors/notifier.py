# src/task_status/connectors/notifier.py

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import TextIO

from ..core.models import NoticeLevel

logger = logging.getLogger(__name__)

_PREFIX = {
    NoticeLevel.INFO: "[INFO]",
    NoticeLevel.SUCCESS: "[OK]",
    NoticeLevel.ERROR: "[ERROR]",
}


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleNotifier:
    """Print notifications as timestamped lines."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def notify(self, message: str, *, level: NoticeLevel = NoticeLevel.INFO) -> None:
        logger.debug("notice level=%s message=%s", level, message)
        stream = self._stream or sys.stdout
        print(f"[{_ts_local()}] {_PREFIX[level]} {message}", file=stream, flush=True)
