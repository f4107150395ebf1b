# src/task_status/connectors/opener.py

from __future__ import annotations

import logging
import os
import platform
import shlex
import subprocess
from pathlib import Path

from ..core.errors import OpenFailure

logger = logging.getLogger(__name__)


class SystemOpener:
    """Open a vault document with the desktop's default application."""

    def __init__(self, root: str | Path, command: str = "") -> None:
        self._root = Path(root).expanduser().resolve()
        self._command = shlex.split(command) if command else []

    def _args(self, full: Path) -> list[str] | None:
        if self._command:
            return [*self._command, str(full)]
        system = platform.system()
        if system == "Darwin":
            return ["open", str(full)]
        if system == "Windows":
            return None
        return ["xdg-open", str(full)]

    def open(self, path: str) -> None:
        full = self._root / path
        args = self._args(full)
        try:
            if args is None:
                os.startfile(str(full))  # type: ignore[attr-defined]
            else:
                subprocess.Popen(
                    args,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    start_new_session=True,
                )
        except OSError as e:
            raise OpenFailure(f"Cannot open {path}") from e
        logger.info("Opened %s", full)
