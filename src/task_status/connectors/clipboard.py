# src/task_status/connectors/clipboard.py

from __future__ import annotations

import logging
import shlex
import subprocess

import pyperclip

from ..core.errors import ClipboardFailure

logger = logging.getLogger(__name__)


class SystemClipboard:
    """
    Clipboard via pyperclip; falls back to a user-supplied command
    (e.g. "wl-copy" or "xclip -selection clipboard") that reads stdin.
    """

    def __init__(self, fallback_command: str = "") -> None:
        self._fallback = shlex.split(fallback_command) if fallback_command else []

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
            return
        except pyperclip.PyperclipException as e:
            if not self._fallback:
                raise ClipboardFailure("Failed to copy to clipboard") from e
            logger.info("pyperclip unavailable (%s), using %s", e, self._fallback[0])

        try:
            subprocess.run(
                self._fallback,
                input=text,
                text=True,
                encoding="utf-8",
                check=True,
                timeout=10,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ClipboardFailure("Failed to copy to clipboard") from e
