# src/task_status/cli/main.py

"""
CLI entrypoint.

    task-status update        run one command and exit
    task-status               interactive console (/help, /exit)
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_command, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, file_level=file_level)

    logger.info("Starting %s (vault=%s)", settings.app_name, settings.vault_dir)
    state = create_initial_state(settings=settings)

    if not args:
        run_console_loop(state)
        logger.info("Bye.")
        return 0

    name = args[0].lstrip("/")
    reply = run_command(state, "/" + " ".join([name, *args[1:]]))
    if reply:
        print(reply)
    return 0


if __name__ == "__main__":
    sys.exit(main())
