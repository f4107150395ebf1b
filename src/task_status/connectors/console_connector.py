# src/task_status/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_command(state: AppState, line: str) -> str | None:
    """Run one slash command; handler crashes become a short reply."""
    try:
        return command_registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command. Check the log for details."


def run_console_loop(state: AppState) -> None:
    logger.info("Console started.")
    print("Type /help for commands, /update to rebuild the summary, /exit to quit.")

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            user_input = "/" + user_input

        reply = run_command(state, user_input)
        if reply:
            print(reply)
