# src/task_status/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from ..core.errors import ConfigurationInvalid, DocumentNotFound, TaskStatusError
from ..core.extract import list_sections
from ..core.models import DOCUMENT_SUFFIX, SummaryConfig
from ..core.state import AppState
from ..core.summary import copy_status, open_status_file, update_summary
from ..storage.vault_store import find_documents

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console loop and the one-shot CLI."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string ("" when the command only notified) or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."
        try:
            return handler(state, parts[1:])
        except TaskStatusError as e:
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _on_off(value: bool) -> str:
    return "ON" if value else "OFF"


def _parse_on_off(args: list[str]) -> bool | None:
    if not args:
        return None
    arg = args[0].lower()
    if arg in ("on", "1", "true", "yes"):
        return True
    if arg in ("off", "0", "false", "no"):
        return False
    return None


def _source_sections(state: AppState, config: SummaryConfig) -> list[str]:
    if not config.source_path:
        return []
    try:
        return list_sections(state.documents.read(config.source_path))
    except DocumentNotFound:
        return []
    except (UnicodeDecodeError, OSError):
        logger.exception("Error reading sections of %s", config.source_path)
        return []


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    config = state.config_store.load()
    sections = ", ".join(config.allowed_sections) or "(all)"
    return (
        "Settings:\n"
        f"  Source: {config.source_path or '(not set)'}\n"
        f"  Target: {config.target_path or '(not set)'}\n"
        f"  Sections: {sections}\n"
        f"  Open after update: {_on_off(config.auto_open)}\n"
        f"  Copy after update: {_on_off(config.auto_copy)}"
    )


def cmd_update(state: AppState, args: list[str]) -> str:
    config = state.config_store.load()
    report = update_summary(
        config,
        documents=state.documents,
        clipboard=state.clipboard,
        opener=state.opener,
        notifier=state.notifier,
    )
    logger.info(
        "Update done: tasks=%d written=%s opened=%s copied=%s",
        len(report.records),
        report.written,
        report.opened,
        report.copied,
    )
    return ""


def cmd_copy(state: AppState, args: list[str]) -> str:
    copy_status(
        state.config_store.load(),
        documents=state.documents,
        clipboard=state.clipboard,
        notifier=state.notifier,
    )
    return ""


def cmd_open(state: AppState, args: list[str]) -> str:
    config = state.config_store.load()
    if not config.target_path:
        return "Target file not specified."
    open_status_file(
        config.target_path,
        documents=state.documents,
        opener=state.opener,
        notifier=state.notifier,
    )
    return ""


def cmd_files(state: AppState, args: list[str]) -> str:
    """
    /files          -> all markdown documents
    /files <query>  -> documents whose path contains <query> (case-insensitive)
    """
    found = find_documents(state.documents.list_paths(), " ".join(args))
    if not found:
        return "No files found"
    return "\n".join(found)


def cmd_sections(state: AppState, args: list[str]) -> str:
    config = state.config_store.load()
    sections = _source_sections(state, config)
    if not sections:
        return 'Sections not found. Set a source file with /source <path> and try again.'
    allowed = config.allowed_set()
    lines = [f"Sections in {config.source_path}:"]
    for s in sections:
        mark = "x" if s in allowed else " "
        lines.append(f"  [{mark}] {s}")
    if not allowed:
        lines.append("No sections selected: tasks from all sections are included.")
    return "\n".join(lines)


def _set_path(state: AppState, args: list[str], field_name: str, label: str) -> str:
    path = " ".join(args).strip()
    if not path:
        return f"Usage: /{label} <path{DOCUMENT_SUFFIX}>"
    if not path.endswith(DOCUMENT_SUFFIX):
        raise ConfigurationInvalid(f"File paths must end with {DOCUMENT_SUFFIX} extension")
    config = replace(state.config_store.load(), **{field_name: path})
    state.config_store.save(config)
    return f"{label.capitalize()} file set to {path}"


def cmd_source(state: AppState, args: list[str]) -> str:
    reply = _set_path(state, args, "source_path", "source")
    if args and not state.documents.exists(" ".join(args).strip()):
        reply += " (file does not exist yet)"
    return reply


def cmd_target(state: AppState, args: list[str]) -> str:
    return _set_path(state, args, "target_path", "target")


def cmd_toggle(state: AppState, args: list[str]) -> str:
    section = " ".join(args).strip()
    if not section:
        return "Usage: /toggle <section name>"
    config = state.config_store.load()
    enabled = section not in config.allowed_sections
    state.config_store.save(config.with_section(section, enabled))
    return f"Section '{section}' {'enabled' if enabled else 'disabled'}."


def _cmd_flag(field_name: str, label: str) -> CommandHandler:
    def handler(state: AppState, args: list[str]) -> str:
        config = state.config_store.load()
        current = getattr(config, field_name)
        value = _parse_on_off(args)
        if value is None:
            return f"{label} is currently {_on_off(current)}. Use on or off."
        state.config_store.save(replace(config, **{field_name: value}))
        return f"{label}: {_on_off(value)}."

    return handler


def cmd_reset(state: AppState, args: list[str]) -> str:
    sections = _source_sections(state, state.config_store.load())
    state.config_store.save(SummaryConfig.reset(sections))
    return "Settings reset."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show current settings.")
registry.register("update", cmd_update, help_text="Rebuild the task summary.", aliases=["u"])
registry.register("copy", cmd_copy, help_text="Copy the current summary to the clipboard.")
registry.register("open", cmd_open, help_text="Open the summary file.")
registry.register("files", cmd_files, help_text="List documents: /files [search].")
registry.register("sections", cmd_sections, help_text="List headings of the source file.")
registry.register("source", cmd_source, help_text="Set the source file: /source <path.md>.")
registry.register("target", cmd_target, help_text="Set the summary file: /target <path.md>.")
registry.register("toggle", cmd_toggle, help_text="Include/exclude a section: /toggle <name>.")
registry.register(
    "auto-open",
    _cmd_flag("auto_open", "Open after update"),
    help_text="Open the summary after update: /auto-open on | off.",
)
registry.register(
    "auto-copy",
    _cmd_flag("auto_copy", "Copy after update"),
    help_text="Copy the summary after update: /auto-copy on | off.",
)
registry.register(
    "reset", cmd_reset, help_text="Reset settings (all source headings selected)."
)
