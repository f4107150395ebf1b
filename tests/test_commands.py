# tests/test_commands.py

from __future__ import annotations

from task_status.cli.commands import CommandRegistry, registry
from task_status.core.models import NoticeLevel, SummaryConfig
from task_status.storage.vault_store import VaultDocumentStore


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args):
        seen.append(args)
        return "ok"

    reg.register("run", handler, "run it", aliases=["r"])

    assert reg.handle(state, "/run a b") == "ok"
    assert reg.handle(state, "/R") == "ok"
    assert seen == [["a", "b"], []]
    assert "/run - run it" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_update_command_writes_summary(state) -> None:
    assert registry.handle(state, "/update") == ""
    assert state.documents.docs["Status.md"] == "101 - Active\n102 - Active\n103 - Done"
    assert state.opener.opened == ["Status.md"]
    assert state.clipboard.copied == [state.documents.docs["Status.md"]]
    assert "Updated 3 tasks in Status.md" in state.notifier.messages(NoticeLevel.SUCCESS)


def test_copy_and_open_commands(state) -> None:
    state.documents.docs["Status.md"] = "9 - X"
    registry.handle(state, "/copy")
    registry.handle(state, "/open")
    assert state.clipboard.copied == ["9 - X"]
    assert state.opener.opened == ["Status.md"]


def test_source_and_target_commands_validate_extension(state) -> None:
    assert registry.handle(state, "/source Projects/My Tasks.md") == (
        "Source file set to Projects/My Tasks.md (file does not exist yet)"
    )
    assert state.config_store.config.source_path == "Projects/My Tasks.md"

    reply = registry.handle(state, "/target Status.txt")
    assert reply == "File paths must end with .md extension"
    assert state.config_store.config.target_path == "Status.md"

    assert registry.handle(state, "/target") == "Usage: /target <path.md>"


def test_sections_and_toggle(state) -> None:
    reply = registry.handle(state, "/sections") or ""
    assert "[ ] Active" in reply and "[ ] Done" in reply
    assert "all sections" in reply

    assert registry.handle(state, "/toggle Active") == "Section 'Active' enabled."
    assert state.config_store.config.allowed_sections == ("Active",)
    assert "[x] Active" in (registry.handle(state, "/sections") or "")

    registry.handle(state, "/update")
    assert state.documents.docs["Status.md"] == "101 - Active\n102 - Active"

    assert registry.handle(state, "/toggle Active") == "Section 'Active' disabled."
    assert state.config_store.config.allowed_sections == ()


def test_sections_without_source(state) -> None:
    state.config_store.config = SummaryConfig()
    assert "Sections not found" in (registry.handle(state, "/sections") or "")


def test_flag_commands(state) -> None:
    assert registry.handle(state, "/auto-open off") == "Open after update: OFF."
    assert registry.handle(state, "/auto-copy") == "Copy after update is currently ON. Use on or off."
    assert state.config_store.config.auto_open is False

    registry.handle(state, "/update")
    assert state.opener.opened == []
    assert len(state.clipboard.copied) == 1


def test_files_command(state) -> None:
    assert registry.handle(state, "/files") == "Notes/Other.md\nTasks.md"
    assert registry.handle(state, "/files other") == "Notes/Other.md"
    assert registry.handle(state, "/files zzz") == "No files found"


def test_reset_selects_all_source_sections(state) -> None:
    state.config_store.config = SummaryConfig(
        source_path="Tasks.md", target_path="Status.md", auto_open=False
    )
    assert registry.handle(state, "/reset") == "Settings reset."
    assert state.config_store.config == SummaryConfig(allowed_sections=("Active", "Done"))


def test_status_command(state) -> None:
    reply = registry.handle(state, "/status") or ""
    assert "Source: Tasks.md" in reply
    assert "Sections: (all)" in reply


def test_sections_and_reset_survive_undecodable_source(state, tmp_path) -> None:
    root = tmp_path / "vault"
    root.mkdir()
    (root / "Tasks.md").write_bytes(b"## A\xff\n- [ ] t [[1]]\n")
    state.documents = VaultDocumentStore(root)

    assert "Sections not found" in (registry.handle(state, "/sections") or "")
    assert registry.handle(state, "/reset") == "Settings reset."
    assert state.config_store.config == SummaryConfig()
