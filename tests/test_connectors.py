# tests/test_connectors.py

from __future__ import annotations

import io
import subprocess

import pyperclip
import pytest

from task_status.connectors import clipboard as clipboard_mod
from task_status.connectors import opener as opener_mod
from task_status.connectors.clipboard import SystemClipboard
from task_status.connectors.notifier import ConsoleNotifier
from task_status.connectors.opener import SystemOpener
from task_status.core.errors import ClipboardFailure, OpenFailure
from task_status.core.models import NoticeLevel


def _no_backend(text: str) -> None:
    raise pyperclip.PyperclipException("no clipboard mechanism")


def test_clipboard_uses_pyperclip(monkeypatch: pytest.MonkeyPatch) -> None:
    copied: list[str] = []
    monkeypatch.setattr(clipboard_mod.pyperclip, "copy", copied.append)
    SystemClipboard().copy("1 - A")
    assert copied == ["1 - A"]


def test_clipboard_without_fallback_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(clipboard_mod.pyperclip, "copy", _no_backend)
    with pytest.raises(ClipboardFailure):
        SystemClipboard().copy("x")


def test_clipboard_fallback_command(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[list[str], str]] = []

    def fake_run(args, *, input, **kwargs):
        calls.append((args, input))
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(clipboard_mod.pyperclip, "copy", _no_backend)
    monkeypatch.setattr(clipboard_mod.subprocess, "run", fake_run)

    SystemClipboard(fallback_command="xclip -selection clipboard").copy("1 - A")
    assert calls == [(["xclip", "-selection", "clipboard"], "1 - A")]


def test_clipboard_fallback_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(clipboard_mod.pyperclip, "copy", _no_backend)
    monkeypatch.setattr(clipboard_mod.subprocess, "run", fake_run)
    with pytest.raises(ClipboardFailure):
        SystemClipboard(fallback_command="wl-copy").copy("x")


def test_opener_custom_command(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    launched: list[list[str]] = []

    def fake_popen(args, **kwargs):
        launched.append(args)

    monkeypatch.setattr(opener_mod.subprocess, "Popen", fake_popen)
    SystemOpener(tmp_path, command="code --reuse-window").open("Out/Status.md")
    assert launched == [["code", "--reuse-window", str(tmp_path.resolve() / "Out/Status.md")]]


def test_opener_failure(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    def fake_popen(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(opener_mod.subprocess, "Popen", fake_popen)
    with pytest.raises(OpenFailure):
        SystemOpener(tmp_path, command="missing-editor").open("Status.md")


def test_console_notifier_format() -> None:
    out = io.StringIO()
    ConsoleNotifier(out).notify("Updated 3 tasks in Status.md", level=NoticeLevel.SUCCESS)
    line = out.getvalue()
    assert line.endswith("[OK] Updated 3 tasks in Status.md\n")
    assert line.startswith("[")
