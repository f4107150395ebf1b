# src/task_status/storage/vault_store.py

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path, PurePosixPath

from ..core.errors import DocumentNotFound, WriteFailure
from ..core.models import DOCUMENT_SUFFIX

logger = logging.getLogger(__name__)


class VaultDocumentStore:
    """
    Markdown documents inside one directory ("vault").

    Paths are vault-relative POSIX strings, e.g. "Projects/Tasks.md".
    A path that escapes the vault never resolves to a document.
    Writes are atomic: temp file in the same folder + os.replace.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).expanduser().resolve()
        logger.info("VaultDocumentStore ready root=%s", self._root)

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, path: str) -> Path | None:
        rel = PurePosixPath(path.strip())
        if not str(rel) or rel.is_absolute():
            return None
        full = (self._root / rel).resolve()
        if full != self._root and self._root not in full.parents:
            return None
        return full

    def exists(self, path: str) -> bool:
        full = self._resolve(path)
        return full is not None and full.is_file()

    def read(self, path: str) -> str:
        full = self._resolve(path)
        if full is None or not full.is_file():
            raise DocumentNotFound(path)
        return full.read_text("utf-8")

    def write(self, path: str, text: str) -> None:
        full = self._resolve(path)
        if full is None:
            raise WriteFailure(f"Invalid document path: {path}")
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=full.parent, prefix=".", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                    fh.write(text)
                os.replace(tmp_name, full)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.exception("Failed to write %s", full)
            raise WriteFailure(f"Failed to write {path}") from e
        logger.debug("Wrote %d chars to %s", len(text), full)

    def list_paths(self) -> list[str]:
        out: list[str] = []
        for p in self._root.rglob(f"*{DOCUMENT_SUFFIX}"):
            rel = p.relative_to(self._root)
            if not p.is_file() or any(part.startswith(".") for part in rel.parts):
                continue
            out.append(rel.as_posix())
        return sorted(out)


def find_documents(paths: list[str], query: str = "") -> list[str]:
    """Case-insensitive substring filter over document paths."""
    q = query.strip().lower()
    if not q:
        return list(paths)
    return [p for p in paths if q in p.lower()]
