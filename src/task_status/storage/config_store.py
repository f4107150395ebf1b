# src/task_status/storage/config_store.py

"""
Persisted SummaryConfig (JSON).

On-disk shape (version 1):
    {"version": 1, "source_path": "...", "target_path": "...",
     "allowed_sections": [...], "auto_open": true, "auto_copy": true}

Version 0 is the legacy shape: camelCase keys (sourceFile, targetFile, ...)
and allowedSections possibly stored as one comma-separated string.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.models import SummaryConfig

logger = logging.getLogger(__name__)

CONFIG_VERSION = 1

_LEGACY_KEYS = {
    "sourceFile": "source_path",
    "targetFile": "target_path",
    "allowedSections": "allowed_sections",
    "autoOpen": "auto_open",
    "autoCopy": "auto_copy",
}


def _split_sections(raw: str) -> list[str]:
    return [s.strip() for s in raw.split(",") if s.strip()]


def _migrate_v0(data: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in data.items():
        out[_LEGACY_KEYS.get(key, key)] = value
    sections = out.get("allowed_sections")
    if isinstance(sections, str):
        out["allowed_sections"] = _split_sections(sections)
    out["version"] = 1
    return out


_MIGRATIONS = {
    0: _migrate_v0,
}


def migrate_config(data: dict[str, Any]) -> dict[str, Any]:
    """Upgrade a raw config mapping to CONFIG_VERSION, one step at a time."""
    version = data.get("version", 0)
    if not isinstance(version, int) or version > CONFIG_VERSION:
        raise ValueError(f"Unsupported config version: {version!r}")
    while version < CONFIG_VERSION:
        data = _MIGRATIONS[version](dict(data))
        version = data["version"]
    return data


def _as_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def config_from_dict(data: dict[str, Any]) -> SummaryConfig:
    """Migrate, then merge onto defaults. Unknown keys and bad types are ignored."""
    data = migrate_config(data)
    defaults = SummaryConfig()

    sections_raw = data.get("allowed_sections", [])
    sections: list[str] = []
    if isinstance(sections_raw, list):
        for s in sections_raw:
            if isinstance(s, str) and s not in sections:
                sections.append(s)

    source = data.get("source_path")
    target = data.get("target_path")
    return SummaryConfig(
        source_path=source if isinstance(source, str) else defaults.source_path,
        target_path=target if isinstance(target, str) else defaults.target_path,
        allowed_sections=tuple(sections),
        auto_open=_as_bool(data.get("auto_open"), defaults.auto_open),
        auto_copy=_as_bool(data.get("auto_copy"), defaults.auto_copy),
    )


def config_to_dict(config: SummaryConfig) -> dict[str, Any]:
    return {
        "version": CONFIG_VERSION,
        "source_path": config.source_path,
        "target_path": config.target_path,
        "allowed_sections": list(config.allowed_sections),
        "auto_open": config.auto_open,
        "auto_copy": config.auto_copy,
    }


class JsonConfigStore:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backup_path(self) -> Path:
        return self._path.with_name(self._path.name + ".bak")

    def _set_aside(self) -> None:
        """Keep an unreadable file as <name>.bak so a later save cannot clobber it."""
        try:
            os.replace(self._path, self.backup_path)
        except OSError:
            logger.exception("Failed to move %s aside", self._path)
            return
        logger.warning("Unreadable config moved to %s, using defaults", self.backup_path)

    def load(self) -> SummaryConfig:
        if not self._path.exists():
            return SummaryConfig()
        try:
            data = json.loads(self._path.read_text("utf-8"))
            if not isinstance(data, dict):
                raise ValueError("config root is not an object")
            config = config_from_dict(data)
        except Exception:
            logger.exception("Failed to load config from %s", self._path)
            self._set_aside()
            return SummaryConfig()
        logger.debug("Loaded config from %s", self._path)
        return config

    def save(self, config: SummaryConfig) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(config_to_dict(config), ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        logger.info("Saved config to %s", self._path)
