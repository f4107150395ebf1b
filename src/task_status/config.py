# src/task_status/config.py

"""Application settings loaded from environment variables (+ optional .env).

These are process-level settings (where the vault lives, where logs go).
The user-editable summary configuration (source/target/sections/flags) is a
separate persisted value, see ``task_status.storage.config_store``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_STATUS"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Paths ----
    vault_dir: Path
    data_dir: Path
    config_path: Path

    # ---- Host commands (empty => built-in behaviour) ----
    clipboard_command: str
    open_command: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-status").strip() or "task-status"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        vault_dir = _env_path(_k("VAULT_DIR"), Path("."))
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task-status"))
        config_path = _env_path(_k("CONFIG_PATH"), data_dir / "config.json")

        clipboard_command = _env(_k("CLIPBOARD_COMMAND")).strip()
        open_command = _env(_k("OPEN_COMMAND")).strip()

        return Settings(
            app_name=app_name,
            log_level=log_level,
            vault_dir=vault_dir,
            data_dir=data_dir,
            config_path=config_path,
            clipboard_command=clipboard_command,
            open_command=open_command,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
