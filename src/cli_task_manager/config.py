# src/cli_task_manager/config.py

"""Settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per invocation, passed explicitly.
- Sensible defaults: nothing has to be configured for normal use.
- Task file lives in the OS-standard per-user data directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from platformdirs import user_data_dir

ENV_PREFIX = "TASKS"

APP_NAME = "cli_task_manager"
APP_AUTHOR = "mwirigi"
TASKS_FILENAME = "tasks.json"


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


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def default_data_dir() -> Path:
    # Local (non-roaming) data dir, e.g. ~/.local/share/cli_task_manager on Linux.
    return Path(user_data_dir(APP_NAME, APP_AUTHOR, roaming=False))


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Logging ----
    log_level: str
    log_file: Path | None

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_optional_path(_k("LOG_FILE"))

        data_dir = _env_path(_k("DATA_DIR"), default_data_dir())
        tasks_path = _env_path(_k("FILE"), data_dir / TASKS_FILENAME)

        return Settings(
            log_level=log_level,
            log_file=log_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
        )


def get_settings() -> Settings:
    """Resolve settings from the current environment (a local .env is read first, never overriding)."""
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
