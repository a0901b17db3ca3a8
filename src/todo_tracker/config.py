# src/todo_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

Defaults reproduce the plain behavior: tasks live in ./todos.json and
nothing but warnings reaches stderr.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


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


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    tasks_path: Path
    strict_load: bool

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            tasks_path=_env_path(_k("TASKS_PATH"), Path("todos.json")),
            strict_load=_env_bool(_k("STRICT_LOAD"), False),
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            log_file=_env_optional_path(_k("LOG_FILE")),
        )


def get_settings() -> Settings:
    """Read settings fresh from the environment (a local .env never overrides it)."""
    load_dotenv(override=False)
    return Settings.from_env()
