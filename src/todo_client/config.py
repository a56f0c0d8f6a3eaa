# src/todo_client/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time.
- The Task Store base URL is configuration, never a literal inside the controller.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TODO"

DEFAULT_BASE_URL = "https://todo-fast-app.onrender.com"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


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

    # ---- Task Store ----
    base_url: str
    # None => no timeout (requests settle whenever the server answers)
    request_timeout_seconds: float | None

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        base_url = _env(_k("BASE_URL"), DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL
        base_url = base_url.rstrip("/")

        timeout = _env_float(_k("REQUEST_TIMEOUT_SECONDS"), 0.0)
        request_timeout_seconds = timeout if timeout > 0 else None

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            base_url=base_url,
            request_timeout_seconds=request_timeout_seconds,
            data_dir=data_dir,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Load settings once (reads .env on first call)."""
    global _settings
    if _settings is None:
        _load_dotenv_if_available()
        _settings = Settings.from_env()
    return _settings
