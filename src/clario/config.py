# src/clario/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a local-dev default.
- The API base URL is injected into the client, never read as a global.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "CLARIO"

DEFAULT_API_BASE_URL = "http://localhost:8080/api"
DEFAULT_MESSAGE_TTL_SECONDS = 5.0


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Real environment variables take precedence over .env values.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


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

    # ---- Backend ----
    api_base_url: str
    http_timeout_seconds: float

    # ---- UI ----
    message_ttl_seconds: float

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "clario").strip() or "clario"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        # Trailing slashes would make httpx join "/api//todos".
        api_base_url = _env(_k("API_BASE_URL"), DEFAULT_API_BASE_URL).strip().rstrip("/")
        if not api_base_url:
            api_base_url = DEFAULT_API_BASE_URL

        return Settings(
            app_name=app_name,
            log_level=log_level,
            api_base_url=api_base_url,
            http_timeout_seconds=_env_float(_k("HTTP_TIMEOUT_SECONDS"), 10.0),
            message_ttl_seconds=_env_float(
                _k("MESSAGE_TTL_SECONDS"), DEFAULT_MESSAGE_TTL_SECONDS
            ),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/clario")),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
