# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a working default, so a bare checkout runs locally.
- Tests build their own settings objects instead of reading the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Local .env never overrides variables already set in the environment.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


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

    # ---- Storage documents ----
    data_dir: Path
    tasks_path: Path
    categories_path: Path
    holidays_path: Path
    static_dir: Path

    # ---- HTTP server ----
    host: str
    port: int
    cors_origins: list[str]

    # ---- Remote API (console over HTTP); empty means use local files ----
    api_base_url: str
    api_connect_timeout: float
    api_read_timeout: float

    # ---- Calendar / views ----
    utc_offset_hours: float
    page_size: int
    ending_soon_days: int

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))

        page_size = _env_int(_k("PAGE_SIZE"), 5)
        if page_size <= 0:
            page_size = 5

        return Settings(
            app_name=_env(_k("APP_NAME"), "taskboard"),
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=data_dir,
            tasks_path=_env_path(_k("TASKS_PATH"), data_dir / "tasks.json"),
            categories_path=_env_path(_k("CATEGORIES_PATH"), data_dir / "categories.json"),
            holidays_path=_env_path(_k("HOLIDAYS_PATH"), data_dir / "holidays.json"),
            static_dir=_env_path(_k("STATIC_DIR"), Path("static")),
            host=_env(_k("HOST"), "127.0.0.1"),
            port=_env_int(_k("PORT"), 3000),
            cors_origins=_env_list(_k("CORS_ORIGINS"), ["*"]),
            api_base_url=_env(_k("API_BASE_URL"), "").strip(),
            api_connect_timeout=_env_float(_k("API_CONNECT_TIMEOUT_SECONDS"), 5.0),
            api_read_timeout=_env_float(_k("API_READ_TIMEOUT_SECONDS"), 10.0),
            utc_offset_hours=_env_float(_k("UTC_OFFSET_HOURS"), 9.0),
            page_size=page_size,
            ending_soon_days=_env_int(_k("ENDING_SOON_DAYS"), 7),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
