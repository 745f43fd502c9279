# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from taskboard.config import Settings
from taskboard.logging_setup import _ConsoleNoiseFilter


def test_defaults(monkeypatch) -> None:
    for name in ("DATA_DIR", "PAGE_SIZE", "PORT", "CORS_ORIGINS", "TASKS_PATH", "UTC_OFFSET_HOURS"):
        monkeypatch.delenv(f"TASKBOARD_{name}", raising=False)

    s = Settings.from_env()

    assert s.data_dir == Path(".local/taskboard")
    assert s.tasks_path == Path(".local/taskboard/tasks.json")
    assert s.port == 3000
    assert s.page_size == 5
    assert s.utc_offset_hours == 9.0
    assert s.cors_origins == ["*"]


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKBOARD_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKBOARD_PAGE_SIZE", "0")
    monkeypatch.setenv("TASKBOARD_PORT", "not-a-number")
    monkeypatch.setenv("TASKBOARD_CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("TASKBOARD_ENDING_SOON_DAYS", "3")

    s = Settings.from_env()

    assert s.categories_path == tmp_path / "categories.json"
    assert s.page_size == 5
    assert s.port == 3000
    assert s.cors_origins == ["http://a.test", "http://b.test"]
    assert s.ending_soon_days == 3


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_hides_third_party_noise() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("taskboard.core.state", logging.DEBUG))
    assert f.filter(_record("uvicorn.error", logging.INFO))
    assert not f.filter(_record("uvicorn.access", logging.INFO))
    assert not f.filter(_record("httpx", logging.WARNING))
    assert f.filter(_record("httpx", logging.ERROR))
