# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.categories.category_store import CategoryStore
from taskboard.core.state import AppState
from taskboard.storage.holidays import HolidayFile
from taskboard.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState, the server and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        # Paths (tmp per test run)
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        categories_path=tmp_path / "categories.json",
        holidays_path=tmp_path / "holidays.json",
        static_dir=tmp_path / "static",
        # HTTP
        host="127.0.0.1",
        port=3000,
        cors_origins=["*"],
        api_base_url="",
        api_connect_timeout=1.0,
        api_read_timeout=1.0,
        # Views
        utc_offset_hours=9.0,
        page_size=5,
        ending_soon_days=7,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with the real JSON stores.

    NOTE: We keep the file-backed stores here because the full
    mutate-then-reload cycle is part of what we want to test.
    """
    return AppState(
        settings=settings,
        task_repo=TaskStore(settings.tasks_path),
        category_repo=CategoryStore(settings.categories_path),
        holiday_source=HolidayFile(settings.holidays_path),
    )
