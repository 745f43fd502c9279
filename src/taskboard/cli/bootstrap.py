# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires either the local JSON stores or the HTTP client into AppState,
- performs the initial full load.
"""

from __future__ import annotations

import logging

from ..categories.category_store import CategoryStore
from ..client.api_client import ApiClient, HttpCategoryRepo, HttpHolidaySource, HttpTaskRepo
from ..config import get_settings
from ..core.state import AppState, refresh
from ..storage.holidays import HolidayFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    settings.categories_path.parent.mkdir(parents=True, exist_ok=True)
    settings.holidays_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, remote_url: str | None = None) -> AppState:
    """
    Create and load AppState.

    remote_url (or settings.api_base_url) switches the ports to the HTTP client;
    otherwise the JSON documents under settings.data_dir are used directly.
    """
    if settings is None:
        settings = get_settings()

    base_url = remote_url or getattr(settings, "api_base_url", "")
    if base_url:
        api = ApiClient(
            base_url,
            connect_timeout=float(getattr(settings, "api_connect_timeout", 5.0)),
            read_timeout=float(getattr(settings, "api_read_timeout", 10.0)),
        )
        state = AppState(
            settings=settings,
            task_repo=HttpTaskRepo(api),
            category_repo=HttpCategoryRepo(api),
            holiday_source=HttpHolidaySource(api),
        )
        logger.info("Using remote API at %s", base_url)
    else:
        _ensure_local_dirs(settings)
        state = AppState(
            settings=settings,
            task_repo=TaskStore(settings.tasks_path),
            category_repo=CategoryStore(settings.categories_path),
            holiday_source=HolidayFile(settings.holidays_path),
        )
        logger.info("Using local documents under %s", settings.data_dir)

    try:
        refresh(state)
    except Exception:
        close_state(state)
        raise
    return state


def close_state(state: AppState) -> None:
    """Release port resources (the shared HTTP client in remote mode)."""
    for port in (state.task_repo, state.category_repo, state.holiday_source):
        close = getattr(port, "close", None)
        if callable(close):
            close()
