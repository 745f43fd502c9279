# src/taskboard/core/state.py

"""
Application state container.

AppState owns the read/render snapshots (tasks, categories, tree, holidays,
notifications) and the view state. Snapshots are never patched in place:
every mutation goes through a repo and is followed by a full reload.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field, replace
from typing import Any

from ..categories.category_models import Category
from ..categories.hierarchy import CategoryTree, build_category_tree
from ..query.engine import DEFAULT_PAGE_SIZE, QueryResult, TaskQuery, clamp_page, run_query
from ..tasks.task_models import Task
from ..util.clock import DEFAULT_UTC_OFFSET_HOURS, fixed_tz
from ..util.clock import today as clock_today
from ..views.calendar import (
    DEFAULT_ENDING_SOON_DAYS,
    DayCell,
    ending_soon,
    month_grid,
    tasks_for_day,
)
from ..views.gantt import GanttRow, gantt_rows
from .ports import CategoryRepo, HolidayMap, HolidaySource, TaskRepo

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ViewState:
    month: dt.date  # first day of the displayed month
    selected: dt.date
    query: TaskQuery = field(default_factory=TaskQuery)


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: Any

    task_repo: TaskRepo
    category_repo: CategoryRepo
    holiday_source: HolidaySource

    tasks: list[Task] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    category_tree: CategoryTree = field(default_factory=list)
    holidays: HolidayMap = field(default_factory=dict)
    notifications: list[Task] = field(default_factory=list)

    view: ViewState | None = None

    def __post_init__(self) -> None:
        if self.view is None:
            day = self.today()
            self.view = ViewState(
                month=day.replace(day=1),
                selected=day,
                query=TaskQuery(page_size=self.page_size),
            )

    # ---- settings-derived values ----

    @property
    def tz(self) -> dt.tzinfo:
        return fixed_tz(getattr(self.settings, "utc_offset_hours", DEFAULT_UTC_OFFSET_HOURS))

    @property
    def page_size(self) -> int:
        return int(getattr(self.settings, "page_size", DEFAULT_PAGE_SIZE))

    @property
    def ending_soon_days(self) -> int:
        return int(getattr(self.settings, "ending_soon_days", DEFAULT_ENDING_SOON_DAYS))

    def today(self) -> dt.date:
        return clock_today(self.tz)


# ---- reload steps ----


def reload_tasks(state: AppState, *, today: dt.date | None = None) -> None:
    """
    Replace the task snapshot and recompute the ending-soon set.

    If the repo call fails the exception propagates and the previous
    snapshot stays in place.
    """
    tasks = state.task_repo.list_tasks()
    day = today or state.today()
    state.tasks = tasks
    state.notifications = ending_soon(tasks, today=day, days=state.ending_soon_days, tz=state.tz)
    logger.debug("Tasks reloaded total=%d ending_soon=%d", len(tasks), len(state.notifications))


def reload_categories(state: AppState) -> None:
    categories = state.category_repo.list_categories()
    state.categories = categories
    state.category_tree = build_category_tree(categories)
    logger.debug("Categories reloaded total=%d", len(categories))


def load_holidays(state: AppState) -> None:
    """Holidays only decorate calendar cells, so a failed load leaves an empty map."""
    try:
        state.holidays = state.holiday_source.load_holidays()
    except Exception:
        logger.warning("Failed to load holidays; calendar shows none.", exc_info=True)
        state.holidays = {}


def refresh(state: AppState) -> None:
    """Startup load: categories, then tasks, then holidays."""
    reload_categories(state)
    reload_tasks(state)
    load_holidays(state)
    logger.info(
        "State loaded tasks=%d categories=%d holiday_years=%d",
        len(state.tasks),
        len(state.categories),
        len(state.holidays),
    )


# ---- view helpers (read-only over the snapshots) ----


def set_query(state: AppState, **changes: Any) -> TaskQuery:
    """Update the all-tasks query; any filter/search/sort change resets to page 1."""
    assert state.view is not None
    if "page" not in changes:
        changes["page"] = 1
    state.view.query = replace(state.view.query, **changes)
    return state.view.query


def all_tasks_page(state: AppState) -> QueryResult:
    assert state.view is not None
    result = run_query(state.tasks, state.view.query)
    page = clamp_page(state.view.query.page, result.page_count)
    if page != state.view.query.page:
        state.view.query = replace(state.view.query, page=page)
        result = run_query(state.tasks, state.view.query)
    return result


def selected_day_tasks(state: AppState) -> list[Task]:
    assert state.view is not None
    return tasks_for_day(state.tasks, state.view.selected, state.tz)


def current_month_grid(state: AppState) -> list[DayCell]:
    assert state.view is not None
    return month_grid(
        state.view.month.year,
        state.view.month.month,
        tasks=state.tasks,
        today=state.today(),
        selected=state.view.selected,
        holidays=state.holidays,
        tz=state.tz,
    )


def gantt_view(state: AppState) -> list[GanttRow]:
    return gantt_rows(state.tasks)
