# src/taskboard/query/engine.py

"""
Filter/search/sort/paginate pipeline for the all-tasks view.

The pipeline is a pure function of (tasks, query): it never mutates its input
and returns the same ordered page for the same arguments.

Stage order is fixed:
1. status filter
2. priority filter
3. search (text OR category path)
4. sort (stable; missing dates count as 1970-01-01)
5. paginate
"""

from __future__ import annotations

import datetime as dt
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..tasks.task_models import Task
from ..util.clock import parse_day

ALL = "all"
# Sentinel used by the original UI filter buttons.
_ALL_ALIASES = frozenset({ALL, "전체", ""})

DEFAULT_PAGE_SIZE = 5

_EPOCH = dt.date(1970, 1, 1)


class SearchMode(StrEnum):
    TEXT = "text"
    CATEGORY = "category"


class SortField(StrEnum):
    END_DATE = "endDate"
    START_DATE = "startDate"
    TASK_NAME = "taskName"
    STATUS = "status"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class TaskQuery:
    status: str = ALL
    priority: str = ALL

    search_mode: SearchMode = SearchMode.TEXT
    text: str = ""
    category1: str = ""
    category2: str = ""
    category3: str = ""

    sort_field: SortField = SortField.END_DATE
    sort_direction: SortDirection = SortDirection.ASC

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True, slots=True)
class QueryResult:
    items: list[Task]
    total: int
    page: int
    page_size: int
    page_count: int


def _is_all(value: str) -> bool:
    return value in _ALL_ALIASES


def _matches_text(task: Task, term: str) -> bool:
    needle = term.lower()
    return needle in task.task_name.lower() or needle in task.description.lower()


def _search(tasks: list[Task], q: TaskQuery) -> list[Task]:
    if q.search_mode == SearchMode.TEXT:
        if not q.text:
            return tasks
        return [t for t in tasks if _matches_text(t, q.text)]

    if q.category1:
        tasks = [t for t in tasks if t.category1 == q.category1]
    if q.category2:
        tasks = [t for t in tasks if t.category2 == q.category2]
    if q.category3:
        tasks = [t for t in tasks if t.category3 == q.category3]
    return tasks


def _sort_key(field: SortField) -> Callable[[Task], Any]:
    if field == SortField.END_DATE:
        return lambda t: parse_day(t.end_date) or _EPOCH
    if field == SortField.START_DATE:
        return lambda t: parse_day(t.start_date) or _EPOCH
    if field == SortField.TASK_NAME:
        return lambda t: t.task_name.lower()
    return lambda t: str(t.status)


def filter_and_sort(tasks: Sequence[Task], q: TaskQuery) -> list[Task]:
    """Stages 1-4 of the pipeline."""
    out = list(tasks)
    if not _is_all(q.status):
        out = [t for t in out if t.status == q.status]
    if not _is_all(q.priority):
        out = [t for t in out if t.priority == q.priority]
    out = _search(out, q)
    # sorted() is stable for reverse=True as well, so ties keep source order.
    return sorted(
        out,
        key=_sort_key(SortField(q.sort_field)),
        reverse=q.sort_direction == SortDirection.DESC,
    )


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return math.ceil(total / page_size)


def clamp_page(page: int, pages: int) -> int:
    """Clamp a requested page number into [1, pages]; page 1 when there are no pages."""
    return max(1, min(page, max(pages, 1)))


def run_query(tasks: Sequence[Task], q: TaskQuery) -> QueryResult:
    ordered = filter_and_sort(tasks, q)
    total = len(ordered)
    pages = page_count(total, q.page_size)

    if q.page < 1:
        items: list[Task] = []
    else:
        start = (q.page - 1) * q.page_size
        items = ordered[start : start + q.page_size]

    return QueryResult(
        items=items,
        total=total,
        page=q.page,
        page_size=q.page_size,
        page_count=pages,
    )
