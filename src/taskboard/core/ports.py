# src/taskboard/core/ports.py

"""
Ports (interfaces) used by the application shell.

AppState depends on these Protocols instead of concrete stores. Two sets of
implementations exist:
- local JSON document stores (TaskStore, CategoryStore, HolidayFile)
- the HTTP client (HttpTaskRepo, HttpCategoryRepo, HttpHolidaySource)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from ..categories.category_models import Category
from ..tasks.task_models import Task

HolidayMap = dict[str, dict[str, str]]


class TaskRepo(Protocol):
    def list_tasks(self) -> list[Task]: ...
    def add_task(self, payload: Mapping[str, Any]) -> Task: ...
    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Task: ...
    def delete_task(self, task_id: str) -> None: ...


class CategoryRepo(Protocol):
    def list_categories(self) -> list[Category]: ...
    def add_category(self, payload: Mapping[str, Any]) -> Category: ...
    def update_category(self, category_id: str, changes: Mapping[str, Any]) -> Category: ...
    def delete_category(self, category_id: str) -> None: ...


class HolidaySource(Protocol):
    """Read-only {year: {"MM-DD": name}} map."""
    def load_holidays(self) -> HolidayMap: ...
