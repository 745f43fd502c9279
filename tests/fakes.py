# tests/fakes.py

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taskboard.categories.category_models import Category
from taskboard.errors import NotFoundError, TransportError
from taskboard.tasks.task_models import Task, TaskPriority, TaskStatus


def make_task(
    task_id: str,
    name: str = "task",
    *,
    start: str = "",
    end: str = "",
    status: TaskStatus = TaskStatus.PENDING,
    priority: TaskPriority = TaskPriority.MIDDLE,
    cats: tuple[str, str, str] = ("Work", "", ""),
    description: str = "",
) -> Task:
    return Task(
        id=task_id,
        task_name=name,
        category1=cats[0],
        category2=cats[1],
        category3=cats[2],
        start_date=start,
        end_date=end,
        status=status,
        priority=priority,
        description=description,
    )


def make_category(cat_id: str, main: str, sub: str = "", detail: str = "") -> Category:
    return Category(id=cat_id, main_category=main, sub_category=sub, detail_category=detail)


class FakeTaskRepo:
    """
    In-memory TaskRepo.

    Records every call so tests can assert that validation failures never
    reach the repo.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks: dict[str, Task] = {t.id: t for t in tasks or []}
        self.calls: list[str] = []
        self._next = 1

    def list_tasks(self) -> list[Task]:
        self.calls.append("list")
        return list(self.tasks.values())

    def add_task(self, payload: Mapping[str, Any]) -> Task:
        self.calls.append("add")
        data = {k: v for k, v in payload.items() if k not in ("id", "createdAt")}
        data["id"] = f"fake-{self._next}"
        data["createdAt"] = "2024-01-01T00:00:00.000Z"
        self._next += 1
        task = Task.from_dict(data)
        self.tasks[task.id] = task
        return task

    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Task:
        self.calls.append("update")
        if task_id not in self.tasks:
            raise NotFoundError("Task", task_id)
        merged = {**self.tasks[task_id].to_dict(), **changes, "id": task_id}
        task = Task.from_dict(merged)
        self.tasks[task_id] = task
        return task

    def delete_task(self, task_id: str) -> None:
        self.calls.append("delete")
        if self.tasks.pop(task_id, None) is None:
            raise NotFoundError("Task", task_id)


class FailingTaskRepo(FakeTaskRepo):
    """Lists fine, but every write fails as if the server were down."""

    def add_task(self, payload: Mapping[str, Any]) -> Task:
        raise TransportError("connection refused")

    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Task:
        raise TransportError("connection refused")

    def delete_task(self, task_id: str) -> None:
        raise TransportError("connection refused")


class FakeCategoryRepo:
    def __init__(self, categories: list[Category] | None = None) -> None:
        self.categories: dict[str, Category] = {c.id: c for c in categories or []}

    def list_categories(self) -> list[Category]:
        return list(self.categories.values())

    def add_category(self, payload: Mapping[str, Any]) -> Category:
        cat = Category.from_dict({**payload, "id": f"cat-{len(self.categories) + 1}"})
        self.categories[cat.id] = cat
        return cat

    def update_category(self, category_id: str, changes: Mapping[str, Any]) -> Category:
        if category_id not in self.categories:
            raise NotFoundError("Category", category_id)
        cat = Category.from_dict({**self.categories[category_id].to_dict(), **changes, "id": category_id})
        self.categories[category_id] = cat
        return cat

    def delete_category(self, category_id: str) -> None:
        if self.categories.pop(category_id, None) is None:
            raise NotFoundError("Category", category_id)


class FakeHolidaySource:
    def __init__(self, holidays: dict[str, dict[str, str]] | None = None, *, fail: bool = False) -> None:
        self.holidays = holidays or {}
        self.fail = fail

    def load_holidays(self) -> dict[str, dict[str, str]]:
        if self.fail:
            raise TransportError("holidays unavailable")
        return self.holidays
