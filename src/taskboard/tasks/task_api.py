# src/taskboard/tasks/task_api.py

"""
Edit-boundary helpers for tasks.

Each mutation validates its input, goes through state.task_repo and then
reloads the task snapshot. ValidationError is raised before anything is
sent; NotFoundError/TransportError from the repo propagate unchanged and
leave the snapshot as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..core.state import AppState, reload_tasks
from ..errors import ValidationError
from ..util.clock import require_day
from .task_models import Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)

COPY_SUFFIX = " (복사본)"

_TEXT_KEYS = ("category1", "category2", "category3", "taskName", "description", "importantMemo")


def validate_task_payload(payload: Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    """
    Check and normalize a task payload (wire keys).

    Full payloads get defaults for optional fields; partial payloads are
    checked only for the keys they carry.
    """
    data = dict(payload)

    for key in _TEXT_KEYS:
        if key in data and data[key] is not None and not isinstance(data[key], str):
            raise ValidationError(f"{key} must be a string")

    if not partial or "taskName" in data:
        name = data.get("taskName")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("taskName is required")

    if not partial or "category1" in data:
        cat1 = data.get("category1")
        if not isinstance(cat1, str) or not cat1.strip():
            raise ValidationError("category1 is required")

    if "status" in data and data["status"] not in set(TaskStatus):
        raise ValidationError(f"Unknown status: {data['status']!r}")
    if "priority" in data and data["priority"] not in set(TaskPriority):
        raise ValidationError(f"Unknown priority: {data['priority']!r}")

    start = require_day(data.get("startDate"), "startDate")
    end = require_day(data.get("endDate"), "endDate")
    if start is not None and end is not None and start > end:
        raise ValidationError("endDate must not be earlier than startDate")

    if not partial:
        data.setdefault("category2", "")
        data.setdefault("category3", "")
        data.setdefault("startDate", "")
        data.setdefault("endDate", "")
        data.setdefault("status", TaskStatus.PENDING.value)
        data.setdefault("priority", TaskPriority.MIDDLE.value)
        data.setdefault("description", "")
        for key in ("category2", "category3", "startDate", "endDate", "description"):
            if data[key] is None:
                data[key] = ""

    return data


def _find(state: AppState, task_id: str) -> Task | None:
    for t in state.tasks:
        if t.id == task_id:
            return t
    return None


def create_task(state: AppState, payload: Mapping[str, Any]) -> Task:
    data = validate_task_payload(payload)
    created = state.task_repo.add_task(data)
    logger.info("Task created id=%s name=%s", created.id, created.task_name)
    reload_tasks(state)
    return created


def update_task(state: AppState, task_id: str, changes: Mapping[str, Any]) -> Task:
    data = validate_task_payload(changes, partial=True)
    data.pop("id", None)
    data.pop("createdAt", None)

    # Only one side of the date range may be changing; check against the other.
    current = _find(state, task_id)
    if current is not None and ("startDate" in data or "endDate" in data):
        start = require_day(data.get("startDate", current.start_date), "startDate")
        end = require_day(data.get("endDate", current.end_date), "endDate")
        if start is not None and end is not None and start > end:
            raise ValidationError("endDate must not be earlier than startDate")

    updated = state.task_repo.update_task(task_id, data)
    logger.info("Task updated id=%s keys=%s", task_id, sorted(data))
    reload_tasks(state)
    return updated


def delete_task(state: AppState, task_id: str) -> None:
    # Destructive: no soft-delete. Confirmation belongs to the caller.
    state.task_repo.delete_task(task_id)
    logger.info("Task deleted id=%s", task_id)
    reload_tasks(state)


def copy_task_payload(task: Task) -> dict[str, Any]:
    """A new-task payload built from an existing one: no id/createdAt, marked name."""
    data = task.to_dict()
    data.pop("id", None)
    data.pop("createdAt", None)
    data["taskName"] = task.task_name + COPY_SUFFIX
    return data


def copy_task(state: AppState, task: Task) -> Task:
    return create_task(state, copy_task_payload(task))


def save_important_memo(state: AppState, task_id: str, memo: str) -> Task:
    """Update only importantMemo, leaving every other field untouched."""
    if not task_id:
        raise ValidationError("task id is required to save a memo")
    return update_task(state, task_id, {"importantMemo": memo})
