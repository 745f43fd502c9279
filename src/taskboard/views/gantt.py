# src/taskboard/views/gantt.py

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any

from ..tasks.task_models import Task, TaskStatus
from ..util.clock import format_day

LABEL_SEPARATOR = " > "

# Only three progress buckets exist: pending and on-hold both render at 0%.
_PROGRESS: dict[TaskStatus, int] = {
    TaskStatus.DONE: 100,
    TaskStatus.IN_PROGRESS: 50,
    TaskStatus.PENDING: 0,
    TaskStatus.ON_HOLD: 0,
}

_CSS_CLASS: dict[TaskStatus, str] = {
    TaskStatus.DONE: "gantt-task-completed",
    TaskStatus.IN_PROGRESS: "gantt-task-in-progress",
    TaskStatus.PENDING: "gantt-task-pending",
    TaskStatus.ON_HOLD: "gantt-task-on-hold",
}


@dataclass(frozen=True, slots=True)
class GanttRow:
    """Row shape consumed by the Gantt widget (frappe-gantt task object)."""

    id: str
    name: str
    start: str
    end: str
    progress: int
    custom_class: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def progress_for(status: TaskStatus) -> int:
    return _PROGRESS.get(status, 0)


def gantt_label(task: Task) -> str:
    parts = [task.category1, task.category2, task.category3, task.task_name]
    return LABEL_SEPARATOR.join(p for p in parts if p)


def to_gantt_row(task: Task) -> GanttRow | None:
    start = task.start_date or task.end_date
    end = task.end_date or task.start_date
    if not start or not end:
        return None
    return GanttRow(
        id=task.id,
        name=gantt_label(task),
        start=start,
        end=end,
        progress=progress_for(task.status),
        custom_class=_CSS_CLASS.get(task.status, ""),
    )


def gantt_rows(tasks: Iterable[Task]) -> list[GanttRow]:
    rows = []
    for t in tasks:
        row = to_gantt_row(t)
        if row is not None:
            rows.append(row)
    return rows


def status_for_progress(progress: int) -> TaskStatus:
    """Inverse mapping used when a bar's progress handle is dragged."""
    if progress >= 100:
        return TaskStatus.DONE
    if progress <= 0:
        return TaskStatus.PENDING
    return TaskStatus.IN_PROGRESS


def date_change_payload(start: dt.date, end: dt.date) -> dict[str, str]:
    """Partial update sent when a bar is moved or resized."""
    return {"startDate": format_day(start), "endDate": format_day(end)}
