# src/taskboard/views/summary.py

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task, TaskPriority, TaskStatus

TOTAL_LABEL = "전체"

PRIORITY_LABELS: dict[TaskPriority, str] = {
    TaskPriority.VERY_HIGH: "매우 높음",
    TaskPriority.HIGH: "높음",
    TaskPriority.MIDDLE: "중간",
    TaskPriority.LOW: "낮음",
    TaskPriority.VERY_LOW: "매우 낮음",
}


def status_counts(tasks: Iterable[Task]) -> dict[str, int]:
    """Counts keyed 전체, 대기, 진행중, 완료, 보류 (in that order)."""
    tasks = list(tasks)
    counts: dict[str, int] = {TOTAL_LABEL: len(tasks)}
    for status in TaskStatus:
        counts[status.value] = 0
    for t in tasks:
        counts[t.status.value] += 1
    return counts


def priority_counts(tasks: Iterable[Task]) -> dict[str, int]:
    tasks = list(tasks)
    counts: dict[str, int] = {TOTAL_LABEL: len(tasks)}
    for priority in TaskPriority:
        counts[priority.value] = 0
    for t in tasks:
        counts[t.priority.value] += 1
    return counts
