# src/taskboard/cli/render.py

"""Plain-text renderings of the views for the console connector."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable

from ..categories.hierarchy import CategoryTree
from ..query.engine import QueryResult
from ..tasks.task_models import Task
from ..views.calendar import DayCell
from ..views.gantt import GanttRow
from ..views.summary import PRIORITY_LABELS

WEEKDAYS = ["일", "월", "화", "수", "목", "금", "토"]


def task_line(task: Task) -> str:
    path = " > ".join(p for p in task.category_path if p) or "-"
    dates = f"{task.start_date or '?'} ~ {task.end_date or '?'}"
    memo = " [memo]" if task.important_memo else ""
    return (
        f"[{task.id}] {task.status.value} / {PRIORITY_LABELS.get(task.priority, task.priority)}"
        f" | {path} | {task.task_name} ({dates}){memo}"
    )


def task_lines(tasks: Iterable[Task], empty: str) -> str:
    lines = [task_line(t) for t in tasks]
    return "\n".join(lines) if lines else empty


def task_detail(task: Task) -> str:
    return "\n".join(
        [
            task_line(task),
            f"  description: {task.description or '설명 없음'}",
            f"  memo: {task.important_memo or '-'}",
            f"  created: {task.created_at or '-'}",
        ]
    )


def query_page(result: QueryResult) -> str:
    header = f"Page {result.page}/{max(result.page_count, 1)} ({result.total} tasks)"
    return header + "\n" + task_lines(result.items, "검색 결과가 없습니다.")


def counts_line(counts: dict[str, int]) -> str:
    return "  ".join(f"{k}: {v}" for k, v in counts.items())


def month_grid(month: dt.date, cells: list[DayCell]) -> str:
    """
    Legend: *today  [selected]  ~holiday  (n) tasks ending that day.
    Days of adjacent months are shown as dots.
    """
    lines = [f"{month.year}년 {month.month}월", " ".join(f"{d:>7}" for d in WEEKDAYS)]
    for week_start in range(0, len(cells), 7):
        row = []
        for cell in cells[week_start : week_start + 7]:
            label = f"{cell.day.day:>2}" if cell.in_month else " ."
            if cell.is_today:
                label = "*" + label
            if cell.is_selected:
                label = f"[{label}]"
            if cell.is_holiday:
                label += "~"
            if cell.tasks:
                label += f"({len(cell.tasks)})"
            row.append(f"{label:>7}")
        lines.append(" ".join(row))
    holidays = [f"  {c.day.isoformat()} {c.holiday_name}" for c in cells if c.in_month and c.is_holiday]
    if holidays:
        lines.append("Holidays:")
        lines.extend(holidays)
    return "\n".join(lines)


def category_tree(tree: CategoryTree) -> str:
    if not tree:
        return "등록된 분류가 없습니다."
    lines: list[str] = []
    for main in tree:
        lines.append(f"{main.name}" + (f"  [{main.record.id}]" if main.record else ""))
        for sub in main.subs:
            lines.append(f"  └ {sub.name}" + (f"  [{sub.record.id}]" if sub.record else ""))
            for detail in sub.details:
                lines.append(f"      └ {detail.name}  [{detail.record.id}]")
    return "\n".join(lines)


def gantt(rows: list[GanttRow]) -> str:
    if not rows:
        return "No tasks with dates."
    return "\n".join(
        f"{r.start} .. {r.end}  {r.progress:>3}%  {r.name}  [{r.id}]" for r in rows
    )
