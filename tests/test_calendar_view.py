# tests/test_calendar_view.py

from __future__ import annotations

import datetime as dt

from taskboard.tasks.task_models import TaskStatus
from taskboard.views.calendar import (
    GRID_CELLS,
    ending_soon,
    holiday_name,
    month_grid,
    shift_month,
    tasks_for_day,
)

from .fakes import make_task

HOLIDAYS = {"2024": {"06-06": "현충일", "01-01": "신정"}}


def test_grid_has_42_cells_starting_on_sunday() -> None:
    # June 2024 starts on a Saturday.
    cells = month_grid(2024, 6, tasks=[], today=dt.date(2024, 6, 10))

    assert len(cells) == GRID_CELLS
    assert cells[0].day == dt.date(2024, 5, 26)
    assert cells[0].day.weekday() == 6
    assert not cells[0].in_month
    assert cells[6].day == dt.date(2024, 6, 1) and cells[6].in_month
    assert cells[-1].day == dt.date(2024, 7, 6) and not cells[-1].in_month


def test_month_starting_on_sunday_has_no_leading_days() -> None:
    cells = month_grid(2024, 9, tasks=[], today=dt.date(2024, 9, 1))
    assert cells[0].day == dt.date(2024, 9, 1)
    assert cells[0].is_today


def test_cells_are_decorated() -> None:
    cells = month_grid(
        2024,
        6,
        tasks=[],
        today=dt.date(2024, 6, 10),
        selected=dt.date(2024, 6, 12),
        holidays=HOLIDAYS,
    )
    by_day = {c.day: c for c in cells}

    assert by_day[dt.date(2024, 6, 6)].holiday_name == "현충일"
    assert by_day[dt.date(2024, 6, 6)].is_holiday
    assert not by_day[dt.date(2024, 6, 7)].is_holiday
    assert by_day[dt.date(2024, 6, 10)].is_today
    assert by_day[dt.date(2024, 6, 12)].is_selected
    assert by_day[dt.date(2024, 6, 8)].is_weekend
    assert not by_day[dt.date(2024, 6, 10)].is_weekend


def test_tasks_appear_on_their_end_day_only() -> None:
    spanning = make_task("1", start="2024-06-01", end="2024-06-05")
    undated = make_task("2", start="2024-06-01")
    # 20:00Z on the 5th is the 6th at +09:00.
    late = make_task("3", end="2024-06-05T20:00:00Z")
    tasks = [spanning, undated, late]

    assert [t.id for t in tasks_for_day(tasks, dt.date(2024, 6, 5))] == ["1"]
    assert tasks_for_day(tasks, dt.date(2024, 6, 1)) == []
    assert [t.id for t in tasks_for_day(tasks, dt.date(2024, 6, 6))] == ["3"]

    cells = month_grid(2024, 6, tasks=tasks, today=dt.date(2024, 6, 1))
    by_day = {c.day: c for c in cells}
    assert [t.id for t in by_day[dt.date(2024, 6, 5)].tasks] == ["1"]
    assert sum(len(c.tasks) for c in cells) == 2


def test_ending_soon_window_and_order() -> None:
    today = dt.date(2024, 6, 10)
    tasks = [
        make_task("late", end="2024-06-17"),
        make_task("today", end="2024-06-10"),
        make_task("past", end="2024-06-09"),
        make_task("beyond", end="2024-06-18"),
        make_task("done", end="2024-06-11", status=TaskStatus.DONE),
        make_task("held", end="2024-06-12", status=TaskStatus.ON_HOLD),
        make_task("undated"),
    ]

    assert [t.id for t in ending_soon(tasks, today=today)] == ["today", "held", "late"]
    assert [t.id for t in ending_soon(tasks, today=today, days=1)] == ["today"]


def test_holiday_lookup() -> None:
    assert holiday_name(HOLIDAYS, dt.date(2024, 1, 1)) == "신정"
    assert holiday_name(HOLIDAYS, dt.date(2025, 1, 1)) is None
    assert holiday_name({}, dt.date(2024, 1, 1)) is None


def test_shift_month_crosses_years() -> None:
    assert shift_month(dt.date(2024, 1, 1), -1) == dt.date(2023, 12, 1)
    assert shift_month(dt.date(2024, 12, 1), 1) == dt.date(2025, 1, 1)
    assert shift_month(dt.date(2024, 6, 1), 14) == dt.date(2025, 8, 1)
