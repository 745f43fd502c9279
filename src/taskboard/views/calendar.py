# src/taskboard/views/calendar.py

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ..tasks.task_models import Task, TaskStatus
from ..util.clock import DEFAULT_TZ, is_day_in_range, is_same_day, to_local_day

# {"2024": {"01-01": "신정", ...}, ...}
HolidayMap = Mapping[str, Mapping[str, str]]

DEFAULT_ENDING_SOON_DAYS = 7
GRID_CELLS = 42  # 6 weeks, Sunday first


@dataclass(slots=True)
class DayCell:
    day: dt.date
    in_month: bool = True
    is_today: bool = False
    is_selected: bool = False
    is_weekend: bool = False
    holiday_name: str | None = None
    tasks: list[Task] = field(default_factory=list)

    @property
    def is_holiday(self) -> bool:
        return self.holiday_name is not None


def tasks_for_day(tasks: Iterable[Task], day: dt.date, tz: dt.tzinfo = DEFAULT_TZ) -> list[Task]:
    """
    Tasks shown under `day`: those whose end date is that day.

    A task spanning 01-01..01-05 is listed on 01-05 only. Tasks without an
    end date never appear on any day.
    """
    return [t for t in tasks if is_same_day(t.end_date, day, tz)]


def ending_soon(
    tasks: Iterable[Task],
    *,
    today: dt.date,
    days: int = DEFAULT_ENDING_SOON_DAYS,
    tz: dt.tzinfo = DEFAULT_TZ,
) -> list[Task]:
    """Not-done tasks ending within [today 00:00, today+days 23:59:59], earliest first."""
    last = today + dt.timedelta(days=days)
    picked: list[tuple[dt.date, Task]] = []
    for t in tasks:
        if t.status == TaskStatus.DONE:
            continue
        end = to_local_day(t.end_date, tz)
        if end is None:
            continue
        if is_day_in_range(end, today, last, tz):
            picked.append((end, t))
    picked.sort(key=lambda p: p[0])
    return [t for _, t in picked]


def holiday_name(holidays: HolidayMap, day: dt.date) -> str | None:
    by_year = holidays.get(str(day.year))
    if not by_year:
        return None
    return by_year.get(day.strftime("%m-%d"))


def decorate_day(
    day: dt.date,
    *,
    today: dt.date,
    selected: dt.date | None,
    holidays: HolidayMap,
    in_month: bool = True,
) -> DayCell:
    return DayCell(
        day=day,
        in_month=in_month,
        is_today=day == today,
        is_selected=selected is not None and day == selected,
        is_weekend=day.weekday() >= 5,
        holiday_name=holiday_name(holidays, day),
    )


def shift_month(first_of_month: dt.date, delta: int) -> dt.date:
    index = first_of_month.year * 12 + (first_of_month.month - 1) + delta
    return dt.date(index // 12, index % 12 + 1, 1)


def month_grid(
    year: int,
    month: int,
    *,
    tasks: Iterable[Task],
    today: dt.date,
    selected: dt.date | None = None,
    holidays: HolidayMap | None = None,
    tz: dt.tzinfo = DEFAULT_TZ,
) -> list[DayCell]:
    """
    The 42 day cells of a month view, Sunday first.

    Leading cells come from the previous month and trailing cells from the
    next one (in_month=False). Every cell carries its end-date tasks.
    """
    holidays = holidays or {}
    first = dt.date(year, month, 1)
    # weekday(): Monday=0 .. Sunday=6; shift so Sunday starts the row.
    lead = (first.weekday() + 1) % 7
    start = first - dt.timedelta(days=lead)

    by_day: dict[dt.date, list[Task]] = {}
    for t in tasks:
        end = to_local_day(t.end_date, tz)
        if end is not None:
            by_day.setdefault(end, []).append(t)

    cells: list[DayCell] = []
    for i in range(GRID_CELLS):
        day = start + dt.timedelta(days=i)
        cell = decorate_day(
            day,
            today=today,
            selected=selected,
            holidays=holidays,
            in_month=day.month == month,
        )
        cell.tasks = by_day.get(day, [])
        cells.append(cell)
    return cells
