# tests/test_query_engine.py

from __future__ import annotations

import pytest

from taskboard.query.engine import (
    SearchMode,
    SortDirection,
    SortField,
    TaskQuery,
    clamp_page,
    filter_and_sort,
    page_count,
    run_query,
)
from taskboard.tasks.task_models import TaskPriority, TaskStatus

from .fakes import make_task


def _tasks():
    return [
        make_task("1", "beta", end="2024-06-03", status=TaskStatus.DONE, priority=TaskPriority.HIGH),
        make_task("2", "Alpha", end="2024-06-01", description="quarterly Report"),
        make_task("3", "gamma", end="", cats=("Home", "Garden", "")),
        make_task("4", "delta", end="2024-06-02", status=TaskStatus.IN_PROGRESS),
        make_task("5", "epsilon", end="2024-06-02", cats=("Work", "Reports", "Weekly")),
    ]


def test_default_sort_is_end_date_ascending_with_missing_first() -> None:
    ids = [t.id for t in filter_and_sort(_tasks(), TaskQuery())]
    # Missing end date counts as 1970-01-01; ties keep source order.
    assert ids == ["3", "2", "4", "5", "1"]


def test_descending_sort_keeps_ties_in_source_order() -> None:
    q = TaskQuery(sort_direction=SortDirection.DESC)
    assert [t.id for t in filter_and_sort(_tasks(), q)] == ["1", "4", "5", "2", "3"]


def test_task_name_sort_is_case_insensitive() -> None:
    q = TaskQuery(sort_field=SortField.TASK_NAME)
    names = [t.task_name for t in filter_and_sort(_tasks(), q)]
    assert names == ["Alpha", "beta", "delta", "epsilon", "gamma"]


@pytest.mark.parametrize("sentinel", ["all", "전체", ""])
def test_all_sentinels_disable_filters(sentinel) -> None:
    q = TaskQuery(status=sentinel, priority=sentinel)
    assert len(filter_and_sort(_tasks(), q)) == 5


def test_status_and_priority_filters() -> None:
    assert [t.id for t in filter_and_sort(_tasks(), TaskQuery(status="완료"))] == ["1"]
    assert [t.id for t in filter_and_sort(_tasks(), TaskQuery(priority="high"))] == ["1"]
    q = TaskQuery(status="대기", priority="middle")
    assert {t.id for t in filter_and_sort(_tasks(), q)} == {"2", "3", "5"}


def test_text_search_matches_name_or_description_ignoring_case() -> None:
    q = TaskQuery(text="REPORT")
    assert [t.id for t in filter_and_sort(_tasks(), q)] == ["2"]
    q = TaskQuery(text="ALP")
    assert [t.id for t in filter_and_sort(_tasks(), q)] == ["2"]


def test_category_search_matches_given_levels_exactly() -> None:
    q = TaskQuery(search_mode=SearchMode.CATEGORY, category1="Work")
    assert {t.id for t in filter_and_sort(_tasks(), q)} == {"1", "2", "4", "5"}
    q = TaskQuery(search_mode=SearchMode.CATEGORY, category1="Work", category2="Reports")
    assert [t.id for t in filter_and_sort(_tasks(), q)] == ["5"]
    # Text is ignored in category mode.
    q = TaskQuery(search_mode=SearchMode.CATEGORY, text="zzz")
    assert len(filter_and_sort(_tasks(), q)) == 5


def test_pipeline_does_not_mutate_input() -> None:
    tasks = _tasks()
    before = [t.id for t in tasks]
    filter_and_sort(tasks, TaskQuery(sort_direction=SortDirection.DESC))
    assert [t.id for t in tasks] == before


def test_pagination() -> None:
    tasks = [make_task(str(i), f"t{i:02d}", end=f"2024-06-{i + 1:02d}") for i in range(12)]

    first = run_query(tasks, TaskQuery())
    assert first.total == 12 and first.page_count == 3
    assert [t.id for t in first.items] == ["0", "1", "2", "3", "4"]

    last = run_query(tasks, TaskQuery(page=3))
    assert [t.id for t in last.items] == ["10", "11"]

    assert run_query(tasks, TaskQuery(page=4)).items == []
    assert run_query(tasks, TaskQuery(page=0)).items == []


def test_page_count_and_clamp() -> None:
    assert page_count(0, 5) == 0
    assert page_count(5, 5) == 1
    assert page_count(6, 5) == 2
    with pytest.raises(ValueError):
        page_count(3, 0)

    assert clamp_page(9, 3) == 3
    assert clamp_page(0, 3) == 1
    assert clamp_page(2, 0) == 1


def test_start_date_and_status_sorts() -> None:
    tasks = [
        make_task("a", start="2024-06-09", status=TaskStatus.IN_PROGRESS),
        make_task("b", start="", status=TaskStatus.PENDING),
        make_task("c", start="2024-06-02", status=TaskStatus.DONE),
    ]

    q = TaskQuery(sort_field=SortField.START_DATE, sort_direction=SortDirection.DESC)
    assert [t.id for t in filter_and_sort(tasks, q)] == ["a", "c", "b"]

    # Status sorts by its stored label: 대기 < 완료 < 진행중.
    q = TaskQuery(sort_field=SortField.STATUS)
    assert [t.id for t in filter_and_sort(tasks, q)] == ["b", "c", "a"]


def test_same_inputs_give_the_same_page() -> None:
    tasks = _tasks()
    q = TaskQuery(text="a", sort_field=SortField.TASK_NAME, sort_direction=SortDirection.DESC, page_size=2)

    first = run_query(tasks, q)
    second = run_query(tasks, q)

    assert [t.id for t in first.items] == [t.id for t in second.items]
    assert first == second
