# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from ..categories import category_api
from ..categories.hierarchy import detail_categories, main_categories, sub_categories
from ..core.state import (
    AppState,
    all_tasks_page,
    current_month_grid,
    gantt_view,
    refresh,
    selected_day_tasks,
    set_query,
)
from ..errors import NotFoundError, TaskboardError, TransportError, ValidationError
from ..query.engine import ALL, SearchMode, SortDirection, SortField
from ..tasks import task_api
from ..tasks.task_models import Task
from ..util.clock import format_day, parse_day
from ..views.calendar import shift_month
from ..views.summary import priority_counts, status_counts
from . import render

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /day, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Tracker errors become user-visible messages; the state snapshots are
        left as they were before the failed command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as ex:
            return f"Could not parse command: {ex}"
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except ValidationError as ex:
            return f"Invalid input: {ex}"
        except NotFoundError as ex:
            return f"Not found: {ex}"
        except TransportError as ex:
            logger.warning("Command /%s failed on storage: %s", name, ex)
            return "Storage is unavailable; nothing was changed."
        except TaskboardError as ex:
            return f"Error: {ex}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def _key_values(args: list[str]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep or not key:
            raise ValidationError(f"expected key=value, got {arg!r}")
        out[key] = value
    return out


def _find_task(state: AppState, task_id: str) -> Task:
    for t in state.tasks:
        if t.id == task_id:
            return t
    raise NotFoundError("Task", task_id)


def _need(args: list[str], n: int, usage: str) -> None:
    if len(args) < n:
        raise ValidationError(f"usage: {usage}")


# ---- views ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    return (
        "Status:   " + render.counts_line(status_counts(state.tasks)) + "\n"
        "Priority: " + render.counts_line(priority_counts(state.tasks)) + "\n"
        f"Ending within {state.ending_soon_days} days: {len(state.notifications)}"
    )


def cmd_day(state: AppState, args: list[str]) -> str:
    """
    /day             -> tasks ending on the selected day
    /day YYYY-MM-DD  -> select that day (and show its month)
    /day today       -> select today
    """
    assert state.view is not None
    if args:
        day = state.today() if args[0] == "today" else parse_day(args[0])
        if day is None:
            raise ValidationError(f"not a date: {args[0]!r}")
        state.view.selected = day
        state.view.month = day.replace(day=1)
    title = f"{state.view.selected.year}년 {state.view.selected.month}월 {state.view.selected.day}일"
    return title + "\n" + render.task_lines(selected_day_tasks(state), "이 날짜에 종료되는 업무가 없습니다.")


def cmd_month(state: AppState, args: list[str]) -> str:
    """/month [prev|next|YYYY-MM]"""
    assert state.view is not None
    if args:
        arg = args[0]
        if arg == "prev":
            state.view.month = shift_month(state.view.month, -1)
        elif arg == "next":
            state.view.month = shift_month(state.view.month, 1)
        else:
            first = parse_day(f"{arg}-01")
            if first is None:
                raise ValidationError(f"expected prev, next or YYYY-MM, got {arg!r}")
            state.view.month = first
    return render.month_grid(state.view.month, current_month_grid(state))


def cmd_soon(state: AppState, args: list[str]) -> str:
    lines = [f"{t.end_date} 종료  {t.task_name}  [{t.id}]" for t in state.notifications]
    return "\n".join(lines) if lines else "마감 임박 업무가 없습니다."


def cmd_list(state: AppState, args: list[str]) -> str:
    """/list [page|next|prev]"""
    assert state.view is not None
    if args:
        q = state.view.query
        if args[0] == "next":
            page = q.page + 1
        elif args[0] == "prev":
            page = q.page - 1
        elif args[0].isdigit():
            page = int(args[0])
        else:
            raise ValidationError("usage: /list [page|next|prev]")
        state.view.query = replace(q, page=page)
    return render.query_page(all_tasks_page(state))


def cmd_filter(state: AppState, args: list[str]) -> str:
    """/filter status <value|all> | /filter priority <value|all> | /filter clear"""
    _need(args, 1, "/filter status|priority <value|all> or /filter clear")
    kind = args[0].lower()
    if kind == "clear":
        set_query(state, status=ALL, priority=ALL)
    elif kind in ("status", "priority"):
        _need(args, 2, f"/filter {kind} <value|all>")
        set_query(state, **{kind: args[1]})
    else:
        raise ValidationError("usage: /filter status|priority <value|all>")
    return render.query_page(all_tasks_page(state))


def cmd_search(state: AppState, args: list[str]) -> str:
    """/search <text> | /search cat <main> [sub] [detail] | /search clear"""
    if not args or args[0] == "clear":
        set_query(state, search_mode=SearchMode.TEXT, text="", category1="", category2="", category3="")
    elif args[0] == "cat":
        cats = (args[1:] + ["", "", ""])[:3]
        set_query(
            state,
            search_mode=SearchMode.CATEGORY,
            category1=cats[0],
            category2=cats[1],
            category3=cats[2],
        )
    else:
        set_query(state, search_mode=SearchMode.TEXT, text=" ".join(args))
    return render.query_page(all_tasks_page(state))


def cmd_sort(state: AppState, args: list[str]) -> str:
    """/sort <endDate|startDate|taskName|status> [asc|desc]"""
    _need(args, 1, "/sort <endDate|startDate|taskName|status> [asc|desc]")
    try:
        field = SortField(args[0])
        direction = SortDirection(args[1]) if len(args) > 1 else SortDirection.ASC
    except ValueError as ex:
        raise ValidationError(str(ex)) from ex
    set_query(state, sort_field=field, sort_direction=direction)
    return render.query_page(all_tasks_page(state))


def cmd_show(state: AppState, args: list[str]) -> str:
    _need(args, 1, "/show <task id>")
    return render.task_detail(_find_task(state, args[0]))


def cmd_gantt(state: AppState, args: list[str]) -> str:
    return render.gantt(gantt_view(state))


def cmd_reload(state: AppState, args: list[str]) -> str:
    refresh(state)
    return f"Reloaded: {len(state.tasks)} tasks, {len(state.categories)} categories."


# ---- task mutations ----


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add taskName=... category1=... [category2=...] [startDate=...] [endDate=...] ..."""
    payload = _key_values(args)
    if "startDate" not in payload and "endDate" not in payload:
        today = format_day(state.today())
        payload["startDate"] = today
        payload["endDate"] = today
    created = task_api.create_task(state, payload)
    return "Created: " + render.task_line(created)


def cmd_edit(state: AppState, args: list[str]) -> str:
    _need(args, 2, "/edit <task id> key=value ...")
    updated = task_api.update_task(state, args[0], _key_values(args[1:]))
    return "Updated: " + render.task_line(updated)


def cmd_memo(state: AppState, args: list[str]) -> str:
    _need(args, 1, "/memo <task id> [text]")
    updated = task_api.save_important_memo(state, args[0], " ".join(args[1:]))
    return "Memo saved: " + render.task_line(updated)


def cmd_copy(state: AppState, args: list[str]) -> str:
    _need(args, 1, "/copy <task id>")
    created = task_api.copy_task(state, _find_task(state, args[0]))
    return "Copied: " + render.task_line(created)


def cmd_delete(state: AppState, args: list[str]) -> str:
    """/delete <task id> yes  (the trailing 'yes' confirms)"""
    _need(args, 1, "/delete <task id> yes")
    if len(args) < 2 or args[1].lower() != "yes":
        return f"정말로 이 업무를 삭제하시겠습니까? Repeat as: /delete {args[0]} yes"
    task_api.delete_task(state, args[0])
    return f"Deleted task {args[0]}."


# ---- categories ----


def cmd_cats(state: AppState, args: list[str]) -> str:
    """
    /cats                -> category tree
    /cats <main>         -> sub categories under main
    /cats <main> <sub>   -> detail categories under main > sub
    """
    if not args:
        return render.category_tree(state.category_tree)
    if len(args) == 1:
        subs = sub_categories(state.categories, args[0])
        return ", ".join(subs) if subs else "(none)"
    details = detail_categories(state.categories, args[0], args[1])
    return ", ".join(details) if details else "(none)"


def cmd_mains(state: AppState, args: list[str]) -> str:
    mains = main_categories(state.categories)
    return ", ".join(mains) if mains else "(none)"


def cmd_addcat(state: AppState, args: list[str]) -> str:
    _need(args, 1, "/addcat <main> [sub] [detail]")
    cats = (args + ["", "", ""])[:3]
    created = category_api.create_category(
        state,
        {"mainCategory": cats[0], "subCategory": cats[1], "detailCategory": cats[2]},
    )
    return f"Created category {created.label()} [{created.id}]"


def cmd_editcat(state: AppState, args: list[str]) -> str:
    _need(args, 2, "/editcat <category id> key=value ...")
    updated = category_api.update_category(state, args[0], _key_values(args[1:]))
    return f"Updated category {updated.label()} [{updated.id}]"


def cmd_copycat(state: AppState, args: list[str]) -> str:
    _need(args, 1, "/copycat <category id>")
    for c in state.categories:
        if c.id == args[0]:
            created = category_api.copy_category(state, c)
            return f"Copied category {created.label()} [{created.id}]"
    raise NotFoundError("Category", args[0])


def cmd_delcat(state: AppState, args: list[str]) -> str:
    _need(args, 1, "/delcat <category id> yes")
    if len(args) < 2 or args[1].lower() != "yes":
        return f"정말로 이 분류를 삭제하시겠습니까? Repeat as: /delcat {args[0]} yes"
    category_api.delete_category(state, args[0])
    return f"Deleted category {args[0]}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Status/priority counts and ending-soon total.")
registry.register("day", cmd_day, help_text="Tasks ending on the selected day: /day [YYYY-MM-DD|today].")
registry.register("month", cmd_month, help_text="Month calendar: /month [prev|next|YYYY-MM].")
registry.register("soon", cmd_soon, help_text="Tasks ending soon (not done).", aliases=["notify"])
registry.register("list", cmd_list, help_text="All tasks page: /list [page|next|prev].")
registry.register("filter", cmd_filter, help_text="/filter status|priority <value|all> | /filter clear.")
registry.register("search", cmd_search, help_text="/search <text> | /search cat <main> [sub] [detail] | /search clear.")
registry.register("sort", cmd_sort, help_text="/sort <endDate|startDate|taskName|status> [asc|desc].")
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register("gantt", cmd_gantt, help_text="Gantt rows for tasks with dates.")
registry.register("add", cmd_add, help_text="Create a task: /add taskName=... category1=... [key=value ...].")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> key=value ...")
registry.register("memo", cmd_memo, help_text="Save the important memo: /memo <id> <text>.")
registry.register("copy", cmd_copy, help_text="Copy a task: /copy <id>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id> yes.")
registry.register("cats", cmd_cats, help_text="Category tree, or cascade: /cats [main] [sub].")
registry.register("mains", cmd_mains, help_text="Main category names.")
registry.register("addcat", cmd_addcat, help_text="Create a category: /addcat <main> [sub] [detail].")
registry.register("editcat", cmd_editcat, help_text="Edit a category: /editcat <id> key=value ...")
registry.register("copycat", cmd_copycat, help_text="Copy a category: /copycat <id>.")
registry.register("delcat", cmd_delcat, help_text="Delete a category: /delcat <id> yes.")
registry.register("reload", cmd_reload, help_text="Reload tasks, categories and holidays.")
