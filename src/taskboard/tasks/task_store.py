# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import NotFoundError, ValidationError
from ..storage.json_file import JsonDocument, new_record_id
from ..util.clock import utc_timestamp
from .task_models import Task

logger = logging.getLogger(__name__)

# Server-assigned fields: never taken from a client payload.
_IMMUTABLE_KEYS = ("id", "createdAt")


class TaskStore:
    """
    JSON file task store ({"tasks": [...]}).

    Each mutation reads the whole document, applies the change and rewrites
    the file. There is no cross-process locking; concurrent writers race and
    the later write silently wins.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._doc = JsonDocument(path, "tasks")
        try:
            total = self.count_tasks()
        except Exception:
            total = -1
        logger.info("TaskStore ready path=%s total=%s", self._doc.path, total)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._doc.read_records())

    def list_tasks(self) -> list[Task]:
        return [Task.from_dict(r) for r in self._doc.read_records()]

    def get_task(self, task_id: str) -> Task:
        for r in self._doc.read_records():
            if r.get("id") == task_id:
                return Task.from_dict(r)
        raise NotFoundError("Task", task_id)

    def add_task(self, payload: Mapping[str, Any]) -> Task:
        name = payload.get("taskName")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("taskName is required")

        records = self._doc.read_records()
        record = {k: v for k, v in payload.items() if k not in _IMMUTABLE_KEYS}
        record["id"] = new_record_id(str(r.get("id")) for r in records)
        record["createdAt"] = utc_timestamp()
        records.append(record)
        self._doc.write_records(records)

        logger.debug("Task added id=%s name=%s", record["id"], name)
        return Task.from_dict(record)

    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Task:
        if "taskName" in changes:
            name = changes["taskName"]
            if not isinstance(name, str) or not name.strip():
                raise ValidationError("taskName must not be empty")

        records = self._doc.read_records()
        for i, r in enumerate(records):
            if r.get("id") != task_id:
                continue
            merged = {**r, **{k: v for k, v in changes.items() if k not in _IMMUTABLE_KEYS}}
            merged["id"] = task_id
            records[i] = merged
            self._doc.write_records(records)
            logger.debug("Task updated id=%s keys=%s", task_id, sorted(changes))
            return Task.from_dict(merged)
        raise NotFoundError("Task", task_id)

    def delete_task(self, task_id: str) -> None:
        records = self._doc.read_records()
        kept = [r for r in records if r.get("id") != task_id]
        if len(kept) == len(records):
            raise NotFoundError("Task", task_id)
        self._doc.write_records(kept)
        logger.debug("Task deleted id=%s", task_id)
