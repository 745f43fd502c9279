# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """Task lifecycle stage. Values are the labels stored in tasks.json."""

    PENDING = "대기"
    IN_PROGRESS = "진행중"
    DONE = "완료"
    ON_HOLD = "보류"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.PENDING
        try:
            return cls(raw)
        except ValueError:
            return cls.PENDING


class TaskPriority(StrEnum):
    VERY_HIGH = "very-high"
    HIGH = "high"
    MIDDLE = "middle"
    LOW = "low"
    VERY_LOW = "very-low"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskPriority:
        if not raw:
            return cls.MIDDLE
        try:
            return cls(raw)
        except ValueError:
            return cls.MIDDLE


# Python attribute -> wire key (tasks.json / HTTP bodies).
WIRE_KEYS: dict[str, str] = {
    "id": "id",
    "category1": "category1",
    "category2": "category2",
    "category3": "category3",
    "task_name": "taskName",
    "start_date": "startDate",
    "end_date": "endDate",
    "status": "status",
    "priority": "priority",
    "description": "description",
    "important_memo": "importantMemo",
    "created_at": "createdAt",
}


@dataclass(slots=True)
class Task:
    id: str
    task_name: str
    category1: str = ""
    category2: str = ""
    category3: str = ""
    start_date: str = ""
    end_date: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MIDDLE
    description: str = ""
    important_memo: str = ""
    created_at: str = ""

    # Keys present in the stored record that this model does not know about.
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def category_path(self) -> tuple[str, str, str]:
        return (self.category1, self.category2, self.category3)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        def s(key: str) -> str:
            v = data.get(key)
            return "" if v is None else str(v)

        known = set(WIRE_KEYS.values())
        return cls(
            id=s("id"),
            task_name=s("taskName"),
            category1=s("category1"),
            category2=s("category2"),
            category3=s("category3"),
            start_date=s("startDate"),
            end_date=s("endDate"),
            status=TaskStatus.from_raw(data.get("status")),
            priority=TaskPriority.from_raw(data.get("priority")),
            description=s("description"),
            important_memo=s("importantMemo"),
            created_at=s("createdAt"),
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = dict(self.extra)
        for attr, key in WIRE_KEYS.items():
            value = getattr(self, attr)
            out[key] = value.value if isinstance(value, StrEnum) else value
        return out
