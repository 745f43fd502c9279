# src/taskboard/categories/category_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Category:
    """
    One row of the category table.

    The tree is implicit: (A, "", ""), (A, "B", "") and (A, "B", "C") are three
    separate rows that together describe the path A > B > C.
    """

    id: str
    main_category: str
    sub_category: str = ""
    detail_category: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> tuple[str, str, str]:
        return (self.main_category, self.sub_category, self.detail_category)

    def label(self, sep: str = " > ") -> str:
        return sep.join(p for p in self.path if p)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Category:
        def s(key: str) -> str:
            v = data.get(key)
            return "" if v is None else str(v)

        known = {"id", "mainCategory", "subCategory", "detailCategory"}
        return cls(
            id=s("id"),
            main_category=s("mainCategory"),
            sub_category=s("subCategory"),
            detail_category=s("detailCategory"),
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "id": self.id,
            "mainCategory": self.main_category,
            "subCategory": self.sub_category,
            "detailCategory": self.detail_category,
        }
