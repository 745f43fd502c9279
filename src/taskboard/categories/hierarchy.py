# src/taskboard/categories/hierarchy.py

"""
Category tree and cascading selection lists.

Ordering rule: all three levels (main, sub, detail) are sorted
lexicographically by name. The tree is built in one pass per reload and
stored on AppState; callers do not re-derive it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .category_models import Category


@dataclass(slots=True)
class DetailNode:
    name: str
    record: Category


@dataclass(slots=True)
class SubNode:
    name: str
    # Row that defines the (main, sub) level itself; None if only deeper rows exist.
    record: Category | None = None
    details: list[DetailNode] = field(default_factory=list)


@dataclass(slots=True)
class MainNode:
    name: str
    record: Category | None = None
    subs: list[SubNode] = field(default_factory=list)

    def find_sub(self, name: str) -> SubNode | None:
        for s in self.subs:
            if s.name == name:
                return s
        return None


CategoryTree = list[MainNode]


def build_category_tree(categories: Iterable[Category]) -> CategoryTree:
    mains: dict[str, MainNode] = {}
    subs: dict[tuple[str, str], SubNode] = {}

    for cat in categories:
        main = mains.setdefault(cat.main_category, MainNode(name=cat.main_category))

        if cat.sub_category:
            key = (cat.main_category, cat.sub_category)
            sub = subs.get(key)
            if sub is None:
                sub = subs[key] = SubNode(name=cat.sub_category)
                main.subs.append(sub)
            if cat.detail_category:
                sub.details.append(DetailNode(name=cat.detail_category, record=cat))
            else:
                sub.record = cat
        elif not cat.detail_category:
            main.record = cat
        # (main, "", detail) rows have no place in the tree and are skipped.

    for main in mains.values():
        main.subs.sort(key=lambda s: s.name)
        for sub in main.subs:
            sub.details.sort(key=lambda d: d.name)

    return sorted(mains.values(), key=lambda m: m.name)


def _distinct_sorted(values: Iterable[str]) -> list[str]:
    return sorted({v for v in values if v})


def main_categories(categories: Iterable[Category]) -> list[str]:
    return _distinct_sorted(c.main_category for c in categories)


def sub_categories(categories: Iterable[Category], main: str) -> list[str]:
    """Distinct non-empty sub names under main (first level of the cascade)."""
    if not main:
        return []
    return _distinct_sorted(c.sub_category for c in categories if c.main_category == main)


def detail_categories(categories: Iterable[Category], main: str, sub: str) -> list[str]:
    if not main or not sub:
        return []
    return _distinct_sorted(
        c.detail_category
        for c in categories
        if c.main_category == main and c.sub_category == sub
    )
