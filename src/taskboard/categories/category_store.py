# src/taskboard/categories/category_store.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import NotFoundError, ValidationError
from ..storage.json_file import JsonDocument, new_record_id
from .category_models import Category

logger = logging.getLogger(__name__)


class CategoryStore:
    """JSON file category store ({"categories": [...]}); same write model as TaskStore."""

    def __init__(self, path: str | Path = "categories.json") -> None:
        self._doc = JsonDocument(path, "categories")
        logger.info("CategoryStore ready path=%s", self._doc.path)

    def list_categories(self) -> list[Category]:
        return [Category.from_dict(r) for r in self._doc.read_records()]

    def add_category(self, payload: Mapping[str, Any]) -> Category:
        main = payload.get("mainCategory")
        if not isinstance(main, str) or not main.strip():
            raise ValidationError("mainCategory is required")

        records = self._doc.read_records()
        record = {k: v for k, v in payload.items() if k != "id"}
        record["id"] = new_record_id(str(r.get("id")) for r in records)
        records.append(record)
        self._doc.write_records(records)

        logger.debug("Category added id=%s main=%s", record["id"], main)
        return Category.from_dict(record)

    def update_category(self, category_id: str, changes: Mapping[str, Any]) -> Category:
        records = self._doc.read_records()
        for i, r in enumerate(records):
            if r.get("id") != category_id:
                continue
            merged = {**r, **changes, "id": category_id}
            records[i] = merged
            self._doc.write_records(records)
            return Category.from_dict(merged)
        raise NotFoundError("Category", category_id)

    def delete_category(self, category_id: str) -> None:
        # Children and tasks referencing this name are left as they are.
        records = self._doc.read_records()
        kept = [r for r in records if r.get("id") != category_id]
        if len(kept) == len(records):
            raise NotFoundError("Category", category_id)
        self._doc.write_records(kept)
        logger.debug("Category deleted id=%s", category_id)
