# src/taskboard/categories/category_api.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..core.state import AppState, reload_categories
from ..errors import ValidationError
from .category_models import Category

logger = logging.getLogger(__name__)

COPY_SUFFIX = " (복사본)"


def validate_category_payload(payload: Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    data = dict(payload)
    for key in ("mainCategory", "subCategory", "detailCategory"):
        if data.get(key) is None and key in data:
            data[key] = ""
        if key in data and not isinstance(data[key], str):
            raise ValidationError(f"{key} must be a string")

    if not partial or "mainCategory" in data:
        main = data.get("mainCategory")
        if not isinstance(main, str) or not main.strip():
            raise ValidationError("mainCategory is required")

    if not partial:
        data.setdefault("subCategory", "")
        data.setdefault("detailCategory", "")
        if data["detailCategory"] and not data["subCategory"]:
            raise ValidationError("detailCategory requires subCategory")

    return data


def create_category(state: AppState, payload: Mapping[str, Any]) -> Category:
    created = state.category_repo.add_category(validate_category_payload(payload))
    logger.info("Category created id=%s path=%s", created.id, created.label())
    reload_categories(state)
    return created


def update_category(state: AppState, category_id: str, changes: Mapping[str, Any]) -> Category:
    data = validate_category_payload(changes, partial=True)
    data.pop("id", None)
    updated = state.category_repo.update_category(category_id, data)
    if updated.detail_category and not updated.sub_category:
        logger.warning("Category id=%s has a detail without a sub level", category_id)
    logger.info("Category updated id=%s path=%s", category_id, updated.label())
    reload_categories(state)
    return updated


def delete_category(state: AppState, category_id: str) -> None:
    # Tasks that still reference this name keep it (no cascade, no rename).
    state.category_repo.delete_category(category_id)
    logger.info("Category deleted id=%s", category_id)
    reload_categories(state)


def copy_category_payload(category: Category) -> dict[str, Any]:
    """Mark the most specific non-empty level as a copy."""
    data = category.to_dict()
    data.pop("id", None)
    if category.detail_category:
        data["detailCategory"] = category.detail_category + COPY_SUFFIX
    elif category.sub_category:
        data["subCategory"] = category.sub_category + COPY_SUFFIX
    else:
        data["mainCategory"] = category.main_category + COPY_SUFFIX
    return data


def copy_category(state: AppState, category: Category) -> Category:
    return create_category(state, copy_category_payload(category))
