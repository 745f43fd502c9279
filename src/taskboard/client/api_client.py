# src/taskboard/client/api_client.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..categories.category_models import Category
from ..errors import NotFoundError, TransportError, ValidationError
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(connect=connect_s, read=read_s, write=10.0, pool=connect_s)


class ApiClient:
    """
    Thin JSON client for the tracker HTTP API.

    Failures are mapped onto the error taxonomy:
    - connection problems, timeouts, 5xx, non-JSON bodies -> TransportError
    - 404 -> NotFoundError
    - 400/422 -> ValidationError

    Timeouts are short on purpose: callers should fail fast, not hang.
    """

    def __init__(
        self,
        base_url: str,
        *,
        connect_timeout: float = 5.0,
        read_timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=_make_timeout(connect_timeout, read_timeout),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, path: str, *, json: Any = None) -> Any:
        try:
            resp = self._client.request(method, path, json=json)
        except httpx.HTTPError as ex:
            logger.warning("API %s %s failed: %s", method, path, ex)
            raise TransportError(f"{method} {path} failed: {ex}") from ex

        body = self._decode(resp, method, path)

        if resp.status_code == 404:
            raise NotFoundError(self._entity_for(path), path.rstrip("/").rsplit("/", 1)[-1])
        if resp.status_code in (400, 422):
            raise ValidationError(self._error_message(body) or f"{method} {path} rejected")
        if resp.status_code >= 400:
            raise TransportError(
                f"{method} {path} returned {resp.status_code}: {self._error_message(body)}"
            )
        return body

    @staticmethod
    def _decode(resp: httpx.Response, method: str, path: str) -> Any:
        try:
            return resp.json()
        except ValueError as ex:
            if resp.status_code >= 400:
                return None
            raise TransportError(f"{method} {path} returned malformed JSON") from ex

    @staticmethod
    def _error_message(body: Any) -> str:
        if isinstance(body, dict):
            for key in ("error", "detail"):
                if body.get(key):
                    return str(body[key])
        return ""

    @staticmethod
    def _entity_for(path: str) -> str:
        return "Category" if "/categories" in path else "Task"


def _expect_list(body: Any, what: str) -> list[dict[str, Any]]:
    if not isinstance(body, list):
        raise TransportError(f"Expected a JSON array of {what}")
    return [item for item in body if isinstance(item, dict)]


def _expect_object(body: Any, what: str) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise TransportError(f"Expected a JSON object for {what}")
    return body


class HttpTaskRepo:
    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list_tasks(self) -> list[Task]:
        return [Task.from_dict(d) for d in _expect_list(self._api.request("GET", "/api/tasks"), "tasks")]

    def add_task(self, payload: Mapping[str, Any]) -> Task:
        body = self._api.request("POST", "/api/tasks", json=dict(payload))
        return Task.from_dict(_expect_object(body, "task"))

    def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Task:
        body = self._api.request("PUT", f"/api/tasks/{task_id}", json=dict(changes))
        return Task.from_dict(_expect_object(body, "task"))

    def delete_task(self, task_id: str) -> None:
        self._api.request("DELETE", f"/api/tasks/{task_id}")

    def close(self) -> None:
        self._api.close()


class HttpCategoryRepo:
    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list_categories(self) -> list[Category]:
        body = self._api.request("GET", "/api/categories")
        return [Category.from_dict(d) for d in _expect_list(body, "categories")]

    def add_category(self, payload: Mapping[str, Any]) -> Category:
        body = self._api.request("POST", "/api/categories", json=dict(payload))
        return Category.from_dict(_expect_object(body, "category"))

    def update_category(self, category_id: str, changes: Mapping[str, Any]) -> Category:
        body = self._api.request("PUT", f"/api/categories/{category_id}", json=dict(changes))
        return Category.from_dict(_expect_object(body, "category"))

    def delete_category(self, category_id: str) -> None:
        self._api.request("DELETE", f"/api/categories/{category_id}")

    def close(self) -> None:
        self._api.close()


class HttpHolidaySource:
    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def close(self) -> None:
        self._api.close()

    def load_holidays(self) -> dict[str, dict[str, str]]:
        body = _expect_object(self._api.request("GET", "/api/holidays"), "holidays")
        return {
            str(year): {str(k): str(v) for k, v in days.items()}
            for year, days in body.items()
            if isinstance(days, dict)
        }
