# src/taskboard/server/app.py

"""
HTTP API over the JSON documents.

Routes (JSON bodies):
  GET    /api/tasks              -> [Task]
  POST   /api/tasks              -> Task (201; id/createdAt assigned here)
  PUT    /api/tasks/{id}         -> merged Task, 404 if missing
  DELETE /api/tasks/{id}         -> {"success": true}, 404 if missing
  same four for /api/categories
  GET    /api/holidays           -> {year: {"MM-DD": name}}

Handlers run in FastAPI's threadpool and the stores do not lock, so two
overlapping writes can race; the later one wins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..categories.category_store import CategoryStore
from ..config import get_settings
from ..errors import NotFoundError, TransportError, ValidationError
from ..storage.holidays import HolidayFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _tasks(request: Request) -> TaskStore:
    return request.app.state.task_store


def _categories(request: Request) -> CategoryStore:
    return request.app.state.category_store


# ---- tasks ----


@router.get("/tasks")
def list_tasks(request: Request) -> list[dict[str, Any]]:
    return [t.to_dict() for t in _tasks(request).list_tasks()]


@router.post("/tasks", status_code=201)
def create_task(request: Request, payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    task = _tasks(request).add_task(payload)
    logger.info("POST /tasks id=%s", task.id)
    return task.to_dict()


@router.put("/tasks/{task_id}")
def update_task(
    request: Request, task_id: str, payload: dict[str, Any] = Body(...)
) -> dict[str, Any]:
    return _tasks(request).update_task(task_id, payload).to_dict()


@router.delete("/tasks/{task_id}")
def delete_task(request: Request, task_id: str) -> dict[str, bool]:
    _tasks(request).delete_task(task_id)
    logger.info("DELETE /tasks/%s", task_id)
    return {"success": True}


# ---- categories ----


@router.get("/categories")
def list_categories(request: Request) -> list[dict[str, Any]]:
    return [c.to_dict() for c in _categories(request).list_categories()]


@router.post("/categories", status_code=201)
def create_category(request: Request, payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    return _categories(request).add_category(payload).to_dict()


@router.put("/categories/{category_id}")
def update_category(
    request: Request, category_id: str, payload: dict[str, Any] = Body(...)
) -> dict[str, Any]:
    return _categories(request).update_category(category_id, payload).to_dict()


@router.delete("/categories/{category_id}")
def delete_category(request: Request, category_id: str) -> dict[str, bool]:
    _categories(request).delete_category(category_id)
    return {"success": True}


# ---- holidays ----


@router.get("/holidays")
def list_holidays(request: Request) -> dict[str, dict[str, str]]:
    return request.app.state.holiday_file.load_holidays()


# ---- error mapping ----


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def _invalid(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _storage_failed(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"error": "storage unavailable"})


def create_app(
    settings: Any = None,
    *,
    task_store: TaskStore | None = None,
    category_store: CategoryStore | None = None,
    holiday_file: HolidayFile | None = None,
) -> FastAPI:
    if settings is None:
        settings = get_settings()

    app = FastAPI(title=str(getattr(settings, "app_name", "taskboard")), version=__version__)
    app.state.task_store = task_store or TaskStore(settings.tasks_path)
    app.state.category_store = category_store or CategoryStore(settings.categories_path)
    app.state.holiday_file = holiday_file or HolidayFile(settings.holidays_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(getattr(settings, "cors_origins", ["*"])),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(ValidationError, _invalid)
    app.add_exception_handler(TransportError, _storage_failed)

    app.include_router(router)

    static_dir = getattr(settings, "static_dir", None)
    if static_dir and Path(static_dir).is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
        logger.info("Serving static files from %s", static_dir)

    return app
