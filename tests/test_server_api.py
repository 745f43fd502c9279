# tests/test_server_api.py

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from taskboard.server.app import create_app


@pytest.fixture()
def client(settings) -> TestClient:
    return TestClient(create_app(settings))


def _task(**overrides):
    data = {"taskName": "Write report", "category1": "Work", "endDate": "2024-06-03"}
    data.update(overrides)
    return data


def test_task_lifecycle(client: TestClient, settings) -> None:
    assert client.get("/api/tasks").json() == []

    resp = client.post("/api/tasks", json=_task(id="client", createdAt="x"))
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] != "client"
    assert created["createdAt"].endswith("Z")

    on_disk = json.loads(settings.tasks_path.read_text("utf-8"))
    assert [t["id"] for t in on_disk["tasks"]] == [created["id"]]

    resp = client.put(f"/api/tasks/{created['id']}", json={"status": "완료", "id": "other"})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["id"] == created["id"]
    assert updated["status"] == "완료"
    assert updated["taskName"] == "Write report"
    assert updated["createdAt"] == created["createdAt"]

    resp = client.delete(f"/api/tasks/{created['id']}")
    assert resp.json() == {"success": True}
    assert client.get("/api/tasks").json() == []


def test_unknown_task_id_is_404(client: TestClient) -> None:
    resp = client.put("/api/tasks/nope", json={"status": "완료"})
    assert resp.status_code == 404
    assert "nope" in resp.json()["error"]
    assert client.delete("/api/tasks/nope").status_code == 404


def test_empty_task_name_is_400(client: TestClient) -> None:
    resp = client.post("/api/tasks", json=_task(taskName=""))
    assert resp.status_code == 400
    assert "taskName" in resp.json()["error"]

    created = client.post("/api/tasks", json=_task()).json()
    resp = client.put(f"/api/tasks/{created['id']}", json={"taskName": ""})
    assert resp.status_code == 400
    assert client.get("/api/tasks").json()[0]["taskName"] == "Write report"


def test_category_lifecycle(client: TestClient) -> None:
    resp = client.post("/api/categories", json={"mainCategory": "Work", "subCategory": "Reports"})
    assert resp.status_code == 201
    cat = resp.json()
    assert cat["detailCategory"] == ""

    resp = client.put(f"/api/categories/{cat['id']}", json={"detailCategory": "Weekly"})
    assert resp.json()["detailCategory"] == "Weekly"
    assert [c["id"] for c in client.get("/api/categories").json()] == [cat["id"]]

    assert client.delete(f"/api/categories/{cat['id']}").json() == {"success": True}
    assert client.delete(f"/api/categories/{cat['id']}").status_code == 404
    assert client.post("/api/categories", json={"mainCategory": ""}).status_code == 400


def test_holidays_are_served_as_stored(client: TestClient, settings) -> None:
    assert client.get("/api/holidays").json() == {}
    settings.holidays_path.write_text(
        json.dumps({"2024": {"06-06": "현충일"}}, ensure_ascii=False), "utf-8"
    )
    assert client.get("/api/holidays").json() == {"2024": {"06-06": "현충일"}}


def test_malformed_document_is_503(client: TestClient, settings) -> None:
    settings.tasks_path.write_text("{broken", "utf-8")
    resp = client.get("/api/tasks")
    assert resp.status_code == 503
    assert resp.json() == {"error": "storage unavailable"}


def test_static_files_are_mounted_when_present(settings) -> None:
    settings.static_dir.mkdir()
    (settings.static_dir / "index.html").write_text("<h1>taskboard</h1>", "utf-8")
    client = TestClient(create_app(settings))

    assert "taskboard" in client.get("/").text
    assert client.get("/api/tasks").status_code == 200
