from fastapi.testclient import TestClient

from tasktracker.database import make_engine
from tasktracker.main import create_app


def _create(client: TestClient, title: str) -> dict:
    r = client.post("/tasks", json={"title": title})
    assert r.status_code == 201
    return r.json()


def test_health(client: TestClient):
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "OK"
    assert data["message"]


def test_list_starts_empty(client: TestClient):
    r = client.get("/tasks")
    assert r.status_code == 200
    assert r.json() == []


def test_create_trims_title_and_defaults_to_not_completed(client: TestClient):
    task = _create(client, "  Buy milk  ")
    assert task["title"] == "Buy milk"
    assert task["completed"] is False
    assert isinstance(task["id"], int)
    assert task["created_at"]


def test_create_rejects_empty_titles_without_inserting(client: TestClient):
    for body in ({"title": ""}, {"title": "   "}, {}, {"title": None}, {"title": 42}):
        r = client.post("/tasks", json=body)
        assert r.status_code == 400, body
        assert "detail" in r.json()

    assert client.get("/tasks").json() == []


def test_create_rejects_overlong_title(client: TestClient):
    r = client.post("/tasks", json={"title": "x" * 256})
    assert r.status_code == 400


def test_list_is_newest_first(client: TestClient):
    a = _create(client, "A")
    b = _create(client, "B")

    ids = [t["id"] for t in client.get("/tasks").json()]
    assert ids == [b["id"], a["id"]]
    assert b["id"] > a["id"]


def test_created_task_appears_verbatim_in_list(client: TestClient):
    task = _create(client, "Write report")

    listed = client.get("/tasks").json()
    assert task in listed
    match = next(t for t in listed if t["id"] == task["id"])
    assert match["title"] == "Write report"
    assert match["completed"] is False


def test_toggle_only_changes_completed(client: TestClient):
    task = _create(client, "Walk the dog")

    r = client.patch(f"/tasks/{task['id']}", json={"completed": True})
    assert r.status_code == 200
    updated = r.json()
    assert updated["completed"] is True
    assert {k: v for k, v in updated.items() if k != "completed"} == {
        k: v for k, v in task.items() if k != "completed"
    }

    r = client.patch(f"/tasks/{task['id']}", json={"completed": False})
    assert r.status_code == 200
    assert r.json() == task


def test_toggle_missing_task_is_404_and_changes_nothing(client: TestClient):
    task = _create(client, "Only task")

    r = client.patch(f"/tasks/{task['id'] + 100}", json={"completed": True})
    assert r.status_code == 404
    assert client.get("/tasks").json() == [task]


def test_toggle_rejects_non_boolean_values(client: TestClient):
    task = _create(client, "Strict")

    for value in (1, 0, "true", None, [True]):
        r = client.patch(f"/tasks/{task['id']}", json={"completed": value})
        assert r.status_code == 400, value

    r = client.patch(f"/tasks/{task['id']}", json={})
    assert r.status_code == 400

    assert client.get("/tasks").json() == [task]


def test_non_integer_id_is_rejected(client: TestClient):
    assert client.patch("/tasks/abc", json={"completed": True}).status_code == 400
    assert client.delete("/tasks/abc").status_code == 400


def test_delete_is_permanent(client: TestClient):
    keep = _create(client, "Keep")
    gone = _create(client, "Gone")

    r = client.delete(f"/tasks/{gone['id']}")
    assert r.status_code == 200
    assert r.json()["message"]

    assert client.get("/tasks").json() == [keep]

    r = client.delete(f"/tasks/{gone['id']}")
    assert r.status_code == 404


def test_cors_headers_present(client: TestClient):
    r = client.get("/tasks", headers={"Origin": "http://localhost:8080"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_missing_table_is_a_generic_500(engine):
    # no context manager: the startup hook never creates the table
    client = TestClient(create_app(engine))

    r = client.get("/tasks")
    assert r.status_code == 500
    assert r.json() == {"detail": "Internal server error"}

    r = client.post("/tasks", json={"title": "x"})
    assert r.status_code == 500


def test_startup_survives_unreachable_database(tmp_path):
    bad = make_engine(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'tasks.db'}")

    with TestClient(create_app(bad)) as client:
        assert client.get("/health").status_code == 200
        assert client.get("/tasks").status_code == 500
