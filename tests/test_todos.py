from tests.conftest import USER_ID


def _todos(client, headers):
    resp = client.get("/api/v1/todos", headers=headers)
    assert resp.status_code == 200
    return resp.json()


def test_todo_lifecycle(client, auth_headers):
    resp = client.post("/api/v1/todos", json={"task": "buy milk"}, headers=auth_headers)
    assert resp.status_code == 201
    todo = resp.json()
    assert todo["task"] == "buy milk"
    assert todo["is_complete"] is False
    assert todo["user_id"] == USER_ID

    listing = _todos(client, auth_headers)
    assert [t["task"] for t in listing["items"]] == ["buy milk"]

    toggled = client.post(f"/api/v1/todos/{todo['id']}/toggle", headers=auth_headers).json()
    assert toggled["is_complete"] is True
    toggled = client.post(f"/api/v1/todos/{todo['id']}/toggle", headers=auth_headers).json()
    assert toggled["is_complete"] is False

    resp = client.delete(f"/api/v1/todos/{todo['id']}?confirm=true", headers=auth_headers)
    assert resp.status_code == 204
    assert _todos(client, auth_headers)["items"] == []


def test_todos_are_listed_in_insertion_order_with_stats(client, auth_headers):
    for task in ("first", "second", "third"):
        client.post("/api/v1/todos", json={"task": task}, headers=auth_headers)
    second_id = _todos(client, auth_headers)["items"][1]["id"]
    client.post(f"/api/v1/todos/{second_id}/toggle", headers=auth_headers)

    listing = _todos(client, auth_headers)
    assert [t["task"] for t in listing["items"]] == ["first", "second", "third"]
    assert listing["stats"] == {"total": 3, "completed": 1, "pending": 2}


def test_blank_task_is_rejected(client, fake, auth_headers):
    resp = client.post("/api/v1/todos", json={"task": "   "}, headers=auth_headers)
    assert resp.status_code == 422
    assert fake.calls_of("insert", "todos") == 0


def test_failed_create_leaves_collection_unchanged(client, fake, auth_headers):
    client.post("/api/v1/todos", json={"task": "kept"}, headers=auth_headers)
    fake.fail("insert", "todos")

    resp = client.post("/api/v1/todos", json={"task": "lost"}, headers=auth_headers)
    assert resp.status_code == 502
    assert len(_todos(client, auth_headers)["items"]) == 1


def test_delete_requires_confirmation(client, auth_headers):
    todo = client.post("/api/v1/todos", json={"task": "keep me"}, headers=auth_headers).json()
    resp = client.delete(f"/api/v1/todos/{todo['id']}", headers=auth_headers)
    assert resp.status_code == 409
    assert len(_todos(client, auth_headers)["items"]) == 1


def test_other_users_todos_are_invisible(client, auth_headers, other_headers):
    todo = client.post("/api/v1/todos", json={"task": "private"}, headers=auth_headers).json()

    assert _todos(client, other_headers)["items"] == []
    assert client.post(f"/api/v1/todos/{todo['id']}/toggle", headers=other_headers).status_code == 404
    assert client.delete(f"/api/v1/todos/{todo['id']}?confirm=true", headers=other_headers).status_code == 404
    assert _todos(client, auth_headers)["items"][0]["is_complete"] is False


def test_fetch_failure_is_reported(client, fake, auth_headers):
    fake.fail("select", "todos")
    resp = client.get("/api/v1/todos", headers=auth_headers)
    assert resp.status_code == 502
    assert "todo" in resp.json()["detail"]
