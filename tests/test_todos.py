from http import HTTPStatus

import pytest


@pytest.fixture()
def owner(register_user, auth_headers):
    _, token = register_user("a@x.com", "secret1")
    return auth_headers(token)


@pytest.fixture()
def intruder(register_user, auth_headers):
    _, token = register_user("b@x.com", "secret2")
    return auth_headers(token)


def _create(client, headers, title="Task 1", **extra):
    response = client.post("/api/todos", json={"title": title, **extra}, headers=headers)
    assert response.status_code == HTTPStatus.CREATED, response.text
    return response.json()["data"]


def test_create_trims_title_and_defaults_to_pending(client, owner):
    response = client.post("/api/todos", json={"title": "  Buy milk  "}, headers=owner)

    assert response.status_code == HTTPStatus.CREATED
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Todo created successfully."
    assert body["data"]["title"] == "Buy milk"
    assert body["data"]["status"] == "Pending"


@pytest.mark.parametrize("title", ["", "   ", None])
def test_create_rejects_empty_title(client, owner, title):
    response = client.post("/api/todos", json={"title": title}, headers=owner)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {"success": False, "message": "Title is required."}


def test_create_rejects_unknown_status(client, owner):
    response = client.post("/api/todos", json={"title": "Task", "status": "Archived"}, headers=owner)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["message"] == 'Status must be either "Pending" or "Completed".'


def test_create_ignores_client_supplied_owner(client, register_user, auth_headers):
    victim, _ = register_user("victim@x.com", "secret1")
    attacker, token = register_user("attacker@x.com", "secret1")

    todo = _create(client, auth_headers(token), user=victim["id"], owner_id=victim["id"])

    assert todo["user"] == attacker["id"]


def test_list_is_scoped_to_owner_and_newest_first(client, owner, intruder):
    _create(client, owner, "first")
    _create(client, owner, "second")
    _create(client, intruder, "not yours")

    response = client.get("/api/todos", headers=owner)

    assert response.status_code == HTTPStatus.OK
    body = response.json()
    assert body["count"] == 2
    assert [todo["title"] for todo in body["data"]] == ["second", "first"]


def test_update_status_leaves_title_unchanged(client, owner):
    todo = _create(client, owner, "Task 1")

    response = client.put(f"/api/todos/{todo['id']}", json={"status": "Completed"}, headers=owner)

    assert response.status_code == HTTPStatus.OK
    assert response.json()["data"]["status"] == "Completed"
    assert response.json()["data"]["title"] == "Task 1"


def test_update_title_is_trimmed(client, owner):
    todo = _create(client, owner)

    response = client.put(f"/api/todos/{todo['id']}", json={"title": "  Renamed "}, headers=owner)

    assert response.json()["data"]["title"] == "Renamed"
    assert response.json()["data"]["status"] == "Pending"


def test_update_rejects_unknown_status_without_changing_todo(client, owner):
    todo = _create(client, owner, "Task 1")

    response = client.put(
        f"/api/todos/{todo['id']}", json={"title": "Changed", "status": "Archived"}, headers=owner
    )

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["message"] == 'Status must be either "Pending" or "Completed".'
    listed = client.get("/api/todos", headers=owner).json()["data"]
    assert listed[0]["title"] == "Task 1"


def test_update_requires_a_field(client, owner):
    todo = _create(client, owner)

    response = client.put(f"/api/todos/{todo['id']}", json={}, headers=owner)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["message"] == "At least one field (title or status) is required for update."


def test_update_rejects_blank_title(client, owner):
    todo = _create(client, owner)

    response = client.put(f"/api/todos/{todo['id']}", json={"title": "   "}, headers=owner)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["message"] == "Title cannot be empty."


def test_other_users_cannot_update_or_delete(client, owner, intruder):
    todo = _create(client, owner, "mine")

    update = client.put(f"/api/todos/{todo['id']}", json={"title": "hijacked"}, headers=intruder)
    delete = client.delete(f"/api/todos/{todo['id']}", headers=intruder)

    expected = {
        "success": False,
        "message": "Access denied. You do not have permission to access this todo.",
    }
    assert update.status_code == delete.status_code == HTTPStatus.FORBIDDEN
    assert update.json() == delete.json() == expected
    assert client.get("/api/todos", headers=owner).json()["data"][0]["title"] == "mine"


def test_missing_todo_is_not_found(client, owner):
    update = client.put("/api/todos/999", json={"title": "x"}, headers=owner)
    delete = client.delete("/api/todos/999", headers=owner)

    assert update.status_code == delete.status_code == HTTPStatus.NOT_FOUND
    assert update.json() == {"success": False, "message": "Todo not found."}


def test_non_integer_id_is_a_validation_error(client, owner):
    response = client.delete("/api/todos/not-an-id", headers=owner)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["success"] is False


def test_authentication_is_checked_before_ownership(client, owner):
    todo = _create(client, owner)

    response = client.delete(f"/api/todos/{todo['id']}")

    assert response.status_code == HTTPStatus.UNAUTHORIZED


def test_full_todo_lifecycle(client):
    register = client.post("/api/auth/register", json={"email": "a@x.com", "password": "secret1"})
    assert register.status_code == HTTPStatus.CREATED

    login = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
    headers = {"Authorization": f"Bearer {login.json()['data']['token']}"}

    created = client.post("/api/todos", json={"title": "Task 1"}, headers=headers).json()["data"]

    listed = client.get("/api/todos", headers=headers).json()
    assert listed["count"] == 1
    assert listed["data"][0]["status"] == "Pending"

    toggled = client.put(f"/api/todos/{created['id']}", json={"status": "Completed"}, headers=headers)
    assert toggled.status_code == HTTPStatus.OK
    assert client.get("/api/todos", headers=headers).json()["data"][0]["status"] == "Completed"

    deleted = client.delete(f"/api/todos/{created['id']}", headers=headers)
    assert deleted.status_code == HTTPStatus.OK
    assert deleted.json() == {"success": True, "message": "Todo deleted successfully."}

    final = client.get("/api/todos", headers=headers).json()
    assert final == {"success": True, "count": 0, "data": []}


@pytest.mark.parametrize("todo_id", ["0", "99999999999999999999"])
def test_out_of_range_id_is_not_found(client, owner, todo_id):
    update = client.put(f"/api/todos/{todo_id}", json={"title": "x"}, headers=owner)
    delete = client.delete(f"/api/todos/{todo_id}", headers=owner)

    assert update.status_code == delete.status_code == HTTPStatus.NOT_FOUND
    assert update.json() == delete.json() == {"success": False, "message": "Todo not found."}


def test_update_rejects_null_title_alongside_status(client, owner):
    todo = _create(client, owner, "keep me")

    response = client.put(
        f"/api/todos/{todo['id']}", json={"title": None, "status": "Completed"}, headers=owner
    )

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {"success": False, "message": "Title cannot be empty."}
    listed = client.get("/api/todos", headers=owner).json()["data"]
    assert listed[0]["title"] == "keep me"
    assert listed[0]["status"] == "Pending"


def test_update_with_only_null_fields_requires_a_field(client, owner):
    todo = _create(client, owner)

    response = client.put(f"/api/todos/{todo['id']}", json={"title": None, "status": None}, headers=owner)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json()["message"] == "At least one field (title or status) is required for update."
