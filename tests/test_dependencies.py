from src.db import crud
from src.dependencies import set_todo_owner


def test_set_todo_owner_replaces_client_supplied_owner(db_session):
    owner = crud.create_user(db_session, "owner@x.com", "secret1")
    payload = {"title": "x", "status": None, "user": 99, "owner": 99, "owner_id": 99}

    owned = set_todo_owner(payload, owner)

    assert owned == {"title": "x", "status": None, "owner_id": owner.id}
    assert payload["user"] == payload["owner"] == payload["owner_id"] == 99


def test_set_todo_owner_adds_owner_when_absent(db_session):
    owner = crud.create_user(db_session, "owner@x.com", "secret1")

    owned = set_todo_owner({"title": "x"}, owner)

    assert owned == {"title": "x", "owner_id": owner.id}
