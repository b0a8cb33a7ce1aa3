import json

import pytest
from flask import Flask

from footballsys.club import create_blueprint
from footballsys.store import Store


@pytest.fixture
def store():
    db = Store(":memory:")
    yield db
    db.close()


@pytest.fixture
def client(store):
    app = Flask(__name__)
    app.register_blueprint(create_blueprint(store))
    return app.test_client()


def _add(client, **fields):
    return client.get("/club/add", data=json.dumps(fields), content_type="application/json")


def test_add_member(client, store):
    resp = _add(client, name="Ann", age=20, position="keeper", jersey_number=1)
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["message"] == "Member added successfully"
    assert body["member"]["name"] == "Ann"
    assert body["member"]["Id"] == store.find_member_by_name("Ann").id


def test_add_member_bad_json(client):
    resp = client.get("/club/add", data="{broken")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_add_member_duplicate_id(client):
    _add(client, Id=5, name="Ann")
    resp = _add(client, Id=5, name="Ben")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to add member"}


def test_search_member(client):
    _add(client, name="Ben", age=23)
    resp = client.get("/club/search", query_string={"name": "Ben"})
    assert resp.status_code == 200
    assert resp.get_json()["member"]["age"] == 23


def test_search_member_missing(client):
    resp = client.get("/club/search", query_string={"name": "ghost"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to search member by name"}


def test_search_without_name(client):
    resp = client.get("/club/search")
    assert resp.status_code == 400
    assert resp.get_json() == {"err": "没找到member"}


def test_delete_by_id(client, store):
    member_id = _add(client, name="Cid").get_json()["member"]["Id"]
    resp = client.get("/club/delete", query_string={"id": member_id})
    assert resp.get_json() == {"message": "Member deleted successfully by id"}
    assert store.find_member_by_name("Cid") is None


def test_delete_by_name(client, store):
    _add(client, name="Dee")
    resp = client.get("/club/delete", query_string={"name": "Dee"})
    assert resp.get_json() == {"message": "Member deleted successfully by name"}
    assert store.find_member_by_name("Dee") is None


def test_delete_without_parameters(client):
    resp = client.get("/club/delete")
    assert resp.status_code == 400
    assert resp.get_json() == {"err": "没找到member"}