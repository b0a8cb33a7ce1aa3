import json

import pytest
from flask import Flask

from footballsys.index import create_blueprint
from footballsys.store import Store


@pytest.fixture
def store():
    db = Store(":memory:")
    yield db
    db.close()


@pytest.fixture
def client(store, tmp_path):
    page = tmp_path / "admin" / "index.html"
    page.parent.mkdir()
    page.write_text("{{ error or 'login page' }}", encoding="utf-8")
    app = Flask(__name__, template_folder=str(tmp_path))
    app.register_blueprint(create_blueprint(store))
    return app.test_client()


def _credentials(username):
    password = "password"
    return json.dumps({"username": username, "password": password})


def test_success_route(client):
    resp = client.get("/index/test")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "成功"


def test_login_page_renders_template(client):
    resp = client.get("/index/login")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "login page"


def test_signin_then_login(client, store):
    resp = client.get("/index/signin", data=_credentials("alice"))
    assert resp.get_json() == {"message": "User added successfully:"}
    resp = client.post("/index/login", data=_credentials("alice"))
    assert resp.status_code == 200
    assert resp.get_json() == {"username": "alice", "password": "password"}


def test_login_unknown_user(client):
    resp = client.post("/index/login", data=_credentials("nobody"))
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid username or password"}


def test_login_bad_body_renders_error(client):
    resp = client.post("/index/login", data="not json")
    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Invalid request data"


def test_signin_bad_body(client):
    resp = client.get("/index/signin", data=json.dumps({"username": 1}))
    assert resp.status_code == 400
    assert "error" in resp.get_json()