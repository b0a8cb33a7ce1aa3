"""Routes for the login page, login and registration."""

from __future__ import annotations

from flask import Blueprint, jsonify, render_template, request

from footballsys.models import BindError, parse_user
from footballsys.store import Store, StoreError

_LOGIN_TEMPLATE = "admin/index.html"


def create_blueprint(store: Store) -> Blueprint:
    """Build the /index routes backed by ``store``."""
    bp = Blueprint("index", __name__, url_prefix="/index")

    @bp.get("/test")
    def success():
        return "成功", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @bp.get("/login")
    def login_page():
        return render_template(_LOGIN_TEMPLATE)

    @bp.post("/login")
    def login():
        try:
            credentials = parse_user(request.get_data())
        except BindError:
            return render_template(_LOGIN_TEMPLATE, error="Invalid request data"), 400
        try:
            user = store.find_user(credentials.username, credentials.password)
        except StoreError:
            user = None
        if user is None:
            return jsonify(error="Invalid username or password"), 401
        return jsonify(user.to_dict())

    @bp.get("/signin")
    def signin():
        try:
            user = parse_user(request.get_data())
        except BindError as exc:
            return jsonify(error=str(exc)), 400
        try:
            store.add_user(user)
        except StoreError:
            return jsonify(error="Failed to add user"), 500
        return jsonify(message="User added successfully:")

    return bp