"""Routes for recording and looking up training sessions."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from footballsys.models import BindError, parse_train
from footballsys.store import Store, StoreError


def create_blueprint(store: Store) -> Blueprint:
    """Build the /train routes backed by ``store``."""
    bp = Blueprint("train", __name__, url_prefix="/train")

    @bp.get("/add")
    def train_add():
        try:
            record = parse_train(request.get_data())
        except BindError as exc:
            return jsonify(error=str(exc)), 400
        try:
            store.add_train(record)
        except StoreError:
            return jsonify(error="Failed to fill in the training information"), 500
        return jsonify(message="Complete the training information successfully:")

    @bp.get("/search")
    def train_search():
        name = request.args.get("name", "")
        user_id = request.args.get("user_id", "")
        if user_id:
            lookup, value, failure = (
                store.find_train_by_user_id,
                user_id,
                "Failed to search member by id",
            )
        elif name:
            lookup, value, failure = (
                store.find_train_by_name,
                name,
                "Failed to search member by name",
            )
        else:
            return jsonify(err="没找到member"), 400
        try:
            record = lookup(value)
        except StoreError:
            record = None
        if record is None:
            return jsonify(error=failure), 500
        return jsonify(message=record.to_dict())

    return bp