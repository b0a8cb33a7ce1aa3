"""Routes for managing club members."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from footballsys.models import BindError, parse_member
from footballsys.store import Store, StoreError

_NOT_FOUND = "没找到member"


def create_blueprint(store: Store) -> Blueprint:
    """Build the /club routes backed by ``store``."""
    bp = Blueprint("club", __name__, url_prefix="/club")

    @bp.get("/add")
    def add_member():
        try:
            member = parse_member(request.get_data())
        except BindError as exc:
            return jsonify(error=str(exc)), 400
        try:
            member = store.add_member(member)
        except StoreError:
            return jsonify(error="Failed to add member"), 500
        return jsonify(message="Member added successfully", member=member.to_dict())

    @bp.get("/delete")
    def delete_member():
        member_id = request.args.get("id", "")
        name = request.args.get("name", "")
        if member_id:
            try:
                store.delete_member_by_id(member_id)
            except StoreError:
                return jsonify(error="Failed to delete member by id"), 500
            return jsonify(message="Member deleted successfully by id")
        if name:
            try:
                store.delete_member_by_name(name)
            except StoreError:
                return jsonify(error="Failed to delete member by name"), 500
            return jsonify(message="Member deleted successfully by name")
        return jsonify(err=_NOT_FOUND), 400

    @bp.get("/search")
    def search_member():
        name = request.args.get("name", "")
        if not name:
            return jsonify(err=_NOT_FOUND), 400
        try:
            member = store.find_member_by_name(name)
        except StoreError:
            member = None
        if member is None:
            return jsonify(error="Failed to search member by name"), 500
        return jsonify(member=member.to_dict())

    return bp