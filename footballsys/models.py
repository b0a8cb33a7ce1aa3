"""Records exchanged over the API and their JSON binding rules."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

_JSON_NAMES = {"id": "Id"}


class BindError(ValueError):
    """Raised when request data cannot be bound to a record."""


def _decode(data: Any) -> Mapping:
    try:
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        if isinstance(data, str):
            data = json.loads(data)
    except ValueError as exc:
        raise BindError(f"invalid JSON: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise BindError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _lookup(obj: Mapping, key: str) -> Any:
    """Find a key exactly, falling back to a case-insensitive match."""
    if key in obj:
        return obj[key]
    return next((v for k, v in obj.items() if isinstance(k, str) and k.lower() == key.lower()), None)


def _bind(cls: type, data: Any) -> Any:
    obj = _decode(data)
    values = {}
    for field in fields(cls):
        key = _JSON_NAMES.get(field.name, field.name)
        raw = _lookup(obj, key)
        if raw is None:
            continue
        kind = type(field.default)
        if type(raw) is not kind:
            raise BindError(f"field {key!r}: cannot bind {type(raw).__name__} to {kind.__name__}")
        if kind is int and not -(2**63) <= raw < 2**63:
            raise BindError(f"field {key!r}: number {raw} overflows int")
        values[field.name] = raw
    return cls(**values)


def _as_json(record: Any) -> dict[str, Any]:
    return {_JSON_NAMES.get(name, name): value for name, value in asdict(record).items()}


@dataclass
class User:
    """An account that can log in."""

    username: str = ""
    password: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the record as its JSON object."""
        return _as_json(self)


@dataclass
class Member:
    """A club member such as a player, coach or administrator."""

    id: int = 0
    username: str = ""
    identity: str = ""
    name: str = ""
    age: int = 0
    position: str = ""
    jersey_number: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the record as its JSON object."""
        return _as_json(self)


@dataclass
class Train:
    """One training session record."""

    user_id: int = 0
    name: str = ""
    date: str = ""
    content: str = ""
    intensity: str = ""
    duration: int = 0
    injury: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the record as its JSON object."""
        return _as_json(self)


def parse_user(data: Any) -> User:
    """Bind raw JSON (bytes, str or mapping) to a User."""
    return _bind(User, data)


def parse_member(data: Any) -> Member:
    """Bind raw JSON (bytes, str or mapping) to a Member."""
    return _bind(Member, data)


def parse_train(data: Any) -> Train:
    """Bind raw JSON (bytes, str or mapping) to a Train."""
    return _bind(Train, data)