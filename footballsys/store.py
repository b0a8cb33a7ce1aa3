"""SQLite-backed storage for users, members and training records."""

from __future__ import annotations

import dataclasses
import sqlite3
import threading
from contextlib import contextmanager

from footballsys.models import Member, Train, User

_SCHEMA = """
CREATE TABLE IF NOT EXISTS user (username TEXT, password TEXT);
CREATE TABLE IF NOT EXISTS members (
    id INTEGER PRIMARY KEY AUTOINCREMENT, username TEXT, identity TEXT,
    name TEXT, age INTEGER, position TEXT, jersey_number INTEGER
);
CREATE TABLE IF NOT EXISTS "Train" (
    user_id INTEGER, name TEXT, date TEXT, content TEXT,
    intensity TEXT, duration INTEGER, injury INTEGER
);
"""

_MEMBER_COLUMNS = "id, username, identity, name, age, position, jersey_number"
_TRAIN_COLUMNS = "user_id, name, date, content, intensity, duration, injury"


class StoreError(Exception):
    """Raised when the database rejects an operation."""


class Store:
    """Thread-safe access to the application's database."""

    def __init__(self, path):
        try:
            self._conn = sqlite3.connect(str(path), check_same_thread=False)
            self._conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise StoreError(f"cannot open database {path}: {exc}") from exc
        self._lock = threading.Lock()

    def __enter__(self) -> Store:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    @contextmanager
    def _cursor(self):
        with self._lock:
            try:
                with self._conn:
                    yield self._conn.cursor()
            except sqlite3.Error as exc:
                raise StoreError(str(exc)) from exc

    def _execute(self, sql: str, params: tuple):
        with self._cursor() as cur:
            cur.execute(sql, params)
            return cur.fetchone(), cur.lastrowid, cur.rowcount

    def add_user(self, user: User) -> User:
        self._execute("INSERT INTO user (username, password) VALUES (?, ?)", (user.username, user.password))
        return user

    def find_user(self, username: str, password: str) -> User | None:
        """Return the first user with these credentials, or None."""
        row, _, _ = self._execute(
            "SELECT username, password FROM user WHERE username = ? AND password = ? ORDER BY rowid LIMIT 1",
            (username, password),
        )
        return User(*row) if row else None

    def add_member(self, member: Member) -> Member:
        """Insert a member; an id of zero is assigned by the database."""
        values = dataclasses.astuple(member)[1:]
        _, new_id, _ = self._execute(
            f"INSERT INTO members ({_MEMBER_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)", (member.id or None, *values)
        )
        return dataclasses.replace(member, id=new_id)

    def delete_member_by_id(self, member_id) -> int:
        """Delete members with this id; return how many were removed."""
        return self._execute("DELETE FROM members WHERE id = ?", (member_id,))[2]

    def delete_member_by_name(self, name: str) -> int:
        """Delete members with this name; return how many were removed."""
        return self._execute("DELETE FROM members WHERE name = ?", (name,))[2]

    def find_member_by_name(self, name: str) -> Member | None:
        row, _, _ = self._execute(
            f"SELECT {_MEMBER_COLUMNS} FROM members WHERE name = ? ORDER BY id LIMIT 1", (name,)
        )
        return Member(*row) if row else None

    def add_train(self, train: Train) -> Train:
        *values, injury = dataclasses.astuple(train)
        self._execute(
            f'INSERT INTO "Train" ({_TRAIN_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)', (*values, int(injury))
        )
        return train

    def _find_train(self, column: str, value) -> Train | None:
        row, _, _ = self._execute(
            f'SELECT {_TRAIN_COLUMNS} FROM "Train" WHERE {column} = ? ORDER BY rowid LIMIT 1', (value,)
        )
        if row is None:
            return None
        *values, injury = row
        return Train(*values, injury=bool(injury))

    def find_train_by_user_id(self, user_id) -> Train | None:
        return self._find_train("user_id", user_id)

    def find_train_by_name(self, name: str) -> Train | None:
        return self._find_train("name", name)