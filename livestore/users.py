"""Create, read, update and delete users."""

from __future__ import annotations

import logging
import sqlite3

from livestore.db import NotFoundError
from livestore.models import User

logger = logging.getLogger("livestore")


def _fetch(conn: sqlite3.Connection, user_id: int) -> User:
    row = conn.execute(
        "SELECT id, user_name, avatar FROM users WHERE id = ?", (user_id,)
    ).fetchone()
    if row is None:
        raise NotFoundError(f"No user found with id {user_id}")
    return User.from_row(row)


def create(conn: sqlite3.Connection, user_name: str, avatar: str | None = None) -> User:
    """Insert a user; without an avatar the table default is used."""
    values = {"user_name": user_name}
    if avatar is not None:
        values["avatar"] = avatar
    columns = ", ".join(values)
    placeholders = ", ".join("?" for _ in values)
    with conn:
        cursor = conn.execute(
            f"INSERT INTO users ({columns}) VALUES ({placeholders})",
            tuple(values.values()),
        )
        user = _fetch(conn, cursor.lastrowid)
    logger.info("insert a User: %r", user)
    return user


def update(
    conn: sqlite3.Connection,
    user_id: int,
    user_name: str | None = None,
    avatar: str | None = None,
) -> User:
    """Change the given fields of a user and return the updated row."""
    changes = {"user_name": user_name, "avatar": avatar}
    changes = {column: value for column, value in changes.items() if value is not None}
    if not changes:
        raise ValueError("There are no changes to save")
    assignments = ", ".join(f"{column} = ?" for column in changes)
    with conn:
        cursor = conn.execute(
            f"UPDATE users SET {assignments} WHERE id = ?",
            (*changes.values(), user_id),
        )
        if cursor.rowcount == 0:
            raise NotFoundError(f"No user found with id {user_id}")
        user = _fetch(conn, user_id)
    logger.info("update a User: %r", user)
    return user


def read(conn: sqlite3.Connection, user_id: int | None = None) -> list[User]:
    """Return one user by id, or every user, ordered by id."""
    if user_id is None:
        rows = conn.execute(
            "SELECT id, user_name, avatar FROM users ORDER BY id"
        ).fetchall()
    else:
        rows = conn.execute(
            "SELECT id, user_name, avatar FROM users WHERE id = ? ORDER BY id",
            (user_id,),
        ).fetchall()
    found = [User.from_row(row) for row in rows]
    logger.info("read User(s): %r", found)
    return found


def delete(conn: sqlite3.Connection, user_id: int) -> int:
    """Delete a user and return how many rows were removed."""
    with conn:
        count = conn.execute("DELETE FROM users WHERE id = ?", (user_id,)).rowcount
    if count == 0:
        raise NotFoundError(f"No user found with id {user_id}")
    logger.info("deleted %d User(s)", count)
    return count