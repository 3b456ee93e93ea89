"""Create, read, update and delete rooms."""

from __future__ import annotations

import logging
import sqlite3

from livestore.db import NotFoundError
from livestore.models import Room

logger = logging.getLogger("livestore")

_COLUMNS = "id, title, is_live, img_url, hot, user_id, cate_id"


def _fetch(conn: sqlite3.Connection, room_id: int) -> Room:
    row = conn.execute(
        f"SELECT {_COLUMNS} FROM rooms WHERE id = ?", (room_id,)
    ).fetchone()
    if row is None:
        raise NotFoundError(f"No room found with id {room_id}")
    return Room.from_row(row)


def create(
    conn: sqlite3.Connection,
    title: str,
    is_live: bool,
    img_url: str,
    hot: int,
    user_id: int,
    cate_id: int,
) -> Room:
    """Insert a room and return it."""
    with conn:
        cursor = conn.execute(
            "INSERT INTO rooms (title, is_live, img_url, hot, user_id, cate_id) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (title, bool(is_live), img_url, hot, user_id, cate_id),
        )
        room = _fetch(conn, cursor.lastrowid)
    logger.info("created room: %r", room)
    return room


def update(
    conn: sqlite3.Connection,
    room_id: int,
    title: str | None = None,
    is_live: bool | None = None,
    img_url: str | None = None,
    hot: int | None = None,
    user_id: int | None = None,
    cate_id: int | None = None,
) -> Room:
    """Change the given fields of a room and return the updated row."""
    changes = {
        "title": title,
        "is_live": is_live,
        "img_url": img_url,
        "hot": hot,
        "user_id": user_id,
        "cate_id": cate_id,
    }
    changes = {column: value for column, value in changes.items() if value is not None}
    if not changes:
        raise ValueError("There are no changes to save")
    assignments = ", ".join(f"{column} = ?" for column in changes)
    with conn:
        cursor = conn.execute(
            f"UPDATE rooms SET {assignments} WHERE id = ?",
            (*changes.values(), room_id),
        )
        if cursor.rowcount == 0:
            raise NotFoundError(f"No room found with id {room_id}")
        room = _fetch(conn, room_id)
    logger.info("update room: %r", room)
    return room


def delete(conn: sqlite3.Connection, room_id: int) -> Room:
    """Delete a room and return the row that was removed."""
    with conn:
        room = _fetch(conn, room_id)
        conn.execute("DELETE FROM rooms WHERE id = ?", (room_id,))
    logger.info("delete room: %r", room)
    return room


def read(conn: sqlite3.Connection, room_id: int | None = None) -> list[Room]:
    """Return one room by id, or every room when no id is given."""
    if room_id is None:
        rows = conn.execute(f"SELECT {_COLUMNS} FROM rooms ORDER BY id").fetchall()
    else:
        rows = conn.execute(
            f"SELECT {_COLUMNS} FROM rooms WHERE id = ?", (room_id,)
        ).fetchall()
    found = [Room.from_row(row) for row in rows]
    logger.info("read room: %r", found)
    return found