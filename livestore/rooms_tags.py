"""Attach tags to rooms, list and remove the links."""

from __future__ import annotations

import logging
import sqlite3

from livestore.db import NotFoundError
from livestore.models import RoomTag

logger = logging.getLogger("livestore")


def _where(room_id: int | None, tag_id: int | None) -> tuple[str, tuple[int, ...]]:
    conditions = []
    params = []
    if room_id is not None:
        conditions.append("room_id = ?")
        params.append(room_id)
    if tag_id is not None:
        conditions.append("tag_id = ?")
        params.append(tag_id)
    clause = f" WHERE {' AND '.join(conditions)}" if conditions else ""
    return clause, tuple(params)


def _select(conn: sqlite3.Connection, room_id, tag_id) -> list[RoomTag]:
    clause, params = _where(room_id, tag_id)
    rows = conn.execute(
        f"SELECT room_id, tag_id FROM rooms_tags{clause} ORDER BY room_id, tag_id",
        params,
    ).fetchall()
    return [RoomTag.from_row(row) for row in rows]


def create(conn: sqlite3.Connection, room_id: int, tag_id: int) -> RoomTag:
    """Link a tag to a room and return the link."""
    with conn:
        conn.execute(
            "INSERT INTO rooms_tags (room_id, tag_id) VALUES (?, ?)",
            (room_id, tag_id),
        )
        found = _select(conn, room_id, tag_id)
    if not found:
        raise NotFoundError(f"No room tag ({room_id}, {tag_id})")
    logger.info("create room tags: %r", found[0])
    return found[0]


def read(
    conn: sqlite3.Connection, room_id: int | None = None, tag_id: int | None = None
) -> list[RoomTag]:
    """Return the links matching the given room and/or tag."""
    found = _select(conn, room_id, tag_id)
    logger.info("read room tags: %r", found)
    return found


def delete(
    conn: sqlite3.Connection, room_id: int | None = None, tag_id: int | None = None
) -> list[RoomTag]:
    """Remove the links matching the given room and/or tag and return them."""
    clause, params = _where(room_id, tag_id)
    with conn:
        removed = _select(conn, room_id, tag_id)
        conn.execute(f"DELETE FROM rooms_tags{clause}", params)
    logger.info("deleted room tags: %r", removed)
    return removed