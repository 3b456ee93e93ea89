"""Create, read, update and delete tags."""

from __future__ import annotations

import logging
import sqlite3

from livestore.db import NotFoundError
from livestore.models import Tag

logger = logging.getLogger("livestore")


def _fetch(conn: sqlite3.Connection, tag_id: int) -> Tag:
    row = conn.execute("SELECT id, title FROM tags WHERE id = ?", (tag_id,)).fetchone()
    if row is None:
        raise NotFoundError(f"No tag found with id {tag_id}")
    return Tag.from_row(row)


def create(conn: sqlite3.Connection, title: str) -> Tag:
    """Insert a tag and return it."""
    with conn:
        cursor = conn.execute("INSERT INTO tags (title) VALUES (?)", (title,))
        tag = _fetch(conn, cursor.lastrowid)
    logger.info("insert a Tag: %r", tag)
    return tag


def update(conn: sqlite3.Connection, tag_id: int, title: str) -> Tag:
    """Rename a tag and return the updated row."""
    with conn:
        cursor = conn.execute("UPDATE tags SET title = ? WHERE id = ?", (title, tag_id))
        if cursor.rowcount == 0:
            raise NotFoundError(f"No tag found with id {tag_id}")
        tag = _fetch(conn, tag_id)
    logger.info("update a Tag: %r", tag)
    return tag


def read(conn: sqlite3.Connection, tag_id: int | None = None) -> list[Tag]:
    """Return one tag by id, or every tag, ordered by id."""
    if tag_id is None:
        rows = conn.execute("SELECT id, title FROM tags ORDER BY id").fetchall()
    else:
        rows = conn.execute(
            "SELECT id, title FROM tags WHERE id = ? ORDER BY id", (tag_id,)
        ).fetchall()
    found = [Tag.from_row(row) for row in rows]
    logger.info("query tag list: %r", found)
    return found


def delete(conn: sqlite3.Connection, tag_id: int) -> Tag:
    """Delete a tag and return the row that was removed."""
    with conn:
        tag = _fetch(conn, tag_id)
        conn.execute("DELETE FROM tags WHERE id = ?", (tag_id,))
    logger.info("remove tag: %r", tag)
    return tag