"""Create, read, update and delete categories."""

from __future__ import annotations

import logging
import sqlite3

from livestore.db import NotFoundError
from livestore.models import Cate

logger = logging.getLogger("livestore")

_COLUMNS = "id, icon_url, img_url, cate_name, live_total"


def _fetch(conn: sqlite3.Connection, cate_id: int) -> Cate:
    row = conn.execute(
        f"SELECT {_COLUMNS} FROM cates WHERE id = ?", (cate_id,)
    ).fetchone()
    if row is None:
        raise NotFoundError(f"No cate found with id {cate_id}")
    return Cate.from_row(row)


def create(
    conn: sqlite3.Connection,
    icon: str | None,
    big_icon: str | None,
    name: str,
    total: int | None = None,
) -> Cate:
    """Insert a category; omitted fields take the table defaults."""
    values = {
        "cate_name": name,
        "icon_url": icon,
        "img_url": big_icon,
        "live_total": total,
    }
    values = {column: value for column, value in values.items() if value is not None}
    columns = ", ".join(values)
    placeholders = ", ".join("?" for _ in values)
    with conn:
        cursor = conn.execute(
            f"INSERT INTO cates ({columns}) VALUES ({placeholders})",
            tuple(values.values()),
        )
        cate = _fetch(conn, cursor.lastrowid)
    logger.info("create a cate: %r", cate)
    return cate


def update(
    conn: sqlite3.Connection,
    cate_id: int,
    icon: str | None = None,
    big_icon: str | None = None,
    name: str | None = None,
    total: int | None = None,
) -> Cate:
    """Change the given fields of a category and return the updated row."""
    changes = {
        "icon_url": icon,
        "img_url": big_icon,
        "cate_name": name,
        "live_total": total,
    }
    changes = {column: value for column, value in changes.items() if value is not None}
    if not changes:
        raise ValueError("There are no changes to save")
    assignments = ", ".join(f"{column} = ?" for column in changes)
    with conn:
        cursor = conn.execute(
            f"UPDATE cates SET {assignments} WHERE id = ?",
            (*changes.values(), cate_id),
        )
        if cursor.rowcount == 0:
            raise NotFoundError(f"No cate found with id {cate_id}")
        cate = _fetch(conn, cate_id)
    logger.info("update a cate: %r", cate)
    return cate


def read(conn: sqlite3.Connection) -> list[Cate]:
    """Return every category."""
    rows = conn.execute(f"SELECT {_COLUMNS} FROM cates ORDER BY id").fetchall()
    cates = [Cate.from_row(row) for row in rows]
    logger.info("all cate: %r", cates)
    return cates


def delete(conn: sqlite3.Connection, cate_id: int) -> Cate:
    """Delete a category and return the row that was removed."""
    with conn:
        cate = _fetch(conn, cate_id)
        conn.execute("DELETE FROM cates WHERE id = ?", (cate_id,))
    logger.info("del a cate: %r", cate)
    return cate