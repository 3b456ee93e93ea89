"""Joined reports over categories, rooms and users, and hot transfers."""

from __future__ import annotations

import json
import logging
import sqlite3
from dataclasses import asdict, dataclass
from typing import Any, Iterable

from livestore.db import NotFoundError
from livestore.models import Cate, Room, User

logger = logging.getLogger("livestore")

_ROOM_COLUMNS = ("id", "title", "is_live", "img_url", "hot", "user_id", "cate_id")
_CATE_COLUMNS = ("id", "icon_url", "img_url", "cate_name", "live_total")
_USER_COLUMNS = ("id", "user_name", "avatar")

_MAX_AMOUNT = 255


@dataclass(frozen=True)
class HotSummary:
    """Aggregate hot values of the rooms in one category."""

    cate_name: str
    total: int
    minimum: int
    maximum: int

    def to_dict(self) -> dict[str, Any]:
        """Return the summary as a plain dictionary."""
        return asdict(self)


def _select_list(alias: str, prefix: str, columns: Iterable[str]) -> str:
    return ", ".join(f"{alias}.{column} AS {prefix}__{column}" for column in columns)


def _extract(row: sqlite3.Row, prefix: str, columns: Iterable[str]) -> dict[str, Any]:
    return {column: row[f"{prefix}__{column}"] for column in columns}


def _optional(row: sqlite3.Row, prefix: str, columns, model):
    values = _extract(row, prefix, columns)
    if values["id"] is None:
        return None
    return model.from_row(values)


def _placeholders(values: list[int]) -> str:
    return ", ".join("?" for _ in values)


def _log_json(message: str, payload: Any) -> None:
    logger.info("%s\n%s", message, json.dumps(payload, indent=2, ensure_ascii=False))


def get_all_hot_by_cate_id(conn: sqlite3.Connection, cate_id: int) -> HotSummary:
    """Return the sum, minimum and maximum hot of a category's rooms.

    Raises :class:`NotFoundError` when the category has no rooms or does not exist.
    """
    row = conn.execute(
        "SELECT c.cate_name AS cate_name, SUM(r.hot) AS total, "
        "MIN(r.hot) AS minimum, MAX(r.hot) AS maximum "
        "FROM cates AS c INNER JOIN rooms AS r ON r.cate_id = c.id "
        "WHERE c.id = ? GROUP BY c.id LIMIT 1",
        (cate_id,),
    ).fetchone()
    if row is None:
        raise NotFoundError(f"No rooms found for cate_id {cate_id}")
    summary = HotSummary(
        cate_name=row["cate_name"],
        total=row["total"],
        minimum=row["minimum"],
        maximum=row["maximum"],
    )
    logger.info(
        "Total hot for cate_id %s: %s, Sum: %s, Min: %s, Max: %s",
        cate_id,
        summary.cate_name,
        summary.total,
        summary.minimum,
        summary.maximum,
    )
    return summary


def get_cates(
    conn: sqlite3.Connection,
    ids: Iterable[int],
    top_room_num: int | None = None,
) -> list[dict[str, Any]]:
    """Return the requested categories, each with its hottest rooms and their owners.

    Rooms are listed by descending hot; ``top_room_num`` caps how many are kept
    per category, ``None`` keeps them all. A category without rooms carries no
    ``room`` key.
    """
    if top_room_num is not None and top_room_num < 0:
        raise ValueError("top_room_num must not be negative")
    id_list = list(ids)
    if not id_list:
        _log_json("cates:", [])
        return []

    sql = (
        f"SELECT {_select_list('c', 'cate', _CATE_COLUMNS)}, "
        f"{_select_list('r', 'room', _ROOM_COLUMNS)}, "
        f"{_select_list('u', 'user', _USER_COLUMNS)} "
        "FROM cates AS c "
        "LEFT JOIN rooms AS r ON c.id = r.cate_id "
        "LEFT JOIN users AS u ON r.user_id = u.id "
        f"WHERE c.id IN ({_placeholders(id_list)}) "
        "ORDER BY r.hot DESC, c.id DESC, r.id ASC"
    )
    grouped: dict[Cate, list[dict[str, Any]]] = {}
    for row in conn.execute(sql, id_list):
        cate = Cate.from_row(_extract(row, "cate", _CATE_COLUMNS))
        rooms = grouped.setdefault(cate, [])
        room = _optional(row, "room", _ROOM_COLUMNS, Room)
        user = _optional(row, "user", _USER_COLUMNS, User)
        if room is None or user is None:
            continue
        if top_room_num is None or len(rooms) < top_room_num:
            rooms.append({**room.to_dict(), "user": user.to_dict()})

    result = []
    for cate, rooms in grouped.items():
        entry: dict[str, Any] = {}
        if rooms:
            entry["room"] = rooms
        entry.update(cate.to_dict())
        result.append(entry)
    _log_json("cates:", result)
    return result


def get_rooms(conn: sqlite3.Connection, room_ids: Iterable[int]) -> list[dict[str, Any]]:
    """Return the requested rooms, each with its category and owner."""
    id_list = list(room_ids)
    if not id_list:
        _log_json("final query result:", [])
        return []
    sql = (
        f"SELECT {_select_list('r', 'room', _ROOM_COLUMNS)}, "
        f"{_select_list('c', 'cate', _CATE_COLUMNS)}, "
        f"{_select_list('u', 'user', _USER_COLUMNS)} "
        "FROM rooms AS r "
        "INNER JOIN cates AS c ON r.cate_id = c.id "
        "INNER JOIN users AS u ON r.user_id = u.id "
        f"WHERE r.id IN ({_placeholders(id_list)}) "
        "ORDER BY r.id"
    )
    result = []
    for row in conn.execute(sql, id_list):
        room = Room.from_row(_extract(row, "room", _ROOM_COLUMNS))
        cate = Cate.from_row(_extract(row, "cate", _CATE_COLUMNS))
        user = User.from_row(_extract(row, "user", _USER_COLUMNS))
        result.append({**room.to_dict(), "cate": cate.to_dict(), "user": user.to_dict()})
    _log_json("final query result:", result)
    return result


def _shift_hot(conn: sqlite3.Connection, room_id: int, delta: int) -> Room:
    cursor = conn.execute("UPDATE rooms SET hot = hot + ? WHERE id = ?", (delta, room_id))
    if cursor.rowcount == 0:
        raise NotFoundError(f"No room found with id {room_id}")
    row = conn.execute(
        f"SELECT {', '.join(_ROOM_COLUMNS)} FROM rooms WHERE id = ?", (room_id,)
    ).fetchone()
    return Room.from_row(row)


def deliver_hot(
    conn: sqlite3.Connection, source: int, target: int, amount: int
) -> tuple[Room, Room]:
    """Move ``amount`` hot from one room to another in a single transaction.

    Returns the two updated rooms. If either room is missing nothing changes
    and :class:`NotFoundError` is raised.
    """
    if not 0 <= amount <= _MAX_AMOUNT:
        raise ValueError(f"amount must be between 0 and {_MAX_AMOUNT}")
    try:
        with conn:
            from_room = _shift_hot(conn, source, -amount)
            to_room = _shift_hot(conn, target, amount)
    except (NotFoundError, sqlite3.Error):
        logger.info("transfer failed, rolled back")
        raise
    logger.info("transfer succeeded")
    return from_room, to_room