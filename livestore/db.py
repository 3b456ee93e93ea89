"""Database schema and connection setup."""

from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("livestore")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS cates (
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    icon_url TEXT NOT NULL DEFAULT '',
    img_url TEXT NOT NULL DEFAULT '',
    cate_name TEXT NOT NULL,
    live_total INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    user_name TEXT NOT NULL,
    avatar TEXT NOT NULL DEFAULT '',
    created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS rooms (
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    title TEXT NOT NULL,
    is_live BOOLEAN NOT NULL DEFAULT 0,
    img_url TEXT NOT NULL,
    hot INTEGER NOT NULL DEFAULT 0,
    user_id INTEGER NOT NULL REFERENCES users (id),
    cate_id INTEGER NOT NULL REFERENCES cates (id),
    created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS tags (
    id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL,
    title TEXT NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS rooms_tags (
    room_id INTEGER NOT NULL REFERENCES rooms (id),
    tag_id INTEGER NOT NULL REFERENCES tags (id),
    PRIMARY KEY (room_id, tag_id)
);
"""


class NotFoundError(LookupError):
    """Raised when a query that must return a row returns none."""


class DatabaseNotReadyError(RuntimeError):
    """Raised when the database is missing, just created, or unreachable."""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create every table the package uses, leaving existing ones alone."""
    conn.executescript(_SCHEMA)
    conn.commit()


def connect(database_url: str) -> sqlite3.Connection:
    """Open a SQLite connection with named-column rows and foreign keys on."""
    try:
        conn = sqlite3.connect(database_url, uri=database_url.startswith("file:"))
    except sqlite3.Error as exc:
        raise DatabaseNotReadyError(f"Error connecting to {database_url}") from exc
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def establish_connection(database_url: str | None = None) -> sqlite3.Connection:
    """Connect to the configured database, creating its file on first use.

    The location comes from ``database_url`` or the ``DATABASE_URL``
    environment variable (a ``.env`` file is honoured). When the file does
    not exist yet it is created with all tables and
    :class:`DatabaseNotReadyError` is raised so the caller can run again.
    """
    load_dotenv()
    logging.basicConfig(level=logging.DEBUG)

    if database_url is None:
        database_url = os.environ.get("DATABASE_URL")
        if not database_url:
            raise DatabaseNotReadyError("DATABASE_URL must be set")

    db_path = Path(database_url)
    if not db_path.exists():
        if database_url.startswith("sqlite:"):
            logger.warning(
                '1. can not create db file starting with "sqlite:"\n'
                "2. use a local path directly"
            )
        else:
            try:
                db_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.warning("create folder fail: %r", exc)
            try:
                db_path.touch()
            except OSError as exc:
                logger.warning("create db file err: %r", exc)
            else:
                with _closing(connect(database_url)) as conn:
                    create_schema(conn)
                logger.info("1. created database %s with all tables", database_url)
                raise DatabaseNotReadyError("2. try command again!")

    return connect(database_url)


class _closing:
    """Close a connection on leaving the block."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def __enter__(self) -> sqlite3.Connection:
        return self._conn

    def __exit__(self, *exc_info) -> None:
        self._conn.close()