import sqlite3

import pytest

from livestore import rooms
from livestore.db import NotFoundError, connect, create_schema


@pytest.fixture
def conn():
    connection = connect(":memory:")
    create_schema(connection)
    connection.execute("INSERT INTO users (id, user_name) VALUES (1, 'alice')")
    connection.execute("INSERT INTO users (id, user_name) VALUES (2, 'bob')")
    connection.execute("INSERT INTO cates (id, cate_name) VALUES (1, 'games')")
    connection.execute("INSERT INTO cates (id, cate_name) VALUES (2, 'music')")
    connection.commit()
    yield connection
    connection.close()


def test_create_returns_room_with_bool_flag(conn):
    room = rooms.create(conn, "hello", True, "cover.png", 10, 1, 1)
    assert room.title == "hello"
    assert room.is_live is True
    assert (room.img_url, room.hot, room.user_id, room.cate_id) == ("cover.png", 10, 1, 1)


def test_create_with_unknown_user_fails(conn):
    with pytest.raises(sqlite3.IntegrityError):
        rooms.create(conn, "hello", False, "cover.png", 0, 99, 1)
    assert rooms.read(conn) == []


def test_read_all_and_by_id(conn):
    first = rooms.create(conn, "one", False, "a.png", 1, 1, 1)
    second = rooms.create(conn, "two", True, "b.png", 2, 2, 2)
    assert rooms.read(conn) == [first, second]
    assert rooms.read(conn, second.id) == [second]
    assert rooms.read(conn, 999) == []


def test_update_changes_only_given_fields(conn):
    room = rooms.create(conn, "one", True, "a.png", 5, 1, 1)
    updated = rooms.update(conn, room.id, is_live=False, cate_id=2)
    assert updated.is_live is False
    assert updated.cate_id == 2
    assert (updated.title, updated.hot, updated.user_id) == (room.title, room.hot, room.user_id)


def test_update_without_changes_raises(conn):
    room = rooms.create(conn, "one", True, "a.png", 5, 1, 1)
    with pytest.raises(ValueError):
        rooms.update(conn, room.id)


def test_update_missing_raises(conn):
    with pytest.raises(NotFoundError):
        rooms.update(conn, 999, title="x")


def test_delete_returns_row_and_removes_it(conn):
    room = rooms.create(conn, "one", True, "a.png", 5, 1, 1)
    assert rooms.delete(conn, room.id) == room
    assert rooms.read(conn, room.id) == []


def test_delete_missing_raises(conn):
    with pytest.raises(NotFoundError):
        rooms.delete(conn, 999)