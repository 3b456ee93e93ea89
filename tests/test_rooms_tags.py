import sqlite3

import pytest

from livestore import rooms_tags
from livestore.db import connect, create_schema
from livestore.models import RoomTag


@pytest.fixture
def conn():
    connection = connect(":memory:")
    create_schema(connection)
    connection.execute("INSERT INTO users (id, user_name) VALUES (1, 'alice')")
    connection.execute("INSERT INTO cates (id, cate_name) VALUES (1, 'games')")
    for room_id in (1, 2):
        connection.execute(
            "INSERT INTO rooms (id, title, img_url, user_id, cate_id) "
            "VALUES (?, 'room', 'a.png', 1, 1)",
            (room_id,),
        )
    for tag_id in (1, 2):
        connection.execute("INSERT INTO tags (id, title) VALUES (?, 'tag')", (tag_id,))
    connection.commit()
    yield connection
    connection.close()


def _link_all(conn):
    for room_id in (1, 2):
        for tag_id in (1, 2):
            rooms_tags.create(conn, room_id, tag_id)


def test_create_returns_link(conn):
    assert rooms_tags.create(conn, 1, 2) == RoomTag(room_id=1, tag_id=2)
    assert rooms_tags.read(conn) == [RoomTag(1, 2)]


def test_create_duplicate_fails(conn):
    rooms_tags.create(conn, 1, 1)
    with pytest.raises(sqlite3.IntegrityError):
        rooms_tags.create(conn, 1, 1)


def test_create_with_unknown_tag_fails(conn):
    with pytest.raises(sqlite3.IntegrityError):
        rooms_tags.create(conn, 1, 99)


def test_read_filters(conn):
    _link_all(conn)
    assert len(rooms_tags.read(conn)) == 4
    assert rooms_tags.read(conn, room_id=1) == [RoomTag(1, 1), RoomTag(1, 2)]
    assert rooms_tags.read(conn, tag_id=2) == [RoomTag(1, 2), RoomTag(2, 2)]
    assert rooms_tags.read(conn, 2, 1) == [RoomTag(2, 1)]


def test_delete_by_room_keeps_others(conn):
    _link_all(conn)
    removed = rooms_tags.delete(conn, room_id=1)
    assert removed == [RoomTag(1, 1), RoomTag(1, 2)]
    assert rooms_tags.read(conn) == [RoomTag(2, 1), RoomTag(2, 2)]


def test_delete_without_filter_removes_all(conn):
    _link_all(conn)
    assert len(rooms_tags.delete(conn)) == 4
    assert rooms_tags.read(conn) == []


def test_delete_with_no_match_returns_empty(conn):
    rooms_tags.create(conn, 1, 1)
    assert rooms_tags.delete(conn, room_id=2) == []
    assert rooms_tags.read(conn) == [RoomTag(1, 1)]