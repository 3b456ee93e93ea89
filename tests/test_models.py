import sqlite3

import pytest

from livestore.models import Cate, Room, RoomTag, Tag, User


def _row(query, params=()):
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    return conn.execute(query, params).fetchone()


def test_tag_from_dict_and_back():
    tag = Tag.from_row({"id": 3, "title": "music", "created_at": None})
    assert tag == Tag(id=3, title="music")
    assert tag.to_dict() == {"id": 3, "title": "music"}


def test_user_from_sqlite_row():
    row = _row("SELECT 1 AS id, 'alice' AS user_name, 'a.png' AS avatar, 'x' AS created_at")
    user = User.from_row(row)
    assert user == User(1, "alice", "a.png")


def test_cate_round_trip():
    cate = Cate(id=2, icon_url="i", img_url="b", cate_name="games", live_total=5)
    assert Cate.from_row(cate.to_dict()) == cate


def test_room_is_live_becomes_bool():
    row = _row(
        "SELECT 7 AS id, 't' AS title, 1 AS is_live, 'img' AS img_url, "
        "40 AS hot, 1 AS user_id, 2 AS cate_id"
    )
    room = Room.from_row(row)
    assert room.is_live is True
    assert room.to_dict()["hot"] == 40


def test_room_not_live():
    data = {"id": 1, "title": "t", "is_live": 0, "img_url": "", "hot": 0,
            "user_id": 1, "cate_id": 1}
    assert Room.from_row(data).is_live is False


def test_room_tag_round_trip():
    link = RoomTag(room_id=4, tag_id=9)
    assert RoomTag.from_row(link.to_dict()) == link


def test_models_hashable_and_equal():
    a = User(1, "bob", "")
    b = User(1, "bob", "")
    assert {a: "x"}[b] == "x"


def test_missing_column_raises():
    with pytest.raises(KeyError):
        Tag.from_row({"id": 1})