import pytest

from livestore import categories
from livestore.db import NotFoundError, connect, create_schema


@pytest.fixture
def conn():
    connection = connect(":memory:")
    create_schema(connection)
    yield connection
    connection.close()


def test_create_uses_defaults_for_missing_fields(conn):
    cate = categories.create(conn, None, None, "games")
    assert cate.cate_name == "games"
    assert cate.icon_url == ""
    assert cate.live_total == 0


def test_create_with_all_fields_round_trips(conn):
    cate = categories.create(conn, "icon.png", "big.png", "music", 7)
    assert categories.read(conn) == [cate]
    assert (cate.icon_url, cate.img_url, cate.live_total) == ("icon.png", "big.png", 7)


def test_read_lists_in_id_order(conn):
    first = categories.create(conn, None, None, "a")
    second = categories.create(conn, None, None, "b")
    assert categories.read(conn) == [first, second]
    assert first.id < second.id


def test_update_changes_only_given_fields(conn):
    cate = categories.create(conn, "icon.png", "big.png", "music", 3)
    updated = categories.update(conn, cate.id, None, None, "songs", None)
    assert updated.cate_name == "songs"
    assert updated.icon_url == cate.icon_url
    assert updated.img_url == cate.img_url
    assert updated.live_total == cate.live_total


def test_update_without_changes_raises(conn):
    cate = categories.create(conn, None, None, "music")
    with pytest.raises(ValueError):
        categories.update(conn, cate.id, None, None, None, None)


def test_update_missing_raises(conn):
    with pytest.raises(NotFoundError):
        categories.update(conn, 42, None, None, "x", None)


def test_delete_returns_row_and_removes_it(conn):
    keep = categories.create(conn, None, None, "keep")
    gone = categories.create(conn, None, None, "gone")
    assert categories.delete(conn, gone.id) == gone
    assert categories.read(conn) == [keep]


def test_delete_missing_raises(conn):
    with pytest.raises(NotFoundError):
        categories.delete(conn, 42)