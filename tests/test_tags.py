import pytest

from livestore import tags
from livestore.db import NotFoundError, connect, create_schema


@pytest.fixture
def conn():
    connection = connect(":memory:")
    create_schema(connection)
    yield connection
    connection.close()


def test_create_round_trips(conn):
    tag = tags.create(conn, "fps")
    assert tag.title == "fps"
    assert tags.read(conn, tag.id) == [tag]


def test_read_all_ordered_by_id(conn):
    created = [tags.create(conn, title) for title in ("b", "a", "c")]
    assert tags.read(conn) == created
    assert [t.id for t in tags.read(conn)] == sorted(t.id for t in created)


def test_read_missing_is_empty(conn):
    tags.create(conn, "fps")
    assert tags.read(conn, 999) == []


def test_update_renames(conn):
    tag = tags.create(conn, "fps")
    updated = tags.update(conn, tag.id, "rpg")
    assert updated.id == tag.id
    assert updated.title == "rpg"
    assert tags.read(conn) == [updated]


def test_update_missing_raises(conn):
    with pytest.raises(NotFoundError):
        tags.update(conn, 999, "rpg")


def test_delete_returns_row_and_removes_it(conn):
    keep = tags.create(conn, "keep")
    gone = tags.create(conn, "gone")
    assert tags.delete(conn, gone.id) == gone
    assert tags.read(conn) == [keep]


def test_delete_missing_raises(conn):
    with pytest.raises(NotFoundError):
        tags.delete(conn, 999)