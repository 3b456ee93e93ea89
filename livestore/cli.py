"""Command-line tools for managing categories, rooms, tags, users and reports."""

from __future__ import annotations

import argparse
import json
import sqlite3
import sys
from typing import Any, Callable, Sequence

from livestore import categories, rooms, rooms_tags, tags, users
from livestore.db import DatabaseNotReadyError, NotFoundError, establish_connection
from livestore.reports import (
    deliver_hot,
    get_all_hot_by_cate_id,
    get_cates,
    get_rooms,
)

_MAX_AMOUNT = 255

Handler = Callable[[sqlite3.Connection], Any]


def _id_list(text: str) -> list[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid id list: {text!r}") from None


def _amount(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid amount: {text!r}") from None
    if not 0 <= value <= _MAX_AMOUNT:
        raise argparse.ArgumentTypeError(
            f"amount must be between 0 and {_MAX_AMOUNT}, got {value}"
        )
    return value


def _show(result: Any) -> None:
    if isinstance(result, (list, tuple)):
        for item in result:
            print(repr(item))
    else:
        print(repr(result))


def _show_json(result: Any) -> None:
    print(json.dumps(result, indent=2, ensure_ascii=False))


def _fail(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 1


def _run(handler: Handler, show: Callable[[Any], None] = _show) -> int:
    """Open the configured database, run ``handler`` and print its result."""
    try:
        conn = establish_connection()
    except DatabaseNotReadyError as exc:
        return _fail(str(exc))
    try:
        show(handler(conn))
    except (NotFoundError, ValueError, sqlite3.Error) as exc:
        return _fail(str(exc))
    finally:
        conn.close()
    return 0


def _parser(prog: str, description: str):
    parser = argparse.ArgumentParser(prog=prog, description=description)
    return parser, parser.add_subparsers(dest="command")


def cate_main(argv: Sequence[str] | None = None) -> int:
    """Create, update, delete or list categories."""
    parser, sub = _parser("cate", "Manage categories.")

    create = sub.add_parser("c", help="create a category")
    create.add_argument("-c", "--icon")
    create.add_argument("-b", "--big-icon")
    create.add_argument("-n", "--name", required=True)
    create.add_argument("-t", "--total", type=int)

    update = sub.add_parser("u", help="update a category")
    update.add_argument("-i", "--id", type=int, required=True)
    update.add_argument("-c", "--icon")
    update.add_argument("-b", "--big-icon")
    update.add_argument("-n", "--name")
    update.add_argument("-t", "--total", type=int)

    delete = sub.add_parser("d", help="delete a category")
    delete.add_argument("-i", "--id", type=int, required=True)

    sub.add_parser("r", help="list every category")

    args = parser.parse_args(argv)
    handlers: dict[str, Handler] = {
        "c": lambda conn: categories.create(
            conn, args.icon, args.big_icon, args.name, args.total
        ),
        "u": lambda conn: categories.update(
            conn, args.id, args.icon, args.big_icon, args.name, args.total
        ),
        "d": lambda conn: categories.delete(conn, args.id),
        "r": lambda conn: categories.read(conn),
    }
    if args.command is None:
        return _fail("undefined command")
    return _run(handlers[args.command])


def room_main(argv: Sequence[str] | None = None) -> int:
    """Create, update, delete or list rooms."""
    parser, sub = _parser("room", "Manage rooms.")

    create = sub.add_parser("c", help="create a room")
    create.add_argument("-t", "--title", required=True, help="room title")
    create.add_argument("-l", "--live", action="store_true", help="room is live")
    create.add_argument("-i", "--image", required=True, help="room cover")
    create.add_argument("-s", "--hot", type=int, required=True, help="current hot")
    create.add_argument("-u", "--uid", type=int, required=True, help="owner id")
    create.add_argument("-c", "--cateid", type=int, required=True, help="category id")

    update = sub.add_parser("u", help="update a room")
    update.add_argument("-i", "--id", type=int, required=True, help="room id")
    update.add_argument("-t", "--title", help="room title")
    # The flag always yields a value, so an update also resets the live mark.
    update.add_argument("-l", "--live", action="store_true", help="room is live")
    update.add_argument("-m", "--image", help="room cover")
    update.add_argument("-s", "--hot", type=int, help="current hot")
    update.add_argument("-u", "--uid", type=int, help="owner id")
    update.add_argument("-c", "--cateid", type=int, help="category id")

    delete = sub.add_parser("d", help="delete a room")
    delete.add_argument("-i", "--id", type=int, required=True, help="room to delete")

    read = sub.add_parser("r", help="list rooms")
    read.add_argument("-i", "--id", type=int, help="room id, every room by default")

    args = parser.parse_args(argv)
    handlers: dict[str, Handler] = {
        "c": lambda conn: rooms.create(
            conn, args.title, args.live, args.image, args.hot, args.uid, args.cateid
        ),
        "u": lambda conn: rooms.update(
            conn,
            args.id,
            args.title,
            args.live,
            args.image,
            args.hot,
            args.uid,
            args.cateid,
        ),
        "d": lambda conn: rooms.delete(conn, args.id),
        "r": lambda conn: rooms.read(conn, args.id),
    }
    if args.command is None:
        print("INVALID")
        return 0
    return _run(handlers[args.command])


def room_tag_main(argv: Sequence[str] | None = None) -> int:
    """Link tags to rooms, list the links or remove them."""
    parser, sub = _parser("room_tag", "Manage the tags of rooms.")

    create = sub.add_parser("c", help="link a tag to a room")
    create.add_argument("-r", "--room-id", type=int, required=True, help="room id")
    create.add_argument("-t", "--tag-id", type=int, required=True, help="tag id")

    for name, text in (("r", "list links"), ("d", "remove links")):
        command = sub.add_parser(name, help=text)
        command.add_argument("-r", "--room-id", type=int, help="room id")
        command.add_argument("-t", "--tag-id", type=int, help="tag id")

    args = parser.parse_args(argv)
    handlers: dict[str, Handler] = {
        "c": lambda conn: rooms_tags.create(conn, args.room_id, args.tag_id),
        "r": lambda conn: rooms_tags.read(conn, args.room_id, args.tag_id),
        "d": lambda conn: rooms_tags.delete(conn, args.room_id, args.tag_id),
    }
    if args.command is None:
        return _fail("Invalid command")
    return _run(handlers[args.command])


def tag_main(argv: Sequence[str] | None = None) -> int:
    """Create, update, delete or list tags."""
    parser, sub = _parser("tag", "Manage tags.")

    create = sub.add_parser("c", help="create a tag")
    create.add_argument("-t", "--title", required=True, help="tag title")

    read = sub.add_parser("r", help="list tags")
    read.add_argument("-i", "--id", type=int, help="tag id")

    update = sub.add_parser("u", help="rename a tag")
    update.add_argument("-i", "--id", type=int, required=True, help="tag id")
    update.add_argument("-t", "--title", required=True, help="tag title")

    delete = sub.add_parser("d", help="delete a tag")
    delete.add_argument("-i", "--id", type=int, required=True, help="tag id")

    args = parser.parse_args(argv)
    handlers: dict[str, Handler] = {
        "c": lambda conn: tags.create(conn, args.title),
        "u": lambda conn: tags.update(conn, args.id, args.title),
        "r": lambda conn: tags.read(conn, args.id),
        "d": lambda conn: tags.delete(conn, args.id),
    }
    if args.command is None:
        return _fail("Invalid command")
    return _run(handlers[args.command])


def unit_main(argv: Sequence[str] | None = None) -> int:
    """Run the joined reports and hot transfers."""
    parser, sub = _parser("unit", "Reports over rooms and categories.")

    room = sub.add_parser("room", help="show rooms with category and owner")
    room.add_argument(
        "-i", "--ids", type=_id_list, action="extend", default=[], help="room ids"
    )

    cate = sub.add_parser("cate", help="show categories with their rooms")
    cate.add_argument(
        "-i", "--ids", type=_id_list, action="extend", default=[], help="category ids"
    )

    get_hot = sub.add_parser("get-hot", help="sum, min and max hot of a category")
    get_hot.add_argument("-i", "--id", type=int, required=True, help="category id")

    trans = sub.add_parser("trans", help="move hot between rooms")
    trans.add_argument("-f", "--from", dest="source", type=int, required=True,
                       help="source room id")
    trans.add_argument("-t", "--to", dest="target", type=int, required=True,
                       help="target room id")
    trans.add_argument("-a", "--amount", type=_amount, required=True,
                       help="amount to move")

    args = parser.parse_args(argv)
    if args.command is None:
        return 0
    if args.command == "room":
        return _run(lambda conn: get_rooms(conn, args.ids), _show_json)
    if args.command == "cate":
        return _run(lambda conn: get_cates(conn, args.ids, None), _show_json)
    if args.command == "get-hot":
        return _run(lambda conn: get_all_hot_by_cate_id(conn, args.id))
    return _run(lambda conn: deliver_hot(conn, args.source, args.target, args.amount))


def user_main(argv: Sequence[str] | None = None) -> int:
    """Create, update, delete or list users."""
    parser, sub = _parser("user", "Manage users.")

    create = sub.add_parser("c", help="create a user")
    create.add_argument("-n", "--name", required=True, help="user name")
    create.add_argument("-a", "--head", help="avatar URL")

    read = sub.add_parser("r", help="list users")
    read.add_argument("-i", "--id", type=int, help="user id, every user by default")

    update = sub.add_parser("u", help="update a user")
    update.add_argument("-i", "--id", type=int, required=True, help="user id")
    update.add_argument("-n", "--name", help="user name")
    update.add_argument("-a", "--head", help="avatar URL")

    delete = sub.add_parser("d", help="delete a user")
    delete.add_argument("-i", "--id", type=int, required=True, help="user id")

    args = parser.parse_args(argv)
    handlers: dict[str, Handler] = {
        "c": lambda conn: users.create(conn, args.name, args.head),
        "u": lambda conn: users.update(conn, args.id, args.name, args.head),
        "r": lambda conn: users.read(conn, args.id),
        "d": lambda conn: users.delete(conn, args.id),
    }
    if args.command is None:
        return _fail("Invalid command")
    return _run(handlers[args.command])