# livestore

A small SQLite-backed store for a live-streaming catalogue: categories,
rooms, the users who host them, and the tags attached to rooms. It
provides a Python API for create/read/update/delete on each table, a few
joined reports, a transactional "hot" transfer between rooms, and one
command-line tool per area.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

Every command reads the database location from the `DATABASE_URL`
environment variable. A `.env` file in the working directory is loaded
first, so you can keep the setting there:

```
DATABASE_URL=data/livestore.db
```

`DATABASE_URL` should be a plain filesystem path. The first time a
command runs against a path that does not exist yet, the file and its
parent folder are created, all tables are created in it, and the command
stops with `error: 2. try command again!`; run it again to do the actual
work. Values starting with `sqlite:` are not created automatically. If
`DATABASE_URL` is not set, the command stops with an error.

Log messages (at debug level and above) go to standard error.

## Command-line tools

The table tools take a one-letter subcommand: `c` (create), `r` (read),
`u` (update) and `d` (delete). Run any of them with `--help` for the
full list of options. Results are printed one per line; errors such as a
missing row are printed as `error: ...` on standard error and the
command exits with status 1.

### Categories

```
livestore-cate c --name Games --icon icon.png --big-icon banner.png --total 0
livestore-cate r
livestore-cate u --id 1 --name "Video games"
livestore-cate d --id 1
```

Options left out on `c` take the table defaults (empty URLs, total 0).
`u` needs at least one field to change.

### Users

```
livestore-user c --name alice --head avatar.png
livestore-user r            # all users
livestore-user r --id 1     # one user
livestore-user u --id 1 --name alice2
livestore-user d --id 1
```

### Rooms

```
livestore-room c --title "Evening stream" --live --image cover.png --hot 100 --uid 1 --cateid 1
livestore-room r
livestore-room r --id 1
livestore-room u --id 1 --hot 250 --live
livestore-room d --id 1
```

On `u` the cover is given with `-m/--image`. The `--live` flag is always
applied on `u`: leaving it out marks the room as not live. Running
`livestore-room` with no subcommand prints `INVALID`.

### Tags and room tags

```
livestore-tag c --title chill
livestore-tag r
livestore-tag u --id 1 --title relaxed
livestore-tag d --id 1

livestore-room-tag c --room-id 1 --tag-id 1
livestore-room-tag r --room-id 1
livestore-room-tag d --tag-id 1
```

`livestore-room-tag r` and `d` filter by the room and/or tag given;
`d` with neither option removes every link.

### Reports

```
livestore-unit room --ids 1,2,3       # rooms with their category and host, as JSON
livestore-unit cate --ids 1,2         # categories with their rooms, hottest first, as JSON
livestore-unit get-hot --id 1         # sum, min and max hot for a category
livestore-unit trans --from 1 --to 2 --amount 10
```

`trans` moves "hot" points (0 to 255) from one room to another inside a
single transaction: if either room is missing, nothing is changed.
`get-hot` fails when the category has no rooms.

Foreign keys are enforced, so deleting a category, user, room or tag
that is still referenced fails with an error.

## Python API

```python
from livestore.db import connect, create_schema
from livestore import categories, users, rooms, reports

conn = connect("data/livestore.db")
create_schema(conn)

categories.create(conn, None, None, "Games", None)
users.create(conn, "alice", None)
rooms.create(conn, "Evening stream", True, "cover.png", 100, 1, 1)
rooms.create(conn, "Morning stream", False, "cover2.png", 20, 1, 1)

summary = reports.get_all_hot_by_cate_id(conn, 1)   # HotSummary
source, target = reports.deliver_hot(conn, 1, 2, 5)
reports.get_cates(conn, [1], 3)   # top 3 rooms per category
reports.get_rooms(conn, [1, 2])
```

`livestore.db.establish_connection()` does the same setup as the
command-line tools, reading `DATABASE_URL` unless a path is passed.

Rows come back as the frozen dataclasses in `livestore.models` (`Cate`,
`Room`, `User`, `Tag`, `RoomTag`), each with `from_row` and `to_dict`.
The modules `categories`, `rooms`, `users`, `tags` and `rooms_tags`
return the created, updated or deleted rows (`users.delete` returns the
number of rows removed). Lookups and changes on rows that do not exist
raise `livestore.db.NotFoundError`; a missing or unreachable database
raises `livestore.db.DatabaseNotReadyError`.

## What it does not do

There is no migration tool: `create_schema` creates the tables if they
are missing and never alters existing ones. The `created_at` and
`updated_at` columns are filled by table defaults only and are not
returned by the API.