"""Row models for the live-streaming catalogue tables."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping


def _columns(cls: type, row: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the dataclass's columns out of a mapping or ``sqlite3.Row``."""
    return {f.name: row[f.name] for f in fields(cls)}


@dataclass(frozen=True)
class Tag:
    """A label that can be attached to rooms."""

    id: int
    title: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Tag":
        """Build a tag from a row keyed by column name."""
        return cls(**_columns(cls, row))

    def to_dict(self) -> dict[str, Any]:
        """Return the tag's columns as a plain dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class User:
    """A streamer owning one or more rooms."""

    id: int
    user_name: str
    avatar: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        """Build a user from a row keyed by column name."""
        return cls(**_columns(cls, row))

    def to_dict(self) -> dict[str, Any]:
        """Return the user's columns as a plain dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class Cate:
    """A category grouping rooms."""

    id: int
    icon_url: str
    img_url: str
    cate_name: str
    live_total: int

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Cate":
        """Build a category from a row keyed by column name."""
        return cls(**_columns(cls, row))

    def to_dict(self) -> dict[str, Any]:
        """Return the category's columns as a plain dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class Room:
    """A live room belonging to a user and a category."""

    id: int
    title: str
    is_live: bool
    img_url: str
    hot: int
    user_id: int
    cate_id: int

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Room":
        """Build a room, turning the stored integer flag into a bool."""
        values = _columns(cls, row)
        values["is_live"] = bool(values["is_live"])
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the room's columns as a plain dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class RoomTag:
    """A link between a room and a tag."""

    room_id: int
    tag_id: int

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "RoomTag":
        """Build a room-tag link from a row keyed by column name."""
        return cls(**_columns(cls, row))

    def to_dict(self) -> dict[str, Any]:
        """Return the link's columns as a plain dictionary."""
        return asdict(self)