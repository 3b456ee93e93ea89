"""SQLite-backed store, reports and command-line tools for live-streaming rooms, categories, users and tags."""

__version__ = "0.1.0"

__all__ = [
    "categories",
    "cli",
    "db",
    "models",
    "reports",
    "rooms",
    "rooms_tags",
    "tags",
    "users",
]