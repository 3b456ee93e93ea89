[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "livestore"
version = "0.1.0"
description = "SQLite-backed store and command-line tools for live-streaming rooms, categories, users and tags"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["sqlite", "crud", "live-streaming", "rooms", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
livestore-cate = "livestore.cli:cate_main"
livestore-room = "livestore.cli:room_main"
livestore-room-tag = "livestore.cli:room_tag_main"
livestore-tag = "livestore.cli:tag_main"
livestore-unit = "livestore.cli:unit_main"
livestore-user = "livestore.cli:user_main"

[tool.hatch.build.targets.wheel]
packages = ["livestore"]

[tool.pytest.ini_options]
addopts = "-ra"
