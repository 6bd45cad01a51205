[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlitelite"
version = "0.1.0"
description = "A small read-only reader for SQLite database files with dot-commands and simple SELECT queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "database", "btree", "varint", "file-format"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sqlitelite = "sqlitelite.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sqlitelite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
