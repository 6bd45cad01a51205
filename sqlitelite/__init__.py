"""A small read-only reader for SQLite database files and simple SELECT queries."""

__version__ = "0.1.0"