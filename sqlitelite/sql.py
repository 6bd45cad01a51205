"""A minimal parser for SELECT and CREATE TABLE statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


class SqlError(ValueError):
    """Raised when a statement cannot be parsed."""


class UnsupportedSqlError(SqlError):
    """Raised for statements other than SELECT and CREATE TABLE."""


@dataclass(frozen=True)
class Select:
    """``SELECT <query> FROM <source>``."""

    query: str
    source: str


@dataclass(frozen=True)
class CreateTable:
    """``CREATE TABLE <name> (<column> <type>, ...)``.

    ``signature`` maps each column name to its position and type text.
    """

    name: str
    signature: dict[str, tuple[int, str]] = field(default_factory=dict)


Sql = Union[Select, CreateTable]


def parse(data: bytes | str) -> Sql:
    """Parse a statement given as UTF-8 bytes or text; keywords are case-insensitive."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SqlError(f"statement is not valid UTF-8: {exc}") from exc
    else:
        text = data
    text = text.lower()
    if text.startswith("select"):
        return parse_select(text)
    if text.startswith("create table"):
        return parse_create_table(text)
    raise UnsupportedSqlError(f"Unsupported SQL: {text}")


def parse_select(text: str) -> Select:
    """Parse a lower-case ``select ... from ...`` statement."""
    if not text.startswith("select"):
        raise SqlError("Failed to strip select prefix from select query")
    remainder = text[len("select"):].strip()
    query, sep, source = remainder.partition("from")
    if not sep:
        raise SqlError("Failed to find keyword from in select query")
    return Select(query=query.strip(), source=source.strip())


def parse_create_table(text: str) -> CreateTable:
    """Parse a lower-case ``create table`` statement."""
    if not text.startswith("create table"):
        raise SqlError("Expected more SQL string segments")
    remainder = text[len("create table"):].strip()
    name, sep, signature_text = remainder.partition(" ")
    if not sep:
        raise SqlError("Failed to split to name and signature group")
    signature_text = signature_text.lstrip("(").rstrip(")")
    signature: dict[str, tuple[int, str]] = {}
    for position, piece in enumerate(signature_text.split(",")):
        column, sep, column_type = piece.strip().partition(" ")
        if not sep:
            break
        signature[column] = (position, column_type)
    return CreateTable(name=name, signature=signature)