"""Rows of the schema table, which describe every table in the file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from sqlitelite.record import (
    RecordError,
    RecordHeader,
    RecordValue,
    lift_encoded_string,
    lift_int8,
)
from sqlitelite.sql import CreateTable, parse


@dataclass
class SchemaColumn:
    """One schema entry: type, name, table name, root page and its SQL."""

    type: bytes
    name: bytes
    table_name: bytes
    rootpage: int
    sql: CreateTable

    @classmethod
    def from_values(cls, values: Iterable[RecordValue]) -> "SchemaColumn":
        """Build an entry from the five decoded values of a schema record.

        Raises RecordError when values are missing or of the wrong kind, and
        SqlError when the SQL text cannot be parsed.
        """
        items = iter(values)

        def take() -> RecordValue:
            try:
                return next(items)
            except StopIteration:
                raise RecordError(
                    "cells ran out when iterating for schema-column"
                ) from None

        entry_type = lift_encoded_string(take())
        name = lift_encoded_string(take())
        table_name = lift_encoded_string(take())
        rootpage = lift_int8(take())
        statement = parse(lift_encoded_string(take()))
        if not isinstance(statement, CreateTable):
            raise RecordError("expected create-table sql for schema column")
        return cls(
            type=entry_type,
            name=name,
            table_name=table_name,
            rootpage=rootpage,
            sql=statement,
        )

    def describe(self) -> str:
        """A readable multi-line summary of the entry."""
        return "\n".join(
            [
                f"TYPE={self.type.decode('utf-8', errors='replace')}",
                f"NAME={self.name.decode('utf-8', errors='replace')}",
                f"TABLE_NAME={self.table_name.decode('utf-8', errors='replace')}",
                f"ROOTPAGE={self.rootpage}",
                f"SQL={self.sql!r}",
            ]
        )


@dataclass
class SchemaRecord:
    """A schema entry together with the header of the record it came from."""

    header: RecordHeader
    column: SchemaColumn