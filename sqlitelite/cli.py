"""Command-line entry point: dot-commands and simple SELECT queries."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence, Union

from sqlitelite.database import Database, open_database
from sqlitelite.record import RecordError, lift_encoded_string
from sqlitelite.sql import CreateTable, Select, SqlError, UnsupportedSqlError, parse

PathLike = Union[str, os.PathLike]


def _load(database_path: PathLike) -> Optional[Database]:
    try:
        return open_database(database_path)
    except (OSError, EOFError, ValueError) as exc:
        print(f"could not open database {database_path}: {exc}", file=sys.stderr)
        return None


def db_info_command(database_path: PathLike) -> None:
    """Print the page size and the number of tables."""
    database = _load(database_path)
    if database is None:
        return
    print(f"database page size: {database.header.page_size}")
    print(f"number of tables: {len(database.record_cells)}")


def tables_command(database_path: PathLike) -> None:
    """Print the name of every table, one per line."""
    database = _load(database_path)
    if database is None:
        return
    for schema in database.schema_cells:
        print(schema.column.table_name.decode("utf-8", errors="replace"))


def sql_query_command(database_path: PathLike, query: str) -> None:
    """Run ``SELECT <column> FROM <table>`` and print each matching text value.

    Raises SqlError when the query cannot be parsed or is not a SELECT.
    """
    statement = parse(query)
    if isinstance(statement, CreateTable):
        raise UnsupportedSqlError("creating tables is not supported")
    assert isinstance(statement, Select)
    database = _load(database_path)
    if database is None:
        return
    for schema, records in zip(database.schema_cells, database.record_cells):
        found = schema.column.sql.signature.get(statement.query)
        if found is None:
            print(
                f"source {statement.source} missing signature {statement.query}",
                file=sys.stderr,
            )
            continue
        index, _ = found
        for record in records:
            if index >= len(record.cells):
                print(f"No term at {index}", file=sys.stderr)
                continue
            try:
                value = lift_encoded_string(record.cells[index])
            except RecordError:
                print("could not lift encoded string", file=sys.stderr)
                continue
            print(value.decode("utf-8", errors="replace"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one command against a database file and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="sqlitelite", description="Inspect and query a database file."
    )
    parser.add_argument("database_path", help="path of the database file")
    parser.add_argument("command", help=".dbinfo, .tables or a SELECT statement")
    parser.add_argument("remainder", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    args = parser.parse_args(argv)

    try:
        if args.command == ".dbinfo":
            db_info_command(args.database_path)
        elif args.command == ".tables":
            tables_command(args.database_path)
        else:
            sql_query_command(args.database_path, args.command)
    except SqlError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())