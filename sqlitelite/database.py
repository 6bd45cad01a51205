"""Opening a database file and decoding its table rows."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Union

from sqlitelite.btree import LeafTableCell
from sqlitelite.header import DatabaseHeader
from sqlitelite.page import read_cells
from sqlitelite.record import RecordError, SerializedRecord, serialize_record
from sqlitelite.schema import SchemaRecord


@dataclass
class Database:
    """A database file: header, schema entries and the records of each page."""

    header: DatabaseHeader
    schema_cells: list[SchemaRecord] = field(default_factory=list)
    record_cells: list[list[SerializedRecord]] = field(default_factory=list)


def _serialize_row(cells: Iterable[LeafTableCell]) -> list[SerializedRecord]:
    records: list[SerializedRecord] = []
    for cell in cells:
        try:
            records.append(serialize_record(cell.initial_payload))
        except RecordError:
            continue
    return records


def open_database(path: Union[str, os.PathLike]) -> Database:
    """Read the whole file at ``path``; records that cannot be decoded are skipped."""
    with open(path, "rb") as stream:
        page_cells = read_cells(stream)
    return Database(
        header=page_cells.database_header,
        schema_cells=page_cells.schema_cells,
        record_cells=[_serialize_row(row) for row in page_cells.btree_cells],
    )