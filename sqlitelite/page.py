"""Reading a database file page by page into schema and table cells."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator

from sqlitelite.binio import read_exact
from sqlitelite.btree import BTreePage, LeafTableCell, read_page, read_root, read_tail
from sqlitelite.header import HEADER_SIZE, DatabaseHeader, read_database_header
from sqlitelite.schema import SchemaRecord


@dataclass
class RootPage:
    """The first page: the file header and the b-tree page that follows it."""

    database_header: DatabaseHeader
    page: BTreePage


def read_root_page(stream: BinaryIO) -> RootPage:
    """Read the file header and the rest of the first page."""
    database_header = read_database_header(stream)
    tail_size = database_header.page_size - HEADER_SIZE
    if tail_size <= 0:
        raise ValueError(
            f"page size {database_header.page_size} leaves no room after the header"
        )
    tail = read_exact(stream, tail_size)
    page = read_page(io.BytesIO(tail), HEADER_SIZE)
    return RootPage(database_header=database_header, page=page)


@dataclass
class PageCells:
    """The file header, the schema entries, and the cells of every later page."""

    database_header: DatabaseHeader
    schema_cells: list[SchemaRecord] = field(default_factory=list)
    btree_cells: list[list[LeafTableCell]] = field(default_factory=list)

    def __iter__(self) -> Iterator[tuple[SchemaRecord, list[LeafTableCell]]]:
        """Pair each schema entry with the cells of the page at the same position."""
        return zip(self.schema_cells, self.btree_cells)


def _read_pages(stream: BinaryIO, page_size: int) -> Iterator[BTreePage]:
    while True:
        try:
            page = read_page(io.BytesIO(read_exact(stream, page_size)), 0)
        except (EOFError, ValueError):
            return
        yield page


def read_cells(stream: BinaryIO) -> PageCells:
    """Read the whole file; page reading stops at the first page that fails."""
    root = read_root_page(stream)
    pages = list(_read_pages(stream, root.database_header.page_size))
    schema_cells: list[SchemaRecord] = []
    for record_cell in read_root(root.page):
        columns = record_cell.record.columns
        if not columns:
            break
        schema_cells.append(
            SchemaRecord(header=record_cell.record.header, column=columns[-1])
        )
    return PageCells(
        database_header=root.database_header,
        schema_cells=schema_cells,
        btree_cells=list(read_tail(pages)),
    )