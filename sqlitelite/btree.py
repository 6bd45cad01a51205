"""B-tree pages: page headers, cell pointers and leaf table cells."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import BinaryIO, Iterable, Iterator, Optional

from sqlitelite.binio import read_exact
from sqlitelite.record import ColumnFactory, Record, read_record
from sqlitelite.schema import SchemaColumn
from sqlitelite.varint import Varint, read_varint

_HEADER = struct.Struct(">BHHHB")
_RIGHT_MOST_POINTER = struct.Struct(">I")
_CELL_POINTER = struct.Struct(">H")


class PageType(IntEnum):
    """The kind of b-tree page, as stored in the first header byte."""

    INTERIOR_INDEX = 0x02
    INTERIOR_TABLE = 0x05
    LEAF_INDEX = 0x0A
    LEAF_TABLE = 0x0D

    @property
    def is_interior(self) -> bool:
        return self in (PageType.INTERIOR_INDEX, PageType.INTERIOR_TABLE)


class PageTypeError(ValueError):
    """Raised for an unknown page type byte or a page type that is not handled."""

    def __init__(self, value: int, message: Optional[str] = None) -> None:
        self.value = value
        super().__init__(message or f"Error parsing page type from 0x{value:X}")


def _page_type(value: int) -> PageType:
    try:
        return PageType(value)
    except ValueError:
        raise PageTypeError(value) from None


@dataclass(frozen=True)
class PageHeader:
    """The header at the start of every b-tree page."""

    page_type: PageType
    first_freeblock_start: int
    cell_count: int
    content_area_start: int
    free_bytes_in_content_area: int
    right_most_pointer: Optional[int] = None

    def size(self) -> int:
        """Header length in bytes: 8, or 12 with a right-most pointer."""
        extra = _RIGHT_MOST_POINTER.size if self.right_most_pointer is not None else 0
        return _HEADER.size + extra


def read_page_header(stream: BinaryIO) -> PageHeader:
    """Read a page header; interior pages also carry a right-most pointer."""
    type_byte, freeblock, cell_count, content_start, fragmented = _HEADER.unpack(
        read_exact(stream, _HEADER.size)
    )
    page_type = _page_type(type_byte)
    right_most_pointer = None
    if page_type.is_interior:
        (right_most_pointer,) = _RIGHT_MOST_POINTER.unpack(
            read_exact(stream, _RIGHT_MOST_POINTER.size)
        )
    return PageHeader(
        page_type=page_type,
        first_freeblock_start=freeblock,
        cell_count=cell_count,
        content_area_start=content_start,
        free_bytes_in_content_area=fragmented,
        right_most_pointer=right_most_pointer,
    )


def read_cell_pointers(stream: BinaryIO, cell_count: int) -> list[int]:
    """Read ``cell_count`` big-endian 16-bit cell offsets."""
    data = read_exact(stream, cell_count * _CELL_POINTER.size)
    return [pointer for (pointer,) in _CELL_POINTER.iter_unpack(data)]


@dataclass
class LeafTableCell:
    """A cell of a table leaf page: payload size, rowid and payload."""

    total_payload_bytes: Varint
    rowid: Varint
    initial_payload: bytes
    first_overflow_page_number: Optional[int] = None


def read_leaf_table_cell(stream: BinaryIO) -> LeafTableCell:
    """Read a table leaf cell whose whole payload lies on the page."""
    total_payload_bytes = read_varint(stream)
    rowid = read_varint(stream)
    payload = read_exact(stream, total_payload_bytes.value())
    return LeafTableCell(
        total_payload_bytes=total_payload_bytes,
        rowid=rowid,
        initial_payload=payload,
    )


@dataclass
class BTreePage:
    """A decoded page: its header, cell pointers and the cells they point at."""

    header: PageHeader
    cell_pointers: list[int] = field(default_factory=list)
    cells: list[LeafTableCell] = field(default_factory=list)


def read_page(stream: BinaryIO, initial_offset: int = 0) -> BTreePage:
    """Read a page whose header starts ``initial_offset`` bytes into the page.

    Cells that cannot be read in full are skipped. A pointer outside the
    content area raises ValueError; cells of pages other than table leaves
    raise PageTypeError.
    """
    header = read_page_header(stream)
    pointers = read_cell_pointers(stream, header.cell_count)
    content = stream.read()
    content_offset = header.size() + len(pointers) * _CELL_POINTER.size + initial_offset
    cells: list[LeafTableCell] = []
    for pointer in pointers:
        adjusted = pointer - content_offset
        if not 0 <= adjusted <= len(content):
            raise ValueError(f"cell pointer {pointer} lies outside the cell content area")
        if header.page_type is not PageType.LEAF_TABLE:
            raise PageTypeError(
                header.page_type.value,
                f"cells of {header.page_type.name.lower()} pages are not supported",
            )
        try:
            cells.append(read_leaf_table_cell(io.BytesIO(content[adjusted:])))
        except EOFError:
            continue
    return BTreePage(header=header, cell_pointers=pointers, cells=cells)


@dataclass
class RecordCell:
    """A cell's rowid with its decoded record."""

    rowid: Varint
    record: Record


def parse_cell(
    cell: LeafTableCell, column_factory: Optional[ColumnFactory] = None
) -> RecordCell:
    """Decode the record held in a cell's payload."""
    record = read_record(io.BytesIO(cell.initial_payload), column_factory)
    return RecordCell(rowid=cell.rowid, record=record)


def read_root(root_page: BTreePage) -> Iterator[RecordCell]:
    """Yield the schema records of the first page, stopping at the first bad one."""
    for cell in root_page.cells:
        try:
            record_cell = parse_cell(cell, SchemaColumn.from_values)
        except (EOFError, ValueError):
            return
        yield record_cell


def read_tail(pages: Iterable[BTreePage]) -> Iterator[list[LeafTableCell]]:
    """Yield the cells of each page in turn."""
    return (page.cells for page in pages)