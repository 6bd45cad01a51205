"""Records: a header of serial types followed by the encoded values."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Callable, Iterable, Optional, Union

from sqlitelite.binio import read_exact, read_one
from sqlitelite.varint import Varint, read_varint

RecordValue = Union[None, int, bytes]
ColumnFactory = Callable[[list], Any]

_NULL_SERIAL_TYPE = 0
_INT8_SERIAL_TYPE = 1
_FIRST_STRING_SERIAL_TYPE = 13


class RecordError(ValueError):
    """Raised when a record or one of its values is malformed or unexpected."""


@dataclass
class RecordHeader:
    """The record header: its total size and the serial type of each value."""

    size: Varint
    serial_types: list[Varint] = field(default_factory=list)


@dataclass
class Record:
    """A record header and the columns decoded from its body."""

    header: RecordHeader
    columns: list = field(default_factory=list)


@dataclass
class SerializedRecord:
    """A record header and the single run of values that follows it."""

    header: RecordHeader
    cells: list[RecordValue] = field(default_factory=list)


def read_header(stream: BinaryIO) -> RecordHeader:
    """Read a record header from ``stream``.

    The size varint counts itself; the remaining header bytes hold serial
    type varints, read until they run out.
    """
    size = read_varint(stream)
    tail_size = size.value() - len(size)
    if tail_size < 0:
        raise RecordError(
            f"record header size {size.value()} is smaller than its own varint"
        )
    tail = io.BytesIO(read_exact(stream, tail_size))
    serial_types: list[Varint] = []
    while True:
        try:
            serial_types.append(read_varint(tail))
        except EOFError:
            break
    return RecordHeader(size=size, serial_types=serial_types)


def is_string_serial_type(serial_type: int) -> bool:
    """True for odd serial types of 13 and above, which hold text."""
    return serial_type >= _FIRST_STRING_SERIAL_TYPE and serial_type % 2 == 1


def string_serial_type_size(serial_type: int) -> int:
    """The number of bytes of text a string serial type stands for."""
    return (serial_type - _FIRST_STRING_SERIAL_TYPE) // 2


def read_value(stream: BinaryIO, serial_type: Varint | int) -> RecordValue:
    """Read one value of the given serial type.

    Null gives None, an 8-bit integer gives its byte as an int, and a string
    gives its raw bytes. Other serial types raise RecordError.
    """
    code = int(serial_type)
    if code == _NULL_SERIAL_TYPE:
        return None
    if code == _INT8_SERIAL_TYPE:
        return read_one(stream)
    if is_string_serial_type(code):
        return read_exact(stream, string_serial_type_size(code))
    raise RecordError(f"unsupported serial type {code}")


def read_raw_column(
    stream: BinaryIO, serial_types: Iterable[Varint | int]
) -> list[RecordValue]:
    """Read one value per serial type, stopping early if the stream runs out."""
    cells: list[RecordValue] = []
    for serial_type in serial_types:
        try:
            cells.append(read_value(stream, serial_type))
        except EOFError:
            break
    return cells


def read_record(
    stream: BinaryIO, column_factory: Optional[ColumnFactory] = None
) -> Record:
    """Read a header, then decode the body as repeated runs of values.

    Each run is handed to ``column_factory`` (the raw list is kept when it is
    None). Decoding stops at the first empty run or the first run the factory
    rejects with a ValueError.
    """
    header = read_header(stream)
    data = io.BytesIO(stream.read())
    columns: list = []
    while True:
        start = data.tell()
        cells = read_raw_column(data, header.serial_types)
        if not cells:
            break
        if column_factory is None:
            columns.append(cells)
        else:
            try:
                columns.append(column_factory(cells))
            except ValueError:
                break
        if data.tell() == start:
            # Nothing was consumed, so every further run would be the same.
            break
    return Record(header=header, columns=columns)


def lift_encoded_string(value: RecordValue) -> bytes:
    """Return the bytes of a string value, or raise RecordError."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise RecordError(f"Received {value!r} when expecting an encoded string")


def lift_int8(value: RecordValue) -> int:
    """Return an 8-bit integer value, or raise RecordError."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise RecordError(f"Received {value!r} when expecting an 8-bit integer")


def serialize_record(data: bytes) -> SerializedRecord:
    """Decode a record payload into its header and a single run of values."""
    stream = io.BytesIO(data)
    try:
        header = read_header(stream)
    except EOFError as exc:
        raise RecordError(f"failed to read record header: {exc}") from exc
    return SerializedRecord(
        header=header, cells=read_raw_column(stream, header.serial_types)
    )