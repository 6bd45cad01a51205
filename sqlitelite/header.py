"""The 100-byte header at the start of every database file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from sqlitelite.binio import read_exact

_LAYOUT = struct.Struct(">16sHBBBBBB12I20sII")

HEADER_SIZE = _LAYOUT.size


@dataclass(frozen=True)
class DatabaseHeader:
    """The decoded database file header; all integers are big-endian on disk."""

    header_string: bytes
    page_size: int
    file_format_write_version: int
    file_format_read_version: int
    reserved_page_tail_bytes: int
    maximum_embedded_payload_fraction: int
    minimum_embedded_payload_fraction: int
    leaf_payload_fraction: int
    file_change_counter: int
    in_header_database_size: int
    freelist_page_idx: int
    freelist_page_count: int
    cookie: int
    format_number: int
    page_cache_size: int
    largest_root_page_idx: int
    text_encoding: int
    user_version: int
    incremental_vacuum_enabled: int
    application_id: int
    reserved: bytes
    version_valid_for: int
    sqlite_version_number: int


def read_database_header(stream: BinaryIO) -> DatabaseHeader:
    """Read and decode the file header; EOFError if the stream is too short."""
    return DatabaseHeader(*_LAYOUT.unpack(read_exact(stream, HEADER_SIZE)))