"""Small helpers for reading exact byte counts from binary streams."""

from __future__ import annotations

from typing import BinaryIO


def read_exact(stream: BinaryIO, count: int) -> bytes:
    """Read exactly ``count`` bytes from ``stream``.

    Raises EOFError if the stream ends before ``count`` bytes were read.
    """
    if count < 0:
        raise ValueError(f"cannot read a negative number of bytes: {count}")
    chunks: list[bytes] = []
    remaining = count
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            raise EOFError(
                f"expected {count} bytes, stream ended after {count - remaining}"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_one(stream: BinaryIO) -> int:
    """Read a single byte from ``stream`` and return it as an integer."""
    return read_exact(stream, 1)[0]