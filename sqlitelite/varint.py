"""Variable-length big-endian integers as stored in database files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator

from sqlitelite.binio import read_one

_HIGH_BIT = 0x80


@dataclass(frozen=True, order=True)
class Varint:
    """The raw bytes of one variable-length integer."""

    raw: bytes

    def __post_init__(self) -> None:
        if not self.raw:
            raise ValueError("a varint holds at least one byte")

    def __len__(self) -> int:
        return len(self.raw)

    def __iter__(self) -> Iterator[int]:
        return iter(self.raw)

    def __int__(self) -> int:
        return self.value()

    def value(self) -> int:
        """Decode the integer: every byte but the last contributes seven bits."""
        count = len(self.raw)
        result = 0
        for position, byte in enumerate(self.raw):
            if position < count - 1:
                byte ^= _HIGH_BIT
            result |= byte << (7 * (count - position - 1))
        return result


def read_varint(stream: BinaryIO) -> Varint:
    """Read one varint from ``stream``.

    The first byte must be present (EOFError otherwise). Further bytes are
    read while the previous one has its high bit set; reading stops quietly
    if the stream runs out.
    """
    raw = bytearray([read_one(stream)])
    while raw[-1] & _HIGH_BIT:
        try:
            raw.append(read_one(stream))
        except EOFError:
            break
    return Varint(bytes(raw))