import io

import pytest

from sqlitelite.binio import read_exact, read_one


def test_read_exact_returns_requested_bytes():
    stream = io.BytesIO(b"abcdef")
    assert read_exact(stream, 4) == b"abcd"
    assert stream.read() == b"ef"


def test_read_exact_zero_bytes():
    stream = io.BytesIO(b"xyz")
    assert read_exact(stream, 0) == b""
    assert stream.read() == b"xyz"


def test_read_exact_whole_stream():
    data = bytes(range(256))
    assert read_exact(io.BytesIO(data), len(data)) == data


def test_read_exact_short_stream_raises():
    with pytest.raises(EOFError):
        read_exact(io.BytesIO(b"ab"), 3)


def test_read_exact_negative_count_raises():
    with pytest.raises(ValueError):
        read_exact(io.BytesIO(b"ab"), -1)


class _Trickle(io.RawIOBase):
    """A stream that hands out at most one byte per read call."""

    def __init__(self, data):
        self._data = bytearray(data)

    def readable(self):
        return True

    def read(self, size=-1):
        if not self._data:
            return b""
        byte = bytes(self._data[:1])
        del self._data[:1]
        return byte


def test_read_exact_collects_partial_reads():
    assert read_exact(_Trickle(b"hello"), 5) == b"hello"


def test_read_one_returns_integer_byte():
    stream = io.BytesIO(b"\xff\x10")
    assert read_one(stream) == 0xFF
    assert read_one(stream) == 0x10


def test_read_one_on_empty_stream_raises():
    with pytest.raises(EOFError):
        read_one(io.BytesIO(b""))