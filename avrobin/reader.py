"""Buffered reader for the Avro binary encoding."""

from __future__ import annotations

import struct
from typing import BinaryIO

__all__ = ["AvroError", "AvroEOFError", "Reader"]

_MAX_INT_BYTES = 5
_MAX_LONG_BYTES = 10
_FLOAT = struct.Struct("<f")
_DOUBLE = struct.Struct("<d")


class AvroError(Exception):
    """Raised when Avro data cannot be read."""


class AvroEOFError(AvroError, EOFError):
    """Raised when the data ends before a value is complete."""


class Reader:
    """Reads Avro binary values from a stream or from a byte string.

    Every failed read raises an :class:`AvroError`. The first error seen is
    also kept in :attr:`error`; an end-of-data error may be replaced by a
    later, more specific one.
    """

    def __init__(self, stream: BinaryIO | None = None, buffer_size: int = 4096) -> None:
        if stream is not None and buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buf = b""
        self._head = 0
        self._tail = 0
        self.error: Exception | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> Reader:
        """Create a reader over an in-memory byte string."""
        return cls(None, 0).reset(data)

    def reset(self, data: bytes) -> Reader:
        """Detach from any stream and read from ``data`` instead."""
        self._stream = None
        self._buf = bytes(data)
        self._head = 0
        self._tail = len(self._buf)
        self.error = None
        return self

    def report_error(self, operation: str, msg: str) -> AvroError:
        """Record an error for ``operation`` and return it.

        An error already recorded is kept unless it is an end-of-data error.
        """
        err = AvroError(f"avro: {operation}: {msg}")
        self._record(err)
        return err

    def _record(self, err: Exception) -> None:
        if self.error is None or isinstance(self.error, AvroEOFError):
            self.error = err

    def _load_more(self) -> None:
        if self._stream is None:
            self._head = self._tail
            err = AvroEOFError("avro: unexpected end of data")
            if self.error is None:
                self.error = err
            raise err

        while True:
            chunk = self._stream.read(self._buffer_size)
            if chunk is None:
                # Non-blocking stream with nothing available yet.
                continue
            if not chunk:
                err = AvroEOFError("avro: unexpected end of data")
                if self.error is None:
                    self.error = err
                raise err
            self._buf = bytes(chunk)
            self._head = 0
            self._tail = len(self._buf)
            return

    def _read_byte(self) -> int:
        if self._head == self._tail:
            self._load_more()
        b = self._buf[self._head]
        self._head += 1
        return b

    def read(self, size: int) -> bytes:
        """Read exactly ``size`` raw bytes."""
        out = bytearray()
        while len(out) < size:
            if self._head == self._tail:
                self._load_more()
            take = min(size - len(out), self._tail - self._head)
            out += self._buf[self._head:self._head + take]
            self._head += take
        return bytes(out)

    def read_bool(self) -> bool:
        """Read a boolean encoded as a single 0 or 1 byte."""
        b = self._read_byte()
        if b not in (0, 1):
            raise self.report_error("read_bool", "invalid bool")
        return b == 1

    def _read_varint(self, max_bytes: int, bits: int, operation: str, kind: str) -> int:
        val = 0
        for offset in range(max_bytes):
            b = self._read_byte()
            val |= (b & 0x7F) << (7 * offset)
            if not b & 0x80:
                break
        else:
            raise self.report_error(operation, f"{kind} overflow")
        val &= (1 << bits) - 1
        return (val >> 1) ^ -(val & 1)

    def read_int(self) -> int:
        """Read a zig-zag encoded 32-bit int."""
        return self._read_varint(_MAX_INT_BYTES, 32, "read_int", "int")

    def read_long(self) -> int:
        """Read a zig-zag encoded 64-bit long."""
        return self._read_varint(_MAX_LONG_BYTES, 64, "read_long", "long")

    def read_float(self) -> float:
        """Read a little-endian 32-bit float."""
        return _FLOAT.unpack(self.read(4))[0]

    def read_double(self) -> float:
        """Read a little-endian 64-bit double."""
        return _DOUBLE.unpack(self.read(8))[0]

    def _read_sized(self, operation: str, kind: str) -> bytes:
        size = self.read_long()
        if size < 0:
            raise self.report_error(operation, f"invalid {kind} length")
        if size == 0:
            return b""
        return self.read(size)

    def read_bytes(self) -> bytes:
        """Read a length-prefixed byte string."""
        return self._read_sized("read_bytes", "bytes")

    def read_string(self) -> str:
        """Read a length-prefixed UTF-8 string."""
        data = self._read_sized("read_string", "string")
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise self.report_error("read_string", f"invalid utf-8: {exc.reason}") from exc

    def read_block_header(self) -> tuple[int, int]:
        """Read a block header, returning (item count, byte size).

        The byte size is 0 when the header does not carry one.
        """
        length = self.read_long()
        if length < 0:
            size = self.read_long()
            return -length, size
        return length, 0