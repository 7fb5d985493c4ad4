"""In-memory transports for sizing and decoding serialized metric batches."""

from __future__ import annotations

MAX_REMAINING_BYTES = (1 << 64) - 1


class CalcTransport:
    """A write-only transport that counts the bytes written to it."""

    def __init__(self) -> None:
        self.count = 0
        self.closed = False
        self.flush_count = 0

    def write(self, buf: bytes) -> int:
        """Count buf and return its length."""
        n = len(buf)
        self.count += n
        return n

    def write_byte(self, b: int) -> None:
        """Count a single byte."""
        self.count += 1

    def write_string(self, s: str) -> int:
        """Count the UTF-8 length of s and return it."""
        n = len(s.encode("utf-8"))
        self.count += n
        return n

    def reset_count(self) -> None:
        """Reset the byte count to zero."""
        self.count = 0

    def read(self, size: int) -> bytes:
        """Reading is not supported; return no data for any valid size."""
        if size < 0:
            raise ValueError("size must not be negative")
        return bytes(0)

    def read_byte(self) -> int:
        """Reading is not supported; always returns zero."""
        return 0

    def remaining_bytes(self) -> int:
        """Return the largest unsigned 64-bit value: the size is unknown."""
        return MAX_REMAINING_BYTES

    def is_open(self) -> bool:
        return True

    def open(self) -> None:
        """Mark the transport as in use; no connection is kept."""
        self.closed = False

    def close(self) -> None:
        """Mark the transport as closed; no connection is kept."""
        self.closed = True

    def flush(self) -> None:
        """Record a flush; nothing is buffered."""
        self.flush_count += 1


class BufferedReadTransport:
    """A transport that reads from an in-memory buffer."""

    def __init__(self, buffer: bytes = b"") -> None:
        self._buf = bytearray(buffer)
        self.closed = False
        self.flush_count = 0

    def read(self, size: int) -> bytes:
        """Read up to size bytes; raise EOFError when the buffer is drained."""
        if size > 0 and not self._buf:
            raise EOFError("end of buffer")
        chunk = bytes(self._buf[:size])
        del self._buf[:size]
        return chunk

    def write(self, buf: bytes) -> int:
        """Replace the read buffer with buf and return its length."""
        self._buf = bytearray(buf)
        return len(buf)

    def remaining_bytes(self) -> int:
        """Return the number of unread bytes."""
        return len(self._buf)

    def is_open(self) -> bool:
        return True

    def open(self) -> None:
        """Mark the transport as in use; no connection is kept."""
        self.closed = False

    def close(self) -> None:
        """Mark the transport as closed; no connection is kept."""
        self.closed = True

    def flush(self) -> None:
        """Record a flush; nothing is written back."""
        self.flush_count += 1