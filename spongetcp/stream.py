"""A bounded in-memory byte stream with a writer and a reader side."""

from __future__ import annotations


class ByteStream:
    """Bytes written at one end and read at the other, limited by capacity."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._buffer = bytearray()
        self._input_ended = False
        self._error = False
        self._bytes_written = 0
        self._bytes_read = 0

    def write(self, data: bytes) -> int:
        """Accept as much of ``data`` as fits and return how many bytes were accepted."""
        accepted = bytes(data[: self.remaining_capacity()])
        self._buffer.extend(accepted)
        self._bytes_written += len(accepted)
        return len(accepted)

    def read(self, size: int) -> bytes:
        """Remove and return up to ``size`` bytes from the front of the stream."""
        size = max(0, size)
        chunk = bytes(self._buffer[:size])
        del self._buffer[:size]
        self._bytes_read += len(chunk)
        return chunk

    def end_input(self) -> None:
        """Signal that the writer will write nothing more."""
        self._input_ended = True

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def eof(self) -> bool:
        """True once input has ended and every byte has been read."""
        return self._input_ended and not self._buffer

    def error(self) -> bool:
        return self._error

    def buffer_size(self) -> int:
        return len(self._buffer)

    def buffer_empty(self) -> bool:
        return not self._buffer

    def remaining_capacity(self) -> int:
        return self._capacity - len(self._buffer)

    def input_ended(self) -> bool:
        return self._input_ended

    def bytes_written(self) -> int:
        return self._bytes_written

    def bytes_read(self) -> int:
        return self._bytes_read