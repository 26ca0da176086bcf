"""Buffered reading of delimited lines from a file."""

from __future__ import annotations

from collections.abc import Iterator

from corekit.file_utils import File

__all__ = ["LineReader"]


class LineReader:
    """Reads lines, each ending with ``delimiter``, from a file."""

    def __init__(
        self,
        file: File,
        delimiter: bytes | str = b"\n",
        buffer_size: int = 8192,
    ) -> None:
        if isinstance(delimiter, str):
            delimiter = delimiter.encode()
        if len(delimiter) != 1:
            raise ValueError("delimiter must be a single byte")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._file = file
        self._delimiter = bytes(delimiter)
        self._buffer_size = buffer_size
        self._buffer = b""
        self._offset = 0

    def read(self) -> bytes:
        """Return the next line including its delimiter.

        At the end of file the remaining bytes are returned without a
        delimiter, and ``b""`` once nothing is left.
        """
        line = bytearray()
        while True:
            index = self._buffer.find(self._delimiter, self._offset)
            if index >= 0:
                line += self._buffer[self._offset:index + 1]
                self._offset = index + 1
                return bytes(line)
            line += self._buffer[self._offset:]
            self._buffer = self._file.read(self._buffer_size)
            self._offset = 0
            if not self._buffer:
                return bytes(line)

    def __iter__(self) -> Iterator[bytes]:
        while line := self.read():
            yield line