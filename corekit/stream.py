"""A buffered text and byte output stream over a file."""

from __future__ import annotations

from types import TracebackType

from corekit.file_utils import File, write_all

__all__ = ["OStream"]


class OStream:
    """Buffers writes and passes them to a file when full or flushed."""

    def __init__(self, file: File, buffer_size: int = 8192) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._file = file
        self._buffer_size = buffer_size
        self._buffer = bytearray()
        self._closed = False

    def write(self, data: bytes | str) -> int:
        """Buffer ``data``; text is encoded as UTF-8."""
        if self._closed:
            raise ValueError("write to closed stream")
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buffer += data
        if len(self._buffer) >= self._buffer_size:
            self.flush()
        return len(data)

    def flush(self) -> None:
        """Write every buffered byte to the file."""
        if not self._buffer:
            return
        write_all(self._file, bytes(self._buffer))
        self._buffer.clear()

    def close(self) -> None:
        """Flush and stop accepting writes."""
        if self._closed:
            return
        self.flush()
        self._closed = True

    def __enter__(self) -> OStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()