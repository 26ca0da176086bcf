"""Abstract file interface and helpers built on top of it."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["File", "read_fully", "read_to_end", "write_all"]


class File(ABC):
    """A byte-oriented file with positional and sequential access.

    Failures are reported by raising :class:`OSError`.
    """

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes at the current position; ``b""`` at end of file."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write ``data`` at the current position and return the number of bytes written."""

    @abstractmethod
    def pread(self, position: int, size: int) -> bytes:
        """Read up to ``size`` bytes at ``position`` without moving the file position."""

    @abstractmethod
    def pwrite(self, position: int, data: bytes) -> int:
        """Write ``data`` at ``position`` without moving the file position."""

    @abstractmethod
    def seek(self, position: int) -> None:
        """Move the file position to ``position``."""

    @abstractmethod
    def tell(self) -> int:
        """Return the current file position."""

    @abstractmethod
    def size(self) -> int:
        """Return the size of the file in bytes."""


def read_fully(file: File, size: int) -> bytes:
    """Read eagerly until ``size`` bytes are gathered or the end of file is reached.

    A result shorter than ``size`` means the end of file was reached.
    """
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = file.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_to_end(file: File, buffer_size: int = 8192) -> bytes:
    """Read from ``file`` until the end of file is reached."""
    chunks: list[bytes] = []
    while chunk := file.read(buffer_size):
        chunks.append(chunk)
    return b"".join(chunks)


def write_all(file: File, data: bytes) -> None:
    """Write the whole of ``data`` into ``file``, retrying on short writes."""
    view = memoryview(bytes(data))
    while view:
        written = file.write(bytes(view))
        view = view[written:]