"""A file whose content lives in memory."""

from __future__ import annotations

import errno
import os

from corekit.file_utils import File

__all__ = ["MemoryFile"]


def _error(code: int) -> OSError:
    return OSError(code, os.strerror(code))


class MemoryFile(File):
    """A growable in-memory file; its bytes are exposed as ``content``."""

    def __init__(self, content: bytes = b"") -> None:
        self.content = bytearray(content)
        self._position = 0

    def _store(self, position: int, data: bytes) -> int:
        data = bytes(data)
        end = position + len(data)
        if end > len(self.content):
            self.content.extend(bytes(end - len(self.content)))
        self.content[position:end] = data
        return len(data)

    def read(self, size: int) -> bytes:
        data = bytes(self.content[self._position:self._position + size])
        self._position += len(data)
        return data

    def write(self, data: bytes) -> int:
        written = self._store(self._position, data)
        self._position += written
        return written

    def pread(self, position: int, size: int) -> bytes:
        if position < 0:
            raise _error(errno.EINVAL)
        return bytes(self.content[position:position + size])

    def pwrite(self, position: int, data: bytes) -> int:
        if position < 0:
            raise _error(errno.EINVAL)
        return self._store(position, data)

    def seek(self, position: int) -> None:
        if position < 0:
            raise _error(errno.ESPIPE)
        self._position = position

    def tell(self) -> int:
        return self._position

    def size(self) -> int:
        return len(self.content)