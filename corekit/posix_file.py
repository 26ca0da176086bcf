"""Files backed by operating-system file descriptors."""

from __future__ import annotations

import os
from types import TracebackType

from corekit.file_utils import File

__all__ = [
    "SharedFile",
    "NativeFile",
    "std_input",
    "std_output",
    "std_error",
]


class SharedFile(File):
    """A file over a descriptor it does not own."""

    def __init__(self, fd: int) -> None:
        self.fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self.fd, size)

    def write(self, data: bytes) -> int:
        return os.write(self.fd, data)

    def pread(self, position: int, size: int) -> bytes:
        return os.pread(self.fd, size, position)

    def pwrite(self, position: int, data: bytes) -> int:
        return os.pwrite(self.fd, data, position)

    def seek(self, position: int) -> None:
        os.lseek(self.fd, position, os.SEEK_SET)

    def tell(self) -> int:
        return os.lseek(self.fd, 0, os.SEEK_CUR)

    def size(self) -> int:
        return os.fstat(self.fd).st_size


class NativeFile(SharedFile):
    """A file that owns its descriptor and closes it."""

    def __init__(self, fd: int = -1) -> None:
        super().__init__(fd)

    def create(self, filename: str | os.PathLike[str]) -> None:
        """Create or truncate ``filename`` for writing."""
        self.open(filename, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)

    def open(
        self,
        filename: str | os.PathLike[str],
        flags: int,
        mode: int = 0,
    ) -> None:
        """Open ``filename``, closing any descriptor held before."""
        self.close()
        self.fd = os.open(filename, flags, mode)

    def close(self) -> None:
        if self.fd < 0:
            return
        os.close(self.fd)
        self.fd = -1

    def __enter__(self) -> NativeFile:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


_STD_INPUT = SharedFile(0)
_STD_OUTPUT = SharedFile(1)
_STD_ERROR = SharedFile(2)


def std_input() -> SharedFile:
    """The process's standard input."""
    return _STD_INPUT


def std_output() -> SharedFile:
    """The process's standard output."""
    return _STD_OUTPUT


def std_error() -> SharedFile:
    """The process's standard error."""
    return _STD_ERROR