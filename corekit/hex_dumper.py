"""Hex dump formatting of byte strings into a file."""

from __future__ import annotations

from corekit.file_utils import File, write_all

__all__ = ["HexDumper"]

_HEX_DIGITS = "0123456789abcdef"


def _printable(value: int) -> str:
    return chr(value) if 32 <= value <= 127 else "."


class HexDumper:
    """Writes lines of an offset, hex byte pairs and printable characters."""

    def __init__(self, width: int = 16) -> None:
        if width <= 0:
            raise ValueError("width must be positive")
        self._width = width
        self._char_start = (width * 5 + 23) // 2

    @property
    def width(self) -> int:
        """Number of bytes shown on each line."""
        return self._width

    def dump(self, offset: int, data: bytes, output: File) -> None:
        """Dump all of ``data`` to ``output``, labelling lines from ``offset``."""
        data = bytes(data)
        for start in range(0, len(data), self._width):
            self.dump_line(offset + start, data[start:start + self._width], output)

    def dump_line(self, offset: int, data: bytes, output: File) -> None:
        """Dump at most one line's worth of ``data`` to ``output``."""
        data = bytes(data)[:self._width]
        line = [" "] * (self._char_start + len(data) + 1)
        line[0:8] = f"{offset & 0xFFFFFFFF:08x}"
        line[8] = ":"
        for i, value in enumerate(data):
            pos = i * 5 // 2 + 10
            line[pos] = _HEX_DIGITS[value >> 4]
            line[pos + 1] = _HEX_DIGITS[value & 0xF]
            line[self._char_start + i] = _printable(value)
        line[self._char_start + len(data)] = "\n"
        write_all(output, "".join(line).encode("latin-1"))