"""Conversions between UTF-16 code units and UTF-8 bytes.

Each UTF-16 code unit is converted on its own, so surrogates become
three-byte sequences; four-byte UTF-8 sequences decode to U+FFFD.
"""

from __future__ import annotations

import struct
from collections.abc import Iterator

__all__ = ["utf16_to_utf8_size", "utf16_to_utf8", "utf8_length", "utf8_to_utf16"]


def _code_units(text: str) -> tuple[int, ...]:
    raw = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(raw) // 2}H", raw)


def utf16_to_utf8_size(text: str) -> int:
    """Number of bytes :func:`utf16_to_utf8` produces for ``text``."""
    return sum(1 if c <= 0x7F else 2 if c <= 0x7FF else 3 for c in _code_units(text))


def utf16_to_utf8(text: str) -> bytes:
    """Encode the UTF-16 code units of ``text`` as UTF-8."""
    output = bytearray()
    for c in _code_units(text):
        if c <= 0x7F:
            output.append(c)
        elif c <= 0x7FF:
            output += bytes(((c >> 6) | 0xC0, (c & 0x3F) | 0x80))
        else:
            output += bytes(
                ((c >> 12) | 0xE0, ((c >> 6) & 0x3F) | 0x80, (c & 0x3F) | 0x80)
            )
    return bytes(output)


def _decode(data: bytes) -> Iterator[int]:
    data = bytes(data)
    pos = 0
    while pos < len(data):
        c = data[pos]
        if c & 0xC0 != 0xC0:
            yield c & 0x7F
            pos += 1
        elif c & 0xE0 != 0xE0:
            if len(data) - pos < 2:
                return
            yield ((c & 0x3F) << 6) | (data[pos + 1] & 0x3F)
            pos += 2
        elif c & 0xF0 != 0xF0:
            if len(data) - pos < 3:
                return
            yield (
                ((c & 0x1F) << 12)
                | ((data[pos + 1] & 0x3F) << 6)
                | (data[pos + 2] & 0x3F)
            ) & 0xFFFF
            pos += 3
        else:
            if len(data) - pos < 4:
                return
            yield 0xFFFD
            pos += 4


def utf8_length(data: bytes) -> int:
    """Number of UTF-16 code units that ``data`` decodes to."""
    return sum(1 for _ in _decode(data))


def utf8_to_utf16(data: bytes) -> str:
    """Decode UTF-8 ``data``; a truncated trailing sequence is dropped."""
    units = list(_decode(data))
    raw = struct.pack(f"<{len(units)}H", *units)
    return raw.decode("utf-16-le", "surrogatepass")