"""Little-endian base-128 variable-length integers."""

from __future__ import annotations

__all__ = ["encode_varint", "parse_varint"]


def encode_varint(value: int) -> bytes:
    """Encode a non-negative integer as a varint."""
    if value < 0:
        raise ValueError("varint value must be non-negative")
    output = bytearray()
    while True:
        cur = value & 0x7F
        value >>= 7
        if not value:
            output.append(cur)
            return bytes(output)
        output.append(cur | 0x80)


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a varint from the start of ``data``.

    Returns the value and the bytes after it; raises :class:`ValueError`
    when ``data`` holds no complete varint.
    """
    data = bytes(data)
    result = 0
    for size, cur in enumerate(data):
        result |= (cur & 0x7F) << (size * 7)
        if not cur & 0x80:
            return result, data[size + 1:]
    raise ValueError("incomplete varint")