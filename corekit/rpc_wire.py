"""Wire structures of the datagram RPC protocol."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import NamedTuple

__all__ = [
    "HEADER_SIZE",
    "FLAG_PARTIAL",
    "Header",
    "parse_header",
    "OperationKey",
    "make_nonce",
]

FLAG_PARTIAL = 0x1

_HEADER = struct.Struct("<QQHHI")
HEADER_SIZE = _HEADER.size
_NONCE_PREFIX = struct.Struct("<QH")


@dataclass(frozen=True)
class Header:
    """The header in front of every request and response fragment.

    ``offset`` is the position of the fragment's plaintext in the whole
    message; ``flags`` holds :data:`FLAG_PARTIAL` on every fragment but the
    last one.
    """

    key_fingerprint: int
    request_id: int
    offset: int
    flags: int = 0
    unused: int = 0

    @property
    def partial(self) -> bool:
        """Whether more of the message follows this fragment."""
        return bool(self.flags & FLAG_PARTIAL)

    def pack(self) -> bytes:
        """The header's 24 wire bytes."""
        return _HEADER.pack(
            self.key_fingerprint,
            self.request_id,
            self.offset,
            self.unused,
            self.flags,
        )


def parse_header(data: bytes) -> Header:
    """Parse the header at the start of ``data``.

    Raises :class:`ValueError` when ``data`` is too short to hold one.
    """
    if len(data) < HEADER_SIZE:
        raise ValueError(f"a header takes {HEADER_SIZE} bytes, not {len(data)}")
    key_fingerprint, request_id, offset, unused, flags = _HEADER.unpack_from(data)
    return Header(key_fingerprint, request_id, offset, flags, unused)


class OperationKey(NamedTuple):
    """Identifies an operation by key fingerprint and request id."""

    key_fingerprint: int
    request_id: int


def make_nonce(request_id: int, offset: int, response: bool = False) -> bytes:
    """The 12-byte nonce of the fragment at ``offset`` of a request or response."""
    prefix = _NONCE_PREFIX.pack(request_id & 0xFFFFFFFFFFFFFFFF, offset & 0xFFFF)
    return prefix + bytes((0, 1 if response else 0))