"""Binary encoding of IP addresses in network byte order."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address

__all__ = ["encode", "decode", "decode_v4", "decode_v6"]


def encode(address: IPv4Address | IPv6Address) -> bytes:
    """Return the 4 or 16 bytes of ``address``."""
    return address.packed


def decode(data: bytes) -> IPv4Address | IPv6Address:
    """Decode 4 bytes as IPv4 or 16 bytes as IPv6."""
    data = bytes(data)
    if len(data) == 4:
        return IPv4Address(data)
    if len(data) == 16:
        return IPv6Address(data)
    raise ValueError(f"an address takes 4 or 16 bytes, not {len(data)}")


def decode_v4(data: bytes) -> IPv4Address:
    """Decode exactly 4 bytes as an IPv4 address."""
    data = bytes(data)
    if len(data) != 4:
        raise ValueError(f"an IPv4 address takes 4 bytes, not {len(data)}")
    return IPv4Address(data)


def decode_v6(data: bytes) -> IPv6Address:
    """Decode exactly 16 bytes as an IPv6 address."""
    data = bytes(data)
    if len(data) != 16:
        raise ValueError(f"an IPv6 address takes 16 bytes, not {len(data)}")
    return IPv6Address(data)