"""Parsing and formatting of IP addresses given as option values."""

from __future__ import annotations

import ipaddress
from ipaddress import IPv4Address, IPv6Address

__all__ = ["parse_address", "parse_address_v4", "parse_address_v6", "unparse_address"]


def parse_address(text: str) -> IPv4Address | IPv6Address:
    """Parse an IPv4 or IPv6 address; an empty string gives ``0.0.0.0``.

    Raises :class:`ValueError` with a description on bad input.
    """
    if not text:
        return IPv4Address(0)
    return ipaddress.ip_address(text)


def parse_address_v4(text: str) -> IPv4Address:
    """Parse an IPv4 address; an empty string gives ``0.0.0.0``."""
    if not text:
        return IPv4Address(0)
    return IPv4Address(text)


def parse_address_v6(text: str) -> IPv6Address:
    """Parse an IPv6 address; an empty string gives ``::``."""
    if not text:
        return IPv6Address(0)
    return IPv6Address(text)


def unparse_address(address: IPv4Address | IPv6Address) -> str:
    """Format ``address`` in its canonical text form."""
    return str(address)