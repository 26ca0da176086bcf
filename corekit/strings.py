"""Parsing of leading decimal integers with fixed-width wrap-around."""

from __future__ import annotations

import re

__all__ = [
    "consume_int",
    "consume_int8",
    "consume_uint8",
    "consume_int16",
    "consume_uint16",
    "consume_int32",
    "consume_uint32",
    "consume_int64",
    "consume_uint64",
]

_LEADING_INT = re.compile(r"(-?)([0-9]*)")


def consume_int(text: str, bits: int = 32, signed: bool = True) -> tuple[int, str]:
    """Parse a leading optional ``-`` and decimal digits from ``text``.

    The value wraps around to a ``bits``-wide integer, as fixed-width machine
    arithmetic would. Returns the value and the unconsumed rest of ``text``.
    """
    match = _LEADING_INT.match(text)
    negative, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if negative:
        value = -value
    modulus = 1 << bits
    value %= modulus
    if signed and value >= modulus >> 1:
        value -= modulus
    return value, text[match.end():]


def consume_int8(text: str) -> tuple[int, str]:
    return consume_int(text, 8, True)


def consume_uint8(text: str) -> tuple[int, str]:
    return consume_int(text, 8, False)


def consume_int16(text: str) -> tuple[int, str]:
    return consume_int(text, 16, True)


def consume_uint16(text: str) -> tuple[int, str]:
    return consume_int(text, 16, False)


def consume_int32(text: str) -> tuple[int, str]:
    return consume_int(text, 32, True)


def consume_uint32(text: str) -> tuple[int, str]:
    return consume_int(text, 32, False)


def consume_int64(text: str) -> tuple[int, str]:
    return consume_int(text, 64, True)


def consume_uint64(text: str) -> tuple[int, str]:
    return consume_int(text, 64, False)