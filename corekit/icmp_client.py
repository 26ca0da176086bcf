"""ICMP echo (ping) requests over asyncio."""

from __future__ import annotations

import asyncio
import errno
import os
import socket
import struct
from typing import NamedTuple

__all__ = [
    "ECHO_REPLY",
    "ECHO_REQUEST",
    "EchoReply",
    "compute_checksum",
    "build_echo_request",
    "parse_echo_reply",
    "IcmpClient",
]

ECHO_REPLY = 0
ECHO_REQUEST = 8

_HEADER = struct.Struct(">BBHHH")
_IP_HEADER_SIZE = 20


class EchoReply(NamedTuple):
    identifier: int
    sequence_number: int
    payload: bytes


def compute_checksum(
    icmp_type: int,
    code: int,
    identifier: int,
    sequence_number: int,
    payload: bytes,
) -> int:
    """The Internet checksum of an ICMP header and payload."""
    payload = bytes(payload)
    total = ((icmp_type << 8) | code) + identifier + sequence_number
    even = len(payload) - len(payload) % 2
    total += sum(struct.unpack(f">{even // 2}H", payload[:even]))
    if len(payload) % 2:
        total += payload[-1] << 8
    total = (total >> 16) + (total & 0xFFFF)
    total += total >> 16
    return ~total & 0xFFFF


def build_echo_request(identifier: int, sequence_number: int, payload: bytes) -> bytes:
    """An ICMP echo request message carrying ``payload``."""
    checksum = compute_checksum(ECHO_REQUEST, 0, identifier, sequence_number, payload)
    header = _HEADER.pack(ECHO_REQUEST, 0, checksum, identifier, sequence_number)
    return header + bytes(payload)


def parse_echo_reply(packet: bytes) -> EchoReply | None:
    """Parse an IPv4 packet holding an echo reply; ``None`` if it holds none."""
    packet = bytes(packet)
    if len(packet) < _IP_HEADER_SIZE + _HEADER.size:
        return None
    icmp_type, _, _, identifier, sequence_number = _HEADER.unpack_from(
        packet, _IP_HEADER_SIZE
    )
    if icmp_type != ECHO_REPLY:
        return None
    return EchoReply(
        identifier, sequence_number, packet[_IP_HEADER_SIZE + _HEADER.size:]
    )


class IcmpClient:
    """Sends echo requests and matches replies by sequence number.

    By default a raw IPv4 ICMP socket is opened, which needs privileges.
    ``request`` must be awaited on one event loop.
    """

    def __init__(
        self,
        timeout: float = 2.0,
        receive_buffer_size: int = 2048,
        sock: socket.socket | None = None,
    ) -> None:
        if sock is None:
            sock = socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
        sock.setblocking(False)
        self._sock = sock
        self._timeout = timeout
        self._receive_buffer_size = receive_buffer_size
        self._identifier = os.getpid() & 0xFFFF
        self._next_sequence_number = 0
        self._operations: dict[int, asyncio.Future[bytes]] = {}
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def identifier(self) -> int:
        """The identifier placed in every request."""
        return self._identifier

    async def request(self, address: str | tuple[str, int], payload: bytes) -> bytes:
        """Ping ``address`` and return the reply payload.

        ``address`` is a host, or a ``(host, port)`` pair for sockets that
        take ports. Raises :class:`TimeoutError` when no reply arrives in time.
        """
        loop = asyncio.get_running_loop()
        if self._loop is None:
            self._loop = loop
            loop.add_reader(self._sock.fileno(), self._receive)
        sequence_number = self._next_sequence_number
        if sequence_number in self._operations:
            raise OSError(errno.ENOBUFS, os.strerror(errno.ENOBUFS))
        self._next_sequence_number = (sequence_number + 1) & 0xFFFF
        destination = (address, 0) if isinstance(address, str) else tuple(address)
        future: asyncio.Future[bytes] = loop.create_future()
        self._operations[sequence_number] = future
        try:
            self._sock.sendto(
                build_echo_request(self._identifier, sequence_number, payload),
                destination,
            )
            return await asyncio.wait_for(future, self._timeout)
        except asyncio.TimeoutError:
            raise TimeoutError(f"no echo reply from {address}") from None
        finally:
            self._operations.pop(sequence_number, None)

    def _receive(self) -> None:
        try:
            packet = self._sock.recv(self._receive_buffer_size)
        except OSError:
            return
        reply = parse_echo_reply(packet)
        if reply is None or reply.identifier != self._identifier:
            return
        future = self._operations.get(reply.sequence_number)
        if future is not None and not future.done():
            future.set_result(reply.payload)

    def close(self) -> None:
        """Stop receiving, cancel outstanding requests and close the socket."""
        if self._loop is not None and not self._sock._closed:
            self._loop.remove_reader(self._sock.fileno())
        self._loop = None
        for future in self._operations.values():
            if not future.done():
                future.cancel()
        self._sock.close()