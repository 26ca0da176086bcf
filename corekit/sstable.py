"""Sorted string tables: immutable, block-indexed key/value files."""

from __future__ import annotations

import struct
from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass

from corekit.file_utils import File, write_all

__all__ = [
    "SSTableError",
    "EndOfTableError",
    "SSTable",
    "SSTableIterator",
    "SSTableBuilder",
]

MAX_BLOCK_SIZE = 16777216

_ENTRY = struct.Struct("<ii")
_BLOCK = struct.Struct("<qii")
_FOOTER = struct.Struct("<ii")


class SSTableError(Exception):
    """The table is malformed or the iterator is not on an entry."""


class EndOfTableError(SSTableError):
    """There is no further entry in the table."""


def _as_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


@dataclass(frozen=True)
class _Block:
    offset: int
    size: int


@dataclass
class _PendingBlock:
    offset: int
    size: int
    last: bytes


class SSTable:
    """A read-only view of a table stored in a file.

    The index at the end of the file is loaded on construction; entry
    blocks are read on demand.
    """

    def __init__(self, file: File) -> None:
        self._file = file
        file_size = file.size()
        if file_size < _FOOTER.size:
            raise SSTableError("file too small to hold a table footer")
        footer = file.pread(file_size - _FOOTER.size, _FOOTER.size)
        if len(footer) != _FOOTER.size:
            raise SSTableError("short read of table footer")
        num_blocks, keys_size = _FOOTER.unpack(footer)
        if num_blocks < 0 or keys_size < 0:
            raise SSTableError("negative sizes in table footer")
        index_size = num_blocks * _BLOCK.size + keys_size + _FOOTER.size
        if file_size < index_size:
            raise SSTableError("table index larger than file")
        blocks_data = file.pread(file_size - index_size, num_blocks * _BLOCK.size)
        keys_data = file.pread(file_size - (keys_size + _FOOTER.size), keys_size)
        if len(blocks_data) != num_blocks * _BLOCK.size or len(keys_data) != keys_size:
            raise SSTableError("short read of table index")

        self._blocks: list[_Block] = []
        self._keys: list[bytes] = []
        keys_offset = 0
        for offset, size, key_size in _BLOCK.iter_unpack(blocks_data):
            if size <= 0 or size > MAX_BLOCK_SIZE:
                raise SSTableError(f"bad block size {size}")
            if key_size < 0 or keys_offset + key_size > len(keys_data):
                raise SSTableError("block key outside key area")
            self._blocks.append(_Block(offset, size))
            self._keys.append(keys_data[keys_offset:keys_offset + key_size])
            keys_offset += key_size

    def lookup(self, key: bytes | str) -> bytes:
        """Return the value stored under ``key``; raise :class:`KeyError` if absent."""
        key = _as_bytes(key)
        iterator = self.iterator()
        try:
            iterator.seek(key)
        except EndOfTableError:
            raise KeyError(key) from None
        if iterator.key() != key:
            raise KeyError(key)
        return iterator.value()

    def iterator(self) -> SSTableIterator:
        """A new iterator over this table, not yet positioned."""
        return SSTableIterator(self)

    def __iter__(self) -> Iterator[tuple[bytes, bytes]]:
        iterator = self.iterator()
        try:
            iterator.start()
            while True:
                yield iterator.key(), iterator.value()
                iterator.next()
        except EndOfTableError:
            return

    def _read_block(self, index: int) -> bytes:
        block = self._blocks[index]
        data = self._file.pread(block.offset, block.size)
        if len(data) != block.size:
            raise SSTableError("short read of table block")
        return data


class SSTableIterator:
    """A cursor over the entries of an :class:`SSTable`, in key order."""

    def __init__(self, sstable: SSTable) -> None:
        self._sstable = sstable
        self._index = 0
        self._buffer = b""
        self._offset = 0

    def start(self) -> None:
        """Move to the first entry."""
        if not self._sstable._blocks:
            raise EndOfTableError("table is empty")
        self._load(0)

    def seek(self, key: bytes | str) -> None:
        """Move to the first entry whose key is not less than ``key``."""
        key = _as_bytes(key)
        index = bisect_left(self._sstable._keys, key)
        if index == len(self._sstable._keys):
            raise EndOfTableError("no key at or after the sought key")
        self._load(index)
        while self.key() < key:
            self.next()

    def next(self) -> None:
        """Move to the following entry."""
        end = self._entry_end()
        self._offset = end
        if end == len(self._buffer):
            self._index += 1
            if self._index >= len(self._sstable._blocks):
                raise EndOfTableError("end of table")
            self._load(self._index)

    def key(self) -> bytes:
        """The key of the current entry."""
        key_size, _ = self._sizes()
        start = self._offset + _ENTRY.size
        return self._buffer[start:start + key_size]

    def value(self) -> bytes:
        """The value of the current entry."""
        key_size, value_size = self._sizes()
        start = self._offset + _ENTRY.size + key_size
        return self._buffer[start:start + value_size]

    def _load(self, index: int) -> None:
        self._index = index
        self._offset = 0
        self._buffer = self._sstable._read_block(index)

    def _sizes(self) -> tuple[int, int]:
        if self._offset + _ENTRY.size > len(self._buffer):
            raise SSTableError("iterator is not on an entry")
        key_size, value_size = _ENTRY.unpack_from(self._buffer, self._offset)
        if key_size < 0 or value_size < 0:
            raise SSTableError("negative entry sizes")
        if self._offset + _ENTRY.size + key_size + value_size > len(self._buffer):
            raise SSTableError("entry extends past its block")
        return key_size, value_size

    def _entry_end(self) -> int:
        key_size, value_size = self._sizes()
        return self._offset + _ENTRY.size + key_size + value_size


class SSTableBuilder:
    """Writes a table to a file; keys must be added in ascending order."""

    def __init__(
        self,
        file: File,
        block_size: int = 4096,
        flush_size: int = 65536,
    ) -> None:
        self._file = file
        self._block_size = block_size
        self._flush_size = flush_size
        self._buffer = bytearray()
        self._blocks: list[_PendingBlock] = []

    def add(self, key: bytes | str, value: bytes | str) -> None:
        """Append an entry."""
        key = _as_bytes(key)
        value = _as_bytes(value)
        entry = _ENTRY.pack(len(key), len(value)) + key + value
        self._buffer += entry
        entry_size = len(entry)
        if not self._blocks:
            self._blocks.append(_PendingBlock(0, entry_size, key))
        elif self._blocks[-1].size + entry_size > self._block_size:
            last = self._blocks[-1]
            self._blocks.append(
                _PendingBlock(last.offset + last.size, entry_size, key)
            )
        else:
            self._blocks[-1].size += entry_size
            self._blocks[-1].last = key
        self._flush_if_full()

    def finish(self) -> None:
        """Write the block index and footer and flush everything."""
        for block in self._blocks:
            self._buffer += _BLOCK.pack(block.offset, block.size, len(block.last))
            self._flush_if_full()
        keys_size = 0
        for block in self._blocks:
            self._buffer += block.last
            self._flush_if_full()
            keys_size += len(block.last)
        self._buffer += _FOOTER.pack(len(self._blocks), keys_size)
        self._flush()

    def _flush_if_full(self) -> None:
        if len(self._buffer) >= self._flush_size:
            self._flush()

    def _flush(self) -> None:
        write_all(self._file, bytes(self._buffer))
        self._buffer.clear()