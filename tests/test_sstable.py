import struct

import pytest

from corekit.memory_file import MemoryFile
from corekit.sstable import (
    EndOfTableError,
    SSTable,
    SSTableBuilder,
    SSTableError,
    SSTableIterator,
)


def _build_hundred() -> MemoryFile:
    file = MemoryFile()
    builder = SSTableBuilder(file, block_size=64, flush_size=512)
    for i in range(1, 101):
        builder.add(f"k{i:03d}", f"v{i:03d}")
    builder.finish()
    return file


def test_lookup_all_keys():
    sstable = SSTable(_build_hundred())
    for i in range(1, 101):
        assert sstable.lookup(f"k{i:03d}") == f"v{i:03d}".encode()


def test_iterate():
    sstable = SSTable(_build_hundred())
    iterator = SSTableIterator(sstable)
    with pytest.raises(SSTableError):
        iterator.next()
    iterator.start()
    for i in range(1, 100):
        assert iterator.key() == f"k{i:03d}".encode()
        assert iterator.value() == f"v{i:03d}".encode()
        iterator.next()
    assert iterator.key() == b"k100"
    assert iterator.value() == b"v100"
    with pytest.raises(EndOfTableError):
        iterator.next()


def test_seek():
    sstable = SSTable(_build_hundred())
    for i in range(100):
        iterator = sstable.iterator()
        iterator.seek(f"k{i:03d}a")
        assert iterator.key() == f"k{i + 1:03d}".encode()
        assert iterator.value() == f"v{i + 1:03d}".encode()
    with pytest.raises(EndOfTableError):
        sstable.iterator().seek("k100a")


def test_iter_yields_pairs():
    sstable = SSTable(_build_hundred())
    pairs = list(sstable)
    assert len(pairs) == 100
    assert pairs[0] == (b"k001", b"v001")
    assert pairs[-1] == (b"k100", b"v100")
    assert [k for k, _ in pairs] == sorted(k for k, _ in pairs)


def test_lookup_missing_key():
    sstable = SSTable(_build_hundred())
    with pytest.raises(KeyError):
        sstable.lookup("k050a")
    with pytest.raises(KeyError):
        sstable.lookup("z")


def test_empty():
    file = MemoryFile()
    SSTableBuilder(file).finish()
    sstable = SSTable(file)
    with pytest.raises(KeyError):
        sstable.lookup("k42")
    iterator = SSTableIterator(sstable)
    with pytest.raises(EndOfTableError):
        iterator.start()
    with pytest.raises(SSTableError):
        iterator.next()
    assert list(sstable) == []


def test_single_entry_layout():
    file = MemoryFile()
    builder = SSTableBuilder(file)
    builder.add(b"k", b"v")
    builder.finish()
    expected = (
        b"\x01\x00\x00\x00\x01\x00\x00\x00kv"
        + b"\x00" * 8
        + b"\x0a\x00\x00\x00"
        + b"\x01\x00\x00\x00"
        + b"k"
        + b"\x01\x00\x00\x00\x01\x00\x00\x00"
    )
    assert bytes(file.content) == expected
    assert SSTable(file).lookup(b"k") == b"v"


def test_flush_writes_before_finish():
    file = MemoryFile()
    builder = SSTableBuilder(file, flush_size=1)
    builder.add(b"k", b"v")
    assert bytes(file.content) == b"\x01\x00\x00\x00\x01\x00\x00\x00kv"


def test_file_too_small():
    with pytest.raises(SSTableError):
        SSTable(MemoryFile(b"abc"))


def test_index_larger_than_file():
    with pytest.raises(SSTableError):
        SSTable(MemoryFile(struct.pack("<ii", 5, 0)))


def test_bad_block_size():
    content = struct.pack("<qii", 0, 0, 0) + struct.pack("<ii", 1, 0)
    with pytest.raises(SSTableError):
        SSTable(MemoryFile(content))