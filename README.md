# corekit

Small building blocks for Python code that works close to bytes, files and
sockets.

- **Files** (`corekit.file_utils`, `corekit.memory_file`, `corekit.posix_file`)
  – an abstract `File` with `read`, `write`, `pread`, `pwrite`, `seek`, `tell`
  and `size`; errors are raised as `OSError`. `MemoryFile` keeps its bytes in
  `content`; `SharedFile` wraps a descriptor it does not own, `NativeFile`
  owns and closes one (`create`, `open`, `close`, usable with `with`), and
  `std_input()`, `std_output()`, `std_error()` return the standard streams.
  Helpers: `read_fully(file, size)`, `read_to_end(file)`, `write_all(file, data)`.
- **Buffered I/O** – `LineReader` (`corekit.line_reader`) returns lines with
  their delimiter and can be iterated; `OStream` (`corekit.stream`) buffers
  bytes or UTF-8 text and writes them to a `File` when full, on `flush()` or
  on `close()`.
- **Sorted string tables** (`corekit.sstable`) – `SSTableBuilder` writes a
  block-indexed table, `SSTable` reads it back.
- **Data structures** – `Rope` (`corekit.rope`), `HashFilter32`, a cuckoo
  filter with 32-bit entries (`corekit.hash_filter`), and `FibonacciSequence`
  (`corekit.fibonacci`).
- **Encodings** – base-128 varints (`corekit.varint`), UTF-16/UTF-8
  conversion (`corekit.utf`), leading-integer parsing with fixed-width
  wrap-around (`corekit.strings`), IP address bytes (`corekit.ip_encoding`)
  and address option values (`corekit.address_flags`).
- **Diagnostics** – `HexDumper` (`corekit.hex_dumper`) and a coloured console
  log formatter (`corekit.console_log`).
- **Security** – ChaCha20-Poly1305 `Key` objects with 64-bit fingerprints
  (`corekit.key`) and a `Keystore` that finds keys by fingerprint
  (`corekit.keystore`).
- **Timing and networking** – `TimerList` and `Timer` for many timeouts of one
  length (`corekit.timer_list`), a token-bucket `RateLimiter`
  (`corekit.rate_limiter`), an asyncio ICMP echo `IcmpClient`
  (`corekit.icmp_client`) and the wire structures of a datagram RPC protocol
  (`corekit.rpc_wire`).

## Installation

Python 3.10 or newer. The only runtime dependency is `cryptography`; the
`test` extra adds `pytest` and `pytest-asyncio`.

## Quick tour

### Sorted string tables

```python
from corekit.memory_file import MemoryFile
from corekit.sstable import SSTable, SSTableBuilder

file = MemoryFile()
builder = SSTableBuilder(file, block_size=64, flush_size=512)
for i in range(1, 101):
    builder.add(b"k%03d" % i, b"v%03d" % i)
builder.finish()

table = SSTable(file)
assert table.lookup(b"k042") == b"v042"
assert list(table)[0] == (b"k001", b"v001")

it = table.iterator()
it.seek(b"k041a")
assert it.key() == b"k042"
```

Keys must be added in ascending order; `str` keys and values are encoded as
UTF-8. `lookup` raises `KeyError` for a missing key. `SSTableIterator.start`,
`seek` and `next` raise `EndOfTableError` when there is no entry to move to,
and a malformed file raises `SSTableError`.

### Lines and streams

```python
from corekit.line_reader import LineReader
from corekit.memory_file import MemoryFile
from corekit.stream import OStream

reader = LineReader(MemoryFile(b"hello\nworld\n"))
assert list(reader) == [b"hello\n", b"world\n"]

out = MemoryFile()
with OStream(out) as stream:
    stream.write("foobar")
assert bytes(out.content) == b"foobar"
```

### Encodings

```python
from corekit.strings import consume_int32, consume_uint16
from corekit.varint import encode_varint, parse_varint
from corekit.ip_encoding import encode, decode
from ipaddress import ip_address

assert consume_int32("123456abc") == (123456, "abc")
assert consume_uint16("123456") == (57920, "")

assert encode_varint(270) == bytes([142, 2])
assert parse_varint(bytes([142, 2, 3])) == (270, b"\x03")

assert encode(ip_address("127.0.0.1")) == bytes([127, 0, 0, 1])
assert decode(bytes([127, 0, 0, 1])) == ip_address("127.0.0.1")
```

`parse_varint` and the `decode` functions raise `ValueError` on incomplete or
wrongly sized input.

### Hex dumps

```python
from corekit.hex_dumper import HexDumper
from corekit.memory_file import MemoryFile

out = MemoryFile()
HexDumper(7).dump(12, b"hello world\n", out)
# 0000000c: 6865 6c6c 6f20 77  hello w
# 00000013: 6f72 6c64 0a       orld.
```

### Keys

```python
from corekit.key import Key, DecryptionError
from corekit.keystore import Keystore

key = Key(bytes(32))
nonce = bytes(12)
sealed = key.encrypt(b"\x01\x02\x03\x04\x05", nonce)
assert len(sealed) == 5 + Key.encrypt_overhead
assert key.decrypt(sealed, nonce) == b"\x01\x02\x03\x04\x05"

store = Keystore()
store.add(key)
assert store.find(key.fingerprint) == [key]
```

`fingerprint` and `array` are properties. A ciphertext that fails
authentication raises `DecryptionError`.

### Timers and rate limiting

`TimerList(duration)` runs each scheduled callback `duration` seconds after it
was last armed; `Timer(timer_list, callback)` wraps one such callback with
`update()`, `cancel()` and context-manager support. `RateLimiter(rate,
capacity)` admits `rate` units per second with a burst of `capacity` seconds:
`acquire(size, callback)` calls back in request order, `acquire_nowait(size)`
returns whether the units were taken. Both use the running asyncio loop and
`time.monotonic` unless a `loop` and `clock` are given.

### Ping

```python
import asyncio
from corekit.icmp_client import IcmpClient

async def ping():
    client = IcmpClient(timeout=2.0)
    try:
        return await client.request("127.0.0.1", b"payload")
    finally:
        client.close()
```

By default `IcmpClient` opens a raw IPv4 ICMP socket, which needs privileges;
another socket can be passed as `sock`. A missing reply raises `TimeoutError`.
`build_echo_request`, `parse_echo_reply` and `compute_checksum` are available
on their own.

### Logging

```python
import logging
from corekit.console_log import init_logging

init_logging()
logging.getLogger(__name__).info("ready")
```

Each line carries a coloured one-letter severity, a timestamp and the source
file and line.

## Command line

```
corekit-hash-filter-stats [--buckets N] [--inserts N] [--probes N] [--seed N]
```

Fills a `HashFilter32` with random fingerprints and prints how many were
inserted and the counts of true and false positives and negatives.

## What is not included

`corekit.rpc_wire` defines the fragment `Header`, `parse_header`,
`OperationKey` and `make_nonce` of a datagram RPC protocol, but the package
has no RPC client or server that sends, retries or answers requests, and no
`host:port` endpoint type; callers who need those build them on the pieces
above.