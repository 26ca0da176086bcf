"""A cuckoo filter with 32-bit entries, four entries per bucket."""

from __future__ import annotations

import argparse
import random
from array import array

__all__ = ["HashFilter32", "main"]

_ENTRIES_PER_BUCKET = 4
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class HashFilter32:
    """Approximate set membership of 64-bit fingerprints.

    ``num_buckets`` must be a power of two.
    """

    def __init__(self, num_buckets: int) -> None:
        if num_buckets <= 0 or num_buckets & (num_buckets - 1):
            raise ValueError("num_buckets must be a power of two")
        self._mask = num_buckets - 1
        self._entries = array("I", bytes(4 * _ENTRIES_PER_BUCKET * num_buckets))
        self._size = 0
        self._random = random.Random()

    def clear(self) -> None:
        """Remove every entry."""
        self._entries = array("I", bytes(4 * len(self._entries)))
        self._size = 0

    @staticmethod
    def _split(fingerprint: int) -> tuple[int, int]:
        fingerprint &= _MASK64
        fp32 = fingerprint & _MASK32
        if not fp32:
            fp32 = ((fingerprint >> 32) | 1) & _MASK32
        return fp32, fingerprint >> 32

    def _add(self, fp32: int, index: int) -> bool:
        base = index * _ENTRIES_PER_BUCKET
        for slot in range(base, base + _ENTRIES_PER_BUCKET):
            if not self._entries[slot]:
                self._entries[slot] = fp32
                return True
        return False

    def _contains(self, fp32: int, index: int) -> bool:
        base = index * _ENTRIES_PER_BUCKET
        return fp32 in self._entries[base:base + _ENTRIES_PER_BUCKET]

    def insert(self, fingerprint: int) -> bool:
        """Insert ``fingerprint``; return ``False`` when the filter is too full."""
        fp32, high = self._split(fingerprint)
        index = high & self._mask
        if self._add(fp32, index):
            self._size += 1
            return True
        index ^= fp32 & self._mask
        if self._add(fp32, index):
            self._size += 1
            return True
        for _ in range(16):
            seed = self._random.getrandbits(64)
            for _ in range(32):
                slot = index * _ENTRIES_PER_BUCKET + (seed & 3)
                seed >>= 2
                fp32, self._entries[slot] = self._entries[slot], fp32
                index ^= fp32 & self._mask
                if self._add(fp32, index):
                    self._size += 1
                    return True
        return False

    def test(self, fingerprint: int) -> bool:
        """Whether ``fingerprint`` may have been inserted."""
        fp32, high = self._split(fingerprint)
        index = high & self._mask
        return self._contains(fp32, index) or self._contains(
            fp32, index ^ (fp32 & self._mask)
        )

    def __len__(self) -> int:
        return self._size


def main(argv: list[str] | None = None) -> int:
    """Print insertion and false positive statistics for a filled filter."""
    parser = argparse.ArgumentParser(description="Hash filter statistics.")
    parser.add_argument("--buckets", type=int, default=262144)
    parser.add_argument("--inserts", type=int, default=950000)
    parser.add_argument("--probes", type=int, default=10000000)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    gen = random.Random(args.seed)
    filter_ = HashFilter32(args.buckets)
    fingerprints = [gen.getrandbits(64) for _ in range(args.inserts)]
    for fingerprint in fingerprints:
        filter_.insert(fingerprint)
    print(f"inserted {len(filter_)}")

    true_positives = sum(1 for fp in fingerprints if filter_.test(fp))
    print(f"true positives {true_positives}")
    print(f"false negatives {len(fingerprints) - true_positives}")

    false_positives = sum(
        1 for _ in range(args.probes) if filter_.test(gen.getrandbits(64))
    )
    print(f"false positives {false_positives}")
    print(f"true negatives {args.probes - false_positives}")
    return 0