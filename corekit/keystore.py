"""A collection of keys indexed by fingerprint."""

from __future__ import annotations

from corekit.key import Key

__all__ = ["Keystore"]


class Keystore:
    """Holds distinct keys, several of which may share a fingerprint."""

    def __init__(self) -> None:
        self._keys: dict[int, list[Key]] = {}

    def add(self, key: Key) -> None:
        """Add ``key`` unless an equal key is already held."""
        keys = self._keys.setdefault(key.fingerprint, [])
        if key not in keys:
            keys.append(key)

    def find(self, fingerprint: int) -> list[Key]:
        """Return the keys with ``fingerprint``, in the order they were added."""
        return list(self._keys.get(fingerprint, ()))