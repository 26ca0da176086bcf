"""Symmetric keys for ChaCha20-Poly1305 authenticated encryption."""

from __future__ import annotations

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

__all__ = ["KEY_SIZE", "NONCE_SIZE", "ENCRYPT_OVERHEAD", "DecryptionError", "Key"]

KEY_SIZE = 32
NONCE_SIZE = 12
ENCRYPT_OVERHEAD = 16


class DecryptionError(ValueError):
    """The ciphertext failed authentication."""


def _compute_fingerprint(array: bytes) -> int:
    # A 16-byte ChaCha20 nonce is a 4-byte counter followed by the 12-byte nonce.
    encryptor = Cipher(algorithms.ChaCha20(array, bytes(16)), mode=None).encryptor()
    keystream = encryptor.update(bytes(8))
    return int.from_bytes(keystream, "little")


class Key:
    """A 32-byte key with a 64-bit fingerprint derived from its keystream."""

    __slots__ = ("_array", "_fingerprint", "_aead")

    encrypt_overhead = ENCRYPT_OVERHEAD

    def __init__(self, array: bytes) -> None:
        array = bytes(array)
        if len(array) != KEY_SIZE:
            raise ValueError(f"a key takes {KEY_SIZE} bytes, not {len(array)}")
        self._array = array
        self._fingerprint = _compute_fingerprint(array)
        self._aead = ChaCha20Poly1305(array)

    @staticmethod
    def _check_nonce(nonce: bytes) -> bytes:
        nonce = bytes(nonce)
        if len(nonce) != NONCE_SIZE:
            raise ValueError(f"a nonce takes {NONCE_SIZE} bytes, not {len(nonce)}")
        return nonce

    def encrypt(self, data: bytes, nonce: bytes) -> bytes:
        """Encrypt ``data``; the result is ``encrypt_overhead`` bytes longer."""
        return self._aead.encrypt(self._check_nonce(nonce), bytes(data), None)

    def decrypt(self, data: bytes, nonce: bytes) -> bytes:
        """Decrypt and authenticate ``data``; raise :class:`DecryptionError` on failure."""
        nonce = self._check_nonce(nonce)
        try:
            return self._aead.decrypt(nonce, bytes(data), None)
        except (InvalidTag, ValueError) as error:
            raise DecryptionError("ciphertext failed authentication") from error

    @property
    def fingerprint(self) -> int:
        """A 64-bit identifier of the key."""
        return self._fingerprint

    @property
    def array(self) -> bytes:
        """The raw key bytes."""
        return self._array

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._array == other._array

    def __hash__(self) -> int:
        return hash(self._array)

    def __repr__(self) -> str:
        return f"Key(fingerprint={self._fingerprint:#018x})"