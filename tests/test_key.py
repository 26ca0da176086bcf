import pytest

from corekit.key import DecryptionError, Key

ZERO_NONCE = bytes(12)

VECTORS = [
    (
        b"",
        bytes([
            0x4E, 0xB9, 0x72, 0xC9, 0xA8, 0xFB, 0x3A, 0x1B,
            0x38, 0x2B, 0xB4, 0xD3, 0x6F, 0x5F, 0xFA, 0xD1,
        ]),
    ),
    (
        bytes([1, 2, 3, 4, 5]),
        bytes([
            0x9E, 0x05, 0xE4, 0xBA, 0x50, 0xFA, 0x7C, 0xDB,
            0x85, 0x24, 0xDC, 0xA5, 0x8A, 0xFC, 0xE4, 0x39,
            0x97, 0x9C, 0x7D, 0xF8, 0x10,
        ]),
    ),
]


def test_fingerprint_zero_key():
    assert Key(bytes(32)).fingerprint == 0x903DF1A0ADE0B876


def test_fingerprint_key_one():
    assert Key(bytes([1]) + bytes(31)).fingerprint == 0x9311ECE17C0AD3C5


def test_decrypt_invalid():
    key = Key(bytes(32))
    with pytest.raises(DecryptionError):
        key.decrypt(bytes(16), ZERO_NONCE)


def test_decrypt_too_short():
    with pytest.raises(DecryptionError):
        Key(bytes(32)).decrypt(b"\x01\x02", ZERO_NONCE)


@pytest.mark.parametrize("plain, crypt", VECTORS)
def test_encrypt_vector(plain, crypt):
    key = Key(bytes(32))
    output = key.encrypt(plain, ZERO_NONCE)
    assert len(output) == len(plain) + Key.encrypt_overhead
    assert output == crypt


@pytest.mark.parametrize("plain, crypt", VECTORS)
def test_decrypt_vector(plain, crypt):
    assert Key(bytes(32)).decrypt(crypt, ZERO_NONCE) == plain


def test_round_trip_with_other_nonce():
    key = Key(bytes(range(32)))
    nonce = bytes(range(12))
    assert key.decrypt(key.encrypt(b"payload", nonce), nonce) == b"payload"


def test_wrong_nonce_fails():
    key = Key(bytes(32))
    crypt = key.encrypt(b"payload", ZERO_NONCE)
    with pytest.raises(DecryptionError):
        key.decrypt(crypt, bytes([1]) + bytes(11))


def test_equality_and_array():
    assert Key(bytes(32)) == Key(bytes(32))
    assert Key(bytes(32)) != Key(bytes([1]) + bytes(31))
    assert Key(bytes(32)).array == bytes(32)
    assert hash(Key(bytes(32))) == hash(Key(bytes(32)))


def test_bad_sizes():
    with pytest.raises(ValueError):
        Key(bytes(16))
    with pytest.raises(ValueError):
        Key(bytes(32)).encrypt(b"", bytes(8))