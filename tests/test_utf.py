from corekit.utf import utf8_length, utf8_to_utf16, utf16_to_utf8, utf16_to_utf8_size

UTF16 = "\u3053\u3093\u306b\u3061\u306f\u3001\u4e16\u754c"
UTF8 = (
    b"\xe3\x81\x93\xe3\x82\x93\xe3\x81\xab\xe3\x81\xa1\xe3\x81\xaf\xe3\x80\x81"
    b"\xe4\xb8\x96\xe7\x95\x8c"
)


def test_utf16_to_utf8():
    assert utf16_to_utf8("hello world") == b"hello world"
    assert utf16_to_utf8(UTF16) == UTF8


def test_utf8_to_utf16():
    assert utf8_to_utf16(b"hello world") == "hello world"
    assert utf8_to_utf16(UTF8) == UTF16


def test_sizes():
    assert utf16_to_utf8_size(UTF16) == len(UTF8)
    assert utf8_length(UTF8) == len(UTF16)


def test_two_byte_round_trip():
    text = "caf\u00e9 \u00fc"
    assert utf16_to_utf8(text) == text.encode("utf-8")
    assert utf8_to_utf16(utf16_to_utf8(text)) == text


def test_four_byte_sequence_is_replaced():
    assert utf8_to_utf16("\U0001F600".encode("utf-8")) == "\ufffd"


def test_truncated_sequence_is_dropped():
    assert utf8_to_utf16(b"a\xe3\x81") == "a"
    assert utf8_length(b"a\xe3\x81") == 1