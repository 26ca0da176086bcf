from ipaddress import IPv4Address, IPv6Address, ip_address

import pytest

from corekit.address_flags import (
    parse_address,
    parse_address_v4,
    parse_address_v6,
    unparse_address,
)

IP_V4 = "172.16.254.1"
IP_V6 = "2001:db8:85a3::8a2e:370:7334"


def test_parse():
    assert parse_address("") == IPv4Address(0)
    assert parse_address(IP_V4) == ip_address(IP_V4)
    assert parse_address(IP_V6) == ip_address(IP_V6)
    with pytest.raises(ValueError) as info:
        parse_address("bad")
    assert str(info.value)


def test_parse_v4():
    assert parse_address_v4("") == IPv4Address(0)
    assert parse_address_v4(IP_V4) == IPv4Address(IP_V4)
    with pytest.raises(ValueError) as info:
        parse_address_v4(IP_V6)
    assert str(info.value)
    with pytest.raises(ValueError):
        parse_address_v4("bad")


def test_parse_v6():
    assert parse_address_v6("") == IPv6Address(0)
    with pytest.raises(ValueError) as info:
        parse_address_v6(IP_V4)
    assert str(info.value)
    assert parse_address_v6(IP_V6) == IPv6Address(IP_V6)
    with pytest.raises(ValueError):
        parse_address_v6("bad")


def test_unparse():
    assert unparse_address(parse_address("")) == "0.0.0.0"
    assert unparse_address(parse_address(IP_V4)) == IP_V4
    assert unparse_address(parse_address(IP_V6)) == IP_V6


def test_unparse_v4():
    assert unparse_address(parse_address_v4("")) == "0.0.0.0"
    assert unparse_address(parse_address_v4(IP_V4)) == IP_V4


def test_unparse_v6():
    assert unparse_address(parse_address_v6("")) == "::"
    assert unparse_address(parse_address_v6(IP_V6)) == IP_V6