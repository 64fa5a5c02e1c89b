"""Tests for address range parsing and enumeration"""

import ipaddress

import pytest

from tcpsweep.errors import AddressParseError, RangeValidationError
from tcpsweep.models import AddressRange
from tcpsweep.targets import is_ipv4, iter_addresses, next_ipv4, parse_target


class TestNextIPv4:

    @pytest.mark.parametrize("ip, expected", [
        ("0.0.0.254", "0.0.0.255"),
        ("0.0.0.255", "0.0.1.0"),
        ("0.0.255.255", "0.1.0.0"),
        ("0.255.255.255", "1.0.0.0"),
        ("10.1.2.3", "10.1.2.4"),
        ("255.255.255.254", "255.255.255.255"),
    ])
    def test_successor_carries_left(self, ip, expected):
        assert next_ipv4(ip) == expected

    def test_last_address_has_no_successor(self):
        assert next_ipv4("255.255.255.255") == ""

    @pytest.mark.parametrize("bad", ["1.2.3", "1.2.3.x", "256.0.0.1", "example.com", "::1", ""])
    def test_malformed_address(self, bad):
        with pytest.raises(AddressParseError):
            next_ipv4(bad)

    def test_is_ipv4(self):
        assert is_ipv4("127.0.0.1")
        assert not is_ipv4("::1")
        assert not is_ipv4("localhost")


class TestParseTarget:

    def test_single_ipv4(self):
        assert parse_target("192.168.0.1") == AddressRange("192.168.0.1", "192.168.0.1")

    def test_range(self):
        r = parse_target("192.168.0.1:192.168.1.255")
        assert (r.start, r.end) == ("192.168.0.1", "192.168.1.255")
        assert not r.is_single

    def test_whitespace_is_ignored(self):
        assert parse_target("  10.0.0.1 : 10.0.0.3 ") == AddressRange("10.0.0.1", "10.0.0.3")

    @pytest.mark.parametrize("host", ["localhost", "example.com", "::1", "fe80::1"])
    def test_hostnames_and_ipv6_are_single_hosts(self, host):
        r = parse_target(host)
        assert r.is_single
        assert r.start == host

    @pytest.mark.parametrize("bad", ["", "   ", "10.0.0.1:host", "a:b", "10.0.0.1:10.0.0.2:10.0.0.3"])
    def test_invalid_target(self, bad):
        with pytest.raises(AddressParseError):
            parse_target(bad)

    def test_reversed_range(self):
        with pytest.raises(RangeValidationError):
            parse_target("10.0.0.5:10.0.0.1")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_target("10.0.0.1:nope")


class TestIterAddresses:

    def test_crosses_octet_boundary(self):
        assert list(iter_addresses(AddressRange("0.0.0.254", "0.0.1.1"))) == [
            "0.0.0.254", "0.0.0.255", "0.0.1.0", "0.0.1.1",
        ]

    def test_crosses_two_octets(self):
        got = list(iter_addresses(AddressRange("127.0.255.250", "127.1.0.5")))
        assert got[0] == "127.0.255.250"
        assert got[-1] == "127.1.0.5"
        assert len(got) == 12

    @pytest.mark.parametrize("start, end", [
        ("10.0.0.7", "10.0.0.7"),
        ("10.0.0.7", "10.0.0.8"),
        ("192.168.0.200", "192.168.2.10"),
        ("255.255.255.250", "255.255.255.255"),
        ("0.0.0.0", "0.0.0.3"),
    ])
    def test_ascending_without_gaps(self, start, end):
        got = [int(ipaddress.IPv4Address(a)) for a in iter_addresses(AddressRange(start, end))]
        first, last = int(ipaddress.IPv4Address(start)), int(ipaddress.IPv4Address(end))
        assert got == list(range(first, last + 1))

    def test_stops_at_top_of_address_space(self):
        assert list(iter_addresses(AddressRange("255.255.255.254", "255.255.255.255"))) == [
            "255.255.255.254", "255.255.255.255",
        ]

    def test_single_host_is_not_expanded(self):
        assert list(iter_addresses(AddressRange("localhost", "localhost"))) == ["localhost"]

    def test_is_lazy(self):
        it = iter_addresses(AddressRange("0.0.0.0", "255.255.255.255"))
        assert next(it) == "0.0.0.0"
        assert next(it) == "0.0.0.1"

    def test_malformed_range_bounds(self):
        with pytest.raises(AddressParseError):
            list(iter_addresses(AddressRange("10.0.0.1", "host")))

    def test_reversed_range(self):
        with pytest.raises(RangeValidationError):
            list(iter_addresses(AddressRange("10.0.0.2", "10.0.0.1")))
