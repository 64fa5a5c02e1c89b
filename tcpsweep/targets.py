from __future__ import annotations

import ipaddress
from typing import Iterator

from .errors import AddressParseError, RangeValidationError
from .models import AddressRange


def _ipv4(value: str) -> ipaddress.IPv4Address:
    try:
        return ipaddress.IPv4Address(value)
    except ValueError as e:
        raise AddressParseError(f"{value!r} is not an IPv4 address") from e


def is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def next_ipv4(value: str) -> str:
    """
    Returns the address after ``value``, carrying from the last octet
    leftwards. "255.255.255.255" has no successor and yields "".
    """
    ip = _ipv4(value)
    if int(ip) == int(ipaddress.IPv4Address("255.255.255.255")):
        return ""
    return str(ip + 1)


def parse_target(spec: str) -> AddressRange:
    """
    Supports:
      - Single IPv4: "192.168.0.1"
      - IPv4 range: "192.168.0.1:192.168.1.255" (inclusive, any alignment)
      - Single IPv6 literal or hostname, scanned as one host
    """
    spec = spec.strip()
    if not spec:
        raise AddressParseError("Empty target")

    if ":" not in spec:
        return AddressRange(spec, spec)

    # "::1" and friends are single hosts, not ranges
    try:
        ipaddress.IPv6Address(spec)
        return AddressRange(spec, spec)
    except ValueError:
        pass

    parts = spec.split(":")
    if len(parts) != 2:
        raise AddressParseError(f"Invalid target range: {spec}")
    start, end = (p.strip() for p in parts)
    if _ipv4(start) > _ipv4(end):
        raise RangeValidationError(f"Address range start {start} is after end {end}")
    return AddressRange(start, end)


def iter_addresses(addresses: AddressRange) -> Iterator[str]:
    """Yields every address of the range in ascending order, lazily."""
    if addresses.is_single:
        yield addresses.start
        return

    start = _ipv4(addresses.start)
    end = _ipv4(addresses.end)
    if start > end:
        raise RangeValidationError(
            f"Address range start {addresses.start} is after end {addresses.end}"
        )

    ip = addresses.start
    while True:
        yield ip
        ip = next_ipv4(ip)
        if not ip or not start <= _ipv4(ip) <= end:
            return
