"""
Width-dependent address arithmetic.

An AddressWidth describes one address family (bit width, IP version and
the subdivision ceiling) and carries the mask and conversion helpers that
the range types share, so the range algorithm is written once for both
32-bit and 128-bit families.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass
from typing import Any

from netaddr import AddrFormatError, IPAddress

from netrange.exceptions import (
    MalformedInputError,
    NullInputError,
    PrefixOutOfRangeError,
    WrongAddressFamilyError,
)


# Packed address length in bytes -> IP version
PACKED_LENGTHS = {4: 4, 16: 6}


def require_int(value: Any, what: str) -> int:
    """Return value if it is a real integer, otherwise raise."""
    if value is None:
        raise NullInputError(f"{what} must not be None")
    # bool is an int subclass but never a meaningful prefix
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInputError(f"{what} must be an integer, got {value!r}")
    return value


def coerce_address(address: Any) -> IPAddress:
    """Convert an address given as IPAddress, text or packed bytes.

    Args:
        address: netaddr.IPAddress, a textual IPv4/IPv6 address, or
            4/16 packed bytes in network order

    Returns:
        netaddr.IPAddress of whichever family the input belongs to

    Raises:
        NullInputError: address is None
        MalformedInputError: text or bytes that are not an address
        TypeError: any other type
    """
    if address is None:
        raise NullInputError("address must not be None")

    if isinstance(address, IPAddress):
        return address

    if isinstance(address, (bytes, bytearray)):
        version = PACKED_LENGTHS.get(len(address))
        if version is None:
            raise MalformedInputError(
                f"packed address must be 4 or 16 bytes, got {len(address)}"
            )
        return IPAddress(int.from_bytes(address, "big"), version)

    if isinstance(address, str):
        if not address.strip():
            raise MalformedInputError("address is empty")
        try:
            return IPAddress(address)
        except (AddrFormatError, ValueError, TypeError) as e:
            raise MalformedInputError(f"{address!r} is not a valid IP address") from e

    raise TypeError(f"unsupported address type: {type(address).__name__}")


@dataclass(frozen=True)
class AddressWidth:
    """Integer domain of one address family."""
    version: int
    bits: int
    max_subnet_delta: int | None = None  # Cap on new_prefix - prefix when splitting

    @property
    def all_ones(self) -> int:
        return (1 << self.bits) - 1

    def mask(self, prefix_length: int) -> int:
        """Network mask for prefix_length as an integer."""
        if prefix_length == 0:
            return 0
        return (self.all_ones << (self.bits - prefix_length)) & self.all_ones

    def hostmask(self, prefix_length: int) -> int:
        return self.all_ones ^ self.mask(prefix_length)

    def block_size(self, prefix_length: int) -> int:
        """Number of addresses in a block of prefix_length."""
        return 1 << (self.bits - prefix_length)

    def check_prefix(self, prefix_length: Any) -> int:
        prefix_length = require_int(prefix_length, "prefix length")
        if not 0 <= prefix_length <= self.bits:
            raise PrefixOutOfRangeError(
                f"IPv{self.version} prefix length must be between 0 and "
                f"{self.bits}, got {prefix_length}"
            )
        return prefix_length

    def address_value(self, address: Any) -> int:
        """Integer value of an address that must belong to this family."""
        ip = coerce_address(address)
        if ip.version != self.version:
            raise WrongAddressFamilyError(
                f"{ip} is an IPv{ip.version} address, expected IPv{self.version}"
            )
        return int(ip)

    def to_address(self, value: int) -> IPAddress:
        return IPAddress(value, self.version)

    def can_advance(self, position: int, step: int) -> bool:
        """True if position + step still fits in the domain."""
        return position <= self.all_ones - step


IPV4_WIDTH = AddressWidth(version=4, bits=32)

# 2**63 subnets is the most a single split may enumerate
IPV6_WIDTH = AddressWidth(version=6, bits=128, max_subnet_delta=63)
