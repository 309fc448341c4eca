"""
Shared CIDR range implementation.

BaseNetRange holds the whole range algorithm; the concrete IPv4 and IPv6
types only pick an AddressWidth and add family-specific predicates.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, ClassVar

from netaddr import IPAddress

from netrange.exceptions import (
    InvalidSubdivisionError,
    MalformedInputError,
    NetRangeError,
    NullInputError,
    WrongAddressFamilyError,
)
from netrange.ranges.interface import NetRangeInterface
from netrange.ranges.width import AddressWidth, coerce_address, require_int

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r"[+-]?\d+", re.ASCII)


def split_cidr(cidr: Any) -> tuple[str, int]:
    """Split "<address>/<prefix>" into its address text and prefix length.

    Only the shape is checked here; the address itself and the prefix
    bounds are validated by the range type.

    Raises:
        NullInputError: cidr is None
        MalformedInputError: anything that is not exactly one address,
            one slash and an integer prefix
    """
    if cidr is None:
        raise NullInputError("CIDR string must not be None")
    if not isinstance(cidr, str):
        raise MalformedInputError(f"CIDR must be a string, got {type(cidr).__name__}")
    if not cidr.strip():
        raise MalformedInputError("CIDR string is empty")

    parts = cidr.split("/")
    if len(parts) != 2:
        raise MalformedInputError(f"{cidr!r} is not in <address>/<prefix> form")

    address, prefix = parts
    if not address:
        raise MalformedInputError(f"{cidr!r} has no address part")
    if not _PREFIX_RE.fullmatch(prefix):
        raise MalformedInputError(f"{cidr!r} has a non-numeric prefix length")

    try:
        prefix_length = int(prefix)
    except ValueError:
        # more digits than int() will convert
        raise MalformedInputError(f"{cidr[:64]!r}... has an unreadable prefix length") from None
    return address, prefix_length


@dataclass(frozen=True, order=True, init=False, repr=False)
class BaseNetRange(NetRangeInterface):
    """A CIDR block over a fixed-width unsigned integer domain.

    Not instantiated directly; subclasses set ``width``. Equality, hashing
    and ordering use (network_value, prefix_length) only.

    Usage:
        rng = NetRangeV4("192.168.1.0/24")
        rng.contains("192.168.1.7")       # True
        list(rng.get_subnets(26))         # four /26 ranges
    """
    width: ClassVar[AddressWidth]

    network_value: int
    prefix_length: int
    last_value: int = field(compare=False)

    def __new__(cls, *args: Any, **kwargs: Any) -> "BaseNetRange":
        if not hasattr(cls, "width"):
            raise TypeError(f"{cls.__name__} has no address width; use NetRangeV4 or NetRangeV6")
        return super().__new__(cls)

    def __init__(self, cidr: str) -> None:
        address, prefix_length = split_cidr(cidr)
        self._assign(address, prefix_length)

    # ==========================================================================
    # Construction
    # ==========================================================================

    @classmethod
    def parse(cls, cidr: str) -> "BaseNetRange":
        """Parse CIDR notation, raising NetRangeError on bad input."""
        return cls(cidr)

    @classmethod
    def try_parse(cls, cidr: Any) -> tuple[bool, "BaseNetRange | None"]:
        """Parse CIDR notation without raising.

        Returns:
            (True, range) on success, (False, None) for any invalid input
        """
        try:
            return True, cls(cidr)
        except NetRangeError:
            return False, None

    @classmethod
    def from_address(cls, address: Any, prefix_length: int) -> "BaseNetRange":
        """Build the range of prefix_length that contains address.

        Host bits of address are cleared, so 10.0.0.5 with 24 gives
        10.0.0.0/24.

        Args:
            address: netaddr.IPAddress, address text or packed bytes
            prefix_length: 0 to the family's bit width

        Raises:
            NullInputError: address or prefix_length is None
            WrongAddressFamilyError: address of the other IP version
            PrefixOutOfRangeError: prefix_length out of bounds
        """
        rng = cls.__new__(cls)
        rng._assign(address, prefix_length)
        return rng

    @classmethod
    def _from_value(cls, value: int, prefix_length: int) -> "BaseNetRange":
        rng = cls.__new__(cls)
        rng._assign_value(value, prefix_length)
        return rng

    def _assign(self, address: Any, prefix_length: Any) -> None:
        value = self.width.address_value(address)
        self._assign_value(value, self.width.check_prefix(prefix_length))

    def _assign_value(self, value: int, prefix_length: int) -> None:
        mask = self.width.mask(prefix_length)
        network_value = value & mask
        object.__setattr__(self, "network_value", network_value)
        object.__setattr__(self, "prefix_length", prefix_length)
        object.__setattr__(self, "last_value", network_value | (self.width.all_ones ^ mask))

    # ==========================================================================
    # Derived values
    # ==========================================================================

    @property
    def version(self) -> int:
        return self.width.version

    @cached_property
    def network_address(self) -> IPAddress:
        return self.width.to_address(self.network_value)

    @property
    def netmask(self) -> IPAddress:
        return self.width.to_address(self.width.mask(self.prefix_length))

    @property
    def hostmask(self) -> IPAddress:
        return self.width.to_address(self.width.hostmask(self.prefix_length))

    @property
    def first_usable_address(self) -> IPAddress:
        # /31 and /32 (/127 and /128) have no reserved network address
        if self.prefix_length >= self.width.bits - 1:
            return self.network_address
        return self.width.to_address(self.network_value + 1)

    @property
    def last_usable_address(self) -> IPAddress:
        if self.prefix_length >= self.width.bits - 1:
            return self.network_address
        return self.width.to_address(self.last_value - 1)

    @property
    def last_address(self) -> IPAddress:
        return self.width.to_address(self.last_value)

    @property
    def total_addresses(self) -> int:
        return self.width.block_size(self.prefix_length)

    @property
    def is_host(self) -> bool:
        return self.prefix_length == self.width.bits

    # ==========================================================================
    # Relations
    # ==========================================================================

    def contains(self, address: Any) -> bool:
        ip = coerce_address(address)
        if ip.version != self.width.version:
            return False
        return self._contains_value(int(ip))

    def __contains__(self, address: Any) -> bool:
        return self.contains(address)

    def _contains_value(self, value: int) -> bool:
        return self.network_value <= value <= self.last_value

    def _in_block(self, block: "BaseNetRange") -> bool:
        """True if the network address falls inside a well-known block."""
        return block._contains_value(self.network_value)

    def _check_peer(self, other: Any) -> "BaseNetRange":
        if other is None:
            raise NullInputError("range must not be None")
        if not isinstance(other, BaseNetRange):
            raise TypeError(f"expected a network range, got {type(other).__name__}")
        if other.width.version != self.width.version:
            raise WrongAddressFamilyError(
                f"cannot relate IPv{self.version} range {self} to IPv{other.version} range {other}"
            )
        return other

    def overlaps_with(self, other: "BaseNetRange") -> bool:
        other = self._check_peer(other)
        return self.network_value <= other.last_value and self.last_value >= other.network_value

    def is_subnet_of(self, other: "BaseNetRange") -> bool:
        other = self._check_peer(other)
        return self.network_value >= other.network_value and self.last_value <= other.last_value

    def is_supernet_of(self, other: "BaseNetRange") -> bool:
        return self._check_peer(other).is_subnet_of(self)

    def compare_to(self, other: "BaseNetRange") -> int:
        other = self._check_peer(other)
        mine = (self.network_value, self.prefix_length)
        theirs = (other.network_value, other.prefix_length)
        return (mine > theirs) - (mine < theirs)

    # ==========================================================================
    # Derivation
    # ==========================================================================

    def get_subnets(self, new_prefix_length: int) -> "SubnetSequence":
        """Split the range into equal subnets.

        Validation happens here, before anything is produced.

        Args:
            new_prefix_length: Greater than the current prefix length and
                at most the address width

        Returns:
            SubnetSequence that can be iterated any number of times

        Raises:
            InvalidSubdivisionError: prefix not in (current, width], or the
                split would exceed the family's subnet ceiling
        """
        new_prefix_length = require_int(new_prefix_length, "new prefix length")
        bits = self.width.bits
        if not self.prefix_length < new_prefix_length <= bits:
            raise InvalidSubdivisionError(
                f"new prefix length must be greater than {self.prefix_length} "
                f"and at most {bits}, got {new_prefix_length}"
            )

        delta = new_prefix_length - self.prefix_length
        ceiling = self.width.max_subnet_delta
        if ceiling is not None and delta > ceiling:
            raise InvalidSubdivisionError(
                f"splitting {self} into /{new_prefix_length} would produce 2**{delta} "
                f"subnets, at most 2**{ceiling} are allowed"
            )

        logger.debug("Splitting %s into 2**%d /%d subnets", self, delta, new_prefix_length)
        return SubnetSequence(self, new_prefix_length)

    def get_supernet(self, new_prefix_length: int) -> "BaseNetRange":
        """Return the enclosing range with a shorter prefix.

        Raises:
            InvalidSubdivisionError: prefix not in [0, current)
        """
        new_prefix_length = require_int(new_prefix_length, "new prefix length")
        if not 0 <= new_prefix_length < self.prefix_length:
            raise InvalidSubdivisionError(
                f"new prefix length must be at least 0 and less than "
                f"{self.prefix_length}, got {new_prefix_length}"
            )
        return self._from_value(self.network_value, new_prefix_length)

    # ==========================================================================
    # Text
    # ==========================================================================

    def __str__(self) -> str:
        return f"{self.network_address}/{self.prefix_length}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"


@dataclass(frozen=True)
class SubnetSequence:
    """Lazy, restartable sequence of equal-sized subnets of a range."""
    parent: BaseNetRange
    prefix_length: int

    @property
    def count(self) -> int:
        return 1 << (self.prefix_length - self.parent.prefix_length)

    def __iter__(self) -> Iterator[BaseNetRange]:
        parent = self.parent
        width = parent.width
        step = width.block_size(self.prefix_length)
        position = parent.network_value

        while position <= parent.last_value:
            yield parent._from_value(position, self.prefix_length)
            # Last block of the address space, nothing follows it
            if not width.can_advance(position, step):
                break
            position += step
