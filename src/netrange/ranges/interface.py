"""
Abstract contract shared by the IPv4 and IPv6 range types.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from netaddr import IPAddress


class NetRangeInterface(ABC):
    """Operations every CIDR range type must provide.

    Implementations are immutable values carrying a ``prefix_length``
    attribute; all queries are pure functions of the range and their
    arguments.
    """

    # ==========================================================================
    # Addresses
    # ==========================================================================

    @property
    @abstractmethod
    def network_address(self) -> IPAddress:
        """Lowest address in the range."""
        pass

    @property
    @abstractmethod
    def first_usable_address(self) -> IPAddress:
        pass

    @property
    @abstractmethod
    def last_usable_address(self) -> IPAddress:
        pass

    @property
    @abstractmethod
    def last_address(self) -> IPAddress:
        """Highest address in the range."""
        pass

    @property
    @abstractmethod
    def total_addresses(self) -> int:
        pass

    @property
    @abstractmethod
    def is_host(self) -> bool:
        """True for a single-address range (/32 or /128)."""
        pass

    # ==========================================================================
    # Relations
    # ==========================================================================

    @abstractmethod
    def contains(self, address: Any) -> bool:
        """Check whether an address lies inside the range.

        Args:
            address: Address of either family

        Returns:
            False for an address of the other family, otherwise whether
            the address is between the network and last address inclusive
        """
        pass

    @abstractmethod
    def overlaps_with(self, other: "NetRangeInterface") -> bool:
        pass

    @abstractmethod
    def is_subnet_of(self, other: "NetRangeInterface") -> bool:
        pass

    @abstractmethod
    def is_supernet_of(self, other: "NetRangeInterface") -> bool:
        pass

    @abstractmethod
    def compare_to(self, other: "NetRangeInterface") -> int:
        """Return -1, 0 or 1 ordering by network address, then prefix length."""
        pass

    # ==========================================================================
    # Derivation
    # ==========================================================================

    @abstractmethod
    def get_subnets(self, new_prefix_length: int) -> Iterable["NetRangeInterface"]:
        """Split the range into subnets of new_prefix_length.

        Args:
            new_prefix_length: Longer prefix than the current one

        Returns:
            Restartable lazy iterable of ranges in ascending order
        """
        pass

    @abstractmethod
    def get_supernet(self, new_prefix_length: int) -> "NetRangeInterface":
        pass
