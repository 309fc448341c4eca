"""
IPv4 CIDR ranges.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from netaddr import IPAddress

from netrange.ranges.base import BaseNetRange
from netrange.ranges.width import IPV4_WIDTH


# RFC 1918
PRIVATE_RANGES_V4 = (
    "10.0.0.0/8",
    "172.16.0.0/12",
    "192.168.0.0/16",
)

LOOPBACK_RANGE_V4 = "127.0.0.0/8"


class NetRangeV4(BaseNetRange):
    """An IPv4 CIDR block, e.g. NetRangeV4("192.168.1.0/24")."""
    width = IPV4_WIDTH

    @property
    def broadcast_address(self) -> IPAddress:
        """Same as last_address; IPv4 calls it the broadcast address."""
        return self.last_address

    @property
    def is_private_range(self) -> bool:
        """True if the network address is in RFC 1918 space."""
        return any(self._in_block(block) for block in _PRIVATE_BLOCKS)

    @property
    def is_loopback(self) -> bool:
        return self._in_block(_LOOPBACK_BLOCK)


_PRIVATE_BLOCKS = tuple(NetRangeV4(cidr) for cidr in PRIVATE_RANGES_V4)
_LOOPBACK_BLOCK = NetRangeV4(LOOPBACK_RANGE_V4)
