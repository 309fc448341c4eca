"""
IPv6 CIDR ranges.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from netrange.ranges.base import BaseNetRange
from netrange.ranges.width import IPV6_WIDTH


LOOPBACK_RANGE_V6 = "::1/128"
LINK_LOCAL_RANGE_V6 = "fe80::/10"
UNIQUE_LOCAL_RANGE_V6 = "fc00::/7"  # RFC 4193


class NetRangeV6(BaseNetRange):
    """An IPv6 CIDR block, e.g. NetRangeV6("2001:db8::/32").

    get_subnets() refuses to split by more than 63 bits at once.

    Usable addresses follow the same rule as IPv4: below /127 the first and
    last addresses of the block are excluded, so last_usable_address is one
    below last_address even though IPv6 has no broadcast address.
    """
    width = IPV6_WIDTH

    @property
    def is_loopback(self) -> bool:
        return self._in_block(_LOOPBACK_BLOCK)

    @property
    def is_link_local(self) -> bool:
        return self._in_block(_LINK_LOCAL_BLOCK)

    @property
    def is_unique_local(self) -> bool:
        return self._in_block(_UNIQUE_LOCAL_BLOCK)


_LOOPBACK_BLOCK = NetRangeV6(LOOPBACK_RANGE_V6)
_LINK_LOCAL_BLOCK = NetRangeV6(LINK_LOCAL_RANGE_V6)
_UNIQUE_LOCAL_BLOCK = NetRangeV6(UNIQUE_LOCAL_RANGE_V6)
