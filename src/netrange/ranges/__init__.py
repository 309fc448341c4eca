"""
CIDR range types.

Provides immutable IPv4 and IPv6 ranges with containment, overlap,
subnet/supernet relations, ordering and subdivision.
"""

from netrange.ranges.base import BaseNetRange, SubnetSequence, split_cidr
from netrange.ranges.factory import mixed_sort_key, parse_range, try_parse_range
from netrange.ranges.interface import NetRangeInterface
from netrange.ranges.v4 import NetRangeV4
from netrange.ranges.v6 import NetRangeV6
from netrange.ranges.width import IPV4_WIDTH, IPV6_WIDTH, AddressWidth, coerce_address

__all__ = [
    "AddressWidth",
    "BaseNetRange",
    "IPV4_WIDTH",
    "IPV6_WIDTH",
    "NetRangeInterface",
    "NetRangeV4",
    "NetRangeV6",
    "SubnetSequence",
    "coerce_address",
    "mixed_sort_key",
    "parse_range",
    "split_cidr",
    "try_parse_range",
]
