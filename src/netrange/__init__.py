"""
netrange - IPv4/IPv6 CIDR range arithmetic

Immutable CIDR range values with membership testing, overlap detection,
subnet/supernet relations, ordering and subdivision, plus a small
command-line tool for working with them.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"

from netrange.exceptions import (
    InvalidSubdivisionError,
    MalformedInputError,
    NetRangeError,
    NullInputError,
    PrefixOutOfRangeError,
    WrongAddressFamilyError,
)
from netrange.ranges import (
    NetRangeInterface,
    NetRangeV4,
    NetRangeV6,
    SubnetSequence,
    mixed_sort_key,
    parse_range,
    try_parse_range,
)

__all__ = [
    "InvalidSubdivisionError",
    "MalformedInputError",
    "NetRangeError",
    "NetRangeInterface",
    "NetRangeV4",
    "NetRangeV6",
    "NullInputError",
    "PrefixOutOfRangeError",
    "SubnetSequence",
    "WrongAddressFamilyError",
    "mixed_sort_key",
    "parse_range",
    "try_parse_range",
]
