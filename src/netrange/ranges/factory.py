"""
Family-detecting helpers for callers that accept both IPv4 and IPv6.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from typing import Any

from netrange.exceptions import NetRangeError
from netrange.ranges.base import BaseNetRange, split_cidr
from netrange.ranges.v4 import NetRangeV4
from netrange.ranges.v6 import NetRangeV6
from netrange.ranges.width import coerce_address

logger = logging.getLogger(__name__)


def parse_range(cidr: str) -> NetRangeV4 | NetRangeV6:
    """Parse CIDR notation of either family.

    Args:
        cidr: "<address>/<prefix>", IPv4 or IPv6

    Returns:
        NetRangeV4 or NetRangeV6 depending on the address

    Raises:
        NetRangeError: cidr is not a valid range of either family
    """
    address, _ = split_cidr(cidr)
    version = coerce_address(address).version
    logger.debug("Detected IPv%d range %s", version, cidr)
    if version == 4:
        return NetRangeV4(cidr)
    return NetRangeV6(cidr)


def try_parse_range(cidr: Any) -> tuple[bool, NetRangeV4 | NetRangeV6 | None]:
    """Non-raising parse_range(); returns (ok, range or None)."""
    try:
        return True, parse_range(cidr)
    except NetRangeError:
        return False, None


def mixed_sort_key(rng: BaseNetRange) -> tuple[int, int, int]:
    """Sort key ordering IPv4 ranges before IPv6, then by range order."""
    return (rng.version, rng.network_value, rng.prefix_length)
