"""
Exceptions raised by netrange.

Every validation failure derives from NetRangeError, which is itself a
ValueError so callers that only care about "bad input" can catch that.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class NetRangeError(ValueError):
    """Base exception for range validation errors."""
    pass


class NullInputError(NetRangeError, TypeError):
    """A required argument (CIDR string, address, range) was None."""
    pass


class MalformedInputError(NetRangeError):
    """Input could not be parsed as <address>/<prefix> or as an address."""
    pass


class WrongAddressFamilyError(NetRangeError):
    """An IPv4 value was given where IPv6 is required, or vice versa."""
    pass


class PrefixOutOfRangeError(NetRangeError):
    """Prefix length outside [0, address width]."""
    pass


class InvalidSubdivisionError(NetRangeError):
    """Subnet/supernet request with a prefix moving the wrong way, or too many subnets."""
    pass
