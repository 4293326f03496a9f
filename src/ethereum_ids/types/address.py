"""
Ethereum account address.
"""

from .fixed import FixedLengthIdentifier


class Address(FixedLengthIdentifier):
    """
    20-byte Ethereum address.

    Example:
        >>> addr = Address.parse("0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed")
        >>> str(addr)
        '0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed'
    """

    LENGTH = 20
    ZERO: "Address"

    __slots__ = ()


Address.ZERO = Address(bytes(Address.LENGTH))
