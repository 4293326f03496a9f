"""Identifier value types."""

from .fixed import FixedLengthIdentifier
from .address import Address

__all__ = ["FixedLengthIdentifier", "Address"]
