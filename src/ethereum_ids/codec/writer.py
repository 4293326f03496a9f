"""
Binary Writer

Accumulates a compact binary encoding. Identifiers go in as fixed-width
fields: their raw bytes with no length prefix, since the width is implied
by the identifier kind.
"""

from typing import Optional

from ..runtime.errors import InvalidLengthError


class BinaryWriter:
    """Append-only buffer of fixed-width fields, ULEB128 varints and length-prefixed blobs."""

    def __init__(self):
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def fixed_bytes(self, v: bytes, width: Optional[int] = None) -> None:
        """
        Write v verbatim, without a length prefix.

        Args:
            v: Bytes to write
            width: When given, v must be exactly this many bytes

        Raises:
            InvalidLengthError: v does not match width
        """
        if width is not None and len(v) != width:
            raise InvalidLengthError(width, len(v), unit="bytes")
        self._buf += v

    def uvarint(self, v: int) -> None:
        """Write a non-negative integer as a ULEB128 varint."""
        if v < 0:
            raise ValueError("uvarint cannot be negative")
        while v >= 0x80:
            self._buf.append((v & 0x7F) | 0x80)
            v >>= 7
        self._buf.append(v)

    def len_prefixed_bytes(self, v: bytes) -> None:
        """Write a variable-width blob preceded by its uvarint length."""
        self.uvarint(len(v))
        self._buf += v

    def to_bytes(self) -> bytes:
        """Snapshot of everything written so far."""
        return bytes(self._buf)
