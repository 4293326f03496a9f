"""
Binary Reader

Cursor over a compact binary buffer written by BinaryWriter. Fixed-width
fields (such as the raw bytes of an identifier) carry no length prefix;
the caller supplies the width.
"""

from ..runtime.errors import UnmarshalError


class BinaryReader:
    """
    Cursor over an immutable byte buffer.

    Every read either consumes exactly the bytes it needs or raises
    UnmarshalError and leaves the cursor where it was.
    """

    def __init__(self, buf: bytes):
        self._buf = bytes(buf)
        self._off = 0

    @property
    def eof(self) -> bool:
        """True once every byte has been consumed."""
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    def _overflow(self, what: str, offset: int, needed: int) -> UnmarshalError:
        return UnmarshalError(
            f"Buffer overflow: attempting to read {what} beyond end",
            {"offset": offset, "needed": needed, "available": len(self._buf) - offset},
        )

    def fixed_bytes(self, n: int) -> bytes:
        """Consume exactly n bytes."""
        if self._off + n > len(self._buf):
            raise self._overflow(f"{n} bytes", self._off, n)
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def uvarint(self) -> int:
        """Consume a ULEB128 varint."""
        x = 0
        shift = 0
        pos = self._off
        while pos < len(self._buf):
            b = self._buf[pos]
            pos += 1
            x |= (b & 0x7F) << shift
            if b < 0x80:
                self._off = pos
                return x
            shift += 7
        raise self._overflow("varint", self._off, pos - self._off + 1)

    def len_prefixed_bytes(self) -> bytes:
        """Consume a uvarint length followed by that many bytes."""
        start = self._off
        n = self.uvarint()
        try:
            return self.fixed_bytes(n)
        except UnmarshalError:
            self._off = start
            raise
