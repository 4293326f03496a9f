"""Tests for the compact binary reader and writer."""

import pytest

from ethereum_ids.codec import BinaryReader, BinaryWriter
from ethereum_ids.runtime.errors import ErrorCode, InvalidLengthError, UnmarshalError


class TestBinaryWriter:
    """Test BinaryWriter fields."""

    @pytest.mark.parametrize("value, expected_hex", [
        (0, "00"),
        (1, "01"),
        (127, "7f"),
        (128, "8001"),
        (256, "8002"),
        (300, "ac02"),
    ])
    def test_uvarint(self, value, expected_hex):
        """Test ULEB128 encoding."""
        writer = BinaryWriter()
        writer.uvarint(value)
        assert writer.to_bytes().hex() == expected_hex

    def test_uvarint_negative(self):
        """Test that negative varints are rejected."""
        with pytest.raises(ValueError):
            BinaryWriter().uvarint(-1)

    def test_fixed_bytes_have_no_prefix(self):
        """Test that fixed_bytes writes exactly what it is given."""
        writer = BinaryWriter()
        writer.fixed_bytes(b"\xaa" * 20, 20)
        assert writer.to_bytes() == b"\xaa" * 20
        assert len(writer) == 20

    @pytest.mark.parametrize("size", [19, 21])
    def test_fixed_bytes_width_mismatch(self, size):
        """Test that a declared width is enforced and nothing is written."""
        writer = BinaryWriter()
        with pytest.raises(InvalidLengthError):
            writer.fixed_bytes(bytes(size), 20)
        assert len(writer) == 0

    def test_len_prefixed_bytes(self):
        """Test length-prefixed bytes."""
        writer = BinaryWriter()
        writer.len_prefixed_bytes(b"memo")
        assert writer.to_bytes() == b"\x04memo"


class TestBinaryReader:
    """Test BinaryReader fields and overflow handling."""

    def test_reads_written_fields(self):
        """Test reading back a mixed record."""
        writer = BinaryWriter()
        writer.uvarint(300)
        writer.fixed_bytes(b"\x01\x02\x03")
        writer.len_prefixed_bytes(b"memo")
        reader = BinaryReader(writer.to_bytes())

        assert reader.uvarint() == 300
        assert reader.fixed_bytes(3) == b"\x01\x02\x03"
        assert reader.len_prefixed_bytes() == b"memo"
        assert reader.eof
        assert reader.remaining == 0

    def test_fixed_bytes_overflow_does_not_advance(self):
        """Test that a short read raises and leaves the cursor in place."""
        reader = BinaryReader(b"\x01\x02\x03")
        with pytest.raises(UnmarshalError) as exc_info:
            reader.fixed_bytes(4)
        assert exc_info.value.code == ErrorCode.UNMARSHAL_ERROR
        assert exc_info.value.details["available"] == 3
        assert reader.remaining == 3
        assert reader.fixed_bytes(3) == b"\x01\x02\x03"

    def test_truncated_varint(self):
        """Test that a varint missing its final byte raises and does not advance."""
        reader = BinaryReader(b"\x80\x80")
        with pytest.raises(UnmarshalError):
            reader.uvarint()
        assert reader.remaining == 2

    def test_truncated_len_prefixed_bytes(self):
        """Test that a length prefix promising more than available raises and rewinds."""
        reader = BinaryReader(b"\x05ab")
        with pytest.raises(UnmarshalError):
            reader.len_prefixed_bytes()
        assert reader.remaining == 3

    def test_read_at_end(self):
        """Test reading past the end of an empty buffer."""
        reader = BinaryReader(b"")
        assert reader.eof
        with pytest.raises(UnmarshalError):
            reader.fixed_bytes(1)
        with pytest.raises(UnmarshalError):
            reader.uvarint()
