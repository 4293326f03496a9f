"""Tests for strict hex decoding and lowercase encoding."""

import pytest

from ethereum_ids.codec import hexcodec
from ethereum_ids.runtime.errors import InvalidLengthError, InvalidCharacterError


class TestDecode:
    """Test hexcodec.decode."""

    def test_decode_with_lowercase_prefix(self):
        """Test decoding 0x-prefixed text."""
        assert hexcodec.decode("0x00ff10", 3) == b"\x00\xff\x10"

    def test_decode_with_uppercase_prefix(self):
        """Test decoding 0X-prefixed text."""
        assert hexcodec.decode("0X00ff10", 3) == b"\x00\xff\x10"

    def test_decode_without_prefix(self):
        """Test that the prefix is optional."""
        assert hexcodec.decode("00ff10", 3) == b"\x00\xff\x10"

    def test_decode_mixed_case_digits(self):
        """Test that decoding itself ignores letter case."""
        assert hexcodec.decode("0xAbCdEf", 3) == b"\xab\xcd\xef"

    @pytest.mark.parametrize("text", ["0x00ff1", "0x00ff1000", "0x", "", "00"])
    def test_decode_wrong_length(self, text):
        """Test that any digit count other than 2*length is rejected."""
        with pytest.raises(InvalidLengthError) as exc_info:
            hexcodec.decode(text, 3)
        assert exc_info.value.expected == 6
        assert exc_info.value.actual == len(hexcodec.strip_prefix(text))

    def test_decode_invalid_character_position(self):
        """Test that the position is counted among the digits, after the prefix."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            hexcodec.decode("0x00fg10", 3)
        assert exc_info.value.position == 3
        assert exc_info.value.character == "g"

    def test_decode_reports_first_invalid_character(self):
        """Test that only the first offending character is reported."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            hexcodec.decode("z0xx00", 3)
        assert exc_info.value.position == 0

    @pytest.mark.parametrize("char", [" ", "_", "+", "-", "٠"])
    def test_decode_rejects_characters_fromhex_tolerates(self, char):
        """Test that whitespace, underscores, signs and non-ASCII digits are rejected."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            hexcodec.decode("00" + char + "f10", 3)
        assert exc_info.value.position == 2

    def test_length_checked_before_characters(self):
        """Test that a short, malformed string reports its length."""
        with pytest.raises(InvalidLengthError):
            hexcodec.decode("0xzz", 3)

    def test_decode_rejects_non_string(self):
        """Test that bytes input is a type error, not a decode error."""
        with pytest.raises(TypeError):
            hexcodec.decode(b"0x00ff10", 3)


class TestEncode:
    """Test hexcodec.encode_lower and prefix helpers."""

    def test_encode_lower(self):
        """Test lowercase 0x-prefixed output."""
        assert hexcodec.encode_lower(b"\xab\xcd\x01") == "0xabcd01"

    def test_encode_lower_length(self):
        """Test output is exactly 2*N digits after the prefix."""
        text = hexcodec.encode_lower(bytes(20))
        assert text == "0x" + "0" * 40

    def test_encode_then_decode(self):
        """Test that decoding the encoded form returns the input."""
        data = bytes(range(20))
        assert hexcodec.decode(hexcodec.encode_lower(data), 20) == data

    @pytest.mark.parametrize("text, expected", [
        ("0xabc", "abc"),
        ("0Xabc", "abc"),
        ("abc", "abc"),
        ("x0abc", "x0abc"),
        ("", ""),
    ])
    def test_strip_prefix(self, text, expected):
        """Test prefix stripping."""
        assert hexcodec.strip_prefix(text) == expected

    def test_has_prefix(self):
        """Test prefix detection."""
        assert hexcodec.has_prefix("0x12")
        assert hexcodec.has_prefix("0X12")
        assert not hexcodec.has_prefix("12")
        assert not hexcodec.has_prefix("0")
