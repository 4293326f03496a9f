"""
Hex Codec

Strict hex text <-> bytes conversion for fixed-length identifiers.
Decoding accepts either letter case; encoding always emits lowercase.
Case styling for output is the checksum module's job.
"""

from ..runtime.errors import InvalidLengthError, InvalidCharacterError

PREFIX = "0x"

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def has_prefix(text: str) -> bool:
    """Check whether text starts with 0x or 0X."""
    return text[:2] in ("0x", "0X")


def strip_prefix(text: str) -> str:
    """
    Return the digit substring of text.

    Args:
        text: Hex text with an optional 0x/0X prefix

    Returns:
        Text without its prefix
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    return text[2:] if has_prefix(text) else text


def decode(text: str, length: int) -> bytes:
    """
    Decode hex text into exactly `length` bytes.

    The digit count is checked before any character is examined, so a
    string that is both too short and malformed reports its length.

    Args:
        text: Hex text with an optional 0x/0X prefix
        length: Required byte length

    Returns:
        Decoded bytes

    Raises:
        InvalidLengthError: digit count is not 2 * length
        InvalidCharacterError: first non-hex character, with its index
            among the digits
    """
    digits = strip_prefix(text)
    if len(digits) != 2 * length:
        raise InvalidLengthError(2 * length, len(digits))
    for position, char in enumerate(digits):
        if char not in HEX_DIGITS:
            raise InvalidCharacterError(position, char)
    return bytes.fromhex(digits)


def encode_lower(data: bytes) -> str:
    """
    Encode bytes as 0x-prefixed lowercase hex.

    Args:
        data: Bytes to encode

    Returns:
        "0x" followed by 2 * len(data) lowercase hex digits
    """
    return PREFIX + bytes(data).hex()


__all__ = ["PREFIX", "HEX_DIGITS", "has_prefix", "strip_prefix", "decode", "encode_lower"]
