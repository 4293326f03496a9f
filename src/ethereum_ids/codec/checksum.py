"""
EIP-55 Checksum

Mixed-case checksum encoding for hex identifiers. The case of each letter
digit is taken from the keccak-256 hash of the lowercase hex text: digit i
is uppercase when nibble i of the hash is 8 or more.

Reference: https://eips.ethereum.org/EIPS/eip-55
"""

from enum import Enum
from typing import List

from . import hexcodec
from .hashes import keccak256

# keccak-256 yields 64 nibbles, one per hex digit of a 32-byte value.
MAX_CHECKSUM_BYTES = 32


class Case(Enum):
    """Letter case of a single hex digit."""
    LOWER = "lower"
    UPPER = "upper"


def _nibble(digest: bytes, index: int) -> int:
    byte = digest[index // 2]
    return byte >> 4 if index % 2 == 0 else byte & 0x0F


def checksum_case(data: bytes) -> List[Case]:
    """
    Derive the checksum case of every hex digit of data.

    Args:
        data: Identifier bytes

    Returns:
        One Case per hex digit (2 * len(data) entries). Entries for the
        digits 0-9 are still computed but have no visible effect.

    Raises:
        ValueError: data is longer than MAX_CHECKSUM_BYTES
    """
    if len(data) > MAX_CHECKSUM_BYTES:
        raise ValueError(f"EIP-55 checksum covers at most {MAX_CHECKSUM_BYTES} bytes, got {len(data)}")
    digits = hexcodec.encode_lower(data)[len(hexcodec.PREFIX):]
    digest = keccak256(digits.encode("ascii"))
    return [Case.UPPER if _nibble(digest, i) >= 8 else Case.LOWER for i in range(len(digits))]


def apply_checksum_case(data: bytes) -> str:
    """
    Render data as canonical EIP-55 text.

    Args:
        data: Identifier bytes

    Returns:
        0x-prefixed hex with checksum casing applied
    """
    lower = hexcodec.encode_lower(data)[len(hexcodec.PREFIX):]
    cases = checksum_case(data)
    out = [c.upper() if case is Case.UPPER else c for c, case in zip(lower, cases)]
    return hexcodec.PREFIX + "".join(out)


def verify(digits: str) -> bool:
    """
    Check the letter casing of hex digits (without prefix).

    All-lowercase and all-uppercase text predate EIP-55 and are always
    accepted. Any other mix must match the checksum exactly.

    Args:
        digits: Valid hex digits, no 0x prefix

    Returns:
        True if the casing is acceptable
    """
    if digits == digits.lower() or digits == digits.upper():
        return True
    expected = apply_checksum_case(bytes.fromhex(digits))
    return digits == expected[len(hexcodec.PREFIX):]


__all__ = ["MAX_CHECKSUM_BYTES", "Case", "checksum_case", "apply_checksum_case", "verify"]
