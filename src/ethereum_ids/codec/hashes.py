"""
Hash Functions

Keccak-256 as used by Ethereum. This is the original Keccak submission,
not the padded FIPS-202 SHA3-256, so hashlib.sha3_256 is not a substitute.
"""

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    """
    Compute Keccak-256 hash (Ethereum's hash function).

    Args:
        data: Input data to hash

    Returns:
        32-byte Keccak-256 hash
    """
    return keccak.new(digest_bits=256).update(data).digest()


def keccak256_hex(data: bytes) -> str:
    """Keccak-256 hash of data as 64 lowercase hex characters."""
    return keccak256(data).hex()
