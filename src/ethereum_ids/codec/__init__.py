"""
Identifier Codec Module

Text and binary codecs underneath the identifier types.

Key components:
- hexcodec.py: strict hex text <-> bytes conversion
- checksum.py: EIP-55 checksum casing and verification
- hashes.py: keccak-256 primitive
- reader.py / writer.py: compact binary reader and writer
"""

from . import checksum, hexcodec
from .hashes import keccak256, keccak256_hex
from .reader import BinaryReader
from .writer import BinaryWriter

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "checksum",
    "hexcodec",
    "keccak256",
    "keccak256_hex",
]
