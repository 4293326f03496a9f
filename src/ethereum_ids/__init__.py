"""
ethereum_ids - Fixed-length Ethereum identifiers

Parsing, EIP-55 checksumming and binary/text serialization of fixed-width
binary identifiers such as the 20-byte account address.
"""

from .types import FixedLengthIdentifier, Address
from .runtime.errors import *
from .runtime.options import CodecOptions
from .codec import BinaryReader, BinaryWriter, keccak256
from .canonjson import dumps_canonical
from .serialization import (
    encode_binary, decode_binary, write_binary, read_binary, iter_binary,
    to_text, from_text, dumps_document, loads_document,
)

__version__ = "0.1.0"
__all__ = [
    "FixedLengthIdentifier",
    "Address",
    "CodecOptions",
    "BinaryReader",
    "BinaryWriter",
    "keccak256",
    "dumps_canonical",
    "encode_binary",
    "decode_binary",
    "write_binary",
    "read_binary",
    "iter_binary",
    "to_text",
    "from_text",
    "dumps_document",
    "loads_document",
    # Errors
    "ErrorCode",
    "IdentifierError",
    "EncodingError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "ChecksumMismatchError",
    "MissingPrefixError",
    "UnmarshalError",
    "error_from_dict",
]
