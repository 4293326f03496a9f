"""Runtime helpers for ethereum_ids"""

from .errors import (
    ErrorCode,
    IdentifierError,
    EncodingError,
    InvalidLengthError,
    InvalidCharacterError,
    ChecksumMismatchError,
    MissingPrefixError,
    UnmarshalError,
    error_from_dict,
)
from .options import CodecOptions, DEFAULT_OPTIONS

__all__ = [
    "ErrorCode",
    "IdentifierError",
    "EncodingError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "ChecksumMismatchError",
    "MissingPrefixError",
    "UnmarshalError",
    "error_from_dict",
    "CodecOptions",
    "DEFAULT_OPTIONS",
]
