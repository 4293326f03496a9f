"""
Identifier Error Model

This module provides the error handling framework for ethereum_ids.
Every failure is a local input-validation outcome: nothing here is retried
and nothing is fatal to the process.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for identifier parsing and decoding."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_LENGTH = 101
    INVALID_CHARACTER = 102
    CHECKSUM_MISMATCH = 103
    MISSING_PREFIX = 104
    UNMARSHAL_ERROR = 105


class IdentifierError(ValueError):
    """
    Base class for all identifier errors.

    Derives from ValueError so that pydantic validators surface it as a
    regular validation failure.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize an identifier error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'IdentifierError':
        """Create error from dictionary representation."""
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        message = data.get("message", "Unknown error")
        details = data.get("details")
        return IdentifierError(message, code, details)


class EncodingError(IdentifierError):
    """Text or binary encoding errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidLengthError(EncodingError):
    """Digit or byte count does not match the identifier's fixed length."""

    def __init__(self, expected: int, actual: int, unit: str = "hex digits",
                 cause: Optional[Exception] = None):
        super().__init__(
            f"Expected {expected} {unit}, got {actual}",
            ErrorCode.INVALID_LENGTH,
            {"expected": expected, "actual": actual, "unit": unit},
            cause,
        )
        self.expected = expected
        self.actual = actual


class InvalidCharacterError(EncodingError):
    """Non-hex character found while decoding."""

    def __init__(self, position: int, character: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Invalid hex character {character!r} at position {position}",
            ErrorCode.INVALID_CHARACTER,
            {"position": position, "character": character},
            cause,
        )
        self.position = position
        self.character = character


class ChecksumMismatchError(EncodingError):
    """Mixed-case text whose casing does not match the EIP-55 checksum."""

    def __init__(self, text: str, expected: Optional[str] = None,
                 cause: Optional[Exception] = None):
        details = {"text": text}
        if expected is not None:
            details["expected"] = expected
        super().__init__(
            "Mixed-case text does not match its EIP-55 checksum",
            ErrorCode.CHECKSUM_MISMATCH,
            details,
            cause,
        )
        self.text = text
        self.expected = expected


class MissingPrefixError(EncodingError):
    """Text lacks the 0x prefix while strict prefix checking is enabled."""

    def __init__(self, text: str, cause: Optional[Exception] = None):
        super().__init__(
            "Text does not start with '0x'",
            ErrorCode.MISSING_PREFIX,
            {"text": text},
            cause,
        )
        self.text = text


class UnmarshalError(EncodingError):
    """Binary data unmarshaling error."""

    def __init__(self, message: str = "Unmarshal error",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.UNMARSHAL_ERROR, details, cause)


def error_from_dict(data: Dict[str, Any]) -> IdentifierError:
    """
    Rebuild the specific error type from its dictionary representation.

    Args:
        data: Dictionary produced by IdentifierError.to_dict()

    Returns:
        Appropriate error instance
    """
    try:
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
    except ValueError:
        code = ErrorCode.UNKNOWN
    details = data.get("details") or {}
    message = data.get("message", "Unknown error")

    if code == ErrorCode.INVALID_LENGTH and "expected" in details:
        return InvalidLengthError(details["expected"], details.get("actual", 0),
                                  details.get("unit", "hex digits"))
    elif code == ErrorCode.INVALID_CHARACTER and "position" in details:
        return InvalidCharacterError(details["position"], details.get("character", ""))
    elif code == ErrorCode.CHECKSUM_MISMATCH:
        return ChecksumMismatchError(details.get("text", ""), details.get("expected"))
    elif code == ErrorCode.MISSING_PREFIX:
        return MissingPrefixError(details.get("text", ""))
    elif code == ErrorCode.UNMARSHAL_ERROR:
        return UnmarshalError(message, details)
    elif code == ErrorCode.ENCODING_ERROR:
        return EncodingError(message, code, details)
    else:
        return IdentifierError(message, code, details)


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
]
