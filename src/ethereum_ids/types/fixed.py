"""
Fixed-length identifier base type.

A FixedLengthIdentifier holds exactly LENGTH raw bytes. Concrete kinds are
declared by subclassing and setting LENGTH; hex decoding and EIP-55 casing
are shared by every kind.
"""

import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ..codec import checksum, hexcodec
from ..runtime.errors import (
    ChecksumMismatchError,
    IdentifierError,
    InvalidLengthError,
    MissingPrefixError,
)
from ..runtime.options import CodecOptions, resolve_options

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FixedLengthIdentifier")


class FixedLengthIdentifier:
    """
    Immutable value of exactly LENGTH bytes.

    Any byte pattern is valid. Equality and ordering are byte-wise and only
    defined between identifiers of the same kind, where kind means the exact
    class: a subclass of Address is a different kind from Address and never
    compares equal to it. Text output is always the EIP-55 checksummed form,
    whatever casing was parsed.

    Subclasses must define LENGTH as an int from 1 to 32; the checksum draws
    one hash nibble per hex digit and keccak-256 has only 64:

        class Hash32(FixedLengthIdentifier):
            LENGTH = 32
    """

    LENGTH: Optional[int] = None

    __slots__ = ("_bytes",)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        length = cls.LENGTH
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise TypeError(f"{cls.__name__}.LENGTH must be a positive int, got {length!r}")
        if length > checksum.MAX_CHECKSUM_BYTES:
            raise TypeError(
                f"{cls.__name__}.LENGTH is {length}, but the EIP-55 checksum covers at most "
                f"{checksum.MAX_CHECKSUM_BYTES} bytes"
            )

    def __init__(self, data: bytes):
        """
        Wrap raw identifier bytes.

        Args:
            data: Exactly LENGTH bytes (bytes, bytearray or memoryview)

        Raises:
            InvalidLengthError: data is not exactly LENGTH bytes long
        """
        length = type(self)._require_length()
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"{type(self).__name__} requires bytes, got {type(data).__name__}")
        raw = bytes(data)
        if len(raw) != length:
            raise InvalidLengthError(length, len(raw), unit="bytes")
        object.__setattr__(self, "_bytes", raw)

    @classmethod
    def _require_length(cls) -> int:
        if cls.LENGTH is None:
            raise TypeError(f"{cls.__name__} is abstract; subclass it and set LENGTH")
        return cls.LENGTH

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls: Type[T], data: bytes) -> T:
        """Wrap exactly LENGTH raw bytes."""
        return cls(data)

    @classmethod
    def parse(cls: Type[T], text: str, options: Optional[CodecOptions] = None) -> T:
        """
        Parse hex text into an identifier.

        Accepts an optional 0x/0X prefix followed by exactly 2 * LENGTH hex
        digits that are all-lowercase, all-uppercase, or correctly
        EIP-55 checksummed. The input casing is not retained.

        Args:
            text: Hex text
            options: Codec options; defaults when None

        Returns:
            Parsed identifier

        Raises:
            InvalidLengthError: wrong number of hex digits
            InvalidCharacterError: non-hex character (position among digits)
            ChecksumMismatchError: mixed case not matching the checksum
            MissingPrefixError: no 0x prefix while options.require_prefix is set
        """
        length = cls._require_length()
        if not isinstance(text, str):
            raise TypeError(f"{cls.__name__}.parse requires str, got {type(text).__name__}")
        opts = resolve_options(options)
        try:
            if opts.require_prefix and not hexcodec.has_prefix(text):
                raise MissingPrefixError(text)
            data = hexcodec.decode(text, length)
            if not checksum.verify(hexcodec.strip_prefix(text)):
                raise ChecksumMismatchError(text, checksum.apply_checksum_case(data))
        except IdentifierError as e:
            logger.debug(f"Rejected {cls.__name__} text: [{e.code.name}] {e.message}")
            raise
        return cls(data)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def as_bytes(self) -> bytes:
        """Raw identifier bytes."""
        return self._bytes

    def format(self) -> str:
        """Canonical EIP-55 checksummed text, 0x-prefixed."""
        return checksum.apply_checksum_case(self._bytes)

    def hex(self) -> str:
        """Lowercase 0x-prefixed hex."""
        return hexcodec.encode_lower(self._bytes)

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return len(self._bytes)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.format()}')"

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._bytes,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes == other._bytes

    def __ne__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes != other._bytes

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes < other._bytes

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes <= other._bytes

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes > other._bytes

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._bytes >= other._bytes

    def __hash__(self) -> int:
        return hash((self.LENGTH, self._bytes))

    # ------------------------------------------------------------------
    # Pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Validate from an instance, text or raw bytes; serialize to checksummed text in JSON mode."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.format(),
                when_used="json",
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> "FixedLengthIdentifier":
        """Validate and convert the input to an identifier of this kind."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.from_bytes(value)
        raise ValueError(f"Invalid {cls.__name__}: {value!r}")


__all__ = ["FixedLengthIdentifier"]
