"""
Serialization adapters for fixed-length identifiers.

Binary form: exactly LENGTH raw bytes, no length prefix, no casing. Framing
(knowing that LENGTH bytes are available) belongs to the surrounding
encoding.

Text form: delegates to parse() on read, so lowercase, uppercase and
correctly checksummed input are accepted; always writes the checksummed
format(). Text round-trips the value, not the original string.
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from .canonjson import dumps_canonical
from .codec.reader import BinaryReader
from .codec.writer import BinaryWriter
from .runtime.errors import EncodingError
from .runtime.options import CodecOptions
from .types.fixed import FixedLengthIdentifier

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=FixedLengthIdentifier)


# =============================================================================
# Binary form
# =============================================================================

def encode_binary(ident: FixedLengthIdentifier) -> bytes:
    """Raw LENGTH bytes of the identifier."""
    return ident.as_bytes()


def decode_binary(cls: Type[T], data: bytes) -> T:
    """
    Decode an identifier from exactly cls.LENGTH raw bytes.

    Raises:
        InvalidLengthError: data has any other length
    """
    return cls.from_bytes(data)


def write_binary(writer: BinaryWriter, ident: FixedLengthIdentifier) -> None:
    """Append the identifier's raw bytes to writer."""
    writer.fixed_bytes(ident.as_bytes(), ident.LENGTH)


def read_binary(reader: BinaryReader, cls: Type[T]) -> T:
    """
    Consume exactly cls.LENGTH bytes from reader.

    Raises:
        UnmarshalError: fewer than cls.LENGTH bytes remain
    """
    return cls.from_bytes(reader.fixed_bytes(cls._require_length()))


# =============================================================================
# Text form
# =============================================================================

def to_text(ident: FixedLengthIdentifier) -> str:
    """Checksummed text of the identifier."""
    return ident.format()


def from_text(cls: Type[T], text: str, options: Optional[CodecOptions] = None) -> T:
    """Parse identifier text; see FixedLengthIdentifier.parse."""
    return cls.parse(text, options)


def dumps_document(obj: Any) -> str:
    """
    Encode a structured document as canonical JSON.

    Identifiers anywhere in obj (values or dict keys) are written in
    checksummed form.
    """
    return dumps_canonical(obj)


def loads_document(text: str, fields: Dict[str, Type[FixedLengthIdentifier]],
                   options: Optional[CodecOptions] = None) -> Dict[str, Any]:
    """
    Decode a JSON object and parse the named top-level identifier fields.

    Args:
        text: JSON text of an object
        fields: Field name -> identifier class. Missing or null fields are
            left as they are.
        options: Codec options passed to parse()

    Returns:
        Decoded dictionary with identifier fields converted

    Raises:
        EncodingError: text is not JSON, or not a JSON object, or a named
            field is not a string
        IdentifierError: a named field fails to parse
    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise EncodingError("Invalid JSON document", cause=e)
    if not isinstance(doc, dict):
        raise EncodingError(f"Expected JSON object, got {type(doc).__name__}")

    for name, cls in fields.items():
        value = doc.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise EncodingError(f"Field {name!r} must be a string",
                                details={"field": name, "type": type(value).__name__})
        try:
            doc[name] = from_text(cls, value, options)
        except EncodingError as e:
            logger.debug(f"Field {name!r} rejected: [{e.code.name}] {e.message}")
            e.details.setdefault("field", name)
            raise
    return doc


def iter_binary(reader: BinaryReader, cls: Type[T]) -> Iterable[T]:
    """Read identifiers of kind cls back to back until reader is exhausted."""
    while not reader.eof:
        yield read_binary(reader, cls)


__all__ = [
    "encode_binary",
    "decode_binary",
    "write_binary",
    "read_binary",
    "iter_binary",
    "to_text",
    "from_text",
    "dumps_document",
    "loads_document",
]
