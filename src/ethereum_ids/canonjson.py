"""
Canonical JSON

Sorts object keys lexicographically and encodes with no extra whitespace so
documents (and their hashes) are stable. Identifiers are written in their
checksummed text form.
"""

import json
from typing import Any

from .types.fixed import FixedLengthIdentifier


def dumps_canonical(obj: Any) -> str:
    """
    Encode object as canonical JSON string.

    Args:
        obj: Object to encode (dict, list, tuple, str, int, float, bool, None,
            or any FixedLengthIdentifier)

    Returns:
        Canonical JSON string with sorted keys and no extra whitespace
    """
    return json.dumps(_canonicalize(obj), separators=(',', ':'), ensure_ascii=False, sort_keys=True)


def _canonicalize(v: Any) -> Any:
    """
    Recursively canonicalize a value.

    - Maps: stringify keys, recursively canonicalize values
    - Lists and tuples: recursively canonicalize elements, preserve order
    - Identifiers: checksummed text
    - Primitives: pass through unchanged
    """
    if isinstance(v, FixedLengthIdentifier):
        return v.format()
    elif isinstance(v, dict):
        out = {}
        for k, item in v.items():
            key = k.format() if isinstance(k, FixedLengthIdentifier) else str(k)
            if key in out:
                raise ValueError(f"Duplicate key after canonicalization: {key}")
            out[key] = _canonicalize(item)
        return out
    elif isinstance(v, (list, tuple)):
        return [_canonicalize(item) for item in v]
    else:
        return v
