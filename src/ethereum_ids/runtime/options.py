"""
Codec option classes.

Typed options controlling how identifier text is accepted.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class CodecOptions(BaseModel):
    """
    Options for parsing identifier text.

    The defaults accept text with or without a 0x prefix.
    """
    require_prefix: bool = Field(
        default=False,
        alias="requirePrefix",
        description="Reject text that does not start with 0x or 0X"
    )

    model_config = {"populate_by_name": True, "frozen": True}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary of non-default fields."""
        result: Dict[str, Any] = {}
        if self.require_prefix:
            result["requirePrefix"] = self.require_prefix
        return result


DEFAULT_OPTIONS = CodecOptions()


def resolve_options(options: Optional[CodecOptions]) -> CodecOptions:
    """Return the given options, or the defaults when None."""
    return DEFAULT_OPTIONS if options is None else options


__all__ = ["CodecOptions", "DEFAULT_OPTIONS", "resolve_options"]
