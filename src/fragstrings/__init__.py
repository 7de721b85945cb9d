"""fragstrings: self-describing fragmented strings.

Encodes a tuple of strings and 64-bit integers into one string keyed by a
compact descriptor (``"%s%d"`` -> ``"%s%d__foo__42"``) and decodes it back.

Usage::

    >>> from fragstrings import decode, encode
    >>> encode("%s%d", ["foo", 42])
    '%s%d__foo__42'
    >>> decode("%s%d", "%s%d__foo__42")
    ('foo', 42)
"""

from __future__ import annotations

from fragstrings.domain.cache import cache_info, clear_cache, compile_descriptor
from fragstrings.domain.codec import decode, encode, frag_format, frag_parse
from fragstrings.domain.errors import (
    DescriptorError,
    DescriptorErrorKind,
    EncodeError,
    EncodeErrorKind,
    FragError,
)
from fragstrings.domain.types import (
    ABSENT,
    Absent,
    Ending,
    FormatItem,
    Optionality,
    Present,
    Schema,
    ValueType,
)

__version__ = "0.3.0"

__all__ = [
    "ABSENT",
    "Absent",
    "DescriptorError",
    "DescriptorErrorKind",
    "EncodeError",
    "EncodeErrorKind",
    "Ending",
    "FormatItem",
    "FragError",
    "Optionality",
    "Present",
    "Schema",
    "ValueType",
    "__version__",
    "cache_info",
    "clear_cache",
    "compile_descriptor",
    "decode",
    "encode",
    "frag_format",
    "frag_parse",
]
