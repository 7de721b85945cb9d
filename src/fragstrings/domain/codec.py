"""Encoder and decoder driven by a compiled :class:`Schema`.

Wire format::

    encoded := prefix ('__' field)*

where ``prefix`` renders the mandatory items only.  Field values are not
escaped; a value containing ``__`` splits into extra fragments on decode.

Known limitations, kept on purpose:

- With optional items or an open ending the pattern fragment only has to
  *start with* the prefix, so ``"%s%d__a"`` matches ``"%s%d?"`` (the
  optional Int is reported absent) and a pattern from an unrelated schema
  sharing the prefix is accepted.
- A Str slot accepts any fragment, including one that was encoded as an
  Int under a different schema.
"""

from __future__ import annotations

import logging
import operator
import re
from collections.abc import Iterator, Sequence
from typing import Any

from fragstrings.domain.cache import compile_descriptor
from fragstrings.domain.errors import EncodeError, EncodeErrorKind
from fragstrings.domain.types import (
    ABSENT,
    DELIMITER,
    INT64_MAX,
    INT64_MIN,
    DecodedField,
    Present,
    Schema,
    ValueType,
)

logger = logging.getLogger(__name__)

# Base-10 signed, ASCII digits only (no whitespace, no underscores).
_INT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def resolve_schema(schema: Schema | str) -> Schema:
    """Accept a compiled schema or descriptor text."""
    if isinstance(schema, Schema):
        return schema
    return compile_descriptor(schema)


def parse_int(fragment: str) -> int | None:
    """Parse a base-10 signed 64-bit integer, or return None."""
    if _INT_PATTERN.fullmatch(fragment) is None:
        return None
    value = int(fragment)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _conversion_error(index: int, value: Any, expected: str) -> EncodeError:
    return EncodeError(
        EncodeErrorKind.TYPE_CONVERSION_FAILED,
        f"Value {value!r} at position {index} cannot be converted to {expected}",
        index=index,
    )


def _to_int(index: int, value: Any) -> int:
    if isinstance(value, str):
        parsed = parse_int(value)
        if parsed is None:
            raise _conversion_error(index, value, "a 64-bit integer")
        return parsed
    try:
        result = operator.index(value)
    except TypeError:
        raise _conversion_error(index, value, "a 64-bit integer") from None
    if not INT64_MIN <= result <= INT64_MAX:
        raise _conversion_error(index, value, "a 64-bit integer")
    return result


def _to_str(index: int, value: Any) -> str:
    if value is None:
        raise _conversion_error(index, value, "text")
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            raise _conversion_error(index, value, "text") from None
    return str(value)


def encode(schema: Schema | str, values: Sequence[Any]) -> str:
    """Encode *values* into a fragmented string.

    Every declared slot needs a value, optional ones included; the absent
    state only exists when decoding.

    Raises:
        EncodeError: On a value count mismatch or an unconvertible value.
        DescriptorError: If *schema* is descriptor text that fails to compile.
    """
    if isinstance(values, (str, bytes)):
        raise TypeError("values must be a sequence of values, not a single string")
    schema = resolve_schema(schema)
    values = list(values)
    if len(values) != len(schema):
        raise EncodeError(
            EncodeErrorKind.ARG_COUNT_MISMATCH,
            "Number of arguments mismatches number of format items "
            f"(expected {len(schema)}, got {len(values)})",
        )

    fields = [schema.prefix]
    for index, (item, value) in enumerate(zip(schema.items, values, strict=True)):
        if item.value_type is ValueType.INT:
            fields.append(str(_to_int(index, value)))
        else:
            fields.append(_to_str(index, value))
    return DELIMITER.join(fields)


def frag_format(descriptor: Schema | str, *values: Any) -> str:
    """Varargs form of :func:`encode`.

    >>> frag_format("%s%s%d", "foo", "bar", 42)
    '%s%s%d__foo__bar__42'
    """
    return encode(descriptor, values)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _pattern_matches(schema: Schema, pattern: str) -> bool:
    if schema.strict_prefix:
        return pattern == schema.prefix
    return pattern.startswith(schema.prefix)


def decode(schema: Schema | str, text: str) -> tuple[DecodedField, ...] | None:
    """Match *text* against *schema* and extract its fields.

    Returns a tuple with one entry per schema item (``str``/``int`` for
    mandatory slots, :class:`Present`/:class:`Absent` for optional ones),
    or None when *text* does not match.  Malformed input never raises.

    Raises:
        DescriptorError: If *schema* is descriptor text that fails to compile.
    """
    schema = resolve_schema(schema)
    pattern, *data = text.split(DELIMITER)

    if not _pattern_matches(schema, pattern):
        logger.debug("No match for %r: pattern %r vs prefix %r", text, pattern, schema.prefix)
        return None

    fragments: Iterator[str] = iter(data)
    ok = True
    result: list[DecodedField] = []

    for item in schema.items:
        fragment = next(fragments, None)
        if item.is_optional:
            if fragment is None:
                result.append(ABSENT)
                continue
            if item.value_type is ValueType.INT:
                parsed = parse_int(fragment)
                if parsed is None:
                    ok = False
                    parsed = 0
                result.append(Present(parsed))
            else:
                result.append(Present(fragment))
            continue

        if fragment is None:
            ok = False
            result.append(0 if item.value_type is ValueType.INT else "")
        elif item.value_type is ValueType.INT:
            parsed = parse_int(fragment)
            if parsed is None:
                ok = False
                parsed = 0
            result.append(parsed)
        else:
            result.append(fragment)

    leftover = next(fragments, None) is not None
    if leftover and not schema.is_open:
        logger.debug("No match for %r: extra fragments after %d items", text, len(schema))
        return None
    if not ok:
        logger.debug("No match for %r: missing or non-integer field", text)
        return None
    return tuple(result)


def frag_parse(descriptor: Schema | str, text: str) -> tuple[DecodedField, ...] | None:
    """Alias of :func:`decode` taking the descriptor first.

    >>> frag_parse("%s%s%d", "%s%s%d__foo__bar__42")
    ('foo', 'bar', 42)
    """
    return decode(descriptor, text)
