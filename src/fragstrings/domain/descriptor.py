"""Descriptor grammar parser.

Grammar (ASCII, read left to right in a single pass)::

    descriptor := item+ ('*')?
    item       := '%' ('s' | 'd') ('?')?

Rules enforced while scanning:

- at least one item;
- the first item is mandatory;
- no mandatory item after an optional one (optionals are a suffix);
- ``*`` only as the final character and only after at least one item.

Examples:
    >>> parse_descriptor("%s%d*").descriptor
    '%s%d*'
    >>> parse_descriptor("%s%d?").prefix
    '%s'
"""

from __future__ import annotations

from fragstrings.domain.errors import DescriptorError, DescriptorErrorKind
from fragstrings.domain.types import (
    ITEM_MARKER,
    OPTIONAL_MARKER,
    WILDCARD,
    Ending,
    FormatItem,
    Optionality,
    Schema,
    ValueType,
)

_TYPE_LETTERS: dict[str, ValueType] = {vt.value: vt for vt in ValueType}


def parse_descriptor(text: str) -> Schema:
    """Compile *text* into a :class:`Schema` without caching.

    Raises:
        DescriptorError: If *text* violates the grammar.
    """
    if not text:
        raise DescriptorError(DescriptorErrorKind.EMPTY, text)

    items: list[FormatItem] = []
    ending = Ending.CLOSED
    seen_optional = False
    leading_optional: int | None = None
    pos = 0
    end = len(text)

    while pos < end:
        start = pos
        ch = text[pos]

        if ch == WILDCARD:
            if pos != end - 1:
                raise DescriptorError(DescriptorErrorKind.MISPLACED_WILDCARD, text, pos)
            if not items:
                raise DescriptorError(DescriptorErrorKind.WILDCARD_WITH_NO_ITEMS, text, pos)
            ending = Ending.OPEN
            pos += 1
            continue

        if ch != ITEM_MARKER:
            raise DescriptorError(DescriptorErrorKind.INVALID_CHARACTER, text, pos)
        if pos + 1 >= end:
            raise DescriptorError(DescriptorErrorKind.INVALID_CHARACTER, text, pos)
        value_type = _TYPE_LETTERS.get(text[pos + 1])
        if value_type is None:
            raise DescriptorError(DescriptorErrorKind.INVALID_CHARACTER, text, pos + 1)
        pos += 2

        optionality = Optionality.MANDATORY
        if pos < end and text[pos] == OPTIONAL_MARKER:
            optionality = Optionality.OPTIONAL
            pos += 1

        if optionality is Optionality.OPTIONAL:
            if not items:
                leading_optional = start
            seen_optional = True
        elif seen_optional:
            raise DescriptorError(DescriptorErrorKind.MANDATORY_AFTER_OPTIONAL, text, start)

        items.append(FormatItem(value_type, optionality))

    # A later mandatory item wins over the leading optional.
    if leading_optional is not None:
        raise DescriptorError(DescriptorErrorKind.LEADING_OPTIONAL, text, leading_optional)

    return Schema(items=tuple(items), ending=ending)
