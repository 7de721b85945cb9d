"""Error taxonomy for descriptor compilation and encoding.

Decoding never raises: a mismatch is an ordinary ``None`` result.
"""

from __future__ import annotations

from enum import StrEnum


class DescriptorErrorKind(StrEnum):
    """Why a descriptor failed to compile."""

    EMPTY = "empty"
    INVALID_CHARACTER = "invalid_character"
    MANDATORY_AFTER_OPTIONAL = "mandatory_after_optional"
    LEADING_OPTIONAL = "leading_optional"
    MISPLACED_WILDCARD = "misplaced_wildcard"
    WILDCARD_WITH_NO_ITEMS = "wildcard_with_no_items"


class EncodeErrorKind(StrEnum):
    """Why a value tuple could not be encoded."""

    ARG_COUNT_MISMATCH = "arg_count_mismatch"
    TYPE_CONVERSION_FAILED = "type_conversion_failed"


_DESCRIPTOR_MESSAGES: dict[DescriptorErrorKind, str] = {
    DescriptorErrorKind.EMPTY: "Empty format string",
    DescriptorErrorKind.INVALID_CHARACTER: "Bad format string",
    DescriptorErrorKind.MANDATORY_AFTER_OPTIONAL: "Mandatory item follows an optional item",
    DescriptorErrorKind.LEADING_OPTIONAL: "First item must be mandatory",
    DescriptorErrorKind.MISPLACED_WILDCARD: "Wildcard '*' is only allowed as the last character",
    DescriptorErrorKind.WILDCARD_WITH_NO_ITEMS: "Wildcard '*' needs at least one item before it",
}


class FragError(Exception):
    """Base class for all fragstrings errors."""


class DescriptorError(FragError, ValueError):
    """A descriptor string violates the grammar.

    Attributes:
        kind: Machine-readable reason.
        descriptor: The rejected descriptor text.
        position: Zero-based offset of the offending character, when known.
    """

    def __init__(self, kind: DescriptorErrorKind, descriptor: str, position: int | None = None):
        self.kind = kind
        self.descriptor = descriptor
        self.position = position
        message = f"{_DESCRIPTOR_MESSAGES[kind]}: {descriptor!r}"
        if position is not None:
            message += f" (at position {position})"
        super().__init__(message)


class EncodeError(FragError, ValueError):
    """Values cannot be encoded with a schema.

    Attributes:
        kind: Machine-readable reason.
        index: Zero-based slot index for conversion failures, else None.
    """

    def __init__(self, kind: EncodeErrorKind, message: str, *, index: int | None = None):
        self.kind = kind
        self.index = index
        super().__init__(message)
