"""Schema types and decoded field wrappers.

A descriptor such as ``"%s%d?*"`` compiles to a :class:`Schema`: an ordered
tuple of :class:`FormatItem` slots plus an :class:`Ending`.  Schemas are
immutable and safe to share between threads.

INVARIANT: a Schema is only ever built by the descriptor parser, which
enforces the grammar rules (non-empty, leading mandatory item, optionals
form a contiguous suffix).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

DELIMITER = "__"
WILDCARD = "*"
OPTIONAL_MARKER = "?"
ITEM_MARKER = "%"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ValueType(StrEnum):
    """Declared type of a slot; the value is the descriptor letter."""

    STR = "s"
    INT = "d"


class Optionality(StrEnum):
    """Whether a slot must always have a fragment."""

    MANDATORY = "mandatory"
    OPTIONAL = "optional"


class Ending(StrEnum):
    """Whether trailing fragments beyond the declared slots are permitted."""

    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True, slots=True)
class FormatItem:
    """One positional slot of a schema."""

    value_type: ValueType
    optionality: Optionality = Optionality.MANDATORY

    @property
    def is_optional(self) -> bool:
        return self.optionality is Optionality.OPTIONAL

    def render(self) -> str:
        """Render the slot back to descriptor syntax (``"%d"``, ``"%s?"``)."""
        text = f"{ITEM_MARKER}{self.value_type}"
        if self.is_optional:
            text += OPTIONAL_MARKER
        return text


@dataclass(frozen=True, slots=True)
class Schema:
    """Compiled, validated descriptor."""

    items: tuple[FormatItem, ...]
    ending: Ending = Ending.CLOSED

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_open(self) -> bool:
        return self.ending is Ending.OPEN

    @property
    def has_optional(self) -> bool:
        return any(item.is_optional for item in self.items)

    @property
    def mandatory_count(self) -> int:
        return sum(1 for item in self.items if not item.is_optional)

    @property
    def prefix(self) -> str:
        """Mandatory-only rendering used as the encoded pattern fragment.

        Optional slots and the wildcard are left out: ``"%s%d?*"`` -> ``"%s"``.
        """
        return "".join(item.render() for item in self.items if not item.is_optional)

    @property
    def strict_prefix(self) -> bool:
        """True when decoding requires an exact pattern match.

        Open or optional-bearing schemas only require the pattern fragment to
        start with :attr:`prefix`.
        """
        return not (self.is_open or self.has_optional)

    @property
    def descriptor(self) -> str:
        """Canonical descriptor text this schema compiles from."""
        text = "".join(item.render() for item in self.items)
        if self.is_open:
            text += WILDCARD
        return text

    def to_dict(self) -> dict[str, Any]:
        return {
            "descriptor": self.descriptor,
            "prefix": self.prefix,
            "ending": str(self.ending),
            "items": [
                {"type": item.value_type.name.lower(), "optionality": str(item.optionality)}
                for item in self.items
            ],
        }


# --- Decoded optional slots ---


@dataclass(frozen=True, slots=True)
class Present:
    """An optional slot that had a fragment."""

    value: str | int

    @property
    def is_present(self) -> bool:
        return True

    def unwrap_or(self, default: Any = None) -> str | int:
        return self.value


@dataclass(frozen=True, slots=True)
class Absent:
    """An optional slot with no remaining fragment."""

    @property
    def is_present(self) -> bool:
        return False

    def unwrap_or(self, default: Any = None) -> Any:
        return default


ABSENT = Absent()

type DecodedField = str | int | Present | Absent


def to_python(field: DecodedField) -> str | int | None:
    """Collapse a decoded field to a plain value (``Absent`` -> ``None``)."""
    match field:
        case Present(value=value):
            return value
        case Absent():
            return None
        case _:
            return field
