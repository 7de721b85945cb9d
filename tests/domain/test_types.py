"""Tests for schema types and decoded field wrappers."""

from __future__ import annotations

import pytest

from fragstrings.domain.descriptor import parse_descriptor
from fragstrings.domain.types import (
    ABSENT,
    Absent,
    FormatItem,
    Optionality,
    Present,
    ValueType,
    to_python,
)


class TestFormatItem:
    def test_render_mandatory(self) -> None:
        assert FormatItem(ValueType.STR).render() == "%s"
        assert FormatItem(ValueType.INT).render() == "%d"

    def test_render_optional(self) -> None:
        assert FormatItem(ValueType.INT, Optionality.OPTIONAL).render() == "%d?"

    def test_frozen(self) -> None:
        item = FormatItem(ValueType.STR)
        with pytest.raises(AttributeError):
            item.value_type = ValueType.INT  # type: ignore[misc]


class TestSchema:
    def test_prefix_skips_optionals_and_wildcard(self) -> None:
        assert parse_descriptor("%s%d?%s?*").prefix == "%s"

    def test_strict_prefix_only_for_closed_mandatory(self) -> None:
        assert parse_descriptor("%s%d").strict_prefix is True
        assert parse_descriptor("%s%d*").strict_prefix is False
        assert parse_descriptor("%s%d?").strict_prefix is False

    def test_counts(self) -> None:
        schema = parse_descriptor("%s%d%s?")
        assert len(schema) == 3
        assert schema.mandatory_count == 2
        assert schema.has_optional is True

    def test_hashable_and_equal(self) -> None:
        assert parse_descriptor("%s%d") == parse_descriptor("%s%d")
        assert hash(parse_descriptor("%s%d")) == hash(parse_descriptor("%s%d"))

    def test_to_dict(self) -> None:
        data = parse_descriptor("%s%d?*").to_dict()
        assert data == {
            "descriptor": "%s%d?*",
            "prefix": "%s",
            "ending": "open",
            "items": [
                {"type": "str", "optionality": "mandatory"},
                {"type": "int", "optionality": "optional"},
            ],
        }


class TestOptionalWrappers:
    def test_present(self) -> None:
        field = Present(5)
        assert field.is_present
        assert field.unwrap_or(0) == 5

    def test_absent(self) -> None:
        assert not ABSENT.is_present
        assert ABSENT.unwrap_or("x") == "x"
        assert ABSENT == Absent()

    def test_present_zero_is_not_absent(self) -> None:
        assert Present(0) != ABSENT

    @pytest.mark.parametrize(
        "field,expected",
        [("a", "a"), (3, 3), (Present("b"), "b"), (Present(0), 0), (ABSENT, None)],
    )
    def test_to_python(self, field: object, expected: object) -> None:
        assert to_python(field) == expected  # type: ignore[arg-type]
