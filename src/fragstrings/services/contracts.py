"""Typed payload contracts for service boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ItemData(BaseModel):
    """One schema slot."""

    type: Literal["str", "int"]
    optionality: Literal["mandatory", "optional"]


class CompileResultData(BaseModel):
    """Payload contract for ``CodecService.compile``."""

    model_config = ConfigDict(extra="allow")

    descriptor: str
    prefix: str
    ending: Literal["closed", "open"]
    items: list[ItemData]


class EncodeResultData(BaseModel):
    """Payload contract for ``CodecService.encode``."""

    descriptor: str
    encoded: str


class FieldData(BaseModel):
    """One decoded field."""

    index: int
    type: Literal["str", "int"]
    optional: bool
    present: bool
    value: str | int | None


class DecodeResultData(BaseModel):
    """Payload contract for ``CodecService.decode``."""

    descriptor: str
    text: str
    values: list[str | int | None]
    fields: list[FieldData]


class BatchItem(BaseModel):
    """One matched line of a batch decode."""

    line: int
    text: str
    values: list[str | int | None]


class DecodeBatchData(BaseModel):
    """Payload contract for ``CodecService.decode_batch``."""

    descriptor: str
    count: int
    matched: int
    unmatched: int
    items: list[BatchItem]


class AliasItem(BaseModel):
    """One configured descriptor alias."""

    name: str
    descriptor: str
    valid: bool


class AliasListData(BaseModel):
    """Payload contract for ``CodecService.aliases``."""

    count: int
    items: list[AliasItem]
