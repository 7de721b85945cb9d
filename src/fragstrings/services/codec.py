"""CodecService: compile, encode, and decode behind ServiceResult.

Wraps the pure domain functions for the CLI: resolves ``@alias``
descriptors from settings and turns domain exceptions into structured
errors.  Performs no I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from fragstrings.domain.cache import cache_info, compile_descriptor
from fragstrings.domain.codec import decode, encode
from fragstrings.domain.errors import DescriptorError, EncodeError
from fragstrings.domain.types import DecodedField, Schema, ValueType, to_python
from fragstrings.services.contracts import (
    AliasListData,
    CompileResultData,
    DecodeBatchData,
    DecodeResultData,
    EncodeResultData,
    dump_validated,
)
from fragstrings.services.result import ServiceResult

logger = logging.getLogger(__name__)

BAD_DESCRIPTOR = "BAD_DESCRIPTOR"
NO_MATCH = "NO_MATCH"
UNKNOWN_ALIAS = "UNKNOWN_ALIAS"

ALIAS_PREFIX = "@"


class CodecService:
    """Service-layer entry point for all codec operations.

    Args:
        aliases: Named descriptors usable as ``@name``.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases = dict(aliases or {})

    # -- helpers --

    def _schema(self, op: str, descriptor: str) -> Schema | ServiceResult:
        """Resolve and compile *descriptor*, or return a failed result."""
        text = descriptor
        if descriptor.startswith(ALIAS_PREFIX):
            name = descriptor[len(ALIAS_PREFIX) :]
            resolved = self._aliases.get(name)
            if resolved is None:
                return ServiceResult.failure(
                    op,
                    UNKNOWN_ALIAS,
                    f"Unknown descriptor alias: {name!r}",
                    {"alias": name, "known": sorted(self._aliases)},
                )
            text = resolved
        try:
            return compile_descriptor(text)
        except DescriptorError as exc:
            return ServiceResult.failure(
                op,
                BAD_DESCRIPTOR,
                str(exc),
                {"descriptor": text, "kind": str(exc.kind), "position": exc.position},
            )

    @staticmethod
    def _values(decoded: Sequence[DecodedField]) -> list[str | int | None]:
        return [to_python(field) for field in decoded]

    # -- operations --

    def compile(self, descriptor: str) -> ServiceResult:
        """Validate *descriptor* and describe its schema."""
        schema = self._schema("compile", descriptor)
        if isinstance(schema, ServiceResult):
            return schema
        data = schema.to_dict()
        if descriptor.startswith(ALIAS_PREFIX):
            data["alias"] = descriptor[len(ALIAS_PREFIX) :]
        return ServiceResult(
            ok=True,
            op="compile",
            data=dump_validated(CompileResultData, data),
        )

    def encode(self, descriptor: str, values: Sequence[Any]) -> ServiceResult:
        """Encode *values* with *descriptor*."""
        schema = self._schema("encode", descriptor)
        if isinstance(schema, ServiceResult):
            return schema
        try:
            encoded = encode(schema, values)
        except EncodeError as exc:
            return ServiceResult.failure(
                "encode",
                str(exc.kind).upper(),
                str(exc),
                {"descriptor": schema.descriptor, "index": exc.index, "expected": len(schema)},
            )
        warnings = [
            f"Value at position {i} contains the delimiter '__' and will not decode cleanly"
            for i, (item, value) in enumerate(zip(schema.items, values, strict=True))
            if item.value_type is ValueType.STR and "__" in str(value)
        ]
        return ServiceResult(
            ok=True,
            op="encode",
            data=dump_validated(
                EncodeResultData, {"descriptor": schema.descriptor, "encoded": encoded}
            ),
            warnings=warnings,
        )

    def decode(self, descriptor: str, text: str) -> ServiceResult:
        """Decode *text*; a mismatch is reported as a ``NO_MATCH`` failure."""
        schema = self._schema("decode", descriptor)
        if isinstance(schema, ServiceResult):
            return schema
        decoded = decode(schema, text)
        if decoded is None:
            return ServiceResult.failure(
                "decode",
                NO_MATCH,
                f"Text does not match descriptor {schema.descriptor!r}",
                {"descriptor": schema.descriptor, "text": text},
            )
        fields = [
            {
                "index": index,
                "type": item.value_type.name.lower(),
                "optional": item.is_optional,
                "present": value is not None,
                "value": value,
            }
            for index, (item, value) in enumerate(
                zip(schema.items, self._values(decoded), strict=True)
            )
        ]
        payload = {
            "descriptor": schema.descriptor,
            "text": text,
            "values": self._values(decoded),
            "fields": fields,
        }
        return ServiceResult(
            ok=True,
            op="decode",
            data=dump_validated(DecodeResultData, payload),
        )

    def decode_batch(self, descriptor: str, lines: Iterable[str]) -> ServiceResult:
        """Decode many lines, collecting matches and counting the rest.

        Blank lines are skipped. Unmatched lines are warnings, not errors.
        """
        schema = self._schema("decode_batch", descriptor)
        if isinstance(schema, ServiceResult):
            return schema
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        count = 0
        for lineno, raw in enumerate(lines, start=1):
            text = raw.rstrip("\r\n")
            if not text:
                continue
            count += 1
            decoded = decode(schema, text)
            if decoded is None:
                warnings.append(f"Line {lineno} does not match")
                continue
            items.append({"line": lineno, "text": text, "values": self._values(decoded)})
        logger.debug("Batch decode: %d lines, %d matched", count, len(items))
        payload = {
            "descriptor": schema.descriptor,
            "count": count,
            "matched": len(items),
            "unmatched": count - len(items),
            "items": items,
        }
        info = cache_info()
        return ServiceResult(
            ok=True,
            op="decode_batch",
            data=dump_validated(DecodeBatchData, payload),
            warnings=warnings,
            meta={"cache": {"hits": info.hits, "misses": info.misses, "size": info.size}},
        )

    def aliases(self) -> ServiceResult:
        """List configured aliases and whether each one compiles."""
        items = []
        for name, text in sorted(self._aliases.items()):
            try:
                compile_descriptor(text)
                valid = True
            except DescriptorError:
                valid = False
            items.append({"name": name, "descriptor": text, "valid": valid})
        warnings = [
            f"Alias {item['name']!r} has an invalid descriptor"
            for item in items
            if not item["valid"]
        ]
        return ServiceResult(
            ok=True,
            op="aliases",
            data=dump_validated(AliasListData, {"count": len(items), "items": items}),
            warnings=warnings,
        )
