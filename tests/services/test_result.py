"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from fragstrings.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="encode", data={"encoded": "%s__a"})
        assert result.ok is True
        assert result.op == "encode"
        assert result.data == {"encoded": "%s__a"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NO_MATCH", message="No match")
        result = ServiceResult(ok=False, op="decode", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NO_MATCH"

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("compile", "BAD_DESCRIPTOR", "bad", {"kind": "empty"})
        assert result.ok is False
        assert result.op == "compile"
        assert result.error == ServiceError(
            code="BAD_DESCRIPTOR", message="bad", detail={"kind": "empty"}
        )

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="x")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="decode", data={"values": ["a", 1, None]})
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["values"] == ["a", 1, None]
