"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from convert_temp.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="convert", data={"results": []})
        assert result.ok is True
        assert result.op == "convert"
        assert result.error is None
        assert result.meta is None
        assert set(result.model_dump()) == {"ok", "op", "data", "error", "meta"}

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_UNIT", kind="InvalidUnit", message="Unknown unit")
        result = ServiceResult(ok=False, op="convert", error=error)
        assert result.error is not None
        assert result.error.code == "INVALID_UNIT"
        assert result.error.kind == "InvalidUnit"
        assert result.error.detail == {}

    def test_kind_defaults_to_empty(self) -> None:
        assert ServiceError(code="X", message="m").kind == ""

    def test_json_serialization_keeps_degree_sign(self) -> None:
        result = ServiceResult(ok=True, op="convert", data={"display": "37°C"})
        dumped = result.model_dump_json()
        assert "37°C" in dumped
        assert json.loads(dumped)["data"]["display"] == "37°C"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="convert")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
