"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from tplresolve.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="resolve_product", data={"id": 1, "name": "Widget"})
        assert result.ok is True
        assert result.op == "resolve_product"
        assert result.data == {"id": 1, "name": "Widget"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="No product found for id=9")
        result = ServiceResult(ok=False, op="resolve_product", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="resolve_rate",
            data={"componentId": 10},
            meta={"strategy": "id"},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["componentId"] == 10
        assert parsed["meta"]["strategy"] == "id"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="INVALID_INPUT", message="bad")
        assert error.detail == {}
