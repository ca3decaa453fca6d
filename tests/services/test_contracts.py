"""Tests for request DTOs and their lookup precedence."""

from __future__ import annotations

import pytest

from tplresolve.domain.errors import InvalidInputError
from tplresolve.domain.lookups import ById, ModelKey, ProductKey, RateKey
from tplresolve.services.contracts import ModelRequest, ProductRequest, RateRequest


class TestIdWins:
    def test_product_id_with_name(self) -> None:
        assert ProductRequest(id=5, name="Widget").to_lookup() == ById(5)

    def test_model_id_with_partial_key(self) -> None:
        assert ModelRequest(id=5, name="Basic").to_lookup() == ById(5)

    def test_rate_id_with_full_key(self) -> None:
        req = RateRequest(id=5, type="Fixed", component_id=10, option="Call")
        assert req.to_lookup() == ById(5)

    def test_zero_id_is_an_id(self) -> None:
        assert ProductRequest(id=0, name="Widget").to_lookup() == ById(0)


class TestNaturalKey:
    def test_product(self) -> None:
        assert ProductRequest(name="Widget").to_lookup() == ProductKey("Widget")

    def test_model(self) -> None:
        assert ModelRequest(name="Basic", option="Call").to_lookup() == ModelKey("Basic", "Call")

    def test_rate_from_wire_alias(self) -> None:
        req = RateRequest.model_validate({"type": "Fixed", "componentId": 10, "option": "Call"})
        assert req.to_lookup() == RateKey("Fixed", 10, "Call")

    def test_rate_zero_component_is_present(self) -> None:
        req = RateRequest(type="Fixed", component_id=0, option="Call")
        assert req.to_lookup() == RateKey("Fixed", 0, "Call")


class TestIgnoredFields:
    def test_none_without_id(self) -> None:
        assert ModelRequest(name="Basic", option="Call").ignored_fields() == []

    def test_rate_reports_wire_alias(self) -> None:
        req = RateRequest(id=5, component_id=0, option="Call")
        assert req.ignored_fields() == ["componentId", "option"]

    def test_blank_strings_not_counted(self) -> None:
        assert ProductRequest(id=5, name="  ").ignored_fields() == []


class TestInvalidInput:
    @pytest.mark.parametrize(
        ("request_obj", "missing"),
        [
            (ProductRequest(), ["name"]),
            (ProductRequest(name="  "), ["name"]),
            (ModelRequest(), ["name", "option"]),
            (ModelRequest(name="Basic"), ["option"]),
            (RateRequest(type="Fixed", option="Call"), ["componentId"]),
            (RateRequest(component_id=10), ["type", "option"]),
        ],
    )
    def test_missing_fields_reported(
        self, request_obj: ProductRequest | ModelRequest | RateRequest, missing: list[str]
    ) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            request_obj.to_lookup()
        assert exc_info.value.detail == {"missing": missing}
