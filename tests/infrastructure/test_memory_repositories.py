"""Tests for seeded in-memory repositories and seed loading."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tplresolve.domain.errors import RecordNotFoundError
from tplresolve.domain.records import Model, Product, Rate
from tplresolve.infrastructure.repositories.memory import (
    InMemoryModelRepository,
    InMemoryProductRepository,
    InMemoryRateRepository,
    load_seed,
)


class TestInMemoryProductRepository:
    def test_hit_by_id_and_name(self) -> None:
        repo = InMemoryProductRepository([Product(id=4, name="Widget")])
        assert asyncio.run(repo.get_by_id(4)).name == "Widget"
        assert asyncio.run(repo.get_by_natural_key("Widget")).id == 4

    def test_miss_by_id(self) -> None:
        repo = InMemoryProductRepository()
        with pytest.raises(RecordNotFoundError) as exc_info:
            asyncio.run(repo.get_by_id(9))
        assert exc_info.value.lookup == {"id": 9}

    def test_name_match_is_case_sensitive(self) -> None:
        repo = InMemoryProductRepository([Product(id=4, name="Widget")])
        with pytest.raises(RecordNotFoundError):
            asyncio.run(repo.get_by_natural_key("widget"))


class TestInMemoryModelRepository:
    def test_requires_both_key_fields(self) -> None:
        repo = InMemoryModelRepository([Model(id=7, name="Basic", option="Call")])
        assert asyncio.run(repo.get_by_natural_key("Basic", "Call")).id == 7
        with pytest.raises(RecordNotFoundError):
            asyncio.run(repo.get_by_natural_key("Basic", "Put"))


class TestInMemoryRateRepository:
    def test_key_includes_component(self) -> None:
        repo = InMemoryRateRepository([Rate(id=3, type="Fixed", component_id=10, option="Call")])
        assert asyncio.run(repo.get_by_natural_key("Fixed", 10, "Call")).id == 3
        with pytest.raises(RecordNotFoundError) as exc_info:
            asyncio.run(repo.get_by_natural_key("Fixed", 11, "Call"))
        assert exc_info.value.detail["resource_type"] == "rate"


class TestLoadSeed:
    def test_loads_wire_format(self, seed_file: Path) -> None:
        seed = load_seed(seed_file)
        assert [p.name for p in seed.products] == ["Widget", "Gadget"]
        assert seed.rates[0].component_id == 10

    def test_missing_sections_default_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "seed.json"
        path.write_text(json.dumps({"products": [{"id": 1, "name": "A"}]}), encoding="utf-8")
        seed = load_seed(path)
        assert seed.models == []
        assert seed.rates == []

    def test_invalid_record_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "seed.json"
        path.write_text(json.dumps({"products": [{"id": "x"}]}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_seed(path)

    def test_duplicate_ids_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "seed.json"
        products = [{"id": 1, "name": "A"}, {"id": 1, "name": "B"}]
        path.write_text(json.dumps({"products": products}), encoding="utf-8")
        with pytest.raises(ValidationError, match="Duplicate products ids"):
            load_seed(path)

    def test_same_id_across_sections_allowed(self, tmp_path: Path) -> None:
        path = tmp_path / "seed.json"
        raw = {
            "products": [{"id": 1, "name": "A"}],
            "models": [{"id": 1, "name": "Basic", "option": "Call"}],
        }
        path.write_text(json.dumps(raw), encoding="utf-8")
        seed = load_seed(path)
        assert seed.products[0].id == seed.models[0].id == 1
