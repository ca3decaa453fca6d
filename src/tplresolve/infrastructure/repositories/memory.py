"""Seeded in-memory repositories that report misses.

Records are supplied at construction or loaded from a JSON seed file::

    {
      "products": [{"id": 1, "name": "Widget"}],
      "models": [{"id": 7, "name": "Basic", "option": "Call"}],
      "rates": [{"id": 3, "type": "Fixed", "componentId": 10, "option": "Call"}]
    }

Natural-key matching is exact and case-sensitive. A miss raises
:class:`RecordNotFoundError`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from tplresolve.domain.errors import RecordNotFoundError
from tplresolve.domain.records import Model, Product, Rate
from tplresolve.infrastructure.repositories.ports import (
    ModelRepository,
    ProductRepository,
    RateRepository,
)

logger = logging.getLogger(__name__)


class SeedData(BaseModel):
    """Contents of a seed file."""

    model_config = {"frozen": True}

    products: list[Product] = Field(default_factory=list)
    models: list[Model] = Field(default_factory=list)
    rates: list[Rate] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> SeedData:
        for section in ("products", "models", "rates"):
            ids = [record.id for record in getattr(self, section)]
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {section} ids: {duplicates}")
        return self


def load_seed(path: Path) -> SeedData:
    """Read and validate a JSON seed file."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    seed = SeedData.model_validate(raw)
    logger.debug(
        "Loaded seed %s: %d products, %d models, %d rates",
        path,
        len(seed.products),
        len(seed.models),
        len(seed.rates),
    )
    return seed


class InMemoryProductRepository(ProductRepository):
    def __init__(self, records: Iterable[Product] = ()) -> None:
        self._by_id = {r.id: r for r in records}

    async def get_by_id(self, product_id: int) -> Product:
        record = self._by_id.get(product_id)
        if record is None:
            raise RecordNotFoundError("product", {"id": product_id})
        return record

    async def get_by_natural_key(self, name: str) -> Product:
        for record in self._by_id.values():
            if record.name == name:
                return record
        raise RecordNotFoundError("product", {"name": name})


class InMemoryModelRepository(ModelRepository):
    def __init__(self, records: Iterable[Model] = ()) -> None:
        self._by_id = {r.id: r for r in records}

    async def get_by_id(self, model_id: int) -> Model:
        record = self._by_id.get(model_id)
        if record is None:
            raise RecordNotFoundError("model", {"id": model_id})
        return record

    async def get_by_natural_key(self, name: str, option: str) -> Model:
        for record in self._by_id.values():
            if record.name == name and record.option == option:
                return record
        raise RecordNotFoundError("model", {"name": name, "option": option})


class InMemoryRateRepository(RateRepository):
    def __init__(self, records: Iterable[Rate] = ()) -> None:
        self._by_id = {r.id: r for r in records}

    async def get_by_id(self, rate_id: int) -> Rate:
        record = self._by_id.get(rate_id)
        if record is None:
            raise RecordNotFoundError("rate", {"id": rate_id})
        return record

    async def get_by_natural_key(self, rate_type: str, component_id: int, option: str) -> Rate:
        for record in self._by_id.values():
            if (
                record.type == rate_type
                and record.component_id == component_id
                and record.option == option
            ):
                return record
        raise RecordNotFoundError(
            "rate",
            {"type": rate_type, "component_id": component_id, "option": option},
        )
