"""Fake repositories that synthesise a record for every lookup.

Naming convention for id lookups: ``Product_{id}``, ``Model_{id}`` /
``Option_{id}``, ``Type_{id}`` / ``Option_{id}``. Natural-key lookups echo
the key back with id ``1``. These never raise ``RecordNotFoundError``.
"""

from __future__ import annotations

from tplresolve.domain.records import Model, Product, Rate
from tplresolve.infrastructure.repositories.ports import (
    ModelRepository,
    ProductRepository,
    RateRepository,
)

NATURAL_KEY_ID = 1


class FakeProductRepository(ProductRepository):
    async def get_by_id(self, product_id: int) -> Product:
        return Product(id=product_id, name=f"Product_{product_id}")

    async def get_by_natural_key(self, name: str) -> Product:
        return Product(id=NATURAL_KEY_ID, name=name)


class FakeModelRepository(ModelRepository):
    async def get_by_id(self, model_id: int) -> Model:
        return Model(id=model_id, name=f"Model_{model_id}", option=f"Option_{model_id}")

    async def get_by_natural_key(self, name: str, option: str) -> Model:
        return Model(id=NATURAL_KEY_ID, name=name, option=option)


class FakeRateRepository(RateRepository):
    async def get_by_id(self, rate_id: int) -> Rate:
        return Rate(
            id=rate_id,
            type=f"Type_{rate_id}",
            component_id=rate_id,
            option=f"Option_{rate_id}",
        )

    async def get_by_natural_key(self, rate_type: str, component_id: int, option: str) -> Rate:
        return Rate(id=NATURAL_KEY_ID, type=rate_type, component_id=component_id, option=option)
