"""Template resolvers — turn a request into exactly one record.

Each resolver owns one repository port and dispatches on the lookup
variant built from the request. ``ById`` always wins; natural keys are
used only when no id was given. Errors propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, assert_never

from tplresolve.domain.lookups import ById, ModelKey, ProductKey, RateKey
from tplresolve.domain.types import ResourceType

if TYPE_CHECKING:
    from tplresolve.domain.lookups import ModelLookup, ProductLookup, RateLookup
    from tplresolve.domain.records import Model, Product, Rate
    from tplresolve.infrastructure.repositories.ports import (
        ModelRepository,
        ProductRepository,
        RateRepository,
    )
    from tplresolve.services.contracts import ModelRequest, ProductRequest, RateRequest

logger = logging.getLogger(__name__)


class ProductResolver:
    """Resolves :class:`ProductRequest` into a :class:`Product`."""

    resource_type: ClassVar[ResourceType] = ResourceType.PRODUCT

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def resolve(self, request: ProductRequest) -> Product:
        return await self.resolve_lookup(request.to_lookup())

    async def resolve_lookup(self, lookup: ProductLookup) -> Product:
        logger.debug("Resolving product via %s", lookup)
        match lookup:
            case ById(id=product_id):
                return await self._repository.get_by_id(product_id)
            case ProductKey(name=name):
                return await self._repository.get_by_natural_key(name)
            case _:
                assert_never(lookup)


class ModelResolver:
    """Resolves :class:`ModelRequest` into a :class:`Model`."""

    resource_type: ClassVar[ResourceType] = ResourceType.MODEL

    def __init__(self, repository: ModelRepository) -> None:
        self._repository = repository

    async def resolve(self, request: ModelRequest) -> Model:
        return await self.resolve_lookup(request.to_lookup())

    async def resolve_lookup(self, lookup: ModelLookup) -> Model:
        logger.debug("Resolving model via %s", lookup)
        match lookup:
            case ById(id=model_id):
                return await self._repository.get_by_id(model_id)
            case ModelKey(name=name, option=option):
                return await self._repository.get_by_natural_key(name, option)
            case _:
                assert_never(lookup)


class RateResolver:
    """Resolves :class:`RateRequest` into a :class:`Rate`."""

    resource_type: ClassVar[ResourceType] = ResourceType.RATE

    def __init__(self, repository: RateRepository) -> None:
        self._repository = repository

    async def resolve(self, request: RateRequest) -> Rate:
        return await self.resolve_lookup(request.to_lookup())

    async def resolve_lookup(self, lookup: RateLookup) -> Rate:
        logger.debug("Resolving rate via %s", lookup)
        match lookup:
            case ById(id=rate_id):
                return await self._repository.get_by_id(rate_id)
            case RateKey(type=rate_type, component_id=component_id, option=option):
                return await self._repository.get_by_natural_key(rate_type, component_id, option)
            case _:
                assert_never(lookup)


AnyResolver = ProductResolver | ModelResolver | RateResolver
