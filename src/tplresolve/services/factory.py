"""Resolver factory — maps a resource type to its resolver.

The factory holds one resolver per :class:`ResourceType`. Lookups by a
literal member are typed precisely through overloads; lookups by a runtime
tag return the :data:`AnyResolver` union, which callers narrow with
``match``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal, overload

from tplresolve.domain.errors import UnsupportedTypeError
from tplresolve.domain.types import ResourceType
from tplresolve.services.resolvers import (
    AnyResolver,
    ModelResolver,
    ProductResolver,
    RateResolver,
)

if TYPE_CHECKING:
    from tplresolve.infrastructure.catalog import Catalog

logger = logging.getLogger(__name__)


class ResolverFactory:
    """Registry of resolvers keyed by resource type.

    Usage::

        factory = ResolverFactory.from_catalog(Catalog.fake())
        resolver = factory.get_resolver(ResourceType.PRODUCT)
        product = await resolver.resolve(ProductRequest(id=1))
    """

    def __init__(
        self,
        *,
        product: ProductResolver | None = None,
        model: ModelResolver | None = None,
        rate: RateResolver | None = None,
    ) -> None:
        self._resolvers: dict[ResourceType, AnyResolver] = {}
        for resolver in (product, model, rate):
            if resolver is not None:
                self._resolvers[resolver.resource_type] = resolver

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> ResolverFactory:
        """Wire one resolver per repository in *catalog*."""
        return cls(
            product=ProductResolver(catalog.products),
            model=ModelResolver(catalog.models),
            rate=RateResolver(catalog.rates),
        )

    @property
    def supported_types(self) -> list[ResourceType]:
        return [t for t in ResourceType if t in self._resolvers]

    @overload
    def get_resolver(self, resource_type: Literal[ResourceType.PRODUCT]) -> ProductResolver: ...

    @overload
    def get_resolver(self, resource_type: Literal[ResourceType.MODEL]) -> ModelResolver: ...

    @overload
    def get_resolver(self, resource_type: Literal[ResourceType.RATE]) -> RateResolver: ...

    @overload
    def get_resolver(self, resource_type: ResourceType | str) -> AnyResolver: ...

    def get_resolver(self, resource_type: ResourceType | str) -> AnyResolver:
        """Return the resolver registered for *resource_type*.

        Raises :class:`UnsupportedTypeError` if the tag is not a
        :class:`ResourceType` or nothing is registered for it.
        """
        rtype = ResourceType.parse(resource_type)
        resolver = self._resolvers.get(rtype)
        if resolver is None:
            logger.warning("No resolver registered for %s", rtype)
            raise UnsupportedTypeError(rtype)
        return resolver
