"""Repository ports — read-only lookups, one port per record type.

Resolvers depend on these abstractions only. Implementations live beside
this module (:mod:`.fake`, :mod:`.memory`) or outside the package.

Both lookups raise :class:`~tplresolve.domain.errors.RecordNotFoundError`
when nothing matches; they never return ``None``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tplresolve.domain.records import Model, Product, Rate


class ProductRepository(ABC):
    """Read access to products."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product: ...

    @abstractmethod
    async def get_by_natural_key(self, name: str) -> Product: ...


class ModelRepository(ABC):
    """Read access to models."""

    @abstractmethod
    async def get_by_id(self, model_id: int) -> Model: ...

    @abstractmethod
    async def get_by_natural_key(self, name: str, option: str) -> Model: ...


class RateRepository(ABC):
    """Read access to rates."""

    @abstractmethod
    async def get_by_id(self, rate_id: int) -> Rate: ...

    @abstractmethod
    async def get_by_natural_key(self, rate_type: str, component_id: int, option: str) -> Rate:
        """Look up a rate by ``(type, component_id, option)``."""
