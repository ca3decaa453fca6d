"""Catalog — the repository bundle handed to the resolver factory.

The catalog is the single data-access dependency of the service layer.
:meth:`Catalog.from_config` picks the backend named in ``[repository]``:

- ``fake``: synthesising repositories that answer every lookup.
- ``memory``: seeded repositories that raise ``RecordNotFoundError`` on a miss.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tplresolve.infrastructure.repositories.fake import (
    FakeModelRepository,
    FakeProductRepository,
    FakeRateRepository,
)
from tplresolve.infrastructure.repositories.memory import (
    InMemoryModelRepository,
    InMemoryProductRepository,
    InMemoryRateRepository,
    SeedData,
    load_seed,
)

if TYPE_CHECKING:
    from tplresolve.config.models import RepositoryConfig
    from tplresolve.infrastructure.repositories.ports import (
        ModelRepository,
        ProductRepository,
        RateRepository,
    )

logger = logging.getLogger(__name__)

BACKENDS = ("fake", "memory")


@dataclass(frozen=True)
class Catalog:
    """One repository per record type."""

    products: ProductRepository = field(default_factory=FakeProductRepository)
    models: ModelRepository = field(default_factory=FakeModelRepository)
    rates: RateRepository = field(default_factory=FakeRateRepository)

    @classmethod
    def fake(cls) -> Catalog:
        return cls()

    @classmethod
    def in_memory(cls, seed: SeedData | None = None) -> Catalog:
        seed = seed or SeedData()
        return cls(
            products=InMemoryProductRepository(seed.products),
            models=InMemoryModelRepository(seed.models),
            rates=InMemoryRateRepository(seed.rates),
        )

    @classmethod
    def from_config(cls, config: RepositoryConfig) -> Catalog:
        """Build the catalog for the configured backend.

        Raises ValueError for an unknown backend name.
        """
        if config.backend == "fake":
            logger.debug("Using fake repositories")
            return cls.fake()
        if config.backend == "memory":
            seed = load_seed(config.seed_path) if config.seed_path else None
            logger.debug("Using in-memory repositories (seed=%s)", config.seed_path)
            return cls.in_memory(seed)
        msg = f"Unknown repository backend: {config.backend!r}. Expected one of {BACKENDS}"
        raise ValueError(msg)
