"""Lookup strategies — how a request identifies exactly one record.

A request is turned into one of these variants at the transport boundary.
Resolvers then ``match`` on the variant instead of probing nullable fields.

INVARIANT: when a request carries an ``id``, the lookup is always ``ById``,
whatever else the request contains.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ById:
    """Lookup by numeric identifier."""

    id: int


@dataclass(frozen=True)
class ProductKey:
    """Natural key for a product."""

    name: str


@dataclass(frozen=True)
class ModelKey:
    """Natural key for a model."""

    name: str
    option: str


@dataclass(frozen=True)
class RateKey:
    """Natural key for a rate."""

    type: str
    component_id: int
    option: str


ProductLookup = ById | ProductKey
ModelLookup = ById | ModelKey
RateLookup = ById | RateKey


def describe(lookup: ById | ProductKey | ModelKey | RateKey) -> dict[str, Any]:
    """Flatten a lookup into a dict for error details and logs."""
    return asdict(lookup)


def is_present(value: object) -> bool:
    """Whether a natural-key field counts as supplied.

    Strings must be non-blank; any other non-None value counts
    (``0`` is a valid component id).
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True
