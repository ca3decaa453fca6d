"""Request payload contracts for the service and adapter boundaries.

Every field is optional: a request may name a record by ``id`` or by its
natural key. ``to_lookup()`` picks the strategy, so callers never inspect
nullable fields themselves.

Precedence: ``id`` always wins. Without an ``id`` every natural-key field
must be present, otherwise :class:`InvalidInputError` is raised.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tplresolve.domain.errors import InvalidInputError
from tplresolve.domain.lookups import (
    ById,
    ModelKey,
    ModelLookup,
    ProductKey,
    ProductLookup,
    RateKey,
    RateLookup,
    is_present,
)


def _require(resource: str, **fields: object) -> None:
    missing = [name for name, value in fields.items() if not is_present(value)]
    if missing:
        msg = (
            f"{resource} request needs an id or a complete natural key "
            f"(missing: {', '.join(missing)})"
        )
        raise InvalidInputError(msg, detail={"missing": missing})


class _LookupRequest(BaseModel):
    """Fields shared by every request: the optional identifier."""

    id: int | None = None

    def ignored_fields(self) -> list[str]:
        """Natural-key fields supplied alongside an ``id``, which wins over them."""
        if self.id is None:
            return []
        supplied = self.model_dump(by_alias=True, exclude={"id"})
        return [name for name, value in supplied.items() if is_present(value)]


class ProductRequest(_LookupRequest):
    """Payload for ``resolve_product``."""

    name: str | None = None

    def to_lookup(self) -> ProductLookup:
        if self.id is not None:
            return ById(self.id)
        _require("Product", name=self.name)
        assert self.name is not None
        return ProductKey(name=self.name)


class ModelRequest(_LookupRequest):
    """Payload for ``resolve_model``."""

    name: str | None = None
    option: str | None = None

    def to_lookup(self) -> ModelLookup:
        if self.id is not None:
            return ById(self.id)
        _require("Model", name=self.name, option=self.option)
        assert self.name is not None and self.option is not None
        return ModelKey(name=self.name, option=self.option)


class RateRequest(_LookupRequest):
    """Payload for ``resolve_rate``. Accepts ``componentId`` or ``component_id``."""

    model_config = ConfigDict(populate_by_name=True)

    type: str | None = None
    component_id: int | None = Field(default=None, alias="componentId")
    option: str | None = None

    def to_lookup(self) -> RateLookup:
        if self.id is not None:
            return ById(self.id)
        _require("Rate", type=self.type, componentId=self.component_id, option=self.option)
        assert self.type is not None and self.component_id is not None and self.option is not None
        return RateKey(type=self.type, component_id=self.component_id, option=self.option)


AnyRequest = ProductRequest | ModelRequest | RateRequest
