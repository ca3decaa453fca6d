"""TemplateService — the request handler behind every transport.

Pipeline: COERCE → LOOKUP → RESOLVE → RESPOND

Domain errors are translated into :class:`ServiceError` here and nowhere
else; the HTTP adapter and the CLI only ever see :class:`ServiceResult`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, assert_never

from pydantic import BaseModel, ValidationError

from tplresolve.domain.errors import InvalidInputError, TemplateError
from tplresolve.domain.lookups import ById, describe
from tplresolve.domain.types import ResourceType
from tplresolve.services.contracts import (
    AnyRequest,
    ModelRequest,
    ProductRequest,
    RateRequest,
)
from tplresolve.services.resolvers import (
    AnyResolver,
    ModelResolver,
    ProductResolver,
    RateResolver,
)
from tplresolve.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tplresolve.domain.lookups import ModelLookup, ProductLookup, RateLookup
    from tplresolve.domain.records import Record
    from tplresolve.services.factory import ResolverFactory

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any] | AnyRequest

T = TypeVar("T", bound=BaseModel)


def _coerce(model_cls: type[T], payload: Payload) -> T:
    """Validate *payload* into *model_cls*, passing matching instances through."""
    if isinstance(payload, model_cls):
        return payload
    if isinstance(payload, BaseModel):
        msg = f"Expected {model_cls.__name__}, got {type(payload).__name__}"
        raise InvalidInputError(msg)
    return model_cls.model_validate(dict(payload))


def _failure(op: str, exc: TemplateError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
    )


class TemplateService:
    """Resolves template requests through a :class:`ResolverFactory`."""

    def __init__(self, factory: ResolverFactory) -> None:
        self._factory = factory

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def resolve_product(self, request: ProductRequest | Mapping[str, Any]) -> ServiceResult:
        return await self.resolve(ResourceType.PRODUCT, request)

    async def resolve_model(self, request: ModelRequest | Mapping[str, Any]) -> ServiceResult:
        return await self.resolve(ResourceType.MODEL, request)

    async def resolve_rate(self, request: RateRequest | Mapping[str, Any]) -> ServiceResult:
        return await self.resolve(ResourceType.RATE, request)

    async def resolve(self, resource_type: ResourceType | str, payload: Payload) -> ServiceResult:
        """Resolve *payload* as a request for *resource_type*.

        Failure codes: ``INVALID_INPUT``, ``UNSUPPORTED_TYPE``, ``NOT_FOUND``.
        """
        op = f"resolve_{resource_type}".lower()
        try:
            resolver = self._factory.get_resolver(resource_type)
            op = f"resolve_{resolver.resource_type}"
            record, lookup, ignored = await self._dispatch(resolver, payload)
        except ValidationError as exc:
            logger.debug("%s rejected payload: %s", op, exc)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=InvalidInputError.code,
                    message="Malformed request payload",
                    detail={"errors": exc.errors(include_url=False, include_context=False)},
                ),
            )
        except TemplateError as exc:
            logger.debug("%s failed: %s %s", op, exc.code, exc.message)
            return _failure(op, exc)

        warnings: list[str] = []
        if ignored:
            warnings.append(f"Ignored {', '.join(ignored)} because an id was given")

        return ServiceResult(
            ok=True,
            op=op,
            warnings=warnings,
            data=record.model_dump(mode="json", by_alias=True),
            meta={
                "strategy": "id" if isinstance(lookup, ById) else "natural_key",
                "lookup": describe(lookup),
            },
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    async def _dispatch(
        resolver: AnyResolver, payload: Payload
    ) -> tuple[Record, ProductLookup | ModelLookup | RateLookup, list[str]]:
        match resolver:
            case ProductResolver():
                product_request = _coerce(ProductRequest, payload)
                product_lookup = product_request.to_lookup()
                product = await resolver.resolve_lookup(product_lookup)
                return product, product_lookup, product_request.ignored_fields()
            case ModelResolver():
                model_request = _coerce(ModelRequest, payload)
                model_lookup = model_request.to_lookup()
                model = await resolver.resolve_lookup(model_lookup)
                return model, model_lookup, model_request.ignored_fields()
            case RateResolver():
                rate_request = _coerce(RateRequest, payload)
                rate_lookup = rate_request.to_lookup()
                rate = await resolver.resolve_lookup(rate_lookup)
                return rate, rate_lookup, rate_request.ignored_fields()
            case _:
                assert_never(resolver)
