"""FastAPI application exposing template resolution over HTTP.

Endpoints:
    POST /templates/product  -> Product
    POST /templates/model    -> Model
    POST /templates/rate     -> Rate
    GET  /health

Failures use the ServiceResult envelope ``{"ok": false, "op", "error"}``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from tplresolve import __version__
from tplresolve.api.auth import api_key_guard
from tplresolve.config.settings import TplSettings
from tplresolve.domain.records import Model, Product, Rate
from tplresolve.infrastructure.catalog import Catalog
from tplresolve.services.contracts import ModelRequest, ProductRequest, RateRequest
from tplresolve.services.factory import ResolverFactory
from tplresolve.services.result import ServiceError, ServiceResult
from tplresolve.services.templates import TemplateService

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[str, int] = {
    "INVALID_INPUT": 400,
    "NOT_FOUND": 404,
    "UNSUPPORTED_TYPE": 500,
}


class ErrorBody(BaseModel):
    """Failure envelope returned with a 4xx/5xx status."""

    ok: bool = False
    op: str
    error: ServiceError


_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorBody, "description": "Neither id nor a complete natural key"},
    404: {"model": ErrorBody, "description": "No matching record"},
}


def to_http_response(result: ServiceResult) -> JSONResponse | dict[str, Any]:
    """Return the record body on success, or an error envelope with its status."""
    if result.ok:
        return result.data
    assert result.error is not None
    status = STATUS_BY_CODE.get(result.error.code, 500)
    body = ErrorBody(op=result.op, error=result.error)
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


def create_app(
    factory: ResolverFactory | None = None,
    settings: TplSettings | None = None,
) -> FastAPI:
    """Build the application.

    *factory* defaults to one wired from ``settings.repository``; *settings*
    defaults to discovery from the working directory.
    """
    settings = settings or TplSettings.from_cli()
    if factory is None:
        factory = ResolverFactory.from_catalog(Catalog.from_config(settings.repository))
    service = TemplateService(factory)
    require_api_key = api_key_guard(settings.api.api_key)

    app = FastAPI(title="tplresolve - Template Resolution", version=__version__)

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return {"ok": True, "resource_types": [str(t) for t in factory.supported_types]}

    @app.post(
        "/templates/product",
        response_model=Product,
        responses=_ERROR_RESPONSES,
        dependencies=[Depends(require_api_key)],
    )
    async def resolve_product(payload: ProductRequest):
        return to_http_response(await service.resolve_product(payload))

    @app.post(
        "/templates/model",
        response_model=Model,
        responses=_ERROR_RESPONSES,
        dependencies=[Depends(require_api_key)],
    )
    async def resolve_model(payload: ModelRequest):
        return to_http_response(await service.resolve_model(payload))

    @app.post(
        "/templates/rate",
        response_model=Rate,
        responses=_ERROR_RESPONSES,
        dependencies=[Depends(require_api_key)],
    )
    async def resolve_rate(payload: RateRequest):
        return to_http_response(await service.resolve_rate(payload))

    logger.debug("Created app with resolvers for %s", factory.supported_types)
    return app
