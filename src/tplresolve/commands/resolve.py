"""Command group: resolve a Product, Model or Rate template."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import click

from tplresolve.commands._base import TplGroup
from tplresolve.domain.types import ResourceType

if TYPE_CHECKING:
    from tplresolve.commands._context import AppContext


def _run(app: AppContext, resource_type: ResourceType, payload: dict[str, Any]) -> None:
    """Resolve *payload* and emit the result. Unset options are dropped."""
    request = {key: value for key, value in payload.items() if value is not None}
    result = asyncio.run(app.service.resolve(resource_type, request))
    app.emit(result)


@click.group(
    cls=TplGroup,
    examples="""\
  tplresolve resolve product --id 1
  tplresolve resolve product --name Widget
  tplresolve resolve model --name Basic --option Call
  tplresolve resolve rate --type Fixed --component-id 10 --option Call
  tplresolve --json resolve rate --id 3""",
)
def resolve() -> None:
    """Resolve a template by id or by natural key."""


@resolve.command(
    examples="  tplresolve resolve product --id 1\n  tplresolve resolve product --name Widget"
)
@click.option("--id", "record_id", type=int, default=None, help="Product id (wins over --name).")
@click.option("--name", default=None, help="Product name.")
@click.pass_obj
def product(app: AppContext, record_id: int | None, name: str | None) -> None:
    """Resolve a product."""
    _run(app, ResourceType.PRODUCT, {"id": record_id, "name": name})


@resolve.command(examples="  tplresolve resolve model --name Basic --option Call")
@click.option("--id", "record_id", type=int, default=None, help="Model id (wins over the key).")
@click.option("--name", default=None, help="Model name.")
@click.option("--option", default=None, help="Model option.")
@click.pass_obj
def model(app: AppContext, record_id: int | None, name: str | None, option: str | None) -> None:
    """Resolve a model."""
    _run(app, ResourceType.MODEL, {"id": record_id, "name": name, "option": option})


@resolve.command(examples="  tplresolve resolve rate --type Fixed --component-id 10 --option Call")
@click.option("--id", "record_id", type=int, default=None, help="Rate id (wins over the key).")
@click.option("--type", "rate_type", default=None, help="Rate type.")
@click.option("--component-id", type=int, default=None, help="Component the rate applies to.")
@click.option("--option", default=None, help="Rate option.")
@click.pass_obj
def rate(
    app: AppContext,
    record_id: int | None,
    rate_type: str | None,
    component_id: int | None,
    option: str | None,
) -> None:
    """Resolve a rate."""
    _run(
        app,
        ResourceType.RATE,
        {"id": record_id, "type": rate_type, "componentId": component_id, "option": option},
    )
