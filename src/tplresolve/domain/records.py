"""Domain records returned by resolution.

Records are frozen value objects: equality is by value and nothing mutates
them after a repository produces one. ``Rate.component_id`` is serialised
as ``componentId`` on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A sellable product template."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class Model(BaseModel):
    """A product model variant, qualified by an option."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    option: str


class Rate(BaseModel):
    """A rate applied to a component."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    type: str
    component_id: int = Field(alias="componentId")
    option: str


Record = Product | Model | Rate
