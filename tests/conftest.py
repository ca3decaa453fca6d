"""Shared pytest fixtures for tplresolve tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tplresolve.domain.records import Model, Product, Rate
from tplresolve.infrastructure.catalog import Catalog
from tplresolve.infrastructure.repositories.memory import SeedData
from tplresolve.services.factory import ResolverFactory
from tplresolve.services.templates import TemplateService

SEED = SeedData(
    products=[Product(id=1, name="Widget"), Product(id=2, name="Gadget")],
    models=[Model(id=7, name="Basic", option="Call")],
    rates=[Rate(id=3, type="Fixed", component_id=10, option="Call")],
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_factory() -> ResolverFactory:
    """Factory wired to the synthesising repositories."""
    return ResolverFactory.from_catalog(Catalog.fake())


@pytest.fixture
def seeded_factory() -> ResolverFactory:
    """Factory wired to in-memory repositories holding ``SEED``."""
    return ResolverFactory.from_catalog(Catalog.in_memory(SEED))


@pytest.fixture
def service(fake_factory: ResolverFactory) -> TemplateService:
    return TemplateService(fake_factory)


@pytest.fixture
def seeded_service(seeded_factory: ResolverFactory) -> TemplateService:
    return TemplateService(seeded_factory)


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """``SEED`` written to a JSON file in wire format."""
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(SEED.model_dump(mode="json", by_alias=True)), encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config discovery overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TPLRESOLVE_CONFIG", raising=False)
    monkeypatch.delenv("TPLRESOLVE_REPOSITORY__BACKEND", raising=False)
    monkeypatch.delenv("TPLRESOLVE_REPOSITORY__SEED_PATH", raising=False)
    monkeypatch.delenv("TPLRESOLVE_API__API_KEY", raising=False)
