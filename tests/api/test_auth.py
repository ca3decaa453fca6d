"""Tests for the optional X-API-Key guard."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tplresolve.api.app import create_app
from tplresolve.config.models import ApiConfig
from tplresolve.config.settings import TplSettings
from tplresolve.services.factory import ResolverFactory


@pytest.fixture
def client(fake_factory: ResolverFactory) -> TestClient:
    settings = TplSettings(api=ApiConfig(api_key="s3cret"))
    return TestClient(create_app(factory=fake_factory, settings=settings))


class TestApiKey:
    def test_missing_key_rejected(self, client: TestClient) -> None:
        resp = client.post("/templates/product", json={"id": 1})
        assert resp.status_code == 401

    def test_wrong_key_rejected(self, client: TestClient) -> None:
        resp = client.post("/templates/product", json={"id": 1}, headers={"X-API-Key": "nope"})
        assert resp.status_code == 401

    def test_correct_key_accepted(self, client: TestClient) -> None:
        resp = client.post("/templates/product", json={"id": 1}, headers={"X-API-Key": "s3cret"})
        assert resp.status_code == 200

    def test_health_is_open(self, client: TestClient) -> None:
        assert client.get("/health").status_code == 200

    def test_no_key_configured_allows_all(self, fake_factory: ResolverFactory) -> None:
        client = TestClient(create_app(factory=fake_factory, settings=TplSettings()))
        assert client.post("/templates/product", json={"id": 1}).status_code == 200
