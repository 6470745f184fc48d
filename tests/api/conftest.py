"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from parlance.main import create_app

from tests.conftest import FakeUnitOfWork, make_factory


@pytest.fixture
def api_uow() -> FakeUnitOfWork:
    """One UoW shared by every request of a test."""
    return FakeUnitOfWork()


@pytest.fixture
def app(api_uow: FakeUnitOfWork):
    """Falcon ASGI app wired to in-memory repositories."""
    return create_app(make_factory(api_uow), default_base_locale="en")


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def project_id(client: TestClient) -> str:
    r = client.simulate_post(
        "/v1/projects",
        json={"name": "site", "targeted_locales": {"fr": True, "es": False}},
    )
    assert r.status_code == 201
    return r.json["id"]
