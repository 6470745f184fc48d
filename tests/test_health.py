"""Health endpoint tests."""

from contextlib import asynccontextmanager

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from parlance.interfaces.api.resources.health import HealthResource


def _client(factory) -> TestClient:
    app = App()
    health = HealthResource(factory)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client(uow_factory) -> TestClient:
    """Create test client with health endpoints."""
    return _client(uow_factory)


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200 when a unit of work opens."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_not_ready_when_database_unavailable() -> None:
    @asynccontextmanager
    async def broken_factory():
        raise ConnectionError("database down")
        yield

    result = _client(broken_factory).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
