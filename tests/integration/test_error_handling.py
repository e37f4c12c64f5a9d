"""
Testes de integração: rate limiting (slowapi) e erros não tratados.
"""
import pytest
from fastapi.testclient import TestClient

from src.config import settings
from src.presentation.api.dependencies import Container
from src.presentation.api.main import app
from src.presentation.api.rate_limit import limiter

API = "/api/v1"
FAILING_PATH = f"{API}/_failing"


@pytest.fixture
def rate_limited_client(client):
    """Cliente com o limiter ligado e contadores zerados."""
    limiter.reset()
    limiter.enabled = True
    try:
        yield client
    finally:
        limiter.enabled = False
        limiter.reset()


@pytest.fixture
def failing_client():
    """App com uma rota que lança exceção não tratada."""
    async def failing_route():
        raise RuntimeError("unexpected failure")

    app.add_api_route(FAILING_PATH, failing_route, methods=["GET"])
    Container.reset()
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        app.router.routes[:] = [
            route for route in app.router.routes
            if getattr(route, "path", None) != FAILING_PATH
        ]
        Container.reset()


class TestRateLimiting:

    def test_login_is_limited(self, rate_limited_client):
        allowed = int(settings.auth_rate_limit.split("/")[0])
        credentials = {"email": "demo@clueso.io", "password": "secret"}

        statuses = [
            rate_limited_client.post(f"{API}/auth/login", json=credentials).status_code
            for _ in range(allowed)
        ]
        blocked = rate_limited_client.post(f"{API}/auth/login", json=credentials)

        assert statuses == [200] * allowed
        assert blocked.status_code == 429
        body = blocked.json()
        assert body["success"] is False
        assert body["code"] == "RATE_LIMITED"
        assert body["error"] == "Too many requests"

    def test_limit_is_per_route(self, rate_limited_client):
        allowed = int(settings.auth_rate_limit.split("/")[0])
        credentials = {"email": "demo@clueso.io", "password": "secret"}
        for _ in range(allowed + 1):
            rate_limited_client.post(f"{API}/auth/login", json=credentials)

        assert rate_limited_client.get(f"{API}/health").status_code == 200

    def test_disabled_limiter_never_blocks(self, client):
        allowed = int(settings.auth_rate_limit.split("/")[0])
        credentials = {"email": "demo@clueso.io", "password": "secret"}

        statuses = {
            client.post(f"{API}/auth/login", json=credentials).status_code
            for _ in range(allowed + 5)
        }

        assert statuses == {200}


class TestUnhandledErrors:

    def test_unhandled_exception_returns_500_envelope(self, failing_client):
        response = failing_client.get(FAILING_PATH)

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal server error",
            "code": "INTERNAL_ERROR"
        }

    def test_app_keeps_serving_after_failure(self, failing_client):
        failing_client.get(FAILING_PATH)
        assert failing_client.get(f"{API}/health").status_code == 200
