"""
Configurações e fixtures pytest.

As variáveis de ambiente precisam ser definidas antes do primeiro import de
`src.config`, por isso ficam no topo do conftest.
"""
import os
import tempfile

os.environ["ENABLE_RATE_LIMIT"] = "false"
os.environ["LOG_FILE"] = ""
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CLEANUP_ON_STARTUP"] = "false"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="clueso-uploads-")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.presentation.api.dependencies import Container  # noqa: E402
from src.presentation.api.main import app  # noqa: E402

API = "/api/v1"


@pytest.fixture
def client():
    """TestClient com singletons zerados (feedback, vídeos e tokens em memória)."""
    Container.reset()
    with TestClient(app) as test_client:
        yield test_client
    Container.reset()


@pytest.fixture
def login(client):
    """Faz login e retorna o payload {user, tokens}."""
    def _login(email: str = "demo@clueso.io", password: str = "secret") -> dict:
        response = client.post(f"{API}/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return response.json()["data"]
    return _login


@pytest.fixture
def auth_headers(login):
    """Header Authorization com um access token válido."""
    tokens = login()["tokens"]
    return {"Authorization": f"Bearer {tokens['accessToken']}"}
