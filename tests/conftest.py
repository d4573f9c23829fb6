import os
import pathlib
import sys
import tempfile

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))
os.environ.setdefault(
    "LOG_DIR", os.path.join(tempfile.gettempdir(), "crestastream-mock-test-logs")
)

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from crestastream_mock.app_logging import init_logging
from crestastream_mock.config import Settings
from crestastream_mock.main import create_app
from crestastream_mock.services import ServiceContainer

ADMIN_EMAIL = "admin@crestastream.com"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def services() -> ServiceContainer:
    """Fresh demo state: five conversations, three agents, three users."""
    return ServiceContainer.build()


@pytest.fixture
def empty_services() -> ServiceContainer:
    return ServiceContainer.build(seed_demo_data=False)


@pytest.fixture
def client(services):
    app = create_app(Settings(), services)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client(empty_services):
    app = create_app(Settings(), empty_services)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def login(client):
    def _login(email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> dict:
        resp = client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _login


@pytest.fixture
def app_factory(monkeypatch):
    def _create_app(log_dir, log_request_bodies: bool = False) -> FastAPI:
        """Create a bare FastAPI app with logging initialised."""
        monkeypatch.setenv("LOG_DIR", str(log_dir))
        if log_request_bodies:
            monkeypatch.setenv("LOG_REQUEST_BODIES", "true")
        app = FastAPI()

        @app.post("/echo")
        async def echo(request: Request):
            return await request.json()

        init_logging(app)
        return app

    return _create_app
