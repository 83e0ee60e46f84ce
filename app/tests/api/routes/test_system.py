from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import limiter, setup_rate_limiter
from api.routes.system import router as system_router
from modules.group_manager import service


def create_app():
    app = FastAPI()
    setup_rate_limiter(app)
    app.include_router(system_router)
    return app


@pytest.fixture
def client():
    limiter.reset()
    return TestClient(create_app())


def test_get_version_unknown(client):
    response = client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "Unknown"}


@patch("core.config.settings.GIT_SHA", "foo")
def test_get_version_known(client):
    response = client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "foo"}


def test_health_without_host(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "host": False}


def test_health_with_host(client):
    service.set_sakai_service(MagicMock())

    response = client.get("/health")

    assert response.json() == {"status": "ok", "host": True}
