"""Tests for the router-based health endpoints."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from kube_health import ChecksHealth, create_health_router


def make_client(**kwargs) -> TestClient:
    app = FastAPI()
    app.include_router(create_health_router(**kwargs))
    return TestClient(app)


def test_default_routes():
    client = make_client()

    for path in ("/healthz", "/healthz/startup", "/healthz/liveness", "/healthz/readiness"):
        response = client.get(path)
        assert response.status_code == 200
        assert response.text == "OK"


def test_custom_paths():
    client = make_client(base_path="/status", readiness_path="/ready")

    assert client.get("/status/liveness").status_code == 200
    assert client.get("/ready").status_code == 200
    assert client.get("/status/readiness").status_code == 404


def test_failing_module():
    async def database() -> bool:
        return False

    client = make_client(module=ChecksHealth(readiness_checks=[database]))
    response = client.get("/healthz/readiness")

    assert response.status_code == 503
    assert response.text == "database: failing"
    assert client.get("/healthz/liveness").status_code == 200


def test_only_get_routes():
    assert make_client().post("/healthz").status_code == 405
