"""Shared fixtures: health modules and an app wrapped by the middleware."""

from collections.abc import Callable

import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

from kube_health import HealthCheckMiddleware, HealthResult


class HealthErrorMessage:
    def basic(self):
        return HealthResult.error("basic")

    def startup(self):
        return HealthResult.error("startup")

    def liveness(self):
        return HealthResult.error("liveness")

    def readiness(self):
        return HealthResult.error("readiness")


class HealthErrorCode:
    async def basic(self):
        return HealthResult.error("basic", status_code=500)

    async def startup(self):
        return HealthResult.error("startup", status_code=500)

    async def liveness(self):
        return HealthResult.error("liveness", status_code=500)

    async def readiness(self):
        return HealthResult.error("readiness", status_code=500)


def build_app(**middleware_options) -> FastAPI:
    """App answering every path with ``Passthrough`` behind the health middleware."""
    app = FastAPI()

    @app.api_route("/{path:path}", methods=["GET", "POST", "HEAD"])
    async def passthrough(path: str) -> PlainTextResponse:
        return PlainTextResponse("Passthrough")

    app.add_middleware(HealthCheckMiddleware, **middleware_options)
    return app


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    def factory(**middleware_options) -> TestClient:
        return TestClient(build_app(**middleware_options))

    return factory


@pytest.fixture
def error_message_module() -> HealthErrorMessage:
    return HealthErrorMessage()


@pytest.fixture
def error_code_module() -> HealthErrorCode:
    return HealthErrorCode()
