"""Reusable health-check router.

Router-based alternative to ``HealthCheckMiddleware`` for applications that
prefer to declare the probe endpoints alongside their other routes.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from kube_health.checks import PROBES, DefaultHealth, HealthModule, Probe, run_probe
from kube_health.config import DEFAULT_BASE_PATH, resolve_paths
from kube_health.middleware import render_result


def create_health_router(
    module: HealthModule | None = None,
    *,
    base_path: str = DEFAULT_BASE_PATH,
    startup_path: str | None = None,
    liveness_path: str | None = None,
    readiness_path: str | None = None,
) -> APIRouter:
    """Build a router exposing the four health probes.

    Args:
        module: Health module answering the probes; defaults to ``DefaultHealth``.
        base_path: Path of the basic probe and prefix for unset paths.
        startup_path: Startup probe path override.
        liveness_path: Liveness probe path override.
        readiness_path: Readiness probe path override.

    Returns:
        A FastAPI ``APIRouter`` with one GET route per probe.
    """
    router = APIRouter(tags=["health"])
    health = module if module is not None else DefaultHealth()
    paths = resolve_paths(base_path, startup_path, liveness_path, readiness_path)

    for probe, path in zip(PROBES, paths):
        router.add_api_route(
            path,
            _endpoint(health, probe),
            methods=["GET"],
            name=f"health_{probe}",
            summary=f"{probe.capitalize()} probe",
            response_class=PlainTextResponse,
        )

    return router


def _endpoint(module: HealthModule, probe: Probe):
    async def endpoint() -> PlainTextResponse:
        return render_result(await run_probe(module, probe))

    endpoint.__name__ = f"{probe}_probe"
    return endpoint
