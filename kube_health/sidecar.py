"""Standalone HTTP health sidecar.

A minimal FastAPI app exposing only the health endpoints, for processes
that do not speak HTTP themselves but still need Kubernetes probes.
"""

from __future__ import annotations

import structlog
import uvicorn
from fastapi import FastAPI

from kube_health.checks import HealthModule
from kube_health.config import HealthCheckSettings
from kube_health.logging import setup_logging
from kube_health.middleware import HealthCheckMiddleware

log = structlog.get_logger()


def create_app(
    settings: HealthCheckSettings | None = None,
    module: HealthModule | None = None,
) -> FastAPI:
    """Construct the sidecar app; any non-health path answers 404."""
    settings = settings or HealthCheckSettings()

    application = FastAPI(
        title="Health Sidecar",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.add_middleware(HealthCheckMiddleware, module=module, settings=settings)
    return application


def main() -> None:
    """Run the sidecar under uvicorn using environment configuration."""
    settings = HealthCheckSettings()
    paths = settings.resolve_paths()
    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
        quiet_paths=paths,
    )

    log.info(
        "health_sidecar starting",
        host=settings.host,
        port=settings.port,
        **paths._asdict(),
    )

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
