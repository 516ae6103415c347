"""ASGI middleware serving Kubernetes-style health endpoints.

Requests whose path equals one of the configured health paths are answered
directly from the health module; everything else reaches the wrapped app.
Add it outermost so probe traffic skips request logging::

    app.add_middleware(
        HealthCheckMiddleware,
        module=AppHealth(),
        base_path="/healthz",
    )

Matching Kubernetes probe configuration::

    startupProbe:
      httpGet: {path: /healthz/startup, port: http}
    livenessProbe:
      httpGet: {path: /healthz/liveness, port: http}
    readinessProbe:
      httpGet: {path: /healthz/readiness, port: http}
"""

from __future__ import annotations

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

from kube_health.checks import PROBES, DefaultHealth, HealthModule, Probe, run_probe
from kube_health.config import DEFAULT_BASE_PATH, HealthCheckSettings, HealthPaths, resolve_paths
from kube_health.results import HealthResult

log = structlog.get_logger()


def render_result(result: HealthResult) -> Response:
    """Translate a probe result into an HTTP response."""
    return PlainTextResponse(result.body, status_code=result.status_code)


class HealthCheckMiddleware(BaseHTTPMiddleware):
    """Answers basic, startup, liveness and readiness probes.

    Args:
        app: The wrapped ASGI application.
        module: Health module; defaults to ``DefaultHealth``.
        base_path: Path of the basic probe, also the prefix for unset paths.
        startup_path: Defaults to ``<base_path>/startup``.
        liveness_path: Defaults to ``<base_path>/liveness``.
        readiness_path: Defaults to ``<base_path>/readiness``.
        settings: Optional settings seeding the paths; keyword
            arguments take precedence.
    """

    def __init__(
        self,
        app: ASGIApp,
        module: HealthModule | None = None,
        base_path: str | None = None,
        startup_path: str | None = None,
        liveness_path: str | None = None,
        readiness_path: str | None = None,
        settings: HealthCheckSettings | None = None,
    ) -> None:
        super().__init__(app)
        if settings is not None:
            base_path = base_path if base_path is not None else settings.base_path
            startup_path = startup_path if startup_path is not None else settings.startup_path
            liveness_path = liveness_path if liveness_path is not None else settings.liveness_path
            readiness_path = readiness_path if readiness_path is not None else settings.readiness_path

        self.module: HealthModule = module if module is not None else DefaultHealth()
        self.paths: HealthPaths = resolve_paths(
            base_path if base_path is not None else DEFAULT_BASE_PATH,
            startup_path,
            liveness_path,
            readiness_path,
        )

    def match(self, path: str) -> Probe | None:
        """Return the probe served at ``path``, checked in declaration order."""
        for probe, probe_path in zip(PROBES, self.paths):
            if path == probe_path:
                return probe
        return None

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.scope["path"]
        probe = self.match(path)
        if probe is None:
            return await call_next(request)

        result = await run_probe(self.module, probe)
        if result.healthy:
            log.debug("health_probe_ok", probe=probe, path=path)
        else:
            log.warning(
                "health_probe_failed",
                probe=probe,
                path=path,
                status_code=result.status_code,
                reason=result.body,
            )
        return render_result(result)
