"""Kubernetes-style health endpoints for ASGI applications."""

from kube_health.checks import ChecksHealth, DefaultHealth, HealthModule, run_probe
from kube_health.config import HealthCheckSettings, HealthPaths
from kube_health.middleware import HealthCheckMiddleware
from kube_health.results import OK, HealthResult
from kube_health.router import create_health_router
from kube_health.sidecar import create_app

__all__ = [
    "OK",
    "ChecksHealth",
    "DefaultHealth",
    "HealthCheckMiddleware",
    "HealthCheckSettings",
    "HealthModule",
    "HealthPaths",
    "HealthResult",
    "create_app",
    "create_health_router",
    "run_probe",
]
