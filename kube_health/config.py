"""Health endpoint configuration using Pydantic Settings.

Values are loaded from ``HEALTHZ_*`` environment variables and .env files.
Sub-paths left unset are derived from ``base_path``.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_PATH = "/healthz"


class HealthPaths(NamedTuple):
    base: str
    startup: str
    liveness: str
    readiness: str


def resolve_paths(
    base_path: str = DEFAULT_BASE_PATH,
    startup_path: str | None = None,
    liveness_path: str | None = None,
    readiness_path: str | None = None,
) -> HealthPaths:
    """Fill in unset probe paths as ``<base_path>/<probe>``."""
    paths = HealthPaths(
        base=base_path,
        startup=startup_path if startup_path is not None else f"{base_path}/startup",
        liveness=liveness_path if liveness_path is not None else f"{base_path}/liveness",
        readiness=readiness_path if readiness_path is not None else f"{base_path}/readiness",
    )
    for path in paths:
        _check_path(path)
    return paths


def _check_path(path: str) -> str:
    if not path.startswith("/"):
        raise ValueError(f"health path must start with '/': {path!r}")
    return path


class HealthCheckSettings(BaseSettings):
    """Settings for the health endpoints and the standalone sidecar."""

    model_config = SettingsConfigDict(
        env_prefix="HEALTHZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Paths ─────────────────────────────────
    base_path: str = DEFAULT_BASE_PATH
    startup_path: str | None = None
    liveness_path: str | None = None
    readiness_path: str | None = None

    # ── General ───────────────────────────────
    environment: str = "development"
    log_level: str = "INFO"
    service_name: str = "kube_health"

    # ── Sidecar ───────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8080

    @field_validator("base_path", "startup_path", "liveness_path", "readiness_path")
    @classmethod
    def _validate_path(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_path(value)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def json_logs(self) -> bool:
        return self.is_production

    def resolve_paths(self) -> HealthPaths:
        return resolve_paths(
            self.base_path,
            self.startup_path,
            self.liveness_path,
            self.readiness_path,
        )
