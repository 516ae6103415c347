"""Pluggable health modules.

A health module is any object with ``basic``, ``startup``, ``liveness`` and
``readiness`` callables. Each may be a plain function or a coroutine
function and returns a ``HealthResult``, a bool or ``None``.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Literal, Protocol, runtime_checkable

import structlog

from kube_health.results import OK, HealthResult, coerce_result, validate_status_code

log = structlog.get_logger()

Probe = Literal["basic", "startup", "liveness", "readiness"]
PROBES: tuple[Probe, ...] = ("basic", "startup", "liveness", "readiness")

HealthCheck = Callable[[], Awaitable[bool] | bool]


@runtime_checkable
class HealthModule(Protocol):
    def basic(self) -> Any: ...

    def startup(self) -> Any: ...

    def liveness(self) -> Any: ...

    def readiness(self) -> Any: ...


class DefaultHealth:
    """Reports healthy on every probe."""

    def basic(self) -> HealthResult:
        return OK

    def startup(self) -> HealthResult:
        return OK

    def liveness(self) -> HealthResult:
        return OK

    def readiness(self) -> HealthResult:
        return OK


class ChecksHealth:
    """Health module assembled from per-probe lists of check callables.

    A probe passes when every check returns truthy. The first check that
    returns falsy or raises fails the probe, and its name becomes the
    reason.

    Args:
        basic_checks: Checks for the basic probe.
        startup_checks: Checks for the startup probe.
        liveness_checks: Checks for the liveness probe.
        readiness_checks: Checks for the readiness probe.
        status_code: Status reported on failure; ``None`` means 503.
    """

    def __init__(
        self,
        *,
        basic_checks: Sequence[HealthCheck] | None = None,
        startup_checks: Sequence[HealthCheck] | None = None,
        liveness_checks: Sequence[HealthCheck] | None = None,
        readiness_checks: Sequence[HealthCheck] | None = None,
        status_code: int | None = None,
    ) -> None:
        self._checks: dict[Probe, list[HealthCheck]] = {
            "basic": list(basic_checks or []),
            "startup": list(startup_checks or []),
            "liveness": list(liveness_checks or []),
            "readiness": list(readiness_checks or []),
        }
        self._status_code = (
            validate_status_code(status_code) if status_code is not None else None
        )

    async def _run(self, probe: Probe) -> HealthResult:
        for check in self._checks[probe]:
            name = getattr(check, "__name__", str(check))
            try:
                ok = await _maybe_await(check())
            except Exception as exc:
                log.warning("health_check_error", probe=probe, check=name, error=str(exc))
                return HealthResult.error(f"{name}: {exc}", self._status_code)
            if not ok:
                return HealthResult.error(f"{name}: failing", self._status_code)
        return OK

    async def basic(self) -> HealthResult:
        return await self._run("basic")

    async def startup(self) -> HealthResult:
        return await self._run("startup")

    async def liveness(self) -> HealthResult:
        return await self._run("liveness")

    async def readiness(self) -> HealthResult:
        return await self._run("readiness")


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


async def run_probe(module: HealthModule, probe: Probe) -> HealthResult:
    """Invoke one probe on ``module`` and normalise its outcome.

    Exceptions raised by the probe are logged and reported as a 503 with
    the exception's repr as the reason.
    """
    try:
        return coerce_result(await _maybe_await(getattr(module, probe)()))
    except Exception as exc:
        log.exception("health_probe_error", probe=probe)
        return HealthResult.error(exc)
