"""Health result shapes and their HTTP rendering.

A probe either passes (``200 OK``) or fails with a reason and an optional
status code. Failures without an explicit code map to ``503``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

DEFAULT_ERROR_STATUS = 503
OK_BODY = "OK"

# Statuses that cannot carry the reason body
BODYLESS_STATUSES = frozenset({204, 304})


def validate_status_code(code: Any) -> int:
    """Check that ``code`` can be sent with a reason body."""
    if isinstance(code, bool) or not isinstance(code, int):
        raise ValueError(f"status code must be an int, got {code!r}")
    if not 200 <= code <= 599 or code in BODYLESS_STATUSES:
        raise ValueError(f"status code cannot carry a health response body: {code}")
    return code


@dataclass(frozen=True)
class HealthResult:
    """Outcome of a single health probe."""

    healthy: bool
    reason: Any = None
    code: int | None = None

    def __post_init__(self) -> None:
        if self.code is not None:
            validate_status_code(self.code)

    @classmethod
    def ok(cls) -> HealthResult:
        return OK

    @classmethod
    def error(cls, reason: Any, status_code: int | None = None) -> HealthResult:
        return cls(healthy=False, reason=reason, code=status_code)

    @property
    def status_code(self) -> int:
        if self.healthy:
            return 200
        return self.code if self.code is not None else DEFAULT_ERROR_STATUS

    @property
    def body(self) -> str:
        if self.healthy:
            return OK_BODY
        return render_reason(self.reason)


OK = HealthResult(healthy=True)


def render_reason(reason: Any) -> str:
    """Render a failure reason as a response body."""
    if isinstance(reason, str):
        return reason
    if isinstance(reason, enum.Enum) and isinstance(reason.value, str):
        return reason.value
    return repr(reason)


def coerce_result(value: Any) -> HealthResult:
    """Normalise whatever a probe returned into a ``HealthResult``.

    ``None`` and ``True`` count as healthy, ``False`` as a plain failure.
    """
    if isinstance(value, HealthResult):
        return value
    if value is None or value is True:
        return OK
    if value is False:
        return HealthResult.error("unhealthy")
    raise TypeError(
        f"health probe returned unsupported value {value!r}; "
        "expected HealthResult, bool or None"
    )
