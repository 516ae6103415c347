"""Tests for health modules and probe execution."""

import asyncio

import pytest

from kube_health import ChecksHealth, DefaultHealth, HealthModule, HealthResult, run_probe
from kube_health.checks import PROBES


def run(coro):
    return asyncio.run(coro)


def test_default_health_reports_ok():
    module = DefaultHealth()

    assert isinstance(module, HealthModule)
    for probe in PROBES:
        assert run(run_probe(module, probe)).healthy


def test_run_probe_awaits_coroutines():
    class Module:
        async def readiness(self):
            return HealthResult.error("warming up")

    result = run(run_probe(Module(), "readiness"))

    assert result.status_code == 503
    assert result.body == "warming up"


def test_run_probe_converts_exceptions():
    class Module:
        def liveness(self):
            raise ConnectionError("redis")

    result = run(run_probe(Module(), "liveness"))

    assert result.status_code == 503
    assert result.body == "ConnectionError('redis')"


class TestChecksHealth:
    def test_all_checks_pass(self):
        async def database() -> bool:
            return True

        def cache() -> bool:
            return True

        module = ChecksHealth(readiness_checks=[database, cache])

        assert run(module.readiness()).healthy

    def test_probe_without_checks_passes(self):
        module = ChecksHealth(readiness_checks=[lambda: False])

        assert run(module.liveness()).healthy

    def test_failing_check_named_in_reason(self):
        async def database() -> bool:
            return False

        module = ChecksHealth(startup_checks=[database])
        result = run(module.startup())

        assert result.status_code == 503
        assert result.body == "database: failing"

    def test_raising_check_reported(self):
        async def broker() -> bool:
            raise TimeoutError("no answer")

        module = ChecksHealth(readiness_checks=[broker], status_code=500)
        result = run(module.readiness())

        assert result.status_code == 500
        assert result.body == "broker: no answer"

    def test_stops_at_first_failure(self):
        calls = []

        def first() -> bool:
            calls.append("first")
            return False

        def second() -> bool:
            calls.append("second")
            return True

        run(ChecksHealth(basic_checks=[first, second]).basic())

        assert calls == ["first"]

    @pytest.mark.parametrize("code", [101, 204, 700])
    def test_invalid_status_code_rejected_at_init(self, code):
        with pytest.raises(ValueError):
            ChecksHealth(readiness_checks=[lambda: False], status_code=code)
