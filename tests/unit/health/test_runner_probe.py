"""
Tests for runner service status probes.

Covers:
- Status URL construction
- First-attempt success without backoff waits
- Exhausting the backoff schedule on errors and bad statuses
- Recovery part way through the schedule
- Cancellation interrupting backoff waits
"""

import asyncio

import aiohttp
import pytest

from loadstart.health import (
    ProbeConfig,
    ProbeResult,
    RunnerServiceProbe,
)
from loadstart.logging.launch_logging_models import ServiceProbeError
from loadstart.models import ObjectMeta, RunnerService
from loadstart.reliability import BackoffSchedule


def make_service(name: str = "load-test-service-0", namespace: str = "default") -> RunnerService:
    return RunnerService(
        metadata=ObjectMeta(name=name, namespace=namespace),
        cluster_ip="10.0.0.1",
    )


class TestProbeUrl:

    def test_default_url(self) -> None:
        probe = RunnerServiceProbe()
        service = make_service(name="runner-1", namespace="perf")

        assert probe.url_for(service) == "http://runner-1.perf.svc.cluster.local:6565/v1/status"

    def test_configured_url(self) -> None:
        probe = RunnerServiceProbe(
            ProbeConfig(
                scheme="https",
                port=8443,
                path="status",
                cluster_domain="svc.example.internal",
            )
        )
        service = make_service(name="runner-1", namespace="perf")

        assert probe.url_for(service) == "https://runner-1.perf.svc.example.internal:8443/status"


class TestProbeSuccess:

    @pytest.mark.asyncio
    async def test_first_attempt_success_skips_backoff(
        self,
        probe,
        fake_session,
        sleeps,
    ) -> None:
        """A 200 on the first attempt returns ready without any waits."""
        service = make_service()
        fake_session.script(probe.url_for(service), 200)

        response = await probe.probe(service)

        assert response.ready is True
        assert response.result == ProbeResult.SUCCESS
        assert response.attempts == 1
        assert response.status_code == 200
        assert fake_session.requests_for(probe.url_for(service)) == 1
        assert sleeps == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    async def test_any_2xx_is_ready(
        self,
        probe,
        fake_session,
        sleeps,
        status: int,
    ) -> None:
        service = make_service()
        fake_session.script(probe.url_for(service), status)

        assert await probe.is_ready(service) is True

    @pytest.mark.asyncio
    async def test_recovers_on_second_attempt(
        self,
        probe,
        fake_session,
        sleeps,
    ) -> None:
        """Only the wait after the failed attempt is taken."""
        service = make_service()
        fake_session.script(
            probe.url_for(service),
            aiohttp.ClientConnectionError("connection refused"),
            200,
        )

        response = await probe.probe(service)

        assert response.ready is True
        assert response.attempts == 2
        assert sleeps == [1.0]


class TestProbeExhaustion:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [300, 404, 500, 503])
    async def test_bad_status_exhausts_schedule(
        self,
        probe,
        fake_session,
        sleeps,
        status: int,
    ) -> None:
        service = make_service()
        fake_session.script(probe.url_for(service), status)

        response = await probe.probe(service)

        assert response.ready is False
        assert response.result == ProbeResult.FAILURE
        assert response.status_code == status
        assert response.attempts == 3
        assert fake_session.requests_for(probe.url_for(service)) == 3
        assert sleeps == [1.0, 3.0, 5.0]

    @pytest.mark.asyncio
    async def test_transport_error_exhausts_schedule(
        self,
        probe,
        fake_session,
        sleeps,
    ) -> None:
        """Transport errors are reported, never raised."""
        service = make_service()
        fake_session.script(
            probe.url_for(service),
            aiohttp.ClientConnectionError("connection refused"),
        )

        response = await probe.probe(service)

        assert response.ready is False
        assert response.result == ProbeResult.ERROR
        assert "connection refused" in response.message
        assert response.attempts == 3

    @pytest.mark.asyncio
    async def test_timeout_is_reported(
        self,
        probe,
        fake_session,
        sleeps,
    ) -> None:
        service = make_service()
        fake_session.script(probe.url_for(service), asyncio.TimeoutError())

        response = await probe.probe(service)

        assert response.ready is False
        assert response.result == ProbeResult.TIMEOUT

    @pytest.mark.asyncio
    async def test_os_error_is_reported(
        self,
        probe,
        fake_session,
        sleeps,
    ) -> None:
        service = make_service()
        fake_session.script(probe.url_for(service), OSError("no route to host"))

        response = await probe.probe(service)

        assert response.result == ProbeResult.ERROR

    @pytest.mark.asyncio
    async def test_exhaustion_logs_last_error(
        self,
        probe,
        fake_session,
        sleeps,
        logger,
    ) -> None:
        service = make_service()
        fake_session.script(probe.url_for(service), 503)

        await probe.probe(service)

        errors = [
            entry for entry in logger.records("runner_probe")
            if isinstance(entry, ServiceProbeError)
        ]

        assert len(errors) == 1
        assert errors[0].service == service.name
        assert errors[0].attempts == 3
        assert "503" in errors[0].error

    @pytest.mark.asyncio
    async def test_state_tracks_attempts(
        self,
        probe,
        fake_session,
        sleeps,
    ) -> None:
        service = make_service()
        fake_session.script(probe.url_for(service), 500, 500, 200)

        await probe.probe(service)
        state = probe.get_state()

        assert state.total_probes == 1
        assert state.total_attempts == 3
        assert state.total_failures == 2
        assert state.last_result == ProbeResult.SUCCESS

        probe.reset()
        assert probe.get_state().total_attempts == 0


class TestProbeCancellation:

    @pytest.mark.asyncio
    async def test_cancel_interrupts_backoff(
        self,
        fake_session,
        logger,
    ) -> None:
        """Cancelling the probing task aborts the wait instead of sleeping it out."""
        probe = RunnerServiceProbe(
            ProbeConfig(backoff=BackoffSchedule(delays=(30.0, 30.0, 30.0))),
            session=fake_session,
            logger=logger,
        )
        service = make_service()
        fake_session.script(probe.url_for(service), 500)

        task = asyncio.create_task(probe.probe(service))
        await asyncio.sleep(0.05)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await asyncio.wait_for(task, timeout=1.0)

        assert fake_session.requests_for(probe.url_for(service)) == 1


class TestProbeSession:

    @pytest.mark.asyncio
    async def test_injected_session_is_not_closed(
        self,
        fake_session,
        logger,
    ) -> None:
        probe = RunnerServiceProbe(session=fake_session, logger=logger)

        await probe.close()

        assert fake_session.closed is False

    @pytest.mark.asyncio
    async def test_owned_session_is_closed(self) -> None:
        async with RunnerServiceProbe() as probe:
            session = probe._get_session()
            assert isinstance(session, aiohttp.ClientSession)

        assert session.closed is True
