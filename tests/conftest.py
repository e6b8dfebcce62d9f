"""
Pytest configuration for loadstart tests.

Provides in-memory cluster fixtures, a scripted HTTP session for runner
status probes and a logger that keeps the entries it accepts.
"""

import tempfile
from collections import defaultdict
from typing import Callable, Generator

import pytest

from loadstart.cluster import LabelConfig, MemoryCluster
from loadstart.coordinator import LaunchConfig, LaunchCoordinator
from loadstart.health import ProbeConfig, RunnerServiceProbe
from loadstart.logging import Logger, LoggingConfig
from loadstart.models import (
    LoadTestJob,
    LoadTestJobSpec,
    LoadTestJobStatus,
    ObjectMeta,
    PodPhase,
    RunnerPod,
    RunnerService,
    Stage,
)
from loadstart.reliability import BackoffSchedule


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as async"
    )


class FakeResponse:
    def __init__(self, status: int) -> None:
        self.status = status


class FakeRequest:
    def __init__(self, outcome: int | BaseException) -> None:
        self._outcome = outcome

    async def __aenter__(self) -> FakeResponse:
        if isinstance(self._outcome, BaseException):
            raise self._outcome

        return FakeResponse(self._outcome)

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """
    Stands in for an aiohttp.ClientSession.

    Each URL is scripted with a list of outcomes, either a status code or
    an exception to raise. The last outcome repeats once the list runs out.
    Unscripted URLs answer 200.
    """

    def __init__(self) -> None:
        self.closed = False
        self.requests: list[str] = []
        self._outcomes: dict[str, list[int | BaseException]] = defaultdict(list)

    def script(self, url: str, *outcomes: int | BaseException) -> None:
        self._outcomes[url] = list(outcomes)

    def get(self, url: str, timeout=None) -> FakeRequest:
        self.requests.append(url)

        outcomes = self._outcomes.get(url)
        if not outcomes:
            return FakeRequest(200)

        if len(outcomes) > 1:
            return FakeRequest(outcomes.pop(0))

        return FakeRequest(outcomes[0])

    def requests_for(self, url: str) -> int:
        return len([request for request in self.requests if request == url])

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def reset_logging_config() -> None:
    LoggingConfig().reset()


@pytest.fixture
def temp_log_directory() -> Generator[str, None, None]:
    with tempfile.TemporaryDirectory() as temp_directory:
        yield temp_directory


@pytest.fixture
def logger() -> Logger:
    return Logger(buffer_size=256)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def sleeps(monkeypatch) -> list[float]:
    """Record backoff waits instead of sleeping through them."""
    recorded: list[float] = []

    async def record_sleep(delay: float, *args, **kwargs):
        recorded.append(delay)

    monkeypatch.setattr("loadstart.reliability.backoff.asyncio.sleep", record_sleep)

    return recorded


@pytest.fixture
def probe_config() -> ProbeConfig:
    return ProbeConfig(
        backoff=BackoffSchedule(delays=(1.0, 3.0, 5.0)),
        timeout_seconds=0.5,
    )


@pytest.fixture
def launch_config(probe_config: ProbeConfig) -> LaunchConfig:
    return LaunchConfig(
        labels=LabelConfig(),
        probe=probe_config,
    )


@pytest.fixture
def cluster() -> MemoryCluster:
    return MemoryCluster()


@pytest.fixture
def make_job(cluster: MemoryCluster) -> Callable[..., LoadTestJob]:
    def create_job(
        name: str = "load-test",
        parallelism: int = 2,
        stage: Stage = Stage.CREATED,
        namespace: str = "default",
    ) -> LoadTestJob:
        return cluster.add_job(
            LoadTestJob(
                metadata=ObjectMeta(
                    name=name,
                    namespace=namespace,
                ),
                spec=LoadTestJobSpec(parallelism=parallelism),
                status=LoadTestJobStatus(stage=stage),
            )
        )

    return create_job


@pytest.fixture
def add_runner(cluster: MemoryCluster) -> Callable[..., RunnerService]:
    """Add a runner pod and its service for a job; returns the service."""
    labels = LabelConfig()

    def create_runner(
        job: LoadTestJob,
        index: int,
        phase: PodPhase = PodPhase.RUNNING,
        cluster_ip: str | None = None,
        with_service: bool = True,
    ) -> RunnerService | None:
        runner_labels = labels.runner_labels(job)

        cluster.add_pod(
            RunnerPod(
                metadata=ObjectMeta(
                    name=f"{job.name}-{index}-pod",
                    namespace=job.namespace,
                    labels=dict(runner_labels),
                ),
                phase=phase,
            )
        )

        if with_service is False:
            return None

        service = RunnerService(
            metadata=ObjectMeta(
                name=f"{job.name}-service-{index}",
                namespace=job.namespace,
                labels=dict(runner_labels),
            ),
            cluster_ip=cluster_ip or f"10.0.0.{index}",
        )
        cluster.add_service(service)

        return service

    return create_runner


@pytest.fixture
async def probe(
    probe_config: ProbeConfig,
    fake_session: FakeSession,
    logger: Logger,
):
    runner_probe = RunnerServiceProbe(
        probe_config,
        session=fake_session,
        logger=logger,
    )
    yield runner_probe
    await runner_probe.close()


@pytest.fixture
def coordinator(
    cluster: MemoryCluster,
    probe: RunnerServiceProbe,
    launch_config: LaunchConfig,
    logger: Logger,
) -> LaunchCoordinator:
    return LaunchCoordinator(
        cluster,
        probe=probe,
        config=launch_config,
        logger=logger,
    )
