"""
Runner service status probes.

Every runner exposes a status endpoint on its service. Before a load test
is started each runner service is probed with a plain GET, retrying on a
fixed backoff schedule. A probe never raises for transport or HTTP
failures: exhausting the schedule just means the runner is not ready yet.

Per-attempt outcomes:
- SUCCESS: response with status code below 300
- FAILURE: response with any other status code
- TIMEOUT: request exceeded the configured timeout
- ERROR: connection or other transport error
"""

import asyncio
import time
from dataclasses import dataclass, field
from enum import Enum

import aiohttp

from loadstart.logging import Logger
from loadstart.logging.launch_logging_models import (
    ServiceProbeDebug,
    ServiceProbeError,
    ServiceProbeInfo,
)
from loadstart.models import RunnerService
from loadstart.reliability import run_with_backoff

from .probe_config import ProbeConfig


class ProbeResult(Enum):
    """Result of a single status request."""

    SUCCESS = "success"
    FAILURE = "failure"
    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass(slots=True)
class ProbeResponse:
    """Outcome of probing one runner service."""

    result: ProbeResult
    url: str
    attempts: int = 0
    status_code: int | None = None
    message: str = ""
    latency_ms: float = 0.0
    timestamp: float = field(default_factory=time.monotonic)

    @property
    def ready(self) -> bool:
        return self.result == ProbeResult.SUCCESS


@dataclass(slots=True)
class ProbeState:
    """Running totals for diagnostics."""

    total_probes: int = 0
    total_attempts: int = 0
    total_failures: int = 0
    last_result: ProbeResult | None = None
    last_message: str = ""


class RunnerServiceProbe:
    """
    Probes runner service status endpoints over HTTP.

    Example usage:
        async with RunnerServiceProbe(ProbeConfig()) as probe:
            if await probe.is_ready(service):
                ...

    A session may be handed in; otherwise one is created on first use and
    closed by ``close()``.
    """

    def __init__(
        self,
        config: ProbeConfig | None = None,
        session: aiohttp.ClientSession | None = None,
        logger: Logger | None = None,
    ):
        self._config = config or ProbeConfig()
        self._session = session
        self._owns_session = session is None
        self._logger = logger or Logger()
        self._state = ProbeState()

    @property
    def config(self) -> ProbeConfig:
        return self._config

    def get_state(self) -> ProbeState:
        return self._state

    def url_for(self, service: RunnerService) -> str:
        host = f"{service.name}.{service.namespace}.{self._config.cluster_domain}"

        return f"{self._config.scheme}://{host}:{self._config.port}{self._config.path}"

    async def is_ready(self, service: RunnerService) -> bool:
        response = await self.probe(service)
        return response.ready

    async def probe(self, service: RunnerService) -> ProbeResponse:
        url = self.url_for(service)
        self._state.total_probes += 1

        async def attempt(attempt_number: int) -> ProbeResponse:
            async with self._logger.context(
                name="runner_probe",
                nested=True,
            ) as ctx:
                await ctx.log(
                    ServiceProbeDebug(
                        message=f"Probing {url} (attempt {attempt_number}/{self._config.backoff.attempts})",
                        service=service.name,
                        namespace=service.namespace,
                        url=url,
                        attempt=attempt_number,
                    )
                )

            response = await self._request(url)

            self._state.total_attempts += 1
            self._state.last_result = response.result
            self._state.last_message = response.message

            if response.ready is False:
                self._state.total_failures += 1

            return response

        response, attempts = await run_with_backoff(
            attempt,
            lambda response: response.ready,
            self._config.backoff,
        )

        response.attempts = attempts

        async with self._logger.context(
            name="runner_probe",
            nested=True,
        ) as ctx:
            if response.ready:
                await ctx.log(
                    ServiceProbeInfo(
                        message=f"{service.name} answered {url} after {attempts} attempt(s)",
                        service=service.name,
                        namespace=service.namespace,
                        url=url,
                        attempts=attempts,
                    )
                )

            else:
                await ctx.log(
                    ServiceProbeError(
                        message=f"Failed to get status from {service.name}: {response.message}",
                        service=service.name,
                        namespace=service.namespace,
                        url=url,
                        attempts=attempts,
                        error=response.message,
                    )
                )

        return response

    async def _request(self, url: str) -> ProbeResponse:
        session = self._get_session()
        start_time = time.monotonic()

        try:
            async with session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=self._config.timeout_seconds),
            ) as response:
                latency_ms = (time.monotonic() - start_time) * 1000

                if response.status < 300:
                    return ProbeResponse(
                        result=ProbeResult.SUCCESS,
                        url=url,
                        status_code=response.status,
                        message=f"Status {response.status}",
                        latency_ms=latency_ms,
                    )

                return ProbeResponse(
                    result=ProbeResult.FAILURE,
                    url=url,
                    status_code=response.status,
                    message=f"Unexpected status {response.status}",
                    latency_ms=latency_ms,
                )

        except asyncio.TimeoutError:
            return ProbeResponse(
                result=ProbeResult.TIMEOUT,
                url=url,
                message=f"Request timed out after {self._config.timeout_seconds}s",
                latency_ms=(time.monotonic() - start_time) * 1000,
            )

        except (aiohttp.ClientError, OSError) as err:
            return ProbeResponse(
                result=ProbeResult.ERROR,
                url=url,
                message=f"{type(err).__name__}: {err}",
                latency_ms=(time.monotonic() - start_time) * 1000,
            )

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

        self._session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def reset(self) -> None:
        """Reset probe counters."""
        self._state = ProbeState()
