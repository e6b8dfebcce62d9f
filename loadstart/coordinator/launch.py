"""
Launch coordination for load test jobs.

A job is launched once every runner pod is running and every runner
service answers its status endpoint. The pass is safe to repeat at any
point: until the stage write succeeds nothing has been mutated, and a job
already marked started is never launched again.

Pass outline:
1. Count running runner pods; stop quietly unless all are up.
2. List runner services; stop quietly unless there is one per runner.
   Probe each in listing order and stop quietly at the first one that is
   not ready.
3. Persist stage ``started``.
4. Create the starter job addressing every runner in listing order.
"""

import asyncio

from loadstart.cluster import ClusterClient, set_controller_reference
from loadstart.errors import (
    LaunchTimeoutError,
    ListingError,
    OwnerReferenceError,
    StarterCreateError,
    StatusUpdateError,
)
from loadstart.health import RunnerServiceProbe
from loadstart.jobs import new_starter_job
from loadstart.logging import Entry, Logger
from loadstart.logging.launch_logging_models import (
    LaunchDebug,
    LaunchFailure,
    LaunchInfo,
    LaunchWarning,
)
from loadstart.models import (
    LoadTestJob,
    ReconcileResult,
    RunnerService,
    Stage,
)

from .launch_config import LaunchConfig
from .readiness import ReadinessCounter


class LaunchCoordinator:
    """
    Starts a load test job once its runner pool is healthy.

    Example usage:
        coordinator = LaunchCoordinator(cluster)

        result = await coordinator.start_job(job)
        if result.started:
            ...

    ``start_job`` returns normally whenever the job is simply not ready
    yet and raises a LaunchError subclass on hard failures. The job
    object passed in is updated with the persisted stage and resource
    version when the stage write succeeds.
    """

    def __init__(
        self,
        cluster: ClusterClient,
        probe: RunnerServiceProbe | None = None,
        config: LaunchConfig | None = None,
        logger: Logger | None = None,
    ):
        self._cluster = cluster
        self._config = config or LaunchConfig()
        self._logger = logger or Logger()
        self._owns_probe = probe is None
        self._probe = probe or RunnerServiceProbe(
            self._config.probe,
            logger=self._logger,
        )
        self._readiness = ReadinessCounter(
            cluster,
            labels=self._config.labels,
            logger=self._logger,
        )

    @property
    def readiness(self) -> ReadinessCounter:
        return self._readiness

    async def start_job(
        self,
        job: LoadTestJob,
        timeout: float | None = None,
    ) -> ReconcileResult:
        if timeout is None:
            timeout = self._config.launch_timeout

        if timeout is None:
            return await self._start_job(job)

        try:
            return await asyncio.wait_for(
                self._start_job(job),
                timeout=timeout,
            )

        except asyncio.TimeoutError as err:
            await self._log(
                LaunchFailure(
                    message=f"Launch of {job.namespace}/{job.name} timed out after {timeout}s",
                    job=job.name,
                    namespace=job.namespace,
                    stage=job.stage.value,
                    error="timeout",
                )
            )

            raise LaunchTimeoutError(
                f"Launch of {job.namespace}/{job.name} timed out after {timeout}s",
                job=job.name,
                namespace=job.namespace,
            ) from err

    async def _start_job(self, job: LoadTestJob) -> ReconcileResult:
        if job.stage.at_or_past(Stage.STARTED):
            await self._log(
                LaunchDebug(
                    message=f"Job {job.namespace}/{job.name} is already {job.stage.value}, skipping launch",
                    job=job.name,
                    namespace=job.namespace,
                    stage=job.stage.value,
                )
            )

            return ReconcileResult()

        await self._log(
            LaunchInfo(
                message="Waiting for pods to get ready",
                job=job.name,
                namespace=job.namespace,
                stage=job.stage.value,
            )
        )

        if await self._readiness.check_all_ready(job) is False:
            return ReconcileResult()

        services = await self._list_services(job)

        if len(services) != job.parallelism:
            await self._log(
                LaunchInfo(
                    message=f"{len(services)}/{job.parallelism} runner services listed, aborting",
                    job=job.name,
                    namespace=job.namespace,
                    stage=job.stage.value,
                )
            )

            return ReconcileResult()

        hostnames: list[str] = []
        for service in services:
            hostnames.append(service.cluster_ip)

            if await self._probe.is_ready(service) is False:
                await self._log(
                    LaunchInfo(
                        message=f"{service.name} service is not ready, aborting",
                        job=job.name,
                        namespace=job.namespace,
                        stage=job.stage.value,
                    )
                )

                return ReconcileResult()

            await self._log(
                LaunchDebug(
                    message=f"{service.name} service is ready",
                    job=job.name,
                    namespace=job.namespace,
                    stage=job.stage.value,
                )
            )

        await self._mark_started(job)
        await self._create_starter(job, hostnames)

        return ReconcileResult(started=True)

    async def _list_services(self, job: LoadTestJob) -> list[RunnerService]:
        try:
            return await self._cluster.list_services(
                self._config.labels.runner_selector(job),
                job.namespace,
            )

        except Exception as err:
            await self._log(
                LaunchFailure(
                    message=f"Could not list services: {err}",
                    job=job.name,
                    namespace=job.namespace,
                    stage=job.stage.value,
                    error=str(err),
                )
            )

            raise ListingError(
                f"Could not list runner services of {job.namespace}/{job.name}",
                kind="services",
                job=job.name,
                namespace=job.namespace,
            ) from err

    async def _mark_started(self, job: LoadTestJob) -> None:
        await self._log(
            LaunchInfo(
                message="Changing stage of job status to started",
                job=job.name,
                namespace=job.namespace,
                stage=job.stage.value,
            )
        )

        previous_stage = job.status.stage
        job.status.stage = Stage.STARTED

        try:
            stored = await self._cluster.update_status(job)

        except Exception as err:
            job.status.stage = previous_stage

            await self._log(
                LaunchFailure(
                    message=f"Could not update status of {job.namespace}/{job.name}: {err}",
                    job=job.name,
                    namespace=job.namespace,
                    stage=previous_stage.value,
                    error=str(err),
                )
            )

            raise StatusUpdateError(
                f"Could not update status of {job.namespace}/{job.name}",
                job=job.name,
                namespace=job.namespace,
            ) from err

        job.metadata.resource_version = stored.metadata.resource_version

    async def _create_starter(
        self,
        job: LoadTestJob,
        hostnames: list[str],
    ) -> None:
        starter = new_starter_job(
            job,
            hostnames,
            config=self._config.starter,
            labels=self._config.labels,
        )

        try:
            set_controller_reference(job, starter)

        except OwnerReferenceError as err:
            await self._log(
                LaunchWarning(
                    message=f"Failed to set controller reference for the starter job: {err}",
                    job=job.name,
                    namespace=job.namespace,
                    stage=job.stage.value,
                    error=str(err),
                )
            )

        try:
            await self._cluster.create_job(starter)

        except Exception as err:
            await self._log(
                LaunchFailure(
                    message=f"Failed to launch starter job {starter.metadata.name}: {err}",
                    job=job.name,
                    namespace=job.namespace,
                    stage=job.stage.value,
                    error=str(err),
                )
            )

            raise StarterCreateError(
                f"Failed to launch starter job {starter.metadata.name}",
                job=job.name,
                namespace=job.namespace,
            ) from err

        await self._log(
            LaunchInfo(
                message=f"Created starter job {starter.metadata.name} for {len(hostnames)} runners",
                job=job.name,
                namespace=job.namespace,
                stage=job.stage.value,
            )
        )

    async def _log(self, entry: Entry) -> None:
        async with self._logger.context(
            name="launch_coordinator",
            nested=True,
        ) as ctx:
            await ctx.log(entry)

    async def close(self) -> None:
        if self._owns_probe:
            await self._probe.close()
