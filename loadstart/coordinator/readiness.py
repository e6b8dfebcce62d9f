from loadstart.cluster import LabelConfig, ResourceLister
from loadstart.errors import ListingError
from loadstart.logging import Logger
from loadstart.logging.launch_logging_models import (
    ReadinessError,
    ReadinessInfo,
)
from loadstart.models import LoadTestJob


class ReadinessCounter:
    """
    Counts running runner pods against a job's parallelism.

    Only pods in the Running phase count. Pending, failed or finished
    pods are ignored rather than treated as errors, since replacements
    may still be on their way. The job is ready only when the running
    count equals parallelism exactly; more running pods than expected
    means the pool is still settling.
    """

    def __init__(
        self,
        lister: ResourceLister,
        labels: LabelConfig | None = None,
        logger: Logger | None = None,
    ):
        self._lister = lister
        self._labels = labels or LabelConfig()
        self._logger = logger or Logger()

    async def count_running(self, job: LoadTestJob) -> int:
        try:
            pods = await self._lister.list_pods(
                self._labels.runner_selector(job),
                job.namespace,
            )

        except Exception as err:
            async with self._logger.context(
                name="launch_coordinator",
                nested=True,
            ) as ctx:
                await ctx.log(
                    ReadinessError(
                        message=f"Could not list runner pods of {job.namespace}/{job.name}: {err}",
                        job=job.name,
                        namespace=job.namespace,
                        error=str(err),
                    )
                )

            raise ListingError(
                f"Could not list runner pods of {job.namespace}/{job.name}",
                kind="pods",
                job=job.name,
                namespace=job.namespace,
            ) from err

        return len([pod for pod in pods if pod.running])

    async def check_all_ready(self, job: LoadTestJob) -> bool:
        running = await self.count_running(job)

        async with self._logger.context(
            name="launch_coordinator",
            nested=True,
        ) as ctx:
            await ctx.log(
                ReadinessInfo(
                    message=f"{running}/{job.parallelism} runner pods ready",
                    job=job.name,
                    namespace=job.namespace,
                    running=running,
                    expected=job.parallelism,
                )
            )

        return running == job.parallelism
