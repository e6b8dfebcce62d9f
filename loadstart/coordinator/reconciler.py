from loadstart.cluster import ClusterClient
from loadstart.env import Env, load_env
from loadstart.logging import Logger, LoggingConfig
from loadstart.logging.launch_logging_models import LaunchDebug
from loadstart.models import LoadTestJob, ReconcileResult, Stage

from .launch import LaunchCoordinator
from .launch_config import LaunchConfig


class LaunchReconciler:
    """
    The launch slice of a load test job's reconciliation loop.

    Jobs whose runners have been created are handed to the coordinator on
    every pass until it starts them; a pass that does not start the job
    asks to be requeued. Stages owned by other phases are left alone.
    """

    def __init__(
        self,
        coordinator: LaunchCoordinator,
        requeue_interval: float = 5.0,
        logger: Logger | None = None,
    ):
        self._coordinator = coordinator
        self._requeue_interval = requeue_interval
        self._logger = logger or Logger()

    @classmethod
    def from_env(
        cls,
        cluster: ClusterClient,
        env: Env | None = None,
        logger: Logger | None = None,
    ) -> "LaunchReconciler":
        if env is None:
            env = load_env(Env)

        LoggingConfig().update_from_env(env)

        config = LaunchConfig.from_env(env)

        if logger is None:
            logger = Logger(path=env.LOADSTART_LOG_FILE)

        return cls(
            LaunchCoordinator(
                cluster,
                config=config,
                logger=logger,
            ),
            requeue_interval=config.requeue_interval,
            logger=logger,
        )

    async def reconcile(self, job: LoadTestJob) -> ReconcileResult:
        if job.stage != Stage.CREATED:
            async with self._logger.context(
                name="launch_coordinator",
                nested=True,
            ) as ctx:
                await ctx.log(
                    LaunchDebug(
                        message=f"Job {job.namespace}/{job.name} is in stage '{job.stage.value}', nothing to launch",
                        job=job.name,
                        namespace=job.namespace,
                        stage=job.stage.value,
                    )
                )

            return ReconcileResult()

        result = await self._coordinator.start_job(job)

        if result.started:
            return result

        return ReconcileResult(
            requeue=True,
            requeue_after=self._requeue_interval,
        )

    @property
    def coordinator(self) -> LaunchCoordinator:
        return self._coordinator

    async def close(self) -> None:
        await self._coordinator.close()
        await self._logger.close()
