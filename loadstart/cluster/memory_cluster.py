import asyncio
import copy
import uuid
from collections import defaultdict
from typing import Literal

from loadstart.errors import (
    ResourceNotFoundError,
    StarterExistsError,
    StatusConflictError,
)
from loadstart.models import (
    LabelSelector,
    LoadTestJob,
    PodPhase,
    RunnerPod,
    RunnerService,
    StarterJob,
)


ClusterOperation = Literal[
    "list_pods",
    "list_services",
    "update_status",
    "create_job",
]


class MemoryCluster:
    """
    In-memory cluster store implementing ClusterClient.

    Listings preserve insertion order. Every write bumps the stored
    resource version, and status writes are rejected when they carry a
    stale one. Failures can be injected per operation with ``fail()``.

    Objects handed in and out are copies, so callers never share state
    with the store.
    """

    def __init__(self) -> None:
        self._jobs: dict[tuple[str, str], LoadTestJob] = {}
        self._pods: list[RunnerPod] = []
        self._services: list[RunnerService] = []
        self._starters: dict[tuple[str, str], StarterJob] = {}
        self._failures: dict[ClusterOperation, Exception] = {}
        self._lock = asyncio.Lock()
        self.calls: dict[ClusterOperation, int] = defaultdict(int)

    def add_job(self, job: LoadTestJob) -> LoadTestJob:
        stored = copy.deepcopy(job)

        if stored.metadata.uid == "":
            stored.metadata.uid = str(uuid.uuid4())

        stored.metadata.resource_version += 1
        self._jobs[stored.metadata.key] = stored

        return copy.deepcopy(stored)

    def get_job(self, name: str, namespace: str = "default") -> LoadTestJob:
        stored = self._jobs.get((namespace, name))
        if stored is None:
            raise ResourceNotFoundError("LoadTestJob", name, namespace)

        return copy.deepcopy(stored)

    def add_pod(self, pod: RunnerPod) -> None:
        self._pods.append(copy.deepcopy(pod))

    def set_pod_phase(self, name: str, phase: str, namespace: str = "default") -> None:
        for pod in self._pods:
            if pod.metadata.key == (namespace, name):
                pod.phase = PodPhase(phase)
                return

        raise ResourceNotFoundError("Pod", name, namespace)

    def add_service(self, service: RunnerService) -> None:
        self._services.append(copy.deepcopy(service))

    @property
    def starters(self) -> list[StarterJob]:
        return [
            copy.deepcopy(starter) for starter in self._starters.values()
        ]

    def fail(self, operation: ClusterOperation, error: Exception) -> None:
        self._failures[operation] = error

    def recover(self, operation: ClusterOperation | None = None) -> None:
        if operation is None:
            self._failures.clear()

        else:
            self._failures.pop(operation, None)

    def _check_failure(self, operation: ClusterOperation):
        self.calls[operation] += 1

        error = self._failures.get(operation)
        if error is not None:
            raise error

    async def list_pods(
        self,
        selector: LabelSelector,
        namespace: str,
    ) -> list[RunnerPod]:
        self._check_failure("list_pods")

        return [
            copy.deepcopy(pod) for pod in self._pods
            if pod.metadata.namespace == namespace and selector.matches(pod.metadata.labels)
        ]

    async def list_services(
        self,
        selector: LabelSelector,
        namespace: str,
    ) -> list[RunnerService]:
        self._check_failure("list_services")

        return [
            copy.deepcopy(service) for service in self._services
            if service.metadata.namespace == namespace and selector.matches(service.metadata.labels)
        ]

    async def update_status(self, job: LoadTestJob) -> LoadTestJob:
        self._check_failure("update_status")

        async with self._lock:
            stored = self._jobs.get(job.metadata.key)
            if stored is None:
                raise ResourceNotFoundError("LoadTestJob", job.name, job.namespace)

            if stored.metadata.resource_version != job.metadata.resource_version:
                raise StatusConflictError(
                    job.name,
                    job.metadata.resource_version,
                    stored.metadata.resource_version,
                )

            stored.status = copy.deepcopy(job.status)
            stored.metadata.resource_version += 1

            return copy.deepcopy(stored)

    async def create_job(self, job: StarterJob) -> StarterJob:
        self._check_failure("create_job")

        async with self._lock:
            if job.metadata.key in self._starters:
                raise StarterExistsError(job.metadata.name, job.metadata.namespace)

            stored = copy.deepcopy(job)
            stored.metadata.uid = str(uuid.uuid4())
            stored.metadata.resource_version = 1
            self._starters[stored.metadata.key] = stored

            return copy.deepcopy(stored)
