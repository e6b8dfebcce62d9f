"""
Cluster client interfaces for launch coordination.

The coordinator only needs a narrow slice of the cluster API: listing
runner pods and services by label, writing a job's status sub-resource
and creating the starter job. Each is a separate protocol so callers can
hand in exactly what they have.

Implementations:
- MemoryCluster: in-memory store for tests and dry runs
"""

from typing import Protocol, runtime_checkable

from loadstart.models import (
    LabelSelector,
    LoadTestJob,
    RunnerPod,
    RunnerService,
    StarterJob,
)


@runtime_checkable
class ResourceLister(Protocol):

    async def list_pods(
        self,
        selector: LabelSelector,
        namespace: str,
    ) -> list[RunnerPod]:
        """
        List pods matching every label of the selector in a namespace.

        Items are returned in the listing's own order. Raises on any
        failure to reach the listing service.
        """
        ...

    async def list_services(
        self,
        selector: LabelSelector,
        namespace: str,
    ) -> list[RunnerService]:
        """
        List services matching every label of the selector in a namespace.
        """
        ...


@runtime_checkable
class StatusWriter(Protocol):

    async def update_status(self, job: LoadTestJob) -> LoadTestJob:
        """
        Persist the job's status sub-resource.

        The write is conditional on ``job.metadata.resource_version``
        matching the stored version. Returns the stored job with its new
        resource version; raises StatusConflictError on a stale version.
        """
        ...


@runtime_checkable
class JobCreator(Protocol):

    async def create_job(self, job: StarterJob) -> StarterJob:
        """
        Create a starter job. Raises StarterExistsError if the name is taken.
        """
        ...


@runtime_checkable
class ClusterClient(ResourceLister, StatusWriter, JobCreator, Protocol):
    pass
