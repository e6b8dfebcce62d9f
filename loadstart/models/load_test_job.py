"""
The load test job resource.

A job's spec is fixed at creation. Its status is a separate sub-resource
that phases write independently, guarded by the job's resource version.
"""

from dataclasses import dataclass, field

from .object_meta import ObjectMeta
from .stage import Stage


LOAD_TEST_JOB_API_VERSION = "loadstart.io/v1alpha1"
LOAD_TEST_JOB_KIND = "LoadTestJob"


@dataclass(slots=True, frozen=True)
class LoadTestJobSpec:
    parallelism: int
    script: str = ""
    arguments: str = ""

    def __post_init__(self):
        if self.parallelism < 1:
            raise ValueError(
                f"parallelism must be a positive integer, got {self.parallelism}"
            )


@dataclass(slots=True)
class LoadTestJobStatus:
    stage: Stage = Stage.UNSET

    def __post_init__(self):
        self.stage = Stage.parse(self.stage)


@dataclass(slots=True)
class LoadTestJob:
    metadata: ObjectMeta
    spec: LoadTestJobSpec
    status: LoadTestJobStatus = field(default_factory=LoadTestJobStatus)
    api_version: str = LOAD_TEST_JOB_API_VERSION
    kind: str = LOAD_TEST_JOB_KIND

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def parallelism(self) -> int:
        return self.spec.parallelism

    @property
    def stage(self) -> Stage:
        return self.status.stage
