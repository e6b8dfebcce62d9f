from dataclasses import dataclass

from .object_meta import ObjectMeta
from .pod_phase import PodPhase


@dataclass(slots=True)
class RunnerPod:
    metadata: ObjectMeta
    phase: PodPhase = PodPhase.PENDING

    def __post_init__(self):
        self.phase = PodPhase(self.phase)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def running(self) -> bool:
        return self.phase == PodPhase.RUNNING


@dataclass(slots=True)
class RunnerService:
    metadata: ObjectMeta
    cluster_ip: str = ""

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace
