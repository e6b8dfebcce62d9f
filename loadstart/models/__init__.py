from .label_selector import LabelSelector
from .load_test_job import (
    LOAD_TEST_JOB_API_VERSION,
    LOAD_TEST_JOB_KIND,
    LoadTestJob,
    LoadTestJobSpec,
    LoadTestJobStatus,
)
from .object_meta import ObjectMeta, OwnerReference
from .pod_phase import PodPhase
from .reconcile_result import ReconcileResult
from .runner import RunnerPod, RunnerService
from .stage import Stage
from .starter_job import StarterContainer, StarterJob

__all__ = [
    "LOAD_TEST_JOB_API_VERSION",
    "LOAD_TEST_JOB_KIND",
    "LabelSelector",
    "LoadTestJob",
    "LoadTestJobSpec",
    "LoadTestJobStatus",
    "ObjectMeta",
    "OwnerReference",
    "PodPhase",
    "ReconcileResult",
    "RunnerPod",
    "RunnerService",
    "Stage",
    "StarterContainer",
    "StarterJob",
]
