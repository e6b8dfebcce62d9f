from .client import (
    ClusterClient,
    JobCreator,
    ResourceLister,
    StatusWriter,
)
from .labels import LabelConfig
from .memory_cluster import MemoryCluster
from .owner import set_controller_reference

__all__ = [
    "ClusterClient",
    "JobCreator",
    "LabelConfig",
    "MemoryCluster",
    "ResourceLister",
    "StatusWriter",
    "set_controller_reference",
]
