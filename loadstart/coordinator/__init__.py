from .launch import LaunchCoordinator
from .launch_config import LaunchConfig
from .readiness import ReadinessCounter
from .reconciler import LaunchReconciler

__all__ = [
    "LaunchConfig",
    "LaunchCoordinator",
    "LaunchReconciler",
    "ReadinessCounter",
]
