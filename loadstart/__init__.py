from .coordinator import (
    LaunchConfig,
    LaunchCoordinator,
    LaunchReconciler,
    ReadinessCounter,
)
from .health import ProbeConfig, RunnerServiceProbe

__all__ = [
    "LaunchConfig",
    "LaunchCoordinator",
    "LaunchReconciler",
    "ProbeConfig",
    "ReadinessCounter",
    "RunnerServiceProbe",
]
