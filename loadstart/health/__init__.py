from .probe_config import ProbeConfig, status_path
from .runner_probe import (
    ProbeResponse,
    ProbeResult,
    ProbeState,
    RunnerServiceProbe,
)

__all__ = [
    "ProbeConfig",
    "ProbeResponse",
    "ProbeResult",
    "ProbeState",
    "RunnerServiceProbe",
    "status_path",
]
