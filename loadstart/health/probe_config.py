from dataclasses import dataclass, field

from loadstart.env import Env, TimeParser
from loadstart.reliability import BackoffSchedule


def status_path(path: str) -> str:
    """Runner status endpoint path with exactly one leading slash."""
    return "/" + path.lstrip("/")


@dataclass(slots=True, frozen=True)
class ProbeConfig:
    """
    Configuration for runner service status probes.

    Attributes:
        scheme: URL scheme of the runner status endpoint.
        port: Port every runner serves its status endpoint on.
        path: Status endpoint path.
        cluster_domain: Suffix appended to ``<service>.<namespace>``.
        timeout_seconds: Bound on a single status request.
        backoff: Waits between attempts; its length is the attempt count.
    """

    scheme: str = "http"
    port: int = 6565
    path: str = "/v1/status"
    cluster_domain: str = "svc.cluster.local"
    timeout_seconds: float = 5.0
    backoff: BackoffSchedule = field(default_factory=BackoffSchedule)

    def __post_init__(self):
        object.__setattr__(self, "path", status_path(self.path))

    @classmethod
    def from_env(cls, env: Env) -> "ProbeConfig":
        return cls(
            scheme=env.LOADSTART_PROBE_SCHEME,
            port=env.LOADSTART_PROBE_PORT,
            path=env.LOADSTART_PROBE_PATH,
            cluster_domain=env.LOADSTART_CLUSTER_DOMAIN,
            timeout_seconds=TimeParser().parse(env.LOADSTART_PROBE_REQUEST_TIMEOUT),
            backoff=BackoffSchedule.from_env(env),
        )
