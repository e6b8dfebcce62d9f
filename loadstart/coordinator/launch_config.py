from dataclasses import dataclass, field

from loadstart.cluster import LabelConfig
from loadstart.env import Env, TimeParser
from loadstart.health import ProbeConfig
from loadstart.jobs import StarterConfig


@dataclass(slots=True, frozen=True)
class LaunchConfig:
    """
    Configuration for launch coordination.

    Attributes:
        labels: Label keys identifying runner pods, services and starters.
        probe: Runner status probe settings.
        starter: Starter job settings.
        requeue_interval: Seconds before re-running a pass that did not start.
        launch_timeout: Optional bound on a whole pass, in seconds.
    """

    labels: LabelConfig = field(default_factory=LabelConfig)
    probe: ProbeConfig = field(default_factory=ProbeConfig)
    starter: StarterConfig = field(default_factory=StarterConfig)
    requeue_interval: float = 5.0
    launch_timeout: float | None = None

    @classmethod
    def from_env(cls, env: Env) -> "LaunchConfig":
        parser = TimeParser()

        launch_timeout: float | None = None
        if env.LOADSTART_LAUNCH_TIMEOUT:
            launch_timeout = parser.parse(env.LOADSTART_LAUNCH_TIMEOUT)

        return cls(
            labels=LabelConfig.from_env(env),
            probe=ProbeConfig.from_env(env),
            starter=StarterConfig.from_env(env),
            requeue_interval=parser.parse(env.LOADSTART_REQUEUE_INTERVAL),
            launch_timeout=launch_timeout,
        )
