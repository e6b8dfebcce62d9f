"""
Starter job construction.

The starter is a one-shot job that un-pauses every runner by PATCHing its
status endpoint. Runners are addressed by the cluster IPs collected while
probing, in the same order.
"""

import shlex
from dataclasses import dataclass

import orjson

from loadstart.cluster import LabelConfig
from loadstart.env import Env
from loadstart.health import status_path
from loadstart.models import (
    LoadTestJob,
    ObjectMeta,
    StarterContainer,
    StarterJob,
)


UNPAUSE_PAYLOAD = {
    "data": {
        "attributes": {
            "paused": False,
        },
        "id": "default",
        "type": "status",
    },
}


@dataclass(slots=True, frozen=True)
class StarterConfig:
    image: str = "ghcr.io/curl/curl-container/curl-multi:master"
    scheme: str = "http"
    port: int = 6565
    path: str = "/v1/status"

    def __post_init__(self):
        object.__setattr__(self, "path", status_path(self.path))

    @classmethod
    def from_env(cls, env: Env) -> "StarterConfig":
        return cls(
            image=env.LOADSTART_STARTER_IMAGE,
            scheme=env.LOADSTART_PROBE_SCHEME,
            port=env.LOADSTART_PROBE_PORT,
            path=env.LOADSTART_PROBE_PATH,
        )


def starter_name(job: LoadTestJob) -> str:
    return f"{job.name}-starter"


def unpause_command(
    hostnames: list[str],
    config: StarterConfig,
) -> list[str]:
    payload = orjson.dumps(UNPAUSE_PAYLOAD).decode()

    requests = [
        " ".join([
            "curl",
            "--retry 3",
            "-X PATCH",
            "-H 'Content-Type: application/json'",
            shlex.quote(f"{config.scheme}://{hostname}:{config.port}{config.path}"),
            "-d",
            shlex.quote(payload),
        ]) for hostname in hostnames
    ]

    return [
        "sh",
        "-c",
        ";".join(requests),
    ]


def new_starter_job(
    job: LoadTestJob,
    hostnames: list[str],
    config: StarterConfig | None = None,
    labels: LabelConfig | None = None,
) -> StarterJob:
    if config is None:
        config = StarterConfig()

    if labels is None:
        labels = LabelConfig()

    return StarterJob(
        metadata=ObjectMeta(
            name=starter_name(job),
            namespace=job.namespace,
            labels=labels.starter_labels(job),
        ),
        hostnames=list(hostnames),
        container=StarterContainer(
            name="starter",
            image=config.image,
            command=unpause_command(hostnames, config),
        ),
    )
