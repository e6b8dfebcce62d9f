from __future__ import annotations
import os
from pydantic import BaseModel, StrictInt, StrictStr
from typing import Callable, Dict, Literal, Union

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    LOADSTART_LOG_LEVEL: StrictStr = "info"
    LOADSTART_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    LOADSTART_LOGS_DIRECTORY: StrictStr = os.getcwd()
    LOADSTART_LOG_FILE: StrictStr | None = None

    # Runner health probe
    LOADSTART_PROBE_SCHEME: Literal["http", "https"] = "http"
    LOADSTART_PROBE_PORT: StrictInt = 6565
    LOADSTART_PROBE_PATH: StrictStr = "/v1/status"
    LOADSTART_CLUSTER_DOMAIN: StrictStr = "svc.cluster.local"
    LOADSTART_PROBE_BACKOFF: StrictStr = "1s,3s,5s"
    LOADSTART_PROBE_REQUEST_TIMEOUT: StrictStr = "5s"

    # Runner and starter resources
    LOADSTART_APP_LABEL: StrictStr = "loadstart"
    LOADSTART_JOB_LABEL_KEY: StrictStr = "loadstart_job"
    LOADSTART_STARTER_IMAGE: StrictStr = "ghcr.io/curl/curl-container/curl-multi:master"

    # Reconciliation
    LOADSTART_REQUEUE_INTERVAL: StrictStr = "5s"
    LOADSTART_LAUNCH_TIMEOUT: StrictStr | None = None

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "LOADSTART_LOG_LEVEL": str,
            "LOADSTART_LOG_OUTPUT": str,
            "LOADSTART_LOGS_DIRECTORY": str,
            "LOADSTART_LOG_FILE": str,
            "LOADSTART_PROBE_SCHEME": str,
            "LOADSTART_PROBE_PORT": int,
            "LOADSTART_PROBE_PATH": str,
            "LOADSTART_CLUSTER_DOMAIN": str,
            "LOADSTART_PROBE_BACKOFF": str,
            "LOADSTART_PROBE_REQUEST_TIMEOUT": str,
            "LOADSTART_APP_LABEL": str,
            "LOADSTART_JOB_LABEL_KEY": str,
            "LOADSTART_STARTER_IMAGE": str,
            "LOADSTART_REQUEUE_INTERVAL": str,
            "LOADSTART_LAUNCH_TIMEOUT": str,
        }
