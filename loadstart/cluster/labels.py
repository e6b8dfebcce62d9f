from dataclasses import dataclass

from loadstart.env import Env
from loadstart.models import LabelSelector, LoadTestJob


@dataclass(slots=True, frozen=True)
class LabelConfig:
    app: str = "loadstart"
    job_key: str = "loadstart_job"
    runner_key: str = "runner"

    @classmethod
    def from_env(cls, env: Env) -> "LabelConfig":
        return cls(
            app=env.LOADSTART_APP_LABEL,
            job_key=env.LOADSTART_JOB_LABEL_KEY,
        )

    def runner_labels(self, job: LoadTestJob) -> dict[str, str]:
        return {
            "app": self.app,
            self.job_key: job.name,
            self.runner_key: "true",
        }

    def runner_selector(self, job: LoadTestJob) -> LabelSelector:
        return LabelSelector.from_labels(
            self.runner_labels(job)
        )

    def starter_labels(self, job: LoadTestJob) -> dict[str, str]:
        return {
            "app": self.app,
            self.job_key: job.name,
        }
