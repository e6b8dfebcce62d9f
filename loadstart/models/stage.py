from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    """
    Coarse lifecycle marker persisted on a load test job's status.

    Stages only ever move forward. ``UNSET`` is the empty stage of a
    job no phase has touched yet.
    """

    UNSET = ""
    INITIALIZATION = "initialization"
    INITIALIZED = "initialized"
    CREATED = "created"
    STARTED = "started"
    FINISHED = "finished"
    ERROR = "error"

    @property
    def order(self) -> int:
        return _STAGE_ORDER[self]

    def advances_to(self, stage: Stage) -> bool:
        return stage.order > self.order

    def at_or_past(self, stage: Stage) -> bool:
        return self.order >= stage.order

    @classmethod
    def parse(cls, value: str | Stage | None) -> Stage:
        if isinstance(value, Stage):
            return value

        return cls(value or "")


_STAGE_ORDER = {
    stage: position for position, stage in enumerate(Stage)
}
