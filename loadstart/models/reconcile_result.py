from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ReconcileResult:
    """
    Outcome of a reconciliation pass.

    An empty result means nothing needs to be scheduled. ``started`` is
    only set by the pass that created the starter job.
    """

    requeue: bool = False
    requeue_after: float | None = None
    started: bool = False
